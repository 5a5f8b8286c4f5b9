"""
Document Template Service

Handles:
    - Header / footer components
    - Templates (dynamic fields extracted from the HTML on save)
    - Placeholder definitions per template type
    - Signature field placement on a template
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.document import DocumentTemplateComponent, DocumentTemplate, TemplateSignatureField

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Services
from .template_filler import DYNAMIC_FIELDS, extract_dynamic_fields

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_datetime


logger = logging.getLogger(__name__)


COMPONENT_FIELDS = ("name", "component_type", "content", "qi_company_id")

TEMPLATE_FIELDS = (
    "name",
    "description",
    "template_type",
    "content",
    "header_component_id",
    "footer_component_id",
    "qi_company_id",
    "is_active"
)

SIGNATURE_FIELD_FIELDS = (
    "field_name",
    "field_type",
    "position_x",
    "position_y",
    "page_number",
    "width",
    "height",
    "signer_role",
    "is_required",
    "signing_order"
)


def serialize_component(component: DocumentTemplateComponent) -> dict:
    if component is None:
        return None

    return {
        "id": component.id,
        "name": component.name,
        "component_type": component.component_type,
        "content": component.content,
        "qi_company_id": component.qi_company_id,
        "created_by": component.created_by,
        "created_at": format_datetime(component.created_at)
    }


def serialize_template(template: DocumentTemplate) -> dict:
    return {
        "id": template.id,
        "name": template.name,
        "description": template.description,
        "template_type": template.template_type,
        "content": template.content,
        "dynamic_fields": template.dynamic_fields or [],
        "header_component_id": template.header_component_id,
        "footer_component_id": template.footer_component_id,
        "header_component": serialize_component(template.header_component),
        "footer_component": serialize_component(template.footer_component),
        "qi_company_id": template.qi_company_id,
        "is_active": template.is_active,
        "created_by": template.created_by,
        "created_at": format_datetime(template.created_at)
    }


def serialize_signature_field(field: TemplateSignatureField) -> dict:
    data = {"id": field.id, "template_id": field.template_id}
    data.update({key: getattr(field, key) for key in SIGNATURE_FIELD_FIELDS})

    return data


def _html(content) -> str:
    if isinstance(content, dict):
        return content.get("html") or ""

    return ""





class TemplateService:

    @staticmethod
    def _commit():
        try:
            db.session.commit()

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "DOCUMENT_SAVE_FAILED",
                message = messages.ERROR["DOCUMENT_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    # ---------------------------------------------------------
    # Components
    # ---------------------------------------------------------

    def list_components(self, qi_company_id: str = None) -> list:
        query = DocumentTemplateComponent.query

        if qi_company_id:
            query = query.filter(DocumentTemplateComponent.qi_company_id == qi_company_id)

        components = query.order_by(DocumentTemplateComponent.created_at.desc(), DocumentTemplateComponent.id.desc()).all()

        return [serialize_component(component) for component in components]


    def create_component(self, args: dict) -> dict:
        component = DocumentTemplateComponent(
            created_by = current_user_id(),
            **{key: args.get(key) for key in COMPONENT_FIELDS}
        )
        component.content = component.content or {}

        db.session.add(component)
        self._commit()

        return serialize_component(component)


    def update_component(self, component_id: int, args: dict) -> dict:
        component = get_or_raise(DocumentTemplateComponent, component_id, "COMPONENT_NOT_FOUND")

        for key in COMPONENT_FIELDS:
            if key in args:
                setattr(component, key, args[key])

        self._commit()

        return serialize_component(component)


    def delete_component(self, component_id: int) -> dict:
        component = get_or_raise(DocumentTemplateComponent, component_id, "COMPONENT_NOT_FOUND")

        db.session.delete(component)
        self._commit()

        return {"id": component_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    # ---------------------------------------------------------
    # Templates
    # ---------------------------------------------------------

    def list_templates(self, template_type: str = None, qi_company_id: str = None) -> list:
        """ Active templates, newest first """

        query = DocumentTemplate.query.filter(DocumentTemplate.is_active.is_(True))

        if template_type:
            query = query.filter(DocumentTemplate.template_type == template_type)

        if qi_company_id:
            query = query.filter(DocumentTemplate.qi_company_id == qi_company_id)

        templates = query.order_by(DocumentTemplate.created_at.desc(), DocumentTemplate.id.desc()).all()

        return [serialize_template(template) for template in templates]


    def create_template(self, args: dict) -> dict:
        template = DocumentTemplate(
            created_by = current_user_id(),
            **{key: args.get(key) for key in TEMPLATE_FIELDS if key in args}
        )
        template.content = template.content or {"html": ""}
        template.dynamic_fields = extract_dynamic_fields(_html(template.content))

        db.session.add(template)
        self._commit()

        logger.info(
            "Template %s (%s) saved with %s dynamic field(s)",
            template.id, template.template_type, len(template.dynamic_fields)
        )

        return serialize_template(template)


    def get_template(self, template_id: int) -> dict:
        template = get_or_raise(DocumentTemplate, template_id, "TEMPLATE_NOT_FOUND")

        data = serialize_template(template)
        data["signature_fields"] = [serialize_signature_field(field) for field in template.signature_fields]

        return data


    def update_template(self, template_id: int, args: dict) -> dict:
        template = get_or_raise(DocumentTemplate, template_id, "TEMPLATE_NOT_FOUND")

        for key in TEMPLATE_FIELDS:
            if key in args:
                setattr(template, key, args[key])

        if "content" in args:
            template.dynamic_fields = extract_dynamic_fields(_html(template.content))

        self._commit()

        return serialize_template(template)


    def delete_template(self, template_id: int) -> dict:
        template = get_or_raise(DocumentTemplate, template_id, "TEMPLATE_NOT_FOUND")

        db.session.delete(template)
        self._commit()

        return {"id": template_id, "message": messages.SUCCESS["RECORD_DELETED"]}


    def get_dynamic_field_definitions(self, template_type: str) -> list:
        return DYNAMIC_FIELDS.get(template_type, [])


    # ---------------------------------------------------------
    # Signature fields
    # ---------------------------------------------------------

    def list_signature_fields(self, template_id: int) -> list:
        template = get_or_raise(DocumentTemplate, template_id, "TEMPLATE_NOT_FOUND")

        return [serialize_signature_field(field) for field in template.signature_fields]


    def create_signature_field(self, template_id: int, args: dict) -> dict:
        template = get_or_raise(DocumentTemplate, template_id, "TEMPLATE_NOT_FOUND")

        field = TemplateSignatureField(
            template_id = template.id,
            **{key: args[key] for key in SIGNATURE_FIELD_FIELDS if key in args}
        )
        db.session.add(field)
        self._commit()

        return serialize_signature_field(field)


    def update_signature_field(self, field_id: int, args: dict) -> dict:
        field = get_or_raise(TemplateSignatureField, field_id, "SIGNATURE_FIELD_NOT_FOUND")

        for key in SIGNATURE_FIELD_FIELDS:
            if key in args:
                setattr(field, key, args[key])

        self._commit()

        return serialize_signature_field(field)


    def delete_signature_field(self, field_id: int) -> dict:
        field = get_or_raise(TemplateSignatureField, field_id, "SIGNATURE_FIELD_NOT_FOUND")

        db.session.delete(field)
        self._commit()

        return {"id": field_id, "message": messages.SUCCESS["RECORD_DELETED"]}
