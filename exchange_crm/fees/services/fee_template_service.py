"""
Fee Template Service

Handles:
    - Global price list CRUD
    - Activate / deactivate a template
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.fee import FeeTemplate

# Base
from ...base.lookups import get_or_raise

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.formatters import money, format_datetime


logger = logging.getLogger(__name__)


def serialize_fee_template(template: FeeTemplate) -> dict:
    return {
        "id": template.id,
        "name": template.name,
        "price": money(template.price),
        "description": template.description,
        "is_active": template.is_active,
        "created_at": format_datetime(template.created_at)
    }





class FeeTemplateService:

    def list_templates(self) -> list:
        templates = (
            FeeTemplate.query
            .order_by(FeeTemplate.created_at.desc(), FeeTemplate.id.desc())
            .all()
        )

        return [serialize_fee_template(template) for template in templates]


    def create_template(self, args: dict) -> dict:
        """
        Args:
            args (dict): name, price (Decimal, validated), description
        """

        try:
            template = FeeTemplate(
                name = args["name"].strip(),
                price = args["price"],
                description = (args.get("description") or "").strip() or None,
                is_active = True
            )
            db.session.add(template)
            db.session.commit()
            logger.info("Fee template %s created", template.id)

            return serialize_fee_template(template)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FEE_SAVE_FAILED",
                message = messages.ERROR["FEE_SAVE_FAILED"],
                details = str(errors)
            )


    def update_template(self, template_id: int, args: dict) -> dict:
        template = get_or_raise(FeeTemplate, template_id, "FEE_TEMPLATE_NOT_FOUND")

        try:
            template.name = args["name"].strip()
            template.price = args["price"]
            template.description = (args.get("description") or "").strip() or None
            db.session.commit()

            return serialize_fee_template(template)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FEE_SAVE_FAILED",
                message = messages.ERROR["FEE_SAVE_FAILED"],
                details = str(errors)
            )


    def toggle_template(self, template_id: int) -> dict:
        """ Flip is_active, inactive templates are not copied to new accounts """

        template = get_or_raise(FeeTemplate, template_id, "FEE_TEMPLATE_NOT_FOUND")

        try:
            template.is_active = not template.is_active
            db.session.commit()

            return serialize_fee_template(template)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FEE_SAVE_FAILED",
                message = messages.ERROR["FEE_SAVE_FAILED"],
                details = str(errors)
            )


    def delete_template(self, template_id: int) -> dict:
        template = get_or_raise(FeeTemplate, template_id, "FEE_TEMPLATE_NOT_FOUND")

        try:
            db.session.delete(template)
            db.session.commit()

            return {"id": template_id, "message": messages.SUCCESS["FEE_TEMPLATE_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FEE_SAVE_FAILED",
                message = messages.ERROR["FEE_SAVE_FAILED"],
                details = str(errors)
            )
