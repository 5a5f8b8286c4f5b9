"""
Document Controller
"""

# Services
from .services.template_service import TemplateService
from .services.document_service import DocumentService
from .services.signature_service import SignatureService





class DocumentController:

    def __init__(self):
        self.template_service = TemplateService()
        self.document_service = DocumentService()
        self.signature_service = SignatureService()


    # Components
    def list_components(self, args: dict) -> list:
        return self.template_service.list_components(args.get("qi_company_id"))


    def create_component(self, args: dict) -> dict:
        return self.template_service.create_component(args)


    def update_component(self, component_id: int, args: dict) -> dict:
        return self.template_service.update_component(component_id, args)


    def delete_component(self, component_id: int) -> dict:
        return self.template_service.delete_component(component_id)


    # Templates
    def list_templates(self, args: dict) -> list:
        return self.template_service.list_templates(args.get("template_type"), args.get("qi_company_id"))


    def create_template(self, args: dict) -> dict:
        return self.template_service.create_template(args)


    def get_template(self, template_id: int) -> dict:
        return self.template_service.get_template(template_id)


    def update_template(self, template_id: int, args: dict) -> dict:
        return self.template_service.update_template(template_id, args)


    def delete_template(self, template_id: int) -> dict:
        return self.template_service.delete_template(template_id)


    def get_dynamic_fields(self, template_type: str) -> list:
        return self.template_service.get_dynamic_field_definitions(template_type)


    # Signature fields
    def list_signature_fields(self, template_id: int) -> list:
        return self.template_service.list_signature_fields(template_id)


    def create_signature_field(self, template_id: int, args: dict) -> dict:
        return self.template_service.create_signature_field(template_id, args)


    def update_signature_field(self, field_id: int, args: dict) -> dict:
        return self.template_service.update_signature_field(field_id, args)


    def delete_signature_field(self, field_id: int) -> dict:
        return self.template_service.delete_signature_field(field_id)


    # Documents
    def list_documents(self, args: dict) -> list:
        return self.document_service.list_documents(args)


    def create_document(self, args: dict) -> dict:
        return self.document_service.create_document(args)


    def get_document(self, document_id: int) -> dict:
        return self.document_service.get_document(document_id)


    def update_document(self, document_id: int, args: dict) -> dict:
        return self.document_service.update_document(document_id, args)


    def delete_document(self, document_id: int) -> dict:
        return self.document_service.delete_document(document_id)


    # Signature requests
    def list_signature_requests(self, document_id: int) -> list:
        return self.document_service.list_signature_requests(document_id)


    def create_signature_request(self, document_id: int, args: dict) -> dict:
        return self.document_service.create_signature_request(document_id, args)


    def sign(self, request_id: int, ip_address: str, user_agent: str) -> dict:
        return self.document_service.sign(request_id, ip_address, user_agent)


    # Signatures
    def list_vesting_signatures(self, args: dict) -> list:
        return self.signature_service.list_vesting_signatures(args.get("tax_account_id"))


    def create_vesting_signature(self, args: dict) -> dict:
        return self.signature_service.create_vesting_signature(args)


    def update_vesting_signature(self, signature_id: int, args: dict) -> dict:
        return self.signature_service.update_vesting_signature(signature_id, args)


    def delete_vesting_signature(self, signature_id: int) -> dict:
        return self.signature_service.delete_vesting_signature(signature_id)


    def list_admin_signatures(self, args: dict) -> list:
        return self.signature_service.list_admin_signatures(args.get("qi_company_id"))


    def create_admin_signature(self, args: dict) -> dict:
        return self.signature_service.create_admin_signature(args)


    def update_admin_signature(self, signature_id: int, args: dict) -> dict:
        return self.signature_service.update_admin_signature(signature_id, args)


    def delete_admin_signature(self, signature_id: int) -> dict:
        return self.signature_service.delete_admin_signature(signature_id)
