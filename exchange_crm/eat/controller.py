"""
EAT Controller

Handles:
    - Orchestration between handler and the LLC, parked file,
      identified property and invoice services
"""

# Services
from .services.eat_llc_service import EATLLCService
from .services.eat_file_service import EATFileService
from .services.eat_property_service import EATPropertyService
from .services.eat_invoice_service import EATInvoiceService





class EATController:

    def __init__(self):
        """ Initialize controller with service instances... """

        self.llc_service = EATLLCService()
        self.file_service = EATFileService()
        self.property_service = EATPropertyService()
        self.invoice_service = EATInvoiceService()


    # LLCs
    def list_states(self, args: dict) -> list:
        return self.llc_service.list_states(str(args.get("popular", "")).lower() == "true")


    def list_llcs(self) -> list:
        return self.llc_service.list_llcs()


    def create_llc(self, args: dict) -> dict:
        return self.llc_service.create_llc(args)


    def get_llc(self, llc_id: int) -> dict:
        return self.llc_service.get_llc(llc_id)


    def update_llc(self, llc_id: int, args: dict) -> dict:
        return self.llc_service.update_llc(llc_id, args)


    def grant_access(self, llc_id: int, args: dict) -> dict:
        return self.llc_service.grant_access(llc_id, args)


    def revoke_access(self, access_id: int) -> dict:
        return self.llc_service.revoke_access(access_id)


    # Parked files
    def list_files(self, args: dict) -> list:
        return self.file_service.list_files(args.get("status"), args.get("search"))


    def create_file(self, args: dict) -> dict:
        return self.file_service.create_file(args)


    def get_file(self, file_id: int) -> dict:
        return self.file_service.get_file(file_id)


    def update_file(self, file_id: int, args: dict) -> dict:
        return self.file_service.update_file(file_id, args)


    def update_secretary_of_state(self, file_id: int, args: dict) -> dict:
        return self.file_service.update_secretary_of_state(file_id, args)


    def update_lender(self, file_id: int, args: dict) -> dict:
        return self.file_service.update_lender(file_id, args)


    def add_exchangor(self, file_id: int, args: dict) -> dict:
        return self.file_service.add_exchangor(file_id, args["tax_account_id"])


    def remove_exchangor(self, exchangor_id: int) -> dict:
        return self.file_service.remove_exchangor(exchangor_id)


    def get_selections(self) -> dict:
        return self.file_service.get_selections()


    def sync_totals(self, file_id: int) -> dict:
        return self.file_service.sync_totals(file_id)


    # Identified properties
    def list_properties(self, file_id: int) -> list:
        return self.property_service.list_properties(file_id)


    def add_property(self, file_id: int, args: dict) -> dict:
        return self.property_service.add_property(file_id, args)


    def update_property(self, property_id: int, args: dict) -> dict:
        return self.property_service.update_property(property_id, args)


    def delete_property(self, property_id: int) -> dict:
        return self.property_service.delete_property(property_id)


    def add_improvement(self, property_id: int, args: dict) -> dict:
        return self.property_service.add_improvement(property_id, args)


    def delete_improvement(self, improvement_id: int) -> dict:
        return self.property_service.delete_improvement(improvement_id)


    # Invoices
    def list_invoices(self, file_id: int) -> list:
        return self.invoice_service.list_invoices(file_id)


    def create_invoice(self, file_id: int, args: dict) -> dict:
        return self.invoice_service.create_invoice(file_id, args)


    def get_invoice(self, invoice_id: int) -> dict:
        return self.invoice_service.get_invoice(invoice_id)


    def update_invoice(self, invoice_id: int, args: dict) -> dict:
        return self.invoice_service.update_invoice(invoice_id, args)


    def delete_invoice(self, invoice_id: int) -> dict:
        return self.invoice_service.delete_invoice(invoice_id)


    def add_invoice_item(self, invoice_id: int, args: dict) -> dict:
        return self.invoice_service.add_item(invoice_id, args)


    def delete_invoice_item(self, item_id: int) -> dict:
        return self.invoice_service.delete_item(item_id)
