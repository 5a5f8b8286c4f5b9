"""
Fee Controller
"""

# Services
from .services.fee_template_service import FeeTemplateService
from .services.fee_schedule_service import FeeScheduleService





class FeeController:

    def __init__(self):
        self.template_service = FeeTemplateService()
        self.schedule_service = FeeScheduleService()


    def list_templates(self) -> list:
        return self.template_service.list_templates()


    def create_template(self, args: dict) -> dict:
        return self.template_service.create_template(args)


    def update_template(self, template_id: int, args: dict) -> dict:
        return self.template_service.update_template(template_id, args)


    def toggle_template(self, template_id: int) -> dict:
        return self.template_service.toggle_template(template_id)


    def delete_template(self, template_id: int) -> dict:
        return self.template_service.delete_template(template_id)


    def list_schedules(self, tax_account_id: int) -> list:
        return self.schedule_service.list_schedules(tax_account_id)


    def update_schedule_price(self, schedule_id: int, args: dict) -> dict:
        return self.schedule_service.update_price(schedule_id, args)


    def get_schedule_history(self, schedule_id: int) -> list:
        return self.schedule_service.get_history(schedule_id)
