"""
Fee Schedule Service

Handles:
    - Seed a new tax account's schedule from the active templates
    - List schedule of a tax account
    - Change a price (history row written in the same unit of work)
    - Price change history
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.fee import FeeTemplate, FeeSchedule, FeeChangeHistory

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Exceptions
from ...util.exceptions import AppException, ServiceException, ValidationException

# App Messages
from ...util import messages

# Utils
from ...util.formatters import money, format_datetime


logger = logging.getLogger(__name__)


def serialize_fee_schedule(schedule: FeeSchedule) -> dict:
    return {
        "id": schedule.id,
        "tax_account_id": schedule.tax_account_id,
        "fee_template_id": schedule.fee_template_id,
        "name": schedule.name,
        "price": money(schedule.price),
        "description": schedule.description,
        "created_at": format_datetime(schedule.created_at)
    }


def serialize_fee_change(change: FeeChangeHistory) -> dict:
    return {
        "id": change.id,
        "fee_schedule_id": change.fee_schedule_id,
        "old_price": money(change.old_price),
        "new_price": money(change.new_price),
        "comment": change.comment,
        "changed_by": change.changed_by,
        "changed_at": format_datetime(change.changed_at)
    }





class FeeScheduleService:

    @staticmethod
    def seed_from_templates(tax_account_id: int) -> list:
        """
        Copy every active template into the account's schedule

        Adds to the current session, the caller commits.
        """

        templates = (
            FeeTemplate.query
            .filter(FeeTemplate.is_active.is_(True))
            .order_by(FeeTemplate.id)
            .all()
        )

        schedules = [
            FeeSchedule(
                tax_account_id = tax_account_id,
                fee_template_id = template.id,
                name = template.name,
                price = template.price,
                description = template.description
            )
            for template in templates
        ]
        db.session.add_all(schedules)

        return schedules


    def list_schedules(self, tax_account_id: int) -> list:
        """ Oldest first """

        schedules = (
            FeeSchedule.query
            .filter(FeeSchedule.tax_account_id == tax_account_id)
            .order_by(FeeSchedule.created_at.asc(), FeeSchedule.id.asc())
            .all()
        )

        return [serialize_fee_schedule(schedule) for schedule in schedules]


    def update_price(self, schedule_id: int, args: dict) -> dict:
        """
        Change the price of one fee of a tax account

        Args:
            args (dict): price (Decimal, validated), comment

        Raises:
            ValidationException: same price, or no comment
        """

        schedule = get_or_raise(FeeSchedule, schedule_id, "FEE_SCHEDULE_NOT_FOUND")
        new_price = args["price"]

        if new_price == schedule.price:
            raise ValidationException(message = messages.ERROR["FEE_PRICE_UNCHANGED"])

        comment = (args.get("comment") or "").strip()
        if not comment:
            raise ValidationException(message = messages.ERROR["FEE_COMMENT_REQUIRED"])

        try:
            change = FeeChangeHistory(
                fee_schedule_id = schedule.id,
                old_price = schedule.price,
                new_price = new_price,
                comment = comment,
                changed_by = current_user_id()
            )
            schedule.price = new_price
            db.session.add(change)
            db.session.commit()
            logger.info("Fee schedule %s price %s -> %s", schedule.id, change.old_price, new_price)

            data = serialize_fee_schedule(schedule)
            data["change"] = serialize_fee_change(change)

            return data

        except AppException:
            db.session.rollback()
            raise

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "FEE_SAVE_FAILED",
                message = messages.ERROR["FEE_SAVE_FAILED"],
                details = str(errors)
            )


    def get_history(self, schedule_id: int) -> list:
        """ Newest first """

        get_or_raise(FeeSchedule, schedule_id, "FEE_SCHEDULE_NOT_FOUND")

        changes = (
            FeeChangeHistory.query
            .filter(FeeChangeHistory.fee_schedule_id == schedule_id)
            .order_by(FeeChangeHistory.changed_at.desc(), FeeChangeHistory.id.desc())
            .all()
        )

        return [serialize_fee_change(change) for change in changes]
