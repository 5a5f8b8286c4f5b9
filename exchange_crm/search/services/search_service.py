"""
Search Service

Case-insensitive substring search across the main CRM records.
Every category is capped at API_PAGE_LIMIT rows.
"""

# Python Packages
import logging

# SQLAlchemy
from sqlalchemy import or_

# Models
from ...models.profile import Profile
from ...models.tax_account import TaxAccount
from ...models.transaction import Transaction
from ...models.exchange import Exchange
from ...models.property import Property
from ...models.eat import EATParkedFile

# Base
from ...base import constants


logger = logging.getLogger(__name__)





class SearchService:

    def __init__(self, limit: int = None):
        self.limit = limit or constants.API_PAGE_LIMIT


    def search(self, text: str) -> dict:
        pattern = f"%{text.strip()}%"

        result = {
            "profiles": self._profiles(pattern),
            "tax_accounts": self._tax_accounts(pattern),
            "transactions": self._transactions(pattern),
            "exchanges": self._exchanges(pattern),
            "properties": self._properties(pattern),
            "eat_files": self._eat_files(pattern)
        }

        logger.debug("search %r -> %s", text, {key: len(rows) for key, rows in result.items()})

        return result


    def _profiles(self, pattern: str) -> list:
        rows = (
            Profile.query
            .filter(or_(
                Profile.first_name.ilike(pattern),
                Profile.last_name.ilike(pattern),
                (Profile.first_name + " " + Profile.last_name).ilike(pattern),
                Profile.email.ilike(pattern)
            ))
            .order_by(Profile.last_name, Profile.first_name)
            .limit(self.limit)
            .all()
        )

        return [
            {"id": row.id, "full_name": row.full_name, "email": row.email}
            for row in rows
        ]


    def _tax_accounts(self, pattern: str) -> list:
        rows = (
            TaxAccount.query
            .filter(or_(TaxAccount.name.ilike(pattern), TaxAccount.account_number.ilike(pattern)))
            .order_by(TaxAccount.name)
            .limit(self.limit)
            .all()
        )

        return [
            {"id": row.id, "name": row.name, "account_number": row.account_number}
            for row in rows
        ]


    def _transactions(self, pattern: str) -> list:
        rows = (
            Transaction.query
            .filter(Transaction.transaction_number.ilike(pattern))
            .order_by(Transaction.id.desc())
            .limit(self.limit)
            .all()
        )

        return [
            {"id": row.id, "transaction_number": row.transaction_number, "sale_type": row.sale_type, "status": row.status}
            for row in rows
        ]


    def _exchanges(self, pattern: str) -> list:
        rows = (
            Exchange.query
            .filter(Exchange.exchange_number.ilike(pattern))
            .order_by(Exchange.id.desc())
            .limit(self.limit)
            .all()
        )

        return [
            {"id": row.id, "exchange_number": row.exchange_number, "tax_account_id": row.tax_account_id, "status": row.status}
            for row in rows
        ]


    def _properties(self, pattern: str) -> list:
        rows = (
            Property.query
            .filter(Property.address.ilike(pattern))
            .order_by(Property.address)
            .limit(self.limit)
            .all()
        )

        return [
            {"id": row.id, "address": row.address, "city": row.city, "state": row.state}
            for row in rows
        ]


    def _eat_files(self, pattern: str) -> list:
        rows = (
            EATParkedFile.query
            .filter(or_(EATParkedFile.eat_number.ilike(pattern), EATParkedFile.eat_name.ilike(pattern)))
            .order_by(EATParkedFile.id.desc())
            .limit(self.limit)
            .all()
        )

        return [
            {"id": row.id, "eat_number": row.eat_number, "eat_name": row.eat_name, "status": row.status}
            for row in rows
        ]
