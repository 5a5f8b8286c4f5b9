"""
EAT LLC Service

Handles:
    - US state lookup
    - EAT LLC create / list / detail / update
    - Profile access grants
"""

# Python Packages
import logging

# Database
from ...config.database import db

# Models
from ...models.eat import USState, EATLLC, EATLLCProfileAccess

# Base
from ...base.lookups import get_or_raise
from ...base.request_context import current_user_id

# Exceptions
from ...util.exceptions import ServiceException

# App Messages
from ...util import messages

# Utils
from ...util.errors import get_error_message
from ...util.formatters import format_date, format_datetime


logger = logging.getLogger(__name__)


LLC_FIELDS = (
    "company_name",
    "state_formation",
    "date_formation",
    "licensed_in",
    "ein",
    "registered_agent",
    "registered_agent_address",
    "qi_company_id",
    "status"
)


def llc_number(state: str, sequence: int) -> str:
    """ EAT-TX-004 """

    return f"EAT-{state.upper()}-{sequence:03d}"


def serialize_access(access: EATLLCProfileAccess) -> dict:
    return {
        "id": access.id,
        "eat_llc_id": access.eat_llc_id,
        "user_profile_id": access.user_profile_id,
        "access_type": access.access_type,
        "granted_by": access.granted_by,
        "granted_at": format_datetime(access.granted_at)
    }


def serialize_llc(llc: EATLLC, with_access: bool = True) -> dict:
    data = {
        "id": llc.id,
        "company_name": llc.company_name,
        "eat_number": llc.eat_number,
        "state_formation": llc.state_formation,
        "date_formation": format_date(llc.date_formation),
        "licensed_in": llc.licensed_in,
        "ein": llc.ein,
        "registered_agent": llc.registered_agent,
        "registered_agent_address": llc.registered_agent_address,
        "qi_company_id": llc.qi_company_id,
        "status": llc.status,
        "created_by": llc.created_by,
        "created_at": format_datetime(llc.created_at)
    }

    if with_access:
        data["profile_access"] = [serialize_access(access) for access in llc.profile_accesses]

    return data





class EATLLCService:

    def list_states(self, popular_only: bool = False) -> list:
        query = USState.query

        if popular_only:
            query = query.filter(USState.is_popular_for_llc.is_(True))

        return [
            {
                "code": state.code,
                "name": state.name,
                "is_popular_for_llc": state.is_popular_for_llc
            }
            for state in query.order_by(USState.name).all()
        ]


    def create_llc(self, args: dict) -> dict:
        """
        Form a new EAT LLC

        Access grants for user_profile_ids are best effort:
        a failed grant is logged and the LLC is kept.
        """

        state = args["state_formation"].upper()

        try:
            sequence = EATLLC.query.filter(EATLLC.state_formation == state).count() + 1

            llc = EATLLC(**{key: args.get(key) for key in LLC_FIELDS if key in args})
            llc.state_formation = state
            llc.eat_number = llc_number(state, sequence)
            llc.status = "Active"
            llc.created_by = current_user_id()

            db.session.add(llc)
            db.session.flush()

            for profile_id in args.get("user_profile_ids") or []:
                try:
                    with db.session.begin_nested():
                        db.session.add(EATLLCProfileAccess(
                            eat_llc_id = llc.id,
                            user_profile_id = str(profile_id),
                            access_type = "signer",
                            granted_by = current_user_id()
                        ))
                        db.session.flush()

                except Exception as error:
                    logger.error(
                        "Access for profile %s on EAT LLC %s not granted: %s",
                        profile_id, llc.eat_number, get_error_message(error)
                    )

            db.session.commit()
            logger.info("EAT LLC %s formed", llc.eat_number)

            return serialize_llc(llc)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_LLC_SAVE_FAILED",
                message = messages.ERROR["EAT_LLC_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def list_llcs(self) -> list:
        llcs = EATLLC.query.order_by(EATLLC.created_at.desc(), EATLLC.id.desc()).all()

        return [serialize_llc(llc) for llc in llcs]


    def get_llc(self, llc_id: int) -> dict:
        return serialize_llc(get_or_raise(EATLLC, llc_id, "EAT_LLC_NOT_FOUND"))


    def update_llc(self, llc_id: int, args: dict) -> dict:
        llc = get_or_raise(EATLLC, llc_id, "EAT_LLC_NOT_FOUND")

        try:
            for key in LLC_FIELDS:
                if key in args:
                    setattr(llc, key, args[key])

            db.session.commit()

            return serialize_llc(llc)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_LLC_SAVE_FAILED",
                message = messages.ERROR["EAT_LLC_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def grant_access(self, llc_id: int, args: dict) -> dict:
        llc = get_or_raise(EATLLC, llc_id, "EAT_LLC_NOT_FOUND")

        try:
            access = EATLLCProfileAccess(
                eat_llc_id = llc.id,
                user_profile_id = str(args["user_profile_id"]),
                access_type = args.get("access_type") or "signer",
                granted_by = current_user_id()
            )
            db.session.add(access)
            db.session.commit()

            return serialize_access(access)

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_LLC_SAVE_FAILED",
                message = messages.ERROR["EAT_LLC_SAVE_FAILED"],
                details = get_error_message(errors)
            )


    def revoke_access(self, access_id: int) -> dict:
        access = get_or_raise(EATLLCProfileAccess, access_id, "EAT_ACCESS_NOT_FOUND")

        try:
            db.session.delete(access)
            db.session.commit()

            return {"id": access_id, "message": messages.SUCCESS["RECORD_DELETED"]}

        except Exception as errors:
            db.session.rollback()

            raise ServiceException(
                error_code = "EAT_LLC_SAVE_FAILED",
                message = messages.ERROR["EAT_LLC_SAVE_FAILED"],
                details = get_error_message(errors)
            )
