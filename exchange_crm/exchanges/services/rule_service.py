"""
Exchange Identification Rules

Handles:
    - 3 property rule
    - 200% rule
    - 95% rule (fallback once 200% is exceeded)
    - Pre-check before identifying one more property
"""

# Python Packages
from dataclasses import dataclass, field
from decimal import Decimal
from typing import List, Optional

# Constants
from ...base import constants

# Utils
from ...util.formatters import ZERO, to_decimal, money


RULE_NONE = "none"
RULE_3_PROPERTY = "3_property"
RULE_200_PERCENT = "200_percent"
RULE_95_PERCENT = "95_percent"

MULTIPLIER = Decimal(constants.RULE_200_PERCENT_MULTIPLIER)
RATIO_95 = Decimal(str(constants.RULE_95_PERCENT_RATIO))


def _get(row, key, default = None):
    if isinstance(row, dict):
        return row.get(key, default)

    return getattr(row, key, default)


def total_identified_value(properties) -> Decimal:
    """ Value of every property plus its improvements """

    total = ZERO

    for item in properties:
        total += to_decimal(_get(item, "value"))

        for improvement in _get(item, "improvements") or []:
            total += to_decimal(_get(improvement, "value"))

    return total





@dataclass
class ExchangeRuleStatus:
    active_rule: str
    is_compliant: bool
    total_identified_value: Decimal = ZERO
    total_sale_value: Decimal = ZERO
    identified_count: int = 0
    violations: List[str] = field(default_factory = list)
    warnings: List[str] = field(default_factory = list)

    def to_dict(self) -> dict:
        return {
            "active_rule": self.active_rule,
            "is_compliant": self.is_compliant,
            "total_identified_value": money(self.total_identified_value),
            "total_sale_value": money(self.total_sale_value),
            "identified_count": self.identified_count,
            "violations": list(self.violations),
            "warnings": list(self.warnings)
        }





def calculate_exchange_rule(properties, total_sale_value) -> ExchangeRuleStatus:
    """
    Which identification rule applies to the properties identified so far

    Args:
        properties: identified properties (value + improvements)
        total_sale_value: relinquished value of the exchange

    Returns:
        ExchangeRuleStatus
    """

    properties = list(properties)
    sale = to_decimal(total_sale_value)
    count = len(properties)

    if count == 0:
        return ExchangeRuleStatus(
            active_rule = RULE_NONE,
            is_compliant = True,
            total_sale_value = sale
        )

    identified = total_identified_value(properties)

    if count <= constants.MAX_PROPERTIES_3_RULE:
        warnings = []
        if count == constants.MAX_PROPERTIES_3_RULE:
            warnings.append(
                "You have reached the maximum of 3 properties. "
                "Adding more will require the 200% rule."
            )

        return ExchangeRuleStatus(
            active_rule = RULE_3_PROPERTY,
            is_compliant = True,
            total_identified_value = identified,
            total_sale_value = sale,
            identified_count = count,
            warnings = warnings
        )

    max_allowed = sale * MULTIPLIER

    if identified <= max_allowed:
        warnings = []
        remaining = max_allowed - identified
        percent_used = (identified / max_allowed * 100) if max_allowed else ZERO

        if percent_used >= constants.RULE_200_WARNING_PERCENT:
            warnings.append(
                f"You have used {percent_used:.1f}% of your 200% limit. "
                f"Only ${remaining:,.2f} remaining."
            )

        return ExchangeRuleStatus(
            active_rule = RULE_200_PERCENT,
            is_compliant = True,
            total_identified_value = identified,
            total_sale_value = sale,
            identified_count = count,
            warnings = warnings
        )

    required = identified * RATIO_95

    return ExchangeRuleStatus(
        active_rule = RULE_95_PERCENT,
        is_compliant = False,
        total_identified_value = identified,
        total_sale_value = sale,
        identified_count = count,
        violations = [
            f"Total identified value (${identified:,.2f}) exceeds 200% of sale value (${max_allowed:,.2f})",
            f"You must acquire at least 95% (${required:,.2f}) of all identified properties"
        ],
        warnings = [
            "The 95% rule is very restrictive. Consider reducing identified "
            "properties to comply with the 200% rule."
        ]
    )


def can_add_property(properties, new_value, total_sale_value) -> dict:
    """
    Pre-check before one more property is identified

    Returns:
        dict: {"can_add": bool, "reason": str or None}
    """

    properties = list(properties)
    count = len(properties)
    max_allowed = to_decimal(total_sale_value) * MULTIPLIER
    new_total = total_identified_value(properties) + to_decimal(new_value)

    reason: Optional[str] = None

    if count == constants.MAX_PROPERTIES_3_RULE:
        if new_total > max_allowed:
            return {
                "can_add": False,
                "reason": f"Adding this property would exceed the 200% rule limit of ${max_allowed:,.2f}"
            }

        reason = "Adding 4th property will activate the 200% rule"

    elif count > constants.MAX_PROPERTIES_3_RULE and new_total > max_allowed:
        return {
            "can_add": False,
            "reason": (
                "Adding this property would exceed the 200% rule limit. "
                "This would trigger the restrictive 95% rule."
            )
        }

    return {"can_add": True, "reason": reason}
