from decimal import Decimal

from exchange_crm.exchanges.services.rule_service import (
    RULE_NONE,
    RULE_3_PROPERTY,
    RULE_200_PERCENT,
    RULE_95_PERCENT,
    calculate_exchange_rule,
    can_add_property,
    total_identified_value,
)


def prop(value, *improvements):
    return {"value": value, "improvements": [{"value": item} for item in improvements]}


class TestTotalIdentifiedValue:

    def test_improvements_are_added(self):
        assert total_identified_value([prop(100, 10, 5), prop("50.50")]) == Decimal("165.50")

    def test_missing_values_count_as_zero(self):
        assert total_identified_value([{"value": None}, {}]) == Decimal("0")


class TestCalculateExchangeRule:

    def test_no_properties(self):
        status = calculate_exchange_rule([], 1000)

        assert status.active_rule == RULE_NONE
        assert status.is_compliant is True
        assert status.identified_count == 0

    def test_three_property_rule_any_value(self):
        status = calculate_exchange_rule([prop(10_000)] * 2, 1000)

        assert status.active_rule == RULE_3_PROPERTY
        assert status.is_compliant is True
        assert status.warnings == []

    def test_third_property_warns(self):
        status = calculate_exchange_rule([prop(100)] * 3, 1000)

        assert status.active_rule == RULE_3_PROPERTY
        assert len(status.warnings) == 1

    def test_two_hundred_percent_rule(self):
        status = calculate_exchange_rule([prop(100)] * 4, 1000)

        assert status.active_rule == RULE_200_PERCENT
        assert status.is_compliant is True
        assert status.warnings == []

    def test_two_hundred_percent_warning_near_limit(self):
        # 1900 of a 2000 limit is 95% used
        status = calculate_exchange_rule([prop(475)] * 4, 1000)

        assert status.active_rule == RULE_200_PERCENT
        assert "95.0%" in status.warnings[0]

    def test_exceeding_limit_falls_back_to_ninety_five_percent(self):
        status = calculate_exchange_rule([prop(600)] * 4, 1000)

        assert status.active_rule == RULE_95_PERCENT
        assert status.is_compliant is False
        assert len(status.violations) == 2
        assert status.to_dict()["total_identified_value"] == 2400.0


class TestCanAddProperty:

    def test_under_three_properties(self):
        assert can_add_property([prop(100)], 5000, 1000) == {"can_add": True, "reason": None}

    def test_fourth_property_within_limit(self):
        result = can_add_property([prop(100)] * 3, 100, 1000)

        assert result["can_add"] is True
        assert "200%" in result["reason"]

    def test_fourth_property_over_limit(self):
        result = can_add_property([prop(600)] * 3, 500, 1000)

        assert result["can_add"] is False

    def test_fifth_property_over_limit(self):
        result = can_add_property([prop(400)] * 4, 500, 1000)

        assert result["can_add"] is False
        assert "95%" in result["reason"]
