from decimal import Decimal

from exchange_crm.accounting.calculations import (
    calculate_exchange_balance,
    calculate_exchange_financials,
    calculate_ytd_metrics,
    ledger_totals,
    rollup_exchanges,
    summarize_exchange,
)


def entry(entry_type, credit = None, debit = None, to_id = None, from_id = None):
    return {
        "entry_type": entry_type,
        "credit": credit,
        "debit": debit,
        "to_exchange_id": to_id,
        "from_exchange_id": from_id
    }


class TestExchangeFinancials:

    def test_sale_and_replacement(self):
        entries = [
            entry("sale_proceeds", credit = "300000", to_id = 1),
            entry("purchase_funds", debit = "120000", from_id = 1),
            entry("sale_proceeds", credit = "50000", to_id = 2)
        ]

        result = calculate_exchange_financials(entries, 1)

        assert result.total_sale_property_value == Decimal("300000")
        assert result.total_replacement_property == Decimal("120000")
        assert result.value_remaining == Decimal("180000")

    def test_no_entries(self):
        assert calculate_exchange_financials([], 1).to_dict() == {
            "total_sale_property_value": 0.0,
            "total_replacement_property": 0.0,
            "value_remaining": 0.0
        }


class TestBalance:

    def test_credits_in_minus_debits_out(self):
        entries = [
            entry("sale_proceeds", credit = 1000, to_id = 7),
            entry("fees", debit = 250, from_id = 7),
            entry("fees", debit = 99, from_id = 8)
        ]

        assert calculate_exchange_balance(entries, 7) == Decimal("750")

    def test_self_transfer_nets_out(self):
        entries = [entry("transfer", credit = 500, debit = 500, to_id = 3, from_id = 3)]

        assert calculate_exchange_balance(entries, 3) == Decimal("0")

    def test_ledger_totals(self):
        entries = [entry("deposit", credit = "10.50"), entry("fees", debit = "2.25"), entry("other")]

        assert ledger_totals(entries) == {"total_credit": 10.5, "total_debit": 2.25, "balance": 8.25}


class TestYearToDate:

    def test_metrics(self):
        entries = [
            entry("sale_proceeds", credit = 400000, to_id = 1),
            entry("deposit", credit = 10000, to_id = 2),
            entry("purchase_funds", debit = 350000, from_id = 1),
            entry("fees", debit = 1500, from_id = 2),
            entry("wire_out", debit = 20000, from_id = 1)
        ]

        metrics = calculate_ytd_metrics(entries, [1, 2])

        assert metrics.total_value_property_sold == Decimal("400000")
        assert metrics.total_amount_received_to_qi == Decimal("410000")
        assert metrics.total_exchangeable_value_acquired == Decimal("350000")
        assert metrics.total_funds_sent_from_exchange == Decimal("371500")
        assert metrics.funds_returned_to_exchanger == Decimal("58500")

    def test_boot_never_negative(self):
        entries = [
            entry("sale_proceeds", credit = 100, to_id = 1),
            entry("purchase_funds", debit = 500, from_id = 1)
        ]

        assert calculate_ytd_metrics(entries, [1]).funds_returned_to_exchanger == Decimal("0")

    def test_no_exchanges_is_all_zero(self):
        assert calculate_ytd_metrics([entry("sale_proceeds", credit = 1, to_id = 1)], []).to_dict() == {
            "total_value_property_sold": 0.0,
            "total_amount_received_to_qi": 0.0,
            "total_exchangeable_value_acquired": 0.0,
            "total_funds_sent_from_exchange": 0.0,
            "funds_returned_to_exchanger": 0.0
        }


class TestRollup:

    def test_summary_counts_links_and_properties(self):
        exchange = {"id": 1, "exchange_number": "INVSMI001-2026-EXCH-1", "status": "active"}
        links = [{"transaction_type": "Sale"}, {"transaction_type": "Purchase"}, {"transaction_type": "Purchase"}]

        summary = summarize_exchange(
            exchange,
            [entry("sale_proceeds", credit = 900, to_id = 1), entry("purchase_funds", debit = 400, from_id = 1)],
            links,
            [{"id": 1}, {"id": 2}]
        )

        assert summary.sale_transactions_count == 1
        assert summary.purchase_transactions_count == 2
        assert summary.identified_properties_count == 2
        assert summary.value_remaining == Decimal("500")
        assert summary.current_balance == Decimal("500")

    def test_transfer_between_exchanges_counts_on_both_sides(self):
        exchanges = [{"id": 1, "exchange_number": "A"}, {"id": 2, "exchange_number": "B"}]
        entries = [entry("transfer", credit = 300, debit = 300, to_id = 2, from_id = 1)]

        first, second = rollup_exchanges(exchanges, entries, [], [])

        assert first.current_balance == Decimal("-300")
        assert second.current_balance == Decimal("300")
