import pytest


@pytest.fixture
def exchange_id(make_transaction):
    return make_transaction()["exchanges"][0]["exchange_id"]


class TestEntries:

    def test_ledger_order_and_totals(self, client, exchange_id):
        client.post("/accounting/entries", json = {
            "entry_type": "sale_proceeds", "credit": "1000", "to_exchange_id": exchange_id, "date": "2026-01-05"
        })
        client.post("/accounting/entries", json = {
            "entry_type": "wire_out", "debit": "300", "from_exchange_id": exchange_id, "date": "2026-02-01"
        })

        data = client.get(f"/accounting/entries?exchange_id={exchange_id}").get_json()["data"]

        assert [entry["date"] for entry in data["entries"]] == ["2026-02-01", "2026-01-05"]
        assert data["totals"] == {"total_credit": 1000.0, "total_debit": 300.0, "balance": 700.0}
        assert data["entries"][0]["from_exchange"]["id"] == exchange_id

    @pytest.mark.parametrize("payload", [
        {"entry_type": "bonus", "credit": "1"},
        {"entry_type": "manual"},
        {"entry_type": "manual", "credit": "-5"},
        {"entry_type": "manual", "credit": "0", "debit": "0"}
    ])
    def test_invalid_create(self, client, exchange_id, payload):
        payload = dict(payload, to_exchange_id = exchange_id)

        assert client.post("/accounting/entries", json = payload).status_code == 400

    def test_exchange_side_required(self, client):
        assert client.post("/accounting/entries", json = {"entry_type": "manual", "credit": "5"}).status_code == 400

    def test_update_blank_amount_is_zero(self, client, exchange_id):
        entry = client.post("/accounting/entries", json = {
            "entry_type": "manual", "credit": "50", "debit": "10", "to_exchange_id": exchange_id
        }).get_json()["data"]

        response = client.put(f"/accounting/entries/{entry['id']}", json = {"debit": "", "description": "Adjusted"})

        data = response.get_json()["data"]
        assert data["debit"] == 0.0
        assert data["credit"] == 50.0
        assert data["description"] == "Adjusted"

    def test_delete(self, client, exchange_id):
        entry = client.post("/accounting/entries", json = {
            "entry_type": "manual", "credit": "50", "to_exchange_id": exchange_id
        }).get_json()["data"]

        assert client.delete(f"/accounting/entries/{entry['id']}").status_code == 200
        assert client.delete(f"/accounting/entries/{entry['id']}").status_code == 404


class TestTakeFee:

    def test_fee_debited_from_exchange(self, client, make_tax_account, make_transaction):
        client.post("/fees/templates", json = {"name": "Exchange Fee", "price": "1200", "description": "Standard"})
        account = make_tax_account()
        exchange_id = make_transaction(account)["exchanges"][0]["exchange_id"]
        fee = client.get(f"/fees/schedules?tax_account_id={account['id']}").get_json()["data"][0]

        response = client.post("/accounting/take-fee", json = {"exchange_id": exchange_id, "fee_schedule_id": fee["id"]})

        assert response.status_code == 201, response.get_json()
        entry = response.get_json()["data"]
        assert entry["entry_type"] == "fees"
        assert entry["debit"] == 1200.0
        assert entry["description"] == "Fee: Exchange Fee - Standard"
        assert entry["from_exchange_id"] == exchange_id

    def test_fee_of_other_account_refused(self, client, make_tax_account, make_transaction):
        client.post("/fees/templates", json = {"name": "Exchange Fee", "price": "1200"})
        other = make_tax_account("Other Owner")
        exchange_id = make_transaction()["exchanges"][0]["exchange_id"]
        fee = client.get(f"/fees/schedules?tax_account_id={other['id']}").get_json()["data"][0]

        response = client.post("/accounting/take-fee", json = {"exchange_id": exchange_id, "fee_schedule_id": fee["id"]})

        assert response.status_code == 400

    def test_fee_required(self, client, exchange_id):
        assert client.post("/accounting/take-fee", json = {"exchange_id": exchange_id}).status_code == 400
