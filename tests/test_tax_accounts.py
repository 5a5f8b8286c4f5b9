import pytest


class TestCreate:

    def test_individual_account_number(self, make_profile, make_tax_account):
        owner = make_profile("Jane", "Li")

        first = make_tax_account("Jane Li", owner)
        second = make_tax_account("Jane Li Trust", owner)

        assert first["account_number"] == "INVLIX001"
        assert second["account_number"] == "INVLIX002"

    def test_business_name_defaults_to_account_name(self, make_tax_account):
        account = make_tax_account("Jane Smith")

        assert [item["name"] for item in account["business_names"]] == ["Jane Smith"]
        assert account["profile"]["last_name"] == "Smith"

    def test_given_business_name(self, make_tax_account):
        account = make_tax_account("Jane Smith", business_name = "Smith Holdings")

        assert [item["name"] for item in account["business_names"]] == ["Smith Holdings"]

    def test_name_and_profile_required(self, client, make_profile):
        profile = make_profile()

        assert client.post("/tax-accounts", json = {"profile_id": profile["id"]}).status_code == 400
        assert client.post("/tax-accounts", json = {"name": "No Owner"}).status_code == 400
        assert client.post("/tax-accounts", json = {"name": "Ghost", "profile_id": 999}).status_code == 404

    def test_spousal_account(self, client, make_profile):
        primary = make_profile("Jane", "Smith")
        spouse = make_profile("John", "Doe")

        response = client.post("/tax-accounts/spousal", json = {
            "primary_profile_id": primary["id"],
            "spouse_profile_id": spouse["id"],
            "primary_tax_account_name": "Jane Smith",
            "spouse_tax_account_name": "John Doe"
        })

        assert response.status_code == 201, response.get_json()
        account = response.get_json()["data"]

        assert account["name"] == "Jane Smith & John Doe"
        assert account["account_number"] == "INV-SMIDOE001"
        assert account["is_spousal"] is True
        assert account["spouse_profile"]["id"] == spouse["id"]
        assert [item["name"] for item in account["business_names"]] == ["Jane Smith & John Doe"]

    def test_spousal_profiles_must_differ(self, client, make_profile):
        profile = make_profile()

        response = client.post("/tax-accounts/spousal", json = {
            "primary_profile_id": profile["id"],
            "spouse_profile_id": profile["id"],
            "primary_tax_account_name": "A",
            "spouse_tax_account_name": "B"
        })

        assert response.status_code == 400

    def test_fee_schedule_copied_from_active_templates(self, client, make_tax_account):
        client.post("/fees/templates", json = {"name": "Exchange Fee", "price": "1200"})
        inactive = client.post("/fees/templates", json = {"name": "Old Fee", "price": "50"}).get_json()["data"]
        client.post(f"/fees/templates/{inactive['id']}/toggle")

        account = make_tax_account()

        schedules = client.get(f"/fees/schedules?tax_account_id={account['id']}").get_json()["data"]

        assert [(item["name"], item["price"]) for item in schedules] == [("Exchange Fee", 1200.0)]


class TestReadUpdate:

    def test_list_search(self, client, make_tax_account):
        make_tax_account("Jane Smith")
        make_tax_account("Rivera Family Trust")

        response = client.get("/tax-accounts?search=rivera")
        data = response.get_json()["data"]

        assert data["total"] == 1
        assert data["tax_accounts"][0]["name"] == "Rivera Family Trust"

    def test_rename_writes_audit_log(self, client, make_tax_account):
        account = make_tax_account("Jane Smith")

        response = client.put(f"/tax-accounts/{account['id']}", json = {"name": "Jane A. Smith"})
        assert response.get_json()["data"]["name"] == "Jane A. Smith"

        data = client.get(f"/logs?entity_type=tax_account&entity_id={account['id']}").get_json()["data"]
        renamed = [log for group in data["groups"] for log in group["logs"] if log["field_name"] == "name"]

        assert renamed[0]["old_value"] == "Jane Smith"
        assert renamed[0]["new_value"] == "Jane A. Smith"

    def test_delete(self, client, make_tax_account):
        account = make_tax_account()

        assert client.delete(f"/tax-accounts/{account['id']}").status_code == 200
        assert client.get(f"/tax-accounts/{account['id']}").status_code == 404

    def test_business_names(self, client, make_tax_account):
        account = make_tax_account()

        created = client.post(f"/tax-accounts/{account['id']}/business-names", json = {"name": "Smith LLC"})
        assert created.status_code == 201
        business_name = created.get_json()["data"]

        assert client.post(f"/tax-accounts/{account['id']}/business-names", json = {"name": " "}).status_code == 400

        client.put(f"/tax-accounts/business-names/{business_name['id']}", json = {"name": "Smith Holdings LLC"})
        names = [item["name"] for item in client.get(f"/tax-accounts/{account['id']}").get_json()["data"]["business_names"]]
        assert "Smith Holdings LLC" in names

        client.delete(f"/tax-accounts/business-names/{business_name['id']}")
        names = [item["name"] for item in client.get(f"/tax-accounts/{account['id']}").get_json()["data"]["business_names"]]
        assert "Smith Holdings LLC" not in names


class TestSummaries:

    def test_exchanges_rollup(self, client, make_tax_account, make_transaction):
        account = make_tax_account()
        make_transaction(account)

        rollup = client.get(f"/tax-accounts/{account['id']}/exchanges").get_json()["data"]

        assert len(rollup) == 1
        assert rollup[0]["sale_transactions_count"] == 1
        assert rollup[0]["purchase_transactions_count"] == 0
        assert rollup[0]["current_balance"] == 0.0

    def test_transactions_grouped_by_exchange(self, client, make_tax_account, make_transaction):
        account = make_tax_account()
        transaction = make_transaction(account)

        data = client.get(f"/tax-accounts/{account['id']}/transactions").get_json()["data"]

        assert len(data["groups"]) == 1
        sale = data["groups"][0]["sales"][0]
        assert sale["transaction_number"] == transaction["transaction_number"]
        assert sale["property_address"] == "100 Main St"

    def test_ytd_without_exchanges(self, client, make_tax_account):
        account = make_tax_account()

        data = client.get(f"/tax-accounts/{account['id']}/ytd?year=2026").get_json()["data"]

        assert data["start_date"] == "2026-01-01"
        assert data["end_date"] == "2026-12-31"
        assert data["exchange_count"] == 0
        assert data["total_value_property_sold"] == 0.0

    def test_ytd_invalid_range(self, client, make_tax_account):
        account = make_tax_account()

        response = client.get(f"/tax-accounts/{account['id']}/ytd?start_date=2026-12-01&end_date=2026-01-01")

        assert response.status_code == 400


@pytest.fixture
def ledger(client, make_tax_account, make_transaction):
    """ Account with one exchange, entries around calendar year 2026 """

    account = make_tax_account()
    mine = make_transaction(account)["exchanges"][0]["exchange_id"]
    other = make_transaction()["exchanges"][0]["exchange_id"]

    entries = [
        {"entry_type": "sale_proceeds", "credit": "5000", "to_exchange_id": mine, "date": "2025-12-31"},
        {"entry_type": "sale_proceeds", "credit": "1000", "to_exchange_id": mine, "date": "2026-01-01"},
        {"entry_type": "wire_in", "credit": "250", "to_exchange_id": mine, "from_exchange_id": other, "date": "2026-03-01"},
        {"entry_type": "manual", "credit": "999", "to_exchange_id": other, "date": "2026-04-01"},
        {"entry_type": "fees", "debit": "100", "from_exchange_id": mine, "date": "2026-06-01"},
        {"entry_type": "purchase_funds", "debit": "400", "from_exchange_id": mine, "to_exchange_id": other, "date": "2026-12-31"},
        {"entry_type": "wire_out", "debit": "70", "from_exchange_id": mine, "date": "2027-01-01"}
    ]
    for payload in entries:
        assert client.post("/accounting/entries", json = payload).status_code == 201

    return account


class TestYearToDate:

    def test_year_is_calendar_year(self, client, ledger):
        data = client.get(f"/tax-accounts/{ledger['id']}/ytd?year=2026").get_json()["data"]

        assert data["start_date"] == "2026-01-01"
        assert data["end_date"] == "2026-12-31"
        assert data["exchange_count"] == 1
        assert data["total_value_property_sold"] == 1000.0
        assert data["total_amount_received_to_qi"] == 1250.0
        assert data["total_funds_sent_from_exchange"] == 500.0
        assert data["total_exchangeable_value_acquired"] == 400.0
        assert data["funds_returned_to_exchanger"] == 750.0

    def test_window_bounds_are_inclusive(self, client, ledger):
        data = client.get(
            f"/tax-accounts/{ledger['id']}/ytd?start_date=2026-03-01&end_date=2026-06-01"
        ).get_json()["data"]

        assert data["total_value_property_sold"] == 0.0
        assert data["total_amount_received_to_qi"] == 250.0
        assert data["total_funds_sent_from_exchange"] == 100.0
        assert data["funds_returned_to_exchanger"] == 150.0

    def test_entries_outside_window_excluded(self, client, ledger):
        data = client.get(f"/tax-accounts/{ledger['id']}/ytd?year=2025").get_json()["data"]

        assert data["total_value_property_sold"] == 5000.0
        assert data["total_funds_sent_from_exchange"] == 0.0

    @pytest.mark.parametrize("year", ["0000", "26", "20x6"])
    def test_invalid_year(self, client, ledger, year):
        response = client.get(f"/tax-accounts/{ledger['id']}/ytd?year={year}")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "VALIDATION_ERROR"
