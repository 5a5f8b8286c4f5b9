import pytest


@pytest.fixture
def exchange(client, make_transaction):
    """ Exchange funded with 500,000 of sale proceeds """

    transaction = make_transaction()
    exchange_id = transaction["exchanges"][0]["exchange_id"]

    response = client.post("/accounting/entries", json = {
        "entry_type": "sale_proceeds",
        "credit": "500000",
        "to_exchange_id": exchange_id,
        "transaction_id": transaction["id"],
        "date": "2026-04-01"
    })
    assert response.status_code == 201, response.get_json()

    return client.get(f"/exchanges/{exchange_id}").get_json()["data"]


def identify(client, exchange_id, value, **extra):
    payload = {
        "identification_type": "written_form",
        "property_type": "standard_address",
        "description": "Replacement",
        "value": value
    }
    payload.update(extra)

    return client.post(f"/exchanges/{exchange_id}/identified-properties", json = payload)


class TestExchange:

    def test_detail(self, exchange):
        assert exchange["status"] == "active"
        assert exchange["tax_account"]["name"] == "Jane Smith"
        assert [item["transaction_type"] for item in exchange["transactions"]] == ["Sale"]

    def test_list_search(self, client, exchange):
        data = client.get("/exchanges?search=jane").get_json()["data"]
        assert data["total"] == 1

        data = client.get("/exchanges?status=completed").get_json()["data"]
        assert data["total"] == 0

    def test_close_date_fills_deadlines(self, client, exchange):
        response = client.put(f"/exchanges/{exchange['id']}", json = {"relinquished_close_date": "2026-01-10"})

        data = response.get_json()["data"]
        assert data["day_45_date"] == "2026-02-24"
        assert data["day_180_date"] == "2026-07-09"

    def test_explicit_deadline_wins(self, client, exchange):
        response = client.put(f"/exchanges/{exchange['id']}", json = {
            "relinquished_close_date": "2026-01-10",
            "day_45_date": "2026-02-20"
        })

        assert response.get_json()["data"]["day_45_date"] == "2026-02-20"

    def test_status_vocabulary(self, client, exchange):
        assert client.put(f"/exchanges/{exchange['id']}", json = {"status": "open"}).status_code == 400
        assert client.put(f"/exchanges/{exchange['id']}", json = {"status": "completed"}).get_json()["data"]["status"] == "completed"

    def test_financials_and_sync(self, client, exchange):
        client.post("/accounting/entries", json = {
            "entry_type": "purchase_funds",
            "debit": "200000",
            "from_exchange_id": exchange["id"]
        })

        financials = client.get(f"/exchanges/{exchange['id']}/financials").get_json()["data"]
        assert financials == {
            "total_sale_property_value": 500000.0,
            "total_replacement_property": 200000.0,
            "value_remaining": 300000.0
        }

        assert client.get(f"/exchanges/{exchange['id']}").get_json()["data"]["value_remaining"] == 0.0

        client.post(f"/exchanges/{exchange['id']}/financials/sync")
        assert client.get(f"/exchanges/{exchange['id']}").get_json()["data"]["value_remaining"] == 300000.0

        balance = client.get(f"/exchanges/{exchange['id']}/balance").get_json()["data"]
        assert balance["balance"] == 300000.0

    def test_missing_exchange(self, client):
        assert client.get("/exchanges/999").status_code == 404


class TestIdentifiedProperties:

    def test_three_property_rule(self, client, exchange):
        for _ in range(3):
            assert identify(client, exchange["id"], "300000").status_code == 201

        rule = client.get(f"/exchanges/{exchange['id']}/rule").get_json()["data"]

        assert rule["active_rule"] == "3_property"
        assert rule["identified_count"] == 3
        assert rule["is_compliant"] is True
        assert len(rule["warnings"]) == 1

    def test_fourth_property_switches_to_200_percent(self, client, exchange):
        for _ in range(3):
            identify(client, exchange["id"], "300000")

        response = identify(client, exchange["id"], "50000")

        assert response.status_code == 201
        assert response.get_json()["data"]["rule_notice"] == "Adding 4th property will activate the 200% rule"

        rule = client.get(f"/exchanges/{exchange['id']}/rule").get_json()["data"]
        assert rule["active_rule"] == "200_percent"
        assert rule["total_identified_value"] == 950000.0
        assert "95.0%" in rule["warnings"][0]

    def test_fourth_property_over_limit_refused(self, client, exchange):
        for _ in range(3):
            identify(client, exchange["id"], "300000")

        response = identify(client, exchange["id"], "200000")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "EXCHANGE_RULE_VIOLATION"
        assert len(client.get(f"/exchanges/{exchange['id']}/identified-properties").get_json()["data"]) == 3

    def test_improvements_count_toward_value(self, client, exchange):
        record = identify(client, exchange["id"], "100000").get_json()["data"]

        response = client.post(
            f"/exchanges/identified-properties/{record['id']}/improvements",
            json = {"description": "Roof", "value": "25000"}
        )
        assert response.status_code == 201
        improvement = response.get_json()["data"]

        rule = client.get(f"/exchanges/{exchange['id']}/rule").get_json()["data"]
        assert rule["total_identified_value"] == 125000.0

        client.delete(f"/exchanges/improvements/{improvement['id']}")
        rule = client.get(f"/exchanges/{exchange['id']}/rule").get_json()["data"]
        assert rule["total_identified_value"] == 100000.0

    def test_improvement_description_required(self, client, exchange):
        record = identify(client, exchange["id"], "100000").get_json()["data"]

        response = client.post(f"/exchanges/identified-properties/{record['id']}/improvements", json = {"value": "5"})

        assert response.status_code == 400

    def test_vocabulary(self, client, exchange):
        assert identify(client, exchange["id"], "1", identification_type = "verbal").status_code == 400
        assert identify(client, exchange["id"], "1", property_type = "land").status_code == 400
        assert identify(client, exchange["id"], "-1").status_code == 400

    def test_defaults_and_update(self, client, exchange):
        record = identify(client, exchange["id"], "100000").get_json()["data"]

        assert record["status"] == "identified"
        assert record["is_parked"] is False
        assert record["identification_date"] is not None

        response = client.put(f"/exchanges/identified-properties/{record['id']}", json = {"status": "under_contract"})
        assert response.get_json()["data"]["status"] == "under_contract"

        assert client.delete(f"/exchanges/identified-properties/{record['id']}").status_code == 200
        assert client.get(f"/exchanges/{exchange['id']}/identified-properties").get_json()["data"] == []
