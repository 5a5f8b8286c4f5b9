import pytest


@pytest.fixture
def schedule(client, make_tax_account):
    client.post("/fees/templates", json = {"name": "Exchange Fee", "price": "1,200.00"})
    account = make_tax_account()

    return client.get(f"/fees/schedules?tax_account_id={account['id']}").get_json()["data"][0]


class TestTemplates:

    def test_create_parses_price(self, client):
        response = client.post("/fees/templates", json = {"name": "Wire Fee", "price": "1,250.50"})

        assert response.status_code == 201
        assert response.get_json()["data"]["price"] == 1250.5
        assert response.get_json()["data"]["is_active"] is True

    @pytest.mark.parametrize("payload", [
        {"name": "Wire Fee"},
        {"price": "10"},
        {"name": "Wire Fee", "price": "-5"},
        {"name": "Wire Fee", "price": "ten"}
    ])
    def test_invalid_template(self, client, payload):
        assert client.post("/fees/templates", json = payload).status_code == 400

    def test_toggle_and_delete(self, client):
        template = client.post("/fees/templates", json = {"name": "Wire Fee", "price": "25"}).get_json()["data"]

        toggled = client.post(f"/fees/templates/{template['id']}/toggle").get_json()["data"]
        assert toggled["is_active"] is False

        assert client.delete(f"/fees/templates/{template['id']}").status_code == 200
        assert client.get("/fees/templates").get_json()["data"] == []


class TestSchedules:

    def test_tax_account_required(self, client):
        assert client.get("/fees/schedules").status_code == 400

    def test_price_change_keeps_history(self, client, schedule):
        response = client.put(f"/fees/schedules/{schedule['id']}", json = {"price": "1500", "comment": "Annual review"})

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["price"] == 1500.0
        assert data["change"]["old_price"] == 1200.0

        client.put(f"/fees/schedules/{schedule['id']}", json = {"price": "1600", "comment": "Rush"})

        history = client.get(f"/fees/schedules/{schedule['id']}/history").get_json()["data"]
        assert [item["new_price"] for item in history] == [1600.0, 1500.0]

    def test_same_price_rejected(self, client, schedule):
        response = client.put(f"/fees/schedules/{schedule['id']}", json = {"price": "1200", "comment": "No-op"})

        assert response.status_code == 400

    def test_comment_required(self, client, schedule):
        response = client.put(f"/fees/schedules/{schedule['id']}", json = {"price": "999"})

        assert response.status_code == 400
        assert client.get(f"/fees/schedules/{schedule['id']}/history").get_json()["data"] == []

    def test_template_change_does_not_touch_schedule(self, client, schedule):
        client.put(f"/fees/templates/{schedule['fee_template_id']}", json = {"name": "Exchange Fee", "price": "2000"})

        schedules = client.get(f"/fees/schedules?tax_account_id={schedule['tax_account_id']}").get_json()["data"]

        assert schedules[0]["price"] == 1200.0
