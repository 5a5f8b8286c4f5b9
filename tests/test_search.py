import pytest


KEYS = {"profiles", "tax_accounts", "transactions", "exchanges", "properties", "eat_files"}


@pytest.mark.parametrize("query", ["", "?q=", "?q=a", "?q=%20b%20"])
def test_query_too_short(client, query):
    response = client.get(f"/search{query}")

    assert response.status_code == 400
    assert response.get_json()["error_code"] == "VALIDATION_ERROR"


def test_empty_result_has_every_category(client):
    data = client.get("/search?q=zz").get_json()["data"]

    assert set(data) == KEYS
    assert all(rows == [] for rows in data.values())


def test_matches_across_records(client, make_transaction):
    transaction = make_transaction()

    data = client.get("/search?q=smith").get_json()["data"]

    assert [row["full_name"] for row in data["profiles"]] == ["Jane Smith"]
    assert [row["name"] for row in data["tax_accounts"]] == ["Jane Smith"]
    assert data["properties"] == []

    by_number = client.get(f"/search?q={transaction['transaction_number'].lower()}").get_json()["data"]
    assert [row["id"] for row in by_number["transactions"]] == [transaction["id"]]

    by_address = client.get("/search?q=MAIN").get_json()["data"]
    assert [row["address"] for row in by_address["properties"]] == ["100 Main St"]


def test_full_name_and_exchange_number(client, make_transaction):
    make_transaction()

    assert len(client.get("/search?q=jane%20smith").get_json()["data"]["profiles"]) == 1

    exchanges = client.get("/search?q=EXCH").get_json()["data"]["exchanges"]
    assert len(exchanges) == 1
    assert exchanges[0]["status"] == "active"
