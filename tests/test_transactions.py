import io
import re
from datetime import date


class TestCreate:

    def test_property_sale_opens_exchange(self, client, make_tax_account, make_transaction):
        account = make_tax_account()

        transaction = make_transaction(account)

        assert re.fullmatch(rf"STA{date.today():%m%d%Y}-1", transaction["transaction_number"])
        assert transaction["status"] == "Pending"
        assert transaction["contract_purchase_price"] == 500000.0

        assert len(transaction["exchanges"]) == 1
        link = transaction["exchanges"][0]
        assert link["transaction_type"] == "Sale"
        assert link["exchange_number"] == f"{account['account_number']}-{date.today().year}-EXCH-1"

        assert [item["address"] for item in transaction["properties"]] == ["100 Main St"]

    def test_non_exchange_seller_opens_no_exchange(self, client, make_property):
        property_record = make_property()

        response = client.post("/transactions", json = {
            "contract_purchase_price": "250000",
            "contract_date": "2026-03-01",
            "sale_type": "Property",
            "property_id": property_record["id"],
            "sellers": [{"non_exchange_name": "Bob Jones", "contract_percent": 100}],
            "buyers": [{"non_exchange_name": "Acme Holdings LLC", "contract_percent": 100}]
        })

        assert response.status_code == 201
        assert response.get_json()["data"]["exchanges"] == []

    def test_entity_sale_number(self, client, make_tax_account):
        account = make_tax_account()

        response = client.post("/transactions", json = {
            "contract_purchase_price": "90000",
            "contract_date": "2026-03-01",
            "sale_type": "Entity",
            "sellers": [{"tax_account_id": account["id"], "vesting_name": "Jane Smith", "contract_percent": 100}],
            "buyers": [{"non_exchange_name": "Acme Holdings LLC", "contract_percent": 100}]
        })

        assert response.status_code == 201, response.get_json()
        assert response.get_json()["data"]["transaction_number"].startswith("ENT")

    def test_exchange_buyer_links_purchase(self, client, make_profile, make_tax_account, make_transaction):
        buyer_profile = make_profile("Ann", "Lee")
        buyer_account = make_tax_account("Ann Lee", buyer_profile, business_name = "Lee Family Trust")
        exchange_id = make_transaction(buyer_account)["exchanges"][0]["exchange_id"]

        transaction = make_transaction(buyers = [{
            "profile_id": buyer_profile["id"],
            "exchange_id": exchange_id,
            "contract_percent": 100
        }])

        purchase = [link for link in transaction["exchanges"] if link["transaction_type"] == "Purchase"]
        assert [link["exchange_id"] for link in purchase] == [exchange_id]

        owned = client.get(f"/tax-accounts/{buyer_account['id']}").get_json()["data"]["properties"]
        pending = [item for item in owned if item["ownership_type"] == "pending"]
        assert pending[0]["vesting_name"] == "Lee Family Trust"

    def test_buyer_exchange_must_belong_to_buyer(self, client, make_profile, make_transaction):
        stranger = make_profile("Sam", "Stone")
        exchange_id = make_transaction()["exchanges"][0]["exchange_id"]

        response = client.post("/transactions", json = {
            "contract_purchase_price": "1",
            "contract_date": "2026-03-01",
            "sale_type": "Entity",
            "sellers": [{"non_exchange_name": "Bob", "contract_percent": 100}],
            "buyers": [{"profile_id": stranger["id"], "exchange_id": exchange_id, "contract_percent": 100}]
        })

        assert response.status_code == 400

    def test_required_fields(self, client, make_tax_account):
        account = make_tax_account()
        seller = {"tax_account_id": account["id"], "vesting_name": "Jane Smith", "contract_percent": 100}
        buyer = {"non_exchange_name": "Acme", "contract_percent": 100}

        base = {"contract_purchase_price": "1", "contract_date": "2026-03-01", "sale_type": "Entity"}

        assert client.post("/transactions", json = dict(base, buyers = [buyer])).status_code == 400
        assert client.post("/transactions", json = dict(base, sellers = [seller])).status_code == 400
        assert client.post("/transactions", json = dict(base, sale_type = "Lease", sellers = [seller], buyers = [buyer])).status_code == 400
        assert client.post("/transactions", json = dict(base, sale_type = "Property", sellers = [seller], buyers = [buyer])).status_code == 400
        assert client.post("/transactions", json = dict(base, sellers = [dict(seller, contract_percent = 0)], buyers = [buyer])).status_code == 400


class TestUpdate:

    def test_closing_starts_exchange_clock(self, client, make_transaction):
        transaction = make_transaction()
        exchange_id = transaction["exchanges"][0]["exchange_id"]

        response = client.put(f"/transactions/{transaction['id']}", json = {
            "status": "Closed",
            "actual_close_date": "2026-04-01"
        })

        assert response.status_code == 200
        assert response.get_json()["data"]["status"] == "Closed"

        exchange = client.get(f"/exchanges/{exchange_id}").get_json()["data"]
        assert exchange["relinquished_close_date"] == "2026-04-01"
        assert exchange["day_45_date"] == "2026-05-16"
        assert exchange["day_180_date"] == "2026-09-28"

    def test_unknown_status(self, client, make_transaction):
        transaction = make_transaction()

        assert client.put(f"/transactions/{transaction['id']}", json = {"status": "Done"}).status_code == 400

    def test_list_filters(self, client, make_transaction):
        make_transaction()

        data = client.get("/transactions?sale_type=Entity").get_json()["data"]
        assert data["total"] == 0

        data = client.get("/transactions?search=STA").get_json()["data"]
        assert data["total"] == 1
        assert data["transactions"][0]["buyers"][0]["non_exchange_name"] == "Acme Holdings LLC"


class TestContract:

    def test_pdf_upload(self, client, storage, make_transaction):
        transaction = make_transaction()

        response = client.post(
            f"/transactions/{transaction['id']}/contract",
            data = {"file": (io.BytesIO(b"%PDF-1.4"), "contract.pdf")},
            content_type = "multipart/form-data"
        )

        assert response.status_code == 200, response.get_json()
        assert response.get_json()["data"]["pdf_contract_url"].endswith(".pdf")
        storage.upload_fileobj.assert_called_once()

    def test_only_pdf(self, client, storage, make_transaction):
        transaction = make_transaction()

        response = client.post(
            f"/transactions/{transaction['id']}/contract",
            data = {"file": (io.BytesIO(b"hello"), "contract.txt")},
            content_type = "multipart/form-data"
        )

        assert response.status_code == 400
        storage.upload_fileobj.assert_not_called()


class TestSettlement:

    def test_seller_and_buyer_rows(self, client, make_transaction):
        transaction = make_transaction()
        seller_id = transaction["sellers"][0]["id"]
        buyer_id = transaction["buyers"][0]["id"]

        created = client.post(f"/transactions/{transaction['id']}/settlement-sellers", json = {
            "seller_id": seller_id,
            "sale_price": "500000",
            "funds_to_exchange": "480000"
        })
        assert created.status_code == 201, created.get_json()
        row = created.get_json()["data"]
        assert row["funds_to_exchange"] == 480000.0

        updated = client.put(f"/transactions/settlement-sellers/{row['id']}", json = {"debt_payoff": "15000"})
        assert updated.get_json()["data"]["debt_payoff"] == 15000.0

        client.post(f"/transactions/{transaction['id']}/settlement-buyers", json = {"buyer_id": buyer_id, "loan_amount": "100000"})

        settlement = client.get(f"/transactions/{transaction['id']}/settlement").get_json()["data"]
        assert len(settlement["sellers"]) == 1
        assert settlement["buyers"][0]["loan_amount"] == 100000.0

    def test_party_must_belong_to_transaction(self, client, make_transaction):
        first = make_transaction()
        second = make_transaction()

        response = client.post(f"/transactions/{second['id']}/settlement-sellers", json = {
            "seller_id": first["sellers"][0]["id"]
        })

        assert response.status_code == 400

    def test_negative_amount(self, client, make_transaction):
        transaction = make_transaction()

        response = client.post(f"/transactions/{transaction['id']}/settlement-sellers", json = {
            "seller_id": transaction["sellers"][0]["id"],
            "closing_cost": "-1"
        })

        assert response.status_code == 400
