import pytest

from exchange_crm.config.database import db
from exchange_crm.models import USState


@pytest.fixture
def llc(client):
    response = client.post("/eat/llcs", json = {
        "company_name": " Parking Co LLC ",
        "state_formation": "tx",
        "date_formation": "2025-06-01"
    })
    assert response.status_code == 201

    return response.get_json()["data"]


@pytest.fixture
def parked_file(client, llc, make_tax_account):
    account = make_tax_account()

    response = client.post("/eat/files", json = {
        "eat_name": "Smith Build To Suit",
        "eat_llc_id": llc["id"],
        "state": "tx",
        "date_of_formation": "2026-02-01",
        "exchangor_tax_account_ids": [account["id"]]
    })
    assert response.status_code == 201

    return response.get_json()["data"]


def park(client, file_id, value, **extra):
    payload = {
        "identification_type": "written_form",
        "property_type": "standard_address",
        "description": "Parked lot",
        "value": value
    }
    payload.update(extra)

    response = client.post(f"/eat/files/{file_id}/properties", json = payload)
    assert response.status_code == 201

    return response.get_json()["data"]


class TestStates:

    def test_popular_filter(self, client):
        db.session.add_all([
            USState(code = "TX", name = "Texas", is_popular_for_llc = True),
            USState(code = "AL", name = "Alabama", is_popular_for_llc = False)
        ])
        db.session.commit()

        every = client.get("/eat/states").get_json()["data"]
        popular = client.get("/eat/states?popular=true").get_json()["data"]

        assert [state["code"] for state in every] == ["AL", "TX"]
        assert [state["code"] for state in popular] == ["TX"]


class TestLLCs:

    def test_create_numbers_per_state(self, client, llc):
        assert llc["eat_number"] == "EAT-TX-001"
        assert llc["company_name"] == "Parking Co LLC"
        assert llc["status"] == "Active"

        second = client.post("/eat/llcs", json = {
            "company_name": "Second LLC",
            "state_formation": "TX",
            "date_formation": "2025-07-01"
        }).get_json()["data"]
        other_state = client.post("/eat/llcs", json = {
            "company_name": "Desert LLC",
            "state_formation": "AZ",
            "date_formation": "2025-07-01"
        }).get_json()["data"]

        assert second["eat_number"] == "EAT-TX-002"
        assert other_state["eat_number"] == "EAT-AZ-001"

    def test_create_grants_signer_access(self, client):
        data = client.post("/eat/llcs", json = {
            "company_name": "Signer LLC",
            "state_formation": "NV",
            "date_formation": "2025-07-01",
            "user_profile_ids": ["user-1", "user-2"]
        }).get_json()["data"]

        assert sorted(item["user_profile_id"] for item in data["profile_access"]) == ["user-1", "user-2"]
        assert {item["access_type"] for item in data["profile_access"]} == {"signer"}

    @pytest.mark.parametrize("payload", [
        {"state_formation": "TX", "date_formation": "2025-06-01"},
        {"company_name": "X", "date_formation": "2025-06-01"},
        {"company_name": "X", "state_formation": "TX"},
    ])
    def test_create_requires_fields(self, client, payload):
        assert client.post("/eat/llcs", json = payload).status_code == 400

    def test_update_status(self, client, llc):
        response = client.put(f"/eat/llcs/{llc['id']}", json = {"status": "Dissolved"})

        assert response.status_code == 200
        assert response.get_json()["data"]["status"] == "Dissolved"
        assert client.put(f"/eat/llcs/{llc['id']}", json = {"status": "Closed"}).status_code == 400

    def test_grant_and_revoke_access(self, client, llc):
        response = client.post(f"/eat/llcs/{llc['id']}/access", json = {
            "user_profile_id": "user-9",
            "access_type": "viewer"
        })
        assert response.status_code == 201
        access = response.get_json()["data"]

        assert client.post(f"/eat/llcs/{llc['id']}/access", json = {
            "user_profile_id": "user-9",
            "access_type": "owner"
        }).status_code == 400

        assert client.delete(f"/eat/llcs/access/{access['id']}").status_code == 200
        assert client.get(f"/eat/llcs/{llc['id']}").get_json()["data"]["profile_access"] == []

    def test_missing_llc(self, client):
        assert client.get("/eat/llcs/999").status_code == 404


class TestParkedFiles:

    def test_create(self, parked_file, llc):
        assert parked_file["eat_number"] == "JAN-TX-2026-001"
        assert parked_file["status"] == "pending"
        assert parked_file["close_date"] == "2026-02-01"
        assert parked_file["eat_llc"]["id"] == llc["id"]
        assert [item["tax_account"]["name"] for item in parked_file["exchangors"]] == ["Jane Smith"]
        assert parked_file["secretary_of_state"] is not None
        assert parked_file["lender"] is not None

    def test_sequence_per_state_and_year(self, client, parked_file, llc):
        second = client.post("/eat/files", json = {
            "eat_name": "Second",
            "eat_llc_id": llc["id"],
            "state": "TX",
            "date_of_formation": "2026-08-01",
            "exchangor_tax_account_ids": [parked_file["exchangors"][0]["tax_account_id"]]
        }).get_json()["data"]

        assert second["eat_number"] == "JAN-TX-2026-002"

    def test_sequence_survives_close_date_change(self, client, parked_file, llc):
        moved = client.put(f"/eat/files/{parked_file['id']}", json = {"close_date": "2027-05-01"})
        assert moved.status_code == 200

        second = client.post("/eat/files", json = {
            "eat_name": "Second",
            "eat_llc_id": llc["id"],
            "state": "TX",
            "date_of_formation": "2026-08-01",
            "exchangor_tax_account_ids": [parked_file["exchangors"][0]["tax_account_id"]]
        }).get_json()["data"]

        assert parked_file["eat_number"] == "JAN-TX-2026-001"
        assert second["eat_number"] == "JAN-TX-2026-002"

    def test_create_requires_exchangors(self, client, llc):
        response = client.post("/eat/files", json = {
            "eat_name": "No exchangor",
            "eat_llc_id": llc["id"],
            "state": "TX",
            "date_of_formation": "2026-02-01",
            "exchangor_tax_account_ids": []
        })

        assert response.status_code == 400

    def test_create_unknown_llc(self, client, make_tax_account):
        account = make_tax_account()

        response = client.post("/eat/files", json = {
            "eat_name": "Orphan",
            "eat_llc_id": 999,
            "state": "TX",
            "date_of_formation": "2026-02-01",
            "exchangor_tax_account_ids": [account["id"]]
        })

        assert response.status_code == 404

    def test_list_filters(self, client, parked_file):
        assert len(client.get("/eat/files?status=pending").get_json()["data"]) == 1
        assert client.get("/eat/files?status=active").get_json()["data"] == []
        assert len(client.get("/eat/files?search=build").get_json()["data"]) == 1

    def test_update(self, client, parked_file):
        response = client.put(f"/eat/files/{parked_file['id']}", json = {
            "status": "active",
            "day_45_date": "2026-03-18"
        })

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["status"] == "active"
        assert data["day_45_date"] == "2026-03-18"

        assert client.put(f"/eat/files/{parked_file['id']}", json = {"status": "parked"}).status_code == 400

    def test_secretary_of_state_and_lender(self, client, parked_file):
        sos = client.put(f"/eat/files/{parked_file['id']}/secretary-of-state", json = {
            "eat_sos_status": "Filed",
            "eat_client_touchback_date": "2026-05-01"
        }).get_json()["data"]["secretary_of_state"]

        assert sos["eat_sos_status"] == "Filed"
        assert sos["eat_client_touchback_date"] == "2026-05-01"

        lender = client.put(f"/eat/files/{parked_file['id']}/lender", json = {
            "lender_note_amount": "250000",
            "lender_note_date": "2026-02-15"
        }).get_json()["data"]["lender"]

        assert lender["lender_note_amount"] == 250000.0
        assert lender["lender_note_date"] == "2026-02-15"

        assert client.put(f"/eat/files/{parked_file['id']}/lender", json = {
            "lender_note_amount": "-1"
        }).status_code == 400

    def test_exchangors(self, client, parked_file, make_tax_account, make_profile):
        spouse = make_tax_account(name = "John Doe", profile = make_profile(first_name = "John", last_name = "Doe"))

        data = client.post(f"/eat/files/{parked_file['id']}/exchangors", json = {
            "tax_account_id": spouse["id"]
        }).get_json()["data"]
        assert [item["tax_account"]["name"] for item in data["exchangors"]] == ["Jane Smith", "John Doe"]

        added = data["exchangors"][1]["id"]
        data = client.delete(f"/eat/exchangors/{added}").get_json()["data"]
        assert [item["tax_account"]["name"] for item in data["exchangors"]] == ["Jane Smith"]

    def test_selections(self, client, parked_file, llc):
        data = client.get("/eat/selections").get_json()["data"]

        assert [item["eat_number"] for item in data["eat_llcs"]] == [llc["eat_number"]]
        assert [item["name"] for item in data["tax_accounts"]] == ["Jane Smith"]
        assert data["business_cards"] == []


class TestParkedProperties:

    def test_add_defaults(self, client, parked_file):
        record = park(client, parked_file["id"], "400000")

        assert record["status"] == "identified"
        assert record["is_parked"] is False
        assert record["value"] == 400000.0

    def test_invalid_property_type(self, client, parked_file):
        response = client.post(f"/eat/files/{parked_file['id']}/properties", json = {
            "identification_type": "written_form",
            "property_type": "condo"
        })

        assert response.status_code == 400

    def test_improvements(self, client, parked_file):
        record = park(client, parked_file["id"], "400000")

        response = client.post(f"/eat/properties/{record['id']}/improvements", json = {
            "description": "Roof",
            "value": "25000"
        })
        assert response.status_code == 201
        improvement = response.get_json()["data"]
        assert improvement["value"] == 25000.0

        listed = client.get(f"/eat/files/{parked_file['id']}/properties").get_json()["data"]
        assert [item["description"] for item in listed[0]["improvements"]] == ["Roof"]

        assert client.delete(f"/eat/improvements/{improvement['id']}").status_code == 200
        assert client.delete(f"/eat/improvements/{improvement['id']}").status_code == 404

    def test_update_and_delete(self, client, parked_file):
        record = park(client, parked_file["id"], "400000")

        updated = client.put(f"/eat/properties/{record['id']}", json = {"status": "acquired"}).get_json()["data"]
        assert updated["status"] == "acquired"

        assert client.delete(f"/eat/properties/{record['id']}").status_code == 200
        assert client.get(f"/eat/files/{parked_file['id']}/properties").get_json()["data"] == []


class TestInvoices:

    def invoice(self, client, file_id, **extra):
        payload = {
            "invoice_type": "Invoice paid through exchange",
            "paid_to": "Builder Inc",
            "invoice_date": "2026-03-01",
            "items": [
                {"description": "Framing", "amount": "1000.50"},
                {"description": "Permits", "amount": "250"}
            ]
        }
        payload.update(extra)

        return client.post(f"/eat/files/{file_id}/invoices", json = payload)

    def test_total_is_sum_of_items(self, client, parked_file):
        response = self.invoice(client, parked_file["id"])

        assert response.status_code == 201
        data = response.get_json()["data"]
        assert data["total_amount"] == 1250.5
        assert [item["description"] for item in data["items"]] == ["Framing", "Permits"]

    def test_items_recompute_total(self, client, parked_file):
        invoice = self.invoice(client, parked_file["id"]).get_json()["data"]

        data = client.post(f"/eat/invoices/{invoice['id']}/items", json = {
            "description": "Inspection",
            "amount": "49.50"
        }).get_json()["data"]
        assert data["total_amount"] == 1300.0

        data = client.delete(f"/eat/invoice-items/{data['items'][0]['id']}").get_json()["data"]
        assert data["total_amount"] == 299.5

    @pytest.mark.parametrize("extra", [
        {"invoice_type": "Invoice paid by cheque"},
        {"paid_to": ""},
        {"items": [{"description": "Framing", "amount": "-5"}]},
        {"items": [{"description": "", "amount": "5"}]},
    ])
    def test_invalid_invoice(self, client, parked_file, extra):
        assert self.invoice(client, parked_file["id"], **extra).status_code == 400

    def test_update_and_delete(self, client, parked_file):
        invoice = self.invoice(client, parked_file["id"]).get_json()["data"]

        updated = client.put(f"/eat/invoices/{invoice['id']}", json = {"invoice_number": "INV-77"}).get_json()["data"]
        assert updated["invoice_number"] == "INV-77"
        assert updated["total_amount"] == 1250.5

        assert client.delete(f"/eat/invoices/{invoice['id']}").status_code == 200
        assert client.get(f"/eat/invoices/{invoice['id']}").status_code == 404


class TestTotals:

    def test_sync(self, client, parked_file):
        file_id = parked_file["id"]

        client.put(f"/eat/files/{file_id}", json = {"total_sale_property_value": "1000000"})

        parked = park(client, file_id, "300000", is_parked = True)
        acquired = park(client, file_id, "500000", status = "acquired")
        client.post(f"/eat/properties/{acquired['id']}/improvements", json = {
            "description": "Paving",
            "value": "20000"
        })
        park(client, file_id, "900000")

        client.post(f"/eat/files/{file_id}/invoices", json = {
            "invoice_type": "Invoice paid outside of exchange",
            "paid_to": "Builder Inc",
            "invoice_date": "2026-03-01",
            "items": [{"description": "Framing", "amount": "7500"}]
        })

        response = client.post(f"/eat/files/{file_id}/totals/sync")

        assert response.status_code == 200
        data = response.get_json()["data"]
        assert data["total_invoice_value"] == 7500.0
        assert data["total_parked_property_value"] == float(parked["value"])
        assert data["total_acquired_property_value"] == 520000.0
        assert data["value_remaining"] == 480000.0
