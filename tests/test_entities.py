import io


class TestEntities:

    def test_create_and_search(self, client):
        response = client.post("/entities", json = {"name": " Acme Holdings LLC ", "email": ""})

        assert response.status_code == 201
        entity = response.get_json()["data"]
        assert entity["name"] == "Acme Holdings LLC"
        assert entity["email"] is None

        assert [item["id"] for item in client.get("/entities?search=acme").get_json()["data"]] == [entity["id"]]

    def test_name_required(self, client):
        assert client.post("/entities", json = {"email": "a@b.c"}).status_code == 400

    def test_access(self, client, make_tax_account):
        entity = client.post("/entities", json = {"name": "Acme"}).get_json()["data"]
        account = make_tax_account()

        bad = client.post(f"/entities/{entity['id']}/access", json = {"tax_account_id": account["id"], "relationship": "Friend"})
        assert bad.status_code == 400

        created = client.post(f"/entities/{entity['id']}/access", json = {
            "tax_account_id": account["id"],
            "relationship": "Managing Member",
            "has_signing_authority": True
        })
        assert created.status_code == 201
        access = created.get_json()["data"]
        assert access["profile_name"] == "Jane Smith"

        client.put(f"/entities/access/{access['id']}", json = {"is_main_contact": True})
        detail = client.get(f"/entities/{entity['id']}").get_json()["data"]
        assert detail["profile_access"][0]["is_main_contact"] is True

        client.delete(f"/entities/access/{access['id']}")
        assert client.get(f"/entities/{entity['id']}").get_json()["data"]["profile_access"] == []

    def test_entity_tax_account(self, client):
        entity = client.post("/entities", json = {"name": "Acme"}).get_json()["data"]

        response = client.post(f"/entities/{entity['id']}/tax-accounts", json = {"name": "Acme Holdings"})

        assert response.status_code == 201, response.get_json()
        account = response.get_json()["data"]
        assert account["account_number"] == "INVACM001"
        assert account["entity_name"] == "Acme"
        assert account["business_names"] == []

        listed = client.get(f"/entities/{entity['id']}/tax-accounts").get_json()["data"]
        assert [item["id"] for item in listed] == [account["id"]]

    def test_entity_sales(self, client, make_transaction):
        entity = client.post("/entities", json = {"name": "Acme"}).get_json()["data"]
        account = client.post(f"/entities/{entity['id']}/tax-accounts", json = {"name": "Acme Holdings"}).get_json()["data"]

        transaction = make_transaction(account)

        sales = client.get(f"/entities/{entity['id']}/transactions").get_json()["data"]
        assert [item["id"] for item in sales] == [transaction["id"]]

    def test_entity_properties(self, client, make_property):
        entity = client.post("/entities", json = {"name": "Acme"}).get_json()["data"]
        account = client.post(f"/entities/{entity['id']}/tax-accounts", json = {"name": "Acme Holdings"}).get_json()["data"]
        record = make_property()
        client.post(f"/properties/{record['id']}/ownership", json = {"tax_account_id": account["id"]})

        owned = client.get(f"/entities/{entity['id']}/properties").get_json()["data"]

        assert [item["address"] for item in owned] == ["100 Main St"]

    def test_update_and_delete(self, client):
        entity = client.post("/entities", json = {"name": "Acme"}).get_json()["data"]

        assert client.put(f"/entities/{entity['id']}", json = {"name": ""}).status_code == 400
        assert client.put(f"/entities/{entity['id']}", json = {"email": "ops@acme.test"}).get_json()["data"]["email"] == "ops@acme.test"

        assert client.delete(f"/entities/{entity['id']}").status_code == 200
        assert client.get(f"/entities/{entity['id']}").status_code == 404


class TestBusinessCards:

    def test_blank_branches_skipped(self, client):
        response = client.post("/business-cards", json = {
            "business_name": "First Lender",
            "email": "loans@lender.test",
            "branches": [
                {"branch_name": "Austin", "state": "TX"},
                {"branch_name": "", "state": " "}
            ]
        })

        assert response.status_code == 201
        card = response.get_json()["data"]
        assert [branch["branch_name"] for branch in card["branches"]] == ["Austin"]

    def test_required_fields(self, client):
        assert client.post("/business-cards", json = {"business_name": "First Lender"}).status_code == 400

    def test_branches_replaced_on_update(self, client):
        card = client.post("/business-cards", json = {
            "business_name": "First Lender",
            "email": "loans@lender.test",
            "branches": [{"branch_name": "Austin"}]
        }).get_json()["data"]

        response = client.put(f"/business-cards/{card['id']}", json = {"branches": [{"branch_name": "Dallas"}]})

        assert [branch["branch_name"] for branch in response.get_json()["data"]["branches"]] == ["Dallas"]

    def test_logo_upload(self, client, storage):
        card = client.post("/business-cards", json = {"business_name": "First Lender", "email": "a@b.test"}).get_json()["data"]

        response = client.post(
            f"/business-cards/{card['id']}/logo",
            data = {"file": (io.BytesIO(b"\x89PNG"), "logo.png")},
            content_type = "multipart/form-data"
        )

        assert response.status_code == 200, response.get_json()
        assert response.get_json()["data"]["logo_url"].endswith(".png")

        rejected = client.post(
            f"/business-cards/{card['id']}/logo",
            data = {"file": (io.BytesIO(b"x"), "logo.exe")},
            content_type = "multipart/form-data"
        )
        assert rejected.status_code == 400
