class TestProperties:

    def test_address_required(self, client):
        assert client.post("/properties", json = {"city": "Austin"}).status_code == 400

    def test_create_and_search(self, client, make_property):
        make_property("100 Main St", city = "Austin", state = "TX")
        make_property("9 Ocean Ave")

        data = client.get("/properties?search=main").get_json()["data"]

        assert data["total"] == 1
        assert data["properties"][0]["city"] == "Austin"

    def test_update_audited(self, client, make_property):
        record = make_property()

        response = client.put(f"/properties/{record['id']}", json = {"zip": "78701"})
        assert response.get_json()["data"]["zip"] == "78701"

        data = client.get(f"/logs?entity_type=property&entity_id={record['id']}&action_type=update").get_json()["data"]
        fields = [log["field_name"] for group in data["groups"] for log in group["logs"]]
        assert fields == ["zip"]


class TestOwnership:

    def test_assign_moves_previous_to_prior(self, client, make_property, make_tax_account):
        record = make_property()
        account = make_tax_account()
        business_name_id = account["business_names"][0]["id"]

        client.post(f"/properties/{record['id']}/ownership", json = {"tax_account_id": account["id"]})
        response = client.post(f"/properties/{record['id']}/ownership", json = {
            "tax_account_id": account["id"],
            "business_name_id": business_name_id
        })

        assert response.status_code == 201, response.get_json()
        data = response.get_json()["data"]

        assert [row["ownership_type"] for row in data["ownership"]] == ["current", "prior"]
        assert data["ownership"][0]["vesting_name"] == "Jane Smith"
        assert data["business_name"] == "Jane Smith"

    def test_business_name_of_other_account(self, client, make_property, make_tax_account):
        record = make_property()
        account = make_tax_account()
        other = make_tax_account("Other")

        response = client.post(f"/properties/{record['id']}/ownership", json = {
            "tax_account_id": account["id"],
            "business_name_id": other["business_names"][0]["id"]
        })

        assert response.status_code == 400

    def test_remove(self, client, make_property, make_tax_account):
        record = make_property()
        account = make_tax_account()
        client.post(f"/properties/{record['id']}/ownership", json = {"tax_account_id": account["id"]})

        assert client.delete(f"/properties/{record['id']}/ownership/{account['id']}").status_code == 200
        assert client.delete(f"/properties/{record['id']}/ownership/{account['id']}").status_code == 404

        owned = client.get(f"/tax-accounts/{account['id']}").get_json()["data"]["properties"]
        assert owned == []
