class TestProfiles:

    def test_create_trims_fields(self, client):
        response = client.post("/profiles", json = {"first_name": " Jane ", "last_name": "Smith", "email": " "})

        assert response.status_code == 201
        profile = response.get_json()["data"]
        assert profile["first_name"] == "Jane"
        assert profile["full_name"] == "Jane Smith"
        assert profile["email"] is None

    def test_names_required(self, client):
        assert client.post("/profiles", json = {"first_name": "Jane"}).status_code == 400
        assert client.post("/profiles", json = {}).status_code == 400

    def test_search(self, client, make_profile):
        make_profile("Jane", "Smith", email = "jane@example.com")
        make_profile("Ann", "Lee")

        data = client.get("/profiles?search=EXAMPLE").get_json()["data"]

        assert data["total"] == 1
        assert data["profiles"][0]["last_name"] == "Smith"

    def test_detail_lists_owned_and_spousal_accounts(self, client, make_profile, make_tax_account):
        jane = make_profile("Jane", "Smith")
        john = make_profile("John", "Doe")
        make_tax_account("Jane Smith", jane)
        client.post("/tax-accounts/spousal", json = {
            "primary_profile_id": john["id"],
            "spouse_profile_id": jane["id"],
            "primary_tax_account_name": "John Doe",
            "spouse_tax_account_name": "Jane Smith"
        })

        data = client.get(f"/profiles/{jane['id']}").get_json()["data"]

        roles = sorted(account["role"] for account in data["tax_accounts"])
        assert roles == ["owner", "spouse"]

    def test_update_cannot_blank_name(self, client, make_profile):
        profile = make_profile()

        assert client.put(f"/profiles/{profile['id']}", json = {"last_name": ""}).status_code == 400

        response = client.put(f"/profiles/{profile['id']}", json = {"phone": "555-0100"})
        assert response.get_json()["data"]["phone"] == "555-0100"
        assert response.get_json()["data"]["last_name"] == "Smith"

    def test_missing(self, client):
        response = client.get("/profiles/404")

        assert response.status_code == 404
        assert response.get_json()["status"] == "error"
