import re
from datetime import date

from exchange_crm.documents.services.template_filler import extract_dynamic_fields, fill_placeholders


TEMPLATE_HTML = (
    "<p>Contract <<transaction number>> for "
    '<span class="mention dynamic-field">&lt;&lt;contract price&gt;&gt;</span>.</p>'
    "<p>Seller: &lt;&lt;seller name&gt;&gt; / Buyer: <<buyer name>></p>"
    "<p>Property: <<property address>> (<<transaction number>>)</p>"
)


def create_template(client, html = TEMPLATE_HTML, template_type = "transaction"):
    response = client.post("/documents/templates", json = {
        "name": "Assignment Agreement",
        "template_type": template_type,
        "content": {"html": html}
    })
    assert response.status_code == 201, response.get_json()

    return response.get_json()["data"]


class TestTemplateFiller:

    def test_extract_keeps_first_appearance_order(self):
        assert extract_dynamic_fields(TEMPLATE_HTML) == [
            "<<transaction number>>",
            "<<contract price>>",
            "<<seller name>>",
            "<<buyer name>>",
            "<<property address>>"
        ]

    def test_extract_empty(self):
        assert extract_dynamic_fields(None) == []

    def test_fill_span_escaped_and_plain(self):
        html = fill_placeholders(TEMPLATE_HTML, {
            "<<transaction number>>": "STA03012026-1",
            "<<contract price>>": "$1,234.56",
            "<<seller name>>": "Jane Smith"
        })

        assert "dynamic-field" not in html
        assert "for $1,234.56." in html
        assert "Seller: Jane Smith" in html
        assert html.count("STA03012026-1") == 2
        assert "<<buyer name>>" in html

    def test_none_value_blanks_placeholder(self):
        assert fill_placeholders("<b><<x>></b>", {"<<x>>": None}) == "<b></b>"


class TestTemplates:

    def test_create_extracts_dynamic_fields(self, client):
        template = create_template(client)

        assert template["dynamic_fields"][0] == "<<transaction number>>"
        assert len(template["dynamic_fields"]) == 5

    def test_template_type_required(self, client):
        response = client.post("/documents/templates", json = {"name": "X", "template_type": "lease"})

        assert response.status_code == 400
        assert response.get_json()["status"] == "error"

    def test_update_content_refreshes_fields(self, client):
        template = create_template(client)

        response = client.put(f"/documents/templates/{template['id']}", json = {"content": {"html": "<<exchange number>>"}})

        assert response.status_code == 200
        assert response.get_json()["data"]["dynamic_fields"] == ["<<exchange number>>"]

    def test_inactive_templates_are_not_listed(self, client):
        template = create_template(client)
        client.put(f"/documents/templates/{template['id']}", json = {"is_active": False})

        response = client.get("/documents/templates")

        assert response.get_json()["data"] == []

    def test_dynamic_field_definitions(self, client):
        response = client.get("/documents/dynamic-fields/transaction")

        placeholders = [item["placeholder"] for item in response.get_json()["data"]]
        assert "<<contract price>>" in placeholders

        assert client.get("/documents/dynamic-fields/unknown").status_code == 400

    def test_signature_fields(self, client):
        template = create_template(client)

        response = client.post(f"/documents/templates/{template['id']}/fields", json = {"field_name": "Exchanger"})
        assert response.status_code == 201
        assert response.get_json()["data"]["field_type"] == "signature"

        bad = client.post(f"/documents/templates/{template['id']}/fields", json = {"field_name": "X", "field_type": "stamp"})
        assert bad.status_code == 400

        fields = client.get(f"/documents/templates/{template['id']}/fields").get_json()["data"]
        assert [field["field_name"] for field in fields] == ["Exchanger"]

    def test_component_type(self, client):
        assert client.post("/documents/components", json = {"name": "Logo", "component_type": "sidebar"}).status_code == 400

        response = client.post("/documents/components", json = {"name": "Logo", "component_type": "header"})
        assert response.status_code == 201


class TestDocuments:

    def test_generate_from_transaction(self, client, make_transaction):
        transaction = make_transaction(price = "1234.56")
        template = create_template(client)

        response = client.post("/documents", json = {
            "template_id": template["id"],
            "transaction_id": transaction["id"]
        })

        assert response.status_code == 201, response.get_json()
        document = response.get_json()["data"]
        html = document["content"]["html"]

        assert document["status"] == "draft"
        assert document["document_name"] == f"Assignment Agreement - {transaction['transaction_number']}"
        assert re.fullmatch(rf"DOC-{date.today():%Y%m%d}-0001", document["document_number"])
        assert "$1,234.56" in html
        assert "Seller: Jane Smith" in html
        assert "Buyer: Acme Holdings LLC" in html
        assert "Property: 100 Main St" in html

    def test_given_values_win(self, client, make_transaction):
        transaction = make_transaction()
        template = create_template(client)

        response = client.post("/documents", json = {
            "template_id": template["id"],
            "transaction_id": transaction["id"],
            "values": {"<<buyer name>>": "Override Buyer"}
        })

        assert "Buyer: Override Buyer" in response.get_json()["data"]["content"]["html"]

    def test_without_transaction_uses_template_name(self, client):
        template = create_template(client)

        first = client.post("/documents", json = {"template_id": template["id"]}).get_json()["data"]
        second = client.post("/documents", json = {"template_id": template["id"]}).get_json()["data"]

        assert first["document_name"] == "Assignment Agreement"
        assert second["document_number"].endswith("-0002")

    def test_template_required(self, client):
        assert client.post("/documents", json = {}).status_code == 400
        assert client.post("/documents", json = {"template_id": 999}).status_code == 404

    def test_status_vocabulary(self, client):
        template = create_template(client)
        document = client.post("/documents", json = {"template_id": template["id"]}).get_json()["data"]

        assert client.put(f"/documents/{document['id']}", json = {"status": "archived"}).status_code == 400

        response = client.put(f"/documents/{document['id']}", json = {"status": "completed"})
        assert response.get_json()["data"]["completed_at"] is not None

    def test_signing_moves_document_status(self, client):
        template = create_template(client)
        document = client.post("/documents", json = {"template_id": template["id"]}).get_json()["data"]

        first = client.post(f"/documents/{document['id']}/signature-requests", json = {"signer_name": "A"}).get_json()["data"]
        second = client.post(f"/documents/{document['id']}/signature-requests", json = {"signer_name": "B"}).get_json()["data"]

        assert client.get(f"/documents/{document['id']}").get_json()["data"]["status"] == "pending_signatures"

        response = client.post(
            f"/documents/signature-requests/{first['id']}/sign",
            headers = {"User-Agent": "pytest-agent"}
        )
        data = response.get_json()["data"]

        assert data["document_status"] == "partially_signed"
        assert data["signature_request"]["status"] == "signed"
        assert data["signature_request"]["user_agent"] == "pytest-agent"
        assert data["signature_request"]["signed_at"] is not None

        response = client.post(f"/documents/signature-requests/{second['id']}/sign")
        assert response.get_json()["data"]["document_status"] == "fully_signed"

    def test_filter_by_transaction(self, client, make_transaction):
        transaction = make_transaction()
        template = create_template(client)
        client.post("/documents", json = {"template_id": template["id"], "transaction_id": transaction["id"]})
        client.post("/documents", json = {"template_id": template["id"]})

        response = client.get(f"/documents?transaction_id={transaction['id']}")

        assert len(response.get_json()["data"]) == 1


class TestSignatures:

    def test_vesting_signature(self, client, make_tax_account):
        account = make_tax_account()

        response = client.post("/documents/signatures/vesting", json = {
            "tax_account_id": account["id"],
            "vesting_name": "Smith Family Trust",
            "signature_type": "entity",
            "signature_text": "Jane Smith",
            "signature_font": "Segoe Script",
            "by_name": "Jane Smith",
            "its_title": "Trustee"
        })

        assert response.status_code == 201, response.get_json()
        signature = response.get_json()["data"]
        assert len(signature["signature_id"]) == 36

        listed = client.get(f"/documents/signatures/vesting?tax_account_id={account['id']}").get_json()["data"]
        assert [item["id"] for item in listed] == [signature["id"]]

    def test_unknown_font(self, client, make_tax_account):
        account = make_tax_account()

        response = client.post("/documents/signatures/vesting", json = {
            "tax_account_id": account["id"],
            "vesting_name": "Jane Smith",
            "signature_type": "property",
            "signature_text": "Jane Smith",
            "signature_font": "Comic Sans MS"
        })

        assert response.status_code == 400

    def test_admin_signature(self, client):
        payload = {
            "signature_type": "property",
            "signature_text": "Pat Admin",
            "signature_font": "Brush Script MT",
            "qi_company_id": "qi-1"
        }

        assert client.post("/documents/signatures/admin", json = payload).status_code == 400

        payload["admin_user_id"] = "user-1"
        created = client.post("/documents/signatures/admin", json = payload).get_json()["data"]

        response = client.put(f"/documents/signatures/admin/{created['id']}", json = {"signature_type": "entity"})
        assert response.get_json()["data"]["signature_type"] == "entity"

        assert client.delete(f"/documents/signatures/admin/{created['id']}").status_code == 200
        assert client.get("/documents/signatures/admin?qi_company_id=qi-1").get_json()["data"] == []
