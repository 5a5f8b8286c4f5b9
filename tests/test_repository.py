import io

import pytest

from exchange_crm.base import constants


def tree(client, entity_type = "transaction", entity_id = "42"):
    response = client.get(f"/repository/{entity_type}/{entity_id}")
    assert response.status_code == 200

    return response.get_json()["data"]


def upload(client, folder_id, name = "wire.pdf"):
    return client.post(
        f"/repository/folders/{folder_id}/files",
        data = {"file": (io.BytesIO(b"%PDF-1.4"), name)},
        content_type = "multipart/form-data"
    )


class TestRepository:

    def test_transaction_default_folders(self, client):
        data = tree(client)

        assert [folder["name"] for folder in data["root_folders"]] == [
            "Settlement Statement documents",
            "Wire Approvals",
            "Exchange Documents",
            "Contract Documents"
        ]

    def test_other_records_get_documents_folder(self, client):
        data = tree(client, "profile", "7")

        assert [folder["name"] for folder in data["root_folders"]] == ["Documents"]

    def test_created_once(self, client):
        first = tree(client)
        second = tree(client)

        assert first["repository_id"] == second["repository_id"]
        assert len(second["root_folders"]) == 4

    def test_invalid_entity_type(self, client):
        assert client.get("/repository/invoice/1").status_code == 400


class TestFolders:

    def test_create_nested(self, client):
        data = tree(client, "exchange", "3")
        root = data["root_folders"][0]

        response = client.post("/repository/folders", json = {
            "repository_id": data["repository_id"],
            "parent_id": root["id"],
            "name": " Closing "
        })
        assert response.status_code == 201
        assert response.get_json()["data"]["name"] == "Closing"

        data = tree(client, "exchange", "3")
        assert [child["name"] for child in data["root_folders"][0]["children"]] == ["Closing"]

    def test_parent_from_other_repository(self, client):
        mine = tree(client, "exchange", "3")
        other = tree(client, "exchange", "4")

        response = client.post("/repository/folders", json = {
            "repository_id": mine["repository_id"],
            "parent_id": other["root_folders"][0]["id"],
            "name": "Misplaced"
        })

        assert response.status_code == 400

    @pytest.mark.parametrize("payload", [{"name": "Orphan"}, {"repository_id": "x", "name": " "}])
    def test_create_requires_fields(self, client, payload):
        assert client.post("/repository/folders", json = payload).status_code == 400

    def test_unknown_repository(self, client):
        response = client.post("/repository/folders", json = {"repository_id": "missing", "name": "X"})

        assert response.status_code == 404

    def test_rename(self, client):
        folder = tree(client, "property", "1")["root_folders"][0]

        response = client.put(f"/repository/folders/{folder['id']}", json = {"name": "Deeds"})

        assert response.status_code == 200
        assert response.get_json()["data"]["name"] == "Deeds"
        assert client.put(f"/repository/folders/{folder['id']}", json = {"name": ""}).status_code == 400

    def test_delete_clears_storage_of_subfolders(self, client, storage):
        data = tree(client, "eat", "5")
        root = data["root_folders"][0]
        child = client.post("/repository/folders", json = {
            "repository_id": data["repository_id"],
            "parent_id": root["id"],
            "name": "Invoices"
        }).get_json()["data"]

        response = client.delete(f"/repository/folders/{root['id']}")

        assert response.status_code == 200
        prefixes = sorted(call.kwargs["Prefix"] for call in storage.list_objects_v2.call_args_list)
        assert prefixes == sorted([
            f"{data['repository_id']}/{root['id']}/",
            f"{data['repository_id']}/{child['id']}/"
        ])
        assert tree(client, "eat", "5")["root_folders"] == []


class TestFiles:

    def test_upload(self, client, storage):
        folder = tree(client)["root_folders"][1]

        response = upload(client, folder["id"])

        assert response.status_code == 201
        data = response.get_json()["data"]
        assert data["name"] == "wire.pdf"
        assert data["storage_path"].startswith(f"{folder['repository_id']}/{folder['id']}/")
        assert data["storage_path"].endswith("-wire.pdf")
        assert data["url"].endswith(data["storage_path"])
        storage.upload_fileobj.assert_called_once()

        listed = tree(client)["root_folders"][1]["files"]
        assert [item["id"] for item in listed] == [data["id"]]

    def test_upload_requires_file(self, client, storage):
        folder = tree(client)["root_folders"][0]

        response = client.post(f"/repository/folders/{folder['id']}/files", data = {}, content_type = "multipart/form-data")

        assert response.status_code == 400

    def test_upload_to_missing_folder(self, client, storage):
        assert upload(client, "missing").status_code == 404

    def test_rename_and_delete(self, client, storage):
        folder = tree(client)["root_folders"][0]
        document_file = upload(client, folder["id"]).get_json()["data"]

        renamed = client.put(f"/repository/files/{document_file['id']}", json = {"name": "statement.pdf"})
        assert renamed.get_json()["data"]["name"] == "statement.pdf"

        assert client.delete(f"/repository/files/{document_file['id']}").status_code == 200
        storage.delete_object.assert_called_once_with(
            Bucket = constants.STORAGE_DOCUMENTS_BUCKET,
            Key = document_file["storage_path"]
        )
        assert client.delete(f"/repository/files/{document_file['id']}").status_code == 404
