import io

import pytest


ALICE = {"X-User-Id": "alice"}
BOB = {"X-User-Id": "bob"}


@pytest.fixture
def conversation(client):
    response = client.post("/messaging/conversations", json = {
        "entity_type": "exchange",
        "entity_id": 5,
        "title": "Replacement search"
    }, headers = ALICE)
    assert response.status_code == 201

    return response.get_json()["data"]


def post(client, conversation_id, content, headers = ALICE, **extra):
    response = client.post(
        f"/messaging/conversations/{conversation_id}/messages",
        json = dict(content = content, **extra),
        headers = headers
    )
    assert response.status_code == 201

    return response.get_json()["data"]


class TestConversations:

    def test_creator_is_admin_participant(self, client, conversation):
        data = client.get(f"/messaging/conversations/{conversation['id']}").get_json()["data"]

        assert conversation["created_by"] == "alice"
        assert [(item["user_id"], item["is_admin"]) for item in data["participants"]] == [("alice", True)]

    def test_user_required(self, client):
        response = client.post("/messaging/conversations", json = {"entity_type": "exchange", "entity_id": 5})

        assert response.status_code == 400

    def test_entity_required(self, client):
        response = client.post("/messaging/conversations", json = {"title": "Loose"}, headers = ALICE)

        assert response.status_code == 400

    def test_pinned_first(self, client, conversation):
        other = client.post("/messaging/conversations", json = {
            "entity_type": "exchange",
            "entity_id": 5,
            "title": "Closing"
        }, headers = ALICE).get_json()["data"]

        pinned = client.post(f"/messaging/conversations/{conversation['id']}/pin").get_json()["data"]
        assert pinned["is_pinned"] is True

        data = client.get("/messaging/conversations?entity_type=exchange&entity_id=5").get_json()["data"]
        assert [item["id"] for item in data] == [conversation["id"], other["id"]]

        unpinned = client.post(f"/messaging/conversations/{conversation['id']}/pin").get_json()["data"]
        assert unpinned["is_pinned"] is False

    def test_filter_by_record(self, client, conversation):
        assert client.get("/messaging/conversations?entity_type=transaction").get_json()["data"] == []
        assert client.get("/messaging/conversations?entity_id=abc").status_code == 400

    def test_unread_count(self, client, conversation):
        post(client, conversation["id"], "Found a candidate", headers = BOB)
        post(client, conversation["id"], "Thanks")

        data = client.get("/messaging/conversations?user_id=alice").get_json()["data"]
        assert data[0]["unread_count"] == 1

        response = client.post(f"/messaging/conversations/{conversation['id']}/read", headers = ALICE)
        assert response.status_code == 200
        assert response.get_json()["data"]["last_read_at"] is not None

        data = client.get("/messaging/conversations?user_id=alice").get_json()["data"]
        assert data[0]["unread_count"] == 0

    def test_read_requires_user(self, client, conversation):
        assert client.post(f"/messaging/conversations/{conversation['id']}/read").status_code == 400

    def test_missing(self, client):
        assert client.get("/messaging/conversations/999").status_code == 404


class TestMessages:

    def test_thread(self, client, conversation):
        top = post(client, conversation["id"], "Any update?")
        post(client, conversation["id"], "Inspection Friday", headers = BOB, parent_message_id = top["id"])

        data = client.get(f"/messaging/conversations/{conversation['id']}").get_json()["data"]

        assert [item["content"] for item in data["messages"]] == ["Any update?"]
        assert [item["content"] for item in data["messages"][0]["replies"]] == ["Inspection Friday"]
        assert data["last_message_at"] is not None

    def test_poster_joins_conversation(self, client, conversation):
        post(client, conversation["id"], "Hello", headers = BOB)

        data = client.get(f"/messaging/conversations/{conversation['id']}").get_json()["data"]

        assert sorted(item["user_id"] for item in data["participants"]) == ["alice", "bob"]

    def test_parent_from_other_conversation(self, client, conversation):
        other = client.post("/messaging/conversations", json = {
            "entity_type": "exchange",
            "entity_id": 6
        }, headers = ALICE).get_json()["data"]
        foreign = post(client, other["id"], "Elsewhere")

        response = client.post(
            f"/messaging/conversations/{conversation['id']}/messages",
            json = {"content": "Reply", "parent_message_id": foreign["id"]},
            headers = ALICE
        )

        assert response.status_code == 400

    def test_content_or_file_required(self, client, conversation):
        response = client.post(
            f"/messaging/conversations/{conversation['id']}/messages",
            json = {"content": "  "},
            headers = ALICE
        )

        assert response.status_code == 400

    def test_attachments(self, client, storage, conversation):
        response = client.post(
            f"/messaging/conversations/{conversation['id']}/messages",
            data = {"files": (io.BytesIO(b"%PDF-1.4"), "loi.pdf")},
            content_type = "multipart/form-data",
            headers = ALICE
        )

        assert response.status_code == 201
        data = response.get_json()["data"]
        assert data["content"] == ""
        assert [item["file_name"] for item in data["attachments"]] == ["loi.pdf"]
        assert data["attachments"][0]["storage_path"] == f"messages/{conversation['id']}/{data['id']}/loi.pdf"
        storage.upload_fileobj.assert_called_once()

    def test_edit(self, client, conversation):
        message = post(client, conversation["id"], "Typo")

        data = client.put(f"/messaging/messages/{message['id']}", json = {"content": "Fixed"}).get_json()["data"]

        assert data["content"] == "Fixed"
        assert data["edited_at"] is not None
        assert client.put(f"/messaging/messages/{message['id']}", json = {"content": ""}).status_code == 400

    def test_soft_delete(self, client, conversation):
        message = post(client, conversation["id"], "Oops", headers = BOB)

        assert client.delete(f"/messaging/messages/{message['id']}").status_code == 200

        data = client.get(f"/messaging/conversations/{conversation['id']}").get_json()["data"]
        assert data["messages"][0]["is_deleted"] is True
        assert data["messages"][0]["content"] == ""

        listed = client.get("/messaging/conversations?user_id=alice").get_json()["data"]
        assert listed[0]["unread_count"] == 0


class TestMessageTasks:

    def test_task_from_message(self, client, conversation):
        message = post(client, conversation["id"], "Send the 45 day letter")

        response = client.post(f"/messaging/messages/{message['id']}/task", json = {
            "due_date": "2026-11-02",
            "assignee_ids": ["bob"]
        }, headers = ALICE)

        assert response.status_code == 201
        data = response.get_json()["data"]
        assert data["message_id"] == message["id"]
        assert data["task"]["title"] == "Send the 45 day letter"
        assert data["task"]["entity_type"] == "exchange"
        assert data["task"]["entity_id"] == 5
        assert data["task"]["due_date"] == "2026-11-02"

        detail = client.get(f"/messaging/conversations/{conversation['id']}").get_json()["data"]
        assert detail["messages"][0]["created_task_id"] == data["task"]["id"]

    def test_title_override(self, client, conversation):
        message = post(client, conversation["id"], "x" * 150)

        data = client.post(f"/messaging/messages/{message['id']}/task", json = {"title": "Short title"}).get_json()["data"]
        assert data["task"]["title"] == "Short title"

        other = post(client, conversation["id"], "y" * 150)
        data = client.post(f"/messaging/messages/{other['id']}/task", json = {}).get_json()["data"]
        assert data["task"]["title"] == "y" * 100

    def test_invalid_assignee_type(self, client, conversation):
        message = post(client, conversation["id"], "Call lender")

        response = client.post(f"/messaging/messages/{message['id']}/task", json = {"assignee_types": ["robot"]})

        assert response.status_code == 400
