import pytest


USER = {"X-User-Id": "user-1"}


def create_task(client, title = "Collect wire instructions", **extra):
    payload = {"title": title, "entity_type": "transaction", "entity_id": 12}
    payload.update(extra)

    response = client.post("/tasks", json = payload, headers = USER)
    assert response.status_code == 201

    return response.get_json()["data"]


def logs(client, **filters):
    query = "&".join(f"{key}={value}" for key, value in filters.items())
    data = client.get(f"/logs?{query}").get_json()["data"]

    return [log for group in data["groups"] for log in group["logs"]]


class TestTasks:

    def test_create(self, client):
        task = create_task(client, " Order title ", due_date = "2026-11-01", assignee_ids = ["user-2", "admin-1"],
                           assignee_types = ["user", "admin"])

        assert task["title"] == "Order title"
        assert task["status"] == "pending"
        assert task["due_date"] == "2026-11-01"
        assert task["created_by"] == "user-1"
        assert [(item["assignee_type"], item["assignee_id"]) for item in task["assignments"]] == [
            ("user", "user-2"),
            ("admin", "admin-1")
        ]

    def test_create_is_audited_on_task_and_record(self, client):
        task = create_task(client)

        on_task = logs(client, entity_type = "task", entity_id = task["id"])
        on_record = logs(client, entity_type = "transaction", entity_id = 12)

        assert [log["action_type"] for log in on_task] == ["create"]
        assert on_record[0]["field_name"] == "task"
        assert on_record[0]["metadata"] == {"task_id": task["id"]}

    @pytest.mark.parametrize("payload", [
        {"entity_type": "transaction", "entity_id": 12},
        {"title": "X", "entity_id": 12},
        {"title": "X", "entity_type": "transaction"},
        {"title": "X", "entity_type": "transaction", "entity_id": 12, "assignee_types": ["robot"]},
    ])
    def test_create_invalid(self, client, payload):
        assert client.post("/tasks", json = payload).status_code == 400

    def test_list_filters(self, client):
        create_task(client, "First")
        create_task(client, "Other record", entity_id = 99)

        data = client.get("/tasks?entity_type=transaction&entity_id=12").get_json()["data"]

        assert [task["title"] for task in data] == ["First"]
        assert client.get("/tasks?status=open").status_code == 400

    def test_work_queue_order(self, client):
        create_task(client, "Later", due_date = "2026-12-01", assignee_ids = ["user-2"])
        create_task(client, "No date", assignee_ids = ["user-2"])
        create_task(client, "Sooner", due_date = "2026-11-01", assignee_ids = ["user-2"])
        create_task(client, "Someone else", due_date = "2026-10-25", assignee_ids = ["user-3"])

        data = client.get("/tasks/work-queue?assignee_id=user-2").get_json()["data"]

        assert [task["title"] for task in data] == ["Sooner", "Later", "No date"]

    def test_completed_leave_work_queue(self, client):
        task = create_task(client, assignee_ids = ["user-2"])

        response = client.put(f"/tasks/{task['id']}/status", json = {"status": "completed"})

        assert response.status_code == 200
        assert response.get_json()["data"]["status"] == "completed"
        assert client.get("/tasks/work-queue?assignee_id=user-2").get_json()["data"] == []

        status_logs = logs(client, entity_type = "task", entity_id = task["id"], action_type = "update")
        assert [(log["old_value"], log["new_value"]) for log in status_logs] == [("pending", "completed")]

    def test_invalid_status(self, client):
        task = create_task(client)

        assert client.put(f"/tasks/{task['id']}/status", json = {"status": "done"}).status_code == 400

    def test_update(self, client):
        task = create_task(client)

        data = client.put(f"/tasks/{task['id']}", json = {"due_date": "2026-11-15"}).get_json()["data"]

        assert data["due_date"] == "2026-11-15"
        assert client.put(f"/tasks/{task['id']}", json = {"title": " "}).status_code == 400

    def test_notes(self, client):
        task = create_task(client)

        response = client.post(f"/tasks/{task['id']}/notes", json = {"note_text": " Called bank "}, headers = USER)

        assert response.status_code == 201
        note = response.get_json()["data"]
        assert note["note_text"] == "Called bank"
        assert note["created_by"] == "user-1"

        detail = client.get(f"/tasks/{task['id']}").get_json()["data"]
        assert [item["note_text"] for item in detail["notes"]] == ["Called bank"]

        assert client.post(f"/tasks/{task['id']}/notes", json = {"note_text": ""}).status_code == 400

    def test_missing(self, client):
        assert client.get("/tasks/999").status_code == 404
