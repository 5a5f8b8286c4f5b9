from datetime import datetime

import pytest

from exchange_crm.audit_logs.services.audit_log_service import AuditLogService, day_label
from exchange_crm.config.database import db
from exchange_crm.models import AuditLog, Property


def add_log(entity_id, action_type, created_at, field_name = None):
    db.session.add(AuditLog(
        entity_type = "property",
        entity_id = entity_id,
        action_type = action_type,
        field_name = field_name,
        created_at = created_at
    ))


@pytest.fixture
def history():
    add_log(1, "create", datetime(2026, 10, 4, 9, 0))
    add_log(1, "update", datetime(2026, 10, 5, 8, 0), "city")
    add_log(1, "update", datetime(2026, 10, 5, 16, 30), "zip")
    add_log(2, "delete", datetime(2026, 10, 3, 12, 0))
    db.session.commit()


def test_day_label():
    assert day_label(datetime(2026, 10, 5, 23, 59)) == "October 5, 2026"


def test_grouped_by_day_newest_first(client, history):
    data = client.get("/logs?entity_type=property&entity_id=1").get_json()["data"]

    assert data["total"] == 3
    assert [group["date"] for group in data["groups"]] == ["October 5, 2026", "October 4, 2026"]
    assert [log["field_name"] for log in data["groups"][0]["logs"]] == ["zip", "city"]
    assert data["groups"][0]["logs"][0]["created_at"] == "2026-10-05 16:30:00"


def test_filters(client, history):
    deleted = client.get("/logs?action_type=delete").get_json()["data"]
    limited = client.get("/logs?limit=2").get_json()["data"]

    assert [log["entity_id"] for group in deleted["groups"] for log in group["logs"]] == [2]
    assert limited["total"] == 2


@pytest.mark.parametrize("query", ["action_type=rename", "entity_id=abc", "limit=many"])
def test_invalid_filters(client, query):
    response = client.get(f"/logs?{query}")

    assert response.status_code == 400
    assert response.get_json()["status"] == "error"


def test_record_changes_skips_equal_values(app, make_property):
    record = make_property(city = "Austin")
    property_row = db.session.get(Property, record["id"])

    changed = AuditLogService.record_changes("property", property_row.id, property_row, {
        "city": "Austin",
        "state": "TX"
    })
    db.session.commit()

    assert changed == ["state"]
    assert property_row.state == "TX"
    log = AuditLog.query.filter_by(entity_type = "property", field_name = "state").one()
    assert (log.old_value, log.new_value) == (None, "TX")


def test_values_stored_as_text(app):
    log = AuditLogService.record("exchange", 3, "update", "meta", old_value = 5, new_value = {"a": 1})
    db.session.commit()

    assert (log.old_value, log.new_value) == ("5", '{"a": 1}')
