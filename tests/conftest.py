"""
Shared fixtures

One Flask app per test session on an in-memory SQLite database.
Tables are recreated around every test; object storage is a MagicMock.
"""

from unittest.mock import MagicMock, patch

import pytest
from sqlalchemy import event
from sqlalchemy.pool import StaticPool

from exchange_crm.app import create_app
from exchange_crm.config.database import db


@pytest.fixture(scope = "session")
def app():
    app = create_app({
        "TESTING": True,
        "SQLALCHEMY_DATABASE_URI": "sqlite://",
        "SQLALCHEMY_ENGINE_OPTIONS": {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False}
        }
    })

    with app.app_context():
        engine = db.engine

        # pysqlite needs explicit BEGIN for SAVEPOINT support
        @event.listens_for(engine, "connect")
        def _connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine, "begin")
        def _begin(connection):
            connection.exec_driver_sql("BEGIN")

    return app


@pytest.fixture(autouse = True)
def database(app):
    with app.app_context():
        db.create_all()

        yield db

        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def storage():
    """ boto3 client replaced for uploader and delete service """

    storage_client = MagicMock()
    storage_client.list_objects_v2.return_value = {"KeyCount": 0}

    with patch("exchange_crm.vendors.storage.storage_uploader.get_storage_client", return_value = storage_client), \
            patch("exchange_crm.vendors.storage.storage_delete.get_storage_client", return_value = storage_client):
        yield storage_client


def _created(response):
    assert response.status_code == 201, response.get_json()
    return response.get_json()["data"]


@pytest.fixture
def make_profile(client):
    def _make(first_name = "Jane", last_name = "Smith", **extra):
        return _created(client.post("/profiles", json = dict(first_name = first_name, last_name = last_name, **extra)))

    return _make


@pytest.fixture
def make_tax_account(client, make_profile):
    def _make(name = "Jane Smith", profile = None, **extra):
        profile = profile or make_profile()
        return _created(client.post("/tax-accounts", json = dict(name = name, profile_id = profile["id"], **extra)))

    return _make


@pytest.fixture
def make_property(client):
    def _make(address = "100 Main St", **extra):
        return _created(client.post("/properties", json = dict(address = address, **extra)))

    return _make


@pytest.fixture
def make_transaction(client, make_tax_account, make_property):
    """ Property sale: one exchange seller, one non-exchange buyer """

    def _make(seller_account = None, price = "500000", **extra):
        seller_account = seller_account or make_tax_account()
        property_record = make_property()

        payload = {
            "contract_purchase_price": price,
            "contract_date": "2026-03-01",
            "sale_type": "Property",
            "property_id": property_record["id"],
            "sellers": [{
                "tax_account_id": seller_account["id"],
                "vesting_name": seller_account["name"],
                "contract_percent": 100
            }],
            "buyers": [{"non_exchange_name": "Acme Holdings LLC", "contract_percent": 100}]
        }
        payload.update(extra)

        return _created(client.post("/transactions", json = payload))

    return _make
