""" SQLAlchemy binding for the CRM database... """

# Python Packages
from flask_sqlalchemy import SQLAlchemy

# Constants
from ..base import constants





# Shared by every model and service
db = SQLAlchemy()


def build_database_uri():
    """
    Resolve the PostgreSQL URI from the environment.

    A hosted DATABASE_URL takes precedence. Providers still hand out the
    legacy ``postgres://`` scheme, which SQLAlchemy no longer accepts.
    """

    if constants.DATABASE_URL:
        scheme, _, rest = constants.DATABASE_URL.partition("://")
        if scheme == "postgres":
            scheme = "postgresql"
        return f"{scheme}://{rest}"

    credentials = f"{constants.DB_USER}:{constants.DB_PASSWORD}"
    location = f"{constants.DB_HOST}:{constants.DB_PORT}/{constants.DB_NAME}"

    return f"postgresql://{credentials}@{location}"


def init_db(app):
    """
    Bind ``db`` to the app, keeping any URI the caller already configured
    """

    app.config.setdefault("SQLALCHEMY_DATABASE_URI", build_database_uri())
    app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"pool_pre_ping": True})
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

    db.init_app(app)
