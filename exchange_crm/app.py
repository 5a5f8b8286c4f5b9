"""
Flask application factory for the exchange CRM API
"""

# Python Packages
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate

# Local Imports
from .base import constants
from .config.logger import configure_logging
from .config.swagger import api
from .config.urls import URLs
from .config.database import init_db, db





def load_settings(app, overrides = None):
    """ Base Flask settings from the environment, then caller overrides """

    app.config.update(
        DEBUG = constants.APP_ENV == "development",
        SECRET_KEY = constants.APP_SECRET_KEY,
        RESTX_MASK_SWAGGER = False,
        MAX_CONTENT_LENGTH = constants.MAX_UPLOAD_BYTES
    )
    app.config.update(overrides or {})


def create_app(config_overrides: dict = None):
    """
    Build the API app.

    Args:
        config_overrides (dict): applied before the database is bound, so
            tests can point SQLALCHEMY_DATABASE_URI at SQLite
    """

    configure_logging()

    app = Flask(__name__)
    load_settings(app, config_overrides)

    init_db(app)

    # Tables must be registered on the metadata before migrations see them
    from . import models

    Migrate(app, db)
    CORS(app)

    api.init_app(app)
    URLs.add_namespaces()

    return app
