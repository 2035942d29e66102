# certgateway/__init__.py
"""
Flask application factory.

create_app() takes an already-loaded Settings value (or loads config.yml
itself) and wires it into the database extension and the catalog client.
"""

from flask import Flask

from .config import Config, Settings, load_settings
from .extensions import db
from .routes.certificates import bp as certificates_bp
from .routes.products import bp as products_bp
from .services.catalog import CatalogClient


def add_cors_headers(response):
    """Every response, 405s and 404s included, is readable from any origin."""
    response.headers["Access-Control-Allow-Origin"] = "*"
    response.headers["Access-Control-Allow-Methods"] = "GET"
    return response


def create_app(settings: Settings = None, test_config: dict = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(Config)

    if settings is None:
        settings = load_settings(app.config["CONFIG_PATH"])

    app.config["GATEWAY_SETTINGS"] = settings
    app.config["SQLALCHEMY_DATABASE_URI"] = settings.db.sqlalchemy_url()

    if test_config:
        app.config.update(test_config)

    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Rocketfy's product objects are relayed as-is, key order included
    app.json.sort_keys = False

    db.init_app(app)

    # Registers the store's tables on db.metadata (never created or altered here)
    from . import models  # noqa: F401

    app.extensions["catalog_client"] = CatalogClient(settings)

    app.register_blueprint(certificates_bp)
    app.register_blueprint(products_bp)
    app.after_request(add_cors_headers)

    return app
