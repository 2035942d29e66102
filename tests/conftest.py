"""Pytest fixtures: an app backed by in-memory SQLite and a fake Rocketfy session."""

import json
from datetime import date

import pytest

from certgateway import create_app
from certgateway.config import Settings
from certgateway.extensions import db
from certgateway.models import Certificado, Cliente, Compra, DetalleCompra, Producto


SETTINGS_DATA = {
    "db": {
        "host": "localhost",
        "port": 5432,
        "user": "gateway",
        "password": "secret",
        "dbname": "tienda",
    },
    "rocketfy": {
        "x_secret": "test-secret",
        "x_api_key": "test-api-key",
    },
}


class FakeResponse:
    def __init__(self, status_code=200, body="[]"):
        self.status_code = status_code
        self.text = body

    def json(self):
        return json.loads(self.text)


class FakeSession:
    """Stands in for requests.Session; records every GET."""

    def __init__(self, response=None, exc=None):
        self.response = response or FakeResponse()
        self.exc = exc
        self.calls = []
        self.closed = 0

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed += 1

    def get(self, url, headers=None, **kwargs):
        self.calls.append({"url": url, "headers": headers})
        if self.exc is not None:
            raise self.exc
        return self.response


def seed_store():
    ana = Cliente(cliente_id=1, nombre="Ana Gomez", apellido="Gomez", email="ana@example.com")
    luis = Cliente(cliente_id=2, nombre="Luis", apellido="Pardo", email="luis@example.com")

    extension = Producto(
        producto_id=10,
        nombre="Extensión 20cm",
        descripcion="Extensión de cabello natural",
        tipo_cabello="Liso",
        color="Castaño",
        longitud="20cm",
        imagen_url="https://cdn.example.com/ext-20.jpg",
    )
    peluca = Producto(
        producto_id=11,
        nombre="Peluca corta",
        descripcion=None,
        tipo_cabello="Rizado",
        color="Negro",
        longitud="15cm",
        imagen_url="https://cdn.example.com/peluca.jpg",
    )

    cert1 = Certificado(certificado_id=100, numero_certificado="CERT-001", fecha_emision=date(2024, 3, 5))
    cert2 = Certificado(certificado_id=101, numero_certificado="CERT-002", fecha_emision=date(2024, 4, 1))

    compra1 = Compra(
        compra_id=1000, cliente=ana, certificado=cert1,
        fecha_compra=date(2024, 3, 1), estado_pago="pagado",
    )
    # Two line items under one certificate
    compra2 = Compra(
        compra_id=1001, cliente=luis, certificado=cert2,
        fecha_compra=date(2024, 3, 28), estado_pago="pendiente",
    )

    db.session.add_all([
        ana, luis, extension, peluca, cert1, cert2, compra1, compra2,
        DetalleCompra(detalle_id=1, compra=compra1, producto=extension),
        DetalleCompra(detalle_id=2, compra=compra2, producto=peluca),
        DetalleCompra(detalle_id=3, compra=compra2, producto=extension),
    ])
    db.session.commit()


@pytest.fixture
def settings():
    return Settings.model_validate(SETTINGS_DATA)


@pytest.fixture
def app(settings):
    app = create_app(settings, test_config={"TESTING": True, "SQLALCHEMY_DATABASE_URI": "sqlite://"})
    with app.app_context():
        db.create_all()
        seed_store()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def rocketfy(app):
    """Make the catalog client open a FakeSession instead of a real one."""
    session = FakeSession()
    app.extensions["catalog_client"].session_factory = lambda: session
    return session
