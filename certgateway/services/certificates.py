# certgateway/services/certificates.py
"""
Certificate lookup:
- open a connection and ping it
- run the join query for one certificate number
- turn the row into a CertificateRecord

The routes only see CertificateRecord and the errors from ..errors.
"""

import logging
from contextlib import contextmanager
from dataclasses import asdict, dataclass, fields
from datetime import date, datetime
from typing import Any, Dict, Iterator

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from ..errors import CertificateNotFound, DatabaseConnectionError, QueryError
from ..extensions import db

logger = logging.getLogger(__name__)

PING = text("SELECT 1")

# One row per purchased product. ORDER BY keeps the pick stable when a
# purchase has several line items.
CERTIFICATE_QUERY = text(
    """
    SELECT
        c.nombre AS nombre_cliente,
        c.apellido AS apellido_cliente,
        c.email AS email_cliente,
        p.nombre AS nombre_producto,
        p.descripcion AS descripcion_producto,
        p.tipo_cabello,
        p.color,
        p.longitud,
        p.imagen_url,
        com.fecha_compra,
        cer.fecha_emision,
        cer.numero_certificado,
        com.estado_pago
    FROM certificados cer
    JOIN compras com ON cer.certificado_id = com.certificado_id
    JOIN clientes c ON com.cliente_id = c.cliente_id
    JOIN detallescompra dc ON com.compra_id = dc.compra_id
    JOIN productos p ON dc.producto_id = p.producto_id
    WHERE cer.numero_certificado = :numero_certificado
    ORDER BY p.producto_id
    """
)


def _as_text(v: Any) -> str:
    """Dates and statuses are passed through as plain strings."""
    if v is None:
        return ""
    if isinstance(v, (date, datetime)):
        return v.isoformat()
    return str(v)


@dataclass(frozen=True)
class CertificateRecord:
    nombre_cliente: str
    apellido_cliente: str
    email_cliente: str
    nombre_producto: str
    descripcion_producto: str
    tipo_cabello: str
    color: str
    longitud: str
    imagen_url: str
    fecha_compra: str
    fecha_emision: str
    numero_certificado: str
    estado_pago: str

    @classmethod
    def from_row(cls, row) -> "CertificateRecord":
        return cls(**{f.name: _as_text(row[f.name]) for f in fields(cls)})

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


@contextmanager
def connect() -> Iterator[Connection]:
    """
    Check out a database connection and make sure it's alive.

    The connection is always closed when the with-block exits, whether the
    block succeeded or raised.
    """
    try:
        conn = db.engine.connect()
    except SQLAlchemyError as e:
        raise DatabaseConnectionError(f"cannot connect to database: {e}") from e

    try:
        conn.execute(PING)
    except SQLAlchemyError as e:
        conn.close()
        raise DatabaseConnectionError(f"database ping failed: {e}") from e

    try:
        yield conn
    finally:
        conn.close()


def fetch_certificate(conn: Connection, certificate_number: str) -> CertificateRecord:
    """Run the certificate join for one certificate number."""
    try:
        result = conn.execute(CERTIFICATE_QUERY, {"numero_certificado": certificate_number})
        rows = result.mappings().fetchmany(2)
    except SQLAlchemyError as e:
        raise QueryError(f"certificate query failed: {e}") from e

    if not rows:
        raise CertificateNotFound(certificate_number)

    if len(rows) > 1:
        logger.warning(
            "Certificate %s matches more than one purchase line; returning the first product",
            certificate_number,
        )

    return CertificateRecord.from_row(rows[0])
