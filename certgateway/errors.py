# certgateway/errors.py
"""
Error types raised by the services.

Routes turn these into HTTP status codes:
- CertificateNotFound -> 404
- everything else -> 500
ConfigError never reaches a route: it stops the process at startup.
"""


class GatewayError(Exception):
    """Base class for every error raised by certgateway."""


class ConfigError(GatewayError):
    """The config file is missing, unreadable or malformed."""


class DatabaseConnectionError(GatewayError):
    """Could not open (or ping) a database connection."""


class CertificateNotFound(GatewayError):
    def __init__(self, certificate_number: str):
        super().__init__(f"certificate {certificate_number!r} not found")
        self.certificate_number = certificate_number


class QueryError(GatewayError):
    """Any database failure other than 'no rows'."""


class UpstreamError(GatewayError):
    """Base class for failures talking to the product catalog API."""


class UpstreamRequestError(UpstreamError):
    pass


class UpstreamHTTPError(UpstreamError):
    def __init__(self, status_code: int):
        super().__init__(f"Error en la solicitud, código de estado: {status_code}")
        self.status_code = status_code


class CatalogDecodeError(UpstreamError):
    pass
