# certgateway/services/catalog.py
"""
Rocketfy product catalog client.

One GET, no retries. The JSON array is returned exactly as Rocketfy sent it;
nothing here looks inside the product objects.

Every call opens its own requests.Session, so cookies Rocketfy sets on one
call are never sent on the next.
"""

import logging
from typing import Any, Callable, Dict, List

import requests

from ..config import Settings
from ..errors import CatalogDecodeError, UpstreamHTTPError, UpstreamRequestError

logger = logging.getLogger(__name__)


class CatalogClient:
    def __init__(self, settings: Settings, session_factory: Callable[[], requests.Session] = requests.Session):
        self.url = settings.rocketfy.products_url
        self.session_factory = session_factory
        self.headers = {
            "accept": "application/json",
            "x-secret": settings.rocketfy.x_secret,
            "x-api-key": settings.rocketfy.x_api_key,
        }

    def fetch_products(self) -> List[Dict[str, Any]]:
        try:
            with self.session_factory() as session:
                resp = session.get(self.url, headers=self.headers)
        except requests.RequestException as e:
            raise UpstreamRequestError(f"Error al hacer la solicitud: {e}") from e

        if resp.status_code != 200:
            logger.warning("Rocketfy answered %s for %s", resp.status_code, self.url)
            raise UpstreamHTTPError(resp.status_code)

        try:
            products = resp.json()
        except ValueError as e:
            raise CatalogDecodeError(f"Error al deserializar los datos: {e}") from e

        if not isinstance(products, list):
            raise CatalogDecodeError(
                f"Error al deserializar los datos: se esperaba un arreglo JSON, llegó {type(products).__name__}"
            )
        if not all(isinstance(p, dict) for p in products):
            raise CatalogDecodeError("Error al deserializar los datos: cada producto debe ser un objeto JSON")

        return products
