import logging
import sys

from certgateway import create_app
from certgateway.errors import ConfigError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("certgateway")

try:
    app = create_app()
except ConfigError as e:
    # No partial configuration: refuse to start
    logger.critical("Error al cargar la configuración: %s", e)
    sys.exit(1)


if __name__ == "__main__":
    # Local dev only. In production run: gunicorn app:app
    port = app.config["PORT"]
    logger.info("Servidor iniciado en http://localhost:%s", port)
    app.run(host="0.0.0.0", port=port)
