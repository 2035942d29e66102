# certgateway/routes/products.py
"""
Product catalog relay (Rocketfy -> frontend).
CORS headers come from the app-wide after_request hook.
"""

from flask import Blueprint, Response, current_app, jsonify

from ..errors import UpstreamError

bp = Blueprint("products", __name__)


@bp.route("/obtener_productos")
def obtener_productos():
    client = current_app.extensions["catalog_client"]

    try:
        products = client.fetch_products()
    except UpstreamError as e:
        current_app.logger.exception("Fetching Rocketfy products failed")
        return Response(
            f"Error al obtener productos: {e}",
            mimetype="text/plain",
            status=500,
        )

    return jsonify(products)
