# certgateway/routes/certificates.py
"""
Certificate lookup endpoint used by the public certificate page.
"""

from flask import Blueprint, Response, current_app, jsonify, request

from ..errors import CertificateNotFound, DatabaseConnectionError, QueryError
from ..services import certificates as certificate_service

bp = Blueprint("certificates", __name__)


def _text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


@bp.after_request
def allow_content_type_header(response):
    # Origin and Methods are set app-wide in create_app
    response.headers["Access-Control-Allow-Headers"] = "Content-Type"
    return response


@bp.route("/obtener_certificado", methods=["GET", "OPTIONS"])
def obtener_certificado():
    # CORS preflight: answer before touching the database
    if request.method == "OPTIONS":
        return Response(status=200)

    certificate_number = request.args.get("certificateNumber", "")
    if not certificate_number:
        return _text("Número de certificado requerido", 400)

    try:
        with certificate_service.connect() as conn:
            record = certificate_service.fetch_certificate(conn, certificate_number)
    except DatabaseConnectionError:
        current_app.logger.exception("Database connection failed")
        return _text("Error al conectar a la base de datos", 500)
    except CertificateNotFound as e:
        current_app.logger.info("Certificate lookup: %s", e)
        return _text("Certificado no encontrado", 404)
    except QueryError:
        current_app.logger.exception("Certificate query failed for %s", certificate_number)
        return _text("Error al consultar la base de datos", 500)

    return jsonify(record.to_dict())
