import logging

from flask import jsonify, request

from utils.errors import ServiceError

logger = logging.getLogger(__name__)


def request_fields():
    """Body fields from JSON, urlencoded or multipart requests."""
    if request.is_json:
        body = request.get_json(silent=True)
        return body if isinstance(body, dict) else {}
    return request.form.to_dict()


def error_response(error):
    if isinstance(error, ServiceError):
        return jsonify(error.to_dict()), error.status_code

    logger.exception("Unhandled error on %s %s", request.method, request.path)
    return jsonify({"status": False, "message": str(error)}), 500
