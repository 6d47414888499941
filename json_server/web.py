from flask import Flask, current_app, jsonify
from werkzeug.exceptions import HTTPException

from .storage import BadRequest, InternalError, NotFound, StoreError

_HTTP_MESSAGES = {
    400: BadRequest.message,
    404: NotFound.message,
}


def success(data=None, status: int = 200):
    if data is None:
        return "", status
    return jsonify(data), status


def error(message: str, status: int):
    return jsonify({"error": message}), status


def register_error_handlers(app: Flask):
    @app.errorhandler(StoreError)
    def _store_error(e: StoreError):
        if e.status_code >= 500:
            current_app.logger.exception("Store failure: %s", e)
            # Details stay in the log; clients get the generic message.
            return error(InternalError.message, e.status_code)
        return error(e.message, e.status_code)

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        message = _HTTP_MESSAGES.get(e.code, (e.name or "error").lower())
        body, status = error(message, e.code or 500)
        allow = e.get_response().headers.get("Allow")
        if allow:
            body.headers["Allow"] = allow
        return body, status

    @app.errorhandler(Exception)
    def _unexpected(e: Exception):
        current_app.logger.exception("Unhandled error while serving request")
        return error(InternalError.message, 500)
