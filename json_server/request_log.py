import logging
import time

from flask import Flask, g, request

REQUEST_LOGGER = "json_server.requests"

_COLORS = {
    logging.INFO: "38;5;76m",
    logging.WARNING: "38;5;11m",
    logging.ERROR: "38;5;196m",
}


class StatusFormatter(logging.Formatter):
    """Renders `METHOD /path  STATUS - duration - size Bytes` with a coloured status."""

    def format(self, record: logging.LogRecord) -> str:
        status = getattr(record, "status", None)
        if status is None:
            return super().format(record)
        color = _COLORS.get(record.levelno, "30m")
        return (
            f"{record.method} {record.url}"
            f"\u001b[{color} {status} \u001b[0m"
            f"- {record.duration_ms:.3f}ms - {record.size} Bytes"
        )


def level_for(status_code: int) -> int:
    if status_code < 200:
        return logging.DEBUG
    if status_code < 300:
        return logging.INFO
    if status_code < 400:
        return logging.WARNING
    return logging.ERROR


def init_request_logging(app: Flask):
    logger = logging.getLogger(REQUEST_LOGGER)
    if not any(isinstance(h.formatter, StatusFormatter) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StatusFormatter())
        logger.addHandler(handler)
    logger.propagate = False
    logger.setLevel(logging.DEBUG)

    @app.before_request
    def _start_timer():
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        if not app.config.get("LOGS", False):
            return response
        started = g.pop("request_started", None)
        duration_ms = (time.perf_counter() - started) * 1000 if started else 0.0
        logger.log(
            level_for(response.status_code),
            "%s %s %s",
            request.method,
            request.path,
            response.status_code,
            extra={
                "method": request.method,
                "url": request.path,
                "status": response.status_code,
                "duration_ms": duration_ms,
                "size": response.calculate_content_length() or 0,
            },
        )
        return response
