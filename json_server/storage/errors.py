class StoreError(Exception):
    """Base error for store operations. Carries the HTTP status it maps to."""

    message = "internal server error"
    status_code = 500

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class NotFound(StoreError):
    message = "resource not found"
    status_code = 404


class AlreadyExists(StoreError):
    message = "resource already exists"
    status_code = 409


class BadRequest(StoreError):
    message = "bad request"
    status_code = 400


class InternalError(StoreError):
    message = "internal server error"
    status_code = 500


class ConfigError(Exception):
    """Raised at startup when the backing file cannot be served."""
