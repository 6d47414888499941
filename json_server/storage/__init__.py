from .document import JsonDocument, ResourceKind, classify
from .errors import (
    AlreadyExists,
    BadRequest,
    ConfigError,
    InternalError,
    NotFound,
    StoreError,
)
from .json_store import JsonStore, Resource

__all__ = [
    "AlreadyExists",
    "BadRequest",
    "ConfigError",
    "InternalError",
    "JsonDocument",
    "JsonStore",
    "NotFound",
    "Resource",
    "ResourceKind",
    "StoreError",
    "classify",
]
