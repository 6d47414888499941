# json_server/extensions.py
import random
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

from flask import Flask, current_app
from flask_cors import CORS

from .storage import ConfigError, InternalError, JsonDocument, JsonStore, classify

# CORS is a real Flask extension (keeps init_app)
cors = CORS()

EXTENSION_KEY = "json_server"

# Served by the fixed whole-document endpoint, so never exposed as a resource.
RESERVED_KEYS = {"db"}
_UNROUTABLE = re.compile(r"[/<>]")


@dataclass
class Resources:
    """Stores discovered in the backing file, keyed by resource name."""

    document: JsonDocument
    db: JsonStore
    stores: Dict[str, JsonStore] = field(default_factory=dict)


def load_resources(app: Flask) -> Resources:
    """Read the backing file once, classify its keys and build a store per key."""
    path = Path(app.config["DB_FILE"])
    if not path.is_file():
        raise ConfigError(f"unable to find requested file: {path}")

    document = JsonDocument(path, lock_writes=app.config.get("LOCK_WRITES", True))
    try:
        kinds = classify(document.load())
    except InternalError as e:
        raise ConfigError(f"failed to parse file: {path}") from e

    seed = app.config.get("ID_SEED")
    rng = random.Random(seed) if seed is not None else random.Random()

    resources = Resources(document=document, db=JsonStore(document, "", rng=rng))
    for key, kind in kinds.items():
        if key in RESERVED_KEYS:
            app.logger.warning("Key %r is shadowed by the /%s endpoint; skipping", key, key)
            continue
        if not key or _UNROUTABLE.search(key):
            app.logger.warning("Key %r cannot be used as a path segment; skipping", key)
            continue
        resources.stores[key] = JsonStore(
            document,
            key,
            kind,
            rng=rng,
            id_space=app.config.get("ID_SPACE", 1000),
            max_id_attempts=app.config.get("MAX_ID_ATTEMPTS", 10_000),
        )

    app.extensions[EXTENSION_KEY] = resources
    return resources


def get_resources() -> Resources:
    return current_app.extensions[EXTENSION_KEY]
