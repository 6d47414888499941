import json
import re

from flask import Blueprint, request

from ..storage import BadRequest, JsonStore
from ..web import success

PLURAL_ENDPOINTS = ("GET /{r}", "GET /{r}/:id", "POST /{r}", "PUT /{r}/:id", "PATCH /{r}/:id", "DELETE /{r}/:id")
SINGULAR_ENDPOINTS = ("GET /{r}",)


def _blueprint_name(key: str, index: int) -> str:
    return f"resource_{index}_" + re.sub(r"\W", "_", key)


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _payload() -> dict:
    """Decoded request body; must be an object with something besides `id`."""
    try:
        body = json.loads(request.get_data(), parse_constant=_reject_constant)
    except ValueError:
        raise BadRequest()
    if not isinstance(body, dict) or not body or set(body) == {"id"}:
        raise BadRequest()
    return body


def resource_blueprint(key: str, store: JsonStore, index: int = 0) -> Blueprint:
    """Wire the endpoints of one resource key to its store."""
    bp = Blueprint(_blueprint_name(key, index), __name__)
    base = f"/{key}"

    if store.singular:
        @bp.get(base)
        def read_singular():
            return success(store.find_by_id(key))

        return bp

    @bp.get(base)
    def list_resources():
        return success(store.find())

    @bp.get(f"{base}/<id>")
    def read(id):
        return success(store.find_by_id(id))

    @bp.post(base)
    def create():
        return success(store.create(_payload()), 201)

    @bp.put(f"{base}/<id>")
    def replace(id):
        return success(store.replace(id, _payload()))

    @bp.patch(f"{base}/<id>")
    def update(id):
        return success(store.update(id, _payload()))

    @bp.delete(f"{base}/<id>")
    def delete(id):
        store.delete(id)
        return success()

    return bp


def endpoints_for(key: str, store: JsonStore) -> list[str]:
    templates = SINGULAR_ENDPOINTS if store.singular else PLURAL_ENDPOINTS
    return [t.format(r=key) for t in templates]
