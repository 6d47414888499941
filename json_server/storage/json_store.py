import random
from typing import Any, Dict, List

from .document import JsonDocument, ResourceKind
from .errors import AlreadyExists, InternalError, NotFound

Resource = Dict[str, Any]

DEFAULT_ID_SPACE = 1000
DEFAULT_MAX_ID_ATTEMPTS = 10_000


class JsonStore:
    """CRUD access to one top-level key of a shared JSON document.

    Every call loads the whole file, and every mutation writes the whole file
    back. Ids are compared as strings; the path id always wins over an id in the
    payload on replace/update.
    """

    def __init__(
        self,
        document: JsonDocument,
        key: str,
        kind: ResourceKind = ResourceKind.PLURAL,
        *,
        rng: random.Random | None = None,
        id_space: int = DEFAULT_ID_SPACE,
        max_id_attempts: int = DEFAULT_MAX_ID_ATTEMPTS,
    ):
        self.document = document
        self.key = key
        self.kind = kind
        self.rng = rng or random.Random()
        self.id_space = id_space
        self.max_id_attempts = max_id_attempts

    @property
    def singular(self) -> bool:
        return self.kind is ResourceKind.SINGULAR

    def _records(self, data: Dict[str, Any]) -> List[Resource]:
        if self.key not in data or self.singular:
            raise NotFound()
        records = data[self.key]
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise InternalError(f"'{self.key}' is no longer an array of objects")
        return records

    @staticmethod
    def _index_of(records: List[Resource], resource_id: str) -> int:
        for i, record in enumerate(records):
            if "id" in record and str(record["id"]) == resource_id:
                return i
        raise NotFound()

    def _new_id(self, records: List[Resource]) -> str:
        taken = {str(r["id"]) for r in records if "id" in r}
        for _ in range(self.max_id_attempts):
            candidate = str(self.rng.randrange(self.id_space))
            if candidate not in taken:
                return candidate
        raise InternalError(
            f"no free id for '{self.key}' after {self.max_id_attempts} attempts"
        )

    # --- reads ---

    def find(self) -> List[Resource]:
        return self._records(self.document.load())

    def find_by_id(self, resource_id: str) -> Resource:
        data = self.document.load()
        if self.singular:
            if self.key not in data:
                raise NotFound()
            return {self.key: data[self.key]}
        records = self._records(data)
        return records[self._index_of(records, str(resource_id))]

    def dump(self) -> Dict[str, Any]:
        return self.document.load()

    # --- mutations ---

    def create(self, resource: Resource) -> Resource:
        new = dict(resource)
        with self.document.transaction() as data:
            records = self._records(data)
            if "id" not in new:
                new["id"] = self._new_id(records)
            elif any("id" in r and str(r["id"]) == str(new["id"]) for r in records):
                raise AlreadyExists()
            records.append(new)
            self.document.save(data)
        return new

    def replace(self, resource_id: str, resource: Resource) -> Resource:
        resource_id = str(resource_id)
        new = dict(resource)
        new["id"] = resource_id
        with self.document.transaction() as data:
            records = self._records(data)
            records[self._index_of(records, resource_id)] = new
            self.document.save(data)
        return new

    def update(self, resource_id: str, resource: Resource) -> Resource:
        resource_id = str(resource_id)
        with self.document.transaction() as data:
            records = self._records(data)
            i = self._index_of(records, resource_id)
            merged = {**records[i], **resource}
            merged["id"] = resource_id
            records[i] = merged
            self.document.save(data)
        return merged

    def delete(self, resource_id: str):
        resource_id = str(resource_id)
        with self.document.transaction() as data:
            records = self._records(data)
            del records[self._index_of(records, resource_id)]
            self.document.save(data)
