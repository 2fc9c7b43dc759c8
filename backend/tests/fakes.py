"""
In-memory stand-ins for MongoDB used by the test suite.

``InMemoryDatabase`` supports the subset of the Motor API the repositories
use: equality filters plus ``$regex``/``$gte``/``$lte``, exclusion
projections, ``$set`` updates, sorting, and unique indexes that raise
``DuplicateKeyError`` like a real deployment.
"""

import copy
import re
from types import SimpleNamespace
from typing import Any, Optional

from bson import ObjectId
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError


def _matches_condition(value: Any, condition: Any) -> bool:
    if isinstance(condition, dict) and any(k.startswith("$") for k in condition):
        for op, operand in condition.items():
            if op == "$regex":
                flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
                if not isinstance(value, str) or re.search(operand, value, flags) is None:
                    return False
            elif op == "$gte":
                if value is None or value < operand:
                    return False
            elif op == "$lte":
                if value is None or value > operand:
                    return False
            elif op == "$options":
                continue
            else:
                raise NotImplementedError(op)
        return True
    return value == condition


def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
    return all(_matches_condition(doc.get(k), v) for k, v in query.items())


def _project(doc: dict[str, Any], projection: Optional[dict[str, int]]) -> dict[str, Any]:
    result = copy.deepcopy(doc)
    for field, include in (projection or {}).items():
        if not include:
            result.pop(field, None)
    return result


class InMemoryCursor:
    def __init__(self, docs: list[dict[str, Any]]):
        self._docs = docs

    def sort(self, key: str, direction: int = 1) -> "InMemoryCursor":
        self._docs.sort(key=lambda d: d.get(key), reverse=direction < 0)
        return self

    async def to_list(self, length: Optional[int] = None) -> list[dict[str, Any]]:
        return self._docs if length is None else self._docs[:length]


class InMemoryCollection:
    def __init__(self, unique_fields: tuple[str, ...] = ()):
        self.docs: list[dict[str, Any]] = []
        self.unique_fields = unique_fields
        self.indexes: list[str] = []
        self.fail_with: Optional[Exception] = None

    def _check_failure(self) -> None:
        if self.fail_with is not None:
            raise self.fail_with

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        self._check_failure()
        for field in self.unique_fields:
            if any(d.get(field) == doc.get(field) for d in self.docs):
                raise DuplicateKeyError(f"E11000 duplicate key error: {field}", code=11000)
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def insert_many(self, docs: list[dict[str, Any]]) -> SimpleNamespace:
        ids = [(await self.insert_one(d)).inserted_id for d in docs]
        return SimpleNamespace(inserted_ids=ids)

    async def find_one(
        self, query: dict[str, Any], projection: Optional[dict[str, int]] = None
    ) -> Optional[dict[str, Any]]:
        self._check_failure()
        for doc in self.docs:
            if _matches(doc, query):
                return _project(doc, projection)
        return None

    def find(self, query: Optional[dict[str, Any]] = None) -> InMemoryCursor:
        self._check_failure()
        return InMemoryCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query or {})])

    async def find_one_and_update(
        self,
        query: dict[str, Any],
        update: dict[str, Any],
        return_document: Any = ReturnDocument.BEFORE,
    ) -> Optional[dict[str, Any]]:
        self._check_failure()
        for doc in self.docs:
            if _matches(doc, query):
                before = copy.deepcopy(doc)
                doc.update(update.get("$set", {}))
                return copy.deepcopy(doc) if return_document == ReturnDocument.AFTER else before
        return None

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        self._check_failure()
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def delete_many(self, query: dict[str, Any]) -> SimpleNamespace:
        self._check_failure()
        kept = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(kept)
        self.docs = kept
        return SimpleNamespace(deleted_count=deleted)

    async def count_documents(self, query: dict[str, Any]) -> int:
        self._check_failure()
        return sum(1 for d in self.docs if _matches(d, query))

    async def create_index(self, keys: Any, unique: bool = False, name: Optional[str] = None) -> str:
        self._check_failure()
        self.indexes.append(name or str(keys))
        if unique and isinstance(keys, str) and keys not in self.unique_fields:
            self.unique_fields = self.unique_fields + (keys,)
        return name or str(keys)


class InMemoryDatabase:
    """
    Dict of collections.

    With ``indexed=True`` the unique indexes ``ensure_indexes`` creates are in
    place from the start; with ``indexed=False`` they only exist once
    ``create_index`` has been called, as on a fresh deployment.
    """

    UNIQUE = {
        "users": ("email",),
        "newsletter_subscribers": ("email",),
    }

    def __init__(self, indexed: bool = True):
        self._collections: dict[str, InMemoryCollection] = {}
        self.indexed = indexed
        self.reachable = True

    def __getitem__(self, name: str) -> InMemoryCollection:
        if name not in self._collections:
            self._collections[name] = InMemoryCollection(self.UNIQUE.get(name, ()) if self.indexed else ())
        return self._collections[name]

    async def command(self, name: str) -> dict[str, Any]:
        if not self.reachable:
            from pymongo.errors import ServerSelectionTimeoutError

            raise ServerSelectionTimeoutError("localhost:27017: connection refused")
        return {"ok": 1}
