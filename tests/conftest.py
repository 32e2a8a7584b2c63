"""Common utilities for tests."""

from __future__ import annotations

import unittest
from typing import Any, Optional

from mockfirestore import CollectionReference, MockFirestore, Query
from mockfirestore.document import DocumentReference

from courtside import create_app


def _drop_timeout(cls: type, name: str) -> None:
    """Let a mockfirestore method accept the ``timeout`` kwarg of the real client."""
    original = getattr(cls, name, None)
    if original is None or getattr(original, "_drops_timeout", False):
        return

    def wrapper(self: Any, *args: Any, timeout: Any = None, **kwargs: Any) -> Any:
        return original(self, *args, **kwargs)

    wrapper._drops_timeout = True  # type: ignore[attr-defined]
    setattr(cls, name, wrapper)


def patch_mockfirestore() -> None:
    """Apply monkeypatches to mockfirestore to support FieldFilter and timeouts."""

    def collection_where(
        self: Any,
        field_path: Optional[str] = None,
        op_string: Optional[str] = None,
        value: Any = None,
        filter: Any = None,
    ) -> Any:
        if filter:
            return self._where(filter.field_path, filter.op_string, filter.value)
        return self._where(field_path, op_string, value)

    if not hasattr(CollectionReference, "_where"):
        CollectionReference._where = CollectionReference.where
        CollectionReference.where = collection_where

    if not hasattr(Query, "_where"):
        Query._where = Query.where
        Query.where = collection_where

    for name in ("add", "stream"):
        _drop_timeout(CollectionReference, name)
    _drop_timeout(Query, "stream")
    for name in ("get", "set", "update", "delete"):
        _drop_timeout(DocumentReference, name)


class FirestoreTestCase(unittest.TestCase):
    """Base test case with an app context and an in-memory Firestore."""

    def setUp(self) -> None:
        patch_mockfirestore()
        self.db = MockFirestore()
        self.app = create_app({"TESTING": True, "WTF_CSRF_ENABLED": False})
        self.app_context = self.app.app_context()
        self.app_context.push()

    def tearDown(self) -> None:
        self.app_context.pop()
