"""Generic document store operations over a Firestore client.

Every call passes an explicit deadline taken from ``FIRESTORE_TIMEOUT`` so a
request never waits on the database indefinitely. Google API failures are
translated into :class:`~courtside.errors.StorageError` so callers only deal
with the application's own exception hierarchy.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

from firebase_admin import firestore
from flask import current_app
from google.api_core.exceptions import DeadlineExceeded, GoogleAPICallError, RetryError

from courtside.core.constants import DEFAULT_FIRESTORE_TIMEOUT
from courtside.errors import StorageError, StorageTimeoutError

if TYPE_CHECKING:
    from google.cloud.firestore_v1.client import Client

T = TypeVar("T")

ASCENDING = firestore.Query.ASCENDING
DESCENDING = firestore.Query.DESCENDING


def _timeout() -> float:
    return float(current_app.config.get("FIRESTORE_TIMEOUT", DEFAULT_FIRESTORE_TIMEOUT))


def _call(description: str, func: Callable[[float], T]) -> T:
    """Run a Firestore call with a deadline, translating client errors."""
    try:
        return func(_timeout())
    except DeadlineExceeded as e:
        current_app.logger.error(f"Timed out {description}: {e}")
        raise StorageTimeoutError() from e
    except (GoogleAPICallError, RetryError) as e:
        current_app.logger.error(f"Error {description}: {e}")
        raise StorageError() from e


def _snapshot_to_dict(snapshot: Any) -> dict[str, Any]:
    data = snapshot.to_dict() or {}
    data["id"] = snapshot.id
    return data


def create_document(db: Client, collection: str, data: dict[str, Any]) -> str:
    """Add a document with a server-assigned id and return that id."""
    _, doc_ref = _call(
        f"creating document in {collection}",
        lambda timeout: db.collection(collection).add(data, timeout=timeout),
    )
    return doc_ref.id


def get_document(db: Client, collection: str, doc_id: str) -> dict[str, Any] | None:
    """Fetch a single document, or None if it does not exist."""
    snapshot = _call(
        f"fetching {collection}/{doc_id}",
        lambda timeout: db.collection(collection).document(doc_id).get(timeout=timeout),
    )
    if not snapshot.exists:
        return None
    return _snapshot_to_dict(snapshot)


def set_document(
    db: Client, collection: str, doc_id: str, data: dict[str, Any], merge: bool = True
) -> None:
    """Write a document by id, merging into any existing fields by default."""
    _call(
        f"writing {collection}/{doc_id}",
        lambda timeout: db.collection(collection)
        .document(doc_id)
        .set(data, merge=merge, timeout=timeout),
    )


def update_document(
    db: Client, collection: str, doc_id: str, data: dict[str, Any]
) -> None:
    """Apply a partial update to an existing document."""
    _call(
        f"updating {collection}/{doc_id}",
        lambda timeout: db.collection(collection)
        .document(doc_id)
        .update(data, timeout=timeout),
    )


def delete_document(db: Client, collection: str, doc_id: str) -> None:
    """Delete a document by id."""
    _call(
        f"deleting {collection}/{doc_id}",
        lambda timeout: db.collection(collection)
        .document(doc_id)
        .delete(timeout=timeout),
    )


def query_documents(  # noqa: PLR0913
    db: Client,
    collection: str,
    filters: Iterable[tuple[str, Any]] = (),
    order_by: str | None = None,
    direction: str = ASCENDING,
    limit: int | None = None,
) -> list[dict[str, Any]]:
    """Return documents matching all equality filters, optionally sorted."""
    query: Any = db.collection(collection)
    for field, value in filters:
        query = query.where(filter=firestore.FieldFilter(field, "==", value))
    if order_by:
        query = query.order_by(order_by, direction=direction)
    if limit:
        query = query.limit(limit)

    snapshots = _call(
        f"querying {collection}",
        lambda timeout: list(query.stream(timeout=timeout)),
    )
    return [_snapshot_to_dict(snap) for snap in snapshots]
