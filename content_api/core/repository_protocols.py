"""Boundary Protocols — contracts between route handlers and persistence.

Invariants:
    - Routes depend on ContentStore, never on a concrete ORM session
    - get() returns None for a missing record; replace/update/delete raise
      ContentStoreError(StoreErrorKind.NOT_FOUND) instead
    - update_partial() writes only the keys present in `fields`

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes need no inheritance
"""

from typing import Protocol


class ContentLike(Protocol):
    """Structural contract for Content records returned by a store."""
    id: int
    title: str
    body: str | None


class ContentStore(Protocol):
    """Contract for Content persistence — implemented by infrastructure."""
    async def list_all(self) -> list[ContentLike]: ...
    async def get(self, content_id: int) -> ContentLike | None: ...
    async def create(self, title: str, body: str | None) -> ContentLike: ...
    async def replace(
        self, content_id: int, title: str, body: str | None,
    ) -> ContentLike: ...
    async def update_partial(
        self, content_id: int, fields: dict[str, str | None],
    ) -> ContentLike: ...
    async def delete(self, content_id: int) -> None: ...
