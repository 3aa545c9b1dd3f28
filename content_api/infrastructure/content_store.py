"""SQLAlchemy Content Store — ContentStore implementation over an AsyncSession.

Invariants:
    - One store per request, bound to that request's session
    - replace/update/delete are single UPDATE/DELETE ... RETURNING statements;
      a row removed by another request between lookup and write cannot slip
      through as a stale-data 500 or a silent 204
    - Missing records on replace/update/delete raise
      ContentStoreError(StoreErrorKind.NOT_FOUND); get() returns None
    - list_all() orders strictly by id descending
"""

import logging

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.core.errors import ContentStoreError, StoreErrorKind
from content_api.models.content import Content

logger = logging.getLogger(__name__)

_WRITABLE_FIELDS = ("title", "body")


class SqlAlchemyContentStore:
    """Content persistence backed by SQLAlchemy."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def list_all(self) -> list[Content]:
        result = await self._db.execute(
            select(Content).order_by(Content.id.desc()),
        )
        return list(result.scalars().all())

    async def get(self, content_id: int) -> Content | None:
        return await self._db.get(Content, content_id)

    async def create(self, title: str, body: str | None) -> Content:
        content = Content(title=title, body=body)
        self._db.add(content)
        await self._db.commit()
        await self._db.refresh(content)
        logger.info("Content created", extra={"content_id": content.id})
        return content

    async def replace(
        self, content_id: int, title: str, body: str | None,
    ) -> Content:
        content = await self._update(
            content_id, {"title": title, "body": body}, "replace",
        )
        logger.info("Content replaced", extra={"content_id": content.id})
        return content

    async def update_partial(
        self, content_id: int, fields: dict[str, str | None],
    ) -> Content:
        values = {k: v for k, v in fields.items() if k in _WRITABLE_FIELDS}
        if not values:
            # Nothing to write: report the row as it currently stands
            content = await self._db.get(
                Content, content_id, populate_existing=True,
            )
            if content is None:
                raise ContentStoreError(
                    StoreErrorKind.NOT_FOUND, "update", content_id=content_id,
                )
            return content
        content = await self._update(content_id, values, "update")
        logger.info("Content updated", extra={"content_id": content.id})
        return content

    async def delete(self, content_id: int) -> None:
        result = await self._db.execute(
            delete(Content)
            .where(Content.id == content_id)
            .returning(Content.id),
        )
        if result.scalar_one_or_none() is None:
            await self._db.rollback()
            raise ContentStoreError(
                StoreErrorKind.NOT_FOUND, "delete", content_id=content_id,
            )
        await self._db.commit()
        logger.info("Content deleted", extra={"content_id": content_id})

    async def _update(
        self, content_id: int, values: dict[str, str | None], operation: str,
    ) -> Content:
        result = await self._db.execute(
            update(Content)
            .where(Content.id == content_id)
            .values(**values)
            .returning(Content)
            .execution_options(populate_existing=True),
        )
        content = result.scalar_one_or_none()
        if content is None:
            await self._db.rollback()
            raise ContentStoreError(
                StoreErrorKind.NOT_FOUND, operation, content_id=content_id,
            )
        await self._db.commit()
        return content
