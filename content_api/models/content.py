"""Content ORM — persists the single content entity.

Invariants:
    - id is an autoincrement integer primary key, never reassigned
    - title is non-nullable text
    - body is nullable text
"""

from sqlalchemy import BigInteger, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from content_api.db.base import Base


class Content(Base):
    """Content entity — a titled text record."""
    __tablename__ = "contents"
    # SQLite would otherwise hand a deleted max id to the next insert.
    __table_args__ = {"sqlite_autoincrement": True}

    # BigInteger on PostgreSQL; SQLite only autoincrements INTEGER keys.
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True, autoincrement=True,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"Content(id={self.id!r}, title={self.title!r})"
