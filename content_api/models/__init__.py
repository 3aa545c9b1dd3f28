"""ORM Models — SQLAlchemy declarative models.

Design Decisions:
    - All models imported here so Base.metadata is complete for create_all
      and alembic autogenerate
"""

from content_api.models.content import Content  # noqa: F401
