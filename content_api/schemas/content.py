"""Content Schemas — Pydantic models for content request/response bodies.

Invariants:
    - ContentPayload accepts both keys as optional; title requirements are
      enforced per operation (create/replace require it, patch only when sent)
    - model_fields_set distinguishes an omitted key from an explicit null
    - Unknown keys are ignored

Design Decisions:
    - Title check lives in the route, not a validator: the missing-title
      response is {"message": "title is required"}, not a field error list
"""

from pydantic import BaseModel, ConfigDict


class ContentPayload(BaseModel):
    """Incoming content fields (create, replace, partial update)."""
    model_config = ConfigDict(extra="ignore")

    title: str | None = None
    body: str | None = None

    def has_title(self) -> bool:
        return bool(self.title)

    def supplied_fields(self) -> dict[str, str | None]:
        """Only the keys the client actually sent."""
        return self.model_dump(include=self.model_fields_set)


class ContentResponse(BaseModel):
    """Content response — public-facing record."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    body: str | None = None
