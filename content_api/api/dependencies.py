"""Route Dependencies — store injection and request body decoding.

Invariants:
    - Routes receive a ContentStore, never a raw session
    - An empty body decodes to an empty ContentPayload
    - JSON and urlencoded bodies both decode into ContentPayload; other
      content types decode to an empty ContentPayload
    - Any undecodable body raises InvalidBodyError (400)
"""

import json
from urllib.parse import parse_qsl

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from content_api.core.errors import InvalidBodyError, InvalidIdError
from content_api.core.parse_id import parse_id
from content_api.core.repository_protocols import ContentStore
from content_api.infrastructure.content_store import SqlAlchemyContentStore
from content_api.infrastructure.database import get_db
from content_api.schemas.content import ContentPayload

_FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


async def get_content_store(
    db: AsyncSession = Depends(get_db),
) -> ContentStore:
    return SqlAlchemyContentStore(db)


def require_id(raw_id: str) -> int:
    """Parse a path id or raise InvalidIdError."""
    content_id = parse_id(raw_id)
    if content_id is None:
        raise InvalidIdError(raw_id)
    return content_id


def _is_json(content_type: str) -> bool:
    return content_type == "application/json" or content_type.endswith("+json")


def _decode_body(raw: bytes, content_type: str) -> object:
    try:
        text = raw.decode("utf-8")
        if content_type == _FORM_CONTENT_TYPE:
            return dict(parse_qsl(text, keep_blank_values=True))
        return json.loads(text)
    except ValueError as e:
        raise InvalidBodyError(str(e)) from e


async def read_content_payload(request: Request) -> ContentPayload:
    """Decode the request body into a ContentPayload.

    Only JSON (application/json, */*+json) and urlencoded bodies are read.
    Any other or missing content type is treated as an empty payload.
    """
    content_type = (
        request.headers.get("content-type", "").split(";")[0].strip().lower()
    )
    if not (_is_json(content_type) or content_type == _FORM_CONTENT_TYPE):
        return ContentPayload()

    raw = await request.body()
    if not raw.strip():
        return ContentPayload()

    data = _decode_body(raw, content_type)
    if not isinstance(data, dict):
        raise InvalidBodyError("body must be an object")
    try:
        return ContentPayload.model_validate(data)
    except ValidationError as e:
        raise InvalidBodyError(str(e)) from e
