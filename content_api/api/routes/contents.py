"""Contents Routes — CRUD endpoints for the content resource.

Invariants:
    - Path ids are parsed before any store call (invalid → 400 "invalid id")
    - Create/replace require a truthy title (→ 400 "title is required")
    - Replace writes both fields; omitted body becomes null
    - Partial update writes only the keys present in the payload
    - Store failures propagate to the global error handlers

Design Decisions:
    - Thin routes: validation inline, persistence delegated to ContentStore
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from content_api.api.dependencies import (
    get_content_store, read_content_payload, require_id,
)
from content_api.core.errors import ContentNotFoundError, TitleRequiredError
from content_api.core.repository_protocols import ContentStore
from content_api.schemas.content import ContentPayload, ContentResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/contents", tags=["contents"])


@router.get("", response_model=list[ContentResponse])
async def list_contents(store: ContentStore = Depends(get_content_store)):
    """List all contents, newest id first."""
    return await store.list_all()


@router.get("/{content_id}", response_model=ContentResponse)
async def get_content(
    content_id: str, store: ContentStore = Depends(get_content_store),
):
    cid = require_id(content_id)
    content = await store.get(cid)
    if content is None:
        raise ContentNotFoundError(cid)
    return content


@router.post(
    "", response_model=ContentResponse, status_code=status.HTTP_201_CREATED,
)
async def create_content(
    payload: ContentPayload = Depends(read_content_payload),
    store: ContentStore = Depends(get_content_store),
):
    if not payload.has_title():
        raise TitleRequiredError()
    return await store.create(payload.title, payload.body)


@router.put("/{content_id}", response_model=ContentResponse)
async def replace_content(
    content_id: str,
    payload: ContentPayload = Depends(read_content_payload),
    store: ContentStore = Depends(get_content_store),
):
    """Full replace — body is cleared when omitted."""
    cid = require_id(content_id)
    if not payload.has_title():
        raise TitleRequiredError()
    return await store.replace(cid, payload.title, payload.body)


@router.patch("/{content_id}", response_model=ContentResponse)
async def update_content(
    content_id: str,
    payload: ContentPayload = Depends(read_content_payload),
    store: ContentStore = Depends(get_content_store),
):
    """Partial update — omitted keys keep their stored value."""
    cid = require_id(content_id)
    fields = payload.supplied_fields()
    # A stored title may never become empty.
    if "title" in fields and not payload.has_title():
        raise TitleRequiredError()
    return await store.update_partial(cid, fields)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    content_id: str, store: ContentStore = Depends(get_content_store),
):
    cid = require_id(content_id)
    await store.delete(cid)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
