"""Notes API routes."""
import json
from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db
from notes_api.schemas.note import NoteResponse, StatusResponse
from notes_api.services import note_store

router = APIRouter(tags=["notes"])


async def _content_from_body(request: Request) -> str:
    """Pull ``content`` out of a JSON body; anything else counts as empty."""
    if "json" not in request.headers.get("content-type", ""):
        return ""
    body = await request.body()
    if not body:
        return ""
    try:
        payload = json.loads(body)
    except ValueError:
        return ""
    if not isinstance(payload, dict):
        return ""
    content = payload.get("content")
    return content if isinstance(content, str) else ""


@router.get("/note/{note_id}", response_model=NoteResponse)
async def read_note(
    note_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Read a note. A note that was never written reads as empty."""
    content = await note_store.read_note(db, note_id)
    return {"content": content}


@router.post("/note/{note_id}", response_model=StatusResponse)
async def write_note(
    note_id: str,
    request: Request,
    db: AsyncSession = Depends(get_db),
):
    """Create or replace a note's content. Bodies are never rejected."""
    content = await _content_from_body(request)
    await note_store.upsert_note(db, note_id, content)
    return {"status": "ok"}
