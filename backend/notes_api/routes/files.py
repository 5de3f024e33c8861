"""Files API routes: upload, list, download and delete note attachments."""
import logging
from typing import Optional
from urllib.parse import quote
from fastapi import APIRouter, Depends, File, Form, Request, UploadFile
from fastapi.responses import FileResponse
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.database import get_db
from notes_api.errors import (
    BadRequestError,
    NotesApiError,
    NotFoundError,
    PayloadTooLargeError,
)
from notes_api.schemas.file import FileListItem, FileListResponse, SuccessResponse, UploadResponse
from notes_api.services import note_store
from notes_api.services.file_storage import FileStorageService, get_file_storage

logger = logging.getLogger(__name__)

router = APIRouter(tags=["files"])

DEFAULT_MIME_TYPE = "application/octet-stream"


def content_disposition(filename: str) -> str:
    """Attachment header that always carries a quoted ``filename`` parameter.

    Non-ASCII names get an ASCII fallback plus an RFC 5987 ``filename*``.
    """
    escaped = filename.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("ascii")
    except UnicodeEncodeError:
        fallback = escaped.encode("ascii", "replace").decode("ascii")
        return f"attachment; filename=\"{fallback}\"; filename*=utf-8''{quote(filename)}"
    return f'attachment; filename="{escaped}"'


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    request: Request,
    file: Optional[UploadFile] = File(None),
    note_name: Optional[str] = Form(None, alias="noteName"),
    db: AsyncSession = Depends(get_db),
    storage: FileStorageService = Depends(get_file_storage),
):
    """Upload a file and attach it to a note, creating the note if needed."""
    if file is None:
        raise BadRequestError("No file uploaded")
    if not note_name:
        raise BadRequestError("Note name is required")

    max_bytes = request.app.state.settings.MAX_UPLOAD_BYTES
    blob = None
    try:
        contents = await file.read()
        if len(contents) > max_bytes:
            raise PayloadTooLargeError("File too large")

        original_name = file.filename or "unnamed"
        await note_store.ensure_note(db, note_name)
        blob = await storage.save(contents, original_name)
        record = await note_store.add_file_record(
            db,
            note_id=note_name,
            blob=blob,
            original_name=original_name,
            mime_type=file.content_type or DEFAULT_MIME_TYPE,
        )
    except NotesApiError:
        raise
    except Exception:
        logger.exception("Upload error for note %s", note_name)
        await db.rollback()
        if blob is not None:
            await storage.delete(blob.file_path)
        raise NotesApiError("Upload failed")

    logger.info("Stored file %s for note %s (%d bytes)", record.id, note_name, record.file_size)
    return UploadResponse(
        file_id=record.id,
        filename=record.original_name,
        size=record.file_size,
    )


@router.get("/files/{note_id}", response_model=FileListResponse)
async def list_files(
    note_id: str,
    db: AsyncSession = Depends(get_db),
):
    """List a note's files, most recent upload first."""
    try:
        records = await note_store.list_file_records(db, note_id)
    except Exception:
        logger.exception("Error fetching files for note %s", note_id)
        raise NotesApiError("Failed to fetch files")
    return {"files": [FileListItem.model_validate(r) for r in records]}


@router.get("/file/{file_id}")
async def download_file(
    file_id: int,
    db: AsyncSession = Depends(get_db),
    storage: FileStorageService = Depends(get_file_storage),
):
    """Download a file by ID as an attachment under its original name."""
    try:
        file_rec = await note_store.get_file_record(db, file_id)
        if not file_rec:
            raise NotFoundError("File not found")
        if not storage.exists(file_rec.file_path):
            raise NotFoundError("File not found on disk")
    except NotesApiError:
        raise
    except Exception:
        logger.exception("Download error for file %s", file_id)
        raise NotesApiError("Download failed")

    return FileResponse(
        path=file_rec.file_path,
        headers={"Content-Disposition": content_disposition(file_rec.original_name)},
        media_type=file_rec.mime_type or DEFAULT_MIME_TYPE,
    )


@router.delete("/file/{file_id}", response_model=SuccessResponse)
async def delete_file(
    file_id: int,
    db: AsyncSession = Depends(get_db),
    storage: FileStorageService = Depends(get_file_storage),
):
    """Delete a file's blob (if still present) and then its record."""
    logger.info("Deleting file %s", file_id)
    try:
        file_rec = await note_store.get_file_record(db, file_id)
        if not file_rec:
            raise NotFoundError("File not found")

        await storage.delete(file_rec.file_path)
        await note_store.delete_file_record(db, file_id)
    except NotesApiError:
        raise
    except Exception:
        logger.exception("Delete error for file %s", file_id)
        raise NotesApiError("Delete failed")

    return {"success": True}
