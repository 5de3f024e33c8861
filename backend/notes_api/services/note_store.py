"""Note and file-record queries against the relational store.

All helpers take the caller's session and leave commit decisions to the
caller, except where noted.
"""
from sqlalchemy import select, desc, delete
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from notes_api.models import Note, FileRecord
from notes_api.services.file_storage import StoredBlob


async def read_note(db: AsyncSession, note_id: str) -> str:
    """Return a note's content, or "" when the note does not exist."""
    result = await db.execute(select(Note.content).where(Note.id == note_id))
    return result.scalar_one_or_none() or ""


async def upsert_note(db: AsyncSession, note_id: str, content: str) -> None:
    """Replace-or-insert a note in a single statement, then commit."""
    stmt = sqlite_insert(Note).values(id=note_id, content=content)
    stmt = stmt.on_conflict_do_update(
        index_elements=[Note.id],
        set_={"content": stmt.excluded.content},
    )
    await db.execute(stmt)
    await db.commit()


async def ensure_note(db: AsyncSession, note_id: str) -> None:
    """Get-or-create: insert an empty note unless one already exists."""
    stmt = sqlite_insert(Note).values(id=note_id, content="")
    await db.execute(stmt.on_conflict_do_nothing(index_elements=[Note.id]))


async def add_file_record(
    db: AsyncSession,
    note_id: str,
    blob: StoredBlob,
    original_name: str,
    mime_type: str,
) -> FileRecord:
    """Insert metadata for a stored blob and commit.

    Commit is the last step, so a failure anywhere before it leaves no row.
    """
    record = FileRecord(
        note_id=note_id,
        filename=blob.filename,
        original_name=original_name,
        file_path=blob.file_path,
        file_size=blob.file_size,
        mime_type=mime_type,
    )
    db.add(record)
    # flush assigns the id; upload_date is set client side, so no refresh is needed
    await db.flush()
    await db.commit()
    return record


async def list_file_records(db: AsyncSession, note_id: str) -> list[FileRecord]:
    """All records for a note, newest upload first."""
    result = await db.execute(
        select(FileRecord)
        .where(FileRecord.note_id == note_id)
        .order_by(desc(FileRecord.upload_date), desc(FileRecord.id))
    )
    return list(result.scalars().all())


async def get_file_record(db: AsyncSession, file_id: int) -> FileRecord | None:
    result = await db.execute(select(FileRecord).where(FileRecord.id == file_id))
    return result.scalar_one_or_none()


async def delete_file_record(db: AsyncSession, file_id: int) -> None:
    await db.execute(delete(FileRecord).where(FileRecord.id == file_id))
    await db.commit()
