"""Import all models so SQLAlchemy metadata knows about them."""
from notes_api.models.base import Base
from notes_api.models.note import Note
from notes_api.models.file_record import FileRecord

__all__ = ["Base", "Note", "FileRecord"]
