"""Note model - plain-text note keyed by a client-chosen id."""
from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column
from notes_api.models.base import Base


class Note(Base):
    __tablename__ = "notes"

    id: Mapped[str] = mapped_column(String, primary_key=True)
    content: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
