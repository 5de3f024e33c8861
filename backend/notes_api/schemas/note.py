"""Note response schemas."""
from pydantic import BaseModel


class NoteResponse(BaseModel):
    content: str = ""


class StatusResponse(BaseModel):
    status: str = "ok"
