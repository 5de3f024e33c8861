"""File request/response schemas."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from notes_api.schemas.base import CamelModel


class FileListItem(BaseModel):
    id: int
    original_name: str
    file_size: int
    mime_type: Optional[str] = None
    upload_date: datetime

    model_config = {"from_attributes": True}


class FileListResponse(BaseModel):
    files: list[FileListItem]


class UploadResponse(CamelModel):
    success: bool = True
    file_id: int
    filename: str
    size: int


class SuccessResponse(BaseModel):
    success: bool = True
