"""
Import file schemas.
"""

from pydantic import BaseModel
from typing import Optional, List
from datetime import date, datetime
from enum import Enum

from luca.schemas.category import Source


class ImportStatus(str, Enum):
    DONE = "done"
    ERROR = "error"


class SaveResult(BaseModel):
    """Outcome of persisting one parsed batch."""
    upload_id: Optional[str] = None
    attempted: int = 0
    saved: int = 0
    skipped: int = 0
    failed_chunks: List[int] = []
    stored_locally: int = 0


class ImportResult(BaseModel):
    filename: str
    status: ImportStatus
    source: Optional[Source] = None
    transactions_parsed: int = 0
    transactions_saved: int = 0
    date_range_from: Optional[date] = None
    date_range_to: Optional[date] = None
    upload_id: Optional[str] = None
    error: Optional[str] = None


class UploadResponse(BaseModel):
    id: str
    filename: str
    source: Source
    transaction_count: int
    transactions_saved: int
    date_range_from: Optional[date]
    date_range_to: Optional[date]
    created_at: datetime

    class Config:
        from_attributes = True
