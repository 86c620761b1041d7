"""
Import API endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, UploadFile, File, HTTPException
from sqlalchemy.orm import Session

from luca.dependencies import get_db, get_user_id
from luca.schemas.import_file import ImportResult, UploadResponse
from luca.services import import_service, persistence_service

router = APIRouter(prefix="/imports", tags=["imports"])


@router.post("/upload", response_model=List[ImportResult])
async def upload_files(
    files: List[UploadFile] = File(...),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """
    Upload one or more bank exports.
    Each file gets its own result; unsupported or empty files are reported, not raised.
    """
    if any(not f.filename for f in files):
        raise HTTPException(status_code=400, detail="No filename provided")

    contents = [(f.filename, await f.read()) for f in files]
    return await import_service.import_files(db, user_id, contents)


@router.get("/history", response_model=List[UploadResponse])
def get_import_history(
    limit: int = 20,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_user_id)
):
    """Get upload history"""
    uploads = persistence_service.load_uploads(db, user_id, limit)
    return [UploadResponse.model_validate(u) for u in uploads]
