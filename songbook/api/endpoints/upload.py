# ============================================================================
# FILE: songbook/api/endpoints/upload.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, UploadFile
from sqlalchemy.orm import Session
from typing import List
from songbook.db.session import get_db
from songbook.api.dependencies import get_cache, get_file_store, validate_uploads
from songbook.core.cache import RedisCache
from songbook.core.file_store import FileStore
from songbook.schemas.song import SongResponse
from songbook.services.upload_service import upload_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("/upload", response_model=List[SongResponse])
def upload_songs(
    files: List[UploadFile] = Depends(validate_uploads),
    db: Session = Depends(get_db),
    file_store: FileStore = Depends(get_file_store),
    cache: RedisCache = Depends(get_cache)
):
    """
    Upload up to 100 audio files (multipart field `file`)
    Files whose name is already in the catalog are skipped
    """
    try:
        uploaded = upload_service.ingest(db, file_store, files, cache)
    except Exception as e:
        logger.error(f"Database Error: {e}")
        raise HTTPException(status_code=500, detail=f"Database insertion failed: {e}")

    if not uploaded:
        raise HTTPException(status_code=400, detail="Uploaded song(s) already exist")
    return uploaded
