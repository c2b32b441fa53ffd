# ============================================================================
# FILE: songbook/api/dependencies.py
# ============================================================================
import os
import re
from fastapi import Depends, File, HTTPException, Request, UploadFile, status
from typing import List, Optional
from songbook.config import Settings
from songbook.core.cache import RedisCache
from songbook.core.file_store import FileStore

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_file_store(request: Request) -> FileStore:
    return request.app.state.file_store

def get_cache(request: Request) -> RedisCache:
    return request.app.state.cache

def _file_size(upload: UploadFile) -> int:
    if getattr(upload, "size", None) is not None:
        return upload.size
    upload.file.seek(0, os.SEEK_END)
    size = upload.file.tell()
    upload.file.seek(0)
    return size

def validate_uploads(
    file: Optional[List[UploadFile]] = File(None),
    settings: Settings = Depends(get_settings)
) -> List[UploadFile]:
    """
    Check an upload batch before the handler runs
    Any file with a bad type or size rejects the whole request (400)
    """
    if not file:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No file(s) uploaded")

    if len(file) > settings.MAX_FILES_PER_UPLOAD:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Too many files. Maximum is {settings.MAX_FILES_PER_UPLOAD} per upload."
        )

    allowed_types = re.compile(settings.ALLOWED_AUDIO_TYPES)
    for upload in file:
        if not FileStore.safe_name(upload.filename):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid file name")
        if not allowed_types.search(upload.content_type or ""):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Only audio files are allowed!")
        if _file_size(upload) > settings.MAX_FILE_SIZE:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"File is too large. Maximum size is {settings.max_file_size_mb}MB."
            )
    return file
