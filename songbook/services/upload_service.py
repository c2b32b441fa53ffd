# ============================================================================
# FILE: songbook/services/upload_service.py
# Audio ingestion: blob write, filename dedup, catalog insert
# ============================================================================
import os
from typing import List, Optional
from fastapi import UploadFile
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from songbook.core.cache import RedisCache
from songbook.core.file_store import FileStore
from songbook.db.models.song import Song
from songbook.services.song_service import song_service, SEARCH_CACHE_PATTERN
import logging

logger = logging.getLogger(__name__)

def title_from_filename(filename: str) -> str:
    """Song title is the filename without its extension"""
    return os.path.splitext(filename)[0]

class UploadService:
    """Service layer for audio uploads"""

    def ingest(
        self,
        db: Session,
        file_store: FileStore,
        files: List[UploadFile],
        cache: Optional[RedisCache] = None,
    ) -> List[Song]:
        """
        Store uploaded blobs and insert catalog rows for new filenames

        Every blob is written first, so a re-upload replaces the stored
        bytes even when its row is skipped as a duplicate. Rows are
        committed together; on failure the blobs of files that were new
        to the catalog are removed again.

        Returns:
            Newly inserted songs (empty when every file was a duplicate)
        """
        names = [file_store.safe_name(upload.filename) for upload in files]
        for name, upload in zip(names, files):
            file_store.save(name, upload.file)

        uploaded: List[Song] = []
        new_names: List[str] = []
        try:
            for name in names:
                if song_service.get_song_by_filename(db, name):
                    logger.info(f"Skipping duplicate upload: {name}")
                    continue
                song = Song(title=title_from_filename(name), filename=name)
                db.add(song)
                db.flush()
                uploaded.append(song)
                new_names.append(name)
            db.commit()
        except Exception as e:
            db.rollback()
            logger.error(f"Error inserting uploaded songs: {e}")
            if isinstance(e, IntegrityError):
                # A concurrent upload committed the same filename first and owns the blob now
                raise
            for name in new_names:
                try:
                    file_store.delete(name)
                except OSError as cleanup_error:
                    logger.warning(f"Could not remove orphan blob {name}: {cleanup_error}")
            raise

        for song in uploaded:
            db.refresh(song)
        if uploaded:
            logger.info(f"Uploaded {len(uploaded)} song(s)")
            if cache is not None:
                cache.delete_pattern(SEARCH_CACHE_PATTERN)
        return uploaded

# Create singleton instance
upload_service = UploadService()
