# ============================================================================
# FILE: songbook/api/endpoints/songs.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
from songbook.config import Settings
from songbook.db.session import get_db
from songbook.api.dependencies import get_cache, get_file_store, get_settings
from songbook.core.cache import RedisCache
from songbook.core.file_store import FileStore
from songbook.schemas.song import MessageResponse, SongResponse
from songbook.services.song_service import song_service
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.get("/search", response_model=List[SongResponse])
def search_songs(
    title: Optional[str] = Query(None, description="Case-insensitive title substring"),
    db: Session = Depends(get_db),
    cache: RedisCache = Depends(get_cache),
    settings: Settings = Depends(get_settings)
):
    """
    Search songs by title
    A blank or missing title returns the whole catalog
    """
    try:
        return song_service.search_songs(db, title, cache, settings.CACHE_EXPIRE_SECONDS)
    except Exception as e:
        logger.error(f"Search error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/delete/{title}", response_model=MessageResponse)
def delete_song(
    title: str,
    db: Session = Depends(get_db),
    file_store: FileStore = Depends(get_file_store),
    cache: RedisCache = Depends(get_cache)
):
    """Delete a song by exact title, along with its stored file"""
    try:
        deleted = song_service.delete_songs_by_title(db, file_store, title, cache)
    except Exception as e:
        logger.error(f"Error deleting song: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete song")

    if not deleted:
        raise HTTPException(status_code=404, detail="Song not found")
    return {"message": f'Song with title "{title}" has been deleted successfully!'}
