# ============================================================================
# FILE: songbook/services/song_service.py
# ============================================================================
from typing import List, Dict, Optional
from sqlalchemy.orm import Session
from songbook.core.cache import RedisCache
from songbook.core.file_store import FileStore
from songbook.db.models.song import Song
from songbook.db.models.playlist import PlaylistSong
import logging

logger = logging.getLogger(__name__)

SEARCH_CACHE_PATTERN = "search:*"

def format_song(song: Song) -> Dict:
    return {"id": song.id, "title": song.title, "filename": song.filename}

class SongService:
    """Service layer for song queries and deletion"""

    def search_songs(
        self,
        db: Session,
        title: Optional[str] = None,
        cache: Optional[RedisCache] = None,
        expire: int = 3600,
    ) -> List[Dict]:
        """
        Case-insensitive substring search on song titles

        A missing or blank title returns every song. Results are cached
        in Redis when a cache is available.
        """
        has_filter = bool(title and title.strip())
        cache_key = f"search:{title.lower()}" if has_filter else "search:__all__"

        if cache is not None:
            cached_results = cache.get_cache(cache_key)
            if cached_results is not None:
                logger.info(f"Cache hit for search: {title!r}")
                return cached_results

        query = db.query(Song)
        if has_filter:
            query = query.filter(Song.title.ilike(f"%{title}%"))
        results = [format_song(song) for song in query.order_by(Song.id).all()]

        if cache is not None:
            cache.set_cache(cache_key, results, expire)

        return results

    def get_song_by_title(self, db: Session, title: str) -> Optional[Song]:
        """Get the first song with an exact title"""
        return db.query(Song).filter(Song.title == title).order_by(Song.id).first()

    def get_song_by_filename(self, db: Session, filename: str) -> Optional[Song]:
        return db.query(Song).filter(Song.filename == filename).first()

    def delete_songs_by_title(
        self,
        db: Session,
        file_store: FileStore,
        title: str,
        cache: Optional[RedisCache] = None,
    ) -> int:
        """
        Delete every song with an exact title, their memberships and blobs

        Returns the number of songs removed, 0 when nothing matched.
        Rows go in one transaction; blobs are removed after the commit.
        """
        songs = db.query(Song).filter(Song.title == title).all()
        if not songs:
            return 0

        filenames = [song.filename for song in songs]
        song_ids = [song.id for song in songs]
        try:
            db.query(PlaylistSong).filter(
                PlaylistSong.song_id.in_(song_ids)
            ).delete(synchronize_session=False)
            for song in songs:
                db.delete(song)
            db.commit()
            logger.info(f"Songs deleted: {song_ids} ({title})")
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting song: {e}")
            raise

        if cache is not None:
            cache.delete_pattern(SEARCH_CACHE_PATTERN)

        for filename in filenames:
            if not file_store.delete(filename):
                logger.info(f"No blob to delete for {filename}")

        return len(songs)

# Create singleton instance
song_service = SongService()
