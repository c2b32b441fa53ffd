# ============================================================================
# FILE: songbook/services/playlist_service.py
# ============================================================================
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.orm import Session
from songbook.db.models.playlist import Playlist, PlaylistSong
from songbook.db.models.song import Song
from songbook.services.song_service import song_service
import logging

logger = logging.getLogger(__name__)

class PlaylistNotFound(LookupError):
    """No playlist with the requested name"""

class SongNotFound(LookupError):
    """No song with the requested title"""

class PlaylistService:
    """Service layer for playlist operations"""

    def create_playlist(self, db: Session, name: str) -> Playlist:
        """Create a new playlist, duplicate names fail on the unique constraint"""
        try:
            playlist = Playlist(name=name)
            db.add(playlist)
            db.commit()
            db.refresh(playlist)
            logger.info(f"Playlist created: {playlist.id} ({name})")
            return playlist
        except Exception as e:
            db.rollback()
            logger.error(f"Error creating playlist: {e}")
            raise

    def get_playlists(self, db: Session) -> List[Playlist]:
        """Get all playlists"""
        return db.query(Playlist).order_by(Playlist.id).all()

    def get_playlist_by_name(self, db: Session, name: str) -> Optional[Playlist]:
        return db.query(Playlist).filter(Playlist.name == name).first()

    def _resolve(self, db: Session, playlist_name: str, song_title: str):
        playlist = self.get_playlist_by_name(db, playlist_name)
        if not playlist:
            raise PlaylistNotFound(playlist_name)
        song = song_service.get_song_by_title(db, song_title)
        if not song:
            raise SongNotFound(song_title)
        return playlist, song

    def add_song_to_playlist(self, db: Session, playlist_name: str, song_title: str) -> PlaylistSong:
        """
        Add a song to a playlist by playlist name and song title

        Lookups and the insert share one transaction. Adding the same song
        twice creates two membership rows.
        """
        try:
            playlist, song = self._resolve(db, playlist_name, song_title)
            entry = PlaylistSong(playlist_id=playlist.id, song_id=song.id)
            db.add(entry)
            db.commit()
            logger.info(f"Song {song.id} added to playlist {playlist.id}")
            return entry
        except LookupError:
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Error adding song to playlist: {e}")
            raise

    def get_playlist_songs(self, db: Session, playlist_name: str) -> List[Song]:
        """Songs in a playlist, in the order they were added"""
        playlist = self.get_playlist_by_name(db, playlist_name)
        if not playlist:
            raise PlaylistNotFound(playlist_name)
        # One row per membership, so repeated adds list the song repeatedly
        stmt = (
            select(Song)
            .join(PlaylistSong, Song.id == PlaylistSong.song_id)
            .where(PlaylistSong.playlist_id == playlist.id)
            .order_by(PlaylistSong.id)
        )
        return list(db.execute(stmt).scalars().all())

    def delete_playlist(self, db: Session, name: str) -> bool:
        """Delete a playlist and its membership rows, False if it does not exist"""
        playlist = self.get_playlist_by_name(db, name)
        if not playlist:
            return False

        try:
            # Children first so the delete holds under foreign key checks
            removed = db.query(PlaylistSong).filter(
                PlaylistSong.playlist_id == playlist.id
            ).delete(synchronize_session=False)
            db.delete(playlist)
            db.commit()
            logger.info(f"Playlist deleted: {playlist.id} ({removed} memberships)")
            return True
        except Exception as e:
            db.rollback()
            logger.error(f"Error deleting playlist: {e}")
            raise

    def remove_song_from_playlist(self, db: Session, playlist_name: str, song_title: str) -> int:
        """Remove every membership row linking the song to the playlist"""
        try:
            playlist, song = self._resolve(db, playlist_name, song_title)
            removed = db.query(PlaylistSong).filter(
                PlaylistSong.playlist_id == playlist.id,
                PlaylistSong.song_id == song.id
            ).delete(synchronize_session=False)
            db.commit()
            logger.info(f"Song {song.id} removed from playlist {playlist.id} ({removed} rows)")
            return removed
        except LookupError:
            db.rollback()
            raise
        except Exception as e:
            db.rollback()
            logger.error(f"Error removing song from playlist: {e}")
            raise

# Create singleton instance
playlist_service = PlaylistService()
