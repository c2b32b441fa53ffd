# ============================================================================
# FILE: songbook/api/endpoints/playlists.py
# ============================================================================
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List
from songbook.db.session import get_db
from songbook.schemas.playlist import PlaylistCreate, PlaylistResponse, PlaylistSongAdd
from songbook.schemas.song import MessageResponse, SongResponse
from songbook.services.playlist_service import playlist_service, PlaylistNotFound, SongNotFound
import logging

logger = logging.getLogger(__name__)
router = APIRouter()

@router.post("", response_model=PlaylistResponse)
def create_playlist(
    playlist_data: PlaylistCreate,
    db: Session = Depends(get_db)
):
    """Create a new playlist"""
    if not playlist_data.name:
        raise HTTPException(status_code=400, detail="Playlist name is required")
    try:
        return playlist_service.create_playlist(db, playlist_data.name)
    except Exception as e:
        logger.error(f"Create playlist error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("", response_model=List[PlaylistResponse])
def list_playlists(db: Session = Depends(get_db)):
    """Get all playlists"""
    try:
        return playlist_service.get_playlists(db)
    except Exception as e:
        logger.error(f"List playlists error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("/{playlist_name}/add", response_model=MessageResponse)
def add_song_to_playlist(
    playlist_name: str,
    song_data: PlaylistSongAdd,
    db: Session = Depends(get_db)
):
    """Add a song (by title) to a playlist (by name)"""
    if not song_data.song_title:
        raise HTTPException(status_code=400, detail="Song title is required")
    try:
        playlist_service.add_song_to_playlist(db, playlist_name, song_data.song_title)
    except PlaylistNotFound:
        raise HTTPException(status_code=404, detail="Playlist not found")
    except SongNotFound:
        raise HTTPException(status_code=404, detail="Song not found")
    except Exception as e:
        logger.error(f"Add song to playlist error: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    return {"message": f'Added "{song_data.song_title}" to "{playlist_name}"'}

@router.get("/{playlist_name}/songs", response_model=List[SongResponse])
def get_playlist_songs(
    playlist_name: str,
    db: Session = Depends(get_db)
):
    """Get the songs in a playlist"""
    try:
        return playlist_service.get_playlist_songs(db, playlist_name)
    except PlaylistNotFound:
        raise HTTPException(status_code=404, detail="Playlist not found")
    except Exception as e:
        logger.error(f"Playlist songs error: {e}")
        raise HTTPException(status_code=500, detail=str(e))

@router.delete("/delete/{name}", response_model=MessageResponse)
def delete_playlist(
    name: str,
    db: Session = Depends(get_db)
):
    """Delete a playlist and its memberships"""
    try:
        deleted = playlist_service.delete_playlist(db, name)
    except Exception as e:
        logger.error(f"Error deleting playlist: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete playlist")

    if not deleted:
        raise HTTPException(status_code=404, detail="Playlist not found")
    return {"message": f'Playlist "{name}" has been deleted successfully!'}

@router.delete("/{playlist_name}/songs/delete/{song_title}", response_model=MessageResponse)
def remove_song_from_playlist(
    playlist_name: str,
    song_title: str,
    db: Session = Depends(get_db)
):
    """Remove a song from a playlist"""
    try:
        playlist_service.remove_song_from_playlist(db, playlist_name, song_title)
    except PlaylistNotFound:
        raise HTTPException(status_code=404, detail="Playlist not found")
    except SongNotFound:
        raise HTTPException(status_code=404, detail="Song not found")
    except Exception as e:
        logger.error(f"Error deleting song from playlist: {e}")
        raise HTTPException(status_code=500, detail="Failed to delete song from playlist")
    return {
        "message": f'Song "{song_title}" has been removed from the playlist "{playlist_name}" successfully!'
    }
