
# ============================================================================
# FILE: songbook/db/models/playlist.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from songbook.db.base import Base

class Playlist(Base):
    """Named playlist of catalog songs"""
    __tablename__ = "playlists"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    entries = relationship(
        "PlaylistSong",
        back_populates="playlist",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

class PlaylistSong(Base):
    """Junction table for playlist songs (duplicates allowed)"""
    __tablename__ = "playlist_songs"

    id = Column(Integer, primary_key=True, index=True)
    playlist_id = Column(Integer, ForeignKey("playlists.id", ondelete="CASCADE"), nullable=False, index=True)
    song_id = Column(Integer, ForeignKey("songs.id", ondelete="CASCADE"), nullable=False, index=True)
    added_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    playlist = relationship("Playlist", back_populates="entries")
    song = relationship("Song", back_populates="memberships")
