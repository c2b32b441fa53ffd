
# ============================================================================
# FILE: songbook/db/models/song.py
# ============================================================================
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from songbook.db.base import Base

class Song(Base):
    """Uploaded audio file in the catalog"""
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False, index=True)
    filename = Column(String, unique=True, nullable=False)  # Key into the file store
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    memberships = relationship(
        "PlaylistSong",
        back_populates="song",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
