
# ============================================================================
# FILE: songbook/schemas/playlist.py
# ============================================================================
from pydantic import BaseModel, Field
from typing import Optional

class PlaylistCreate(BaseModel):
    """Schema for creating a playlist"""
    name: Optional[str] = None

class PlaylistSongAdd(BaseModel):
    """Schema for adding a song to playlist"""
    song_title: Optional[str] = Field(None, alias="songTitle")

    class Config:
        populate_by_name = True

class PlaylistResponse(BaseModel):
    """Schema for playlist response"""
    id: int
    name: str

    class Config:
        from_attributes = True
