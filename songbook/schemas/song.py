# ============================================================================
# FILE: songbook/schemas/song.py
# ============================================================================
from pydantic import BaseModel

class SongResponse(BaseModel):
    """Schema for a catalog song"""
    id: int
    title: str
    filename: str

    class Config:
        from_attributes = True

class MessageResponse(BaseModel):
    """Schema for plain confirmation messages"""
    message: str
