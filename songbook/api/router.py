# ============================================================================
# FILE: songbook/api/router.py
# ============================================================================
from fastapi import APIRouter
from songbook.api.endpoints import upload, songs, playlists

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(upload.router, tags=["upload"])
api_router.include_router(songs.router, prefix="/songs", tags=["songs"])
api_router.include_router(playlists.router, prefix="/playlists", tags=["playlists"])
