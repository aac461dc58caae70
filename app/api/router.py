from fastapi import APIRouter

from app.api.standings import router as standings_router
from app.api.matches import router as matches_router

api_router = APIRouter()

# Public standings viewer
api_router.include_router(standings_router)

# Match score aggregates
api_router.include_router(matches_router)
