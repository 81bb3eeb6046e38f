"""
API Version 1 Router - Main router that includes all sub-routers
"""

from fastapi import APIRouter
from user_admin.api.v1.routes import (
    health,
    state,
    screen
)

# JSON API router, mounted under /api
api_router = APIRouter()

api_router.include_router(health.router, tags=["Health"])  # /api/health
api_router.include_router(state.router, tags=["State"])  # /api/state

# HTML screen router, mounted at the root
screen_router = APIRouter()

screen_router.include_router(screen.router, tags=["Screen"])  # /, /users, /refresh, /cancel
