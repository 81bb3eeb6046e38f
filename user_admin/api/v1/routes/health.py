"""
Health check endpoint
"""

from fastapi import APIRouter
from datetime import datetime
from user_admin.core.config import settings
from user_admin.models.common import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """
    Health check endpoint
    """
    return HealthResponse(
        status="ok",
        timestamp=datetime.now().isoformat(),
        user_api_url=settings.USER_API_URL
    )
