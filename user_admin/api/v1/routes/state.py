"""
Screen state endpoint - JSON view of what the screen renders
"""

from fastapi import APIRouter, Depends
from user_admin.models.common import ScreenState
from user_admin.services.user_list_controller import UserListController
from user_admin.api.deps import get_controller

router = APIRouter()


@router.get("/state", response_model=ScreenState)  # Full path: /api/state
async def get_state(
    controller: UserListController = Depends(get_controller)
) -> ScreenState:
    """Current list, loading flag, error and form (without password)"""
    return controller.snapshot()
