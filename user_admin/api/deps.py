"""
API Dependencies - Access to the screen controller
"""

from fastapi import HTTPException, Request, status

from user_admin.services.user_list_controller import UserListController


async def get_controller(request: Request) -> UserListController:
    """
    Get the controller owned by the application
    Set on app.state during startup
    """
    controller = getattr(request.app.state, "controller", None)
    if controller is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="User screen not initialized",
        )
    return controller
