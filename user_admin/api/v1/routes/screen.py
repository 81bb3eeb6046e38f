"""
User management screen endpoints
HTML page plus the form posts that drive the controller (post/redirect/get)
"""

import logging
from fastapi import APIRouter, Depends, Form, HTTPException, status
from fastapi.responses import HTMLResponse, RedirectResponse
from user_admin.core.config import settings
from user_admin.services.user_list_controller import UserListController
from user_admin.views.screen import render_delete_confirmation, render_screen
from user_admin.api.deps import get_controller

logger = logging.getLogger(__name__)

router = APIRouter()


def _back_to_screen() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def screen(
    controller: UserListController = Depends(get_controller)
) -> HTMLResponse:
    """Render the form, the error area and the users table"""
    return HTMLResponse(render_screen(controller.snapshot(), settings.DATE_FORMAT))


@router.post("/users")
async def submit_user(
    username: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    controller: UserListController = Depends(get_controller)
) -> RedirectResponse:
    """
    Create or update depending on the form mode
    Password is ignored while editing
    """
    controller.update_form(username=username, email=email, password=password)
    await controller.submit()
    return _back_to_screen()


@router.post("/users/{user_id}/edit")
async def edit_user(
    user_id: int,
    controller: UserListController = Depends(get_controller)
) -> RedirectResponse:
    """Load a listed user into the form"""
    user = controller.find_user(user_id)
    if not user:
        raise HTTPException(status_code=404, detail=f"User {user_id} not in the current list")

    controller.begin_edit(user)
    return _back_to_screen()


@router.post("/cancel")
async def cancel_edit(
    controller: UserListController = Depends(get_controller)
) -> RedirectResponse:
    """Leave edit mode"""
    controller.cancel_edit()
    return _back_to_screen()


@router.get("/users/{user_id}/delete", response_class=HTMLResponse)
async def confirm_delete(
    user_id: int,
    controller: UserListController = Depends(get_controller)
) -> HTMLResponse:
    """Ask for confirmation before deleting"""
    return HTMLResponse(render_delete_confirmation(user_id, controller.find_user(user_id)))


@router.post("/users/{user_id}/delete")
async def delete_user(
    user_id: int,
    confirm: str = Form("no"),
    controller: UserListController = Depends(get_controller)
) -> RedirectResponse:
    """Delete when the confirmation form answered yes"""
    confirmed = confirm.strip().lower() == "yes"
    await controller.remove(user_id, lambda prompt: confirmed)
    return _back_to_screen()


@router.post("/refresh")
async def refresh(
    controller: UserListController = Depends(get_controller)
) -> RedirectResponse:
    """Reload the list from the API"""
    await controller.refresh()
    return _back_to_screen()
