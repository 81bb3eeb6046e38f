"""
Common models (health, screen state)
"""

from pydantic import BaseModel
from typing import List, Optional

from user_admin.models.form import FormMode
from user_admin.models.user import User


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: str
    user_api_url: str


class FormSnapshot(BaseModel):
    """Form fields as exposed to clients (password never included)"""
    username: str
    email: str
    edit_id: Optional[int] = None
    mode: FormMode


class ScreenState(BaseModel):
    """Snapshot of everything the screen renders"""
    users: List[User]
    loading: bool
    error: str
    form: FormSnapshot
