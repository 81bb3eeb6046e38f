"""
Pydantic Models (Schemas)
"""

# User models
from user_admin.models.user import (
    User,
    UserListResponse,
    CreateUserRequest,
    UpdateUserRequest,
    ApiErrorBody,
)

# Form models
from user_admin.models.form import (
    FormMode,
    FormState,
)

# Common models
from user_admin.models.common import (
    HealthResponse,
    FormSnapshot,
    ScreenState,
)

__all__ = [
    # User
    "User",
    "UserListResponse",
    "CreateUserRequest",
    "UpdateUserRequest",
    "ApiErrorBody",
    # Form
    "FormMode",
    "FormState",
    # Common
    "HealthResponse",
    "FormSnapshot",
    "ScreenState",
]
