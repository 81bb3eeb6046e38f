"""
Business Logic Services
"""

from user_admin.services.user_list_controller import (
    UserListController,
    FETCH_FAILED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    DELETE_FAILED_MESSAGE,
    DELETE_CONFIRM_PROMPT,
)

__all__ = [
    "UserListController",
    "FETCH_FAILED_MESSAGE",
    "SAVE_FAILED_MESSAGE",
    "DELETE_FAILED_MESSAGE",
    "DELETE_CONFIRM_PROMPT",
]
