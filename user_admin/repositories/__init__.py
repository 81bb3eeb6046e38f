"""
Data Access Layer (Repositories)
"""

from user_admin.repositories.user_repo import (
    UserApiRepository,
    USER_PATH,
)

__all__ = [
    "UserApiRepository",
    "USER_PATH",
]
