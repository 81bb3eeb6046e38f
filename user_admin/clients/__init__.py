"""
Remote connections module
"""

from user_admin.clients.user_api import (
    user_api_client_init,
    get_user_api_client,
    close_user_api_client,
)

__all__ = [
    "user_api_client_init",
    "get_user_api_client",
    "close_user_api_client",
]
