"""
User repository - Data access layer for users on the remote User API
"""

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError

from user_admin.core.errors import UserApiResponseError, UserApiTransportError
from user_admin.models.user import (
    ApiErrorBody,
    CreateUserRequest,
    UpdateUserRequest,
    User,
    UserListResponse,
)

logger = logging.getLogger(__name__)

USER_PATH = "/user"


class UserApiRepository:
    """
    Thin wrapper over the four CRUD endpoints of the remote User API.

    Every method either returns normally on a 2xx answer or raises a
    UserApiError subclass:

    - UserApiTransportError when the request never completed
    - UserApiResponseError when the server answered with a non-2xx status,
      carrying the ``message`` field of the body when there is one
    """

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def list_users(self) -> List[User]:
        """
        Get all users

        Returns:
            list: Users in server order
        """
        response = await self._request("GET", USER_PATH)

        try:
            body = UserListResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(f"Unreadable user list response: {e}")
            raise UserApiTransportError(f"Unreadable user list response: {e}") from e

        users = body.data or []
        logger.info(f"Fetched {len(users)} users")
        return users

    async def create_user(self, username: str, email: str, password: str) -> None:
        """
        Create a new user

        Args:
            username: Username
            email: Email
            password: Plaintext password, sent only on creation
        """
        payload = CreateUserRequest(username=username, email=email, password=password)
        await self._request("POST", USER_PATH, payload.model_dump())
        logger.info(f"Created user: {username}")

    async def update_user(self, user_id: int, username: str, email: str) -> None:
        """
        Update username and email of a user

        Args:
            user_id: User ID
            username: New username
            email: New email
        """
        payload = UpdateUserRequest(username=username, email=email)
        await self._request("PUT", f"{USER_PATH}/{user_id}", payload.model_dump())
        logger.info(f"Updated user {user_id}")

    async def delete_user(self, user_id: int) -> None:
        """
        Delete a user (response body is ignored)

        Args:
            user_id: User ID
        """
        await self._request("DELETE", f"{USER_PATH}/{user_id}")
        logger.info(f"Deleted user {user_id}")

    async def _request(self, method: str, path: str,
                       payload: Optional[dict] = None) -> httpx.Response:
        try:
            if payload is None:
                response = await self.client.request(method, path)
            else:
                response = await self.client.request(method, path, json=payload)
        except httpx.HTTPError as e:
            logger.warning(f"{method} {path} failed: {str(e) or type(e).__name__}")
            raise UserApiTransportError(str(e) or type(e).__name__) from e

        if response.is_success:
            return response

        message = _error_message(response)
        logger.warning(f"{method} {path} returned {response.status_code}: {message}")
        raise UserApiResponseError(response.status_code, message)


def _error_message(response: httpx.Response) -> Optional[str]:
    """Extract the ``message`` field of a failure body, if any"""
    try:
        body: Any = response.json()
    except ValueError:
        return None

    if not isinstance(body, dict):
        return None

    try:
        return ApiErrorBody.model_validate(body).message
    except ValidationError:
        return None
