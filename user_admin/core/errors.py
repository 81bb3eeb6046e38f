"""
Remote User API error types
"""

from typing import Optional


class UserApiError(Exception):
    """Base error for any failed call against the remote User API"""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.__class__.__name__)
        self.message = message


class UserApiTransportError(UserApiError):
    """The request never completed or the response could not be read"""


class UserApiResponseError(UserApiError):
    """The server answered with a non-success status"""

    def __init__(self, status_code: int, message: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"HTTP {self.status_code}: {self.message or 'no message'}"
