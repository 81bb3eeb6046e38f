"""
User models
"""

from pydantic import BaseModel
from typing import List, Optional


class User(BaseModel):
    """User record as returned by the remote API"""
    id: int
    username: str
    email: str
    created_at: Optional[str] = None


class UserListResponse(BaseModel):
    """Response body of the list endpoint"""
    data: Optional[List[User]] = None


class CreateUserRequest(BaseModel):
    """Request to create user"""
    username: str
    email: str
    password: str


class UpdateUserRequest(BaseModel):
    """Request to update user (password is never sent on update)"""
    username: str
    email: str


class ApiErrorBody(BaseModel):
    """Failure body of the remote API"""
    message: Optional[str] = None
