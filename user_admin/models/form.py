"""
Form state models
"""

from enum import Enum
from pydantic import BaseModel
from typing import Optional


class FormMode(str, Enum):
    """The two variants of the user form"""
    CREATE = "create"
    EDIT = "edit"


class FormState(BaseModel):
    """
    In-progress create/edit input

    edit_id set means the form edits that user and the password field
    is neither rendered nor sent.
    """
    username: str = ""
    email: str = ""
    password: str = ""
    edit_id: Optional[int] = None

    @property
    def mode(self) -> FormMode:
        return FormMode.CREATE if self.edit_id is None else FormMode.EDIT

    @property
    def is_editing(self) -> bool:
        return self.edit_id is not None
