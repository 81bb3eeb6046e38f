"""
User list controller - Owns the list-and-form state of the screen

The cached user list mirrors the server's last answer and is only ever
replaced by a full refetch. Writes never patch it locally.
"""

import logging
from typing import Callable, List, Optional

from user_admin.core.errors import UserApiError, UserApiResponseError
from user_admin.models.common import FormSnapshot, ScreenState
from user_admin.models.form import FormState
from user_admin.models.user import User
from user_admin.repositories.user_repo import UserApiRepository

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch users"
SAVE_FAILED_MESSAGE = "Failed to save user"
DELETE_FAILED_MESSAGE = "Failed to delete user"
DELETE_CONFIRM_PROMPT = "Delete this user?"

Confirm = Callable[[str], bool]


class UserListController:
    """
    Mediates every read and write of the screen against the remote API.

    All operations run on one event loop. Nothing guards overlapping
    submits: two in-flight writes each overwrite ``error`` when they
    resolve, the last one wins.
    """

    def __init__(self, repository: UserApiRepository):
        self.repository = repository
        self.users: List[User] = []
        self.loading: bool = False
        self.error: str = ""
        self.form: FormState = FormState()

    async def mount(self) -> None:
        """Reset to the initial state and load the list"""
        self.users = []
        self.loading = False
        self.error = ""
        self.form = FormState()
        await self.refresh()

    async def refresh(self) -> None:
        """
        Replace the cached list with the server's list

        On failure the previous list is kept and ``error`` is set.
        ``loading`` is cleared on every exit path.
        """
        self.loading = True
        self.error = ""
        try:
            self.users = await self.repository.list_users()
        except UserApiResponseError as e:
            self.error = e.message or FETCH_FAILED_MESSAGE
        except UserApiError as e:
            logger.warning(f"User list refresh failed: {e}")
            self.error = FETCH_FAILED_MESSAGE
        finally:
            self.loading = False

    async def submit(self, form: Optional[FormState] = None) -> bool:
        """
        Send the form to the create or update endpoint

        Create mode sends username, email and password. Edit mode sends
        username and email to the user addressed by ``edit_id``.

        Args:
            form: Form to submit, defaults to the controller's own form

        Returns:
            bool: True if the server accepted the write
        """
        form = form if form is not None else self.form
        self.error = ""

        try:
            if form.is_editing:
                await self.repository.update_user(form.edit_id, form.username, form.email)
            else:
                await self.repository.create_user(form.username, form.email, form.password)
        except UserApiResponseError as e:
            self.error = e.message or SAVE_FAILED_MESSAGE
            return False
        except UserApiError as e:
            logger.warning(f"User save failed: {e}")
            self.error = SAVE_FAILED_MESSAGE
            return False

        self.form = FormState()
        await self.refresh()
        return True

    async def remove(self, user_id: int, confirm: Confirm) -> bool:
        """
        Delete a user after interactive confirmation

        Args:
            user_id: User ID
            confirm: Asked with the prompt text, a falsy answer aborts
                without any request

        Returns:
            bool: True if the server deleted the user
        """
        if not confirm(DELETE_CONFIRM_PROMPT):
            logger.debug(f"Deletion of user {user_id} declined")
            return False

        try:
            await self.repository.delete_user(user_id)
        except UserApiError as e:
            logger.warning(f"Deletion of user {user_id} failed: {e}")
            self.error = DELETE_FAILED_MESSAGE
            return False

        await self.refresh()
        return True

    def begin_edit(self, user: User) -> None:
        """Load a user into the form and switch to edit mode"""
        self.form = FormState(username=user.username, email=user.email,
                              password="", edit_id=user.id)

    def cancel_edit(self) -> None:
        """Leave edit mode with an empty form"""
        self.form = FormState()

    def update_form(self, username: Optional[str] = None, email: Optional[str] = None,
                    password: Optional[str] = None) -> None:
        """Mirror field input into the form (password is dropped in edit mode)"""
        changes = {}
        if username is not None:
            changes["username"] = username
        if email is not None:
            changes["email"] = email
        if password is not None and not self.form.is_editing:
            changes["password"] = password
        if changes:
            self.form = self.form.model_copy(update=changes)

    def find_user(self, user_id: int) -> Optional[User]:
        """Look up a user in the cached list"""
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    def snapshot(self) -> ScreenState:
        """Current state as rendered by the screen"""
        return ScreenState(
            users=list(self.users),
            loading=self.loading,
            error=self.error,
            form=FormSnapshot(
                username=self.form.username,
                email=self.form.email,
                edit_id=self.form.edit_id,
                mode=self.form.mode,
            ),
        )
