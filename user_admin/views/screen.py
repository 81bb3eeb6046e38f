"""
HTML rendering of the user management screen
"""

from html import escape
from typing import List, Optional

from user_admin.models.common import ScreenState
from user_admin.models.form import FormMode
from user_admin.models.user import User
from user_admin.services.user_list_controller import DELETE_CONFIRM_PROMPT
from user_admin.utils.formatting import format_created

PAGE_TITLE = "User Management"

_STYLE = """
body { font-family: sans-serif; background: #f3f4f6; margin: 0; padding: 2rem; }
main { max-width: 56rem; margin: 0 auto; }
.card { background: #fff; border-radius: .5rem; padding: 1.5rem; margin-bottom: 1.5rem; }
.error { background: #fee2e2; color: #b91c1c; padding: .75rem 1rem; border-radius: .5rem; margin-bottom: 1.5rem; }
input { display: block; width: 100%; padding: .5rem 1rem; margin-bottom: 1rem; box-sizing: border-box; }
table { width: 100%; border-collapse: collapse; }
th, td { text-align: left; padding: .5rem 1rem; }
.header { display: flex; justify-content: space-between; align-items: center; }
.inline { display: inline; }
.empty { color: #6b7280; text-align: center; padding: 2rem 0; }
"""


def _page(title: str, body: str) -> str:
    return (
        "<!DOCTYPE html>\n"
        "<html lang=\"en\">\n"
        "<head>\n"
        "<meta charset=\"utf-8\">\n"
        f"<title>{escape(title)}</title>\n"
        f"<style>{_STYLE}</style>\n"
        "</head>\n"
        f"<body>\n<main>\n{body}\n</main>\n</body>\n"
        "</html>\n"
    )


def _form_section(state: ScreenState) -> str:
    form = state.form
    editing = form.mode == FormMode.EDIT

    fields = [
        '<input type="text" name="username" placeholder="Username" '
        f'value="{escape(form.username)}" required>',
        '<input type="email" name="email" placeholder="Email" '
        f'value="{escape(form.email)}" required>',
    ]
    # Password only exists in create mode, never prefilled
    if not editing:
        fields.append('<input type="password" name="password" placeholder="Password" required>')

    buttons = [f'<button type="submit">{"Update" if editing else "Add"}</button>']
    if editing:
        buttons.append('<button type="submit" formaction="/cancel" formnovalidate>Cancel</button>')

    return (
        '<section class="card" id="user-form">\n'
        f'<h2>{"Edit User" if editing else "Add User"}</h2>\n'
        '<form method="post" action="/users">\n'
        + "\n".join(fields) + "\n"
        + '<div>' + " ".join(buttons) + '</div>\n'
        '</form>\n'
        '</section>'
    )


def _error_section(error: str) -> str:
    if not error:
        return ""
    return f'<div class="error" role="alert">{escape(error)}</div>'


def _user_row(user: User, date_format: Optional[str]) -> str:
    return (
        "<tr>"
        f"<td>{user.id}</td>"
        f"<td>{escape(user.username)}</td>"
        f"<td>{escape(user.email)}</td>"
        f"<td>{escape(format_created(user.created_at, date_format))}</td>"
        "<td>"
        f'<form class="inline" method="post" action="/users/{user.id}/edit">'
        '<button type="submit">Edit</button></form> '
        f'<form class="inline" method="get" action="/users/{user.id}/delete">'
        '<button type="submit">Delete</button></form>'
        "</td>"
        "</tr>"
    )


def _users_section(users: List[User], loading: bool, date_format: Optional[str]) -> str:
    refresh_button = (
        '<form method="post" action="/refresh">'
        f'<button type="submit"{" disabled" if loading else ""}>'
        f'{"Loading..." if loading else "Refresh"}</button>'
        '</form>'
    )

    if not users:
        content = '<p class="empty">No users found</p>'
    else:
        rows = "\n".join(_user_row(user, date_format) for user in users)
        content = (
            "<table>\n"
            "<thead><tr><th>ID</th><th>Username</th><th>Email</th>"
            "<th>Created</th><th>Actions</th></tr></thead>\n"
            f"<tbody>\n{rows}\n</tbody>\n"
            "</table>"
        )

    return (
        '<section class="card" id="users">\n'
        f'<div class="header"><h2>Users</h2>{refresh_button}</div>\n'
        f'{content}\n'
        '</section>'
    )


def render_screen(state: ScreenState, date_format: Optional[str] = None) -> str:
    """
    Render the whole screen

    Args:
        state: Controller snapshot
        date_format: strftime pattern for the Created column

    Returns:
        str: HTML document
    """
    parts = [
        f"<h1>{PAGE_TITLE}</h1>",
        _form_section(state),
        _error_section(state.error),
        _users_section(state.users, state.loading, date_format),
    ]
    return _page(PAGE_TITLE, "\n".join(part for part in parts if part))


def render_delete_confirmation(user_id: int, user: Optional[User] = None) -> str:
    """Render the confirmation step of a deletion"""
    target = f"{escape(user.username)} (ID {user_id})" if user else f"ID {user_id}"
    body = (
        f"<h1>{PAGE_TITLE}</h1>\n"
        '<section class="card" id="confirm-delete">\n'
        f"<p>{DELETE_CONFIRM_PROMPT}</p>\n"
        f"<p>{target}</p>\n"
        f'<form method="post" action="/users/{user_id}/delete">'
        '<button type="submit" name="confirm" value="yes">OK</button> '
        '<button type="submit" name="confirm" value="no">Cancel</button>'
        "</form>\n"
        "</section>"
    )
    return _page(PAGE_TITLE, body)
