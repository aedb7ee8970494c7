"""Default HTML field renderer."""

from html import escape
from typing import Protocol


class FieldRenderer(Protocol):
    """Collaborator turning one editable field into markup."""

    def __call__(self, html_id: str, size: int, maxlength: int, value: str) -> str:
        ...


def input_field(html_id: str, size: int, maxlength: int, value: str) -> str:
    """Render a single text input box.

    Args:
        html_id: Name and id of the element
        size: Visible size of the box
        maxlength: Maximum number of characters
        value: Current value

    Returns:
        An html input element string
    """
    html_id = escape(html_id)
    return (
        f'<input type="text" name="{html_id}" id="{html_id}" '
        f'size="{size}" maxlength="{maxlength}" value="{escape(value or "")}">'
    )
