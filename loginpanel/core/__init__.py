from .model import (
    WINDOW_TITLE,
    ApplicationState,
    FieldsChanged,
    FormFields,
    LoginSubmit,
    Message,
    Navigate,
    Page,
    Theme,
    ToggleTheme,
    initial_state,
    update,
)
from .view import view

__all__ = [
    "WINDOW_TITLE",
    "ApplicationState",
    "FieldsChanged",
    "FormFields",
    "LoginSubmit",
    "Message",
    "Navigate",
    "Page",
    "Theme",
    "ToggleTheme",
    "initial_state",
    "update",
    "view",
]
