"""Application state and the transition function driving it."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Rust UI - Iced"


class Theme(str, Enum):
    """Global light/dark visual mode."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class Page(str, Enum):
    """The screen currently on display."""

    LOGIN = "login"
    REGISTER = "register"

    @classmethod
    def from_route(cls, route: str) -> Optional["Page"]:
        """Return the page registered under ``route`` or ``None``."""

        for page in cls:
            if page.value == route:
                return page
        return None


@dataclass(frozen=True)
class FormFields:
    email: str = ""
    password: str = ""


@dataclass(frozen=True)
class ApplicationState:
    """Everything the interface needs to draw itself."""

    theme: Theme = Theme.DARK
    page: Page = Page.LOGIN
    fields: FormFields = field(default_factory=FormFields)

    @staticmethod
    def from_values(theme: str, page: str, email: str, password: str) -> "ApplicationState":
        return ApplicationState(
            theme=Theme(theme),
            page=Page(page),
            fields=FormFields(email=email, password=password),
        )

    def to_values(self) -> Dict[str, str]:
        """Flatten into the string fields stored by the host state."""

        return {
            "theme": self.theme.value,
            "page": self.page.value,
            "email": self.fields.email,
            "password": self.fields.password,
        }


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class LoginSubmit:
    pass


@dataclass(frozen=True)
class Navigate:
    route: str


@dataclass(frozen=True)
class FieldsChanged:
    """Carries both fields, even when only one of them was edited."""

    email: str
    password: str


Message = Union[ToggleTheme, LoginSubmit, Navigate, FieldsChanged]


def initial_state() -> ApplicationState:
    return ApplicationState()


def update(state: ApplicationState, message: Message) -> ApplicationState:
    """Compute the state that follows ``state`` once ``message`` is handled.

    Every message is accepted; routes that name no page leave the state as it
    was. Anything that is not a message is a programming error.
    """

    logger.debug("Applying %r", message)

    if isinstance(message, ToggleTheme):
        return replace(state, theme=state.theme.toggled())
    if isinstance(message, LoginSubmit):
        # Authentication hooks in here once there is a backend to talk to.
        return state
    if isinstance(message, Navigate):
        page = Page.from_route(message.route)
        if page is None:
            return state
        return replace(state, page=page)
    if isinstance(message, FieldsChanged):
        return replace(
            state,
            fields=FormFields(email=message.email, password=message.password),
        )
    raise TypeError(f"Unsupported message: {message!r}")
