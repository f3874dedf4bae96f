from __future__ import annotations

import reflex as rx

from .core.model import (
    ApplicationState,
    FieldsChanged,
    LoginSubmit,
    Message,
    Navigate,
    Theme,
    ToggleTheme,
    initial_state,
    update,
)

_DEFAULTS = initial_state().to_values()


class PanelState(rx.State):
    """Session state for the login panel.

    The vars mirror :class:`ApplicationState` field by field. Handlers never
    change them directly; they build a message and run it through ``update``.
    """

    theme: str = _DEFAULTS["theme"]
    page: str = _DEFAULTS["page"]
    email: str = _DEFAULTS["email"]
    password: str = _DEFAULTS["password"]

    def _snapshot(self) -> ApplicationState:
        return ApplicationState.from_values(
            theme=self.theme,
            page=self.page,
            email=self.email,
            password=self.password,
        )

    def _dispatch(self, message: Message) -> None:
        next_state = update(self._snapshot(), message)
        for name, value in next_state.to_values().items():
            if getattr(self, name) != value:
                setattr(self, name, value)

    @rx.var
    def light_mode(self) -> bool:
        return self.theme == Theme.LIGHT.value

    def toggle_theme(self) -> None:
        """Toggle between light and dark color schemes."""

        self._dispatch(ToggleTheme())

    def login_submit(self) -> None:
        self._dispatch(LoginSubmit())

    def navigate(self, route: str) -> None:
        self._dispatch(Navigate(route))

    def login_field_changed(self, email: str, password: str) -> None:
        self._dispatch(FieldsChanged(email, password))
