from __future__ import annotations

import reflex as rx

from ..components.render import render
from ..core.layout import app_shell
from ..core.model import ApplicationState, FormFields, Page
from ..core.view import view
from ..state import PanelState


def _bound_state(page: Page) -> ApplicationState:
    """State whose form fields are the live session vars."""

    fields = FormFields(
        email=PanelState.email,  # type: ignore[arg-type]
        password=PanelState.password,  # type: ignore[arg-type]
    )
    return ApplicationState(page=page, fields=fields)


def index() -> rx.Component:
    """Login form or register placeholder, depending on the current page."""

    return app_shell(
        rx.cond(
            PanelState.page == Page.LOGIN.value,
            render(view(_bound_state(Page.LOGIN))),
            render(view(_bound_state(Page.REGISTER))),
        )
    )
