from __future__ import annotations

import reflex as rx

from ..state import PanelState
from .model import Theme
from .styles import palette


def app_shell(*children: rx.Component) -> rx.Component:
    """Wrap pages in a full-window surface painted for the active theme.

    The Radix theme gets the same appearance, so default-styled widgets such
    as the text inputs switch along with the page.
    """

    light = palette(Theme.LIGHT)
    dark = palette(Theme.DARK)

    surface = rx.box(
        *children,
        width="100%",
        min_height="100vh",
        display="flex",
        background=rx.cond(
            PanelState.light_mode,
            light.background.to_css(),
            dark.background.to_css(),
        ),
        color=rx.cond(
            PanelState.light_mode,
            light.text.to_css(),
            dark.text.to_css(),
        ),
    )
    return rx.theme(
        surface,
        appearance=rx.cond(
            PanelState.light_mode,
            Theme.LIGHT.value,
            Theme.DARK.value,
        ),
    )
