from __future__ import annotations

import reflex as rx

from .core.model import WINDOW_TITLE
from .pages.index import index
from .utils.logging import configure_root


def _create_app() -> rx.App:
    """Instantiate the Reflex app and register the panel page."""

    configure_root()
    base_app = rx.App()
    base_app.add_page(index, route="/", title=WINDOW_TITLE)
    return base_app


app = _create_app()
