from __future__ import annotations

import reflex as rx


class LoginPanelConfig(rx.Config):
    pass


config = LoginPanelConfig(
    app_name="loginpanel",
)
