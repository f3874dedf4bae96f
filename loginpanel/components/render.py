from __future__ import annotations

from typing import Any, Callable, Dict

import reflex as rx

from ..core.model import FieldsChanged, LoginSubmit, Message, Navigate, Theme, ToggleTheme
from ..core.styles import Appearance, button_appearance, container_appearance, themed_style
from ..core.view import Button, Column, Container, Row, Text, TextInput, Widget
from ..state import PanelState


def _px(value: float) -> str:
    return f"{value:g}px"


def event_for(message: Message) -> Any:
    """Map a message onto the ``PanelState`` handler that applies it."""

    if isinstance(message, ToggleTheme):
        return PanelState.toggle_theme
    if isinstance(message, LoginSubmit):
        return PanelState.login_submit
    if isinstance(message, Navigate):
        return PanelState.navigate(message.route)
    if isinstance(message, FieldsChanged):
        return PanelState.login_field_changed(message.email, message.password)
    raise TypeError(f"Unsupported message: {message!r}")


def _style_props(resolve: Callable[[Theme], Appearance]) -> Dict[str, Any]:
    props: Dict[str, Any] = {}
    for name, (light, dark) in themed_style(resolve).items():
        props[name] = light if light == dark else rx.cond(PanelState.light_mode, light, dark)
    return props


def _text(node: Text) -> rx.Component:
    if node.size is None:
        return rx.text(node.content)
    return rx.text(node.content, font_size=_px(node.size))


def input_handler(node: TextInput) -> Callable[[Any], Any]:
    """Change handler sending the edited value together with its sibling field."""

    return lambda value: event_for(node.on_input(value))


def _text_input(node: TextInput) -> rx.Component:
    return rx.input(
        placeholder=node.placeholder,
        value=node.value,
        on_change=input_handler(node),
        type="password" if node.secure else "text",
        width=_px(node.width),
        padding=_px(node.padding),
        line_height=f"{node.line_height:g}",
    )


def _button(node: Button) -> rx.Component:
    props = _style_props(lambda theme: button_appearance(node.style, theme))
    if node.width is not None:
        props["width"] = _px(node.width)
    if node.height is not None:
        props["height"] = _px(node.height)
    if node.label_size is not None:
        props["font_size"] = _px(node.label_size)
    return rx.button(
        node.label,
        on_click=event_for(node.on_press),
        cursor="pointer",
        **props,
    )


def _column(node: Column) -> rx.Component:
    vertical, horizontal = node.padding
    props: Dict[str, Any] = {
        "gap": _px(node.spacing),
        "padding": f"{_px(vertical)} {_px(horizontal)}",
        "align": "center" if node.centered else "start",
    }
    if node.fill_width:
        props["width"] = "100%"
    return rx.vstack(*[render(child) for child in node.children], **props)


def _row(node: Row) -> rx.Component:
    return rx.hstack(
        *[render(child) for child in node.children],
        gap=_px(node.spacing),
        align="center" if node.centered else "start",
    )


def _container(node: Container) -> rx.Component:
    props: Dict[str, Any] = {"padding": _px(node.padding)}
    if node.fill_width:
        props["width"] = "100%"
    if node.fill_height:
        props["flex_grow"] = "1"
        props["align_self"] = "stretch"
    if node.style is not None:
        props.update(_style_props(container_appearance))

    child = render(node.child)
    if node.centered:
        return rx.center(child, **props)
    return rx.box(child, **props)


def render(widget: Widget) -> rx.Component:
    """Translate a widget tree into Reflex components."""

    if isinstance(widget, Text):
        return _text(widget)
    if isinstance(widget, TextInput):
        return _text_input(widget)
    if isinstance(widget, Button):
        return _button(widget)
    if isinstance(widget, Column):
        return _column(widget)
    if isinstance(widget, Row):
        return _row(widget)
    if isinstance(widget, Container):
        return _container(widget)
    raise TypeError(f"Unsupported widget: {widget!r}")
