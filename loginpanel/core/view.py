"""Declarative widget tree built from the application state.

Nothing here touches Reflex. The tree is plain data that
:mod:`loginpanel.components.render` turns into components, and that tests can
inspect directly.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional, Tuple, Type, TypeVar, Union

from .model import (
    ApplicationState,
    FieldsChanged,
    FormFields,
    LoginSubmit,
    Message,
    Navigate,
    Page,
    ToggleTheme,
)
from .styles import ButtonStyle, ContainerStyle

LOGIN_TITLE = "Graphical User Interface - Iced"
REGISTER_TITLE = "Page two"
INPUT_WIDTH = 500.0


@dataclass
class Text:
    content: str
    size: Optional[int] = None


@dataclass
class TextInput:
    placeholder: str
    value: str
    on_input: Callable[[str], Message]
    width: float = INPUT_WIDTH
    padding: float = 10.0
    line_height: float = 1.75
    secure: bool = False


@dataclass
class Button:
    label: str
    on_press: Message
    style: ButtonStyle
    width: Optional[float] = None
    height: Optional[float] = None
    label_size: Optional[int] = None


@dataclass
class Column:
    children: List["Widget"] = field(default_factory=list)
    spacing: float = 0.0
    # (vertical, horizontal)
    padding: Tuple[float, float] = (0.0, 0.0)
    centered: bool = False
    fill_width: bool = False


@dataclass
class Row:
    children: List["Widget"] = field(default_factory=list)
    spacing: float = 0.0
    centered: bool = False


@dataclass
class Container:
    child: "Widget"
    padding: float = 0.0
    fill_width: bool = False
    fill_height: bool = False
    centered: bool = False
    style: Optional[ContainerStyle] = None


Widget = Union[Text, TextInput, Button, Column, Row, Container]

W = TypeVar("W")


def children_of(widget: Widget) -> List[Widget]:
    if isinstance(widget, (Column, Row)):
        return list(widget.children)
    if isinstance(widget, Container):
        return [widget.child]
    return []


def walk(widget: Widget) -> Iterator[Widget]:
    """Yield ``widget`` and every descendant, depth first."""

    yield widget
    for child in children_of(widget):
        yield from walk(child)


def find(widget: Widget, kind: Type[W]) -> List[W]:
    return [node for node in walk(widget) if isinstance(node, kind)]


def _input_field(
    placeholder: str,
    value: str,
    on_input: Callable[[str], Message],
    secure: bool = False,
) -> TextInput:
    return TextInput(placeholder=placeholder, value=value, on_input=on_input, secure=secure)


def _submit_button(label: str, message: Message) -> Button:
    return Button(
        label=label,
        on_press=message,
        style=ButtonStyle.STANDARD,
        width=INPUT_WIDTH,
        height=45.0,
        label_size=21,
    )


def _theme_button(label: str, message: Message) -> Button:
    return Button(label=label, on_press=message, style=ButtonStyle.THEME_BUTTON)


def login_page(fields: FormFields) -> Container:
    """Email and password form with a submit button."""

    email_input = _input_field(
        "Email Address ...",
        fields.email,
        lambda email: FieldsChanged(email, fields.password),
    )
    password_input = _input_field(
        "Password ...",
        fields.password,
        lambda password: FieldsChanged(fields.email, password),
        secure=True,
    )

    column = Column(
        children=[
            Text(LOGIN_TITLE),
            email_input,
            password_input,
            _submit_button("Login", LoginSubmit()),
        ],
        spacing=40.0,
        padding=(50.0, 20.0),
        centered=True,
    )
    return Container(column, padding=20.0, style=ContainerStyle.PANEL)


def register_page() -> Container:
    column = Column(children=[Text(REGISTER_TITLE, size=64)])
    return Container(column, fill_width=True, fill_height=True, centered=True)


def page_footer(navigation: Button) -> Container:
    row = Row(
        children=[_theme_button("Toggle Theme", ToggleTheme()), navigation],
        spacing=10.0,
        centered=True,
    )
    return Container(row, centered=True)


def view(state: ApplicationState) -> Container:
    """Build the widget tree for ``state``.

    The result only depends on the page and the form fields; the theme is
    applied later, when button and container styles are resolved.
    """

    if state.page is Page.LOGIN:
        content = login_page(state.fields)
        navigation = _theme_button("Page Two", Navigate(Page.REGISTER.value))
    else:
        content = register_page()
        navigation = _theme_button("Main Page - Login", Navigate(Page.LOGIN.value))

    wrapper = Column(
        children=[content, page_footer(navigation)],
        spacing=50.0,
        centered=True,
        fill_width=True,
    )
    return Container(
        wrapper,
        padding=20.0,
        fill_width=True,
        fill_height=True,
        centered=True,
        style=ContainerStyle.PANEL,
    )
