"""Visual attributes for the button and container variants.

Colors are stored as float channels in ``[0, 1]`` and only turned into CSS at
the edge, through :meth:`Appearance.to_style`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from .model import Theme


@dataclass(frozen=True)
class Color:
    r: float
    g: float
    b: float
    a: float = 1.0

    def to_css(self) -> str:
        red, green, blue = (round(channel * 255) for channel in (self.r, self.g, self.b))
        return f"rgba({red}, {green}, {blue}, {self.a:g})"


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
STANDARD_BLUE = Color(0.059, 0.463, 0.702)


@dataclass(frozen=True)
class Shadow:
    color: Color = TRANSPARENT
    offset_x: float = 0.0
    offset_y: float = 0.0
    blur_radius: float = 0.0

    def to_css(self) -> str:
        if self.color.a == 0 or (
            self.offset_x == 0 and self.offset_y == 0 and self.blur_radius == 0
        ):
            return "none"
        return (
            f"{self.offset_x:g}px {self.offset_y:g}px {self.blur_radius:g}px "
            f"{self.color.to_css()}"
        )


NO_SHADOW = Shadow()


@dataclass(frozen=True)
class Appearance:
    """Resolved look of a widget for one theme.

    ``None`` for ``background`` or ``text_color`` means the widget inherits
    whatever its parent draws.
    """

    background: Optional[Color] = None
    border_radius: float = 0.0
    shadow: Shadow = NO_SHADOW
    text_color: Optional[Color] = None

    def to_style(self) -> Dict[str, str]:
        style = {
            "background": self.background.to_css() if self.background else "none",
            "border_radius": f"{self.border_radius:g}px",
            "box_shadow": self.shadow.to_css(),
        }
        if self.text_color is not None:
            style["color"] = self.text_color.to_css()
        return style


@dataclass(frozen=True)
class Palette:
    background: Color
    text: Color


class ButtonStyle(Enum):
    STANDARD = "standard"
    THEME_BUTTON = "theme_button"


class ContainerStyle(Enum):
    PANEL = "panel"


def button_appearance(style: ButtonStyle, theme: Theme) -> Appearance:
    if style is ButtonStyle.STANDARD:
        return Appearance(
            background=STANDARD_BLUE,
            border_radius=5.0,
            shadow=Shadow(color=BLACK, offset_y=4.0, blur_radius=20.0),
            text_color=WHITE,
        )
    return Appearance(
        background=TRANSPARENT,
        text_color=BLACK if theme is Theme.LIGHT else WHITE,
    )


def container_appearance(theme: Theme) -> Appearance:
    """Rounded, shadowed frame with no fill.

    ``theme`` does not change the result; panels look the same in both modes.
    """

    return Appearance(
        border_radius=5.0,
        shadow=Shadow(color=BLACK, offset_y=2.0, blur_radius=40.0),
    )


def palette(theme: Theme) -> Palette:
    """Page background and default text colors for ``theme``."""

    if theme is Theme.LIGHT:
        return Palette(background=WHITE, text=BLACK)
    return Palette(
        background=Color(0x20 / 255, 0x22 / 255, 0x25 / 255),
        text=Color(0.9, 0.9, 0.9),
    )


def themed_style(resolve: Callable[[Theme], Appearance]) -> Dict[str, Tuple[str, str]]:
    """Resolve an appearance for both themes.

    Returns each CSS property as a ``(light, dark)`` pair. Properties only set
    for one theme fall back to ``inherit`` for the other.
    """

    light = resolve(Theme.LIGHT).to_style()
    dark = resolve(Theme.DARK).to_style()
    return {
        name: (light.get(name, "inherit"), dark.get(name, "inherit"))
        for name in {**light, **dark}
    }
