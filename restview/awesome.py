"""Icon factory that draws glyphs from an icon font.

Icons are described, not rasterised: rendering an icon yields the text to
draw, the colour to draw it in and the font to draw it with.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from functools import cache
from typing import Any, Mapping

from .iconnames import named_codepoints as _registered_codepoints

__all__ = [
    "IconMode",
    "Font",
    "Icon",
    "IconPainter",
    "CharIconPainter",
    "Awesome",
    "merge_options",
    "instance",
]

FONT_AWESOME_FAMILY = "FontAwesome"

Color = tuple[int, int, int, int]


class IconMode(Enum):
    """The state a widget shows an icon in."""

    NORMAL = "normal"
    DISABLED = "disabled"
    ACTIVE = "active"
    SELECTED = "selected"


@dataclass(frozen=True)
class Font:
    """A font family at a size in pixels."""

    family: str
    pixel_size: int


def merge_options(
    defaults: Mapping[str, Any], override: Mapping[str, Any] | None
) -> dict[str, Any]:
    """Return the defaults with every entry of ``override`` laid over them."""
    result = dict(defaults)
    if override:
        result.update(override)
    return result


def _round_half_away(value: float) -> int:
    if value >= 0:
        return int(math.floor(value + 0.5))
    return -int(math.floor(-value + 0.5))


class IconPainter(ABC):
    """Something that knows how to draw an icon from a set of options."""

    @abstractmethod
    def paint(
        self,
        awesome: Awesome,
        rect_height: int,
        mode: IconMode,
        options: Mapping[str, Any],
    ) -> Any:
        """Draw the icon into a square of ``rect_height`` and return the result."""


class CharIconPainter(IconPainter):
    """Draws a single character of the icon font."""

    _MODE_KEYS = {
        IconMode.DISABLED: ("color-disabled", "text-disabled"),
        IconMode.ACTIVE: ("color-active", "text-active"),
        IconMode.SELECTED: ("color-selected", "text-selected"),
    }

    def paint(
        self,
        awesome: Awesome,
        rect_height: int,
        mode: IconMode,
        options: Mapping[str, Any],
    ) -> dict[str, Any]:
        """Return the glyph text, colour and font for the given mode."""
        color = options.get("color")
        text = options.get("text")
        text = "" if text is None else str(text)

        keys = self._MODE_KEYS.get(mode)
        if keys is not None:
            color_key, text_key = keys
            color = options.get(color_key)
            alternative = options.get(text_key)
            if alternative is not None:
                text = str(alternative)

        scale = float(options.get("scale-factor") or 0.0)
        draw_size = _round_half_away(rect_height * scale)
        return {"text": text, "color": color, "font": awesome.font(draw_size)}


@dataclass
class Icon:
    """An icon bound to a painter and the options it is drawn with."""

    awesome: Awesome
    painter: IconPainter
    options: dict[str, Any] = field(default_factory=dict)

    def render(self, rect_height: int, mode: IconMode = IconMode.NORMAL) -> Any:
        """Ask the painter to draw this icon at the given height and mode."""
        return self.painter.paint(self.awesome, rect_height, mode, self.options)


class Awesome:
    """Makes icons from an icon font, by code point or by registered name."""

    def __init__(self) -> None:
        self.font_name = ""
        self._named: dict[str, int] = {}
        self._painters: dict[str, IconPainter] = {}
        self._defaults: dict[str, Any] = {}
        self._font_painter = CharIconPainter()

        self.set_default_option("color", (50, 50, 50, 255))
        self.set_default_option("color-disabled", (70, 70, 70, 60))
        self.set_default_option("color-active", (10, 10, 10, 255))
        self.set_default_option("color-selected", (10, 10, 10, 255))
        self.set_default_option("scale-factor", 0.9)
        for key in ("text", "text-disabled", "text-active", "text-selected"):
            self.set_default_option(key, None)

    def init(self, fontname: str) -> None:
        """Use ``fontname`` as the icon font."""
        self.font_name = fontname

    def init_font_awesome(self) -> bool:
        """Use the Font Awesome font and register all of its icon names."""
        self.font_name = FONT_AWESOME_FAMILY
        self._named.update(_registered_codepoints())
        return True

    def add_named_codepoint(self, name: str, code_point: int) -> None:
        """Register ``name`` as a name for ``code_point``."""
        self._named[name] = code_point

    def named_codepoints(self) -> dict[str, int]:
        """Return a copy of the registered names and their code points."""
        return dict(self._named)

    def set_default_option(self, name: str, value: Any) -> None:
        """Set an option passed to painters unless an icon overrides it."""
        self._defaults[name] = value

    def default_option(self, name: str) -> Any:
        """Return a default option, or None if it is not set."""
        return self._defaults.get(name)

    def icon(
        self, name_or_char: int | str, options: Mapping[str, Any] | None = None
    ) -> Icon | None:
        """Make an icon from a code point or a name.

        A name is first looked up among the registered code points, then
        among the painters given by name. None is returned for a name that
        is neither.
        """
        if isinstance(name_or_char, str):
            name = name_or_char
            if name in self._named:
                return self.icon(self._named[name], options)
            painter = self._painters.get(name)
            if painter is None:
                return None
            return self.icon_from_painter(painter, merge_options(self._defaults, options))

        merged = merge_options(self._defaults, options)
        merged["text"] = chr(int(name_or_char))
        return self.icon_from_painter(self._font_painter, merged)

    def icon_from_painter(
        self, painter: IconPainter, options: Mapping[str, Any] | None = None
    ) -> Icon:
        """Make an icon drawn by ``painter`` with exactly ``options``."""
        return Icon(self, painter, dict(options or {}))

    def give(self, name: str, painter: IconPainter) -> None:
        """Register ``painter`` under ``name``, replacing any earlier one."""
        self._painters[name] = painter

    def font(self, size: int) -> Font:
        """Return the icon font at ``size`` pixels."""
        return Font(self.font_name, size)


@cache
def instance() -> Awesome:
    """Return the shared icon factory, set up for Font Awesome."""
    awesome = Awesome()
    awesome.init_font_awesome()
    awesome.set_default_option("color", (0, 0, 0, 255))
    awesome.set_default_option("color-disabled", (50, 50, 50, 255))
    awesome.set_default_option("color-active", (255, 255, 255, 255))
    awesome.set_default_option("color-selected", (255, 255, 255, 255))
    return awesome