"""Classification and interpolation of animatable values.

Every value a tween animates falls into one :class:`Category`:

* ``SCALAR`` - ``int`` or ``float`` (``bool`` is excluded)
* ``VECTOR2`` - :class:`pygame.math.Vector2`
* ``COLOR`` - a CSS style color string or a :class:`pygame.Color`
* ``POINT_LIST`` - a list or tuple of ``Vector2``
* ``NUMERIC_LIST`` - a list or tuple of numbers
* ``RECORD`` - any mapping, interpolated key by key

Color strings accept ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``,
``rgb(r,g,b)`` and ``rgba(r,g,b,a)``.  Interpolated colors are written back
in the normalised ``rgba(r,g,b,a)`` form.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from enum import Enum, auto
from typing import Any, NamedTuple, Optional

import pygame

from .errors import ShapeMismatch, UnsupportedValueType

Vector2 = pygame.math.Vector2

_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d+(?:\.\d*)?|\.\d+)\s*)?\)",
    re.IGNORECASE,
)


class Category(Enum):
    """Kinds of values the interpolator understands."""

    SCALAR = auto()
    VECTOR2 = auto()
    COLOR = auto()
    POINT_LIST = auto()
    NUMERIC_LIST = auto()
    RECORD = auto()


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: float


# Color codec --------------------------------------------------------------
def parse_color(value: Any) -> Optional[RGBA]:
    """Return ``value`` as :class:`RGBA` or ``None`` if it is not a color."""
    if isinstance(value, pygame.Color):
        return RGBA(value.r, value.g, value.b, value.a / 255)
    if not isinstance(value, str):
        return None
    text = value.strip()
    if text.startswith("#"):
        return _parse_hex(text[1:])
    if text.lower().startswith("rgb"):
        match = _RGB_RE.fullmatch(text)
        if not match:
            return None
        r, g, b, a = match.groups()
        return RGBA(int(r), int(g), int(b), float(a) if a is not None else 1.0)
    return None


def _parse_hex(digits: str) -> Optional[RGBA]:
    if not all(c in "0123456789abcdefABCDEF" for c in digits):
        return None
    alpha = 1.0
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    elif len(digits) == 4:
        alpha = int(digits[3] * 2, 16) / 255
        digits = "".join(c * 2 for c in digits[:3])
    elif len(digits) == 8:
        alpha = int(digits[6:8], 16) / 255
        digits = digits[:6]
    if len(digits) != 6:
        return None
    num = int(digits, 16)
    return RGBA((num >> 16) & 255, (num >> 8) & 255, num & 255, alpha)


def format_color(color: RGBA) -> str:
    """Serialise ``color`` as ``rgba(r,g,b,a)`` with alpha to 3 decimals."""
    alpha = round(color.a, 3)
    if alpha == int(alpha):
        alpha_text = str(int(alpha))
    else:
        alpha_text = repr(alpha)
    return f"rgba({color.r},{color.g},{color.b},{alpha_text})"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _clamp_byte(value: int) -> int:
    return max(0, min(255, value))


# Classification -----------------------------------------------------------
def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def classify(value: Any) -> Optional[Category]:
    """Return the :class:`Category` of ``value`` or ``None``."""
    if _is_number(value):
        return Category.SCALAR
    if isinstance(value, Vector2):
        return Category.VECTOR2
    if isinstance(value, (str, pygame.Color)):
        return Category.COLOR if parse_color(value) is not None else None
    if isinstance(value, (list, tuple)):
        if all(_is_number(v) for v in value):
            return Category.NUMERIC_LIST
        if all(isinstance(v, Vector2) for v in value):
            return Category.POINT_LIST
        return None
    if isinstance(value, Mapping):
        return Category.RECORD
    return None


def check_compatible(start: Any, end: Any) -> Category:
    """Return the shared category of ``start`` and ``end``.

    Raises :class:`UnsupportedValueType` when the values do not classify to
    the same category and :class:`ShapeMismatch` when lists differ in length.
    """
    start_cat = classify(start)
    end_cat = classify(end)
    if start_cat is None or end_cat is None or start_cat is not end_cat:
        raise UnsupportedValueType(
            f"cannot interpolate {type(start).__name__} to {type(end).__name__}"
        )
    if start_cat in (Category.POINT_LIST, Category.NUMERIC_LIST) and len(start) != len(end):
        raise ShapeMismatch(f"list lengths differ: {len(start)} != {len(end)}")
    return start_cat


# Interpolation ------------------------------------------------------------
def lerp(a: float, b: float, t: float) -> float:
    """Blend ``a`` towards ``b``; exact at ``t == 0`` and ``t == 1``."""
    return a * (1 - t) + b * t


def interpolate_color(start: Any, end: Any, t: float) -> Any:
    c1 = parse_color(start)
    c2 = parse_color(end)
    if c1 is None or c2 is None:
        raise UnsupportedValueType(f"not a color: {start!r} / {end!r}")
    # Overshoot easings can leave the gamut: clamp to 8-bit channels.
    mixed = RGBA(
        _clamp_byte(_round_half_up(c1.r + (c2.r - c1.r) * t)),
        _clamp_byte(_round_half_up(c1.g + (c2.g - c1.g) * t)),
        _clamp_byte(_round_half_up(c1.b + (c2.b - c1.b) * t)),
        min(max(c1.a + (c2.a - c1.a) * t, 0.0), 1.0),
    )
    if isinstance(end, pygame.Color):
        return pygame.Color(mixed.r, mixed.g, mixed.b, _round_half_up(mixed.a * 255))
    return format_color(mixed)


def _interpolate_record(start: Mapping, end: Mapping, t: float) -> dict:
    result = dict(start)
    for key, end_value in end.items():
        if key not in start:
            continue
        start_value = start[key]
        if _is_number(start_value) and _is_number(end_value):
            result[key] = lerp(start_value, end_value, t)
        elif parse_color(start_value) is not None and parse_color(end_value) is not None:
            result[key] = interpolate_color(start_value, end_value, t)
    return result


def interpolate(category: Category, start: Any, end: Any, t: float) -> Any:
    """Return the value ``t`` of the way from ``start`` to ``end``."""
    if category is Category.SCALAR:
        return lerp(start, end, t)
    if category is Category.VECTOR2:
        return Vector2(lerp(start.x, end.x, t), lerp(start.y, end.y, t))
    if category is Category.COLOR:
        return interpolate_color(start, end, t)
    if category in (Category.POINT_LIST, Category.NUMERIC_LIST):
        if len(start) != len(end):
            raise ShapeMismatch(f"list lengths differ: {len(start)} != {len(end)}")
        element = Category.VECTOR2 if category is Category.POINT_LIST else Category.SCALAR
        return [interpolate(element, s, e, t) for s, e in zip(start, end)]
    if category is Category.RECORD:
        return _interpolate_record(start, end, t)
    raise UnsupportedValueType(f"unknown category {category!r}")


def snapshot(value: Any) -> Any:
    """Copy ``value`` so later mutation of the original cannot leak in."""
    if isinstance(value, Vector2):
        return Vector2(value)
    if isinstance(value, pygame.Color):
        return pygame.Color(value)
    if isinstance(value, list):
        return [snapshot(v) for v in value]
    if isinstance(value, tuple):
        return tuple(snapshot(v) for v in value)
    if isinstance(value, Mapping):
        return {k: snapshot(v) for k, v in value.items()}
    return value


__all__ = [
    "Category",
    "RGBA",
    "Vector2",
    "parse_color",
    "format_color",
    "classify",
    "check_compatible",
    "lerp",
    "interpolate_color",
    "interpolate",
    "snapshot",
]
