"""Errors raised or reported by tweens and timelines."""


class TweenError(Exception):
    """Base class for animation errors."""


class PropertyNotFound(TweenError, LookupError):
    """The property path resolves to no value on its target."""


class UnsupportedValueType(TweenError, TypeError):
    """Start and end values cannot be interpolated into each other."""


class ShapeMismatch(TweenError, ValueError):
    """List values of different lengths."""


class InvalidDuration(TweenError, ValueError):
    """Tween duration is not a positive number of seconds."""


__all__ = [
    "TweenError",
    "PropertyNotFound",
    "UnsupportedValueType",
    "ShapeMismatch",
    "InvalidDuration",
]
