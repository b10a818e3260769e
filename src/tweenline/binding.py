"""Addressing of nested properties on arbitrary target objects."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any, Iterable, Tuple

from .errors import PropertyNotFound

# Tweens bound to this path never touch their target.  They exist to drive
# time-based callbacks only.
PHANTOM_PROPERTY = "_timing_only"

_MISSING = object()


def parse_path(path: str | Iterable[Any]) -> Tuple[Any, ...]:
    """Split ``"style.fill"`` style paths into a key tuple."""
    if isinstance(path, str):
        keys: Tuple[Any, ...] = tuple(path.split("."))
    else:
        keys = tuple(path)
    if not keys or any(k == "" for k in keys):
        raise ValueError(f"Invalid property path {path!r}")
    return keys


def _lookup(obj: Any, key: Any) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key, _MISSING)
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        try:
            return obj[int(key)]
        except (ValueError, IndexError):
            return _MISSING
    return getattr(obj, str(key), _MISSING)


def _assign(obj: Any, key: Any, value: Any) -> None:
    if isinstance(obj, MutableMapping):
        obj[key] = value
    elif isinstance(obj, MutableSequence):
        try:
            obj[int(key)] = value
        except (ValueError, IndexError) as exc:
            raise PropertyNotFound(f"cannot assign index {key!r}") from exc
    else:
        try:
            setattr(obj, str(key), value)
        except AttributeError as exc:
            raise PropertyNotFound(f"cannot assign attribute {key!r}") from exc


class PropertyBinding:
    """A target object plus the key path of one of its nested fields.

    Keys resolve through mapping lookup, sequence indexing or attribute
    access, in that order of preference.  Reads and writes walk the path the
    same way.
    """

    def __init__(self, target: Any, path: str | Iterable[Any]):
        self.target = target
        self.path = parse_path(path)

    @property
    def dotted(self) -> str:
        return ".".join(str(k) for k in self.path)

    @property
    def is_phantom(self) -> bool:
        return self.dotted == PHANTOM_PROPERTY

    def _parent(self) -> Any:
        current = self.target
        for key in self.path[:-1]:
            current = _lookup(current, key)
            if current is _MISSING or current is None:
                raise PropertyNotFound(f"{self.dotted}: '{key}' not found")
        return current

    def get(self) -> Any:
        """Return the current value, raising ``PropertyNotFound`` if absent."""
        value = _lookup(self._parent(), self.path[-1])
        if value is _MISSING or value is None:
            raise PropertyNotFound(f"{self.dotted}: '{self.path[-1]}' not found")
        return value

    def set(self, value: Any) -> None:
        _assign(self._parent(), self.path[-1], value)

    def __repr__(self) -> str:
        return f"PropertyBinding({type(self.target).__name__}, {self.dotted!r})"


__all__ = ["PHANTOM_PROPERTY", "PropertyBinding", "parse_path"]
