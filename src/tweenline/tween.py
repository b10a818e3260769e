from __future__ import annotations

import logging
import math
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Any, Callable, Iterable, Optional

from . import values
from .binding import PropertyBinding
from .easing import get_easing
from .errors import InvalidDuration, TweenError

if TYPE_CHECKING:
    from .anim_manager import AnimationManager

logger = logging.getLogger(__name__)


class TweenState(Enum):
    UNSTARTED = auto()
    ACTIVE = auto()
    COMPLETED = auto()


class DriveMode(Enum):
    STANDALONE = auto()
    BOUND = auto()


@dataclass(frozen=True)
class TweenUpdate:
    """Result of one :meth:`Tween.set_progress` call."""

    value: Any
    progress: float
    completed: bool


class Tween:
    """Animate one property of ``target`` from its current value to ``end``.

    The start value is captured by :meth:`start`, so a tween always animates
    from whatever the property holds at that moment.  Progress is handed in
    through :meth:`set_progress`; see :class:`StandaloneTween` for a tween
    that keeps its own clock.
    """

    drive_mode = DriveMode.BOUND

    def __init__(
        self,
        target: Any,
        path: str | Iterable[Any],
        end: Any,
        duration: float,
        ease: str | Callable[..., float] | None = None,
        *,
        on_update: Optional[Callable[[Any, float], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[TweenError], None]] = None,
    ):
        if not isinstance(duration, (int, float)) or math.isnan(duration) or duration <= 0:
            raise InvalidDuration(f"Tween duration must be positive, got {duration!r}")
        self.binding = PropertyBinding(target, path)
        self.end = values.snapshot(end)
        self.duration = float(duration)
        self.ease = get_easing(ease)
        self.on_update = on_update
        self.on_complete = on_complete
        self.on_error = on_error

        self.elapsed = 0.0
        self.state = TweenState.UNSTARTED
        self.error: Optional[TweenError] = None
        self._start: Any = None
        self._category: Optional[values.Category] = None
        self._captured = False
        # Set by Timeline.add
        self.owner: Any = None

    # Introspection ---------------------------------------------------
    @property
    def target(self) -> Any:
        return self.binding.target

    @property
    def start_value(self) -> Any:
        """The snapshot captured by the last successful :meth:`start`."""
        return self._start

    @property
    def progress(self) -> float:
        return min(self.elapsed / self.duration, 1.0)

    @property
    def is_active(self) -> bool:
        return self.state is TweenState.ACTIVE

    @property
    def finished(self) -> bool:
        """Return ``True`` when the tween has reached its end value."""
        return self.state is TweenState.COMPLETED

    # Chainable callback setters --------------------------------------
    def then(self, callback: Callable[[], None]) -> "Tween":
        self.on_complete = callback
        return self

    def on_progress(self, callback: Callable[[Any, float], None]) -> "Tween":
        self.on_update = callback
        return self

    def on_failure(self, callback: Callable[[TweenError], None]) -> "Tween":
        self.on_error = callback
        return self

    # Lifecycle -------------------------------------------------------
    def start(self) -> "Tween":
        """Capture the current property value and become active.

        Failures leave the tween unstarted and inert.  They are logged and
        passed to ``on_error`` instead of being raised.
        """
        self.elapsed = 0.0
        if self.binding.is_phantom:
            self._start = 0.0
            self._category = None
        else:
            try:
                raw = self.binding.get()
                category = values.check_compatible(raw, self.end)
            except TweenError as exc:
                self._fail(exc)
                return self
            self._start = values.snapshot(raw)
            self._category = category
        self._captured = True
        self.error = None
        self.state = TweenState.ACTIVE
        logger.debug("Started %r -> %r", self.binding, self.end)
        return self

    def set_progress(self, progress: float) -> Optional[TweenUpdate]:
        """Move to ``progress`` in ``[0, 1]`` and write the value back.

        Returns ``None`` when nothing happened: the tween never started
        successfully, or it is already complete and ``progress`` is 1.
        """
        if not self._captured:
            return None
        progress = min(max(progress, 0.0), 1.0)
        if progress >= 1 and self.state is TweenState.COMPLETED:
            return None
        self.elapsed = progress * self.duration

        if progress >= 1:
            try:
                value = self._write_end()
            except TweenError as exc:
                self._fail(exc)
                return None
            self.state = TweenState.COMPLETED
            if self.on_update:
                self.on_update(value, 1.0)
            logger.debug("Completed %r", self.binding)
            if self.on_complete:
                self.on_complete()
            return TweenUpdate(value, 1.0, True)

        self.state = TweenState.ACTIVE
        eased = self.ease(progress)
        try:
            if self._category is None:
                value = eased
            else:
                value = values.interpolate(self._category, self._start, self.end, eased)
                self.binding.set(value)
        except TweenError as exc:
            self._fail(exc)
            return None
        if self.on_update:
            self.on_update(value, progress)
        return TweenUpdate(value, progress, False)

    def reset_to_start(self) -> "Tween":
        """Restore the captured start value and return to ``UNSTARTED``."""
        if self._captured and self._category is not None:
            try:
                self.binding.set(values.snapshot(self._start))
            except TweenError as exc:
                self._fail(exc)
        self.elapsed = 0.0
        self.state = TweenState.UNSTARTED
        return self

    # Internal helpers ------------------------------------------------
    def _write_end(self) -> Any:
        if self._category is None:
            return 1.0
        if self._category is values.Category.RECORD:
            current = self.binding.get()
            if isinstance(current, MutableMapping):
                current.update(values.snapshot(self.end))
                return current
            merged = dict(current) if isinstance(current, Mapping) else {}
            merged.update(values.snapshot(self.end))
            self.binding.set(merged)
            return merged
        value = values.snapshot(self.end)
        self.binding.set(value)
        return value

    def _fail(self, exc: TweenError) -> None:
        self.state = TweenState.UNSTARTED
        self.error = exc
        self._captured = False
        self._start = None
        self._category = None
        logger.error("Tween %r failed: %s", self.binding, exc)
        if self.on_error:
            self.on_error(exc)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.binding.dotted!r}, end={self.end!r}, "
            f"duration={self.duration}, state={self.state.name})"
        )


class BoundTween(Tween):
    """A tween whose progress is always supplied by a scheduler."""

    drive_mode = DriveMode.BOUND


class StandaloneTween(Tween):
    """A tween that advances its own clock through :meth:`update`."""

    drive_mode = DriveMode.STANDALONE

    def __init__(self, *args: Any, manager: Optional["AnimationManager"] = None, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.manager = manager

    def start(self) -> "StandaloneTween":
        super().start()
        if self.is_active and self.manager is not None:
            self.manager.add_tween(self)
        return self

    def update(self, dt: float) -> Optional[TweenUpdate]:
        """Advance by ``dt`` seconds."""
        if not self.is_active:
            return None
        self.elapsed += dt
        return self.set_progress(min(self.elapsed / self.duration, 1.0))


__all__ = [
    "TweenState",
    "DriveMode",
    "TweenUpdate",
    "Tween",
    "BoundTween",
    "StandaloneTween",
]
