from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Iterable, Iterator, List, Optional

from .binding import PHANTOM_PROPERTY
from .tween import BoundTween, StandaloneTween, Tween

logger = logging.getLogger(__name__)


class EventKind(Enum):
    STARTED = auto()
    FAILED = auto()
    COMPLETED = auto()
    RESET = auto()
    LOOPED = auto()
    FINISHED = auto()


@dataclass
class TimelineEntry:
    """A tween scheduled at ``start_time`` seconds on a timeline."""

    tween: Tween
    start_time: float
    activated: bool = False

    @property
    def end_time(self) -> float:
        return self.start_time + self.tween.duration


@dataclass(frozen=True)
class TimelineEvent:
    kind: EventKind
    entry: Optional[TimelineEntry] = None


class Timeline:
    """Schedule tweens at absolute offsets under one shared play-head.

    Each entry's state is derived from the play-head alone, so playback via
    :meth:`update` and scrubbing via :meth:`seek` give the same results in
    any order.  Both return the :class:`TimelineEvent` list the call caused.
    """

    def __init__(self) -> None:
        self._entries: List[TimelineEntry] = []
        self.current_time = 0.0
        self.is_playing = False
        self.time_scale = 1.0
        self.loop = False
        self.duration = 0.0
        self.on_complete: Optional[Callable[[], None]] = None

    # Composition -----------------------------------------------------
    @property
    def entries(self) -> tuple:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def _recalculate_duration(self) -> None:
        self.duration = max((e.end_time for e in self._entries), default=0.0)

    def add(self, tween: Tween, start_time: float = 0.0) -> "Timeline":
        """Schedule ``tween`` to begin ``start_time`` seconds in."""
        if not isinstance(tween, Tween):
            raise TypeError(f"Timeline.add expects a Tween, got {type(tween).__name__}")
        if isinstance(tween, StandaloneTween):
            raise TypeError("StandaloneTween keeps its own clock; use a BoundTween")
        if start_time < 0:
            raise ValueError(f"start_time must be >= 0, got {start_time!r}")
        if tween.owner is not None:
            raise ValueError(f"{tween!r} is already scheduled on a timeline")
        tween.owner = self
        self._entries.append(TimelineEntry(tween, float(start_time)))
        self._recalculate_duration()
        return self

    def sequence(
        self, tweens: Iterable[Tween], offset: Optional[float] = None, gap: float = 0.0
    ) -> "Timeline":
        """Chain ``tweens`` back to back, ``gap`` seconds apart."""
        marker = self.duration if offset is None else offset
        for tween in tweens:
            self.add(tween, marker)
            marker += tween.duration + gap
        return self

    def parallel(self, tweens: Iterable[Tween], offset: Optional[float] = None) -> "Timeline":
        """Start every tween in ``tweens`` at the same time."""
        start = self.duration if offset is None else offset
        for tween in tweens:
            self.add(tween, start)
        return self

    def wait(self, duration: float) -> "Timeline":
        """Pause for ``duration`` seconds after the current content."""
        return self.add(BoundTween(None, PHANTOM_PROPERTY, 1.0, duration), self.duration)

    # Playback control ------------------------------------------------
    def play(self) -> "Timeline":
        if self.is_playing:
            return self
        self.is_playing = True
        if self.current_time >= self.duration and not self.loop:
            self.current_time = 0.0
            self._reset_entries()
        return self

    def play_from_start(self) -> "Timeline":
        self.current_time = 0.0
        self._reset_entries()
        self.is_playing = True
        return self

    def pause(self) -> "Timeline":
        self.is_playing = False
        return self

    def set_loop(self, loop: bool) -> "Timeline":
        self.loop = loop
        return self

    def set_time_scale(self, scale: float) -> "Timeline":
        self.time_scale = scale
        return self

    def then(self, callback: Callable[[], None]) -> "Timeline":
        """Call ``callback`` when non-looping playback reaches the end."""
        self.on_complete = callback
        return self

    @property
    def progress(self) -> float:
        if self.duration <= 0:
            return 0.0
        return self.current_time / self.duration

    # Evaluation ------------------------------------------------------
    def seek(self, time: float) -> List[TimelineEvent]:
        """Jump the play-head to ``time`` and settle every entry there."""
        self.current_time = max(0.0, min(time, self.duration))
        return self._evaluate()

    def update(self, dt: float) -> List[TimelineEvent]:
        """Advance playback by ``dt`` seconds of wall time."""
        if not self.is_playing:
            return []
        self.current_time = max(0.0, self.current_time + dt * self.time_scale)
        events = self._evaluate()
        if self.current_time < self.duration:
            return events

        if self.loop and self.duration > 0:
            self.current_time %= self.duration
            events.extend(self._reset_entries())
            events.append(TimelineEvent(EventKind.LOOPED))
            # Settle the new cycle before the next external tick.
            events.extend(self._evaluate())
            return events

        self.current_time = self.duration
        self.is_playing = False
        events.append(TimelineEvent(EventKind.FINISHED))
        logger.debug("Timeline finished after %.3fs", self.duration)
        if self.on_complete:
            self.on_complete()
        return events

    def steps(self) -> Iterator[None]:
        """Return a generator that updates the timeline each frame.

        Prime it with ``next()`` and ``send()`` the frame delta afterwards.
        """

        def gen():
            dt = yield
            while self.is_playing:
                self.update(dt)
                dt = yield

        return gen()

    def dispose(self) -> None:
        """Stop playback and release every scheduled tween."""
        self.is_playing = False
        for entry in self._entries:
            entry.tween.owner = None
        self._entries = []
        self.current_time = 0.0
        self._recalculate_duration()

    # Internal helpers ------------------------------------------------
    def _reset_order(self) -> List[TimelineEntry]:
        # Latest scheduled first so each restored snapshot is the state the
        # entry saw before it began.
        indexed = sorted(
            enumerate(self._entries), key=lambda p: (p[1].start_time, p[0]), reverse=True
        )
        return [entry for _, entry in indexed]

    def _reset_entries(
        self, predicate: Callable[[TimelineEntry], bool] = lambda e: True
    ) -> List[TimelineEvent]:
        events: List[TimelineEvent] = []
        for entry in self._reset_order():
            if entry.activated and predicate(entry):
                entry.tween.reset_to_start()
                entry.activated = False
                events.append(TimelineEvent(EventKind.RESET, entry))
        return events

    def _activate(self, entry: TimelineEntry) -> TimelineEvent:
        entry.tween.start()
        entry.activated = True
        kind = EventKind.FAILED if entry.tween.error is not None else EventKind.STARTED
        return TimelineEvent(kind, entry)

    def _evaluate(self) -> List[TimelineEvent]:
        now = self.current_time
        events = self._reset_entries(lambda e: now < e.start_time)

        for entry in self._entries:
            if now < entry.start_time:
                continue
            if not entry.activated:
                events.append(self._activate(entry))
            if now < entry.end_time:
                result = entry.tween.set_progress((now - entry.start_time) / entry.tween.duration)
            else:
                result = entry.tween.set_progress(1.0)
            if result is not None and result.completed:
                events.append(TimelineEvent(EventKind.COMPLETED, entry))
        return events


__all__ = ["EventKind", "TimelineEntry", "TimelineEvent", "Timeline"]
