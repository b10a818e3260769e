from __future__ import annotations

from typing import Any, Callable, List, Optional, Tuple

import pygame

from .config import AnimationOptions
from .timeline import Timeline
from .tween import StandaloneTween


class AnimationManager:
    """Drive standalone tweens and timelines from a single per-frame tick.

    ``target`` is the default object animated by :meth:`to` and the sprite
    helpers; it may be left as ``None`` when only timelines are managed.
    """

    def __init__(self, target: Any = None, options: Optional[AnimationOptions] = None) -> None:
        self.target = target
        self.options = options or AnimationOptions()
        self._tweens: List[StandaloneTween] = []
        self._timelines: List[Timeline] = []

    # Registration ----------------------------------------------------
    def add_tween(self, tween: StandaloneTween) -> StandaloneTween:
        """Register ``tween`` so :meth:`update` advances it each frame."""
        if not isinstance(tween, StandaloneTween):
            raise TypeError("AnimationManager only drives StandaloneTween instances")
        if tween not in self._tweens:
            self._tweens.append(tween)
        tween.manager = self
        return tween

    def remove_tween(self, tween: StandaloneTween) -> None:
        if tween in self._tweens:
            self._tweens.remove(tween)

    def add_timeline(self, timeline: Timeline) -> Timeline:
        if timeline not in self._timelines:
            self._timelines.append(timeline)
        return timeline

    def remove_timeline(self, timeline: Timeline) -> None:
        if timeline in self._timelines:
            self._timelines.remove(timeline)

    @property
    def tweens(self) -> Tuple[StandaloneTween, ...]:
        return tuple(self._tweens)

    @property
    def timelines(self) -> Tuple[Timeline, ...]:
        return tuple(self._timelines)

    # Convenience constructors ----------------------------------------
    def to(
        self,
        path: str,
        end: Any,
        duration: float,
        ease: str | Callable[[float], float] | None = None,
        target: Any = None,
    ) -> StandaloneTween:
        """Start animating ``path`` on the default target towards ``end``."""
        obj = self.target if target is None else target
        if obj is None:
            raise ValueError("No target to animate")
        tween = StandaloneTween(
            obj, path, end, duration, ease or self.options.default_ease, manager=self
        )
        return tween.start()

    def tween_position(
        self,
        dest: Tuple[float, float],
        duration: float,
        ease: str | Callable[[float], float] | None = None,
    ) -> StandaloneTween:
        """Animate the sprite's centre position."""
        if hasattr(self.target, "pos"):
            return self.to("pos", pygame.math.Vector2(dest), duration, ease)

        rect = self.target.rect
        start = pygame.math.Vector2(rect.center)
        holder = {"center": start}

        def apply(value: pygame.math.Vector2, _progress: float) -> None:
            rect.center = (int(round(value.x)), int(round(value.y)))

        tween = StandaloneTween(
            holder,
            "center",
            pygame.math.Vector2(dest),
            duration,
            ease or self.options.default_ease,
            on_update=apply,
            manager=self,
        )
        return tween.start()

    def tween_alpha(
        self,
        dest: float,
        duration: float,
        ease: str | Callable[[float], float] | None = None,
    ) -> StandaloneTween:
        return self.to("alpha", dest, duration, ease)

    # Per-frame tick --------------------------------------------------
    def update(self, dt: float) -> None:
        dt *= self.options.time_scale
        # Completion callbacks may register new tweens while we iterate.
        for tw in list(self._tweens):
            tw.update(dt)
        self._tweens = [tw for tw in self._tweens if tw.is_active]
        for timeline in list(self._timelines):
            if timeline.is_playing:
                timeline.update(dt)

    def active(self) -> bool:
        return bool(self._tweens) or any(tl.is_playing for tl in self._timelines)


__all__ = ["AnimationManager"]
