from __future__ import annotations

from typing import Callable, Optional

import pygame

from .anim_manager import AnimationManager


class FrameDriver:
    """Tick an :class:`AnimationManager` once per frame.

    With ``target_fps`` set, every tick advances the animation by exactly
    ``1 / target_fps`` seconds while the clock caps the frame rate.  Without
    it the measured frame time is used.
    """

    def __init__(
        self,
        manager: AnimationManager,
        target_fps: Optional[int] = None,
        clock=None,
    ) -> None:
        if target_fps is not None and target_fps <= 0:
            raise ValueError("target_fps must be positive")
        self.manager = manager
        self.target_fps = target_fps
        self.clock = clock or pygame.time.Clock()
        self.frames = 0

    def tick(self) -> float:
        """Wait for the next frame, update the manager and return ``dt``."""
        elapsed_ms = self.clock.tick(self.target_fps or 0)
        dt = 1.0 / self.target_fps if self.target_fps else elapsed_ms / 1000.0
        self.manager.update(dt)
        self.frames += 1
        return dt

    def run(
        self,
        max_frames: Optional[int] = None,
        on_frame: Optional[Callable[[float], None]] = None,
    ) -> int:
        """Tick until the manager has nothing left to drive.

        Returns the number of frames run by this call.
        """
        ran = 0
        while self.manager.active():
            if max_frames is not None and ran >= max_frames:
                break
            dt = self.tick()
            ran += 1
            if on_frame:
                on_frame(dt)
        return ran


__all__ = ["FrameDriver"]
