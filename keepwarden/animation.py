"""Frame sequences advanced over time."""

from __future__ import annotations

from typing import Sequence


class Animation:
    """Steps through ``frames`` every ``spf`` seconds, looping or stopping at the end."""

    def __init__(self, frames: Sequence[int], loop: bool, spf: float = 0.42) -> None:
        if not frames:
            raise ValueError("an animation needs at least one frame")
        if spf <= 0:
            raise ValueError("seconds per frame must be positive")
        self.frames = list(frames)
        self.loop = loop
        self.spf = spf
        self.index = 0
        self.timer = 0.0
        self._finished = False

    def update(self, dt: float) -> None:
        """Advance the animation by ``dt`` seconds."""
        if self._finished:
            return
        self.timer += dt
        while self.timer >= self.spf and not self._finished:
            self.timer -= self.spf
            if self.index < len(self.frames) - 1:
                self.index += 1
            elif self.loop:
                self.index = 0
            else:
                self._finished = True

    def is_finished(self) -> bool:
        """True once a non-looping animation has played its last frame through."""
        return self._finished

    def current_frame(self) -> int:
        """The frame number shown now."""
        return self.frames[self.index]