"""Decaying noise used for screen shake."""

from __future__ import annotations

import random


class Shake:
    """A shake of given amplitude, duration and sample frequency."""

    def __init__(
        self,
        amplitude: float,
        duration: float,
        frequency: int,
        rng: random.Random | None = None,
    ) -> None:
        source = rng if rng is not None else random.Random()
        self.amplitude = amplitude
        self.duration = duration
        self.frequency = frequency
        self.t = 0.0
        self.shaking = True
        sample_count = int(duration * frequency)
        self.samples = [2 * source.random() - 1 for _ in range(sample_count)]

    def update(self, dt: float) -> None:
        """Advance the shake clock; it stops shaking once past its duration."""
        self.t += dt
        if self.t > self.duration:
            self.shaking = False

    def noise(self, s: float) -> float:
        """Sample at index ``int(s)``, or 0 outside the sample range."""
        idx = int(s)
        if idx < 0 or idx >= len(self.samples):
            return 0.0
        return self.samples[idx]

    def decay(self, t: float) -> float:
        """Linear fall-off from 1 at the start to 0 at the end of the shake."""
        if t > self.duration:
            return 0.0
        return (self.duration - t) / self.duration

    def get_amplitude(self, t: float) -> float:
        """Interpolated, decayed displacement at time ``t``."""
        s = t * self.frequency
        s0 = int(s)
        s1 = s0 + 1
        k = self.decay(t)
        n0 = self.noise(s0)
        n1 = self.noise(s1)
        return self.amplitude * (n0 + (s - s0) * (n1 - n0)) * k