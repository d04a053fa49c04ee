"""Default design parameters shared by the designers and the dispatcher."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DesignDefaults:
    """Values applied when a caller leaves a parameter out."""

    q: float = 0.707  # Butterworth-ish resonance
    gain: float = 0.0  # dB
    min_cutoff: float = 1.0  # Hz, cascades bypass below this
    max_cutoff: float = 22000.0  # Hz, cascades bypass above this
    pole_decay_base: float = 2.7  # approximation of e used by one-pole stages

    def cutoff_in_range(self, fc: float) -> bool:
        return self.min_cutoff <= fc <= self.max_cutoff


DEFAULTS = DesignDefaults()
