"""Value types for biquad sections and multi-stage cascades."""
from __future__ import annotations

import numbers
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Iterator, Tuple

import numpy as np


@dataclass(frozen=True)
class BiquadCoefficients:
    """One second-order section, normalized so that a0 == 1.

    Feedback taps are stored with the sign the consuming difference equation
    adds them with:

        y[n] = b0*x[n] + b1*x[n-1] + b2*x[n-2] + a1*y[n-1] + a2*y[n-2]

    A first-order section leaves a2 and b2 at zero.
    """

    a0: float = 1.0
    a1: float = 0.0
    a2: float = 0.0
    b0: float = 1.0
    b1: float = 0.0
    b2: float = 0.0

    @classmethod
    def from_taps(cls, b0: float, b1: float, b2: float, a1: float, a2: float) -> "BiquadCoefficients":
        """Build a normalized section, coercing numpy scalars to plain floats."""
        return cls(1.0, float(a1), float(a2), float(b0), float(b1), float(b2))

    @property
    def is_identity(self) -> bool:
        return self == IDENTITY

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def to_ba(self) -> Tuple[np.ndarray, np.ndarray]:
        """Return conventional (b, a) arrays, with the feedback signs flipped back."""
        b = np.array([self.b0, self.b1, self.b2], dtype=np.float64)
        a = np.array([self.a0, -self.a1, -self.a2], dtype=np.float64)
        return b, a


IDENTITY = BiquadCoefficients()


class StagedCoefficients(Mapping):
    """Ordered, immutable mapping of stage index to section.

    Stage 0 is applied first. Keys are always 0..len-1.
    """

    __slots__ = ("_stages",)

    def __init__(self, stages: Iterable[BiquadCoefficients]):
        self._stages: Tuple[BiquadCoefficients, ...] = tuple(stages)

    @classmethod
    def identity(cls, length: int) -> "StagedCoefficients":
        return cls(IDENTITY for _ in range(length))

    @property
    def stages(self) -> Tuple[BiquadCoefficients, ...]:
        return self._stages

    def __getitem__(self, index: int) -> BiquadCoefficients:
        # numpy integers are valid keys, bools are not
        if not isinstance(index, numbers.Integral) or isinstance(index, bool) or not 0 <= index < len(self._stages):
            raise KeyError(index)
        return self._stages[index]

    def __iter__(self) -> Iterator[int]:
        return iter(range(len(self._stages)))

    def __len__(self) -> int:
        return len(self._stages)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StagedCoefficients):
            return self._stages == other._stages
        return super().__eq__(other)

    def __hash__(self) -> int:
        return hash(self._stages)

    def __repr__(self) -> str:
        return f"StagedCoefficients({list(self._stages)!r})"

    def as_dict(self) -> Dict[int, Dict[str, float]]:
        return {i: stage.as_dict() for i, stage in enumerate(self._stages)}

    def to_sos(self) -> np.ndarray:
        """Return an (n, 6) array in SciPy second-order-section layout."""
        sos = np.zeros((len(self._stages), 6), dtype=np.float64)
        for row, stage in enumerate(self._stages):
            b, a = stage.to_ba()
            sos[row, :3] = b
            sos[row, 3:] = a
        return sos
