"""Frequency response and stability helpers for designed sections."""
from __future__ import annotations

from typing import Iterable, List, Tuple, Union

import numpy as np

from .coefficients import BiquadCoefficients, StagedCoefficients

Sections = Union[BiquadCoefficients, StagedCoefficients, Iterable[BiquadCoefficients]]


def _as_sections(sections: Sections) -> List[BiquadCoefficients]:
    if isinstance(sections, BiquadCoefficients):
        return [sections]
    if isinstance(sections, StagedCoefficients):
        return list(sections.stages)
    return list(sections)


def complex_response(sections: Sections, freqs: np.ndarray, sample_rate: float) -> np.ndarray:
    """Evaluate the cascade product H(e^jw) at the given frequencies in Hz."""
    freqs = np.atleast_1d(np.asarray(freqs, dtype=np.float64))
    w = 2 * np.pi * freqs / sample_rate
    exp_1 = np.exp(-1j * w)
    exp_2 = np.exp(-2j * w)
    response = np.ones(freqs.shape, dtype=np.complex128)
    for section in _as_sections(sections):
        b, a = section.to_ba()
        num = b[0] + b[1] * exp_1 + b[2] * exp_2
        den = a[0] + a[1] * exp_1 + a[2] * exp_2
        response *= num / den
    return response


def frequency_response(sections: Sections, sample_rate: float, points: int = 512) -> Tuple[np.ndarray, np.ndarray]:
    """Magnitude in dB on a log grid from 20 Hz to Nyquist."""
    freqs = np.logspace(np.log10(20.0), np.log10(sample_rate / 2.0), points)
    response = complex_response(sections, freqs, sample_rate)
    with np.errstate(divide="ignore"):
        magnitude = 20 * np.log10(np.abs(response))
    return freqs, magnitude


def magnitude_db_at(sections: Sections, freq: float, sample_rate: float) -> float:
    response = complex_response(sections, np.array([freq]), sample_rate)
    with np.errstate(divide="ignore"):
        return float(20 * np.log10(np.abs(response[0])))


def poles(section: BiquadCoefficients) -> np.ndarray:
    _, a = section.to_ba()
    # trailing zeros would only add poles at the origin
    return np.roots(np.trim_zeros(a, "b"))


def is_stable(section: BiquadCoefficients) -> bool:
    """True when every pole lies strictly inside the unit circle."""
    p = poles(section)
    return bool(p.size == 0 or np.max(np.abs(p)) < 1.0)
