"""Multi-section crossover cascades (Bessel, Butterworth, Linkwitz-Riley).

Bessel and Butterworth stages are either a one-pole exponential-decay section
or a second-order analog prototype, prewarped to the target cutoff and
discretized with the bilinear transform. Linkwitz-Riley stages are RBJ
pass biquads, one per entry of the design's stage Q list, all sharing fc.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Tuple, Union

import numpy as np

from ..config import DEFAULTS
from .coefficients import IDENTITY, BiquadCoefficients, StagedCoefficients
from .registry import CrossoverDesign, Family, FilterDesignMeta, design_info, sections_for

logger = logging.getLogger(__name__)

LOWPASS = "lowpass"
HIGHPASS = "highpass"


@dataclass(frozen=True)
class PoleStage:
    """First-order section with pole at base**(-Omega)."""


@dataclass(frozen=True)
class AnalogStage:
    """Second-order analog prototype s^2 + a1c*s + a0c at unit cutoff."""

    a0c: float
    a1c: float


Stage = Union[PoleStage, AnalogStage]

# Stage order is part of each design's response and must not be rearranged.
PROTOTYPES: Dict[CrossoverDesign, Tuple[Stage, ...]] = {
    CrossoverDesign.Bessel6: (PoleStage(),),
    CrossoverDesign.Bessel12: (AnalogStage(0.6180, 1.3617),),
    CrossoverDesign.Bessel18: (PoleStage(), AnalogStage(0.4772, 0.9996)),
    CrossoverDesign.Bessel24: (AnalogStage(0.4889, 1.3397), AnalogStage(0.3890, 0.7743)),
    CrossoverDesign.Butterworth12: (AnalogStage(1.0, 1.4142),),
    CrossoverDesign.Butterworth18: (PoleStage(), AnalogStage(1.0, 1.0)),
    CrossoverDesign.Butterworth24: (AnalogStage(1.0, 1.8478), AnalogStage(1.0, 0.7654)),
}


def _pole_section(fc: float, fs: float, mode: str) -> BiquadCoefficients:
    omega = 2.0 * np.pi * fc / fs
    a1 = np.power(DEFAULTS.pole_decay_base, -omega)
    if mode == LOWPASS:
        return BiquadCoefficients.from_taps(1.0 - a1, 0.0, 0.0, a1, 0.0)
    return BiquadCoefficients.from_taps(a1, -a1, 0.0, a1, 0.0)


def _bilinear(s: Tuple[float, float, float], T: float) -> Tuple[float, float, float]:
    """Map s-domain [s^2, s^1, s^0] coefficients to z-domain [z^0, z^-1, z^-2]."""
    T2 = T * T
    return (
        4.0 * s[0] + 2.0 * s[1] * T + s[2] * T2,
        2.0 * s[2] * T2 - 8.0 * s[0],
        4.0 * s[0] - 2.0 * s[1] * T + s[2] * T2,
    )


def _analog_section(stage: AnalogStage, fc: float, fs: float, mode: str) -> BiquadCoefficients:
    T = 1.0 / fs
    omega = 2.0 * np.pi * fc / fs
    wn = 2.0 / T * np.tan(omega / 2.0)

    if mode == LOWPASS:
        sa = (stage.a0c / (wn * wn), stage.a1c / wn, 1.0)
        sb = (0.0, 0.0, 1.0)
    else:
        sa = (1.0, stage.a1c * wn, stage.a0c * wn * wn)
        sb = (1.0, 0.0, 0.0)

    za = _bilinear(sa, T)
    zb = _bilinear(sb, T)
    return BiquadCoefficients.from_taps(
        zb[0] / za[0],
        zb[1] / za[0],
        zb[2] / za[0],
        -za[1] / za[0],
        -za[2] / za[0],
    )


def _linkwitz_section(q: float, fc: float, fs: float, mode: str) -> BiquadCoefficients:
    w0 = 2.0 * np.pi * fc / fs
    cos_w0 = np.cos(w0)
    alpha = np.sin(w0) / (2.0 * q)
    a0 = 1.0 + alpha
    if mode == LOWPASS:
        b0 = ((1.0 - cos_w0) * 0.5) / a0
        b1 = (1.0 - cos_w0) / a0
    else:
        b0 = ((1.0 + cos_w0) * 0.5) / a0
        b1 = -(1.0 + cos_w0) / a0
    a1 = 2.0 * cos_w0 / a0
    a2 = -(1.0 - alpha) / a0
    return BiquadCoefficients.from_taps(b0, b1, b0, a1, a2)


def _stage_sections(meta: FilterDesignMeta, fc: float, fs: float, mode: str) -> List[BiquadCoefficients]:
    if meta.family is Family.LINKWITZ_RILEY:
        return [_linkwitz_section(q, fc, fs, mode) for q in meta.stage_q or ()]

    sections = []
    for stage in PROTOTYPES.get(CrossoverDesign(meta.id), ()):
        if isinstance(stage, PoleStage):
            sections.append(_pole_section(fc, fs, mode))
        else:
            sections.append(_analog_section(stage, fc, fs, mode))
    return sections


def _design_cascade(design: Union[int, str], fc: float, fs: float, bypass: bool, mode: str) -> StagedCoefficients:
    length = sections_for(design)
    stages = [IDENTITY] * length
    if bypass is True:
        return StagedCoefficients(stages)
    if not DEFAULTS.cutoff_in_range(fc):
        logger.debug("Cutoff %s Hz outside [%s, %s], returning %d bypass stages",
                     fc, DEFAULTS.min_cutoff, DEFAULTS.max_cutoff, length)
        return StagedCoefficients(stages)

    meta = design_info(design)
    if meta is None:
        logger.debug("Unknown crossover design %r, returning bypass stage", design)
        return StagedCoefficients(stages)

    fc, fs = np.float64(fc), np.float64(fs)
    with np.errstate(all="ignore"):
        for index, section in enumerate(_stage_sections(meta, fc, fs, mode)):
            stages[index] = section
    return StagedCoefficients(stages)


def design_low_pass_cascade(
    design: Union[int, str], fc: float, fs: float, bypass: bool = False
) -> StagedCoefficients:
    """Low-pass crossover cascade for a design id or alias."""
    return _design_cascade(design, fc, fs, bypass, LOWPASS)


def design_high_pass_cascade(
    design: Union[int, str], fc: float, fs: float, bypass: bool = False
) -> StagedCoefficients:
    """High-pass crossover cascade for a design id or alias."""
    return _design_cascade(design, fc, fs, bypass, HIGHPASS)
