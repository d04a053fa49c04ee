"""Single-section biquad coefficient formulas.

The designers here trust their inputs: they never validate and never raise.
A zero sample rate or a non-positive Q yields NaN or infinite coefficients,
which is the caller's responsibility to avoid.
"""
from __future__ import annotations

from enum import IntEnum

import numpy as np

from .coefficients import IDENTITY, BiquadCoefficients


class BiquadType(IntEnum):
    PEAK = 0x00
    LOWPASS = 0x01
    HIGHPASS = 0x02
    BANDPASS = 0x03
    NOTCH = 0x04
    LOWSHELF = 0x05
    HIGHSHELF = 0x06
    ALLPASS = 0x07
    LOWPASS_FO = 0x08
    HIGHPASS_FO = 0x09
    LOWSHELF_FO = 0x0A
    HIGHSHELF_FO = 0x0B
    ALLPASS_FO = 0x0C
    NONE = 0x0D


def default_coefficients() -> BiquadCoefficients:
    """Unity-gain pass-through section."""
    return IDENTITY


def _float64(*values: float):
    # numpy scalars turn division by zero into inf/nan instead of raising
    return tuple(np.float64(v) for v in values)


def design_parametric_eq(
    gain: float,
    fc: float,
    q: float,
    fs: float,
    design: BiquadType = BiquadType.PEAK,
    bypass: bool = False,
) -> BiquadCoefficients:
    """Return a section for any BiquadType using the bilinear K = tan(pi*fc/fs) forms.

    The formulas produce a numerator (n0, n1, n2) and a denominator
    (1, d1, d2); the section is returned as b = n and a1, a2 = -d1, -d2.
    Peak and first-order shelves swap numerator and denominator between boost
    and cut so that +g and -g dB are exact inverses of each other.
    """
    if bypass is True:
        return IDENTITY
    if design == BiquadType.LOWSHELF:
        return design_low_shelf(gain, fc, q, fs)
    if design == BiquadType.HIGHSHELF:
        return design_high_shelf(gain, fc, q, fs)
    if design == BiquadType.ALLPASS:
        return design_allpass(fc, q, fs)
    if design == BiquadType.NONE:
        return IDENTITY

    with np.errstate(all="ignore"):
        n0, n1, n2, d1, d2 = _parametric_taps(gain, fc, q, fs, design)
    return BiquadCoefficients.from_taps(n0, n1, n2, -d1, -d2)


def _parametric_taps(gain: float, fc: float, q: float, fs: float, design: BiquadType):
    gain, fc, q, fs = _float64(gain, fc, q, fs)
    A = 10.0 ** (abs(gain) / 20.0)
    K = np.tan(np.pi * (fc / fs))

    n0, n1, n2 = 1.0, 0.0, 0.0
    d1, d2 = 0.0, 0.0

    if design == BiquadType.PEAK:
        if gain >= 0:
            norm = 1.0 / (1.0 + 1.0 / q * K + K * K)
            n0 = (1.0 + A / q * K + K * K) * norm
            n1 = 2.0 * (K * K - 1.0) * norm
            n2 = (1.0 - A / q * K + K * K) * norm
            d1 = n1
            d2 = (1.0 - 1.0 / q * K + K * K) * norm
        else:
            norm = 1.0 / (1.0 + A / q * K + K * K)
            n0 = (1.0 + 1.0 / q * K + K * K) * norm
            n1 = 2.0 * (K * K - 1.0) * norm
            n2 = (1.0 - 1.0 / q * K + K * K) * norm
            d1 = n1
            d2 = (1.0 - A / q * K + K * K) * norm
    elif design == BiquadType.LOWPASS:
        norm = 1.0 / (1.0 + K / q + K * K)
        n0 = K * K * norm
        n1 = 2.0 * n0
        n2 = n0
        d1 = 2.0 * (K * K - 1.0) * norm
        d2 = (1.0 - K / q + K * K) * norm
    elif design == BiquadType.HIGHPASS:
        norm = 1.0 / (1.0 + K / q + K * K)
        n0 = norm
        n1 = -2.0 * n0
        n2 = n0
        d1 = 2.0 * (K * K - 1.0) * norm
        d2 = (1.0 - K / q + K * K) * norm
    elif design == BiquadType.BANDPASS:
        norm = 1.0 / (1.0 + K / q + K * K)
        n0 = K / q * norm
        n1 = 0.0
        n2 = -n0
        d1 = 2.0 * (K * K - 1.0) * norm
        d2 = (1.0 - K / q + K * K) * norm
    elif design == BiquadType.NOTCH:
        norm = 1.0 / (1.0 + K / q + K * K)
        n0 = (1.0 + K * K) * norm
        n1 = 2.0 * (K * K - 1.0) * norm
        n2 = n0
        d1 = n1
        d2 = (1.0 - K / q + K * K) * norm
    elif design == BiquadType.LOWPASS_FO:
        norm = 1.0 / (1.0 / K + 1.0)
        n0 = norm
        n1 = norm
        d1 = (1.0 - 1.0 / K) * norm
    elif design == BiquadType.HIGHPASS_FO:
        norm = 1.0 / (K + 1.0)
        n0 = norm
        n1 = -norm
        d1 = (K - 1.0) * norm
    elif design == BiquadType.LOWSHELF_FO:
        if gain >= 0:
            norm = 1.0 / (K + 1.0)
            n0 = (K * A + 1.0) * norm
            n1 = (K * A - 1.0) * norm
            d1 = (K - 1.0) * norm
        else:
            norm = 1.0 / (K * A + 1.0)
            n0 = (K + 1.0) * norm
            n1 = (K - 1.0) * norm
            d1 = (K * A - 1.0) * norm
    elif design == BiquadType.HIGHSHELF_FO:
        if gain >= 0:
            norm = 1.0 / (K + 1.0)
            n0 = (K + A) * norm
            n1 = (K - A) * norm
            d1 = (K - 1.0) * norm
        else:
            norm = 1.0 / (K + A)
            n0 = (K + 1.0) * norm
            n1 = (K - 1.0) * norm
            d1 = (K - A) * norm
    elif design == BiquadType.ALLPASS_FO:
        n0 = (1.0 - K) / (1.0 + K)
        n1 = -1.0
        d1 = -n0

    return n0, n1, n2, d1, d2


def design_peaking_eq(gain: float, fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(gain, fc, q, fs, BiquadType.PEAK, bypass)


def design_lowpass(fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(0.0, fc, q, fs, BiquadType.LOWPASS, bypass)


def design_highpass(fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(0.0, fc, q, fs, BiquadType.HIGHPASS, bypass)


def design_bandpass(fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    """Constant 0 dB peak gain band-pass."""
    return design_parametric_eq(0.0, fc, q, fs, BiquadType.BANDPASS, bypass)


def design_notch(fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(0.0, fc, q, fs, BiquadType.NOTCH, bypass)


def design_lowpass_first_order(fc: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    # Q does not enter the one-pole forms
    return design_parametric_eq(0.0, fc, 1.0, fs, BiquadType.LOWPASS_FO, bypass)


def design_highpass_first_order(fc: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(0.0, fc, 1.0, fs, BiquadType.HIGHPASS_FO, bypass)


def design_low_shelf_first_order(gain: float, fc: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(gain, fc, 1.0, fs, BiquadType.LOWSHELF_FO, bypass)


def design_high_shelf_first_order(gain: float, fc: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(gain, fc, 1.0, fs, BiquadType.HIGHSHELF_FO, bypass)


def design_allpass_first_order(fc: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    return design_parametric_eq(0.0, fc, 1.0, fs, BiquadType.ALLPASS_FO, bypass)


def design_low_shelf(gain: float, fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    """RBJ low shelf, gain in dB at DC."""
    if bypass is True:
        return IDENTITY
    gain, fc, q, fs = _float64(gain, fc, q, fs)
    with np.errstate(all="ignore"):
        A = 10.0 ** (gain / 40.0)
        w0 = 2.0 * np.pi * fc / fs
        alpha = np.sin(w0) / (2.0 * q)
        cos_w0 = np.cos(w0)
        two_sqrt_A_alpha = 2.0 * np.sqrt(A) * alpha

        a0 = (A + 1.0) + (A - 1.0) * cos_w0 + two_sqrt_A_alpha
        a1 = -(-2.0 * ((A - 1.0) + (A + 1.0) * cos_w0)) / a0
        a2 = -((A + 1.0) + (A - 1.0) * cos_w0 - two_sqrt_A_alpha) / a0
        b0 = (A * ((A + 1.0) - (A - 1.0) * cos_w0 + two_sqrt_A_alpha)) / a0
        b1 = (2.0 * A * ((A - 1.0) - (A + 1.0) * cos_w0)) / a0
        b2 = (A * ((A + 1.0) - (A - 1.0) * cos_w0 - two_sqrt_A_alpha)) / a0
    return BiquadCoefficients.from_taps(b0, b1, b2, a1, a2)


def design_high_shelf(gain: float, fc: float, q: float, fs: float, bypass: bool = False) -> BiquadCoefficients:
    """RBJ high shelf, gain in dB at Nyquist."""
    if bypass is True:
        return IDENTITY
    gain, fc, q, fs = _float64(gain, fc, q, fs)
    with np.errstate(all="ignore"):
        A = 10.0 ** (gain / 40.0)
        w0 = 2.0 * np.pi * fc / fs
        alpha = np.sin(w0) / (2.0 * q)
        cos_w0 = np.cos(w0)
        two_sqrt_A_alpha = 2.0 * np.sqrt(A) * alpha

        a0 = (A + 1.0) - (A - 1.0) * cos_w0 + two_sqrt_A_alpha
        a1 = -(2.0 * ((A - 1.0) - (A + 1.0) * cos_w0)) / a0
        a2 = -((A + 1.0) - (A - 1.0) * cos_w0 - two_sqrt_A_alpha) / a0
        b0 = (A * ((A + 1.0) + (A - 1.0) * cos_w0 + two_sqrt_A_alpha)) / a0
        b1 = (-2.0 * A * ((A - 1.0) + (A + 1.0) * cos_w0)) / a0
        b2 = (A * ((A + 1.0) + (A - 1.0) * cos_w0 - two_sqrt_A_alpha)) / a0
    return BiquadCoefficients.from_taps(b0, b1, b2, a1, a2)


def design_allpass(fc: float, q: float, fs: float, inv: bool = False, bypass: bool = False) -> BiquadCoefficients:
    """RBJ allpass. ``inv`` flips the polarity of the feedforward taps."""
    if bypass is True:
        return IDENTITY
    fc, q, fs = _float64(fc, q, fs)
    with np.errstate(all="ignore"):
        w0 = 2.0 * np.pi * fc / fs
        alpha = np.sin(w0) / (2.0 * q)
        a0 = 1.0 + alpha
        b0 = (1.0 - alpha) / a0
        b1 = -2.0 * np.cos(w0) / a0
        b2 = (1.0 + alpha) / a0
        a1 = 2.0 * np.cos(w0) / a0
        a2 = -(1.0 - alpha) / a0
    if inv is True:
        b0, b1, b2 = -b0, -b1, -b2
    return BiquadCoefficients.from_taps(b0, b1, b2, a1, a2)
