"""Name-based entry point that routes a filter alias to the right designer."""
from __future__ import annotations

import logging
import numbers
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..config import DEFAULTS
from ..errors import InvalidArgumentError, UnknownFilterError
from .biquad import (
    BiquadType,
    design_allpass,
    design_high_shelf,
    design_low_shelf,
    design_parametric_eq,
)
from .cascade import HIGHPASS, LOWPASS, design_high_pass_cascade, design_low_pass_cascade
from .coefficients import BiquadCoefficients, StagedCoefficients
from .registry import FilterDesignMeta, design_map, lookup_by_alias
from .riaa import RIAAConfig, RIAAResult, design_riaa

logger = logging.getLogger(__name__)

Result = Union[BiquadCoefficients, StagedCoefficients, RIAAResult]

RIAA_ALIASES: Dict[str, bool] = {
    "riaa": False,
    "riaa_std": False,
    "riaa-standard": False,
    "riaa_inv": True,
    "riaa-inv": True,
    "riaa_inverse": True,
    "riaa-inverse": True,
}

BIQUAD_ALIASES: Dict[str, BiquadType] = {
    "peq": BiquadType.PEAK,
    "peak": BiquadType.PEAK,
    "peaking": BiquadType.PEAK,
    "lpf": BiquadType.LOWPASS,
    "lowpass": BiquadType.LOWPASS,
    "hpf": BiquadType.HIGHPASS,
    "highpass": BiquadType.HIGHPASS,
    "bp": BiquadType.BANDPASS,
    "bandpass": BiquadType.BANDPASS,
    "notch": BiquadType.NOTCH,
    "ls": BiquadType.LOWSHELF,
    "lowshelf": BiquadType.LOWSHELF,
    "hs": BiquadType.HIGHSHELF,
    "highshelf": BiquadType.HIGHSHELF,
    "ap": BiquadType.ALLPASS,
    "allpass": BiquadType.ALLPASS,
    "lpfo": BiquadType.LOWPASS_FO,
    "lpf1": BiquadType.LOWPASS_FO,
    "lp_fo": BiquadType.LOWPASS_FO,
    "hpfo": BiquadType.HIGHPASS_FO,
    "hpf1": BiquadType.HIGHPASS_FO,
    "hp_fo": BiquadType.HIGHPASS_FO,
    "lsfo": BiquadType.LOWSHELF_FO,
    "lowshelf1": BiquadType.LOWSHELF_FO,
    "lowshelf_fo": BiquadType.LOWSHELF_FO,
    "hsfo": BiquadType.HIGHSHELF_FO,
    "highshelf1": BiquadType.HIGHSHELF_FO,
    "highshelf_fo": BiquadType.HIGHSHELF_FO,
    "apfo": BiquadType.ALLPASS_FO,
    "allpass1": BiquadType.ALLPASS_FO,
    "allpass_fo": BiquadType.ALLPASS_FO,
}


def _positive(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return value > 0


def _require_rates(kind: str, alias: str, data: Mapping[str, Any]) -> Tuple[float, float]:
    fc, fs = data.get("fc"), data.get("fs")
    if not (_positive(fc) and _positive(fs)):
        logger.warning("Rejected %s alias %r: fc=%r fs=%r", kind, alias, fc, fs)
        raise InvalidArgumentError(f"{kind} alias '{alias}' requires positive fc and fs")
    return fc, fs


def resolve_alias(alias: str) -> Tuple[str, Union[FilterDesignMeta, bool, BiquadType]]:
    """Say what a name refers to without designing anything.

    Returns one of ``("crossover", FilterDesignMeta)``, ``("riaa", inverse)``
    or ``("biquad", BiquadType)``.

    Raises:
        InvalidArgumentError: if alias is not a non-empty string
        UnknownFilterError: if alias matches nothing
    """
    if not isinstance(alias, str) or not alias:
        raise InvalidArgumentError("alias must be a non-empty string")
    key = alias.lower()

    meta = lookup_by_alias(key)
    if meta is not None:
        return "crossover", meta
    if key in RIAA_ALIASES:
        return "riaa", RIAA_ALIASES[key]
    if key in BIQUAD_ALIASES:
        return "biquad", BIQUAD_ALIASES[key]
    raise UnknownFilterError(f"Unknown filter alias: '{alias}'")


def available_aliases() -> Dict[str, str]:
    """Every accepted name mapped to the kind of designer it reaches."""
    names = {alias: "crossover" for alias in design_map()}
    names.update({alias: "riaa" for alias in RIAA_ALIASES})
    names.update({alias: "biquad" for alias in BIQUAD_ALIASES})
    return dict(sorted(names.items()))


def generate_coefficients(alias: str, data: Optional[Mapping[str, Any]] = None) -> Result:
    """Design the filter named by ``alias``.

    Crossover names need ``mode`` ("lowpass" or "highpass"), ``fc`` and
    ``fs``. RIAA names take RIAAConfig fields. Biquad names need ``fc`` and
    ``fs`` and accept ``gain`` (0), ``Q`` (0.707), ``bypass`` and, for the
    allpass names (first-order ones included), ``inv``. ``bypass`` and
    ``inv`` take effect only when they are exactly True.

    Raises:
        InvalidArgumentError: bad alias type or missing/invalid parameters
        UnknownFilterError: alias does not name any filter
    """
    data = data or {}
    try:
        kind, target = resolve_alias(alias)
    except UnknownFilterError:
        logger.warning("Unknown filter alias %r", alias)
        raise
    logger.debug("Resolved %r to %s %r", alias, kind, target)

    if kind == "crossover":
        mode = data.get("mode")
        if mode not in (LOWPASS, HIGHPASS):
            logger.warning("Rejected crossover alias %r: mode=%r", alias, mode)
            raise InvalidArgumentError(
                f"Crossover alias '{alias}' requires data.mode to be 'lowpass' or 'highpass'"
            )
        fc, fs = _require_rates("Crossover", alias, data)
        bypass = data.get("bypass", False) is True
        if mode == LOWPASS:
            return design_low_pass_cascade(target.id, fc, fs, bypass)
        return design_high_pass_cascade(target.id, fc, fs, bypass)

    if kind == "riaa":
        return design_riaa(RIAAConfig.from_mapping(data, inverse_riaa=target))

    fc, fs = _require_rates("Biquad", alias, data)
    gain = data.get("gain", DEFAULTS.gain)
    q = data.get("Q", DEFAULTS.q)
    bypass = data.get("bypass", False) is True
    if target == BiquadType.LOWSHELF:
        return design_low_shelf(gain, fc, q, fs, bypass)
    if target == BiquadType.HIGHSHELF:
        return design_high_shelf(gain, fc, q, fs, bypass)
    if target in (BiquadType.ALLPASS, BiquadType.ALLPASS_FO):
        # the first-order names share the second-order allpass here
        return design_allpass(fc, q, fs, data.get("inv", False) is True, bypass)
    return design_parametric_eq(gain, fc, q, fs, target, bypass)
