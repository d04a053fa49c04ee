"""RIAA phono equalization coefficient sets with an optional DC blocker."""
from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import numpy as np

logger = logging.getLogger(__name__)

# Polynomial taps of the 75/318/3180 us curve. Only the filter_gain-scaled
# taps depend on the configuration; the curve does not follow sample_rate.
_STANDARD_TAPS = (0.07936507857142856, -0.059964452380952375, 1.7327655, -0.013065532642857144, -0.7345534436)
_INVERSE_TAPS = (0.07936507857142856, -0.13752107142857142, 0.7555521, 0.05829789234920635, 0.1646257113)


@dataclass(frozen=True)
class RIAAConfig:
    inverse_riaa: bool = False
    dc_block: bool = True
    dc_cutoff_freq: float = 1.0  # Hz
    sample_rate: float = 48000
    input_gain: float = 0.3
    filter_gain: float = 1.0
    output_gain: float = 1.0  # carried as metadata, not applied

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]] = None, **overrides: Any) -> "RIAAConfig":
        """Merge known keys of ``data`` and ``overrides`` over the defaults."""
        known = {f.name for f in fields(cls)}
        merged: Dict[str, Any] = dict(data or {})
        merged.update(overrides)
        ignored = sorted(k for k in merged if k not in known)
        if ignored:
            logger.debug("Ignoring non-RIAA options: %s", ", ".join(map(str, ignored)))
        return cls(**{k: v for k, v in merged.items() if k in known})


@dataclass(frozen=True)
class DCBlockSection:
    enabled: bool
    coefficients: Tuple[float, ...]
    description: str


@dataclass(frozen=True)
class RIAASection:
    type: str
    coefficients: Tuple[float, ...]
    description: str


@dataclass(frozen=True)
class CombinedCoefficients:
    coefficients: Tuple[float, ...]
    total_count: int


@dataclass(frozen=True)
class UsageNotes:
    purpose: str
    frequency_response: str
    typical_use: str
    dc_blocking: str


@dataclass(frozen=True)
class RIAAResult:
    config: RIAAConfig
    dc_block: DCBlockSection
    riaa: RIAASection
    combined: CombinedCoefficients
    usage_notes: UsageNotes

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for section in ("dc_block", "riaa", "combined"):
            data[section]["coefficients"] = list(data[section]["coefficients"])
        return data


def _dc_block_section(config: RIAAConfig) -> DCBlockSection:
    if not config.dc_block:
        return DCBlockSection(False, (), "DC blocking disabled")
    with np.errstate(all="ignore"):
        beta = np.pi * 2.0 * config.dc_cutoff_freq / np.float64(config.sample_rate)
        alpha = (2.0 - beta) / 2.0
    return DCBlockSection(
        True,
        (float(alpha), -0.99999, float(1.0 - beta)),
        "High-pass DC blocking filter",
    )


def _riaa_section(config: RIAAConfig) -> RIAASection:
    t1, t2, t3, t4, t5 = _INVERSE_TAPS if config.inverse_riaa else _STANDARD_TAPS
    g = config.filter_gain
    coefficients = (config.input_gain, g * t1, g * t2, t3, g * t4, t5, 1)
    kind = "inverse" if config.inverse_riaa else "standard"
    return RIAASection(kind, coefficients, f"{kind.capitalize()} RIAA equalization filter")


def design_riaa(config: Union[RIAAConfig, Mapping[str, Any], None] = None, **overrides: Any) -> RIAAResult:
    """Build the RIAA coefficient set.

    Args:
        config: base configuration, either a RIAAConfig or a mapping of its
            fields merged over the defaults
        **overrides: individual RIAAConfig fields to replace; unknown names
            are ignored like unknown mapping keys

    Returns:
        RIAAResult with the optional DC blocker taps, the seven RIAA taps and
        their concatenation (DC blocker first).
    """
    if isinstance(config, RIAAConfig):
        config = asdict(config)
    config = RIAAConfig.from_mapping(config, **overrides)
    dc_block = _dc_block_section(config)
    riaa = _riaa_section(config)
    combined = dc_block.coefficients + riaa.coefficients
    notes = UsageNotes(
        purpose="RIAA equalization for vinyl/phono preamp applications",
        frequency_response="Standard RIAA curve (75μs + 318μs + 3180μs time constants)",
        typical_use="ADC input processing for analog audio signals",
        dc_blocking="Removes DC offset from analog sources" if config.dc_block else "No DC blocking applied",
    )
    return RIAAResult(config, dc_block, riaa, CombinedCoefficients(combined, len(combined)), notes)
