"""Biquad, crossover and RIAA coefficient design for audio filters."""
import logging

from .config import DEFAULTS, DesignDefaults
from .dsp import (
    IDENTITY,
    BiquadCoefficients,
    BiquadType,
    CrossoverDesign,
    FilterDesignMeta,
    RIAAConfig,
    RIAAResult,
    StagedCoefficients,
    design_allpass,
    design_high_pass_cascade,
    design_high_shelf,
    design_info,
    design_low_pass_cascade,
    design_low_shelf,
    design_parametric_eq,
    design_peaking_eq,
    design_riaa,
    generate_coefficients,
    list_designs,
    sections_for,
)
from .errors import FilterDesignError, InvalidArgumentError, UnknownFilterError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DEFAULTS",
    "DesignDefaults",
    "IDENTITY",
    "BiquadCoefficients",
    "BiquadType",
    "CrossoverDesign",
    "FilterDesignMeta",
    "RIAAConfig",
    "RIAAResult",
    "StagedCoefficients",
    "FilterDesignError",
    "InvalidArgumentError",
    "UnknownFilterError",
    "design_allpass",
    "design_high_pass_cascade",
    "design_high_shelf",
    "design_info",
    "design_low_pass_cascade",
    "design_low_shelf",
    "design_parametric_eq",
    "design_peaking_eq",
    "design_riaa",
    "generate_coefficients",
    "list_designs",
    "sections_for",
]
