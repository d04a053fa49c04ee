"""DSP package exports: coefficient designers, registry and dispatch."""
from .biquad import (
    BiquadType,
    default_coefficients,
    design_allpass,
    design_allpass_first_order,
    design_bandpass,
    design_high_shelf,
    design_high_shelf_first_order,
    design_highpass,
    design_highpass_first_order,
    design_low_shelf,
    design_low_shelf_first_order,
    design_lowpass,
    design_lowpass_first_order,
    design_notch,
    design_parametric_eq,
    design_peaking_eq,
)
from .cascade import design_high_pass_cascade, design_low_pass_cascade
from .coefficients import IDENTITY, BiquadCoefficients, StagedCoefficients
from .engine import available_aliases, generate_coefficients, resolve_alias
from .registry import (
    ASSUME_SINGLE_SECTION,
    CrossoverDesign,
    Family,
    FilterDesignMeta,
    aliases_for,
    design_info,
    design_map,
    list_designs,
    lookup_by_alias,
    lookup_by_id,
    sections_for,
)
from .riaa import RIAAConfig, RIAAResult, design_riaa
from . import response

__all__ = [
    "ASSUME_SINGLE_SECTION",
    "BiquadCoefficients",
    "BiquadType",
    "CrossoverDesign",
    "Family",
    "FilterDesignMeta",
    "IDENTITY",
    "RIAAConfig",
    "RIAAResult",
    "StagedCoefficients",
    "aliases_for",
    "available_aliases",
    "default_coefficients",
    "design_allpass",
    "design_allpass_first_order",
    "design_bandpass",
    "design_high_pass_cascade",
    "design_high_shelf",
    "design_high_shelf_first_order",
    "design_highpass",
    "design_highpass_first_order",
    "design_info",
    "design_low_pass_cascade",
    "design_low_shelf",
    "design_low_shelf_first_order",
    "design_lowpass",
    "design_lowpass_first_order",
    "design_map",
    "design_notch",
    "design_parametric_eq",
    "design_peaking_eq",
    "design_riaa",
    "generate_coefficients",
    "list_designs",
    "lookup_by_alias",
    "lookup_by_id",
    "resolve_alias",
    "response",
    "sections_for",
]
