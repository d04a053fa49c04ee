import logging

import numpy as np
import pytest

from audiofilters import FilterDesignError, InvalidArgumentError, UnknownFilterError
from audiofilters.dsp.biquad import (
    BiquadType,
    design_allpass,
    design_low_shelf,
    design_parametric_eq,
)
from audiofilters.dsp.cascade import design_high_pass_cascade, design_low_pass_cascade
from audiofilters.dsp.coefficients import IDENTITY, BiquadCoefficients, StagedCoefficients
from audiofilters.dsp.engine import available_aliases, generate_coefficients, resolve_alias
from audiofilters.dsp.registry import CrossoverDesign
from audiofilters.dsp.riaa import RIAAResult

RATES = {"fc": 1000.0, "fs": 48000.0}


def test_alias_is_case_insensitive():
    assert generate_coefficients("LPF", RATES) == generate_coefficients("lpf", RATES)
    assert generate_coefficients("Linkwitz24", dict(RATES, mode="lowpass")) == generate_coefficients(
        "lr24", dict(RATES, mode="lowpass")
    )


def test_peq_scenario():
    section = generate_coefficients("peq", {"gain": 6, "fc": 1000, "Q": 1.0, "fs": 48000})
    assert isinstance(section, BiquadCoefficients)
    assert section.a0 == 1.0
    assert np.all(np.isfinite(list(section.as_dict().values())))
    assert section == design_parametric_eq(6, 1000, 1.0, 48000, BiquadType.PEAK)


def test_crossover_scenario():
    result = generate_coefficients("lr24", {"mode": "highpass", "fc": 2000, "fs": 48000})
    assert isinstance(result, StagedCoefficients)
    assert len(result) == 2
    assert result == design_high_pass_cascade(CrossoverDesign.LinkwitzRiley24, 2000, 48000)


def test_unknown_alias_raises_and_logs(caplog):
    with caplog.at_level(logging.WARNING, logger="audiofilters.dsp.engine"):
        with pytest.raises(UnknownFilterError) as excinfo:
            generate_coefficients("bogus", RATES)
    assert isinstance(excinfo.value, LookupError)
    assert isinstance(excinfo.value, FilterDesignError)
    assert "bogus" in str(excinfo.value)
    assert "bogus" in caplog.text


@pytest.mark.parametrize("alias", ["", None, 3, b"lpf"])
def test_alias_must_be_non_empty_string(alias):
    with pytest.raises(InvalidArgumentError) as excinfo:
        generate_coefficients(alias, RATES)
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.parametrize("mode", [None, "bandpass", "LOWPASS", 1])
def test_crossover_requires_mode(mode):
    data = dict(RATES)
    if mode is not None:
        data["mode"] = mode
    with pytest.raises(InvalidArgumentError, match="mode"):
        generate_coefficients("butter12", data)


@pytest.mark.parametrize(
    "patch",
    [{"fc": None}, {"fs": None}, {"fc": 0}, {"fs": -48000}, {"fc": "1000"}, {"fs": True}, {"fc": float("nan")}],
)
@pytest.mark.parametrize("alias, extra", [("lr24", {"mode": "lowpass"}), ("peq", {}), ("apfo", {})])
def test_rates_must_be_positive_numbers(alias, extra, patch):
    data = dict(RATES, **extra)
    data.update(patch)
    data = {k: v for k, v in data.items() if v is not None}
    with pytest.raises(InvalidArgumentError):
        generate_coefficients(alias, data)


def test_missing_data_is_rejected_for_designers_that_need_rates():
    with pytest.raises(InvalidArgumentError):
        generate_coefficients("peq")


@pytest.mark.parametrize("alias, inverse", [("riaa", False), ("RIAA_INV", True), ("riaa-inverse", True)])
def test_riaa_alias_sets_inverse_flag(alias, inverse):
    result = generate_coefficients(alias, {"inverse_riaa": not inverse, "dc_block": False})
    assert isinstance(result, RIAAResult)
    assert result.config.inverse_riaa is inverse
    assert result.combined.total_count == 7


def test_riaa_needs_no_rates():
    result = generate_coefficients("riaa")
    assert result.combined.total_count == 10


def test_extra_keys_are_ignored():
    data = dict(RATES, gain=3.0, Q=0.9, mode="lowpass", colour="red")
    assert generate_coefficients("peq", data) == design_parametric_eq(3.0, 1000.0, 0.9, 48000.0, BiquadType.PEAK)
    assert generate_coefficients("riaa", data).config.sample_rate == 48000


def test_biquad_defaults():
    assert generate_coefficients("peq", RATES) == design_parametric_eq(0.0, 1000.0, 0.707, 48000.0)
    assert generate_coefficients("ls", RATES) == design_low_shelf(0.0, 1000.0, 0.707, 48000.0)


def test_shelf_alias_uses_dedicated_designer():
    data = dict(RATES, gain=-4.5, Q=0.6)
    assert generate_coefficients("ls", data) == design_low_shelf(-4.5, 1000.0, 0.6, 48000.0)


def test_allpass_inversion_flag():
    plain = generate_coefficients("ap", dict(RATES, Q=0.8))
    inverted = generate_coefficients("allpass", dict(RATES, Q=0.8, inv=True))
    assert plain == design_allpass(1000.0, 0.8, 48000.0)
    assert inverted == design_allpass(1000.0, 0.8, 48000.0, inv=True)


@pytest.mark.parametrize("alias", ["apfo", "allpass1", "allpass_fo"])
def test_first_order_allpass_names_use_allpass_designer(alias):
    data = dict(RATES, Q=0.8, inv=True)
    assert generate_coefficients(alias, data) == design_allpass(1000.0, 0.8, 48000.0, inv=True)
    assert generate_coefficients(alias, dict(RATES, Q=0.8)) == design_allpass(1000.0, 0.8, 48000.0)


@pytest.mark.parametrize("value", ["false", "true", 1, 1.0])
def test_bypass_and_inv_need_literal_true(value):
    data = dict(RATES, gain=6.0, bypass=value)
    assert generate_coefficients("peq", data) == design_parametric_eq(6.0, 1000.0, 0.707, 48000.0)
    crossover = generate_coefficients("lr24", dict(RATES, mode="lowpass", bypass=value))
    assert crossover == design_low_pass_cascade(CrossoverDesign.LinkwitzRiley24, 1000.0, 48000.0)
    assert generate_coefficients("ap", dict(RATES, inv=value)) == design_allpass(1000.0, 0.707, 48000.0)


@pytest.mark.parametrize("alias", ["peq", "hs", "ap", "notch", "lsfo"])
def test_biquad_bypass(alias):
    assert generate_coefficients(alias, dict(RATES, gain=6.0, bypass=True)) == IDENTITY


def test_crossover_bypass():
    result = generate_coefficients("bessel24", dict(RATES, mode="lowpass", bypass=True))
    assert result.stages == (IDENTITY, IDENTITY)
    assert generate_coefficients("bessel24", dict(RATES, mode="lowpass")) == design_low_pass_cascade(
        CrossoverDesign.Bessel24, 1000.0, 48000.0
    )


def test_resolve_alias_kinds():
    kind, meta = resolve_alias("Butter18")
    assert kind == "crossover" and meta.id == CrossoverDesign.Butterworth18
    assert resolve_alias("riaa_inv") == ("riaa", True)
    assert resolve_alias("HPF") == ("biquad", BiquadType.HIGHPASS)
    with pytest.raises(UnknownFilterError):
        resolve_alias("lr99")


def test_every_available_alias_resolves():
    names = available_aliases()
    assert names["lr48"] == "crossover"
    assert names["riaa"] == "riaa"
    assert names["peq"] == "biquad"
    for alias, kind in names.items():
        assert resolve_alias(alias)[0] == kind
        assert resolve_alias(alias.upper())[0] == kind
