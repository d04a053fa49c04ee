import math

from audiofilters.dsp.registry import (
    ASSUME_SINGLE_SECTION,
    CrossoverDesign,
    Family,
    aliases_for,
    design_info,
    design_map,
    list_designs,
    lookup_by_alias,
    lookup_by_id,
    sections_for,
)


def test_sections_match_metadata(design):
    assert sections_for(design.id) == design.sections
    for alias in design.aliases:
        assert sections_for(alias) == design.sections
    assert design.sections == math.ceil(design.order / 2)


def test_unknown_design_assumes_single_section():
    assert ASSUME_SINGLE_SECTION == 1
    assert sections_for(99) == ASSUME_SINGLE_SECTION
    assert sections_for("bogus") == ASSUME_SINGLE_SECTION


def test_ids_follow_enum(design):
    assert CrossoverDesign(design.id).name == design.key
    assert lookup_by_id(design.id) is design
    assert design_info(design.id) is design


def test_aliases_are_unique_and_lowercase():
    seen = []
    for meta in list_designs():
        assert meta.aliases
        seen.extend(meta.aliases)
    assert len(seen) == len(set(seen))
    assert all(alias == alias.lower() for alias in seen)


def test_alias_lookup_is_case_insensitive():
    meta = lookup_by_alias("LR24")
    assert meta is not None
    assert meta.id == CrossoverDesign.LinkwitzRiley24
    assert lookup_by_alias("Butter18").key == "Butterworth18"
    assert design_info("BESSEL6").id == 0


def test_unknown_lookups_return_none():
    assert lookup_by_alias("lr99") is None
    assert lookup_by_alias(8) is None
    assert lookup_by_id(42) is None
    assert lookup_by_id(True) is None
    assert design_info("") is None


def test_stage_q_only_on_linkwitz_riley(design):
    if design.family is Family.LINKWITZ_RILEY:
        assert len(design.stage_q) == design.sections
    else:
        assert design.stage_q is None


def test_linkwitz_riley_stage_q_values():
    assert lookup_by_alias("lr12").stage_q == (0.5,)
    assert lookup_by_alias("lr24").stage_q == (0.71, 0.71)
    assert lookup_by_alias("lr36").stage_q == (0.5, 1.0, 1.0)
    assert lookup_by_alias("lr48").stage_q == (0.54, 1.34, 0.54, 1.34)


def test_slope_and_kind(design):
    assert design.slope_db_per_oct == 6 * design.order
    assert design.kind == "crossover"


def test_design_map_and_reverse_lookup():
    mapping = design_map()
    assert mapping["butter12"] == CrossoverDesign.Butterworth12
    assert mapping["linkwitz48"] == 0x0A
    assert len(mapping) == sum(len(meta.aliases) for meta in list_designs())
    assert aliases_for(CrossoverDesign.LinkwitzRiley24) == ("linkwitz24", "lr24")
    assert aliases_for(77) == ()


def test_list_designs_in_id_order():
    ids = [meta.id for meta in list_designs()]
    assert ids == sorted(ids) == list(range(11))
