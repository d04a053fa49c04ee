"""Static metadata for the crossover filter designs."""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple, Union


class Family(Enum):
    BESSEL = "Bessel"
    BUTTERWORTH = "Butterworth"
    LINKWITZ_RILEY = "Linkwitz-Riley"


class CrossoverDesign(IntEnum):
    """Numeric ids of the cascade designs."""

    Bessel6 = 0x00
    Bessel12 = 0x01
    Bessel18 = 0x02
    Bessel24 = 0x03
    Butterworth12 = 0x04
    Butterworth18 = 0x05
    Butterworth24 = 0x06
    LinkwitzRiley12 = 0x07
    LinkwitzRiley24 = 0x08
    LinkwitzRiley36 = 0x09
    LinkwitzRiley48 = 0x0A


@dataclass(frozen=True)
class FilterDesignMeta:
    """Describes one family/order combination of a crossover cascade."""

    id: int
    key: str
    family: Family
    order: int
    slope_db_per_oct: int
    sections: int
    aliases: Tuple[str, ...]
    kind: str = "crossover"
    stage_q: Optional[Tuple[float, ...]] = None


# Returned by sections_for() when the identifier is not a known design.
ASSUME_SINGLE_SECTION = 1


def _design(
    design: CrossoverDesign,
    family: Family,
    order: int,
    aliases: Tuple[str, ...],
    stage_q: Optional[Tuple[float, ...]] = None,
) -> FilterDesignMeta:
    return FilterDesignMeta(
        id=int(design),
        key=design.name,
        family=family,
        order=order,
        slope_db_per_oct=6 * order,
        sections=math.ceil(order / 2),
        aliases=aliases,
        stage_q=stage_q,
    )


_DESIGNS: Tuple[FilterDesignMeta, ...] = (
    _design(CrossoverDesign.Bessel6, Family.BESSEL, 1, ("bessel6",)),
    _design(CrossoverDesign.Bessel12, Family.BESSEL, 2, ("bessel12",)),
    _design(CrossoverDesign.Bessel18, Family.BESSEL, 3, ("bessel18",)),
    _design(CrossoverDesign.Bessel24, Family.BESSEL, 4, ("bessel24",)),
    _design(CrossoverDesign.Butterworth12, Family.BUTTERWORTH, 2, ("butterworth12", "butter12")),
    _design(CrossoverDesign.Butterworth18, Family.BUTTERWORTH, 3, ("butterworth18", "butter18")),
    _design(CrossoverDesign.Butterworth24, Family.BUTTERWORTH, 4, ("butterworth24", "butter24")),
    _design(CrossoverDesign.LinkwitzRiley12, Family.LINKWITZ_RILEY, 2, ("linkwitz12", "lr12"), (0.5,)),
    _design(CrossoverDesign.LinkwitzRiley24, Family.LINKWITZ_RILEY, 4, ("linkwitz24", "lr24"), (0.71, 0.71)),
    _design(CrossoverDesign.LinkwitzRiley36, Family.LINKWITZ_RILEY, 6, ("linkwitz36", "lr36"), (0.5, 1.0, 1.0)),
    _design(
        CrossoverDesign.LinkwitzRiley48,
        Family.LINKWITZ_RILEY,
        8,
        ("linkwitz48", "lr48"),
        (0.54, 1.34, 0.54, 1.34),
    ),
)


def _build_indexes(
    designs: Tuple[FilterDesignMeta, ...],
) -> Tuple[Dict[int, FilterDesignMeta], Dict[str, FilterDesignMeta]]:
    by_id: Dict[int, FilterDesignMeta] = {}
    by_alias: Dict[str, FilterDesignMeta] = {}
    for meta in designs:
        if meta.id in by_id:
            raise ValueError(f"Duplicate design id: {meta.id}")
        if not meta.aliases:
            raise ValueError(f"Design {meta.key} has no aliases")
        if meta.sections != math.ceil(meta.order / 2):
            raise ValueError(f"Design {meta.key} declares {meta.sections} sections for order {meta.order}")
        if meta.stage_q is not None and len(meta.stage_q) != meta.sections:
            raise ValueError(f"Design {meta.key} needs one stage Q per section")
        by_id[meta.id] = meta
        for alias in meta.aliases:
            key = alias.lower()
            if key in by_alias:
                raise ValueError(f"Duplicate design alias: {alias}")
            by_alias[key] = meta
    return by_id, by_alias


_BY_ID, _BY_ALIAS = _build_indexes(_DESIGNS)


def list_designs() -> Tuple[FilterDesignMeta, ...]:
    """All known designs, ordered by id."""
    return tuple(sorted(_DESIGNS, key=lambda meta: meta.id))


def lookup_by_id(design_id: int) -> Optional[FilterDesignMeta]:
    if isinstance(design_id, bool):
        return None
    return _BY_ID.get(design_id)


def lookup_by_alias(name: str) -> Optional[FilterDesignMeta]:
    if not isinstance(name, str):
        return None
    return _BY_ALIAS.get(name.lower())


def design_info(identifier: Union[int, str]) -> Optional[FilterDesignMeta]:
    """Resolve either a numeric id or an alias."""
    if isinstance(identifier, str):
        return lookup_by_alias(identifier)
    return lookup_by_id(identifier)


def sections_for(identifier: Union[int, str]) -> int:
    """Number of cascaded sections, or ASSUME_SINGLE_SECTION if unknown."""
    meta = design_info(identifier)
    if meta is None:
        return ASSUME_SINGLE_SECTION
    return meta.sections


def aliases_for(design_id: int) -> Tuple[str, ...]:
    meta = lookup_by_id(design_id)
    return meta.aliases if meta is not None else ()


def design_map() -> Dict[str, int]:
    """Flat alias -> id mapping."""
    return {alias: meta.id for alias, meta in _BY_ALIAS.items()}
