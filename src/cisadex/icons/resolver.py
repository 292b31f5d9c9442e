"""Icon precedence resolution for entities and clusters.

An entity's marker shows exactly one identity: a sector, a function or its
parent agency. Clusters show whichever tag dominates their members, or a
generic federal icon when none does.
"""

import math
import re
from collections.abc import Sequence

from cisadex.config.settings import CoordinationTuning, get_settings
from cisadex.entity.types import (
    CriticalInfrastructureSector,
    FederalEntity,
    OperationalFunction,
)
from cisadex.utils.tags import count_tags, dominant_tag

from .tables import (
    FEDERAL_GENERIC,
    GENERIC_COLOR,
    GENERIC_ICONS,
    ICON_BASE_SIZES,
    PRIORITY_SIZE_MULTIPLIERS,
    UNRANKED_PRIORITY,
    agency_glyph,
    function_glyph,
    function_rank,
    sector_glyph,
    sector_rank,
)
from .types import IconConfig, IconGlyph, IconInfo, IconSet, IconSize

GENERIC_LABEL = "Federal Entity"
DEFAULT_FUNCTION = OperationalFunction.LAW_ENFORCEMENT.value
DEFAULT_SECTOR = CriticalInfrastructureSector.GOVERNMENT_FACILITIES.value

_WORD_START = re.compile(r"\b\w")


def primary_function(functions: Sequence[str]) -> str:
    """Highest priority function tag, law_enforcement when there are none.

    The first of equally ranked tags wins.
    """
    if not functions:
        return DEFAULT_FUNCTION
    return min(functions, key=function_rank)


def primary_sector(sectors: Sequence[str]) -> str:
    """Highest priority sector tag, government_facilities when there are none."""
    if not sectors:
        return DEFAULT_SECTOR
    return min(sectors, key=sector_rank)


def _generic_config(fallbacks: list[str]) -> IconConfig:
    return IconConfig(
        primary=FEDERAL_GENERIC,
        icon_set=IconSet.GENERIC,
        fallbacks=fallbacks,
        color=GENERIC_COLOR,
        priority=UNRANKED_PRIORITY,
    )


def _color(glyph: IconGlyph | None) -> str:
    return glyph.color if glyph is not None else GENERIC_COLOR


def determine_entity_icon(entity: FederalEntity) -> IconConfig:
    """Pick the single icon identity for an entity.

    Rules, first match wins:
        1. Exactly one sector: that sector.
        2. Several sectors, or government_facilities among them: the highest
           priority function.
        3. Otherwise the parent agency, or the generic federal icon when the
           agency is not recognized.
    """
    agency_key = entity.parent_agency.lower()

    if len(entity.sectors) == 1:
        sector = entity.sectors[0]
        return IconConfig(
            primary=sector,
            icon_set=IconSet.SECTOR,
            fallbacks=[
                entity.functions[0] if entity.functions else DEFAULT_FUNCTION,
                agency_key,
            ],
            color=_color(sector_glyph(sector)),
            priority=1,
        )

    if len(entity.sectors) > 1 or DEFAULT_SECTOR in entity.sectors:
        function = primary_function(entity.functions)
        return IconConfig(
            primary=function,
            icon_set=IconSet.FUNCTION,
            fallbacks=[primary_sector(entity.sectors), agency_key],
            color=_color(function_glyph(function)),
            priority=2,
        )

    glyph = agency_glyph(entity.parent_agency)
    if glyph is None:
        return _generic_config([agency_key])
    return IconConfig(
        primary=agency_key,
        icon_set=IconSet.AGENCY,
        fallbacks=[FEDERAL_GENERIC],
        color=glyph.color,
        priority=3,
    )


def get_cluster_icon(
    entities: Sequence[FederalEntity], tuning: CoordinationTuning | None = None
) -> IconConfig:
    """Pick the icon for a group of entities from its dominant tag.

    A sector wins when it appears in more than sector_dominance of the
    members, then a function over function_dominance, then an agency over
    agency_dominance. A mixed cluster gets the generic federal icon.
    """
    if not entities:
        return _generic_config([])

    tuning = tuning or get_settings().coordination
    member_count = len(entities)

    sector_counts = count_tags(e.sectors for e in entities)
    function_counts = count_tags(e.functions for e in entities)
    agency_counts = count_tags([e.parent_agency] for e in entities)

    top_sector = dominant_tag(sector_counts)
    top_function = dominant_tag(function_counts)
    top_agency = dominant_tag(agency_counts)
    top_agency_key = top_agency.lower() if top_agency else None

    def present(*tags: str | None) -> list[str]:
        return [tag for tag in tags if tag]

    if top_sector and sector_counts[top_sector] / member_count > tuning.sector_dominance:
        return IconConfig(
            primary=top_sector,
            icon_set=IconSet.SECTOR,
            fallbacks=present(top_function, top_agency_key),
            color=_color(sector_glyph(top_sector)),
            priority=1,
        )

    if top_function and function_counts[top_function] / member_count > tuning.function_dominance:
        return IconConfig(
            primary=top_function,
            icon_set=IconSet.FUNCTION,
            fallbacks=present(top_sector, top_agency_key),
            color=_color(function_glyph(top_function)),
            priority=2,
        )

    if top_agency and agency_counts[top_agency] / member_count > tuning.agency_dominance:
        return IconConfig(
            primary=top_agency.lower(),
            icon_set=IconSet.AGENCY,
            fallbacks=present(top_function, top_sector),
            color=_color(agency_glyph(top_agency)),
            priority=3,
        )

    return _generic_config(present(top_function, top_sector))


def _label(tag: str) -> str:
    return _WORD_START.sub(lambda m: m.group(0).upper(), tag.replace("_", " "))


def get_icon_info(config: IconConfig) -> IconInfo:
    """Resolve display details, falling back to the generic federal glyph."""
    glyph: IconGlyph | None = None
    label = GENERIC_LABEL

    if config.icon_set is IconSet.SECTOR:
        glyph = sector_glyph(config.primary)
        label = _label(config.primary)
    elif config.icon_set is IconSet.FUNCTION:
        glyph = function_glyph(config.primary)
        label = _label(config.primary)
    elif config.icon_set is IconSet.AGENCY:
        glyph = agency_glyph(config.primary)
        label = config.primary.upper()

    if glyph is None:
        glyph = GENERIC_ICONS[FEDERAL_GENERIC]
        label = GENERIC_LABEL

    return IconInfo(
        icon=glyph.icon,
        color=config.color or glyph.color,
        emoji=glyph.emoji,
        label=label,
        fallback_emoji=glyph.emoji,
    )


def get_icon_size(zoom_level: int, priority: int) -> IconSize:
    """Marker size for a zoom level, enlarged for priority 1 and 2 icons.

    Zoom levels outside the table clamp to its ends.
    """
    index = min(max(int(zoom_level), 0), len(ICON_BASE_SIZES) - 1)
    base = ICON_BASE_SIZES[index]
    size = math.floor(base * PRIORITY_SIZE_MULTIPLIERS.get(priority, 1.0) + 0.5)
    return IconSize(width=size, height=size)
