"""Icon precedence resolution for entity and cluster markers."""

from .resolver import (
    GENERIC_LABEL,
    determine_entity_icon,
    get_cluster_icon,
    get_icon_info,
    get_icon_size,
    primary_function,
    primary_sector,
)
from .tables import (
    AGENCY_ICONS,
    FEDERAL_GENERIC,
    FUNCTION_ICONS,
    GENERIC_COLOR,
    GENERIC_ICONS,
    SECTOR_ICONS,
)
from .types import IconConfig, IconGlyph, IconInfo, IconSet, IconSize

__all__ = [
    # Resolution
    "determine_entity_icon",
    "get_cluster_icon",
    "get_icon_info",
    "get_icon_size",
    "primary_function",
    "primary_sector",
    "GENERIC_LABEL",
    # Tables
    "AGENCY_ICONS",
    "FEDERAL_GENERIC",
    "FUNCTION_ICONS",
    "GENERIC_COLOR",
    "GENERIC_ICONS",
    "SECTOR_ICONS",
    # Types
    "IconConfig",
    "IconGlyph",
    "IconInfo",
    "IconSet",
    "IconSize",
]
