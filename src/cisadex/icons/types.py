"""Type definitions for entity icon resolution."""

from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, Field


class IconSet(str, Enum):
    """Category a resolved icon is drawn from."""

    SECTOR = "sector"
    FUNCTION = "function"
    AGENCY = "agency"
    GENERIC = "generic"


class IconGlyph(NamedTuple):
    """Icon asset name, color and emoji for one table entry."""

    icon: str
    color: str
    emoji: str


class IconConfig(BaseModel):
    """Resolved visual identity of an entity or cluster.

    Attributes:
        primary: Tag the icon represents (sector, function, lowercase agency
            or a generic icon key).
        icon_set: Table the primary tag belongs to.
        fallbacks: Alternative tags in preference order.
        color: Hex color.
        priority: 1 sector, 2 function, 3 agency, 999 generic.
    """

    primary: str
    icon_set: IconSet
    fallbacks: list[str] = Field(default_factory=list)
    color: str
    priority: int


class IconInfo(BaseModel):
    """Display details for an IconConfig."""

    icon: str
    color: str
    emoji: str
    label: str
    fallback_emoji: str


class IconSize(BaseModel):
    """Pixel dimensions of a map marker."""

    width: int
    height: int
