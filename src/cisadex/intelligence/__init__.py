"""Single entry point over search, relationships and icons.

Usage:
    from cisadex.intelligence import load_engine

    intel = load_engine("entities.json")
    print(intel.get_search_suggestions("bos"))
"""

from .engine import FederalEntityIntelligence, create_engine, load_engine

__all__ = [
    "FederalEntityIntelligence",
    "create_engine",
    "load_engine",
]
