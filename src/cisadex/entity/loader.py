"""Entity collection loading and id lookup."""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from cisadex.core.logging import get_logger

from .types import DuplicateEntityIdError, EntityLoadError, FederalEntity

logger = get_logger(__name__)

_ENTITY_LIST = TypeAdapter(list[FederalEntity])


def parse_entities(data: Any, source: str = "<memory>") -> list[FederalEntity]:
    """Validate already-decoded JSON data into entity records.

    Args:
        data: A list of entity mappings
        source: Label used in error messages

    Returns:
        Parsed entities in input order

    Raises:
        EntityLoadError: If the data does not describe a list of entities
    """
    try:
        entities = _ENTITY_LIST.validate_python(data)
    except PydanticValidationError as e:
        raise EntityLoadError(
            source,
            f"{e.error_count()} validation error(s)",
            details={"errors": e.errors(include_url=False)},
        ) from e
    return entities


def load_entities(path: str | Path) -> list[FederalEntity]:
    """Load an entity collection from a JSON file.

    The file holds a JSON array of entity objects using the field names
    of FederalEntity.

    Args:
        path: Path to the JSON file

    Returns:
        Parsed entities in file order

    Raises:
        EntityLoadError: If the file cannot be read, is not JSON, or does not
            describe a list of entities
    """
    source = str(path)
    try:
        raw = Path(path).read_text(encoding="utf-8")
        data = json.loads(raw)
    except OSError as e:
        raise EntityLoadError(source, f"cannot read file: {e}") from e
    except json.JSONDecodeError as e:
        raise EntityLoadError(source, f"invalid JSON at line {e.lineno}: {e.msg}") from e

    entities = parse_entities(data, source=source)
    logger.info("entities_loaded", source=source, entity_count=len(entities))
    return entities


def index_entities(entities: Iterable[FederalEntity]) -> dict[str, FederalEntity]:
    """Map entity ids to records, preserving input order.

    Raises:
        DuplicateEntityIdError: If two entities share an id
    """
    by_id: dict[str, FederalEntity] = {}
    for entity in entities:
        if entity.id in by_id:
            raise DuplicateEntityIdError(entity.id)
        by_id[entity.id] = entity
    return by_id
