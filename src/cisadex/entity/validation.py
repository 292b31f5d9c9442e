"""Entity data-quality validation.

This module reports problems in an entity collection without changing it.
Components downstream tolerate every problem reported here (invalid
coordinates exclude an entity from geographic operations, unresolved
references are dropped), so validation is advisory except for duplicate
ids, which break the id join key.
"""

from collections import Counter
from collections.abc import Iterable
from enum import Enum

from pydantic import BaseModel, Field

from cisadex.core.logging import get_logger

from .types import (
    CriticalInfrastructureSector,
    FederalAgency,
    FederalEntity,
    OperationalFunction,
    get_relationship_descriptor,
)

logger = get_logger(__name__)

_KNOWN_SECTORS = {s.value for s in CriticalInfrastructureSector}
_KNOWN_FUNCTIONS = {f.value for f in OperationalFunction}
_KNOWN_AGENCIES = {a.value for a in FederalAgency}


class ValidationSeverity(str, Enum):
    """Severity level of validation issues."""

    ERROR = "error"  # Breaks an invariant or a required field
    WARNING = "warning"  # Tolerated, but the entity loses some functionality


class ValidationError(BaseModel):
    """Represents a validation error."""

    entity_id: str | None = None
    field: str
    message: str
    severity: ValidationSeverity = ValidationSeverity.ERROR
    code: str | None = None


class ValidationWarning(BaseModel):
    """Represents a validation warning."""

    entity_id: str | None = None
    field: str
    message: str
    code: str | None = None


class ValidationResult(BaseModel):
    """Result of a validation operation."""

    valid: bool = True
    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    def merge(self, other: "ValidationResult") -> "ValidationResult":
        """Merge another validation result into this one."""
        return ValidationResult(
            valid=self.valid and other.valid,
            errors=self.errors + other.errors,
            warnings=self.warnings + other.warnings,
        )


class EntityValidator:
    """Entity collection validator.

    Checks required fields and coordinates per entity, and id uniqueness
    and relationship references across the collection.
    """

    REQUIRED_TEXT_FIELDS = ("id", "name", "parent_agency", "type")

    def validate_entity(self, entity: FederalEntity) -> ValidationResult:
        """Validate a single entity record.

        Args:
            entity: Entity to validate

        Returns:
            ValidationResult
        """
        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []

        for field_name in self.REQUIRED_TEXT_FIELDS:
            if not str(getattr(entity, field_name)).strip():
                errors.append(
                    ValidationError(
                        entity_id=entity.id or None,
                        field=field_name,
                        message=f"{field_name} cannot be empty",
                        code="empty_value",
                    )
                )

        coords = entity.location.coordinates
        if coords is None:
            warnings.append(
                ValidationWarning(
                    entity_id=entity.id,
                    field="location.coordinates",
                    message="No coordinates; entity is excluded from map and distance queries",
                    code="coordinates_missing",
                )
            )
        elif not coords.is_valid:
            warnings.append(
                ValidationWarning(
                    entity_id=entity.id,
                    field="location.coordinates",
                    message=f"Coordinates ({coords.lat}, {coords.lng}) are outside WGS84 bounds",
                    code="coordinates_invalid",
                )
            )

        if entity.parent_agency and entity.parent_agency not in _KNOWN_AGENCIES:
            warnings.append(
                ValidationWarning(
                    entity_id=entity.id,
                    field="parent_agency",
                    message=f"Unrecognized agency {entity.parent_agency!r}",
                    code="unknown_agency",
                )
            )

        for sector in entity.sectors:
            if sector not in _KNOWN_SECTORS:
                warnings.append(
                    ValidationWarning(
                        entity_id=entity.id,
                        field="sectors",
                        message=f"Unrecognized sector {sector!r}",
                        code="unknown_sector",
                    )
                )

        for function in entity.functions:
            if function not in _KNOWN_FUNCTIONS:
                warnings.append(
                    ValidationWarning(
                        entity_id=entity.id,
                        field="functions",
                        message=f"Unrecognized function {function!r}",
                        code="unknown_function",
                    )
                )

        for relationship in entity.relationships:
            if get_relationship_descriptor(relationship.relationship_type) is None:
                warnings.append(
                    ValidationWarning(
                        entity_id=entity.id,
                        field="relationships",
                        message=f"Unknown relationship type {relationship.relationship_type!r}",
                        code="unknown_relationship_type",
                    )
                )

        return ValidationResult(valid=len(errors) == 0, errors=errors, warnings=warnings)

    def validate_collection(self, entities: Iterable[FederalEntity]) -> ValidationResult:
        """Validate every entity and the cross-entity invariants.

        Args:
            entities: Full entity collection

        Returns:
            Combined ValidationResult
        """
        entity_list = list(entities)
        result = ValidationResult()

        for entity in entity_list:
            result = result.merge(self.validate_entity(entity))

        id_counts = Counter(entity.id for entity in entity_list)
        duplicates = [entity_id for entity_id, count in id_counts.items() if count > 1]
        if duplicates:
            result = result.merge(
                ValidationResult(
                    valid=False,
                    errors=[
                        ValidationError(
                            entity_id=entity_id,
                            field="id",
                            message=f"Id appears {id_counts[entity_id]} times",
                            code="duplicate_id",
                        )
                        for entity_id in duplicates
                    ],
                )
            )

        known_ids = set(id_counts)
        dangling = [
            ValidationWarning(
                entity_id=entity.id,
                field="relationships",
                message=f"Related entity {rel.related_entity_id!r} is not in the collection",
                code="unresolved_reference",
            )
            for entity in entity_list
            for rel in entity.relationships
            if rel.related_entity_id not in known_ids
        ]
        if dangling:
            result = result.merge(ValidationResult(warnings=dangling))

        logger.debug(
            "entity_collection_validated",
            entity_count=len(entity_list),
            error_count=len(result.errors),
            warning_count=len(result.warnings),
        )
        return result


# Module-level convenience functions


def validate_entity(entity: FederalEntity) -> ValidationResult:
    """Validate a single entity.

    Args:
        entity: Entity to validate

    Returns:
        ValidationResult
    """
    return EntityValidator().validate_entity(entity)


def validate_entities(entities: Iterable[FederalEntity]) -> ValidationResult:
    """Validate an entity collection.

    Args:
        entities: Full entity collection

    Returns:
        ValidationResult
    """
    return EntityValidator().validate_collection(entities)
