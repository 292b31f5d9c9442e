"""Federal entity model.

Provides the entity record, tag vocabularies, the relationship-type
table, collection loading and data-quality validation.
"""

from .loader import index_entities, load_entities, parse_entities
from .types import (
    RELATIONSHIP_TYPES,
    ContactInformation,
    Coordinates,
    CriticalInfrastructureSector,
    DuplicateEntityIdError,
    EntityLoadError,
    EntityMetadata,
    EntityRelationship,
    EntityType,
    FederalAgency,
    FederalEntity,
    JurisdictionData,
    LocationData,
    OperatingHours,
    OperationalCapability,
    OperationalFunction,
    OperationalState,
    OperationalStatus,
    RelationshipDescriptor,
    RelationshipType,
    get_relationship_descriptor,
)
from .validation import (
    EntityValidator,
    ValidationError,
    ValidationResult,
    ValidationSeverity,
    ValidationWarning,
    validate_entities,
    validate_entity,
)

__all__ = [
    # Record
    "ContactInformation",
    "Coordinates",
    "EntityMetadata",
    "EntityRelationship",
    "FederalEntity",
    "JurisdictionData",
    "LocationData",
    "OperationalStatus",
    # Vocabularies
    "CriticalInfrastructureSector",
    "EntityType",
    "FederalAgency",
    "OperatingHours",
    "OperationalCapability",
    "OperationalFunction",
    "OperationalState",
    # Relationship types
    "RELATIONSHIP_TYPES",
    "RelationshipDescriptor",
    "RelationshipType",
    "get_relationship_descriptor",
    # Loading
    "index_entities",
    "load_entities",
    "parse_entities",
    # Validation
    "EntityValidator",
    "ValidationError",
    "ValidationResult",
    "ValidationSeverity",
    "ValidationWarning",
    "validate_entities",
    "validate_entity",
    # Exceptions
    "DuplicateEntityIdError",
    "EntityLoadError",
]
