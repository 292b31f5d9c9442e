"""Federal entity type definitions.

This module defines the canonical entity record, the tag vocabularies used
to classify entities, and the static relationship-type table that weights
coordination edges.
"""

import math
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from cisadex.utils.exceptions import EntityDataError


class EntityType(str, Enum):
    """Kind of federal office or facility."""

    HEADQUARTERS = "headquarters"
    REGIONAL_OFFICE = "regional_office"
    FIELD_OFFICE = "field_office"
    RESIDENT_OFFICE = "resident_office"
    TASK_FORCE = "task_force"
    FUSION_CENTER = "fusion_center"
    LABORATORY = "laboratory"
    FACILITY = "facility"
    EMERGENCY_OPERATIONS_CENTER = "emergency_operations_center"
    COORDINATION_CENTER = "coordination_center"


class CriticalInfrastructureSector(str, Enum):
    """The sixteen CISA critical infrastructure sectors."""

    CHEMICAL = "chemical"
    COMMERCIAL_FACILITIES = "commercial_facilities"
    COMMUNICATIONS = "communications"
    CRITICAL_MANUFACTURING = "critical_manufacturing"
    DAMS = "dams"
    DEFENSE_INDUSTRIAL_BASE = "defense_industrial_base"
    EMERGENCY_SERVICES = "emergency_services"
    ENERGY = "energy"
    FINANCIAL_SERVICES = "financial_services"
    FOOD_AGRICULTURE = "food_agriculture"
    GOVERNMENT_FACILITIES = "government_facilities"
    HEALTHCARE_PUBLIC_HEALTH = "healthcare_public_health"
    INFORMATION_TECHNOLOGY = "information_technology"
    NUCLEAR = "nuclear"
    TRANSPORTATION_SYSTEMS = "transportation_systems"
    WATER_WASTEWATER = "water_wastewater"


class OperationalFunction(str, Enum):
    """Operational role an entity performs."""

    LAW_ENFORCEMENT = "law_enforcement"
    INTELLIGENCE = "intelligence"
    INCIDENT_RESPONSE = "incident_response"
    REGULATION = "regulation"
    RESEARCH = "research"
    EMERGENCY_MANAGEMENT = "emergency_management"
    INFORMATION_SHARING = "information_sharing"
    OUTREACH = "outreach"
    INSPECTION = "inspection"
    OT_ICS_SECURITY = "ot_ics_security"
    CYBER_FORENSICS = "cyber_forensics"
    THREAT_HUNTING = "threat_hunting"
    VULNERABILITY_ASSESSMENT = "vulnerability_assessment"


class OperationalCapability(str, Enum):
    """Technical capability an entity offers."""

    CYBER_FORENSICS = "cyber_forensics"
    MALWARE_ANALYSIS = "malware_analysis"
    THREAT_HUNTING = "threat_hunting"
    VULNERABILITY_ASSESSMENT = "vulnerability_assessment"
    INCIDENT_COORDINATION = "incident_coordination"
    CRITICAL_INFRASTRUCTURE_PROTECTION = "critical_infrastructure_protection"
    INDUSTRIAL_CONTROL_SYSTEMS = "industrial_control_systems"
    NETWORK_SECURITY = "network_security"
    DIGITAL_FORENSICS = "digital_forensics"
    THREAT_INTELLIGENCE = "threat_intelligence"
    SECURITY_AWARENESS = "security_awareness"
    RISK_ASSESSMENT = "risk_assessment"
    PENETRATION_TESTING = "penetration_testing"
    SECURITY_AUDITING = "security_auditing"
    COMPLIANCE_MONITORING = "compliance_monitoring"


class FederalAgency(str, Enum):
    """Parent federal agency or department."""

    DHS = "DHS"
    CISA = "CISA"
    FBI = "FBI"
    SECRET_SERVICE = "SECRET_SERVICE"
    TSA = "TSA"
    USCG = "USCG"
    FEMA = "FEMA"
    ICE = "ICE"
    CBP = "CBP"
    DOE = "DOE"
    EPA = "EPA"
    DOT = "DOT"
    FAA = "FAA"
    FRA = "FRA"
    MARAD = "MARAD"
    PHMSA = "PHMSA"
    TREASURY = "TREASURY"
    IRS = "IRS"
    FINCEN = "FINCEN"
    HHS = "HHS"
    ASPR = "ASPR"
    FDA = "FDA"
    USDA = "USDA"
    FSIS = "FSIS"
    APHIS = "APHIS"
    DOJ = "DOJ"
    ATF = "ATF"
    DEA = "DEA"
    USMS = "USMS"
    NRC = "NRC"
    FEDERAL_RESERVE = "FEDERAL_RESERVE"
    NTSB = "NTSB"


class OperatingHours(str, Enum):
    """Published operating hours."""

    ALWAYS = "24/7"
    BUSINESS_HOURS = "Business Hours"
    ON_CALL = "On-Call"
    EMERGENCY_ONLY = "Emergency Only"


class OperationalState(str, Enum):
    """Two-value view of status.operational used by status filters."""

    OPERATIONAL = "operational"
    NON_OPERATIONAL = "non_operational"


class RelationshipType(str, Enum):
    """Declared or inferred relationship between two entities."""

    PARENT = "parent"
    CHILD = "child"
    PARTNER = "partner"
    COORDINATION = "coordination"
    TASK_FORCE = "task_force"
    FUSION_CENTER = "fusion_center"


class RelationshipDescriptor(BaseModel):
    """Static properties of a relationship type."""

    label: str
    description: str
    bidirectional: bool
    strength: float = Field(ge=0.0, le=1.0)


RELATIONSHIP_TYPES: dict[RelationshipType, RelationshipDescriptor] = {
    RelationshipType.PARENT: RelationshipDescriptor(
        label="Parent Agency",
        description="Direct organizational hierarchy",
        bidirectional=False,
        strength=1.0,
    ),
    RelationshipType.CHILD: RelationshipDescriptor(
        label="Subordinate Office",
        description="Reports to parent organization",
        bidirectional=False,
        strength=1.0,
    ),
    RelationshipType.PARTNER: RelationshipDescriptor(
        label="Partnership",
        description="Collaborative partnership agreement",
        bidirectional=True,
        strength=0.8,
    ),
    RelationshipType.COORDINATION: RelationshipDescriptor(
        label="Coordination Agreement",
        description="Information sharing and coordination",
        bidirectional=True,
        strength=0.6,
    ),
    RelationshipType.TASK_FORCE: RelationshipDescriptor(
        label="Task Force Participation",
        description="Joint task force membership",
        bidirectional=True,
        strength=0.9,
    ),
    RelationshipType.FUSION_CENTER: RelationshipDescriptor(
        label="Fusion Center Network",
        description="Intelligence sharing network",
        bidirectional=True,
        strength=0.7,
    ),
}


def get_relationship_descriptor(relationship_type: str) -> RelationshipDescriptor | None:
    """Look up the descriptor for a relationship type name.

    Returns None for names outside the RelationshipType vocabulary.
    """
    try:
        return RELATIONSHIP_TYPES[RelationshipType(relationship_type)]
    except ValueError:
        return None


# =============================================================================
# Entity record
# =============================================================================


class Coordinates(BaseModel):
    """WGS84 point. Out-of-range or non-finite values are kept but flagged."""

    lat: float
    lng: float

    @property
    def is_valid(self) -> bool:
        """Check the point is finite and inside WGS84 bounds."""
        return (
            math.isfinite(self.lat)
            and math.isfinite(self.lng)
            and -90.0 <= self.lat <= 90.0
            and -180.0 <= self.lng <= 180.0
        )


class LocationData(BaseModel):
    """Street address and map position."""

    address: str = ""
    city: str = ""
    state: str = ""
    zip_code: str = ""
    coordinates: Coordinates | None = None
    timezone: str = ""


class ContactInformation(BaseModel):
    """Published contact channels."""

    phone: str | None = None
    fax: str | None = None
    email: str | None = None
    website: str | None = None
    emergency_phone: str | None = None
    public_affairs: str | None = None
    secure_fax: str | None = None
    watch_24x7: str | None = None


class JurisdictionData(BaseModel):
    """Area of responsibility."""

    coverage: str = ""
    states: list[str] = Field(default_factory=list)
    specialties: list[str] = Field(default_factory=list)
    counties: list[str] = Field(default_factory=list)
    territories: list[str] = Field(default_factory=list)
    tribal_lands: bool | None = None


class OperationalStatus(BaseModel):
    """Availability of an entity."""

    operational: bool = True
    hours: str = OperatingHours.BUSINESS_HOURS.value
    public_access: bool = False
    last_verified: str | None = None
    security_clearance_required: bool | None = None
    emergency_response: bool | None = None

    @property
    def state(self) -> OperationalState:
        """Two-value operational state."""
        if self.operational:
            return OperationalState.OPERATIONAL
        return OperationalState.NON_OPERATIONAL


class EntityRelationship(BaseModel):
    """Relationship declared by the data source."""

    related_entity_id: str
    relationship_type: str
    description: str | None = None
    active: bool = True


class EntityMetadata(BaseModel):
    """Free-form supplementary details."""

    established_date: str | None = None
    personnel_count: int | None = None
    budget_category: str | None = None
    special_programs: list[str] = Field(default_factory=list)
    awards: list[str] = Field(default_factory=list)
    notes: str | None = None


class FederalEntity(BaseModel):
    """One federal office, laboratory or agency in the directory.

    Attributes:
        id: Unique stable identifier, the join key for every index and graph.
        name: Display name.
        parent_agency: Owning agency (a FederalAgency value when recognized).
        type: Office kind (an EntityType value when recognized).
        location: Address and coordinates.
        contact: Contact channels.
        jurisdiction: Coverage text, covered states and specialties.
        sectors: Critical infrastructure sector tags.
        functions: Operational function tags.
        capabilities: Capability tags.
        status: Operational availability.
        relationships: Relationships declared by the data source.
        metadata: Supplementary details.
    """

    id: str
    name: str
    parent_agency: str
    type: str
    location: LocationData = Field(default_factory=LocationData)
    contact: ContactInformation = Field(default_factory=ContactInformation)
    jurisdiction: JurisdictionData = Field(default_factory=JurisdictionData)
    sectors: list[str] = Field(default_factory=list)
    functions: list[str] = Field(default_factory=list)
    capabilities: list[str] = Field(default_factory=list)
    status: OperationalStatus = Field(default_factory=OperationalStatus)
    relationships: list[EntityRelationship] = Field(default_factory=list)
    metadata: EntityMetadata | None = None

    @property
    def has_valid_coordinates(self) -> bool:
        """Check whether the entity can take part in geographic operations."""
        coords = self.location.coordinates
        return coords is not None and coords.is_valid

    @property
    def special_programs(self) -> list[str]:
        """Special programs from metadata, empty when absent."""
        return self.metadata.special_programs if self.metadata else []

    @property
    def notes(self) -> str | None:
        """Notes from metadata."""
        return self.metadata.notes if self.metadata else None


# =============================================================================
# Exceptions
# =============================================================================


class DuplicateEntityIdError(EntityDataError):
    """Raised when two entities in one collection share an id."""

    def __init__(self, entity_id: str) -> None:
        super().__init__(
            f"Entity id {entity_id!r} appears more than once in the collection",
            details={"entity_id": entity_id},
        )
        self.entity_id = entity_id


class EntityLoadError(EntityDataError):
    """Raised when an entity collection cannot be read or parsed."""

    def __init__(self, source: str, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            f"Failed to load entities from {source}: {reason}",
            details={"source": source, "reason": reason, **(details or {})},
        )
        self.source = source
        self.reason = reason
