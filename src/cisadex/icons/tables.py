"""Static icon and priority tables.

Every table is keyed by its vocabulary enum and covers every member.
Lookups by free-form tag go through the *_glyph helpers, which return None
for unrecognized tags so that callers fall back explicitly.
"""

from cisadex.entity.types import CriticalInfrastructureSector, FederalAgency, OperationalFunction

from .types import IconGlyph

Sector = CriticalInfrastructureSector
Function = OperationalFunction
Agency = FederalAgency

GENERIC_COLOR = "#6b7280"
UNRANKED_PRIORITY = 999

SECTOR_ICONS: dict[CriticalInfrastructureSector, IconGlyph] = {
    Sector.CHEMICAL: IconGlyph("chemical-hazard", "#FF6B35", "⚗️"),
    Sector.COMMERCIAL_FACILITIES: IconGlyph("commercial-building", "#4ECDC4", "🏢"),
    Sector.COMMUNICATIONS: IconGlyph("radio-tower", "#45B7D1", "📡"),
    Sector.CRITICAL_MANUFACTURING: IconGlyph("factory", "#96CEB4", "🏭"),
    Sector.DAMS: IconGlyph("dam-structure", "#FFEAA7", "🏔️"),
    Sector.DEFENSE_INDUSTRIAL_BASE: IconGlyph("military-shield", "#6C5CE7", "🛡️"),
    Sector.EMERGENCY_SERVICES: IconGlyph("emergency-light", "#FD79A8", "🚨"),
    Sector.ENERGY: IconGlyph("power-line", "#FDCB6E", "⚡"),
    Sector.FINANCIAL_SERVICES: IconGlyph("bank-building", "#55A3FF", "🏦"),
    Sector.FOOD_AGRICULTURE: IconGlyph("wheat-field", "#00B894", "🌾"),
    Sector.GOVERNMENT_FACILITIES: IconGlyph("government-building", "#1f5582", "🏛️"),
    Sector.HEALTHCARE_PUBLIC_HEALTH: IconGlyph("medical-cross", "#E17055", "🏥"),
    Sector.INFORMATION_TECHNOLOGY: IconGlyph("server-rack", "#74B9FF", "💻"),
    Sector.NUCLEAR: IconGlyph("nuclear-symbol", "#FF7675", "☢️"),
    Sector.TRANSPORTATION_SYSTEMS: IconGlyph("transport-hub", "#A29BFE", "🚅"),
    Sector.WATER_WASTEWATER: IconGlyph("water-drop", "#00CEC9", "💧"),
}

FUNCTION_ICONS: dict[OperationalFunction, IconGlyph] = {
    Function.LAW_ENFORCEMENT: IconGlyph("police-badge", "#1e3d59", "👮"),
    Function.INTELLIGENCE: IconGlyph("intelligence-eye", "#8b5a3c", "🕵️"),
    Function.INCIDENT_RESPONSE: IconGlyph("emergency-response", "#d63031", "🚨"),
    Function.REGULATION: IconGlyph("regulation-book", "#00b894", "📋"),
    Function.RESEARCH: IconGlyph("laboratory", "#6c5ce7", "🔬"),
    Function.EMERGENCY_MANAGEMENT: IconGlyph("emergency-mgmt", "#e17055", "🆘"),
    Function.INFORMATION_SHARING: IconGlyph("data-share", "#0984e3", "📊"),
    Function.OUTREACH: IconGlyph("megaphone", "#fd79a8", "📢"),
    Function.INSPECTION: IconGlyph("magnifying-glass", "#fdcb6e", "🔍"),
    Function.OT_ICS_SECURITY: IconGlyph("industrial-control", "#a29bfe", "⚙️"),
    Function.CYBER_FORENSICS: IconGlyph("cyber-forensics", "#74b9ff", "🔍"),
    Function.THREAT_HUNTING: IconGlyph("threat-hunter", "#55a3ff", "🎯"),
    Function.VULNERABILITY_ASSESSMENT: IconGlyph("vulnerability-scan", "#fd79a8", "🛡️"),
}

AGENCY_ICONS: dict[FederalAgency, IconGlyph] = {
    Agency.DHS: IconGlyph("dhs-seal", "#1f5582", "🏠"),
    Agency.CISA: IconGlyph("cisa-logo", "#1f5582", "🛡️"),
    Agency.FBI: IconGlyph("fbi-seal", "#1e3d59", "🕵️"),
    Agency.SECRET_SERVICE: IconGlyph("usss-star", "#2c5530", "⭐"),
    Agency.TSA: IconGlyph("tsa-eagle", "#0c4a6e", "🛫"),
    Agency.USCG: IconGlyph("uscg-anchor", "#1e40af", "⚓"),
    Agency.FEMA: IconGlyph("fema-logo", "#dc2626", "🆘"),
    Agency.ICE: IconGlyph("ice-badge", "#1e3a8a", "❄️"),
    Agency.CBP: IconGlyph("cbp-badge", "#166534", "🛂"),
    Agency.DOE: IconGlyph("doe-atom", "#ff6b35", "⚛️"),
    Agency.EPA: IconGlyph("epa-leaf", "#16a34a", "🌿"),
    Agency.DOT: IconGlyph("dot-shield", "#2563eb", "🛣️"),
    Agency.FAA: IconGlyph("faa-wings", "#0891b2", "✈️"),
    Agency.FRA: IconGlyph("fra-train", "#7c2d12", "🚂"),
    Agency.MARAD: IconGlyph("marad-anchor", "#0f766e", "🚢"),
    Agency.PHMSA: IconGlyph("phmsa-pipeline", "#b45309", "🛢️"),
    Agency.TREASURY: IconGlyph("treasury-eagle", "#facc15", "🦅"),
    Agency.IRS: IconGlyph("irs-eagle", "#4338ca", "💰"),
    Agency.FINCEN: IconGlyph("fincen-shield", "#7c3aed", "💳"),
    Agency.HHS: IconGlyph("hhs-eagle", "#dc2626", "🏥"),
    Agency.ASPR: IconGlyph("aspr-cross", "#e11d48", "🚑"),
    Agency.FDA: IconGlyph("fda-shield", "#059669", "💊"),
    Agency.USDA: IconGlyph("usda-shield", "#65a30d", "🌾"),
    Agency.FSIS: IconGlyph("fsis-check", "#84cc16", "✅"),
    Agency.APHIS: IconGlyph("aphis-plant", "#22c55e", "🌱"),
    Agency.DOJ: IconGlyph("doj-scales", "#1f2937", "⚖️"),
    Agency.ATF: IconGlyph("atf-badge", "#92400e", "🔫"),
    Agency.DEA: IconGlyph("dea-eagle", "#7c2d12", "💊"),
    Agency.USMS: IconGlyph("usms-star", "#6b7280", "⭐"),
    Agency.NRC: IconGlyph("nrc-atom", "#dc2626", "☢️"),
    Agency.FEDERAL_RESERVE: IconGlyph("fed-eagle", "#166534", "🏦"),
    Agency.NTSB: IconGlyph("ntsb-wing", "#1e40af", "🛩️"),
}

FEDERAL_GENERIC = "federal_generic"

GENERIC_ICONS: dict[str, IconGlyph] = {
    FEDERAL_GENERIC: IconGlyph("federal-seal", GENERIC_COLOR, "🏛️"),
    "office_generic": IconGlyph("office-building", "#9ca3af", "🏢"),
    "law_enforcement_generic": IconGlyph("badge-star", "#374151", "⭐"),
    "emergency_generic": IconGlyph("emergency-symbol", "#ef4444", "🚨"),
    "research_generic": IconGlyph("research-lab", "#8b5cf6", "🔬"),
}

# Lower rank wins
FUNCTION_PRIORITY: dict[OperationalFunction, int] = {
    Function.LAW_ENFORCEMENT: 1,
    Function.INCIDENT_RESPONSE: 2,
    Function.CYBER_FORENSICS: 3,
    Function.INTELLIGENCE: 4,
    Function.EMERGENCY_MANAGEMENT: 5,
    Function.THREAT_HUNTING: 6,
    Function.VULNERABILITY_ASSESSMENT: 7,
    Function.OT_ICS_SECURITY: 8,
    Function.REGULATION: 9,
    Function.INSPECTION: 10,
    Function.RESEARCH: 11,
    Function.INFORMATION_SHARING: 12,
    Function.OUTREACH: 13,
}

SECTOR_PRIORITY: dict[CriticalInfrastructureSector, int] = {
    Sector.GOVERNMENT_FACILITIES: 1,
    Sector.DEFENSE_INDUSTRIAL_BASE: 2,
    Sector.NUCLEAR: 3,
    Sector.ENERGY: 4,
    Sector.EMERGENCY_SERVICES: 5,
    Sector.FINANCIAL_SERVICES: 6,
    Sector.INFORMATION_TECHNOLOGY: 7,
    Sector.COMMUNICATIONS: 8,
    Sector.TRANSPORTATION_SYSTEMS: 9,
    Sector.HEALTHCARE_PUBLIC_HEALTH: 10,
    Sector.WATER_WASTEWATER: 11,
    Sector.CHEMICAL: 12,
    Sector.CRITICAL_MANUFACTURING: 13,
    Sector.DAMS: 14,
    Sector.FOOD_AGRICULTURE: 15,
    Sector.COMMERCIAL_FACILITIES: 16,
}

# Marker edge length in pixels for zoom levels 0-9
ICON_BASE_SIZES: tuple[int, ...] = (16, 20, 24, 28, 32, 36, 40, 44, 48, 52)

PRIORITY_SIZE_MULTIPLIERS: dict[int, float] = {1: 1.2, 2: 1.1}


def sector_glyph(tag: str) -> IconGlyph | None:
    """Glyph for a sector tag, None if unrecognized."""
    try:
        return SECTOR_ICONS[CriticalInfrastructureSector(tag)]
    except ValueError:
        return None


def function_glyph(tag: str) -> IconGlyph | None:
    """Glyph for a function tag, None if unrecognized."""
    try:
        return FUNCTION_ICONS[OperationalFunction(tag)]
    except ValueError:
        return None


def agency_glyph(agency: str) -> IconGlyph | None:
    """Glyph for an agency name in any case, None if unrecognized."""
    try:
        return AGENCY_ICONS[FederalAgency(agency.upper())]
    except ValueError:
        return None


def function_rank(tag: str) -> int:
    """Priority rank of a function tag; unrecognized tags rank last."""
    try:
        return FUNCTION_PRIORITY[OperationalFunction(tag)]
    except ValueError:
        return UNRANKED_PRIORITY


def sector_rank(tag: str) -> int:
    """Priority rank of a sector tag; unrecognized tags rank last."""
    try:
        return SECTOR_PRIORITY[CriticalInfrastructureSector(tag)]
    except ValueError:
        return UNRANKED_PRIORITY
