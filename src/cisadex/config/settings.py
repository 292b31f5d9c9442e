"""Application settings loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CoordinationTuning(BaseModel):
    """Tunable scoring constants for cluster icons and coordination opportunities.

    The defaults were chosen empirically and have no derivation beyond
    matching observed directory data. Changing them changes which icon a
    mixed cluster receives and which opportunities are surfaced.
    """

    # Cluster icon dominance
    sector_dominance: float = Field(ge=0.0, le=1.0, default=0.5)
    """Share of members that must carry one sector for a sector icon."""

    function_dominance: float = Field(ge=0.0, le=1.0, default=0.5)
    """Share of members that must carry one function for a function icon."""

    agency_dominance: float = Field(ge=0.0, le=1.0, default=0.6)
    """Share of members that must belong to one agency for an agency icon."""

    # Coordination opportunity scoring
    opportunity_threshold: float = Field(ge=0.0, le=1.0, default=0.5)
    """Candidates must score strictly above this to be returned."""

    same_state_complementary_score: float = 0.7
    """Same state, different agency, complementary law enforcement functions."""

    same_state_sector_score: float = 0.6
    """Same state, different agency, overlapping sectors."""

    jurisdiction_cyber_score: float = 0.8
    """Overlapping jurisdiction, both with cyber capabilities."""

    jurisdiction_ci_score: float = 0.7
    """Overlapping jurisdiction, both with critical infrastructure roles."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application Configuration
    environment: Literal["development", "production", "test"] = "development"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    metrics_enabled: bool = True

    # Search Configuration
    default_zoom_level: int = Field(ge=0, default=5)
    default_proximity_radius_miles: float = Field(ge=0.0, default=50.0)
    suggestion_limit: int = Field(ge=0, default=10)
    suggestion_min_query_length: int = Field(ge=0, default=2)
    max_substring_candidates: int = Field(ge=1, default=10_000)

    # Relationship Configuration
    network_max_depth: int = Field(ge=0, default=2)

    # Scoring constants
    coordination: CoordinationTuning = CoordinationTuning()


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
