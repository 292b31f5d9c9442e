"""Unit tests for entity data-quality validation."""

from cisadex.entity import (
    EntityValidator,
    FederalEntity,
    ValidationResult,
    validate_entities,
    validate_entity,
)


def _codes(issues) -> list[str]:
    return [issue.code for issue in issues]


class TestValidateEntity:
    """Tests for single-entity validation."""

    def test_clean_entity(self, entity_factory):
        """Test a complete, recognized entity has no issues."""
        entity = entity_factory(
            "fbi-boston",
            agency="FBI",
            lat=42.39,
            lng=-71.03,
            sectors=["government_facilities"],
            functions=["law_enforcement"],
            relationships=[("cisa-region-1", "partner")],
        )
        result = validate_entity(entity)
        assert result.valid
        assert not result.has_errors
        assert not result.has_warnings

    def test_empty_required_fields(self):
        """Test blank required text fields are errors."""
        entity = FederalEntity(id="x", name="  ", parent_agency="", type="facility")
        result = validate_entity(entity)
        assert result.valid is False
        assert {e.field for e in result.errors} == {"name", "parent_agency"}
        assert set(_codes(result.errors)) == {"empty_value"}

    def test_missing_coordinates_warns(self, entity_factory):
        """Test an entity without coordinates is kept with a warning."""
        result = validate_entity(entity_factory("a"))
        assert result.valid
        assert "coordinates_missing" in _codes(result.warnings)

    def test_invalid_coordinates_warns(self, entity_factory):
        """Test out-of-range coordinates warn."""
        result = validate_entity(entity_factory("a", lat=95.0, lng=0.0))
        assert "coordinates_invalid" in _codes(result.warnings)

    def test_unknown_vocabulary_warns(self, entity_factory):
        """Test unrecognized agency, sector, function and relationship type warn."""
        entity = entity_factory(
            "a",
            agency="NASA",
            lat=1.0,
            lng=1.0,
            sectors=["space"],
            functions=["launching"],
            relationships=[("b", "rivalry")],
        )
        codes = _codes(validate_entity(entity).warnings)
        assert codes == [
            "unknown_agency",
            "unknown_sector",
            "unknown_function",
            "unknown_relationship_type",
        ]


class TestValidateCollection:
    """Tests for collection validation."""

    def test_duplicate_ids(self, entity_factory):
        """Test duplicate ids are errors."""
        entities = [
            entity_factory("a", lat=1.0, lng=1.0),
            entity_factory("a", lat=2.0, lng=2.0),
        ]
        result = EntityValidator().validate_collection(entities)
        assert result.valid is False
        assert _codes(result.errors) == ["duplicate_id"]
        assert result.errors[0].entity_id == "a"

    def test_unresolved_reference(self, sample_entities):
        """Test references to absent entities are warnings, not errors."""
        result = validate_entities(sample_entities)
        assert result.valid
        dangling = [w for w in result.warnings if w.code == "unresolved_reference"]
        assert len(dangling) == 1
        assert dangling[0].entity_id == "fbi-boston"
        assert "jttf-boston" in dangling[0].message

    def test_merge(self):
        """Test merging keeps issues from both sides."""
        left = ValidationResult(valid=False)
        right = ValidationResult()
        assert left.merge(right).valid is False
        assert right.merge(right).valid is True
