"""Integration tests over a JSON entity directory."""

from pathlib import Path

import pytest

from cisadex.config.settings import Settings
from cisadex.entity import EntityLoadError
from cisadex.icons import IconSet
from cisadex.intelligence import FederalEntityIntelligence, load_engine
from cisadex.search import GeographicFilter, OperationalFilter, SearchCriteria

FIXTURE = Path(__file__).parent.parent / "fixtures" / "entities.json"


@pytest.fixture(scope="module")
def intel() -> FederalEntityIntelligence:
    """Engine built from the fixture directory."""
    return load_engine(FIXTURE, settings=Settings(_env_file=None, metrics_enabled=False))


def _ids(entities) -> list[str]:
    return [e.id for e in entities]


class TestLoading:
    """Tests for loading the directory."""

    def test_loaded(self, intel):
        """Test every record is loaded in file order."""
        assert len(intel.entities) == 8
        assert intel.entities[0].id == "cisa-region-1"
        assert intel.get_entity("cisa-hq").special_programs == ["Cyber Hygiene Services"]

    def test_missing_file(self, tmp_path):
        """Test a missing directory file fails cleanly."""
        with pytest.raises(EntityLoadError):
            load_engine(tmp_path / "missing.json")


class TestSearchFlow:
    """Search and map rendering over the directory."""

    def test_text_search(self, intel):
        """Test substring fallback across capabilities and programs."""
        response = intel.search(SearchCriteria(text="cyber"))
        assert _ids(response.entities) == [
            "cisa-region-1",
            "cisa-hq",
            "fbi-boston",
            "doe-pnnl",
        ]

    def test_region_and_function(self, intel):
        """Test facets narrow a regional search."""
        response = intel.search(
            SearchCriteria(
                geographic=GeographicFilter(by_region=["Region I"]),
                operational=OperationalFilter(by_function=["law_enforcement"]),
            )
        )
        assert _ids(response.entities) == ["fbi-boston", "uscg-sector-boston"]

    def test_clusters_and_icons(self, intel):
        """Test clusters partition located entities and each gets an icon."""
        response = intel.search(SearchCriteria(zoom_level=3))
        assert [c.count for c in response.clusters] == [4, 1, 1, 1]
        assert sum(c.count for c in response.clusters) == 7

        boston = [intel.get_entity(i) for i in response.clusters[0].entity_ids]
        config = intel.get_cluster_icon(boston)
        assert config.icon_set is IconSet.GENERIC
        assert config.fallbacks == ["law_enforcement", "transportation_systems"]
        assert intel.get_icon_info(config).label == "Federal Entity"

        for cluster in response.clusters[1:]:
            [member] = [intel.get_entity(i) for i in cluster.entity_ids]
            assert intel.get_cluster_icon([member]).icon_set is IconSet.SECTOR

    def test_entity_icons(self, intel):
        """Test each precedence rule over real records."""
        assert intel.determine_entity_icon(intel.get_entity("fbi-boston")).primary == (
            "government_facilities"
        )
        assert intel.determine_entity_icon(intel.get_entity("cisa-region-1")).primary == (
            "incident_response"
        )
        springfield = intel.determine_entity_icon(intel.get_entity("fbi-springfield"))
        assert springfield.icon_set is IconSet.AGENCY
        assert springfield.primary == "fbi"

    def test_proximity_and_suggestions(self, intel):
        """Test nearest-first proximity and suggestions."""
        nearby = intel.get_entities_by_proximity(42.3601, -71.0589, 5)
        assert _ids(nearby) == [
            "cisa-region-1",
            "fema-region-1",
            "uscg-sector-boston",
            "fbi-boston",
        ]
        assert intel.get_search_suggestions("bos") == [
            "Boston, MA",
            "FBI Boston Field Office",
            "USCG Sector Boston",
        ]


class TestRelationshipFlow:
    """Relationship queries over the directory."""

    def test_hierarchy_strength(self, intel):
        """Test declared parent strength beats inferred coordination."""
        assert intel.get_coordination_strength("cisa-region-1", "cisa-hq") == 1.0
        assert intel.get_coordination_strength("cisa-hq", "cisa-region-1") == 1.0

    def test_cross_country_functional_edge(self, intel):
        """Test shared inspection and lifeline sectors connect distant offices."""
        assert "epa-region-5" in _ids(intel.get_related_entities("uscg-sector-boston"))

    def test_isolated_entity(self, intel):
        """Test an office without shared roles has no neighbors."""
        assert intel.get_related_entities("fbi-springfield") == []
        assert intel.get_coordination_network("fbi-springfield", 3) == []

    def test_network_grows_with_depth(self, intel):
        """Test deeper searches never lose entities."""
        previous: set[str] = set()
        for depth in range(4):
            current = set(_ids(intel.get_coordination_network("fema-region-1", depth)))
            assert previous <= current
            assert "fema-region-1" not in current
            previous = current

    def test_opportunities_are_unconnected_and_sorted(self, intel):
        """Test every suggestion is new, above threshold and ordered."""
        for entity in intel.entities:
            opportunities = intel.find_coordination_opportunities(entity.id)
            neighbors = set(intel.graph.neighbor_ids(entity.id))
            strengths = [o.strength for o in opportunities]
            assert strengths == sorted(strengths, reverse=True)
            for opportunity in opportunities:
                assert opportunity.entity.id not in neighbors
                assert opportunity.entity.id != entity.id
                assert opportunity.strength > 0.5

    def test_statistics(self, intel):
        """Test declared relationship types are tallied."""
        stats = intel.get_relationship_statistics()
        assert stats.by_type == {"parent": 1, "child": 1, "partner": 1, "task_force": 1}
        assert stats.most_connected_entities[0].entity.id == "cisa-region-1"

    def test_validation(self, intel):
        """Test the directory validates with warnings only."""
        result = intel.validate()
        assert result.valid
        assert {(w.entity_id, w.code) for w in result.warnings} == {
            ("fbi-springfield", "coordinates_missing"),
            ("fbi-boston", "unresolved_reference"),
        }
