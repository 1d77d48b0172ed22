"""Tests for the point query (overlay origin + display distances)."""

import math

import pytest

from facility_locator.domain.distance import haversine_km
from facility_locator.domain.entities import UnknownHubError, UnknownNodeError
from facility_locator.domain.enums import LocationCategory
from facility_locator.domain.query import QUERY_POINT_NAME, query_nearest, route_to
from facility_locator.infrastructure.dataset import default_dataset


@pytest.fixture
def district_network():
    return default_dataset().build()


class TestQueryNearest:
    def test_home_district_centers_come_first(self, district_network):
        results = query_nearest(district_network, 30.32, 78.04, "Dehradun")
        assert len(results) == 5
        assert all(r.location.name.endswith("- Dehradun") for r in results)
        path = [r.path_distance_km for r in results]
        assert path == sorted(path)

    def test_display_distance_is_straight_line(self, district_network):
        lat, lng = 30.10, 78.30
        for r in query_nearest(district_network, lat, lng, "Tehri Garhwal", limit=10):
            loc = r.location
            assert r.distance_km == pytest.approx(
                haversine_km(lat, lng, loc.latitude, loc.longitude)
            )
            # ranking goes through the anchor, so never shorter than straight line
            assert r.path_distance_km >= r.distance_km - 1e-9

    def test_anchor_choice_drives_ranking(self, district_network):
        """The caller-selected hub anchors the point, even if it is far away."""
        near = query_nearest(district_network, 30.32, 78.04, "Dehradun", limit=1)
        far = query_nearest(district_network, 30.32, 78.04, "Pithoragarh", limit=1)
        assert near[0].location.name.endswith("- Dehradun")
        assert far[0].location.name.endswith("- Pithoragarh")

    def test_query_does_not_grow_network(self, district_network):
        before = (len(district_network), district_network.road_count)
        for _ in range(20):
            query_nearest(district_network, 29.5, 79.5, "Almora")
        assert (len(district_network), district_network.road_count) == before
        assert district_network.get(QUERY_POINT_NAME) is None

    def test_unknown_hub(self, district_network):
        with pytest.raises(UnknownHubError):
            query_nearest(district_network, 30.0, 78.0, "Atlantis")

    def test_service_center_name_is_not_a_hub(self, district_network):
        with pytest.raises(UnknownHubError):
            query_nearest(district_network, 30.0, 78.0, "Soil Testing Lab - Almora")

    def test_limit_zero(self, district_network):
        assert query_nearest(district_network, 30.0, 78.0, "Dehradun", limit=0) == []

    def test_query_point_category_finds_only_itself(self, district_network):
        [only] = query_nearest(
            district_network, 30.0, 78.0, "Dehradun", LocationCategory.QUERY_POINT, 5
        )
        assert only.location.name == QUERY_POINT_NAME
        assert only.path_distance_km == 0.0
        assert only.distance_km == 0.0

    def test_unreachable_results_kept(self, chain_network):
        results = query_nearest(chain_network, 0.0, -0.05, "A", limit=10)
        assert [r.location.name for r in results][-1] == "D-lab"
        assert math.isinf(results[-1].path_distance_km)
        assert not math.isinf(results[-1].distance_km)


class TestRouteTo:
    def test_route_through_hubs(self, chain_network):
        stops = route_to(chain_network, 0.0, -0.05, "A", "C-south")
        assert [s.name for s in stops] == [QUERY_POINT_NAME, "A", "B", "C", "C-south"]

    def test_unreachable_route_is_empty(self, chain_network):
        assert route_to(chain_network, 0.0, -0.05, "A", "D-lab") == []

    def test_unknown_target(self, chain_network):
        with pytest.raises(UnknownNodeError):
            route_to(chain_network, 0.0, 0.0, "A", "Nowhere")

    def test_unknown_anchor(self, chain_network):
        with pytest.raises(UnknownHubError):
            route_to(chain_network, 0.0, 0.0, "Nowhere", "C-south")
