"""Unit tests for the nearest-facility selector."""

import math

import pytest

from facility_locator.domain.entities import Location, UnknownOriginError
from facility_locator.domain.enums import LocationCategory
from facility_locator.domain.graph import RoadNetwork
from facility_locator.domain.selector import nearest


class TestNearest:
    def test_sorted_bounded_and_filtered(self, chain_network):
        a = chain_network.find_hub("A")
        for limit in range(0, 7):
            result = nearest(chain_network, a, LocationCategory.SERVICE_CENTER, limit)
            assert len(result) <= limit
            assert all(r.location.category == LocationCategory.SERVICE_CENTER for r in result)
            distances = [r.distance_km for r in result]
            assert distances == sorted(distances)

    def test_limit_zero_is_empty(self, chain_network):
        a = chain_network.find_hub("A")
        assert nearest(chain_network, a, LocationCategory.SERVICE_CENTER, 0) == []

    def test_negative_limit_rejected(self, chain_network):
        a = chain_network.find_hub("A")
        with pytest.raises(ValueError):
            nearest(chain_network, a, LocationCategory.SERVICE_CENTER, -1)

    def test_missing_category_is_empty(self, chain_network):
        a = chain_network.find_hub("A")
        assert nearest(chain_network, a, LocationCategory.QUERY_POINT, 5) == []

    def test_fewer_candidates_than_limit(self, chain_network):
        a = chain_network.find_hub("A")
        result = nearest(chain_network, a, LocationCategory.HUB, 50)
        assert [r.location.name for r in result] == ["A", "B", "C", "D"]

    def test_origin_included_when_category_matches(self, chain_network):
        a = chain_network.find_hub("A")
        [first] = nearest(chain_network, a, LocationCategory.HUB, 1)
        assert first.location is a
        assert first.distance_km == 0.0

    def test_unknown_origin_raises(self, chain_network):
        ghost = Location("ghost", 0.0, 0.0, LocationCategory.HUB)
        with pytest.raises(UnknownOriginError):
            nearest(chain_network, ghost, LocationCategory.HUB, 3)


class TestChainScenario:
    def test_facilities_behind_two_hops_are_found(self, chain_network):
        a = chain_network.find_hub("A")
        result = nearest(chain_network, a, LocationCategory.SERVICE_CENTER, 5)
        by_name = {r.location.name: r.distance_km for r in result}

        assert by_name["A-east"] == pytest.approx(5.0)
        assert by_name["C-north"] == pytest.approx(90.0, abs=3.0)
        assert by_name["C-south"] == pytest.approx(90.0, abs=3.0)
        assert by_name["C-north"] > 90.0 and by_name["C-south"] > 90.0
        assert [r.location.name for r in result[:3]] == ["A-east", "C-north", "C-south"]

    def test_unreachable_facility_ranked_last_not_dropped(self, chain_network):
        a = chain_network.find_hub("A")
        result = nearest(chain_network, a, LocationCategory.SERVICE_CENTER, 5)
        assert len(result) == 4
        assert result[-1].location.name == "D-lab"
        assert math.isinf(result[-1].distance_km)

    def test_unreachable_ties_keep_insertion_order(self):
        net = RoadNetwork()
        hub = Location("hub", 0.0, 0.0, LocationCategory.HUB)
        net.add_location(hub)
        islands = [
            Location(f"island-{i}", 10.0 + i, 10.0, LocationCategory.SERVICE_CENTER)
            for i in (3, 1, 2)
        ]
        for loc in islands:
            net.add_location(loc)
        result = nearest(net, hub, LocationCategory.SERVICE_CENTER, 3)
        assert [r.location for r in result] == islands
