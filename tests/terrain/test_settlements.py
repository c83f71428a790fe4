"""Tests for settlement road linking."""

import pytest

from outline_map.terrain.settlements import Road, connect_towns
from outline_map.types import Vector2


def _point(x: float, y: float) -> Vector2:
    return Vector2(x=x, y=y)


class TestConnectTowns:
    """Tests for nearest-neighbour road placement."""

    def test_nearest_not_first(self, make_town) -> None:
        """Road from (0,0) goes to (3,0), not the earlier (10,0)."""
        towns = [make_town(0, 0), make_town(10, 0), make_town(3, 0)]
        roads = connect_towns(towns)
        assert roads[0] == Road(source=_point(0, 0), target=_point(3, 0), distance=3.0)

    def test_one_road_per_town(self, make_town) -> None:
        """Every town emits exactly one road, in discovery order."""
        towns = [make_town(0, 0), make_town(10, 0), make_town(3, 0)]
        roads = connect_towns(towns)
        assert [(r.source, r.target) for r in roads] == [
            (_point(0, 0), _point(3, 0)),
            (_point(10, 0), _point(3, 0)),
            (_point(3, 0), _point(0, 0)),
        ]
        assert [r.distance for r in roads] == pytest.approx([3.0, 7.0, 3.0])

    def test_mutual_neighbours_not_deduplicated(self, make_town) -> None:
        """Two towns produce two opposite roads over one segment."""
        roads = connect_towns([make_town(0, 0), make_town(0, 5)])
        assert len(roads) == 2
        assert roads[0].source == roads[1].target
        assert roads[0].target == roads[1].source

    def test_tie_goes_to_earliest(self, make_town) -> None:
        """Equal distances resolve to the earliest-discovered town."""
        towns = [make_town(0, 0), make_town(5, 0), make_town(-5, 0), make_town(0, 5)]
        roads = connect_towns(towns)
        assert roads[0].target == _point(5, 0)

    def test_euclidean_distance(self, make_town) -> None:
        """Distances are Euclidean."""
        roads = connect_towns([make_town(0, 0), make_town(3, 4)])
        assert roads[0].distance == pytest.approx(5.0)

    def test_single_town_no_roads(self, make_town) -> None:
        """A lone town has nobody to connect to."""
        assert connect_towns([make_town(1, 1)]) == []

    def test_no_towns(self) -> None:
        """No towns means no roads."""
        assert connect_towns([]) == []
