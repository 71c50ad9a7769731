"""Tests for tick_glimmer.stations — Box2, MapGrid, StationRegistry."""
from __future__ import annotations

import pytest

from tick_glimmer.stations import Box2, MapGrid, StationRegistry


class TestBox2:
    def test_size(self) -> None:
        box = Box2(left=-2, bottom=1, right=3, top=4)
        assert box.width == 5
        assert box.height == 3

    def test_contains_is_half_open(self) -> None:
        box = Box2(left=0, bottom=0, right=2, top=2)
        assert box.contains(0, 0)
        assert box.contains(1.5, 1.9)
        assert not box.contains(2, 1)
        assert not box.contains(1, 2)


class TestMapGrid:
    def test_world_aabb_follows_position(self) -> None:
        grid = MapGrid(grid_id=7, width=10, height=4, world_position=(100.0, -20.0))
        assert grid.world_aabb == Box2(left=100.0, bottom=-20.0, right=110.0, top=-16.0)

    def test_in_bounds(self) -> None:
        grid = MapGrid(grid_id=1, width=3, height=2)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((2, 1))
        assert not grid.in_bounds((3, 0))
        assert not grid.in_bounds((0, -1))

    def test_tile_to_local_is_tile_centre(self) -> None:
        grid = MapGrid(grid_id=1, width=3, height=3, world_position=(50.0, 50.0))
        assert grid.grid_tile_to_local((2, 1)) == (2.5, 1.5)

    def test_negative_size_rejected(self) -> None:
        with pytest.raises(ValueError):
            MapGrid(grid_id=1, width=-1, height=2)

    def test_tile_size_scales_world_aabb(self) -> None:
        grid = MapGrid(grid_id=2, width=3, height=2, world_position=(10.0, 0.0), tile_size=2)
        assert grid.tile_size == 2
        assert grid.world_aabb == Box2(left=10.0, bottom=0.0, right=16.0, top=4.0)

    def test_tile_size_scales_tile_centre(self) -> None:
        grid = MapGrid(grid_id=2, width=3, height=2, tile_size=2)
        assert grid.grid_tile_to_local((1, 0)) == (3.0, 1.0)

    def test_tile_size_defaults_to_one(self) -> None:
        assert MapGrid(grid_id=1, width=1, height=1).tile_size == 1

    def test_non_positive_tile_size_rejected(self) -> None:
        with pytest.raises(ValueError, match="tile_size"):
            MapGrid(grid_id=1, width=2, height=2, tile_size=0)


class TestStationRegistry:
    def test_empty(self) -> None:
        reg = StationRegistry()
        assert reg.stations() == []
        assert len(reg) == 0

    def test_station_ids_in_insertion_order(self) -> None:
        reg = StationRegistry()
        a = reg.add_station("Alpha")
        b = reg.add_station("Beta")
        assert reg.stations() == [a, b]
        assert reg.name_of(b) == "Beta"

    def test_add_grid_with_data(self) -> None:
        reg = StationRegistry()
        sid = reg.add_station("Alpha")
        grid = MapGrid(grid_id=10, width=4, height=4)
        reg.add_grid(sid, 10, grid)
        assert reg.grids_of(sid) == [10]
        assert reg.grid(10) is grid

    def test_grid_without_data(self) -> None:
        reg = StationRegistry()
        sid = reg.add_station("Alpha")
        reg.add_grid(sid, 10)
        assert reg.grids_of(sid) == [10]
        assert reg.grid(10) is None

    def test_set_grid_data_later(self) -> None:
        reg = StationRegistry()
        sid = reg.add_station("Alpha")
        reg.add_grid(sid, 10)
        grid = MapGrid(grid_id=10, width=2, height=2)
        reg.set_grid_data(10, grid)
        assert reg.grid(10) is grid

    def test_add_grid_twice_keeps_one_entry(self) -> None:
        reg = StationRegistry()
        sid = reg.add_station("Alpha")
        reg.add_grid(sid, 10)
        reg.add_grid(sid, 10)
        assert reg.grids_of(sid) == [10]

    def test_unknown_station_raises(self) -> None:
        reg = StationRegistry()
        with pytest.raises(KeyError):
            reg.add_grid(99, 1)
        with pytest.raises(KeyError):
            reg.grids_of(99)
        with pytest.raises(KeyError):
            reg.remove_station(99)

    def test_remove_station_forgets_grids(self) -> None:
        reg = StationRegistry()
        sid = reg.add_station("Alpha")
        reg.add_grid(sid, 10, MapGrid(grid_id=10, width=1, height=1))
        reg.remove_station(sid)
        assert reg.stations() == []
        assert reg.grid(10) is None

    def test_grids_of_returns_copy(self) -> None:
        reg = StationRegistry()
        sid = reg.add_station("Alpha")
        reg.add_grid(sid, 10)
        reg.grids_of(sid).append(11)
        assert reg.grids_of(sid) == [10]
