"""Station and grid registry used by the random tile search."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from tick_glimmer.types import GridId, StationId, Tile


@dataclass(frozen=True)
class Box2:
    """Axis-aligned box in world space."""

    left: float
    bottom: float
    right: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def contains(self, x: float, y: float) -> bool:
        return self.left <= x < self.right and self.bottom <= y < self.top


class MapGrid:
    """Spatial data for one grid: a width x height block of square tiles,
    ``tile_size`` world units wide, whose origin sits at ``world_position``
    on map ``map_id``.
    """

    def __init__(
        self,
        grid_id: GridId,
        width: int,
        height: int,
        world_position: tuple[float, float] = (0.0, 0.0),
        map_id: int = 0,
        tile_size: int = 1,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"grid size must be >= 0, got {width}x{height}")
        if tile_size < 1:
            raise ValueError(f"tile_size must be >= 1, got {tile_size}")
        self._grid_id = grid_id
        self._width = width
        self._height = height
        self._world_position = world_position
        self._map_id = map_id
        self._tile_size = tile_size

    @property
    def grid_id(self) -> GridId:
        return self._grid_id

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def world_position(self) -> tuple[float, float]:
        return self._world_position

    @property
    def map_id(self) -> int:
        return self._map_id

    @property
    def tile_size(self) -> int:
        return self._tile_size

    @property
    def world_aabb(self) -> Box2:
        x, y = self._world_position
        return Box2(
            left=x,
            bottom=y,
            right=x + self._width * self._tile_size,
            top=y + self._height * self._tile_size,
        )

    def in_bounds(self, tile: Tile) -> bool:
        return 0 <= tile[0] < self._width and 0 <= tile[1] < self._height

    def grid_tile_to_local(self, tile: Tile) -> tuple[float, float]:
        """Grid-local coordinates of the centre of ``tile``."""
        size = self._tile_size
        return ((tile[0] + 0.5) * size, (tile[1] + 0.5) * size)


class StationLookup(Protocol):
    def stations(self) -> list[StationId]: ...
    def grids_of(self, station: StationId) -> list[GridId]: ...
    def grid(self, grid_id: GridId) -> MapGrid | None: ...


class StationRegistry:
    """Stations in insertion order, each owning a list of grids.

    A grid may be registered without spatial data (``grid(...)`` then
    returns None), mirroring grids that have not finished loading.
    """

    def __init__(self) -> None:
        self._next_id: StationId = 0
        self._names: dict[StationId, str] = {}
        self._grids: dict[StationId, list[GridId]] = {}
        self._grid_data: dict[GridId, MapGrid] = {}

    def add_station(self, name: str) -> StationId:
        sid = self._next_id
        self._next_id += 1
        self._names[sid] = name
        self._grids[sid] = []
        return sid

    def remove_station(self, station: StationId) -> None:
        """Remove a station and forget its grids. Raises KeyError if unknown."""
        if station not in self._names:
            raise KeyError(station)
        for gid in self._grids.pop(station):
            self._grid_data.pop(gid, None)
        del self._names[station]

    def add_grid(
        self, station: StationId, grid_id: GridId, grid: MapGrid | None = None
    ) -> None:
        if station not in self._grids:
            raise KeyError(station)
        if grid_id not in self._grids[station]:
            self._grids[station].append(grid_id)
        if grid is not None:
            self._grid_data[grid_id] = grid

    def set_grid_data(self, grid_id: GridId, grid: MapGrid) -> None:
        self._grid_data[grid_id] = grid

    def stations(self) -> list[StationId]:
        return list(self._names)

    def name_of(self, station: StationId) -> str:
        return self._names[station]

    def grids_of(self, station: StationId) -> list[GridId]:
        if station not in self._grids:
            raise KeyError(station)
        return list(self._grids[station])

    def grid(self, grid_id: GridId) -> MapGrid | None:
        return self._grid_data.get(grid_id)

    def __len__(self) -> int:
        return len(self._names)
