"""Tile atmosphere queries - which tiles are space or air-blocked."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from tick_glimmer.stations import MapGrid
from tick_glimmer.types import GridId, Tile


class AtmosphereQuery(Protocol):
    def is_tile_space(self, grid: MapGrid, map_id: int, tile: Tile) -> bool: ...
    def is_tile_air_blocked(self, grid: MapGrid, tile: Tile) -> bool: ...


@dataclass(frozen=True)
class TileDef:
    """Immutable tile type definition.

    Attributes:
        name: Unique identifier for this tile type.
        space: Tile is open to vacuum.
        air_blocked: Tile is sealed off by a wall or similar barrier.
    """

    name: str
    space: bool = False
    air_blocked: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("TileDef name must be non-empty")


FLOOR = TileDef("floor")
SPACE = TileDef("space", space=True)
WALL = TileDef("wall", air_blocked=True)


class TileAtmosphere:
    """Sparse per-grid tile storage. Unset tiles inside a grid return the
    default TileDef; tiles outside the grid's bounds are space.
    """

    def __init__(self, default: TileDef = FLOOR) -> None:
        self._default = default
        self._tiles: dict[GridId, dict[Tile, TileDef]] = {}

    @property
    def default(self) -> TileDef:
        return self._default

    def set_tile(self, grid_id: GridId, tile: Tile, tile_def: TileDef) -> None:
        cells = self._tiles.setdefault(grid_id, {})
        if tile_def == self._default:
            cells.pop(tile, None)
        else:
            cells[tile] = tile_def

    def fill_rect(
        self,
        grid_id: GridId,
        corner1: Tile,
        corner2: Tile,
        tile_def: TileDef,
    ) -> None:
        """Fill a rectangle of tiles (inclusive) with one tile type."""
        x1, y1 = min(corner1[0], corner2[0]), min(corner1[1], corner2[1])
        x2, y2 = max(corner1[0], corner2[0]), max(corner1[1], corner2[1])
        for x in range(x1, x2 + 1):
            for y in range(y1, y2 + 1):
                self.set_tile(grid_id, (x, y), tile_def)

    def clear_grid(self, grid_id: GridId) -> None:
        self._tiles.pop(grid_id, None)

    def tile_at(self, grid_id: GridId, tile: Tile) -> TileDef:
        return self._tiles.get(grid_id, {}).get(tile, self._default)

    def is_tile_space(self, grid: MapGrid, map_id: int, tile: Tile) -> bool:
        if not grid.in_bounds(tile):
            return True
        return self.tile_at(grid.grid_id, tile).space

    def is_tile_air_blocked(self, grid: MapGrid, tile: Tile) -> bool:
        if not grid.in_bounds(tile):
            return False
        return self.tile_at(grid.grid_id, tile).air_blocked
