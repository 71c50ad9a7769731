"""Random tile search across registered stations."""
from __future__ import annotations

import logging
import random

from tick_glimmer.atmosphere import AtmosphereQuery
from tick_glimmer.stations import StationLookup
from tick_glimmer.types import TileFound

_log = logging.getLogger(__name__)

SEARCH_ATTEMPTS = 10


def try_find_random_tile(
    stations: StationLookup,
    atmosphere: AtmosphereQuery,
    rng: random.Random,
    attempts: int = SEARCH_ATTEMPTS,
) -> TileFound | None:
    """Pick a random station, one of its grids, and a random tile on it.

    Samples up to *attempts* tiles inside the grid's world bounds and
    returns the first that is neither space nor air-blocked. Returns None
    when there are no stations, the station has no grids, the grid has no
    spatial data, or every sample was rejected. None is an ordinary
    outcome; callers skip their spatial effect rather than fail.
    """
    station_ids = stations.stations()
    if not station_ids:
        return None
    station = rng.choice(station_ids)

    grid_ids = stations.grids_of(station)
    if not grid_ids:
        return None
    grid_id = rng.choice(grid_ids)

    grid = stations.grid(grid_id)
    if grid is None:
        return None

    bounds = grid.world_aabb
    left, right = int(bounds.left), int(bounds.right)
    bottom, top = int(bounds.bottom), int(bounds.top)
    origin_x, origin_y = (int(v) for v in grid.world_position)
    size = grid.tile_size

    for _ in range(attempts):
        x = _next_int(rng, left, right)
        y = _next_int(rng, bottom, top)
        tile = ((x - origin_x) // size, (y - origin_y) // size)
        if atmosphere.is_tile_space(grid, grid.map_id, tile):
            continue
        if atmosphere.is_tile_air_blocked(grid, tile):
            continue
        return TileFound(
            tile=tile,
            station=station,
            grid=grid_id,
            coords=grid.grid_tile_to_local(tile),
        )

    _log.debug("no usable tile on grid %s after %d attempts", grid_id, attempts)
    return None


def _next_int(rng: random.Random, lo: int, hi: int) -> int:
    # An axis that truncates to nothing still yields its one value.
    if hi <= lo:
        return lo
    return rng.randrange(lo, hi)
