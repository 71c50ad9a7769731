"""Glimmer station events -- announce, run, time out, burn glimmer.

Demonstrates:
- Loading event configs from JSON-style records
- Binding a behavior to an event type
- Picking a usable tile on a random station grid
- Rules ending themselves after their duration
- Listening for GlimmerEventEnded reports

Run: python -m examples.glimmer_events
"""

import logging

from tick_glimmer import (
    AdminLog,
    EventBus,
    GameTicker,
    GlimmerEventEnded,
    GlimmerEventRule,
    GlimmerLedger,
    MapGrid,
    RulePrototypes,
    StationEvent,
    StationRegistry,
    TileAtmosphere,
)
from tick_glimmer.atmosphere import SPACE, WALL


# ---------------------------------------------------------------------------
# Behaviors
# ---------------------------------------------------------------------------

class WispSpawn(StationEvent):
    """Announces where a glimmer wisp would appear."""

    def started(self, rule: GlimmerEventRule) -> None:
        found = rule.try_find_random_tile()
        if found is None:
            print(f"  {rule.id}: no usable tile, skipping spawn")
            return
        print(f"  {rule.id}: wisp appears on grid {found.grid} at {found.coords}")


# ---------------------------------------------------------------------------
# World
# ---------------------------------------------------------------------------

def build_stations() -> tuple[StationRegistry, TileAtmosphere]:
    stations = StationRegistry()
    atmos = TileAtmosphere()
    sid = stations.add_station("NSS Glimmer")
    grid = MapGrid(grid_id=1, width=12, height=8, world_position=(30.0, 10.0))
    stations.add_grid(sid, 1, grid)
    atmos.fill_rect(1, (0, 0), (11, 0), WALL)
    atmos.fill_rect(1, (0, 7), (11, 7), SPACE)
    return stations, atmos


EVENTS = [
    {"id": "glimmer_wisp", "glimmerBurnLower": 20, "glimmerBurnUpper": 40,
     "report": "A glimmer wisp was sighted."},
    {"id": "noospheric_zap", "glimmerBurnLower": 50, "glimmerBurnUpper": 100,
     "report": "Psionics were zapped."},
]


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    prototypes = RulePrototypes()
    prototypes.load(EVENTS)
    stations, atmos = build_stations()
    ledger = GlimmerLedger(total=500, minimum=0, maximum=1000)
    bus = EventBus()
    bus.subscribe(
        GlimmerEventEnded,
        lambda ev: print(f"  report: {ev.message} ({ev.glimmer_burned} glimmer burned)"),
    )

    ticker = GameTicker(
        prototypes,
        ledger=ledger,
        admin_log=AdminLog(),
        bus=bus,
        stations=stations,
        atmosphere=atmos,
        tps=10,
        seed=42,
    )
    ticker.register_behavior("glimmer_wisp", WispSpawn)

    print(f"Glimmer before: {ledger.total}")
    for rule_id in prototypes.ids():
        ticker.start_rule(rule_id)
    ticker.run(15)
    print(f"Glimmer after: {ledger.total}")


if __name__ == "__main__":
    main()
