"""tick-glimmer - Glimmer-burning station events and their lifecycle."""
from tick_glimmer.atmosphere import AtmosphereQuery, TileAtmosphere, TileDef
from tick_glimmer.audit import AdminLog, AuditEntry
from tick_glimmer.bus import EventBus
from tick_glimmer.ledger import GlimmerLedger
from tick_glimmer.prototypes import RulePrototypes
from tick_glimmer.rule import (
    RULE_DURATION,
    GlimmerEventRule,
    StationEvent,
    StationEventBehavior,
)
from tick_glimmer.search import SEARCH_ATTEMPTS, try_find_random_tile
from tick_glimmer.stations import Box2, MapGrid, StationRegistry
from tick_glimmer.ticker import GameTicker
from tick_glimmer.types import (
    GameRuleConfig,
    GlimmerEventConfig,
    GlimmerEventEnded,
    LogImpact,
    LogType,
    RuleState,
    TileFound,
)

__all__ = [
    "AdminLog",
    "AtmosphereQuery",
    "AuditEntry",
    "Box2",
    "EventBus",
    "GameRuleConfig",
    "GameTicker",
    "GlimmerEventConfig",
    "GlimmerEventEnded",
    "GlimmerEventRule",
    "GlimmerLedger",
    "LogImpact",
    "LogType",
    "MapGrid",
    "RULE_DURATION",
    "RuleState",
    "RulePrototypes",
    "SEARCH_ATTEMPTS",
    "StationEvent",
    "StationEventBehavior",
    "StationRegistry",
    "TileAtmosphere",
    "TileDef",
    "TileFound",
    "try_find_random_tile",
]
