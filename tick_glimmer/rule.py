"""GlimmerEventRule - lifecycle controller for one glimmer station event."""
from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Callable, Protocol

from tick_glimmer.search import try_find_random_tile
from tick_glimmer.types import (
    GameRuleConfig,
    GlimmerEventConfig,
    GlimmerEventEnded,
    LogImpact,
    LogType,
    RuleState,
    TileFound,
)

if TYPE_CHECKING:
    from tick_glimmer.atmosphere import AtmosphereQuery
    from tick_glimmer.audit import AuditLog
    from tick_glimmer.bus import EventBus
    from tick_glimmer.ledger import Ledger
    from tick_glimmer.stations import StationLookup

_log = logging.getLogger(__name__)

RULE_DURATION = 1.0


class StationEventBehavior(Protocol):
    """Event-specific hooks, called after the rule's own side effects."""

    def added(self, rule: GlimmerEventRule) -> None: ...
    def started(self, rule: GlimmerEventRule) -> None: ...
    def update(self, rule: GlimmerEventRule, frame_time: float) -> None: ...
    def ended(self, rule: GlimmerEventRule, glimmer_burned: int) -> None: ...


class StationEvent:
    """Behavior that does nothing. Override only the hooks you need."""

    def added(self, rule: GlimmerEventRule) -> None:
        pass

    def started(self, rule: GlimmerEventRule) -> None:
        pass

    def update(self, rule: GlimmerEventRule, frame_time: float) -> None:
        pass

    def ended(self, rule: GlimmerEventRule, glimmer_burned: int) -> None:
        pass


class GlimmerEventRule:
    """Drives one event through added -> started -> update* -> ended.

    Each hook records its audit entry first. The remaining side effects
    (glimmer debit, completion notification, behavior hooks) only run when
    the config is a GlimmerEventConfig; any other config degrades to the
    audit entry alone. Hooks called out of order are ignored.
    """

    def __init__(
        self,
        config: GameRuleConfig,
        *,
        ledger: Ledger,
        admin_log: AuditLog,
        bus: EventBus,
        rng: random.Random,
        end_rule: Callable[[str], None],
        behavior: StationEventBehavior | None = None,
        stations: StationLookup | None = None,
        atmosphere: AtmosphereQuery | None = None,
    ) -> None:
        self._config = config
        self._ledger = ledger
        self._admin_log = admin_log
        self._bus = bus
        self._rng = rng
        self._end_rule = end_rule
        self._behavior: StationEventBehavior = (
            behavior if behavior is not None else StationEvent()
        )
        self._stations = stations
        self._atmosphere = atmosphere
        self._state = RuleState.PENDING
        self._elapsed = 0.0
        self._end_requested = False

    # --- Properties ---

    @property
    def id(self) -> str:
        return self._config.id

    @property
    def config(self) -> GameRuleConfig:
        return self._config

    @property
    def behavior(self) -> StationEventBehavior:
        return self._behavior

    @property
    def state(self) -> RuleState:
        return self._state

    @property
    def elapsed(self) -> float:
        """Seconds accumulated by update() since the rule started."""
        return self._elapsed

    @property
    def is_active(self) -> bool:
        return self._state in (RuleState.ANNOUNCED, RuleState.ACTIVE)

    @property
    def end_requested(self) -> bool:
        return self._end_requested

    def _glimmer_config(self) -> GlimmerEventConfig | None:
        if isinstance(self._config, GlimmerEventConfig):
            return self._config
        return None

    # --- Lifecycle hooks ---

    def added(self) -> None:
        """Announce the event. Only valid once, from PENDING."""
        if self._state is not RuleState.PENDING:
            return
        self._admin_log.add(LogType.EVENT_ANNOUNCED, f"Event added / announced: {self.id}")
        self._state = RuleState.ANNOUNCED

        if self._glimmer_config() is None:
            return
        self._behavior.added(self)

    def started(self) -> None:
        """Activate the event. Only valid once, after added()."""
        if self._state is not RuleState.ANNOUNCED:
            return
        self._admin_log.add(
            LogType.EVENT_STARTED, f"Event started: {self.id}", LogImpact.HIGH
        )
        self._state = RuleState.ACTIVE

        if self._glimmer_config() is None:
            return
        self._behavior.started(self)

    def update(self, frame_time: float) -> None:
        if self._state is not RuleState.ACTIVE or self._glimmer_config() is None:
            return
        if frame_time > 0:
            self._elapsed += frame_time
        self._behavior.update(self, frame_time)
        if self._elapsed > RULE_DURATION and self._state is RuleState.ACTIVE:
            self.force_end_self()

    def ended(self) -> int | None:
        """Finish the event. Returns the glimmer burned, or None if nothing
        was burned (already ended, never added, or a foreign config).
        """
        if self._state is RuleState.ENDED:
            return None
        announced = self._state is not RuleState.PENDING
        self._admin_log.add(LogType.EVENT_STOPPED, f"Event ended: {self.id}")
        self._state = RuleState.ENDED

        ev = self._glimmer_config()
        if ev is None or not announced:
            return None

        if ev.glimmer_burn_upper > ev.glimmer_burn_lower:
            glimmer_burned = self._rng.randrange(ev.glimmer_burn_lower, ev.glimmer_burn_upper)
        else:
            glimmer_burned = ev.glimmer_burn_lower
        self._ledger.add(-glimmer_burned)
        _log.info("event %s burned %d glimmer", self.id, glimmer_burned)

        self._bus.raise_local(GlimmerEventEnded(message=ev.report, glimmer_burned=glimmer_burned))
        self._behavior.ended(self, glimmer_burned)
        return glimmer_burned

    # --- Helpers ---

    def force_end_self(self) -> None:
        """Ask the scheduler to end this rule. Repeated requests are ignored."""
        if self._end_requested or self._state is RuleState.ENDED:
            return
        self._end_requested = True
        self._end_rule(self.id)

    def try_find_random_tile(self) -> TileFound | None:
        if self._stations is None or self._atmosphere is None:
            return None
        return try_find_random_tile(self._stations, self._atmosphere, self._rng)
