"""GameTicker - runs game rules and feeds them frame time."""
from __future__ import annotations

import logging
import os
import random
from typing import TYPE_CHECKING, Callable

from tick_glimmer.rule import GlimmerEventRule, StationEventBehavior

if TYPE_CHECKING:
    from tick_glimmer.atmosphere import AtmosphereQuery
    from tick_glimmer.audit import AuditLog
    from tick_glimmer.bus import EventBus
    from tick_glimmer.ledger import Ledger
    from tick_glimmer.prototypes import RulePrototypes
    from tick_glimmer.stations import StationLookup

_log = logging.getLogger(__name__)

BehaviorFactory = Callable[[], StationEventBehavior]


class GameTicker:
    """Owns the running rules, one per prototype id.

    ``end_rule`` is the only path that calls a rule's ``ended()``, and it
    drops the rule from the running set first, so a rule that times out
    and is force-ended in the same frame still ends once.
    """

    def __init__(
        self,
        prototypes: RulePrototypes,
        *,
        ledger: Ledger,
        admin_log: AuditLog,
        bus: EventBus,
        stations: StationLookup | None = None,
        atmosphere: AtmosphereQuery | None = None,
        tps: int = 20,
        seed: int | None = None,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._prototypes = prototypes
        self._ledger = ledger
        self._admin_log = admin_log
        self._bus = bus
        self._stations = stations
        self._atmosphere = atmosphere
        self._tps = tps
        self._dt = 1.0 / tps
        self._frame_number = 0
        self._behaviors: dict[str, BehaviorFactory] = {}
        self._running: dict[str, GlimmerEventRule] = {}

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def frame_number(self) -> int:
        return self._frame_number

    # --- Registration ---

    def register_behavior(self, rule_id: str, factory: BehaviorFactory) -> None:
        """Bind the behavior built for every new rule of this prototype."""
        self._behaviors[rule_id] = factory

    # --- Queries ---

    def is_running(self, rule_id: str) -> bool:
        return rule_id in self._running

    def rule(self, rule_id: str) -> GlimmerEventRule | None:
        return self._running.get(rule_id)

    def running_rules(self) -> list[GlimmerEventRule]:
        return list(self._running.values())

    # --- Rule lifecycle ---

    def add_rule(self, rule_id: str) -> GlimmerEventRule:
        """Create and announce a rule. Raises KeyError if the prototype is
        unknown, ValueError if the rule is already running.
        """
        config = self._prototypes.get(rule_id)
        if rule_id in self._running:
            raise ValueError(f"Rule {rule_id!r} is already running")
        factory = self._behaviors.get(rule_id)
        rule = GlimmerEventRule(
            config,
            ledger=self._ledger,
            admin_log=self._admin_log,
            bus=self._bus,
            rng=self._rng,
            end_rule=self.end_rule,
            behavior=factory() if factory is not None else None,
            stations=self._stations,
            atmosphere=self._atmosphere,
        )
        self._running[rule_id] = rule
        _log.debug("rule %s added", rule_id)
        rule.added()
        return rule

    def start_rule(self, rule_id: str) -> GlimmerEventRule:
        """Start a rule, adding it first if it is not running yet."""
        rule = self._running.get(rule_id)
        if rule is None:
            rule = self.add_rule(rule_id)
        rule.started()
        return rule

    def end_rule(self, rule_id: str) -> None:
        """End a running rule. Does nothing if it is not running."""
        rule = self._running.pop(rule_id, None)
        if rule is None:
            return
        _log.debug("rule %s ended after %.3fs", rule_id, rule.elapsed)
        rule.ended()

    def end_all(self) -> None:
        for rule_id in list(self._running):
            self.end_rule(rule_id)

    # --- Frames ---

    def update(self, frame_time: float) -> None:
        """Tick every running rule, then deliver queued bus events."""
        self._frame_number += 1
        for rule in list(self._running.values()):
            rule.update(frame_time)
        self._bus.flush()

    def step(self) -> None:
        self.update(self._dt)

    def run(self, n: int) -> None:
        for _ in range(n):
            self.step()
