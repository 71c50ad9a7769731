"""RulePrototypes - registry of game rule configurations."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from tick_glimmer.types import GameRuleConfig, GlimmerEventConfig


class RulePrototypes:
    """Stores rule configurations by id. Insertion order preserved."""

    def __init__(self) -> None:
        self._configs: dict[str, GameRuleConfig] = {}

    def define(self, config: GameRuleConfig) -> None:
        """Register a configuration. Overwrites if id exists."""
        self._configs[config.id] = config

    def get(self, rule_id: str) -> GameRuleConfig:
        """Look up a configuration. Raises KeyError if not defined."""
        if rule_id not in self._configs:
            raise KeyError(rule_id)
        return self._configs[rule_id]

    def has(self, rule_id: str) -> bool:
        return rule_id in self._configs

    def ids(self) -> list[str]:
        return list(self._configs)

    def remove(self, rule_id: str) -> None:
        """Remove a configuration. Raises KeyError if not defined."""
        if rule_id not in self._configs:
            raise KeyError(rule_id)
        del self._configs[rule_id]

    def load(self, records: list[dict[str, Any]]) -> list[str]:
        """Define one config per record and return their ids.

        Records carrying any glimmer field become GlimmerEventConfig,
        everything else a plain GameRuleConfig.
        """
        loaded: list[str] = []
        for record in records:
            config = _config_from_record(record)
            self.define(config)
            loaded.append(config.id)
        return loaded

    def load_json(self, path: str | Path) -> list[str]:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = [data]
        return self.load(data)


_GLIMMER_KEYS = frozenset({
    "glimmerBurnLower", "glimmerBurnUpper", "glimmer_burn_lower",
    "glimmer_burn_upper", "report",
})


def _config_from_record(record: dict[str, Any]) -> GameRuleConfig:
    if record.keys() & _GLIMMER_KEYS:
        return GlimmerEventConfig.from_dict(record)
    return GameRuleConfig(id=record["id"])
