"""Tests for tick_glimmer.prototypes — RulePrototypes."""
from __future__ import annotations

import json
from pathlib import Path

import pytest

from tick_glimmer.prototypes import RulePrototypes
from tick_glimmer.types import GameRuleConfig, GlimmerEventConfig


class TestRegistry:
    def test_define_and_get(self) -> None:
        protos = RulePrototypes()
        cfg = GlimmerEventConfig(id="storm", glimmer_burn_lower=1, glimmer_burn_upper=3)
        protos.define(cfg)
        assert protos.get("storm") is cfg
        assert protos.has("storm")

    def test_get_unknown_raises(self) -> None:
        with pytest.raises(KeyError):
            RulePrototypes().get("missing")

    def test_redefine_overwrites(self) -> None:
        protos = RulePrototypes()
        protos.define(GameRuleConfig(id="storm"))
        replacement = GlimmerEventConfig(id="storm", glimmer_burn_lower=2, glimmer_burn_upper=4)
        protos.define(replacement)
        assert protos.get("storm") is replacement
        assert protos.ids() == ["storm"]

    def test_ids_in_insertion_order(self) -> None:
        protos = RulePrototypes()
        for name in ("c", "a", "b"):
            protos.define(GameRuleConfig(id=name))
        assert protos.ids() == ["c", "a", "b"]

    def test_remove(self) -> None:
        protos = RulePrototypes()
        protos.define(GameRuleConfig(id="storm"))
        protos.remove("storm")
        assert not protos.has("storm")
        with pytest.raises(KeyError):
            protos.remove("storm")


class TestLoad:
    def test_glimmer_records_become_glimmer_configs(self) -> None:
        protos = RulePrototypes()
        ids = protos.load([
            {"id": "noospheric_fry", "glimmerBurnLower": 20, "glimmerBurnUpper": 40,
             "report": "Probers fried."},
            {"id": "round_rule"},
        ])
        assert ids == ["noospheric_fry", "round_rule"]
        fry = protos.get("noospheric_fry")
        assert isinstance(fry, GlimmerEventConfig)
        assert fry.glimmer_burn_upper == 40
        assert fry.report == "Probers fried."
        plain = protos.get("round_rule")
        assert type(plain) is GameRuleConfig

    def test_invalid_record_raises(self) -> None:
        with pytest.raises(ValueError):
            RulePrototypes().load([
                {"id": "broken", "glimmerBurnLower": 50, "glimmerBurnUpper": 10}
            ])

    def test_missing_id_raises(self) -> None:
        with pytest.raises(KeyError):
            RulePrototypes().load([{"glimmerBurnLower": 1}])

    def test_load_json_list(self, tmp_path: Path) -> None:
        path = tmp_path / "events.json"
        path.write_text(json.dumps([
            {"id": "a", "glimmer_burn_lower": 1, "glimmer_burn_upper": 2},
            {"id": "b", "glimmer_burn_lower": 3, "glimmer_burn_upper": 4},
        ]), encoding="utf-8")
        protos = RulePrototypes()
        assert protos.load_json(path) == ["a", "b"]

    def test_load_json_single_object(self, tmp_path: Path) -> None:
        path = tmp_path / "event.json"
        path.write_text(json.dumps({"id": "solo", "report": "alone"}), encoding="utf-8")
        protos = RulePrototypes()
        assert protos.load_json(str(path)) == ["solo"]
        assert protos.get("solo") == GlimmerEventConfig(id="solo", report="alone")
