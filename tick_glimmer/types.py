"""Core data types for glimmer station events."""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any

StationId = int
GridId = int
Tile = tuple[int, int]


@dataclass(frozen=True)
class GameRuleConfig:
    """Immutable configuration shared by every game rule.

    Attributes:
        id: Prototype identifier naming the rule type.
    """

    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("GameRuleConfig id must be non-empty")


@dataclass(frozen=True)
class GlimmerEventConfig(GameRuleConfig):
    """Configuration for an event that burns glimmer when it ends.

    Attributes:
        glimmer_burn_lower: Inclusive lower bound of the glimmer debit.
        glimmer_burn_upper: Exclusive upper bound of the glimmer debit.
        report: Summary message carried by the completion notification.
    """

    glimmer_burn_lower: int = 0
    glimmer_burn_upper: int = 0
    report: str = ""

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.glimmer_burn_lower < 0:
            raise ValueError(
                f"glimmer_burn_lower must be >= 0, got {self.glimmer_burn_lower}"
            )
        if self.glimmer_burn_upper < self.glimmer_burn_lower:
            raise ValueError(
                f"glimmer_burn_upper ({self.glimmer_burn_upper}) must be >= "
                f"glimmer_burn_lower ({self.glimmer_burn_lower})"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GlimmerEventConfig:
        """Build from a JSON-compatible dict. Accepts camelCase or snake_case keys."""
        return cls(
            id=data["id"],
            glimmer_burn_lower=int(
                data.get("glimmerBurnLower", data.get("glimmer_burn_lower", 0))
            ),
            glimmer_burn_upper=int(
                data.get("glimmerBurnUpper", data.get("glimmer_burn_upper", 0))
            ),
            report=data.get("report", ""),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "glimmer_burn_lower": self.glimmer_burn_lower,
            "glimmer_burn_upper": self.glimmer_burn_upper,
            "report": self.report,
        }


class RuleState(enum.Enum):
    PENDING = "pending"
    ANNOUNCED = "announced"
    ACTIVE = "active"
    ENDED = "ended"


@dataclass(frozen=True)
class GlimmerEventEnded:
    """Raised locally, once per rule, when a glimmer event ends."""

    message: str
    glimmer_burned: int


@dataclass(frozen=True)
class TileFound:
    """A usable tile picked by the random tile search.

    Attributes:
        tile: Grid-local tile indices.
        station: Station the grid belongs to.
        grid: Grid the tile lies on.
        coords: Grid-local coordinates of the tile centre.
    """

    tile: Tile
    station: StationId
    grid: GridId
    coords: tuple[float, float]


class LogType(enum.Enum):
    EVENT_ANNOUNCED = "event_announced"
    EVENT_STARTED = "event_started"
    EVENT_STOPPED = "event_stopped"


class LogImpact(enum.IntEnum):
    LOW = 0
    MEDIUM = 1
    HIGH = 2
    EXTREME = 3
