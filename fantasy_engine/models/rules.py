"""Configurable scoring rule sets."""

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Mapping

from .player import Position


def _default_goal_points() -> dict[Position, float]:
    return {
        Position.GOALKEEPER: 6,
        Position.DEFENDER: 6,
        Position.MIDFIELDER: 5,
        Position.FORWARD: 4,
    }


def _default_clean_sheet_points() -> dict[Position, float]:
    return {
        Position.GOALKEEPER: 4,
        Position.DEFENDER: 4,
        Position.MIDFIELDER: 1,
        Position.FORWARD: 0,
    }


@dataclass(frozen=True)
class ScoringRules:
    """
    Points awarded per statistic.

    Attributes:
        goals: Points per goal, by position.
        assists: Points per assist.
        clean_sheet: Points for a clean sheet, by position.
        saves_per_point: Goalkeeper saves needed for one point.
        yellow_card: Points per yellow card (negative).
        red_card: Points per red card (negative).
        own_goal: Points per own goal (negative).
        penalty_miss: Points per missed penalty (negative).
        penalty_save: Points per saved penalty.
    """

    goals: dict[Position, float] = field(default_factory=_default_goal_points)
    assists: float = 3
    clean_sheet: dict[Position, float] = field(default_factory=_default_clean_sheet_points)
    saves_per_point: int = 3
    yellow_card: float = -1
    red_card: float = -3
    own_goal: float = -2
    penalty_miss: float = -2
    penalty_save: float = 5

    def __post_init__(self) -> None:
        """Validate the rule set."""
        if self.saves_per_point <= 0:
            raise ValueError("saves_per_point must be positive")

    def goal_points(self, position: Position) -> float:
        """Points per goal for a position (0 if the position has no entry)."""
        return self.goals.get(position, 0)

    def clean_sheet_points(self, position: Position) -> float:
        """Clean sheet points for a position (0 if the position has no entry)."""
        return self.clean_sheet.get(position, 0)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ScoringRules":
        """
        Build a rule set from a plain mapping.

        Per-position tables are keyed by position code ("GK", "DEF", "MID",
        "FWD"). Keys that are absent keep their default values.

        Args:
            data: Mapping of rule name to value.

        Returns:
            ScoringRules instance.

        Raises:
            ValueError: If a key or position code is not recognised.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown scoring rules: {', '.join(sorted(unknown))}")

        kwargs: dict[str, Any] = {}
        for name, value in data.items():
            if name in ("goals", "clean_sheet"):
                try:
                    kwargs[name] = {Position(code): points for code, points in value.items()}
                except ValueError as e:
                    raise ValueError(f"Invalid position in {name}: {e}") from e
            else:
                kwargs[name] = value
        return cls(**kwargs)


DEFAULT_SCORING = ScoringRules()


def load_scoring_rules(path: Path) -> ScoringRules:
    """
    Load a scoring rules override from a JSON file.

    Args:
        path: Path to a JSON object of rule values.

    Returns:
        ScoringRules with the file's values applied over the defaults.
    """
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Scoring rules file must contain a JSON object: {path}")
    return ScoringRules.from_dict(data)
