"""Data models for the fantasy football engine."""

from .player import Availability, Player, Position
from .match import BASELINE_RATING, CumulativeStats, PlayerMatchStats
from .rules import DEFAULT_SCORING, ScoringRules, load_scoring_rules
from .team import (
    INITIAL_BUDGET,
    MAX_PLAYERS_PER_TEAM,
    MAX_SQUAD_SIZE,
    POINTS_PER_EXTRA_TRANSFER,
    FantasySelection,
    TeamBudget,
    ValidationResult,
)

__all__ = [
    # Player
    "Availability",
    "Player",
    "Position",
    # Match
    "BASELINE_RATING",
    "CumulativeStats",
    "PlayerMatchStats",
    # Rules
    "DEFAULT_SCORING",
    "ScoringRules",
    "load_scoring_rules",
    # Team
    "INITIAL_BUDGET",
    "MAX_PLAYERS_PER_TEAM",
    "MAX_SQUAD_SIZE",
    "POINTS_PER_EXTRA_TRANSFER",
    "FantasySelection",
    "TeamBudget",
    "ValidationResult",
]
