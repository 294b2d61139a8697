"""Fantasy squad data models and game constants."""

from dataclasses import dataclass, field

from .player import Player, Position


# Game constants
INITIAL_BUDGET = 1000
MAX_PLAYERS_PER_TEAM = 3
MAX_SQUAD_SIZE = 15
POINTS_PER_EXTRA_TRANSFER = 4


@dataclass
class FantasySelection:
    """
    A player picked into a fantasy team roster.

    Attributes:
        player: The selected player.
        gameweek_selected: Gameweek in which the pick was made.
        is_captain: Captain (double points).
        is_vice_captain: Takes over the captaincy if the captain does not play.
        is_on_bench: Bench players do not score.
    """

    player: Player
    gameweek_selected: int = 1
    is_captain: bool = False
    is_vice_captain: bool = False
    is_on_bench: bool = False

    @property
    def player_id(self) -> str:
        """ID of the selected player."""
        return self.player.id

    @property
    def position(self) -> Position:
        """Position of the selected player."""
        return self.player.position


@dataclass(frozen=True)
class TeamBudget:
    """
    Budget snapshot derived from the current roster.

    Attributes:
        total_budget: Total allowance.
        spent: Sum of the roster's prices.
        remaining: total_budget - spent (negative after price rises).
    """

    total_budget: float
    spent: float
    remaining: float


@dataclass
class ValidationResult:
    """
    Result of a cumulative validation check.

    Attributes:
        valid: Whether the validation passed.
        errors: Every violation found (empty if valid).
    """

    valid: bool
    errors: list[str] = field(default_factory=list)
