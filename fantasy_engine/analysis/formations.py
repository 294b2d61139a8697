"""Tactical formations and lineup validation."""

from collections import Counter
from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from ..models.player import Position
from ..models.team import ValidationResult


LINEUP_SIZE = 11


class HasPosition(Protocol):
    """Anything with a playing position (a Player or a FantasySelection)."""

    @property
    def position(self) -> Position: ...


@dataclass(frozen=True)
class FormationCounts:
    """Required number of players per position."""

    goalkeepers: int
    defenders: int
    midfielders: int
    forwards: int

    def __post_init__(self) -> None:
        """Validate the counts make up a legal lineup."""
        if self.total != LINEUP_SIZE:
            raise ValueError(f"Formation must have {LINEUP_SIZE} players, has {self.total}")
        if self.goalkeepers != 1:
            raise ValueError("Formation must have exactly 1 goalkeeper")

    @property
    def total(self) -> int:
        """Total players in the formation."""
        return self.goalkeepers + self.defenders + self.midfielders + self.forwards

    def for_position(self, position: Position) -> int:
        """Required count for a position."""
        return {
            Position.GOALKEEPER: self.goalkeepers,
            Position.DEFENDER: self.defenders,
            Position.MIDFIELDER: self.midfielders,
            Position.FORWARD: self.forwards,
        }[position]

    def as_dict(self) -> dict[str, int]:
        """Counts keyed by short position name."""
        return {
            "gk": self.goalkeepers,
            "def": self.defenders,
            "mid": self.midfielders,
            "fwd": self.forwards,
        }


@dataclass(frozen=True)
class Formation:
    """
    A named tactical template.

    Attributes:
        id: Lookup key, e.g. "4-4-2".
        name: Display name.
        positions: Required players per position.
    """

    id: str
    name: str
    positions: FormationCounts

    @property
    def layout(self) -> list[list[Position]]:
        """Pitch rows from goal outwards: goalkeeper, defence, midfield, attack."""
        return [
            [position] * self.positions.for_position(position)
            for position in POSITION_ORDER
        ]


POSITION_ORDER = (
    Position.GOALKEEPER,
    Position.DEFENDER,
    Position.MIDFIELDER,
    Position.FORWARD,
)

# Labels used in error messages
POSITION_LABELS = {
    Position.GOALKEEPER: "goalkeeper",
    Position.DEFENDER: "defender",
    Position.MIDFIELDER: "midfielder",
    Position.FORWARD: "forward",
}


def _formation(defenders: int, midfielders: int, forwards: int) -> Formation:
    formation_id = f"{defenders}-{midfielders}-{forwards}"
    return Formation(
        id=formation_id,
        name=formation_id,
        positions=FormationCounts(
            goalkeepers=1,
            defenders=defenders,
            midfielders=midfielders,
            forwards=forwards,
        ),
    )


FORMATIONS: tuple[Formation, ...] = (
    _formation(4, 4, 2),
    _formation(4, 3, 3),
    _formation(3, 5, 2),
    _formation(5, 3, 2),
)


def get_formation(formation_id: str) -> Optional[Formation]:
    """
    Look up a formation by ID.

    Args:
        formation_id: Exact formation ID, e.g. "4-3-3".

    Returns:
        The Formation, or None if no formation has that ID.
    """
    return next((f for f in FORMATIONS if f.id == formation_id), None)


def validate_team_formation(
    formation: Formation,
    selections: Sequence[HasPosition],
) -> ValidationResult:
    """
    Check a lineup against a formation.

    Every position whose count differs from the formation produces its own
    error, so an empty lineup yields one error per position.

    Args:
        formation: The formation to match.
        selections: The lineup (anything exposing .position).

    Returns:
        ValidationResult with one error per mismatched position.
    """
    counts = Counter(s.position for s in selections)
    errors: list[str] = []

    for position in POSITION_ORDER:
        required = formation.positions.for_position(position)
        have = counts.get(position, 0)
        if have != required:
            errors.append(
                f"Need exactly {required} {POSITION_LABELS[position]}(s), have {have}"
            )

    return ValidationResult(valid=len(errors) == 0, errors=errors)
