"""Player data model for the fantasy football engine."""

from dataclasses import dataclass
from enum import Enum


class Position(Enum):
    """Player position, fixed for the lifetime of a season."""

    GOALKEEPER = "GK"
    DEFENDER = "DEF"
    MIDFIELDER = "MID"
    FORWARD = "FWD"


class Availability(Enum):
    """Player availability status."""

    AVAILABLE = "AVAILABLE"
    INJURED = "INJURED"
    SUSPENDED = "SUSPENDED"
    DOUBTFUL = "DOUBTFUL"


@dataclass
class Player:
    """
    Represents a real footballer available for fantasy selection.

    Attributes:
        id: Unique identifier for the player.
        name: Player's full name.
        position: Playing position (drives scoring and formation slots).
        club_id: Identifier of the real club the player belongs to.
        price: Current fantasy price.
        total_points: Cumulative fantasy points this season.
        form: Rolling average of recent fantasy points.
        availability: Current availability status.
    """

    id: str
    name: str
    position: Position
    club_id: str
    price: float
    total_points: int = 0
    form: float = 0.0
    availability: Availability = Availability.AVAILABLE

    @property
    def is_available(self) -> bool:
        """Check if player is fit to play."""
        return self.availability == Availability.AVAILABLE

    @property
    def is_goalkeeper(self) -> bool:
        """Check if player is a goalkeeper."""
        return self.position == Position.GOALKEEPER
