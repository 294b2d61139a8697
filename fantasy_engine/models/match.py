"""Match and season statistics data models."""

from dataclasses import dataclass
from typing import Optional


# Rating assumed when the provider reports none
BASELINE_RATING = 6.0


@dataclass(frozen=True)
class PlayerMatchStats:
    """
    Statistics for a single player in a single match (or period).

    All count fields default to 0 and clean_sheet to False. A field the
    provider sent as null may be None and counts as zero. Values are not
    range-checked.
    """

    goals: Optional[int] = 0
    assists: Optional[int] = 0
    clean_sheet: Optional[bool] = False
    saves: Optional[int] = 0
    yellow_cards: Optional[int] = 0
    red_cards: Optional[int] = 0
    own_goals: Optional[int] = 0
    penalties_missed: Optional[int] = 0
    penalties_saved: Optional[int] = 0
    minutes_played: Optional[int] = 0

    @property
    def played(self) -> bool:
        """Check if the player appeared in the match."""
        return (self.minutes_played or 0) > 0


@dataclass(frozen=True)
class CumulativeStats:
    """
    Season-to-date statistics used for pricing and season points.

    Attributes:
        appearances: Number of matches played.
        goals: Goals scored.
        assists: Assists provided.
        average_rating: Mean match rating; None means no rating.
        goals_conceded: Goals conceded while on the pitch.
        yellow_cards: Yellow cards received.
        red_cards: Red cards received.
    """

    appearances: Optional[int] = 0
    goals: Optional[int] = 0
    assists: Optional[int] = 0
    average_rating: Optional[float] = None
    goals_conceded: Optional[int] = 0
    yellow_cards: Optional[int] = 0
    red_cards: Optional[int] = 0

    @property
    def rating(self) -> float:
        """
        Average rating, falling back to the baseline when None.

        An explicit 0 is returned as-is; whether it also means "unrated" is
        decided by the pricing preset.
        """
        if self.average_rating is None:
            return BASELINE_RATING
        return self.average_rating
