"""Fantasy price model and season points estimate."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models.match import BASELINE_RATING, CumulativeStats
from ..models.player import Position
from .rounding import round_half_up


MIN_PRICE = 4.0
MAX_PRICE = 15.0

# Season points (bulk seeding path)
SEASON_POINTS_GOAL = 4
SEASON_POINTS_ASSIST = 3
SEASON_POINTS_APPEARANCE = 2
SEASON_POINTS_YELLOW_CARD = -1
SEASON_POINTS_RED_CARD = -3
SEASON_POINTS_CLEAN_SHEET = 2
SEASON_MAX_APPEARANCES = 38


@dataclass(frozen=True)
class PriceWeights:
    """
    Weights for the linear price model.

    Attributes:
        base: Starting price before adjustments.
        appearance: Price per appearance.
        goal: Price per goal.
        assist: Price per assist.
        rating: Price per rating point above (or below) the baseline.
        step: Rounding granularity of the final price.
        max_appearances: Appearances beyond this count are ignored (None = no cap).
        zero_rating_is_missing: Treat a rating of exactly 0 as unrated.
    """

    base: float
    appearance: float
    goal: float
    assist: float
    rating: float
    step: float
    max_appearances: Optional[int] = None
    zero_rating_is_missing: bool = False


class PricingPreset(Enum):
    """
    Named weightings for price calculation.

    RUNTIME is used when recomputing prices from new match data and keeps an
    explicit 0 rating. SEED is used for bulk seeding, rounds to half units and
    reads a 0 rating as the baseline.
    """

    RUNTIME = PriceWeights(base=4.0, appearance=0.05, goal=0.3, assist=0.2, rating=2.0, step=0.1)
    SEED = PriceWeights(
        base=4.0,
        appearance=0.05,
        goal=0.5,
        assist=0.3,
        rating=1.0,
        step=0.5,
        max_appearances=SEASON_MAX_APPEARANCES,
        zero_rating_is_missing=True,
    )


@dataclass(frozen=True)
class ValueChange:
    """
    Price movement of a player.

    Attributes:
        change: current - original (negative for a drop).
        percentage: change as a percentage of the original, one decimal.
    """

    change: float
    percentage: float


def calculate_fantasy_price(
    stats: CumulativeStats,
    preset: PricingPreset = PricingPreset.RUNTIME,
) -> float:
    """
    Calculate a fantasy price from season statistics.

    Args:
        stats: Cumulative season statistics. Missing counts count as 0 and a
            missing rating as the 6.0 baseline. A 0 rating is the baseline
            only for presets with zero_rating_is_missing.
        preset: Weighting and rounding to use.

    Returns:
        Price clamped to [MIN_PRICE, MAX_PRICE] and rounded to the preset's step.
    """
    weights = preset.value

    appearances = stats.appearances or 0
    if weights.max_appearances is not None:
        appearances = min(appearances, weights.max_appearances)

    rating = stats.rating
    if weights.zero_rating_is_missing and not rating:
        rating = BASELINE_RATING

    price = weights.base
    price += appearances * weights.appearance
    price += (stats.goals or 0) * weights.goal
    price += (stats.assists or 0) * weights.assist
    price += (rating - BASELINE_RATING) * weights.rating

    price = min(max(price, MIN_PRICE), MAX_PRICE)
    return round_half_up(price, weights.step)


def get_player_value_change(current_price: float, original_price: float) -> ValueChange:
    """
    Compare a player's current price with their original price.

    Args:
        current_price: Price now.
        original_price: Price at the start of the season. Must be positive.

    Returns:
        ValueChange with absolute and percentage change.

    Raises:
        ZeroDivisionError: If original_price is 0.
    """
    change = current_price - original_price
    percentage = round_half_up(change / original_price * 100, 0.1)
    return ValueChange(change=change, percentage=percentage)


def calculate_season_points(stats: CumulativeStats, position: Position) -> float:
    """
    Estimate total fantasy points from season totals.

    Used when seeding players that have no per-match history. Goalkeepers
    and defenders earn a clean sheet bonus for each appearance beyond the
    number of goals conceded.

    Args:
        stats: Cumulative season statistics.
        position: Player's position.

    Returns:
        Estimated season points, never below 0.
    """
    appearances = stats.appearances or 0

    points = 0
    points += (stats.goals or 0) * SEASON_POINTS_GOAL
    points += (stats.assists or 0) * SEASON_POINTS_ASSIST
    points += min(appearances, SEASON_MAX_APPEARANCES) * SEASON_POINTS_APPEARANCE
    points += (stats.yellow_cards or 0) * SEASON_POINTS_YELLOW_CARD
    points += (stats.red_cards or 0) * SEASON_POINTS_RED_CARD

    if position in (Position.GOALKEEPER, Position.DEFENDER):
        clean_sheets = max(0, appearances - (stats.goals_conceded or 0))
        points += clean_sheets * SEASON_POINTS_CLEAN_SHEET

    return max(points, 0)
