"""Form tracker for analyzing player performance trends over recent gameweeks."""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..models.player import Player
from .rounding import round_half_up


# Relative change between halves that counts as a trend
TREND_THRESHOLD = 0.1


class FormTrend(Enum):
    """Trend direction for player form."""

    IMPROVING = "improving"
    STABLE = "stable"
    DECLINING = "declining"


@dataclass
class PlayerForm:
    """
    Form analysis for a single player.

    Attributes:
        player_id: The player's unique identifier.
        matches_played: Number of gameweeks included in analysis.
        form: Average points over the window, one decimal.
        trend: Form trend (improving, stable, declining).
        recent_points: Points per gameweek, most recent first.
    """

    player_id: str
    matches_played: int
    form: float
    trend: FormTrend
    recent_points: list[float]


def get_player_form(recent_points: Sequence[float]) -> float:
    """
    Average of recent fantasy points, rounded to one decimal.

    How many gameweeks make up the sequence is the caller's choice.

    Args:
        recent_points: Points per gameweek.

    Returns:
        Mean points, or 0 for an empty sequence.
    """
    if not recent_points:
        return 0
    return round_half_up(sum(recent_points) / len(recent_points), 0.1)


def calculate_form_trend(recent_points: Sequence[float]) -> FormTrend:
    """
    Determine form trend from recent gameweek points.

    Compares the most recent half of the sequence to the older half.
    Requires at least 2 gameweeks to determine a trend.

    Args:
        recent_points: Points per gameweek, most recent first.

    Returns:
        FormTrend indicating direction of performance.
    """
    if len(recent_points) < 2:
        return FormTrend.STABLE

    midpoint = len(recent_points) // 2
    recent_avg = sum(recent_points[:midpoint]) / midpoint
    older_avg = sum(recent_points[midpoint:]) / (len(recent_points) - midpoint)

    threshold = TREND_THRESHOLD * max(recent_avg, older_avg, 1.0)

    if recent_avg > older_avg + threshold:
        return FormTrend.IMPROVING
    elif recent_avg < older_avg - threshold:
        return FormTrend.DECLINING
    return FormTrend.STABLE


def analyze_form(
    player: Player,
    points_history: Sequence[float],
    recent_matches: int = 5,
) -> PlayerForm:
    """
    Calculate form metrics for a single player.

    Args:
        player: The player to analyze.
        points_history: Points per gameweek, most recent first.
        recent_matches: Number of recent gameweeks to consider.

    Returns:
        PlayerForm with calculated metrics.
    """
    recent_points = list(points_history[:recent_matches])

    return PlayerForm(
        player_id=player.id,
        matches_played=len(recent_points),
        form=get_player_form(recent_points),
        trend=calculate_form_trend(recent_points),
        recent_points=recent_points,
    )
