"""Fantasy points calculator for football match statistics."""

from typing import Iterable, Mapping

from ..models.match import PlayerMatchStats
from ..models.player import Position
from ..models.rules import DEFAULT_SCORING, ScoringRules
from ..models.team import FantasySelection


POINTS_APPEARANCE = 1
POINTS_SIXTY_MINUTES = 1
SIXTY_MINUTES = 60

MULTIPLIER_CAPTAIN = 2


def calculate_player_points(
    stats: PlayerMatchStats,
    position: Position,
    rules: ScoringRules = DEFAULT_SCORING,
) -> int:
    """
    Calculate fantasy points from a player's match statistics.

    Only the appearance points depend on minutes played; goals, assists and
    clean sheets are credited even when minutes_played is 0. Stats that are
    None count as zero.

    Args:
        stats: Player's match statistics.
        position: Player's position.
        rules: Scoring rule set to apply.

    Returns:
        Total points, never below 0. An int for integer rule values; a
        float only when rules carries fractional points.
    """
    points = 0
    minutes = stats.minutes_played or 0

    # Appearance
    if minutes > 0:
        points += POINTS_APPEARANCE
    if minutes >= SIXTY_MINUTES:
        points += POINTS_SIXTY_MINUTES

    # Attacking
    points += (stats.goals or 0) * rules.goal_points(position)
    points += (stats.assists or 0) * rules.assists

    # Defending
    if stats.clean_sheet:
        points += rules.clean_sheet_points(position)
    if position == Position.GOALKEEPER:
        points += (stats.saves or 0) // rules.saves_per_point

    # Discipline
    points += (stats.yellow_cards or 0) * rules.yellow_card
    points += (stats.red_cards or 0) * rules.red_card
    points += (stats.own_goals or 0) * rules.own_goal

    # Penalties
    points += (stats.penalties_missed or 0) * rules.penalty_miss
    points += (stats.penalties_saved or 0) * rules.penalty_save

    return max(0, points)


def calculate_team_points(
    entries: Iterable[tuple[PlayerMatchStats, Position]],
    rules: ScoringRules = DEFAULT_SCORING,
) -> int:
    """
    Sum fantasy points over a set of player performances.

    Args:
        entries: (stats, position) pairs.
        rules: Scoring rule set to apply.

    Returns:
        Total points (0 for no entries).
    """
    return sum(
        (calculate_player_points(stats, position, rules) for stats, position in entries),
        0,
    )


def calculate_gameweek_points(
    selections: Iterable[FantasySelection],
    points_by_player: Mapping[str, int],
) -> int:
    """
    Total a fantasy team's gameweek score.

    Bench selections do not score. The captain's points are doubled; if the
    captain has no entry in points_by_player (did not play), the
    vice-captain is doubled instead.

    Args:
        selections: The team's selections for the gameweek.
        points_by_player: Player ID to points scored this gameweek.

    Returns:
        Gameweek total.
    """
    starters = [s for s in selections if not s.is_on_bench]

    captain = next((s for s in starters if s.is_captain), None)
    if captain is None or captain.player_id not in points_by_player:
        captain = next(
            (
                s
                for s in starters
                if s.is_vice_captain and s.player_id in points_by_player
            ),
            None,
        )

    total = 0
    for selection in starters:
        points = points_by_player.get(selection.player_id, 0)
        if selection is captain:
            points *= MULTIPLIER_CAPTAIN
        total += points
    return total
