"""Budget, transfer and squad validation for fantasy team building."""

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..models.player import Player
from ..models.team import (
    INITIAL_BUDGET,
    MAX_PLAYERS_PER_TEAM,
    MAX_SQUAD_SIZE,
    POINTS_PER_EXTRA_TRANSFER,
    FantasySelection,
    TeamBudget,
    ValidationResult,
)


@dataclass(frozen=True)
class AddPlayerCheck:
    """
    Outcome of checking whether a player can join a squad.

    Attributes:
        can_add: Whether the player may be added.
        reason: Why not, when can_add is False.
    """

    can_add: bool
    reason: Optional[str] = None


def calculate_team_budget(players: Iterable[Player]) -> TeamBudget:
    """
    Derive the budget position of a roster.

    Args:
        players: Players currently in the squad.

    Returns:
        TeamBudget. Remaining is not clamped and may be negative.
    """
    spent = sum((p.price for p in players), 0)
    return TeamBudget(
        total_budget=INITIAL_BUDGET,
        spent=spent,
        remaining=INITIAL_BUDGET - spent,
    )


def can_add_player(
    player: Player,
    current_players: Sequence[Player],
    budget: TeamBudget,
) -> AddPlayerCheck:
    """
    Check if a player can be added to the squad.

    Checks run in order and stop at the first failure: budget, duplicate,
    players per club, squad size.

    Args:
        player: The player to potentially add.
        current_players: Players already in the squad.
        budget: The squad's current budget.

    Returns:
        AddPlayerCheck with the first failing reason, if any.
    """
    if player.price > budget.remaining:
        return AddPlayerCheck(
            can_add=False,
            reason=f"Insufficient budget. Need £{player.price:g}m, have £{budget.remaining:g}m",
        )

    if any(p.id == player.id for p in current_players):
        return AddPlayerCheck(can_add=False, reason="Player already in your team")

    club_count = sum(1 for p in current_players if p.club_id == player.club_id)
    if club_count >= MAX_PLAYERS_PER_TEAM:
        return AddPlayerCheck(
            can_add=False,
            reason=f"Maximum {MAX_PLAYERS_PER_TEAM} players per team allowed",
        )

    if len(current_players) >= MAX_SQUAD_SIZE:
        return AddPlayerCheck(
            can_add=False,
            reason=f"Team is full ({MAX_SQUAD_SIZE} players maximum)",
        )

    return AddPlayerCheck(can_add=True)


def calculate_transfer_cost(
    players_out: Sequence[Player],
    players_in: Sequence[Player],
    free_transfers: int = 1,
) -> int:
    """
    Points deducted for a set of transfers.

    Uneven in/out lists count as the larger side.

    Args:
        players_out: Players leaving the squad.
        players_in: Players joining the squad.
        free_transfers: Transfers available without penalty.

    Returns:
        Points to deduct (never negative).
    """
    transfer_count = max(len(players_out), len(players_in))
    extra_transfers = max(0, transfer_count - free_transfers)
    return extra_transfers * POINTS_PER_EXTRA_TRANSFER


def get_squad_slots_remaining(players: Sequence[Player]) -> int:
    """
    Get the number of squad slots remaining.

    Args:
        players: Players currently in the squad.

    Returns:
        Number of players that can still be added.
    """
    return max(0, MAX_SQUAD_SIZE - len(players))


def get_club_slots_remaining(players: Iterable[Player], club_id: str) -> int:
    """
    Get the number of additional players allowed from a club.

    Args:
        players: Players currently in the squad.
        club_id: The club to check.

    Returns:
        Number of additional players that can be added from this club.
    """
    club_counts = Counter(p.club_id for p in players)
    return max(0, MAX_PLAYERS_PER_TEAM - club_counts.get(club_id, 0))


def validate_selection_roles(selections: Sequence[FantasySelection]) -> ValidationResult:
    """
    Validate captain and vice-captain assignments.

    Reports every problem found rather than stopping at the first.

    Args:
        selections: The team's selections.

    Returns:
        ValidationResult listing all role errors.
    """
    errors: list[str] = []

    captains = [s for s in selections if s.is_captain]
    vice_captains = [s for s in selections if s.is_vice_captain]

    if len(captains) > 1:
        errors.append(f"Only one captain allowed, have {len(captains)}")
    if len(vice_captains) > 1:
        errors.append(f"Only one vice-captain allowed, have {len(vice_captains)}")

    for selection in selections:
        if selection.is_captain and selection.is_vice_captain:
            errors.append(
                f"Player {selection.player.name} cannot be both captain and vice-captain"
            )

    return ValidationResult(valid=len(errors) == 0, errors=errors)
