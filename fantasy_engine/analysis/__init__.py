"""Analysis modules for scoring, pricing, budget and formation rules."""

from .calculator import (
    MULTIPLIER_CAPTAIN,
    calculate_gameweek_points,
    calculate_player_points,
    calculate_team_points,
)
from .form import (
    FormTrend,
    PlayerForm,
    analyze_form,
    calculate_form_trend,
    get_player_form,
)
from .formations import (
    FORMATIONS,
    Formation,
    FormationCounts,
    get_formation,
    validate_team_formation,
)
from .pricing import (
    MAX_PRICE,
    MIN_PRICE,
    PriceWeights,
    PricingPreset,
    ValueChange,
    calculate_fantasy_price,
    calculate_season_points,
    get_player_value_change,
)
from .validator import (
    AddPlayerCheck,
    calculate_team_budget,
    calculate_transfer_cost,
    can_add_player,
    get_club_slots_remaining,
    get_squad_slots_remaining,
    validate_selection_roles,
)

__all__ = [
    # Calculator
    "MULTIPLIER_CAPTAIN",
    "calculate_gameweek_points",
    "calculate_player_points",
    "calculate_team_points",
    # Form
    "FormTrend",
    "PlayerForm",
    "analyze_form",
    "calculate_form_trend",
    "get_player_form",
    # Formations
    "FORMATIONS",
    "Formation",
    "FormationCounts",
    "get_formation",
    "validate_team_formation",
    # Pricing
    "MAX_PRICE",
    "MIN_PRICE",
    "PriceWeights",
    "PricingPreset",
    "ValueChange",
    "calculate_fantasy_price",
    "calculate_season_points",
    "get_player_value_change",
    # Validator
    "AddPlayerCheck",
    "calculate_team_budget",
    "calculate_transfer_cost",
    "can_add_player",
    "get_club_slots_remaining",
    "get_squad_slots_remaining",
    "validate_selection_roles",
]
