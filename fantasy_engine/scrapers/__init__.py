"""Clients for external football statistics providers."""

from .base import (
    BaseScraper,
    FetchError,
    ParseError,
    RateLimitError,
    ScraperError,
    CACHE_DIR,
    CACHE_DIR_ENV_VAR,
    default_cache_dir,
)
from .api_football import (
    ApiFootballScraper,
    ProviderPlayer,
    map_provider_position,
    parse_player_entry,
    API_FOOTBALL_BASE,
    API_KEY_ENV_VAR,
    MAX_RETRIES,
)

__all__ = [
    # Base
    "BaseScraper",
    "FetchError",
    "ParseError",
    "RateLimitError",
    "ScraperError",
    "CACHE_DIR",
    "CACHE_DIR_ENV_VAR",
    "default_cache_dir",
    # API-Football
    "ApiFootballScraper",
    "ProviderPlayer",
    "map_provider_position",
    "parse_player_entry",
    "API_FOOTBALL_BASE",
    "API_KEY_ENV_VAR",
    "MAX_RETRIES",
]
