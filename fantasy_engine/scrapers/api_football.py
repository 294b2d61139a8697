"""API-Football client for Premier League player statistics."""

import logging
import os
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from ..analysis.pricing import PricingPreset, calculate_fantasy_price, calculate_season_points
from ..models import Availability, CumulativeStats, Player, Position
from .base import BaseScraper, FetchError, ParseError, ScraperError


logger = logging.getLogger(__name__)

API_FOOTBALL_BASE = "https://v3.football.api-sports.io"
API_FOOTBALL_HOST = "v3.football.api-sports.io"
API_KEY_ENV_VAR = "API_FOOTBALL_KEY"

PREMIER_LEAGUE_ID = 39
DEFAULT_SEASON = 2023

# Retries after the first attempt
MAX_RETRIES = 2
# Base delays; attempt n waits delay * n
RETRY_DELAY_EMPTY_SECONDS = 3.0
RETRY_DELAY_ERROR_SECONDS = 5.0


def map_provider_position(position: Optional[str]) -> Position:
    """
    Map an API-Football position label to a Position.

    Args:
        position: Label such as "Goalkeeper" or "Attacker".

    Returns:
        The matching Position; unknown or missing labels map to MIDFIELDER.
    """
    label = (position or "").lower()
    if "goalkeeper" in label:
        return Position.GOALKEEPER
    if "defender" in label:
        return Position.DEFENDER
    if "midfielder" in label:
        return Position.MIDFIELDER
    if "attacker" in label or "forward" in label:
        return Position.FORWARD
    return Position.MIDFIELDER


def _parse_rating(value: Any) -> Optional[float]:
    """Parse the provider's string rating ("7.2"), None when absent or invalid."""
    if value in (None, ""):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class ProviderPlayer:
    """
    A player as reported by the statistics provider.

    Attributes:
        id: Provider player ID.
        name: Player's name.
        club_id: Provider team ID.
        position: Mapped playing position.
        injured: Whether the provider flags the player as injured.
        stats: Season statistics.
        photo_url: Player photo, if any.
    """

    id: str
    name: str
    club_id: str
    position: Position
    injured: bool
    stats: CumulativeStats
    photo_url: Optional[str] = None

    def to_player(self, preset: PricingPreset = PricingPreset.SEED) -> Player:
        """
        Build a priced fantasy Player from provider data.

        Args:
            preset: Pricing preset (seeding uses SEED).

        Returns:
            Player with price and estimated season points.
        """
        return Player(
            id=self.id,
            name=self.name,
            position=self.position,
            club_id=self.club_id,
            price=calculate_fantasy_price(self.stats, preset),
            total_points=int(calculate_season_points(self.stats, self.position)),
            availability=Availability.INJURED if self.injured else Availability.AVAILABLE,
        )


def parse_player_entry(entry: dict[str, Any]) -> ProviderPlayer:
    """
    Parse one element of the /players response.

    Only the first statistics block (the requested league) is used.

    Args:
        entry: {"player": {...}, "statistics": [...]} object.

    Returns:
        ProviderPlayer.

    Raises:
        ParseError: If the player or statistics block is missing.
    """
    try:
        player = entry["player"]
        statistics = entry["statistics"]
        if not statistics:
            raise ParseError(f"No statistics for player {player.get('id')}")
        main = statistics[0]

        games = main.get("games") or {}
        goals = main.get("goals") or {}
        cards = main.get("cards") or {}

        stats = CumulativeStats(
            # The provider spells it "appearences"
            appearances=games.get("appearences", games.get("appearances")) or 0,
            goals=goals.get("total") or 0,
            assists=goals.get("assists") or 0,
            average_rating=_parse_rating(games.get("rating")),
            goals_conceded=goals.get("conceded") or 0,
            yellow_cards=cards.get("yellow") or 0,
            red_cards=cards.get("red") or 0,
        )

        return ProviderPlayer(
            id=str(player["id"]),
            name=player.get("name") or "",
            club_id=str(main["team"]["id"]),
            position=map_provider_position(games.get("position")),
            injured=bool(player.get("injured")),
            stats=stats,
            photo_url=player.get("photo"),
        )
    except (KeyError, TypeError, AttributeError) as e:
        raise ParseError(f"Malformed player entry: {e}") from e


class ApiFootballScraper(BaseScraper):
    """
    Client for the API-Football /players endpoint.

    Requests are rate limited and cached. Empty results and transport
    errors are retried up to MAX_RETRIES times with growing delays.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: str = API_FOOTBALL_BASE,
        cache_dir: Optional[Path] = None,
        cache_ttl_hours: int = 24,
        rate_limit_seconds: float = 1.0,
    ) -> None:
        """
        Initialize the API-Football client.

        Args:
            api_key: API key; defaults to the API_FOOTBALL_KEY environment variable.
            base_url: API base URL.
            cache_dir: Directory for caching responses.
            cache_ttl_hours: Cache time-to-live in hours.
            rate_limit_seconds: Minimum seconds between requests.

        Raises:
            ValueError: If no API key is available.
        """
        super().__init__(
            cache_dir=cache_dir,
            cache_ttl_hours=cache_ttl_hours,
            rate_limit_seconds=rate_limit_seconds,
        )
        api_key = api_key or os.environ.get(API_KEY_ENV_VAR)
        if not api_key:
            raise ValueError(f"API key required: pass api_key or set {API_KEY_ENV_VAR}")

        self.base_url = base_url
        self._session.headers.update(
            {
                "X-RapidAPI-Key": api_key,
                "X-RapidAPI-Host": API_FOOTBALL_HOST,
            }
        )

    @staticmethod
    def _unwrap(data: Any, endpoint: str) -> list[Any]:
        """Validate a response body and return its "response" list."""
        if not isinstance(data, dict):
            raise ParseError(f"Unexpected response body from {endpoint}")

        errors = data.get("errors")
        if errors:
            raise FetchError(f"API returned errors: {errors}")

        return data.get("response") or []

    def _get_response(self, endpoint: str, params: dict[str, Any]) -> list[Any]:
        """
        Fetch an endpoint and unwrap its "response" list.

        Only bodies with a non-empty response and no errors are cached, so an
        empty or failed answer is always fetched again.
        """
        url = f"{self.base_url}{endpoint}"
        cache_url = self.build_url(url, params)

        cached = self._read_cache(cache_url)
        if isinstance(cached, dict) and cached.get("response") and not cached.get("errors"):
            logger.debug("Cache hit for %s", cache_url)
            return cached["response"]

        data = self.fetch_json(url, params=params, use_cache=False)
        response = self._unwrap(data, endpoint)
        if response:
            self._write_cache(cache_url, data)
        return response

    def fetch_team_players(
        self,
        team_id: int,
        season: int = DEFAULT_SEASON,
        league: int = PREMIER_LEAGUE_ID,
        page: int = 1,
    ) -> list[dict[str, Any]]:
        """
        Fetch raw player entries for one team.

        Args:
            team_id: Provider team ID.
            season: Season start year.
            league: Provider league ID.
            page: Result page.

        Returns:
            Raw player entries; empty if the provider still has none after
            all retries.

        Raises:
            ScraperError: If every attempt failed with an error.
        """
        params = {"team": team_id, "season": season, "league": league, "page": page}

        for attempt in range(MAX_RETRIES + 1):
            try:
                players = self._get_response("/players", params)
            except ScraperError as e:
                if attempt == MAX_RETRIES:
                    raise
                delay = RETRY_DELAY_ERROR_SECONDS * (attempt + 1)
                logger.warning(
                    "Error fetching players for team %s (%s), retrying in %.0fs", team_id, e, delay
                )
                time.sleep(delay)
                continue

            if players or attempt == MAX_RETRIES:
                logger.info("Found %d players for team %s", len(players), team_id)
                return players

            delay = RETRY_DELAY_EMPTY_SECONDS * (attempt + 1)
            logger.warning("No players found for team %s, retrying in %.0fs", team_id, delay)
            time.sleep(delay)

        return []

    def scrape(
        self,
        team_ids: Iterable[int],
        season: int = DEFAULT_SEASON,
        league: int = PREMIER_LEAGUE_ID,
    ) -> list[ProviderPlayer]:
        """
        Fetch and parse players for several teams.

        Entries without statistics or with malformed data are skipped.
        A team whose fetch fails is logged and skipped.

        Args:
            team_ids: Provider team IDs.
            season: Season start year.
            league: Provider league ID.

        Returns:
            Parsed players across all teams.
        """
        players: list[ProviderPlayer] = []
        for team_id in team_ids:
            try:
                entries = self.fetch_team_players(team_id, season=season, league=league)
            except ScraperError as e:
                logger.error("Giving up on team %s: %s", team_id, e)
                continue

            for entry in entries:
                try:
                    players.append(parse_player_entry(entry))
                except ParseError as e:
                    logger.debug("Skipping player entry: %s", e)
        return players
