"""Fetch provider statistics and write priced fantasy players as JSON.

Usage:
    python -m fantasy_engine.seed <output.json> <team_id> [team_id ...]

The API key is read from the API_FOOTBALL_KEY environment variable.
"""

import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from .analysis.pricing import PricingPreset
from .logging_config import setup_logging
from .models import Player
from .scrapers import ApiFootballScraper
from .scrapers.api_football import DEFAULT_SEASON, PREMIER_LEAGUE_ID


logger = logging.getLogger(__name__)


def player_to_dict(player: Player) -> dict:
    """Convert a Player to a JSON-serialisable record."""
    return {
        "id": player.id,
        "name": player.name,
        "position": player.position.value,
        "teamId": player.club_id,
        "price": player.price,
        "totalPoints": player.total_points,
        "form": player.form,
        "availability": player.availability.value,
    }


def seed_players(
    scraper: ApiFootballScraper,
    team_ids: Iterable[int],
    season: int = DEFAULT_SEASON,
    league: int = PREMIER_LEAGUE_ID,
    preset: PricingPreset = PricingPreset.SEED,
) -> list[Player]:
    """
    Fetch players for the given teams and price them.

    Args:
        scraper: Configured provider client.
        team_ids: Provider team IDs.
        season: Season start year.
        league: Provider league ID.
        preset: Pricing preset to apply.

    Returns:
        Priced players.
    """
    provider_players = scraper.scrape(team_ids, season=season, league=league)
    players = [p.to_player(preset) for p in provider_players]
    logger.info("Priced %d players", len(players))
    return players


def main(argv: Optional[list[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) < 2:
        print(__doc__, file=sys.stderr)
        return 2

    setup_logging()

    output_path = Path(argv[0])
    try:
        team_ids = [int(t) for t in argv[1:]]
    except ValueError:
        logger.error("Team IDs must be integers: %s", " ".join(argv[1:]))
        return 2

    try:
        scraper = ApiFootballScraper()
    except ValueError as e:
        logger.error("%s", e)
        return 2

    with scraper:
        players = seed_players(scraper, team_ids)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump([player_to_dict(p) for p in players], f, indent=2)

    logger.info("Wrote %d players to %s", len(players), output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
