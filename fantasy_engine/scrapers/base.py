"""Base scraper with caching and rate limiting."""

import hashlib
import json
import logging
import os
import time
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Mapping, Optional
from urllib.parse import urlencode

import requests


logger = logging.getLogger(__name__)

# Default cache directory, overridable through the environment
CACHE_DIR = Path.home() / ".cache" / "fantasy_engine"
CACHE_DIR_ENV_VAR = "FANTASY_ENGINE_CACHE_DIR"


def default_cache_dir() -> Path:
    """Cache directory from FANTASY_ENGINE_CACHE_DIR, else the user cache."""
    env_dir = os.environ.get(CACHE_DIR_ENV_VAR)
    return Path(env_dir) if env_dir else CACHE_DIR


class ScraperError(Exception):
    """Base exception for scraper errors."""

    pass


class RateLimitError(ScraperError):
    """Raised when rate limit is exceeded."""

    pass


class FetchError(ScraperError):
    """Raised when fetching data fails."""

    pass


class ParseError(ScraperError):
    """Raised when parsing data fails."""

    pass


class BaseScraper(ABC):
    """
    Base scraper with caching and rate limiting.

    Subclasses should implement the abstract methods to define
    how to fetch and parse data from specific sources.
    """

    def __init__(
        self,
        cache_dir: Optional[Path] = None,
        cache_ttl_hours: int = 1,
        rate_limit_seconds: float = 1.0,
        timeout_seconds: float = 30.0,
    ) -> None:
        """
        Initialize the scraper.

        Args:
            cache_dir: Directory for caching responses (default_cache_dir()
                when omitted).
            cache_ttl_hours: Cache time-to-live in hours.
            rate_limit_seconds: Minimum seconds between requests.
            timeout_seconds: Per-request timeout.
        """
        self.cache_dir = cache_dir or default_cache_dir()
        self.cache_ttl = timedelta(hours=cache_ttl_hours)
        self.rate_limit_seconds = rate_limit_seconds
        self.timeout_seconds = timeout_seconds
        self._last_request_time: Optional[float] = None

        self.cache_dir.mkdir(parents=True, exist_ok=True)

        # Session for connection reuse
        self._session = requests.Session()
        self._session.headers.update({"Accept": "application/json"})

    def close(self) -> None:
        """Release the underlying HTTP session."""
        self._session.close()

    def __enter__(self) -> "BaseScraper":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    @staticmethod
    def build_url(url: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Append query parameters (skipping None values) to a URL."""
        if not params:
            return url
        query = urlencode(sorted((k, v) for k, v in params.items() if v is not None))
        return f"{url}?{query}" if query else url

    def _cache_key(self, url: str) -> str:
        """Generate a cache key from URL."""
        return hashlib.md5(url.encode()).hexdigest()

    def _cache_path(self, url: str) -> Path:
        """Get the cache file path for a URL."""
        return self.cache_dir / f"{self._cache_key(url)}.json"

    def _read_cache(self, url: str) -> Optional[Any]:
        """
        Read cached data if valid.

        Args:
            url: The URL to look up in cache.

        Returns:
            Cached data if valid, None otherwise.
        """
        cache_path = self._cache_path(url)
        if not cache_path.exists():
            return None

        try:
            with open(cache_path, "r") as f:
                entry = json.load(f)

            timestamp = datetime.fromisoformat(entry["timestamp"])
            if datetime.now() - timestamp < self.cache_ttl:
                return entry["data"]
        except (json.JSONDecodeError, KeyError, ValueError):
            logger.warning("Discarding invalid cache entry %s", cache_path.name)
            cache_path.unlink(missing_ok=True)

        return None

    def _write_cache(self, url: str, data: Any) -> None:
        """
        Write data to cache.

        Args:
            url: The URL being cached.
            data: The data to cache.
        """
        cache_path = self._cache_path(url)
        entry = {
            "url": url,
            "timestamp": datetime.now().isoformat(),
            "data": data,
        }
        with open(cache_path, "w") as f:
            json.dump(entry, f)

    def _rate_limit(self) -> None:
        """Enforce rate limiting between requests."""
        if self._last_request_time is not None:
            elapsed = time.time() - self._last_request_time
            if elapsed < self.rate_limit_seconds:
                time.sleep(self.rate_limit_seconds - elapsed)
        self._last_request_time = time.time()

    def fetch_json(
        self,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        use_cache: bool = True,
    ) -> Any:
        """
        Fetch and decode a JSON document with caching and rate limiting.

        Args:
            url: The endpoint URL.
            params: Query parameters.
            use_cache: Whether to use cached data if available.

        Returns:
            The decoded JSON body.

        Raises:
            RateLimitError: If the server answers 429.
            FetchError: If the request fails.
            ParseError: If the body is not valid JSON.
        """
        full_url = self.build_url(url, params)

        if use_cache:
            cached = self._read_cache(full_url)
            if cached is not None:
                logger.debug("Cache hit for %s", full_url)
                return cached

        self._rate_limit()

        logger.debug("GET %s", full_url)
        try:
            response = self._session.get(full_url, timeout=self.timeout_seconds)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise FetchError(f"Request timed out: {full_url}")
        except requests.exceptions.HTTPError as e:
            if e.response.status_code == 429:
                raise RateLimitError(f"Rate limited: {full_url}")
            raise FetchError(f"HTTP error {e.response.status_code}: {full_url}")
        except requests.exceptions.RequestException as e:
            raise FetchError(f"Request failed: {full_url} - {e}")

        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON from {full_url}: {e}")

        if use_cache:
            self._write_cache(full_url, data)

        return data

    def clear_cache(self) -> int:
        """
        Clear all cached data.

        Returns:
            Number of cache entries cleared.
        """
        count = 0
        for cache_file in self.cache_dir.glob("*.json"):
            # Validate it's a cache entry before deletion
            try:
                with open(cache_file, "r") as f:
                    entry = json.load(f)
                if not all(k in entry for k in ("url", "timestamp", "data")):
                    continue
            except (json.JSONDecodeError, IOError):
                continue
            cache_file.unlink()
            count += 1
        logger.info("Cleared %d cache entries", count)
        return count

    @abstractmethod
    def scrape(self, *args: Any, **kwargs: Any) -> Any:
        """
        Scrape data from the source.

        Subclasses must implement this method.

        Returns:
            Scraped data in the appropriate format.
        """
        pass
