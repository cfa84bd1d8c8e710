"""Short advisory tips derived from a monthly summary.

The tips themselves come from an external generator (normally a hosted
language model). This module only decides when to call it: results are
cached by summary content for a while, and any failure falls back to a
fixed set of tips so callers always get something to show.
"""

import hashlib
import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, UTC
from decimal import Decimal
from typing import Any, Callable, Optional, Union

from homefin.domain.entities import MonthlySummary
from homefin.domain.errors import UpstreamError

logger = logging.getLogger(__name__)

InsightGenerator = Callable[[dict[str, Any]], list[str]]

DEFAULT_TTL = timedelta(minutes=30)

FALLBACK_INSIGHTS: tuple[str, ...] = (
    "Keep your financial goals in focus.",
    "Review your fixed expenses this month.",
    "Consider building an emergency fund.",
)

QUOTA_MARKERS = ("429", "RESOURCE_EXHAUSTED")


def summary_payload(summary: Union[MonthlySummary, dict[str, Any]]) -> dict[str, Any]:
    """Return a JSON-friendly dict for a summary."""
    data = summary.to_dict() if isinstance(summary, MonthlySummary) else dict(summary)
    return {
        key: float(value) if isinstance(value, Decimal) else value
        for key, value in data.items()
    }


def cache_key(payload: dict[str, Any]) -> str:
    """Hash of the canonical JSON encoding of a payload."""
    encoded = json.dumps(payload, sort_keys=True, separators=(",", ":"), default=str)
    return hashlib.sha256(encoded.encode("utf-8")).hexdigest()


@dataclass
class _CacheEntry:
    insights: list[str]
    stored_at: datetime


class InsightCache:
    """In-memory cache of generated tips with a fixed time-to-live."""

    def __init__(
        self,
        ttl: timedelta = DEFAULT_TTL,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """Initialize the cache.

        Args:
            ttl: How long an entry stays valid
            clock: Returns the current time; injectable for tests
        """
        self.ttl = ttl
        self.clock = clock or (lambda: datetime.now(UTC))
        self._entries: dict[str, _CacheEntry] = {}

    def get(self, key: str) -> Optional[list[str]]:
        """Return cached tips for a key, or None if missing or expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() - entry.stored_at >= self.ttl:
            del self._entries[key]
            return None
        return list(entry.insights)

    def set(self, key: str, insights: list[str]) -> None:
        """Store tips under a key, dropping entries that have expired."""
        self.prune()
        self._entries[key] = _CacheEntry(insights=list(insights), stored_at=self.clock())

    def prune(self) -> None:
        """Remove every expired entry."""
        now = self.clock()
        expired = [
            key for key, entry in self._entries.items() if now - entry.stored_at >= self.ttl
        ]
        for key in expired:
            del self._entries[key]

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class InsightAdvisor:
    """Turns a monthly summary into a few short tips."""

    def __init__(
        self,
        generator: Optional[InsightGenerator] = None,
        cache: Optional[InsightCache] = None,
        use_cache: bool = True,
    ):
        """Initialize the advisor.

        Args:
            generator: Callable producing tips from a summary payload. When
                None, the advisor always answers with the fallback tips.
            cache: Cache to use; a fresh InsightCache when None
            use_cache: Set to False to call the generator every time
        """
        self.generator = generator
        self.cache = cache if cache is not None else InsightCache()
        self.use_cache = use_cache

    def advise(self, summary: Union[MonthlySummary, dict[str, Any]]) -> list[str]:
        """Return tips for a summary. Never raises."""
        if self.generator is None:
            return list(FALLBACK_INSIGHTS)

        payload = summary_payload(summary)
        key = cache_key(payload)

        if self.use_cache:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Insight cache hit for %s", key[:12])
                return cached

        try:
            insights = self._generate(payload)
        except UpstreamError as e:
            if e.quota_exhausted:
                logger.warning("Insight generator quota exceeded, using default insights")
            else:
                logger.error("Error getting insights: %s", e)
            return list(FALLBACK_INSIGHTS)

        if self.use_cache:
            self.cache.set(key, insights)
        return insights

    def _generate(self, payload: dict[str, Any]) -> list[str]:
        """Call the generator, normalizing every failure to UpstreamError."""
        try:
            result = self.generator(payload)
        except UpstreamError:
            raise
        except Exception as e:
            message = str(e)
            quota = any(marker in message for marker in QUOTA_MARKERS)
            raise UpstreamError(message, quota_exhausted=quota) from e

        if not isinstance(result, (list, tuple)):
            raise UpstreamError(f"Generator returned {type(result).__name__}, expected a list")
        insights = [str(item).strip() for item in result if str(item).strip()]
        if not insights:
            raise UpstreamError("Generator returned no insights")
        return insights
