"""
intentpass.breach

Have I Been Pwned range lookup (k-anonymity): only the first five hex
characters of the password's SHA-1 leave the machine. Results are kept in
an explicit TTL cache keyed by the hash, never by the password itself.

Failures never propagate: a transport or parse error produces a result
with ``is_breached=False`` and ``error`` set, which callers treat as
"unknown, assume not breached".
"""

import hashlib
import logging
import math
import time
from typing import Callable, Dict, List, Optional, Tuple

import requests
from pydantic import Field

from .models import FrozenModel

logger = logging.getLogger(__name__)

HIBP_API_BASE = "https://api.pwnedpasswords.com/range/"
DEFAULT_TTL_SECONDS = 60 * 60
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_USER_AGENT = "IntentPass-PasswordAnalyzer"


class BreachCheckResult(FrozenModel):
    is_breached: bool = False
    breach_count: int = Field(default=0, ge=0)
    breach_names: List[str] = Field(default_factory=list)
    last_check_time: float
    error: Optional[str] = None


class BreachCache:
    """In-memory result cache with a fixed time-to-live and an injectable clock."""

    def __init__(self, ttl_seconds: float = DEFAULT_TTL_SECONDS, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: Dict[str, Tuple[BreachCheckResult, float]] = {}

    def get(self, key: str) -> Optional[BreachCheckResult]:
        entry = self._entries.get(key)
        if entry is None:
            return None
        result, stored_at = entry
        if self._clock() - stored_at >= self.ttl_seconds:
            del self._entries[key]
            return None
        return result

    def set(self, key: str, result: BreachCheckResult) -> None:
        now = self._clock()
        self.purge(now)
        self._entries[key] = (result, now)

    def purge(self, now: Optional[float] = None) -> None:
        """Drop every expired entry."""
        if now is None:
            now = self._clock()
        expired = [k for k, (_, stored_at) in self._entries.items() if now - stored_at >= self.ttl_seconds]
        for k in expired:
            del self._entries[k]

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def sha1_hex(password: str) -> str:
    return hashlib.sha1(password.encode("utf-8")).hexdigest().upper()


def parse_range_response(body: str, suffix: str) -> int:
    """
    Find ``suffix`` in a range response (``SUFFIX:COUNT`` per line).
    Returns 0 when absent; raises ValueError on a malformed matching line.
    """
    for line in body.splitlines():
        line = line.strip()
        if not line:
            continue
        hash_suffix, _, count = line.partition(":")
        if hash_suffix.upper() == suffix:
            return int(count)
    return 0


class BreachChecker:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        cache: Optional[BreachCache] = None,
        api_url: str = HIBP_API_BASE,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        user_agent: str = DEFAULT_USER_AGENT,
        clock: Callable[[], float] = time.time,
    ):
        self.session = session or requests.Session()
        self.cache = cache if cache is not None else BreachCache(clock=clock)
        self.api_url = api_url if api_url.endswith("/") else api_url + "/"
        self.timeout = timeout
        self.user_agent = user_agent
        self._clock = clock

    def check(self, password: str) -> BreachCheckResult:
        digest = sha1_hex(password)
        cached = self.cache.get(digest)
        if cached is not None:
            return cached

        prefix, suffix = digest[:5], digest[5:]
        try:
            resp = self.session.get(
                f"{self.api_url}{prefix}",
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
            if resp.status_code != 200:
                raise requests.HTTPError(f"HIBP API error: {resp.status_code}")
            count = parse_range_response(resp.text, suffix)
        except (requests.RequestException, ValueError) as e:
            logger.warning("breach check failed: %s", e)
            return BreachCheckResult(last_check_time=self._clock(), error=str(e) or type(e).__name__)

        result = BreachCheckResult(
            is_breached=count > 0,
            breach_count=count,
            breach_names=["Found in data breaches"] if count > 0 else [],
            last_check_time=self._clock(),
        )
        self.cache.set(digest, result)
        return result


def breach_penalty(result: Optional[BreachCheckResult]) -> float:
    """Score penalty for a breached password, at most 40 points. Unknown counts as not breached."""
    if result is None or not result.is_breached:
        return 0.0
    return min(40.0, 10 + math.log(result.breach_count + 1) * 5)
