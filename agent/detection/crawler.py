"""Crawler detection backed by the crawlerdetect signature database."""

from __future__ import annotations

from threading import Lock
from typing import Protocol

from crawlerdetect import CrawlerDetect


class CrawlerProvider(Protocol):
    def is_crawler(self, user_agent: str | None) -> bool: ...

    def get_matches(self) -> str: ...

    def match(self, user_agent: str | None) -> str | None: ...


class CrawlerDetectProvider:
    """Adapter exposing CrawlerDetect through the CrawlerProvider interface.

    CrawlerDetect remembers the last match on the instance, so a shared
    detector serializes each check together with the match it records.
    """

    def __init__(self, detector: CrawlerDetect | None = None) -> None:
        self._detector = detector if detector is not None else CrawlerDetect()
        self._lock = Lock()
        self._last_match = ""

    def _check(self, user_agent: str | None) -> tuple[bool, str]:
        if not user_agent:
            return False, ""
        with self._lock:
            result = bool(self._detector.isCrawler(user_agent))
            self._last_match = (self._detector.getMatches() or "") if result else ""
            return result, self._last_match

    def is_crawler(self, user_agent: str | None) -> bool:
        return self._check(user_agent)[0]

    def get_matches(self) -> str:
        return self._last_match

    def match(self, user_agent: str | None) -> str | None:
        """Check `user_agent` and return the matched name in one locked step.

        `get_matches` after `is_crawler` may see a name recorded by another
        thread in between; this does not.
        """
        result, name = self._check(user_agent)
        return name if result and name else None


_crawler_provider: CrawlerDetectProvider | None = None
_crawler_provider_lock = Lock()


def get_crawler_provider() -> CrawlerDetectProvider:
    """Process-wide detector; compiling the signature regex is expensive."""
    global _crawler_provider
    if _crawler_provider is None:
        with _crawler_provider_lock:
            if _crawler_provider is None:
                _crawler_provider = CrawlerDetectProvider()
    return _crawler_provider
