"""Pytest configuration for agent tests."""

import pytest


class FakeCrawler:
    """CrawlerProvider test double matching plain substrings."""

    def __init__(self, signatures=("googlebot", "bingbot")):
        self.signatures = tuple(signatures)
        self._match = ""

    def is_crawler(self, user_agent):
        subject = (user_agent or "").lower()
        for signature in self.signatures:
            if signature.lower() in subject:
                self._match = signature
                return True
        self._match = ""
        return False

    def get_matches(self):
        return self._match

    def match(self, user_agent):
        if self.is_crawler(user_agent) and self._match:
            return self._match
        return None


@pytest.fixture(autouse=True)
def clean_agent_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make sure settings from the developer's shell do not leak into tests."""
    for name in (
        "AGENT_INVALID_RULE_POLICY",
        "AGENT_MAX_USER_AGENT_LENGTH",
        "AGENT_DEFAULT_VERSION_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_crawler() -> FakeCrawler:
    return FakeCrawler()


@pytest.fixture
def crawl_everything() -> FakeCrawler:
    """A crawler double that flags every user agent."""
    return FakeCrawler(signatures=("",))
