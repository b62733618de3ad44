"""User-agent classification facade.

`Agent` answers questions about one request: which browser, platform and
device sent it, whether it is a desktop, phone, tablet or robot, which
versions it reports and which languages it prefers. Lookups that find
nothing return None.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Callable, List, Optional

from pydantic import BaseModel

from .config import AgentConfig, load_agent_config
from .detection.crawler import CrawlerProvider, get_crawler_provider
from .detection.languages import parse_languages
from .detection.matcher import find_first_match, matches_rule
from .detection.mobile_detect import CLOUDFRONT_USER_AGENT, BaseRuleProvider, MobileDetect
from .detection.rules import DetectionRules, RuleTable, build_detection_rules, default_detection_rules
from .detection.versions import VersionType, extract_version
from .exceptions import InvalidInvocationError

CLOUDFRONT_DESKTOP_HEADER = "HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER"
CLOUDFRONT_MOBILE_HEADER = "HTTP_CLOUDFRONT_IS_MOBILE_VIEWER"
CLOUDFRONT_TABLET_HEADER = "HTTP_CLOUDFRONT_IS_TABLET_VIEWER"
ACCEPT_LANGUAGE_HEADER = "HTTP_ACCEPT_LANGUAGE"


class AgentSummary(BaseModel):
    """Everything the classifier knows about a request."""

    user_agent: Optional[str] = None
    browser: Optional[str] = None
    browser_version: Optional[str] = None
    platform: Optional[str] = None
    platform_version: Optional[str] = None
    device: Optional[str] = None
    device_type: str = "other"
    robot: Optional[str] = None
    languages: List[str] = []


class Agent:
    """Classify a user agent against the merged detection rules."""

    def __init__(
        self,
        user_agent: str | None = None,
        headers: Mapping[str, str] | None = None,
        *,
        provider: BaseRuleProvider | None = None,
        crawler: CrawlerProvider | None = None,
        rules: DetectionRules | None = None,
        config: AgentConfig | None = None,
    ) -> None:
        self._config = config if config is not None else load_agent_config()

        if provider is None:
            provider = MobileDetect(
                headers=headers,
                user_agent=user_agent,
                max_length=self._config.max_user_agent_length,
            )
            if rules is None:
                rules = default_detection_rules()
        else:
            if user_agent is not None or headers is not None:
                raise ValueError("Pass user_agent and headers to the provider, not to Agent")
            if rules is None:
                rules = build_detection_rules(provider)

        self._provider = provider
        self._rules = rules
        self._crawler = crawler

    @property
    def user_agent(self) -> str | None:
        return self._provider.user_agent

    @property
    def http_headers(self) -> Mapping[str, str]:
        return self._provider.http_headers

    @property
    def rules(self) -> DetectionRules:
        return self._rules

    @property
    def crawler(self) -> CrawlerProvider:
        if self._crawler is None:
            self._crawler = get_crawler_provider()
        return self._crawler

    def _subject(self, user_agent: str | None) -> str | None:
        return user_agent if user_agent is not None else self.user_agent

    def _match(self, rules: RuleTable, user_agent: str | None = None) -> str | None:
        return find_first_match(
            rules,
            self._subject(user_agent),
            self._config.invalid_rule_policy,
        )

    def _is_cloudfront(self) -> bool:
        return self.user_agent == CLOUDFRONT_USER_AGENT

    def browser(self, user_agent: str | None = None) -> str | None:
        return self._match(self._rules.browsers, user_agent)

    def platform(self, user_agent: str | None = None) -> str | None:
        return self._match(self._rules.platforms, user_agent)

    def device(self, user_agent: str | None = None) -> str | None:
        return self._match(self._rules.devices, user_agent)

    def is_mobile(self) -> bool:
        """Phones and tablets, judged by mobile-only rules.

        Desktop devices and the desktop OS and browser extensions are left out
        so that e.g. plain Chrome on Windows never counts as mobile.
        """
        if self._is_cloudfront() and self.http_headers.get(CLOUDFRONT_MOBILE_HEADER) == "true":
            return True
        if self._provider.has_mobile_headers():
            return True
        return self._match(self._rules.mobile) is not None

    def is_tablet(self) -> bool:
        if self._is_cloudfront() and self.http_headers.get(CLOUDFRONT_TABLET_HEADER) == "true":
            return True
        return self._match(self._rules.tablets) is not None

    def is_desktop(self) -> bool:
        # CloudFront replaces the user agent; trust its own verdict when given.
        if self._is_cloudfront():
            viewer = self.http_headers.get(CLOUDFRONT_DESKTOP_HEADER)
            if viewer is not None:
                return viewer == "true"

        return not self.is_mobile() and not self.is_tablet() and not self.is_robot()

    def is_phone(self) -> bool:
        return self.is_mobile() and not self.is_tablet()

    def is_robot(self, user_agent: str | None = None) -> bool:
        return self.crawler.is_crawler(self._subject(user_agent))

    def robot(self, user_agent: str | None = None) -> str | None:
        """Name of the matched crawler signature with its first letter upper-cased."""
        name = self.crawler.match(self._subject(user_agent))
        if not name:
            return None
        return name[:1].upper() + name[1:]

    def device_type(self) -> str:
        if self.is_desktop():
            return "desktop"
        if self.is_phone():
            return "phone"
        if self.is_tablet():
            return "tablet"
        if self.is_robot():
            return "robot"
        return "other"

    def version(
        self,
        property_name: str,
        kind: VersionType | str | None = None,
    ) -> str | float | None:
        """Version reported for a property such as "Chrome" or "AndroidOS".

        `kind` selects the raw text or the normalized float form and defaults
        to the configured version type.
        """
        if kind is None:
            kind = self._config.default_version_type
        return extract_version(
            property_name,
            self._rules.properties,
            self.user_agent,
            kind,
            self._config.invalid_rule_policy,
        )

    def languages(self, accept_language: str | None = None) -> list[str]:
        if accept_language is None:
            accept_language = self.http_headers.get(ACCEPT_LANGUAGE_HEADER)
        return parse_languages(accept_language)

    def is_(self, key: str) -> bool:
        """Check whether the user agent matches the rule named `key`.

        Keys are looked up case-insensitively in the extended rule table. The
        device categories (mobile, tablet, desktop, phone, robot) use their
        dedicated checks. Unknown keys are simply false.
        """
        categories: dict[str, Callable[[], bool]] = {
            "mobile": self.is_mobile,
            "tablet": self.is_tablet,
            "desktop": self.is_desktop,
            "phone": self.is_phone,
            "robot": self.is_robot,
        }
        category = categories.get(key.lower())
        if category is not None:
            return category()

        fragments = self._rules.extended.get_case_insensitive(key)
        if fragments is None:
            return False
        return matches_rule(fragments, self.user_agent, key, self._config.invalid_rule_policy)

    def dispatch(self, name: str) -> Callable[[], bool]:
        """Resolve a predicate name like "isChrome" to a zero-argument check."""
        if not name.startswith("is"):
            raise InvalidInvocationError(name)
        key = name[2:]
        return lambda: self.is_(key)

    def __getattr__(self, name: str) -> Callable[[], bool]:
        # Only reached for attributes that do not exist, e.g. agent.isChrome().
        return self.dispatch(name)

    def summary(self) -> AgentSummary:
        browser = self.browser()
        platform = self.platform()
        return AgentSummary(
            user_agent=self.user_agent,
            browser=browser,
            browser_version=self.version(browser, VersionType.TEXT) if browser else None,
            platform=platform,
            platform_version=self.version(platform, VersionType.TEXT) if platform else None,
            device=self.device(),
            device_type=self.device_type(),
            robot=self.robot(),
            languages=self.languages(),
        )
