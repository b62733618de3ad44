"""Unit tests for device type decisions."""

import pytest

from agent.agent import Agent
from agent.config import AgentConfig
from agent.detection.crawler import CrawlerDetectProvider

DESKTOPS = [
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/42.0.2311.135 Safari/537.36 Edge/12.10136",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_10_2) AppleWebKit/600.4.10 (KHTML, like Gecko) Version/8.0.4 Safari/600.4.10",
    "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:35.0) Gecko/20100101 Firefox/35.0",
    "Mozilla/5.0 (Windows NT 6.3; Trident/7.0; rv:11.0) like Gecko",
    "Mozilla/5.0 (Windows NT 6.1; WOW64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/41.0.2272.89 Safari/537.36 OPR/28.0.1750.48",
    "Mozilla/5.0 (X11; CrOS x86_64 6680.78.0) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/42.0.2311.102 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]

PHONES = [
    "Mozilla/5.0 (iPhone; CPU iPhone OS 8_0 like Mac OS X) AppleWebKit/600.1.3 (KHTML, like Gecko) Version/8.0 Mobile/12A4345d Safari/600.1.4",
    "Mozilla/5.0 (Linux; Android 4.4.2; SM-G900F Build/KOT49H) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/35.0.1916.141 Mobile Safari/537.36",
    "Mozilla/5.0 (Linux; U; Android 4.0.3; ko-kr; LG-L160L Build/IML74K) AppleWebKit/534.30 (KHTML, like Gecko) Version/4.0 Mobile Safari/534.30",
]

TABLETS = [
    "Mozilla/5.0 (iPad; CPU OS 8_1_2 like Mac OS X) AppleWebKit/600.1.4 (KHTML, like Gecko) Version/8.0 Mobile/12B440 Safari/600.1.4",
    "Mozilla/5.0 (Linux; Android 4.4.4; Nexus 7 Build/KTU84P) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/38.0.2125.102 Safari/537.36",
    "Mozilla/5.0 (Linux; Android 4.4.2; SM-T530 Build/KOT49H) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/34.0.1847.114 Safari/537.36",
]

GOOGLEBOT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"

CLOUDFRONT = "Amazon CloudFront"


class SignatureDetector:
    """Minimal crawlerdetect stand-in that remembers its last match."""

    def __init__(self) -> None:
        self.matches = None

    def isCrawler(self, user_agent=None):
        self.matches = "googlebot" if "googlebot" in user_agent.lower() else None
        return self.matches is not None

    def getMatches(self):
        return self.matches


def make_agent(user_agent, crawler, headers=None) -> Agent:
    return Agent(user_agent, headers, crawler=crawler, config=AgentConfig())


class TestDeviceType:
    """Tests for Agent.device_type over a sample corpus."""

    @pytest.mark.parametrize("user_agent", DESKTOPS)
    def test_desktop(self, fake_crawler, user_agent: str) -> None:
        agent = make_agent(user_agent, fake_crawler)

        assert agent.is_mobile() is False
        assert agent.is_desktop() is True
        assert agent.device_type() == "desktop"

    @pytest.mark.parametrize("user_agent", PHONES)
    def test_phone(self, fake_crawler, user_agent: str) -> None:
        agent = make_agent(user_agent, fake_crawler)

        assert agent.is_phone() is True
        assert agent.is_tablet() is False
        assert agent.device_type() == "phone"

    @pytest.mark.parametrize("user_agent", TABLETS)
    def test_tablet(self, fake_crawler, user_agent: str) -> None:
        agent = make_agent(user_agent, fake_crawler)

        assert agent.is_mobile() is True
        assert agent.is_tablet() is True
        assert agent.is_phone() is False
        assert agent.device_type() == "tablet"

    def test_robot(self, fake_crawler) -> None:
        agent = make_agent(GOOGLEBOT, fake_crawler)

        assert agent.is_robot() is True
        assert agent.is_desktop() is False
        assert agent.device_type() == "robot"
        assert agent.robot() == "Googlebot"

    def test_robot_for_explicit_user_agent(self, fake_crawler) -> None:
        agent = make_agent(DESKTOPS[0], fake_crawler)

        assert agent.robot() is None
        assert agent.is_robot() is False
        assert agent.is_robot(GOOGLEBOT) is True
        assert agent.robot(GOOGLEBOT) == "Googlebot"

    def test_robot_with_empty_crawler_name_is_none(self, crawl_everything) -> None:
        agent = make_agent(GOOGLEBOT, crawl_everything)

        assert agent.is_robot() is True
        assert agent.robot() is None

    def test_robot_name_is_not_taken_from_another_request(self) -> None:
        shared = CrawlerDetectProvider(SignatureDetector())
        bot = make_agent(GOOGLEBOT, shared)
        browser = make_agent(DESKTOPS[0], shared)

        assert bot.is_robot() is True
        assert browser.is_robot() is False
        assert shared.get_matches() == ""
        assert bot.robot() == "Googlebot"

    @pytest.mark.parametrize("user_agent", DESKTOPS + PHONES + TABLETS)
    def test_phone_means_mobile_and_not_tablet(self, fake_crawler, user_agent: str) -> None:
        agent = make_agent(user_agent, fake_crawler)

        assert agent.is_phone() == (agent.is_mobile() and not agent.is_tablet())


class TestCloudFront:
    """Tests for the CloudFront viewer headers."""

    def test_desktop_viewer_true_wins(self, crawl_everything) -> None:
        agent = make_agent(CLOUDFRONT, crawl_everything, {"HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER": "true"})

        assert agent.is_robot() is True
        assert agent.is_desktop() is True
        assert agent.device_type() == "desktop"

    def test_desktop_viewer_false_is_not_desktop(self, fake_crawler) -> None:
        agent = make_agent(CLOUDFRONT, fake_crawler, {"HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER": "false"})

        assert agent.is_desktop() is False
        assert agent.device_type() == "other"

    def test_user_agent_defaults_to_cloudfront(self, fake_crawler) -> None:
        agent = make_agent(None, fake_crawler, {"HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER": "true"})

        assert agent.user_agent == CLOUDFRONT
        assert agent.device_type() == "desktop"

    def test_mobile_viewer(self, fake_crawler) -> None:
        agent = make_agent(
            CLOUDFRONT,
            fake_crawler,
            {
                "HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER": "false",
                "HTTP_CLOUDFRONT_IS_MOBILE_VIEWER": "true",
                "HTTP_CLOUDFRONT_IS_TABLET_VIEWER": "false",
            },
        )

        assert agent.is_mobile() is True
        assert agent.device_type() == "phone"

    def test_tablet_viewer(self, fake_crawler) -> None:
        agent = make_agent(
            CLOUDFRONT,
            fake_crawler,
            {
                "HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER": "false",
                "HTTP_CLOUDFRONT_IS_MOBILE_VIEWER": "true",
                "HTTP_CLOUDFRONT_IS_TABLET_VIEWER": "true",
            },
        )

        assert agent.device_type() == "tablet"

    def test_headers_ignored_for_other_user_agents(self, fake_crawler) -> None:
        agent = make_agent(PHONES[0], fake_crawler, {"HTTP_CLOUDFRONT_IS_DESKTOP_VIEWER": "true"})

        assert agent.is_desktop() is False
        assert agent.device_type() == "phone"


class TestMobileHeaders:
    """Tests for mobile detection from request headers."""

    def test_wap_profile_marks_mobile(self, fake_crawler) -> None:
        agent = make_agent(DESKTOPS[0], fake_crawler, {"HTTP_X_WAP_PROFILE": "http://example.com/uaprof.xml"})

        assert agent.is_mobile() is True
        assert agent.device_type() == "phone"

    def test_wap_accept_marks_mobile(self, fake_crawler) -> None:
        agent = make_agent(DESKTOPS[0], fake_crawler, {"HTTP_ACCEPT": "text/vnd.wap.wml, */*"})

        assert agent.is_mobile() is True

    def test_regular_accept_is_not_mobile(self, fake_crawler) -> None:
        agent = make_agent(DESKTOPS[0], fake_crawler, {"HTTP_ACCEPT": "text/html,*/*"})

        assert agent.is_mobile() is False
        assert agent.device_type() == "desktop"
