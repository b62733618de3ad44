"""Agent dependency for FastAPI endpoints."""

from __future__ import annotations

import logging
from typing import Callable

from fastapi import Request

from .agent import Agent
from .config import AgentConfig, load_agent_config
from .detection.crawler import CrawlerProvider

logger = logging.getLogger(__name__)


def cgi_headers(request: Request) -> dict[str, str]:
    """Map request headers to CGI-style names ("User-Agent" -> "HTTP_USER_AGENT")."""
    return {
        "HTTP_" + name.upper().replace("-", "_"): value
        for name, value in request.headers.items()
    }


def build_agent_dependency(
    config: AgentConfig | None = None,
    crawler: CrawlerProvider | None = None,
) -> Callable[[Request], Agent]:
    """Build a FastAPI dependency that classifies the calling client."""
    if config is None:
        config = load_agent_config()

    def _dependency(request: Request) -> Agent:
        agent = Agent(headers=cgi_headers(request), crawler=crawler, config=config)

        if logger.isEnabledFor(logging.DEBUG):
            summary = agent.summary()
            logger.debug(
                "Client classified",
                extra={
                    "endpoint": request.url.path,
                    "browser": summary.browser,
                    "platform": summary.platform,
                    "device_type": summary.device_type,
                    "robot": summary.robot,
                    "user_agent_preview": (summary.user_agent or "")[:80],
                },
            )

        return agent

    return _dependency
