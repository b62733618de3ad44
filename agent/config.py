"""Configuration loading for user-agent classification."""

from __future__ import annotations

import os
from dataclasses import dataclass


_DEFAULT_INVALID_RULE_POLICY = "raise"
_DEFAULT_MAX_USER_AGENT_LENGTH = 500
_DEFAULT_VERSION_TYPE = "text"

INVALID_RULE_POLICIES = ("raise", "skip")
VERSION_TYPES = ("text", "float")


@dataclass(frozen=True)
class AgentConfig:
    invalid_rule_policy: str = _DEFAULT_INVALID_RULE_POLICY
    max_user_agent_length: int = _DEFAULT_MAX_USER_AGENT_LENGTH
    default_version_type: str = _DEFAULT_VERSION_TYPE


def _parse_int(value: str | None, default: int) -> int:
    if value is None or not value.strip():
        return default
    return int(value)


def _parse_choice(value: str | None, choices: tuple[str, ...], default: str) -> str:
    if value is None:
        return default
    value = value.strip().lower()
    if value not in choices:
        return default
    return value


def load_agent_config() -> AgentConfig:
    """Load classification settings from environment variables."""
    max_length = _parse_int(
        os.getenv("AGENT_MAX_USER_AGENT_LENGTH"),
        _DEFAULT_MAX_USER_AGENT_LENGTH,
    )
    if max_length <= 0:
        raise ValueError("AGENT_MAX_USER_AGENT_LENGTH must be positive")

    return AgentConfig(
        invalid_rule_policy=_parse_choice(
            os.getenv("AGENT_INVALID_RULE_POLICY"),
            INVALID_RULE_POLICIES,
            _DEFAULT_INVALID_RULE_POLICY,
        ),
        max_user_agent_length=max_length,
        default_version_type=_parse_choice(
            os.getenv("AGENT_DEFAULT_VERSION_TYPE"),
            VERSION_TYPES,
            _DEFAULT_VERSION_TYPE,
        ),
    )
