"""
Agent

User-agent classification for HTTP clients, providing:
- browser, platform and device detection by first-match rule precedence
- desktop / phone / tablet / robot device typing
- version extraction and Accept-Language ordering
"""

from agent.agent import Agent, AgentSummary
from agent.config import AgentConfig, load_agent_config
from agent.detection import (
    DetectionRules,
    MobileDetect,
    RuleTable,
    VersionType,
    merge_rules,
    normalize_version,
    parse_languages,
)
from agent.exceptions import AgentError, InvalidInvocationError, InvalidRuleError

__all__ = [
    "Agent",
    "AgentConfig",
    "AgentError",
    "AgentSummary",
    "DetectionRules",
    "InvalidInvocationError",
    "InvalidRuleError",
    "MobileDetect",
    "RuleTable",
    "VersionType",
    "load_agent_config",
    "merge_rules",
    "normalize_version",
    "parse_languages",
]
