"""Errors raised by the agent package.

Lookups that find nothing return None. Exceptions are reserved for caller
bugs and broken rule data.
"""

from __future__ import annotations


class AgentError(Exception):
    """Base class for agent errors."""


class InvalidInvocationError(AgentError, AttributeError):
    """Raised when a dynamic predicate is requested with a name not starting with 'is'."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such method exists: {name}")
        self.name = name


class InvalidRuleError(AgentError, ValueError):
    """Raised when a rule's assembled pattern does not compile."""

    def __init__(self, key: str, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid pattern for rule {key!r}: {reason}")
        self.key = key
        self.pattern = pattern
        self.reason = reason
