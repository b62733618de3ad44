"""First-match-wins scanning of rule tables against a user agent."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

from ..exceptions import InvalidRuleError

logger = logging.getLogger(__name__)

MATCH_FLAGS = re.IGNORECASE | re.DOTALL


def assemble_pattern(fragments: Any) -> str:
    """Join a rule's fragments into one alternation."""
    if isinstance(fragments, str):
        return fragments
    return "|".join(assemble_pattern(fragment) for fragment in fragments)


@lru_cache(maxsize=2048)
def compile_pattern(pattern: str) -> re.Pattern:
    return re.compile(pattern, MATCH_FLAGS)


def compile_rule(key: str, pattern: str, invalid_rule_policy: str) -> re.Pattern | None:
    try:
        return compile_pattern(pattern)
    except re.error as exc:
        if invalid_rule_policy == "skip":
            logger.warning(
                "Skipping rule with invalid pattern",
                extra={"rule_key": key, "pattern": pattern, "error": str(exc)},
            )
            return None
        raise InvalidRuleError(key, pattern, str(exc)) from exc


def find_first_match(
    rules: Mapping[str, Any],
    user_agent: str | None,
    invalid_rule_policy: str = "raise",
) -> str | None:
    """Return the key of the first rule whose pattern matches, or None.

    Patterns are searched anywhere in the user agent, case-insensitively and
    with '.' matching newlines. Table order decides which key wins when
    several rules would match.
    """
    subject = user_agent or ""

    for key, fragments in rules.items():
        if not fragments:
            continue

        compiled = compile_rule(key, assemble_pattern(fragments), invalid_rule_policy)
        if compiled is not None and compiled.search(subject):
            return key

    return None


def matches_rule(
    fragments: Any,
    user_agent: str | None,
    key: str = "",
    invalid_rule_policy: str = "raise",
) -> bool:
    """Check a single rule's fragments against a user agent."""
    if not fragments:
        return False
    compiled = compile_rule(key, assemble_pattern(fragments), invalid_rule_policy)
    return compiled is not None and bool(compiled.search(user_agent or ""))
