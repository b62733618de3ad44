"""Version extraction from property pattern templates."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum
from typing import Any

from .matcher import assemble_pattern, compile_rule

VERSION_PLACEHOLDER = "[VER]"
VERSION_REGEX = r"([\w._\+]+)"

_LEADING_FLOAT = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?")


class VersionType(str, Enum):
    TEXT = "text"
    FLOAT = "float"


def normalize_version(version: str) -> float:
    """Collapse a version string into a two-part decimal.

    Separators become dots and everything after the first dot is squashed
    together, so "5.1.2" becomes 5.12 and "10_0_3" becomes 10.03. Only the
    leading numeric part is parsed; a string without one yields 0.0.
    """
    version = version.replace("_", ".").replace(" ", ".").replace("/", ".")
    parts = version.split(".", 1)
    if len(parts) == 2:
        parts[1] = parts[1].replace(".", "")

    match = _LEADING_FLOAT.match(".".join(parts))
    if match is None:
        return 0.0
    return float(match.group(0))


def _templates(value: Any) -> list[Any]:
    if isinstance(value, str):
        return [value]
    return list(value)


def extract_version(
    property_name: str,
    properties: Mapping[str, Any],
    user_agent: str | None,
    kind: VersionType | str = VersionType.TEXT,
    invalid_rule_policy: str = "raise",
) -> str | float | None:
    """Find the version of `property_name` in the user agent.

    Each template of the property is tried in order with the placeholder
    swapped for a capturing group; the first non-empty capture wins. Templates
    that fail to compile follow `invalid_rule_policy` like any other rule.
    """
    if not property_name or property_name not in properties:
        return None

    try:
        kind = VersionType(kind)
    except ValueError:
        kind = VersionType.TEXT

    subject = user_agent or ""
    for template in _templates(properties[property_name]):
        pattern = assemble_pattern(template).replace(VERSION_PLACEHOLDER, VERSION_REGEX)
        compiled = compile_rule(property_name, pattern, invalid_rule_policy)
        if compiled is None:
            continue

        match = compiled.search(subject)
        if match and compiled.groups and match.group(1):
            if kind is VersionType.FLOAT:
                return normalize_version(match.group(1))
            return match.group(1)

    return None
