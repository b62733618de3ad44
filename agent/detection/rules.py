"""Ordered rule tables and the merge that combines rule sources.

A rule table maps a classification key ("Chrome", "Windows NT", ...) to one
or more regex fragments. Iteration order is match precedence, so tables are
merged with the most specific source first.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from threading import Lock
from typing import Any, Union

from .extensions import (
    ADDITIONAL_BROWSERS,
    ADDITIONAL_OPERATING_SYSTEMS,
    ADDITIONAL_PROPERTIES,
    DESKTOP_DEVICES,
)
from .mobile_detect import MobileDetect

logger = logging.getLogger(__name__)

Fragments = Union[str, tuple[Any, ...]]


def _is_empty(value: Any) -> bool:
    return value is None or len(value) == 0


def _is_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


def _freeze(value: Any) -> Fragments:
    if _is_list(value):
        return tuple(_freeze(item) if _is_list(item) else item for item in value)
    return value


class RuleTable(Mapping):
    """Read-only, insertion-ordered mapping of key to fragment(s)."""

    def __init__(self, rules: Mapping[str, Any] | None = None) -> None:
        self._rules: dict[str, Fragments] = {}
        if rules:
            for key, value in rules.items():
                self._rules[key] = _freeze(value)

    def __getitem__(self, key: str) -> Fragments:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleTable({self._rules!r})"

    def get_case_insensitive(self, key: str) -> Fragments | None:
        """Look up a key ignoring case; the first key in table order wins."""
        lowered = key.lower()
        for name, value in self._rules.items():
            if name.lower() == lowered:
                return value
        return None


def merge_rules(*tables: Mapping[str, Any]) -> RuleTable:
    """Merge rule tables left to right.

    Fragments for a key seen in several tables accumulate instead of being
    overwritten. Two plain strings are joined into one alternation, anything
    involving a list becomes a longer list. Empty values are ignored.
    """
    merged: dict[str, Any] = {}

    for rules in tables:
        for key, value in rules.items():
            if _is_empty(value):
                continue

            if key not in merged:
                merged[key] = list(value) if _is_list(value) else value
                continue

            current = merged[key]
            if isinstance(current, list):
                if _is_list(value):
                    current.extend(value)
                else:
                    current.append(value)
            elif _is_list(value):
                merged[key] = [current, *value]
            else:
                merged[key] = f"{current}|{value}"

    return RuleTable(merged)


@dataclass(frozen=True)
class DetectionRules:
    """Every merged table the classifier reads, built once per provider."""

    extended: RuleTable
    browsers: RuleTable
    platforms: RuleTable
    devices: RuleTable
    mobile: RuleTable
    tablets: RuleTable
    properties: RuleTable


def build_detection_rules(provider: Any) -> DetectionRules:
    """Combine a base rule provider's tables with the additional rules.

    `provider` may be a provider class or instance; only its table
    attributes are read.
    """
    rules = DetectionRules(
        extended=merge_rules(
            DESKTOP_DEVICES,
            provider.phone_devices,
            provider.tablet_devices,
            provider.operating_systems,
            ADDITIONAL_OPERATING_SYSTEMS,
            provider.browsers,
            ADDITIONAL_BROWSERS,
        ),
        browsers=merge_rules(ADDITIONAL_BROWSERS, provider.browsers),
        platforms=merge_rules(provider.operating_systems, ADDITIONAL_OPERATING_SYSTEMS),
        devices=merge_rules(DESKTOP_DEVICES, provider.phone_devices, provider.tablet_devices),
        mobile=merge_rules(
            provider.phone_devices,
            provider.tablet_devices,
            provider.operating_systems,
            provider.browsers,
        ),
        tablets=merge_rules(provider.tablet_devices),
        properties=merge_rules(ADDITIONAL_PROPERTIES, provider.properties),
    )
    logger.debug(
        "Built detection rules",
        extra={
            "provider": getattr(provider, "__name__", type(provider).__name__),
            "rule_count": len(rules.extended),
            "property_count": len(rules.properties),
        },
    )
    return rules


_default_rules: DetectionRules | None = None
_default_rules_lock = Lock()


def default_detection_rules() -> DetectionRules:
    """Rules for the bundled MobileDetect tables, built once per process."""
    global _default_rules
    if _default_rules is None:
        with _default_rules_lock:
            if _default_rules is None:
                _default_rules = build_detection_rules(MobileDetect)
    return _default_rules
