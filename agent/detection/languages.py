"""Accept-Language parsing."""

from __future__ import annotations


def _parse_priority(value: str) -> float:
    value = value.strip().replace("q=", "")
    if not value:
        return 1.0
    try:
        return float(value)
    except ValueError:
        return 0.0


def parse_languages(accept_language: str | None) -> list[str]:
    """Return language tags ordered by descending quality.

    Tags are lowercased. A repeated tag keeps its first position and its
    last priority. Equal priorities keep header order.
    """
    if not accept_language:
        return []

    priorities: dict[str, float] = {}
    for piece in accept_language.split(","):
        parts = piece.split(";")
        language = parts[0].strip().lower()
        if not language:
            continue
        priorities[language] = _parse_priority(parts[1]) if len(parts) > 1 else 1.0

    return sorted(priorities, key=lambda language: priorities[language], reverse=True)
