"""
Parenthesis-aware ingredient list parser.

Commas inside parentheses or brackets belong to a sub-ingredient list
("flavor enhancers (msg, disodium inosinate)") and never split the outer token.
"""

from __future__ import annotations

from typing import Iterator

_OPENERS = frozenset("([")
_CLOSERS = frozenset(")]")


def iter_ingredient_tokens(raw: str) -> Iterator[str]:
    """Yield trimmed, lowercased top-level ingredient tokens in order."""
    depth = 0
    current: list[str] = []

    for char in raw:
        if char in _OPENERS:
            depth += 1
        elif char in _CLOSERS:
            depth = max(0, depth - 1)  # stray closers never go negative
        elif char == "," and depth == 0:
            token = "".join(current).strip().lower()
            if token:
                yield token
            current = []
            continue
        current.append(char)

    token = "".join(current).strip().lower()
    if token:
        yield token


def parse_ingredients(raw: str) -> list[str]:
    return list(iter_ingredient_tokens(raw))
