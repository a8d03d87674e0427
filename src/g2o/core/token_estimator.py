"""
Simple token estimation utilities.

The chat-completion backend has no tokenizer endpoint, so token counts are
approximated as one token per four characters of rendered text. This is a
heuristic, not a tokenizer; it never reports fewer than one token.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Protocol, runtime_checkable

from g2o.core.parts import render_parts
from g2o.types import Content, Part

CHARS_PER_TOKEN = 4


@runtime_checkable
class TokenCounter(Protocol):
    """Anything that can count the tokens of a conversation."""

    def count_tokens(self, contents: Sequence[Content]) -> int:
        """Return the token count for the given contents."""
        ...


def estimate_text_tokens(text: str) -> int:
    """
    Estimate tokens for raw text: ceil(chars / 4).

    Args:
        text: Text to measure

    Returns:
        Estimated token count (minimum 1)
    """
    return max(1, math.ceil(len(text) / CHARS_PER_TOKEN))


def estimate_parts_tokens(parts: Iterable[Part]) -> int:
    """Estimate tokens for parts as rendered for the backend."""
    return estimate_text_tokens(render_parts(parts))


class HeuristicTokenCounter:
    """TokenCounter based on character length."""

    def count_tokens(self, contents: Sequence[Content]) -> int:
        all_parts = [part for content in contents for part in content.parts]
        return estimate_parts_tokens(all_parts)
