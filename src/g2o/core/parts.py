"""
Flatten content parts into plain text.

The chat-completion backend only understands string messages, so every part
is rendered to a human-readable line. Function calls and responses become
``Function call <name>: <json>`` / ``Function response <name>: <json>``;
this encoding is lossy and cannot be parsed back into parts.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from typing import Any

from g2o.types import Part, PartKind


def _compact_json(value: dict[str, Any] | None) -> str:
    """Encode a mapping as compact JSON, ``{}`` when absent."""
    return json.dumps(value or {}, ensure_ascii=False, separators=(",", ":"))


def render_part(part: Part) -> str:
    """
    Render a single part.

    Args:
        part: Part to render

    Returns:
        Rendered text, empty for parts with nothing to show

    Raises:
        ValueError: If the part kind has no rendering
    """
    kind = part.kind
    if kind is PartKind.TEXT:
        return part.text or ""
    if kind is PartKind.FUNCTION_CALL:
        call = part.function_call
        return f"Function call {call.name}: {_compact_json(call.args)}"
    if kind is PartKind.FUNCTION_RESPONSE:
        result = part.function_response
        return f"Function response {result.name}: {_compact_json(result.response)}"
    if kind is PartKind.EMPTY:
        return ""
    raise ValueError(f"Cannot render part of kind {kind!r}")


def render_parts(parts: Iterable[Part]) -> str:
    """Render parts in order, dropping empty results, one per line."""
    rendered = (render_part(part) for part in parts)
    return "\n".join(text for text in rendered if text)
