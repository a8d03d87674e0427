"""
g2o.core - Request/response conversion, token estimation and streaming.

This module contains the library code that translates between generic
content-generation types and OpenAI-compatible chat-completion payloads.
"""

from g2o.core.chat_types import (
    ChatCompletionResponse,
    ChatMessage,
    ChatUsage,
)
from g2o.core.converter import (
    build_chat_request,
    build_messages,
    build_system_message,
    convert_chat_response,
    describe_missing_content,
    map_finish_reason,
    map_role,
    parse_chat_response,
    to_contents,
)
from g2o.core.parts import render_part, render_parts
from g2o.core.streaming import single_response_stream
from g2o.core.token_estimator import (
    CHARS_PER_TOKEN,
    HeuristicTokenCounter,
    TokenCounter,
    estimate_parts_tokens,
    estimate_text_tokens,
)

__all__ = [
    # Wire types
    "ChatCompletionResponse",
    "ChatMessage",
    "ChatUsage",
    # Converter
    "build_chat_request",
    "build_messages",
    "build_system_message",
    "convert_chat_response",
    "describe_missing_content",
    "map_finish_reason",
    "map_role",
    "parse_chat_response",
    "to_contents",
    # Parts
    "render_part",
    "render_parts",
    # Streaming
    "single_response_stream",
    # Token estimator
    "CHARS_PER_TOKEN",
    "HeuristicTokenCounter",
    "TokenCounter",
    "estimate_parts_tokens",
    "estimate_text_tokens",
]
