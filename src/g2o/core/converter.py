"""
Convert between generic content requests and chat-completion payloads.

Request direction:
    contents + system instruction -> flat list of role-tagged messages
    -> ``/chat/completions`` request body.

Response direction:
    chat-completion reply -> ``GenerateContentResponse`` with exactly one
    candidate, mapped finish reason and optional usage data.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from g2o.core.chat_types import ChatCompletionResponse, ChatMessage, ChatRole
from g2o.core.parts import render_parts
from g2o.errors import BackendResponseError
from g2o.types import (
    Candidate,
    Content,
    FinishReason,
    GenerateContentParameters,
    GenerateContentResponse,
    Part,
    UsageMetadata,
)

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Content normalization
# ---------------------------------------------------------------------------


def _to_part(value: Any) -> Part:
    if isinstance(value, Part):
        return value
    if isinstance(value, str):
        return Part(text=value)
    return Part.model_validate(value)


def _to_content(value: Any) -> Content:
    if isinstance(value, Content):
        return value
    if isinstance(value, list):
        return Content(role="user", parts=[_to_part(item) for item in value])
    if isinstance(value, str):
        return Content(role="user", parts=[Part(text=value)])
    if isinstance(value, dict) and "parts" in value:
        return Content.model_validate(value)
    return Content(role="user", parts=[_to_part(value)])


def to_contents(value: Any) -> list[Content]:
    """
    Normalize a loose content union into a list of Content.

    Accepts a string, a Part, a Content, their dict forms, or a list of any
    of these. Each top-level list item becomes one Content; a nested list
    becomes one user Content made of those parts.

    Args:
        value: Content union as accepted by generate_content

    Returns:
        Ordered list of Content
    """
    if value is None:
        return []
    if isinstance(value, list):
        return [_to_content(item) for item in value]
    return [_to_content(value)]


# ---------------------------------------------------------------------------
# Request direction
# ---------------------------------------------------------------------------


def map_role(role: str | None) -> ChatRole:
    """Map a content role to a backend role: only "user" stays "user"."""
    return "user" if role == "user" else "assistant"


def build_system_message(system_instruction: str | Content | None) -> ChatMessage | None:
    """Build the leading system message, or None if there is no instruction."""
    if system_instruction is None or system_instruction == "":
        return None
    if isinstance(system_instruction, str):
        return ChatMessage(role="system", content=system_instruction)
    return ChatMessage(role="system", content=render_parts(system_instruction.parts))


def build_messages(
    contents: Sequence[Content],
    system_instruction: str | Content | None = None,
) -> list[ChatMessage]:
    """
    Convert contents to backend messages.

    One message per content, in order, with no filtering of empty turns.
    A system instruction, when given, is prepended as a "system" message.

    Args:
        contents: Conversation turns
        system_instruction: Optional instruction string or Content

    Returns:
        Backend messages
    """
    messages: list[ChatMessage] = []

    system_message = build_system_message(system_instruction)
    if system_message is not None:
        messages.append(system_message)

    for content in contents:
        messages.append(
            ChatMessage(role=map_role(content.role), content=render_parts(content.parts))
        )

    return messages


def build_chat_request(params: GenerateContentParameters, default_model: str) -> dict[str, Any]:
    """
    Build the ``/chat/completions`` request body.

    Sampling knobs are copied only when set on the request.

    Args:
        params: Generate-content parameters
        default_model: Model used when the request names none

    Returns:
        JSON-serializable request body
    """
    config = params.config
    generation_config = config.generation_config if config else None
    system_instruction = config.system_instruction if config else None

    messages = build_messages(to_contents(params.contents), system_instruction)

    body: dict[str, Any] = {
        "model": params.model or default_model,
        "messages": [message.model_dump() for message in messages],
        "stream": False,
    }

    if generation_config is not None:
        if generation_config.temperature is not None:
            body["temperature"] = generation_config.temperature
        if generation_config.top_p is not None:
            body["top_p"] = generation_config.top_p
        if generation_config.max_output_tokens is not None:
            body["max_tokens"] = generation_config.max_output_tokens

    return body


# ---------------------------------------------------------------------------
# Response direction
# ---------------------------------------------------------------------------


NO_CHOICES_TEXT = "Backend response contained no choices"


def describe_missing_content(choice: Any) -> str:
    """Describe a choice that carried neither message nor delta text."""
    raw = json.dumps(choice, ensure_ascii=False, default=str)
    return f"Backend response contained no message content: {raw}"


def map_finish_reason(finish_reason: Any) -> FinishReason:
    """Map a backend finish reason; anything but "length" is a normal stop."""
    return FinishReason.MAX_TOKENS if finish_reason == "length" else FinishReason.STOP


def _field(value: Any, key: str) -> Any:
    return value.get(key) if isinstance(value, dict) else None


def _content_text(choice: Any, key: str) -> str | None:
    """Return ``choice[key]["content"]`` when it is a string."""
    content = _field(_field(choice, key), "content")
    return content if isinstance(content, str) else None


def _select_text(choices: list[Any] | None) -> str:
    if not choices:
        logger.warning(NO_CHOICES_TEXT)
        return NO_CHOICES_TEXT

    choice = choices[0]
    for key in ("message", "delta"):
        text = _content_text(choice, key)
        if text is not None:
            return text

    description = describe_missing_content(choice)
    logger.warning(description)
    return description


def parse_chat_response(data: Any) -> ChatCompletionResponse:
    """
    Validate a decoded reply body.

    Raises:
        BackendResponseError: If the body is not a chat-completion object
    """
    if isinstance(data, ChatCompletionResponse):
        return data
    if not isinstance(data, dict):
        raise BackendResponseError(
            f"Expected a JSON object from the backend, got {type(data).__name__}"
        )
    try:
        return ChatCompletionResponse.model_validate(data)
    except ValidationError as e:
        raise BackendResponseError(f"Malformed chat completion response: {e}") from e


def convert_chat_response(data: dict[str, Any] | ChatCompletionResponse) -> GenerateContentResponse:
    """
    Convert a chat-completion reply to a generic response.

    The first choice supplies the text: its message content, else its delta
    content, else a description of what was received. Only string content
    counts; a choice of any other shape degrades to the description and
    never fails the call.

    Args:
        data: Decoded reply body or an already parsed reply

    Returns:
        Response with exactly one candidate
    """
    completion = parse_chat_response(data)
    choices = completion.choices
    first_choice = choices[0] if choices else None

    candidate = Candidate(
        content=Content(role="model", parts=[Part(text=_select_text(choices))]),
        finish_reason=map_finish_reason(_field(first_choice, "finish_reason")),
    )

    usage_metadata = None
    if completion.usage is not None:
        usage_metadata = UsageMetadata(
            prompt_token_count=completion.usage.prompt_tokens,
            candidates_token_count=completion.usage.completion_tokens,
            total_token_count=completion.usage.total_tokens,
        )

    return GenerateContentResponse(candidates=[candidate], usage_metadata=usage_metadata)
