"""
Wire models for the OpenAI-compatible chat-completion backend.

Only the fields the adapter reads are declared. Choices stay raw JSON values:
servers disagree on their shape, and a choice the adapter cannot read is
described instead of rejected.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

ChatRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """A role-tagged text message sent to the backend."""

    role: ChatRole
    content: str


class ChatUsage(BaseModel):
    """Token usage record."""

    model_config = ConfigDict(extra="ignore")

    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class ChatCompletionResponse(BaseModel):
    """Top-level chat-completion reply."""

    model_config = ConfigDict(extra="ignore")

    choices: list[Any] | None = None
    usage: ChatUsage | None = None
