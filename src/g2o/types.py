"""
Generic content-generation types.

These pydantic models describe the client-side contract: a conversation is a
list of ``Content`` turns, each holding ordered ``Part`` values, and a reply
is a ``GenerateContentResponse`` with candidates and optional usage data.

Fields accept both the camelCase wire names (``functionCall``,
``maxOutputTokens``) and their snake_case Python names.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class GenAIModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize using wire names, omitting unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class PartKind(str, Enum):
    """Which variant of a Part is populated."""

    TEXT = "text"
    FUNCTION_CALL = "functionCall"
    FUNCTION_RESPONSE = "functionResponse"
    EMPTY = "empty"


class FinishReason(str, Enum):
    """Why generation stopped."""

    STOP = "STOP"
    MAX_TOKENS = "MAX_TOKENS"


class FunctionCall(GenAIModel):
    """A function call requested by the model."""

    id: str | None = None
    name: str | None = None
    args: dict[str, Any] | None = None


class FunctionResponse(GenAIModel):
    """The result of a function call, sent back to the model."""

    id: str | None = None
    name: str | None = None
    response: dict[str, Any] | None = None


_PART_VARIANTS = {
    "text": PartKind.TEXT,
    "function_call": PartKind.FUNCTION_CALL,
    "function_response": PartKind.FUNCTION_RESPONSE,
}


class Part(GenAIModel):
    """
    One unit of a turn's payload.

    At most one of ``text``, ``function_call`` and ``function_response`` may
    be set. A part with none of them set (for example an inline image this
    backend cannot carry) has kind ``PartKind.EMPTY``.
    """

    text: str | None = None
    function_call: FunctionCall | None = None
    function_response: FunctionResponse | None = None

    @model_validator(mode="after")
    def _check_single_variant(self) -> "Part":
        populated = [to_camel(name) for name in _PART_VARIANTS if getattr(self, name) is not None]
        if len(populated) > 1:
            raise ValueError(f"Part must hold a single variant, got: {', '.join(populated)}")
        return self

    @property
    def kind(self) -> PartKind:
        """The populated variant."""
        for name, kind in _PART_VARIANTS.items():
            if getattr(self, name) is not None:
                return kind
        return PartKind.EMPTY


class Content(GenAIModel):
    """One conversation turn."""

    role: str | None = None
    parts: list[Part] = Field(default_factory=list)


class GenerationConfig(GenAIModel):
    """Sampling knobs passed through to the backend when set."""

    temperature: float | None = None
    top_p: float | None = None
    max_output_tokens: int | None = None


class GenerateContentConfig(GenAIModel):
    """Per-request configuration."""

    generation_config: GenerationConfig | None = None
    system_instruction: str | Content | None = None


class GenerateContentParameters(GenAIModel):
    """
    Parameters for a generate-content call.

    ``contents`` is left loose on purpose: it may be a string, a part, a
    content, or a list of any of those, and is normalized by
    ``g2o.core.converter.to_contents``.
    """

    model: str | None = None
    contents: Any = None
    config: GenerateContentConfig | None = None


class CountTokensParameters(GenAIModel):
    """Parameters for a count-tokens call."""

    model: str | None = None
    contents: Any = None


class EmbedContentParameters(GenAIModel):
    """Parameters for an embed-content call."""

    model: str | None = None
    contents: Any = None


class UsageMetadata(GenAIModel):
    """Token usage reported by the backend."""

    prompt_token_count: int | None = None
    candidates_token_count: int | None = None
    total_token_count: int | None = None


class Candidate(GenAIModel):
    """A single generated reply."""

    content: Content
    finish_reason: FinishReason | None = None
    index: int = 0


class GenerateContentResponse(GenAIModel):
    """Reply to a generate-content call."""

    candidates: list[Candidate] = Field(default_factory=list)
    usage_metadata: UsageMetadata | None = None

    @property
    def text(self) -> str | None:
        """Concatenated text of the first candidate, if any."""
        if not self.candidates:
            return None
        texts = [p.text for p in self.candidates[0].content.parts if p.text is not None]
        if not texts:
            return None
        return "".join(texts)


class CountTokensResponse(GenAIModel):
    """Reply to a count-tokens call."""

    total_tokens: int
