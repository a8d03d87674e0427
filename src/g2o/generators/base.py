"""
Base content generator interface and types.

All backends implement the ContentGenerator abstract class, so callers can
generate, stream and count tokens without knowing which backend they use.
"""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from dataclasses import dataclass
from typing import Any

from g2o.types import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    GenerateContentParameters,
    GenerateContentResponse,
)


@dataclass
class GeneratorInfo:
    """Content generator metadata."""

    name: str
    display_name: str
    supports_streaming: bool = True
    supports_incremental_streaming: bool = False
    supports_embeddings: bool = False
    exact_token_counts: bool = False
    description: str = ""


class ContentGenerator(ABC):
    """
    Abstract base class for content generators.

    Each implementation handles:
    - Request conversion to the backend format
    - Response conversion to generic responses
    - Token counting
    - Streaming (real or simulated)
    """

    @property
    @abstractmethod
    def info(self) -> GeneratorInfo:
        """Get generator metadata."""
        ...

    @abstractmethod
    async def generate_content(
        self,
        request: GenerateContentParameters,
        user_prompt_id: str = "",
    ) -> GenerateContentResponse:
        """
        Generate a complete response.

        Args:
            request: Generate-content parameters
            user_prompt_id: Caller's prompt identifier

        Returns:
            Generic response
        """
        ...

    @abstractmethod
    async def generate_content_stream(
        self,
        request: GenerateContentParameters,
        user_prompt_id: str = "",
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        Generate a response as a stream of chunks.

        Args:
            request: Generate-content parameters
            user_prompt_id: Caller's prompt identifier

        Returns:
            Async iterator of response chunks
        """
        ...

    @abstractmethod
    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Count tokens of the request contents."""
        ...

    @abstractmethod
    async def embed_content(self, request: EmbedContentParameters) -> Any:
        """Compute embeddings for the request contents."""
        ...

    async def close(self) -> None:
        """Release resources held by the generator."""
        return None

    async def __aenter__(self) -> "ContentGenerator":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def to_dict(self) -> dict[str, Any]:
        """Convert generator info to dictionary."""
        info = self.info
        return {
            "name": info.name,
            "display_name": info.display_name,
            "supports_streaming": info.supports_streaming,
            "supports_incremental_streaming": info.supports_incremental_streaming,
            "supports_embeddings": info.supports_embeddings,
            "exact_token_counts": info.exact_token_counts,
            "description": info.description,
        }
