"""
Ollama content generator.

Converts generic generate-content requests to Ollama's OpenAI-compatible
``/chat/completions`` format and converts replies back.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

import httpx

from g2o.config import get_settings
from g2o.core.converter import build_chat_request, convert_chat_response, to_contents
from g2o.core.streaming import single_response_stream
from g2o.core.token_estimator import HeuristicTokenCounter, TokenCounter
from g2o.errors import (
    BackendConnectionError,
    BackendRequestError,
    BackendResponseError,
    UnsupportedOperationError,
)
from g2o.generators.base import ContentGenerator, GeneratorInfo
from g2o.types import (
    CountTokensParameters,
    CountTokensResponse,
    EmbedContentParameters,
    GenerateContentParameters,
    GenerateContentResponse,
)

logger = logging.getLogger(__name__)

BACKEND_NAME = "Ollama"


class OllamaContentGenerator(ContentGenerator):
    """
    Content generator backed by a local Ollama server.

    Each generate call issues exactly one non-streamed POST. Streaming is
    simulated with a single chunk, token counts are estimated, and
    embeddings are not supported.
    """

    def __init__(
        self,
        base_url: str | None = None,
        model: str | None = None,
        *,
        timeout: float | None = None,
        client: httpx.AsyncClient | None = None,
        token_counter: TokenCounter | None = None,
    ):
        """
        Initialize Ollama generator.

        Args:
            base_url: API base URL, e.g. http://localhost:11434/v1
            model: Model used when a request names none
            timeout: Request timeout in seconds, None for no timeout
            client: HTTP client to use instead of an owned one
            token_counter: Token counter, heuristic by default
        """
        settings = get_settings()
        self._base_url = (base_url or settings.ollama.base_url).rstrip("/")
        self._model = model or settings.ollama.model
        self._timeout = timeout if timeout is not None else settings.ollama.timeout
        self._token_counter = token_counter or HeuristicTokenCounter()

        self._client = client
        self._owns_client = client is None

    @property
    def info(self) -> GeneratorInfo:
        """Get generator metadata."""
        return GeneratorInfo(
            name="ollama",
            display_name=BACKEND_NAME,
            supports_streaming=True,
            supports_incremental_streaming=False,
            supports_embeddings=False,
            exact_token_counts=False,
            description="Local Ollama server via its OpenAI-compatible API",
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def model(self) -> str:
        return self._model

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self._timeout))
            self._owns_client = True
        return self._client

    def _build_headers(self) -> dict[str, str]:
        """Build request headers."""
        return {"Content-Type": "application/json"}

    async def generate_content(
        self,
        request: GenerateContentParameters,
        user_prompt_id: str = "",
    ) -> GenerateContentResponse:
        """
        Send one chat-completion request and convert the reply.

        Raises:
            BackendRequestError: On a non-2xx status
            BackendConnectionError: If the server could not be reached
            BackendResponseError: If the reply is not a chat-completion object
        """
        body = build_chat_request(request, self._model)
        url = f"{self._base_url}/chat/completions"
        client = await self._get_client()

        logger.debug(
            f"POST {url} model={body['model']} messages={len(body['messages'])} "
            f"prompt_id={user_prompt_id or '-'}"
        )

        try:
            response = await client.post(url, headers=self._build_headers(), json=body)
        except httpx.HTTPError as e:
            raise BackendConnectionError(f"{BACKEND_NAME} request to {url} failed: {e}") from e

        if not response.is_success:
            logger.error(f"{BACKEND_NAME} returned status {response.status_code}")
            raise BackendRequestError(BACKEND_NAME, response.status_code, response.text)

        try:
            data = response.json()
        except ValueError as e:
            raise BackendResponseError(f"{BACKEND_NAME} returned invalid JSON: {e}") from e

        return convert_chat_response(data)

    async def generate_content_stream(
        self,
        request: GenerateContentParameters,
        user_prompt_id: str = "",
    ) -> AsyncIterator[GenerateContentResponse]:
        """
        Generate a response and expose it as a one-chunk stream.

        The backend call completes before this returns, so request errors
        are raised here rather than during iteration.
        """
        response = await self.generate_content(request, user_prompt_id)
        return single_response_stream(response)

    async def count_tokens(self, request: CountTokensParameters) -> CountTokensResponse:
        """Estimate tokens; Ollama has no tokenizer endpoint."""
        contents = to_contents(request.contents)
        return CountTokensResponse(total_tokens=self._token_counter.count_tokens(contents))

    async def embed_content(self, request: EmbedContentParameters) -> Any:
        """Always raises; embeddings are not available for this backend."""
        raise UnsupportedOperationError(
            BACKEND_NAME, f"Embedding is not supported for {BACKEND_NAME} backends yet."
        )

    async def close(self) -> None:
        """Close HTTP client if this generator created it."""
        if self._client is not None and self._owns_client and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
