"""
g2o - Gemini-style content generation on a local Ollama server

Translates generic generate-content requests (contents, parts, system
instruction, generation config) into OpenAI-compatible chat-completion
calls and converts the replies back.

Example usage:
    # One-shot generation
    $ g2o generate "Why is the sky blue?"

    # Heuristic token count
    $ g2o count-tokens "Why is the sky blue?"
"""

__version__ = "0.1.0"

from g2o.core import (
    HeuristicTokenCounter,
    TokenCounter,
    build_chat_request,
    build_messages,
    convert_chat_response,
    estimate_text_tokens,
    render_parts,
    single_response_stream,
    to_contents,
)
from g2o.errors import (
    BackendConnectionError,
    BackendRequestError,
    BackendResponseError,
    ConfigValidationError,
    G2OError,
    UnsupportedOperationError,
)
from g2o.generators import (
    ContentGenerator,
    GeneratorInfo,
    OllamaContentGenerator,
    create_content_generator,
)

__all__ = [
    # Version info
    "__version__",
    # Core
    "HeuristicTokenCounter",
    "TokenCounter",
    "build_chat_request",
    "build_messages",
    "convert_chat_response",
    "estimate_text_tokens",
    "render_parts",
    "single_response_stream",
    "to_contents",
    # Errors
    "BackendConnectionError",
    "BackendRequestError",
    "BackendResponseError",
    "ConfigValidationError",
    "G2OError",
    "UnsupportedOperationError",
    # Generators
    "ContentGenerator",
    "GeneratorInfo",
    "OllamaContentGenerator",
    "create_content_generator",
]
