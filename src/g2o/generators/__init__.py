"""
g2o.generators - Content generator implementations.

- ContentGenerator: backend-independent capability interface
- OllamaContentGenerator: local Ollama server via /chat/completions
"""

from g2o.config import Settings, get_settings
from g2o.generators.base import ContentGenerator, GeneratorInfo
from g2o.generators.ollama import OllamaContentGenerator


def create_content_generator(settings: Settings | None = None) -> ContentGenerator:
    """
    Create the configured content generator.

    Args:
        settings: Settings to use, the cached global settings by default

    Returns:
        Content generator instance
    """
    settings = settings or get_settings()
    return OllamaContentGenerator(
        base_url=settings.ollama.base_url,
        model=settings.ollama.model,
        timeout=settings.ollama.timeout,
    )


__all__ = [
    "ContentGenerator",
    "GeneratorInfo",
    "OllamaContentGenerator",
    "create_content_generator",
]
