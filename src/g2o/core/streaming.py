"""
Streaming shim for backends without incremental delivery.

The backend is always called with ``"stream": false``, so a streamed
generate-content call is served by awaiting the complete reply and yielding
it as the only chunk. Callers see nothing until the whole reply has arrived.

Real streaming would parse the backend's ``data:`` lines as they arrive and
yield a partial response per delta; this module is where that would go.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from g2o.types import GenerateContentResponse


async def single_response_stream(
    response: GenerateContentResponse,
) -> AsyncIterator[GenerateContentResponse]:
    """
    Yield an already completed response as a one-chunk stream.

    The returned async generator can be consumed once.

    Args:
        response: Complete response

    Yields:
        The response, exactly once
    """
    yield response
