"""Test helpers for faking the chat-completion backend."""

import json
from collections.abc import Callable

import httpx

BASE_URL = "http://ollama.test/v1"


class RecordingBackend:
    """Fake chat-completion server recording every request it receives."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self._handler = handler
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    @property
    def last_body(self) -> dict:
        return json.loads(self.requests[-1].content)

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def chat_reply(content: str = "Hello!", finish_reason: str = "stop", usage: dict | None = None):
    """Build a chat-completion reply body."""
    body: dict = {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": finish_reason,
            }
        ],
    }
    if usage is not None:
        body["usage"] = usage
    return body
