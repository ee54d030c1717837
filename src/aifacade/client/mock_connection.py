"""Offline connection: answers from queued provider payloads and records every request."""
from collections import deque
from dataclasses import dataclass
from typing import Any

from aifacade.client.base import Connection, ResponseT
from aifacade.exceptions import AIFacadeError
from aifacade.schemas import ProviderRequest, RequestKind


@dataclass
class SentRequest:
    payload: dict[str, Any]
    url: str
    kind: RequestKind


def chat_reply(content: str) -> dict[str, Any]:
    """Provider-shaped chat payload with a single assistant message."""
    return {
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def completion_reply(text: str) -> dict[str, Any]:
    return {"object": "text_completion", "choices": [{"index": 0, "text": text}]}


def image_reply(url: str) -> dict[str, Any]:
    return {"created": 0, "data": [{"url": url}]}


_FALLBACKS = {
    RequestKind.COMPLETION: lambda: completion_reply("mock completion"),
    RequestKind.CHAT: lambda: chat_reply("mock reply"),
    RequestKind.IMAGE: lambda: image_reply("https://example.invalid/mock.png"),
}


class MockConnection(Connection):
    def __init__(self, replies: list[dict[str, Any] | AIFacadeError] | None = None) -> None:
        self._replies: deque[dict[str, Any] | AIFacadeError] = deque(replies or [])
        self.sent: list[SentRequest] = []

    def queue(self, reply: dict[str, Any] | AIFacadeError) -> None:
        self._replies.append(reply)

    def send_post(
        self, body: ProviderRequest, url: str, response_model: type[ResponseT]
    ) -> ResponseT:
        # snapshot: the client mutates request models in place after the call
        self.sent.append(SentRequest(payload=body.to_payload(), url=url, kind=body.kind))
        reply = self._replies.popleft() if self._replies else _FALLBACKS[body.kind]()
        if isinstance(reply, AIFacadeError):
            raise reply
        return response_model.model_validate(reply)
