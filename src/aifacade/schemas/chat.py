"""Chat request/response and the message type kept in chat history."""
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from aifacade.schemas.base import (
    ProviderRequest,
    ProviderResponse,
    RequestKind,
    Usage,
    first_or_raise,
    register_response,
)

DEFAULT_CHAT_MODEL = "gpt-3.5-turbo"

Role = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    content: str

    @field_validator("content", mode="before")
    @classmethod
    def _null_content(cls, v: Any) -> Any:
        # provider sends null content for some assistant replies
        return "" if v is None else v


class ChatRequest(ProviderRequest):
    """Chat parameters plus the running conversation.

    `messages` only ever grows: the client appends the caller's messages
    before sending and the assistant reply after receiving it.
    """

    kind: ClassVar[RequestKind] = RequestKind.CHAT

    model: str = DEFAULT_CHAT_MODEL
    messages: list[ChatMessage] = Field(default_factory=list)
    max_tokens: int = 2000
    n: int = 1
    temperature: float | None = None
    top_p: float | None = None
    stop: str | list[str] | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    user: str | None = None


def default_chat_request() -> ChatRequest:
    return ChatRequest(
        model=DEFAULT_CHAT_MODEL,
        messages=[],
        max_tokens=2000,
        n=1,
    )


class ChatChoice(BaseModel):
    index: int = 0
    message: ChatMessage
    finish_reason: str | None = None


@register_response
class ChatResponse(ProviderResponse):
    kind: ClassVar[RequestKind] = RequestKind.CHAT

    id: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[ChatChoice] = Field(default_factory=list)
    usage: Usage | None = None

    @property
    def message(self) -> ChatMessage:
        return first_or_raise(self.choices, "choices").message

    def get_response(self) -> str:
        return self.message.content
