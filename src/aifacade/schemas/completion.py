"""Text completion request/response."""
from typing import ClassVar

from pydantic import BaseModel, Field

from aifacade.schemas.base import (
    ProviderRequest,
    ProviderResponse,
    RequestKind,
    Usage,
    first_or_raise,
    register_response,
)

DEFAULT_COMPLETION_MODEL = "text-davinci-003"


class CompletionRequest(ProviderRequest):
    kind: ClassVar[RequestKind] = RequestKind.COMPLETION

    model: str = DEFAULT_COMPLETION_MODEL
    prompt: str = ""
    max_tokens: int = 2000
    temperature: float = 0.9
    n: int = 1
    best_of: int = 1
    suffix: str | None = None
    top_p: float | None = None
    stop: str | list[str] | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    user: str | None = None


def default_completion_request() -> CompletionRequest:
    return CompletionRequest(
        model=DEFAULT_COMPLETION_MODEL,
        max_tokens=2000,
        temperature=0.9,
        n=1,
        best_of=1,
    )


class CompletionChoice(BaseModel):
    text: str = ""
    index: int = 0
    finish_reason: str | None = None


@register_response
class CompletionResponse(ProviderResponse):
    kind: ClassVar[RequestKind] = RequestKind.COMPLETION

    id: str | None = None
    created: int | None = None
    model: str | None = None
    choices: list[CompletionChoice] = Field(default_factory=list)
    usage: Usage | None = None

    def get_response(self) -> str:
        return first_or_raise(self.choices, "choices").text
