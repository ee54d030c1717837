"""Request/response pairing shared by all endpoint schemas."""
from abc import abstractmethod
from enum import Enum
from typing import Any, ClassVar, TypeVar

from pydantic import BaseModel

from aifacade.exceptions import AIFacadeError


class RequestKind(str, Enum):
    COMPLETION = "completion"
    CHAT = "chat"
    IMAGE = "image"


class Usage(BaseModel):
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None


class ProviderResponse(BaseModel):
    """Deserialized provider payload. Unknown fields are ignored."""

    kind: ClassVar[RequestKind]

    @abstractmethod
    def get_response(self) -> str:
        """Single natural-language (or encoded) result of the call."""
        ...


R = TypeVar("R", bound=type[ProviderResponse])

_RESPONSE_MODELS: dict[RequestKind, type[ProviderResponse]] = {}


def register_response(model: R) -> R:
    _RESPONSE_MODELS[model.kind] = model
    return model


def response_model_for(kind: RequestKind) -> type[ProviderResponse]:
    return _RESPONSE_MODELS[kind]


class ProviderRequest(BaseModel):
    """Request payload; `kind` selects the response model."""

    kind: ClassVar[RequestKind]

    @property
    def response_model(self) -> type[ProviderResponse]:
        return response_model_for(self.kind)

    def to_payload(self) -> dict[str, Any]:
        """Wire JSON payload. Unset optional parameters are left out."""
        return self.model_dump(mode="json", exclude_none=True)


T = TypeVar("T")


def first_or_raise(items: list[T], what: str) -> T:
    if not items:
        raise AIFacadeError(f"Provider response contained no {what}")
    return items[0]
