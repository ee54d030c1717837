"""Request and response models for the provider endpoints."""
from aifacade.schemas.base import (
    ProviderRequest,
    ProviderResponse,
    RequestKind,
    Usage,
    response_model_for,
)
from aifacade.schemas.chat import (
    ChatChoice,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    default_chat_request,
)
from aifacade.schemas.completion import (
    CompletionChoice,
    CompletionRequest,
    CompletionResponse,
    default_completion_request,
)
from aifacade.schemas.image import ImageData, ImageRequest, ImageResponse

__all__ = [
    "ChatChoice",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "CompletionChoice",
    "CompletionRequest",
    "CompletionResponse",
    "ImageData",
    "ImageRequest",
    "ImageResponse",
    "ProviderRequest",
    "ProviderResponse",
    "RequestKind",
    "Usage",
    "default_chat_request",
    "default_completion_request",
    "response_model_for",
]
