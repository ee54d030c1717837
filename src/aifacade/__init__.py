"""Typed client for completion, chat and image generation endpoints."""
from aifacade.client import AIClient, Connection, HTTPConnection, MockConnection
from aifacade.config import ClientSettings
from aifacade.exceptions import AIFacadeError
from aifacade.logging import configure_logging
from aifacade.schemas import (
    ChatMessage,
    ChatRequest,
    CompletionRequest,
    ImageRequest,
    default_chat_request,
    default_completion_request,
)

__all__ = [
    "AIClient",
    "AIFacadeError",
    "ChatMessage",
    "ChatRequest",
    "ClientSettings",
    "CompletionRequest",
    "Connection",
    "HTTPConnection",
    "ImageRequest",
    "MockConnection",
    "configure_logging",
    "default_chat_request",
    "default_completion_request",
]
