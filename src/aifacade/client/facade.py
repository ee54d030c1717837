"""Client entry point: holds the current configs and the chat history."""
import threading
from collections.abc import Sequence

import httpx

from aifacade.client.base import Connection
from aifacade.client.http_connection import HTTPConnection
from aifacade.config import CHAT_PATH, COMPLETIONS_PATH, IMAGES_PATH, ClientSettings
from aifacade.exceptions import AIFacadeError
from aifacade.schemas import (
    ChatMessage,
    ChatRequest,
    CompletionRequest,
    ImageRequest,
    default_chat_request,
    default_completion_request,
)


def _endpoint(base_url: str, path: str) -> str:
    try:
        url = httpx.URL(base_url.rstrip("/") + path)
    except (httpx.InvalidURL, TypeError) as e:
        raise AIFacadeError(str(e)) from e
    if url.scheme not in ("http", "https") or not url.host:
        raise AIFacadeError(f"Invalid base URL: {base_url!r}")
    return str(url)


class AIClient:
    """Completion, chat and image generation against one provider account.

    Request configs are mutated in place on every call, and chat history
    grows with each exchange. Use one instance per conversation.
    """

    def __init__(
        self,
        api_key: str,
        *,
        settings: ClientSettings | None = None,
        connection: Connection | None = None,
    ) -> None:
        settings = settings or ClientSettings()
        self._completions_url = _endpoint(settings.base_url, COMPLETIONS_PATH)
        self._chat_url = _endpoint(settings.base_url, CHAT_PATH)
        self._images_url = _endpoint(settings.base_url, IMAGES_PATH)
        self._connection = connection or HTTPConnection(
            api_key,
            timeout=settings.timeout_seconds,
            max_attempts=settings.max_attempts,
        )
        self._chat_lock = threading.Lock()
        self._completions: CompletionRequest
        self._chat: ChatRequest
        self._image = ImageRequest()
        self.default_completions_config()
        self.default_chat_config()

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "AIClient":
        """Build a client using the api key from settings (AIFACADE_API_KEY)."""
        settings = settings or ClientSettings()
        if not settings.api_key:
            raise AIFacadeError("API key is not configured (set AIFACADE_API_KEY)")
        return cls(settings.api_key, settings=settings)

    @property
    def completions(self) -> CompletionRequest:
        return self._completions

    @property
    def chat_config(self) -> ChatRequest:
        return self._chat

    @property
    def image_config(self) -> ImageRequest:
        return self._image

    @property
    def history(self) -> tuple[ChatMessage, ...]:
        return tuple(self._chat.messages)

    def generate_text(self, prompt: str) -> str:
        self._completions.prompt = prompt
        resp = self._connection.send_post(
            self._completions, self._completions_url, self._completions.response_model
        )
        return resp.get_response()

    def generate_image(self, prompt: str) -> str:
        """Returns the image URL, or base64 data when response_format is b64_json."""
        self._image.prompt = prompt
        resp = self._connection.send_post(
            self._image, self._images_url, self._image.response_model
        )
        return resp.get_response()

    def chat(self, messages: str | Sequence[ChatMessage]) -> str:
        """Send messages with the full prior history and return the assistant reply.

        A plain string is sent as a single user message. Both the sent messages
        and the reply are appended to history.
        """
        if isinstance(messages, str):
            messages = [ChatMessage(role="user", content=messages)]
        with self._chat_lock:
            chat = self._chat
            chat.messages.extend(messages)
            resp = self._connection.send_post(chat, self._chat_url, chat.response_model)
            reply = resp.message
            chat.messages.append(reply)
        return reply.content

    def default_completions_config(self) -> None:
        self._completions = default_completion_request()

    def default_chat_config(self) -> None:
        """Reset chat parameters and clear history."""
        with self._chat_lock:
            self._chat = default_chat_request()

    def default_image_config(self) -> None:
        self._image = ImageRequest()

    def set_completions(self, completions: CompletionRequest) -> None:
        self._completions = completions

    def set_chat(self, chat: ChatRequest) -> None:
        with self._chat_lock:
            self._chat = chat

    def set_image(self, image: ImageRequest) -> None:
        self._image = image

    def close(self) -> None:
        self._connection.close()

    def __enter__(self) -> "AIClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
