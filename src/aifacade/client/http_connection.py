"""httpx-backed connection to the provider."""
import httpx
import structlog
from pydantic import ValidationError

from aifacade.client.base import Connection, ResponseT
from aifacade.exceptions import AIFacadeError
from aifacade.http_client import create_http_client, error_message, post_with_retries
from aifacade.logging import clear_request_context, set_request_context
from aifacade.schemas import ProviderRequest

log = structlog.get_logger(__name__)


class HTTPConnection(Connection):
    """Sends one authenticated JSON POST per call."""

    def __init__(
        self,
        api_key: str,
        timeout: float = 60.0,
        max_attempts: int = 1,
        client: httpx.Client | None = None,
    ) -> None:
        self._api_key = api_key
        self._max_attempts = max_attempts
        self._client = client or create_http_client(timeout=timeout)

    def _headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._api_key}",
        }

    def send_post(
        self, body: ProviderRequest, url: str, response_model: type[ResponseT]
    ) -> ResponseT:
        set_request_context()
        try:
            content = body.model_dump_json(exclude_none=True).encode("utf-8")
            log.debug("provider_request", url=url, kind=body.kind.value)
            try:
                resp = post_with_retries(
                    self._client,
                    url,
                    content=content,
                    headers=self._headers(),
                    attempts=self._max_attempts,
                )
            except httpx.HTTPError as e:
                log.warning("provider_error", url=url, error=str(e))
                raise AIFacadeError(str(e) or type(e).__name__) from e

            if not resp.is_success:
                message = error_message(resp)
                log.warning(
                    "provider_error",
                    url=url,
                    status_code=resp.status_code,
                    error=message,
                )
                raise AIFacadeError(message, status_code=resp.status_code)

            log.debug("provider_response", url=url, status_code=resp.status_code)
            try:
                return response_model.model_validate_json(resp.content)
            except ValidationError as e:
                raise AIFacadeError(
                    f"Malformed provider response: {e}", status_code=resp.status_code
                ) from e
        finally:
            clear_request_context()

    def close(self) -> None:
        self._client.close()
