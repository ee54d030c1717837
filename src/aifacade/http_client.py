"""HTTP client with timeout and opt-in transport retries."""
from typing import Any

import httpx
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)


def create_http_client(
    timeout: float = 60.0,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """Create a blocking HTTP client with a timeout and no transport-level retries."""
    return httpx.Client(
        timeout=httpx.Timeout(timeout),
        transport=transport or httpx.HTTPTransport(retries=0),
    )


def post_with_retries(
    client: httpx.Client,
    url: str,
    *,
    content: bytes,
    headers: dict[str, str],
    attempts: int = 1,
) -> httpx.Response:
    """POST and return the response whatever its status.

    Only transport errors are retried, and only when attempts > 1.
    """

    @retry(
        retry=retry_if_exception_type(httpx.TransportError),
        stop=stop_after_attempt(max(attempts, 1)),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    def _do() -> httpx.Response:
        return client.post(url, content=content, headers=headers)

    return _do()


def error_message(resp: httpx.Response) -> str:
    """Provider error text from a failed response."""
    try:
        data: Any = resp.json()
    except ValueError:
        data = None
    if isinstance(data, dict):
        err = data.get("error")
        if isinstance(err, dict) and err.get("message"):
            return str(err["message"])
        if isinstance(err, str) and err:
            return err
    text = resp.text.strip()
    return text or f"HTTP {resp.status_code}"
