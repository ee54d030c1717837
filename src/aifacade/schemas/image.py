"""Image generation request/response."""
from typing import ClassVar, Literal

from pydantic import BaseModel, Field

from aifacade.schemas.base import (
    ProviderRequest,
    ProviderResponse,
    RequestKind,
    first_or_raise,
    register_response,
)


class ImageRequest(ProviderRequest):
    kind: ClassVar[RequestKind] = RequestKind.IMAGE

    prompt: str = ""
    n: int = 1
    size: str = "1024x1024"
    response_format: Literal["url", "b64_json"] = "url"
    user: str | None = None


class ImageData(BaseModel):
    url: str | None = None
    b64_json: str | None = None
    revised_prompt: str | None = None


@register_response
class ImageResponse(ProviderResponse):
    kind: ClassVar[RequestKind] = RequestKind.IMAGE

    created: int | None = None
    data: list[ImageData] = Field(default_factory=list)

    def get_response(self) -> str:
        item = first_or_raise(self.data, "image data")
        return item.url or item.b64_json or ""
