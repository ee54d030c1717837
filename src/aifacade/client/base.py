"""Connection interface."""
from abc import ABC, abstractmethod
from typing import TypeVar

from aifacade.schemas import ProviderRequest, ProviderResponse

ResponseT = TypeVar("ResponseT", bound=ProviderResponse)


class Connection(ABC):
    @abstractmethod
    def send_post(
        self, body: ProviderRequest, url: str, response_model: type[ResponseT]
    ) -> ResponseT:
        """POST body as JSON to url and return the reply parsed as response_model.

        Raises AIFacadeError on transport failure or non-2xx status.
        """
        ...

    def close(self) -> None:
        pass

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
