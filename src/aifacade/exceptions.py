"""Errors raised by the client."""


class AIFacadeError(Exception):
    """Provider or transport failure.

    Carries the provider's error message when the reply had one, otherwise the
    raw body or the transport exception text.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message
