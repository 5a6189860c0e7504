"""Public exceptions for the Trello SDK."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Classification of a failed dispatch."""

    CLIENT_LOGIC = "client_logic"
    TRANSPORT_RUNTIME = "transport_runtime"


class TrelloError(Exception):
    """Base exception for all Trello SDK errors."""


class TrelloHttpError(TrelloError):
    """A dispatch failed inside the transport.

    The kind tells a malformed request detected before anything left the
    process (CLIENT_LOGIC) apart from every other transport failure
    (TRANSPORT_RUNTIME). The original exception is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, kind: ErrorKind, code: int | None = None) -> None:
        super().__init__(message)
        self.kind = kind
        self.code = code

    @property
    def is_client_logic(self) -> bool:
        return self.kind is ErrorKind.CLIENT_LOGIC

    @property
    def is_transport_runtime(self) -> bool:
        return self.kind is ErrorKind.TRANSPORT_RUNTIME


class TrelloConfigError(TrelloError):
    """Configuration error (invalid option values, unsupported hooks)."""


class TrelloValidationError(TrelloError):
    """Validation error for request arguments."""
