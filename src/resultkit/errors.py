"""Exception hierarchy for resultkit."""

from __future__ import annotations

from typing import Any


class ResultKitError(Exception):
    """Base exception for all resultkit library errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultKitError):
    """Configuration validation or resolution failed."""


class APIError(ResultKitError):
    """A remote call failed before producing a usable response.

    Transport faults are raised, not returned as ``Err``: an ``Err`` always
    means the remote service answered and said no.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.status_code = status_code


class Panic(Exception):  # noqa: N818
    """Raised by ``Result.unwrap()`` on an ``Err``.

    A panic marks a programmer error at the call site, so it is kept outside
    ``ResultKitError``: handlers for library failures never catch it.
    ``cause`` holds the ``Err`` payload whatever its type; when the payload is
    an exception it is also chained as ``__cause__``.
    """

    def __init__(self, message: str, cause: Any) -> None:
        super().__init__(message)
        self.cause = cause
