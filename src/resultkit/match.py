"""Two-arm ``match`` dispatch as a structural interface."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Callable


@runtime_checkable
class Match[L, R](Protocol):
    """A two-variant union that dispatches to one handler per variant.

    Implementations call exactly one arm, exactly once, and return its value.
    """

    def match[A](self, on_ok: Callable[[L], A], on_err: Callable[[R], A]) -> A: ...
