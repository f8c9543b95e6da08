"""Result type: explicit success/failure values with Rust-style combinators.

A ``Result`` wraps exactly one of two frozen variants, ``Ok`` or ``Err``.
Every combinator is a thin composition over ``match``, so a failing result is
never passed to a success-typed callback and vice versa.

Example:
    from resultkit import err, ok

    def parse_port(raw: str) -> Result[int, str]:
        return ok(int(raw)) if raw.isdigit() else err(f"not a port: {raw!r}")

    parse_port("8080").map(lambda p: p + 1).unwrap_or(80)  # 8081
    parse_port("http").map(lambda p: p + 1).unwrap_or(80)  # 80
"""

from __future__ import annotations

import dataclasses
import enum
import inspect
from typing import TYPE_CHECKING, Any, ClassVar, Final, Literal, Never, cast, overload

from resultkit.control_flow import Break, Continue
from resultkit.errors import Panic

if TYPE_CHECKING:
    from collections.abc import Callable

    from resultkit.control_flow import ControlFlow


class Absent(enum.Enum):
    """Marker for "no payload" that cannot collide with a real ``None``."""

    NONE = "none"

    def __repr__(self) -> str:
        return "Result.none"

    def __bool__(self) -> bool:
        return False


#: Returned by ``Result.ok(True)`` / ``Result.err(True)`` for the inactive side.
NONE: Final = Absent.NONE


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[T]:
    """The success variant."""

    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """The failure variant."""

    value: E


@dataclasses.dataclass(frozen=True, slots=True, repr=False)
class Result[T, E]:
    """Either a success value of type ``T`` or a failure value of type ``E``.

    Build instances with :func:`ok` and :func:`err`. Results are immutable
    and compare by variant and payload.
    """

    inner: Ok[T] | Err[E]

    none: ClassVar[Absent] = NONE

    def __repr__(self) -> str:
        if isinstance(self.inner, Ok):
            return f"Result.ok({self.inner.value!r})"
        return f"Result.err({self.inner.value!r})"

    # --- Queries -----------------------------------------------------------

    def is_ok(self) -> bool:
        """Return True if the result is ``Ok``."""
        return isinstance(self.inner, Ok)

    def is_ok_and(self, f: Callable[[T], bool]) -> bool:
        """Return True if the result is ``Ok`` and its value satisfies ``f``.

        ``f`` is never called on an ``Err``.
        """
        return self.match(f, lambda _: False)

    def is_err(self) -> bool:
        """Return True if the result is ``Err``."""
        return isinstance(self.inner, Err)

    def is_err_and(self, f: Callable[[E], bool]) -> bool:
        """Return True if the result is ``Err`` and its error satisfies ``f``."""
        return self.match(lambda _: False, f)

    # --- Projections -------------------------------------------------------

    @overload
    def ok(self, include_none: Literal[False] = ...) -> T | None: ...
    @overload
    def ok(self, include_none: Literal[True]) -> T | Absent: ...
    def ok(self, include_none: bool = False) -> T | Absent | None:
        """Return the success value, or ``None`` on ``Err``.

        Pass ``include_none=True`` to get ``Result.none`` instead of ``None``
        on ``Err``; this tells an absent value apart from ``ok(None)``.
        """
        if isinstance(self.inner, Ok):
            return self.inner.value
        return NONE if include_none else None

    @overload
    def err(self, include_none: Literal[False] = ...) -> E | None: ...
    @overload
    def err(self, include_none: Literal[True]) -> E | Absent: ...
    def err(self, include_none: bool = False) -> E | Absent | None:
        """Return the error value, or ``None`` (``Result.none``) on ``Ok``."""
        if isinstance(self.inner, Err):
            return self.inner.value
        return NONE if include_none else None

    # --- Transforms --------------------------------------------------------

    def map[U](self, op: Callable[[T], U]) -> Result[U, E]:
        """Apply ``op`` to an ``Ok`` value; pass an ``Err`` through untouched."""
        return self.match(
            lambda value: ok(op(value)),
            lambda _: cast("Result[U, E]", self),
        )

    def map_or[U](self, default: U, f: Callable[[T], U]) -> U:
        """Return ``f(value)`` on ``Ok``, otherwise ``default``."""
        return self.match(f, lambda _: default)

    def map_or_else[U](self, default: Callable[[E], U], f: Callable[[T], U]) -> U:
        """Return ``f(value)`` on ``Ok``, otherwise ``default(error)``."""
        return self.match(f, default)

    def map_err[F](self, op: Callable[[E], F]) -> Result[T, F]:
        """Apply ``op`` to an ``Err`` value; pass an ``Ok`` through untouched."""
        return self.match(
            lambda _: cast("Result[T, F]", self),
            lambda error: err(op(error)),
        )

    def inspect(self, f: Callable[[T], object]) -> Result[T, E]:
        """Call ``f`` with the ``Ok`` value for its side effect; return self."""
        if isinstance(self.inner, Ok):
            f(self.inner.value)
        return self

    def inspect_err(self, f: Callable[[E], object]) -> Result[T, E]:
        """Call ``f`` with the ``Err`` value for its side effect; return self."""
        if isinstance(self.inner, Err):
            f(self.inner.value)
        return self

    def and_[U](self, res: Result[U, E]) -> Result[U, E]:
        """Return ``res`` if self is ``Ok``, otherwise self."""
        return self.match(
            lambda _: res,
            lambda _: cast("Result[U, E]", self),
        )

    def and_then[U](self, op: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Chain a fallible step onto an ``Ok``; short-circuit on ``Err``."""
        return self.match(op, lambda _: cast("Result[U, E]", self))

    def or_[F](self, res: Result[T, F]) -> Result[T, F]:
        """Return self if ``Ok``, otherwise ``res``."""
        return self.match(
            lambda _: cast("Result[T, F]", self),
            lambda _: res,
        )

    def or_else[F](self, op: Callable[[E], Result[T, F]]) -> Result[T, F]:
        """Recover from an ``Err`` with a fallible step; keep an ``Ok``."""
        return self.match(lambda _: cast("Result[T, F]", self), op)

    # --- Extraction --------------------------------------------------------

    def unwrap(self) -> T:
        """Return the ``Ok`` value.

        Raising here signals a bug at the call site, so prefer ``match``,
        ``unwrap_or`` or ``unwrap_or_else`` wherever an ``Err`` is possible.

        Raises:
            Panic: If the result is an ``Err``; the error is kept as the
                panic's cause.
        """

        def _panic(error: E) -> Never:
            panic = Panic("called `Result.unwrap()` on an `Err`", error)
            if isinstance(error, BaseException):
                raise panic from error
            raise panic

        return self.match(lambda value: value, _panic)

    def unwrap_or(self, default: T) -> T:
        """Return the ``Ok`` value or ``default``."""
        return self.match(lambda value: value, lambda _: default)

    def unwrap_or_else(self, default: Callable[[], T]) -> T:
        """Return the ``Ok`` value or the result of calling ``default()``."""
        return self.match(lambda value: value, lambda _: default())

    def or_raise(self) -> T:
        """Return the ``Ok`` value, or raise the ``Err`` payload itself.

        For handing a result to code that expects ordinary exceptions. A
        payload that is not an exception cannot be raised, so ``Panic`` is
        raised in its place with the payload as cause.
        """

        def _raise(error: E) -> Never:
            if isinstance(error, BaseException):
                raise error
            raise Panic(
                "called `Result.or_raise()` on an `Err` holding a non-exception value",
                error,
            )

        return self.match(lambda value: value, _raise)

    # --- Dispatch ----------------------------------------------------------

    def match[A](self, on_ok: Callable[[T], A], on_err: Callable[[E], A]) -> A:
        """Call exactly one handler for the active variant and return its value.

        Example:
            ok(123).match(lambda x: x, lambda _: 0)  # 123
            err("boom").match(lambda x: f"got {x}", lambda e: e)  # "boom"
        """
        if isinstance(self.inner, Ok):
            return on_ok(self.inner.value)
        return on_err(self.inner.value)

    async def awaited(self) -> Result[Any, Any]:
        """Resolve an awaitable payload, keeping the variant.

        A non-awaitable payload is passed through unchanged. An exception from
        the awaited payload propagates; it is not turned into an ``Err``.
        """
        value: Any = self.inner.value
        if inspect.isawaitable(value):
            value = await value
        if isinstance(self.inner, Ok):
            return ok(value)
        return err(value)

    def branch(self) -> ControlFlow[Result[Never, E], T]:
        """Split into ``Continue(value)`` on ``Ok`` or ``Break(self)`` on ``Err``.

        See :mod:`resultkit.control_flow` for the calling pattern.
        """
        return self.match(
            lambda value: Continue(value),
            lambda _: Break(cast("Result[Never, E]", self)),
        )

    def control_flow(self) -> ControlFlow[Result[Never, E], T]:
        """Alias of :meth:`branch`."""
        return self.branch()


def ok[T, E](value: T = None) -> Result[T, E]:  # type: ignore[assignment]
    """Build a success result. ``value`` may be omitted for "no value"."""
    return Result(Ok(value))


def err[T, E](error: E) -> Result[T, E]:
    """Build a failure result."""
    return Result(Err(error))
