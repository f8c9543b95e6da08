"""Break/Continue signals for early-return emulation.

``Result.branch()`` returns one of these so a caller can write the Python
analogue of Rust's ``?`` operator::

    def parse_port(raw: str) -> Result[int, str]:
        flow = read_setting(raw).branch()
        if flow.is_break:
            return flow.value
        port = flow.value
        ...

or, with structural pattern matching::

    match read_setting(raw).branch():
        case Break(residual):
            return residual
        case Continue(port):
            ...

Neither class transfers control by itself; acting on ``is_break`` is the
caller's job.
"""

from __future__ import annotations

import dataclasses
from typing import ClassVar, Literal, Protocol, runtime_checkable


@dataclasses.dataclass(frozen=True, slots=True)
class Break[B]:
    """The caller should stop and return ``value``."""

    value: B
    is_break: ClassVar[Literal[True]] = True


@dataclasses.dataclass(frozen=True, slots=True)
class Continue[C]:
    """The caller should carry on using ``value``."""

    value: C
    is_break: ClassVar[Literal[False]] = False


type ControlFlow[B, C] = Break[B] | Continue[C]


@runtime_checkable
class Try[R, O](Protocol):
    """Types that can be short-circuited with ``branch()``."""

    def branch(self) -> ControlFlow[R, O]: ...


@runtime_checkable
class ToControlFlow[B, C](Protocol):
    """Types convertible into a ``ControlFlow`` signal."""

    def control_flow(self) -> ControlFlow[B, C]: ...
