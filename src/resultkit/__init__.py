"""resultkit: Rust-style Result values for Python, plus a Turnstile client.

Public API:
    - Result, ok(), err(): The success/failure value type and its factories
    - Break, Continue, ControlFlow: Early-return signals from Result.branch()
    - Panic: Raised by Result.unwrap() on an Err
    - resultkit.turnstile: Cloudflare Turnstile verification returning Results
"""

from __future__ import annotations

import logging

from resultkit.control_flow import Break, Continue, ControlFlow, ToControlFlow, Try
from resultkit.errors import APIError, ConfigurationError, Panic, ResultKitError
from resultkit.match import Match
from resultkit.result import NONE, Absent, Err, Ok, Result, err, ok

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("resultkit")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("resultkit").addHandler(logging.NullHandler())

__all__ = [
    "NONE",
    "APIError",
    "Absent",
    "Break",
    "ConfigurationError",
    "Continue",
    "ControlFlow",
    "Err",
    "Match",
    "Ok",
    "Panic",
    "Result",
    "ResultKitError",
    "ToControlFlow",
    "Try",
    "err",
    "ok",
]
