"""Cloudflare Turnstile API wrapper returning ``Result`` values.

Example:
    from resultkit.turnstile import Turnstile

    async with Turnstile.with_always_passes_token() as turnstile:
        result = await turnstile.validate("XXXX.DUMMY.TOKEN.XXXX")

    result.match(
        lambda response: print("verified", response.challenge_ts),
        lambda error: print("rejected", error.codes),
    )
"""

from .client import Turnstile, TurnstileResult
from .config import ENDPOINT, TurnstileConfig
from .errors import TurnstileError
from .types import TurnstileErrorCode, TurnstileResponse

__all__ = [
    "ENDPOINT",
    "Turnstile",
    "TurnstileConfig",
    "TurnstileError",
    "TurnstileErrorCode",
    "TurnstileResponse",
    "TurnstileResult",
]
