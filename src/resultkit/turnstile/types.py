"""Turnstile siteverify response schema."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

#: See https://developers.cloudflare.com/turnstile/get-started/server-side-validation/#error-codes
TurnstileErrorCode = Literal[
    "missing-input-secret",
    "invalid-input-secret",
    "missing-input-response",
    "invalid-input-response",
    "bad-request",
    "timeout-or-duplicate",
    "internal-error",
]


class TurnstileResponse(BaseModel):
    """A parsed siteverify response body.

    Both the success and failure shapes parse into this model; ``success``
    decides which ``Result`` variant the client returns. Fields Cloudflare
    adds later are kept as extras rather than rejected.
    """

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    success: bool
    #: Usually ``TurnstileErrorCode`` values; unknown codes are preserved.
    error_codes: list[str] = Field(default_factory=list, alias="error-codes")
    #: ISO timestamp of the challenge; success responses only.
    challenge_ts: str | None = None
    hostname: str | None = None
    action: str | None = None
    cdata: str | None = None
    metadata: dict[str, Any] | None = None
