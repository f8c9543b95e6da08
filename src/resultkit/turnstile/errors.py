"""Turnstile verification failure."""

from __future__ import annotations

from resultkit.errors import ResultKitError

_HINTS: dict[str, str] = {
    "missing-input-secret": "Pass a secret key or set TURNSTILE_SECRET_KEY.",
    "invalid-input-secret": "Check the secret key in the Cloudflare dashboard.",
    "missing-input-response": "Forward the cf-turnstile-response form field.",
    "invalid-input-response": "The token is malformed or expired; ask the user to retry.",
    "timeout-or-duplicate": "Tokens are single-use and expire after 300 seconds.",
}


class TurnstileError(ResultKitError):
    """Cloudflare answered ``success: false``.

    Returned inside ``Err``, not raised, by ``Turnstile.validate``.
    """

    def __init__(self, codes: list[str]) -> None:
        self.codes = list(codes)
        hint = next((_HINTS[c] for c in self.codes if c in _HINTS), None)
        super().__init__(
            "Cloudflare Turnstile returned error codes: '"
            + "', '".join(self.codes)
            + "'",
            hint=hint,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TurnstileError):
            return NotImplemented
        return self.codes == other.codes

    def __hash__(self) -> int:
        return hash(tuple(self.codes))
