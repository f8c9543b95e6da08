"""Configuration: frozen TurnstileConfig with environment resolution."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from resultkit.errors import ConfigurationError

load_dotenv()

ENDPOINT = "https://challenges.cloudflare.com/turnstile/v0/siteverify"

SECRET_KEY_ENV_VAR = "TURNSTILE_SECRET_KEY"


@dataclass(frozen=True)
class TurnstileConfig:
    """Immutable configuration for the Turnstile client.

    The secret key is auto-resolved from ``TURNSTILE_SECRET_KEY`` (a ``.env``
    file in the working directory is honoured).

    Example:
        config = TurnstileConfig()
        async with Turnstile.from_config(config) as turnstile:
            result = await turnstile.validate(token)
    """

    #: Auto-resolved from ``TURNSTILE_SECRET_KEY`` when *None*.
    secret_key: str | None = None
    endpoint: str = ENDPOINT
    timeout_s: float = 10.0

    def __post_init__(self) -> None:
        """Auto-resolve the secret key and validate configuration."""
        if self.timeout_s <= 0:
            raise ConfigurationError(
                f"timeout_s must be > 0, got {self.timeout_s}",
                hint="This bounds each siteverify request in seconds.",
            )
        if not self.endpoint:
            raise ConfigurationError(
                "endpoint must not be empty",
                hint=f"The Cloudflare endpoint is {ENDPOINT}",
            )

        if self.secret_key is None:
            object.__setattr__(self, "secret_key", os.environ.get(SECRET_KEY_ENV_VAR))

        if not self.secret_key:
            raise ConfigurationError(
                "Turnstile secret key required",
                hint=f"Set {SECRET_KEY_ENV_VAR} environment variable or pass secret_key=...",
            )

    def __str__(self) -> str:
        """Return a redacted, developer-friendly representation."""
        return (
            f"TurnstileConfig(secret_key={'[REDACTED]' if self.secret_key else None}, "
            f"endpoint={self.endpoint!r}, timeout_s={self.timeout_s})"
        )

    __repr__ = __str__
