"""Cloudflare Turnstile siteverify client."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar, Self

import httpx
from pydantic import ValidationError

from resultkit.errors import APIError
from resultkit.result import Result, err, ok
from resultkit.turnstile.config import ENDPOINT
from resultkit.turnstile.errors import TurnstileError
from resultkit.turnstile.types import TurnstileResponse

if TYPE_CHECKING:
    from types import TracebackType

    from resultkit.turnstile.config import TurnstileConfig

logger = logging.getLogger(__name__)

type TurnstileResult[T] = Result[T, TurnstileError]


class Turnstile:
    """Server-side validation of Turnstile tokens.

    Example:
        async def handle_post(form, headers):
            async with Turnstile(SECRET_KEY) as turnstile:
                result = await turnstile.validate(
                    form["cf-turnstile-response"],
                    ip=headers.get("CF-Connecting-IP"),
                )
            return result.match(
                lambda response: f"welcome from {response.hostname}",
                lambda error: f"rejected: {error.codes}",
            )
    """

    ENDPOINT: ClassVar[str] = ENDPOINT

    # Cloudflare's published test secrets.
    ALWAYS_PASSES_SECRET: ClassVar[str] = "1x0000000000000000000000000000000AA"
    ALWAYS_FAILS_SECRET: ClassVar[str] = "2x0000000000000000000000000000000AA"
    ALREADY_SPENT_SECRET: ClassVar[str] = "3x0000000000000000000000000000000AA"

    def __init__(
        self,
        secret_key: str,
        *,
        endpoint: str = ENDPOINT,
        timeout_s: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize with a secret key from the Cloudflare dashboard.

        An injected ``client`` is used as-is and never closed by this object.
        """
        self.secret_key = secret_key
        self.endpoint = endpoint
        self.timeout_s = timeout_s
        self._client = client
        self._owns_client = client is None

    @classmethod
    def from_config(
        cls, config: TurnstileConfig, *, client: httpx.AsyncClient | None = None
    ) -> Turnstile:
        """Build a client from a resolved ``TurnstileConfig``."""
        assert config.secret_key is not None  # resolved in __post_init__
        return cls(
            config.secret_key,
            endpoint=config.endpoint,
            timeout_s=config.timeout_s,
            client=client,
        )

    @classmethod
    def with_always_passes_token(cls, **kwargs: object) -> Turnstile:
        """Client whose secret makes every token validate successfully."""
        return cls(cls.ALWAYS_PASSES_SECRET, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def with_always_fails_token(cls, **kwargs: object) -> Turnstile:
        """Client whose secret makes every token fail validation."""
        return cls(cls.ALWAYS_FAILS_SECRET, **kwargs)  # type: ignore[arg-type]

    @classmethod
    def with_already_spent_error_token(cls, **kwargs: object) -> Turnstile:
        """Client whose secret yields a ``timeout-or-duplicate`` error."""
        return cls(cls.ALREADY_SPENT_SECRET, **kwargs)  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Turnstile(secret_key=[REDACTED], endpoint={self.endpoint!r})"

    def _get_client(self) -> httpx.AsyncClient:
        """Lazily initialize and return the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout_s)
            self._owns_client = True
        return self._client

    async def validate(
        self,
        token: str,
        ip: str | None = None,
        idempotency_key: str | None = None,
    ) -> TurnstileResult[TurnstileResponse]:
        """Verify a token produced by the Turnstile widget.

        Args:
            token: The ``cf-turnstile-response`` value submitted by the browser.
            ip: Optional visitor IP (e.g. the ``CF-Connecting-IP`` header).
            idempotency_key: Optional UUID that lets the same token be
                re-verified without a ``timeout-or-duplicate`` error.

        Returns:
            ``Ok(response)`` when Cloudflare reports success, otherwise
            ``Err(TurnstileError)`` carrying the reported error codes.

        Raises:
            APIError: The endpoint could not be reached or its reply could
                not be parsed.
        """
        form = {"secret": self.secret_key, "response": token}
        if ip:
            form["remoteip"] = ip
        if idempotency_key:
            form["idempotency_key"] = idempotency_key

        response = await self.request(form)

        if response.success:
            logger.debug("Turnstile token accepted (hostname=%s)", response.hostname)
            return ok(response)
        logger.debug("Turnstile token rejected: %s", response.error_codes)
        return err(TurnstileError(response.error_codes))

    async def request(self, form: dict[str, str]) -> TurnstileResponse:
        """POST ``form`` to the siteverify endpoint and parse the reply."""
        client = self._get_client()
        try:
            response = await client.post(self.endpoint, data=form)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise APIError(
                f"Turnstile siteverify returned HTTP {status}",
                hint="Cloudflare may be degraded; the token was not verified.",
                status_code=status,
            ) from e
        except httpx.RequestError as e:
            raise APIError(
                f"Turnstile siteverify request failed: {e}",
                hint="Check network connectivity to challenges.cloudflare.com.",
            ) from e

        try:
            return TurnstileResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise APIError(
                "Turnstile siteverify returned an unparseable body",
                status_code=response.status_code,
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this object created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
