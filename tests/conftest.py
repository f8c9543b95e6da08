"""Pytest configuration and fixtures.

Provides environment isolation, logging configuration, an in-memory
siteverify transport, and automatic API test skipping.
"""

from __future__ import annotations

from contextlib import suppress
from dataclasses import dataclass, field
import json
import logging
import os
from typing import Any
from urllib.parse import parse_qs

import httpx
import pytest

# =============================================================================
# Test Doubles
# =============================================================================


@dataclass
class FakeSiteverify:
    """In-memory siteverify endpoint for ``httpx.MockTransport``.

    Records each submitted form and replies with ``body`` (JSON-encoded unless
    it is already ``bytes``) and ``status_code``. Set ``raise_exc`` to
    simulate a transport failure.
    """

    body: dict[str, Any] | bytes = field(
        default_factory=lambda: {"success": True, "error-codes": []}
    )
    status_code: int = 200
    raise_exc: Exception | None = None
    forms: list[dict[str, str]] = field(default_factory=list)
    urls: list[str] = field(default_factory=list)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.urls.append(str(request.url))
        parsed = parse_qs(request.content.decode("utf-8"))
        self.forms.append({k: v[0] for k, v in parsed.items()})
        if self.raise_exc is not None:
            raise self.raise_exc
        content = (
            self.body
            if isinstance(self.body, bytes)
            else json.dumps(self.body).encode("utf-8")
        )
        return httpx.Response(
            self.status_code,
            content=content,
            headers={"content-type": "application/json"},
        )

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


@pytest.fixture
def siteverify() -> FakeSiteverify:
    """A fresh fake endpoint that accepts every token."""
    return FakeSiteverify()


# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_turnstile_env(request, monkeypatch):
    """Clear TURNSTILE_* env vars so tests never see a developer's secret.

    Opt-out: @pytest.mark.allow_env_pollution or @pytest.mark.api
    """
    if request.node.get_closest_marker("allow_env_pollution") or (
        "api" in request.node.keywords
    ):
        return

    for key in list(os.environ.keys()):
        if key.startswith("TURNSTILE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy third-party loggers."""
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


# =============================================================================
# Pytest Hooks
# =============================================================================

API_TESTS_REASON = "API tests require ENABLE_API_TESTS=1"


def _api_tests_enabled() -> bool:
    return bool(os.getenv("ENABLE_API_TESTS"))


def pytest_collection_modifyitems(items):
    """Automatically skip API tests when not explicitly enabled."""
    if _api_tests_enabled():
        return
    skip_api = pytest.mark.skip(reason=API_TESTS_REASON)
    for item in items:
        if "api" in item.keywords:
            item.add_marker(skip_api)
