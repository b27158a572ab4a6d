"""Conftest: aiohttp session stand-in for client tests.

The client only uses ``session.request(...)`` as an async context manager
and ``session.close()``, so a mock-backed fake is enough to drive it
without a network.
"""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


class FakeSession:
    """Minimal stand-in for ``aiohttp.ClientSession``."""

    def __init__(self) -> None:
        self.request = MagicMock()
        self.close = AsyncMock()
        self.respond(200, {})

    def respond(
        self,
        status: int = 200,
        data: Any = None,
        *,
        text: str | None = None,
        reason: str = "OK",
        headers: dict[str, str] | None = None,
    ) -> MagicMock:
        """Make every subsequent request yield a response with these fields."""
        resp = MagicMock()
        resp.status = status
        resp.reason = reason
        resp.headers = headers or {}
        resp.json = AsyncMock(return_value=data)
        if text is None:
            text = json.dumps(data) if data is not None else ""
        resp.text = AsyncMock(return_value=text)

        ctx = MagicMock()
        ctx.__aenter__ = AsyncMock(return_value=resp)
        ctx.__aexit__ = AsyncMock(return_value=False)
        self.request.return_value = ctx
        self.request.side_effect = None
        return resp

    def fail(self, error: BaseException) -> None:
        """Make every subsequent request raise ``error``."""
        self.request.side_effect = error

    @property
    def last_call(self) -> tuple[tuple[Any, ...], dict[str, Any]]:
        args, kwargs = self.request.call_args
        return args, kwargs


@pytest.fixture
def session() -> FakeSession:
    return FakeSession()
