"""Outgoing request reporting."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

from .const import REQUEST_LOGGER_NAME
from .models import RequestPayload

_LOGGER = logging.getLogger(REQUEST_LOGGER_NAME)

OnRequest = Callable[[RequestPayload], None]
RequestHook = Callable[..., RequestPayload]


def default_on_request(request: RequestPayload) -> None:
    """Log the method, URL and body of an outgoing request at DEBUG level."""
    _LOGGER.debug("%s - %s", request.method, request.url)
    if request.body is not None and request.body not in (b"", ""):
        _LOGGER.debug("Outgoing request body:")
        if isinstance(request.body, bytes):
            _LOGGER.debug("%r", request.body)
        else:
            _LOGGER.debug("%s", json.dumps(request.body, indent=2, default=str))


def create_request_hook(on_request: OnRequest = default_on_request) -> RequestHook:
    """Build the hook the client calls right before sending a request.

    The hook normalizes its arguments into a :class:`RequestPayload`,
    hands it to ``on_request`` and returns it, so the caller can keep it
    around for error reporting.
    """

    def hook(
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
    ) -> RequestPayload:
        request = RequestPayload(
            method=method.upper(),
            url=url,
            headers=dict(headers or {}),
            body=body,
        )
        on_request(request)
        return request

    return hook
