"""Base HTTP client shared by the messaging platform SDKs."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from ._request import OnRequest, create_request_hook, default_on_request
from .case import camel_case_keys_deep, snake_case_keys_deep
from .const import (
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT_SECONDS,
    HEADER_CONTENT_TYPE,
    HEADER_RETRY_AFTER,
)
from .exceptions import (
    ApiConnectionError,
    ApiResponseError,
    AuthenticationError,
    RateLimitError,
)
from .models import RequestPayload

_LOGGER = logging.getLogger(__name__)


class MessagingApiClient:
    """Async JSON client for a messaging platform API.

    Usage::

        async with MessagingApiClient("https://api.example.com/v2") as client:
            profile = await client.async_get("/bot/profile")

    Outgoing JSON bodies are converted to snake_case keys before they are
    sent; incoming JSON responses are converted to camelCase keys. Platform
    clients subclass this and add their endpoints.

    If no session is provided, the client creates and manages its own.
    The caller is responsible for calling ``async_close()`` when done
    (or use the client as an async context manager).
    """

    def __init__(
        self,
        base_url: str,
        session: aiohttp.ClientSession | None = None,
        *,
        headers: dict[str, str] | None = None,
        on_request: OnRequest = default_on_request,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self._session = session or aiohttp.ClientSession()
        self._headers = {HEADER_CONTENT_TYPE: CONTENT_TYPE_JSON, **(headers or {})}
        self._hook = create_request_hook(on_request)
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def __aenter__(self) -> MessagingApiClient:
        return self

    async def __aexit__(self, *_: Any) -> None:
        await self.async_close()

    @property
    def base_url(self) -> str:
        return self._base_url

    async def async_close(self) -> None:
        """Close the HTTP session if the client owns it."""
        if self._owns_session:
            await self._session.close()

    # ------------------------------------------------------------------ #
    #  Verbs
    # ------------------------------------------------------------------ #

    async def async_get(self, path: str, *, params: dict[str, str] | None = None) -> Any:
        return await self.async_request("GET", path, params=params)

    async def async_post(self, path: str, json_body: Any = None) -> Any:
        return await self.async_request("POST", path, json_body=json_body)

    async def async_put(self, path: str, json_body: Any = None) -> Any:
        return await self.async_request("PUT", path, json_body=json_body)

    async def async_delete(self, path: str) -> Any:
        return await self.async_request("DELETE", path)

    # ------------------------------------------------------------------ #
    #  Internal HTTP layer
    # ------------------------------------------------------------------ #

    def build_url(self, path: str) -> str:
        """Join ``path`` onto the base URL. Absolute URLs are returned as-is."""
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    async def async_request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json_body: Any = None,
    ) -> Any:
        """Execute an API request with key conversion and error mapping.

        Raises:
            AuthenticationError: On 401/403 responses.
            RateLimitError: On 429 responses.
            ApiResponseError: On other non-2xx responses.
            ApiConnectionError: On network errors and timeouts.
        """
        url = self.build_url(path)
        body = snake_case_keys_deep(json_body) if json_body is not None else None
        request = self._hook(method, url, self._headers, body)

        kwargs: dict[str, Any] = {"headers": request.headers, "timeout": self._timeout}
        if params:
            kwargs["params"] = params
        if body is not None:
            kwargs["json"] = body

        try:
            async with self._session.request(request.method, url, **kwargs) as resp:
                if resp.status == 204:
                    return None

                if resp.status >= 400:
                    raise await self._error_from_response(resp, request)

                data = await resp.json()
                return camel_case_keys_deep(data)

        except (aiohttp.ClientError, asyncio.TimeoutError) as err:
            raise ApiConnectionError(
                f"Connection error: {request.method} {url}: {err}"
            ) from err

    async def _error_from_response(
        self,
        resp: aiohttp.ClientResponse,
        request: RequestPayload,
    ) -> ApiResponseError:
        text = await resp.text()
        try:
            response_data: Any = json.loads(text)
        except ValueError:
            response_data = text

        details: dict[str, Any] = {
            "status_code": resp.status,
            "reason": resp.reason,
            "request": request,
            "response_data": response_data,
        }

        if resp.status in (401, 403):
            error: ApiResponseError = AuthenticationError(
                f"Authentication failed: HTTP {resp.status}", **details
            )
        elif resp.status == 429:
            error = RateLimitError(
                retry_after=_parse_retry_after(resp.headers.get(HEADER_RETRY_AFTER)),
                **details,
            )
        else:
            error = ApiResponseError(f"API error: HTTP {resp.status} - {text}", **details)

        _LOGGER.debug("Request failed:\n%s", error.format_details())
        return error


def _parse_retry_after(value: str | None) -> float | None:
    """Parse a delay-seconds ``Retry-After`` header; HTTP dates are ignored."""
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None
