"""Exception hierarchy for messaging API clients."""

from __future__ import annotations

import json
from typing import Any

from .models import RequestPayload


def _indent(text: str) -> str:
    return "\n".join(f"  {line}" if line else "" for line in text.split("\n"))


def _decode_body(body: Any) -> Any:
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if isinstance(body, str):
        try:
            return json.loads(body)
        except ValueError:
            return body
    return body


def _dump(data: Any) -> str:
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


class MessagingApiError(Exception):
    """Base exception for all messaging API errors."""


class ApiConnectionError(MessagingApiError):
    """API is unreachable (network error, DNS, timeout)."""


class ApiResponseError(MessagingApiError):
    """API returned an error response.

    Attributes:
        status_code: HTTP status code, if available.
        reason: HTTP reason phrase, if available.
        request: The request that failed, as reported to the request hook.
        response_data: Decoded response body (JSON or text), if any.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        reason: str | None = None,
        request: RequestPayload | None = None,
        response_data: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.request = request
        self.response_data = response_data

    def format_details(self) -> str:
        """Render the error with the failed request and response.

        Sections without content (no request, no body, no response data)
        are omitted.
        """
        sections = [f"Error Message -\n{_indent(str(self))}"]

        if self.request is not None:
            sections.append(
                f"Request -\n  {self.request.method.upper()} {self.request.url}"
            )
            if self.request.body:
                body = _decode_body(self.request.body)
                sections.append(f"Request Data -\n{_indent(_dump(body))}")

        if self.status_code is not None:
            status_line = f"{self.status_code} {self.reason or ''}".rstrip()
            sections.append(f"Response -\n  {status_line}")
            if self.response_data:
                sections.append(f"Response Data -\n{_indent(_dump(self.response_data))}")

        return "\n\n".join(sections)


class AuthenticationError(ApiResponseError):
    """API rejected the credentials (401/403)."""


class RateLimitError(ApiResponseError):
    """API returned 429 Too Many Requests.

    Attributes:
        retry_after: Seconds to wait before retrying, if provided by the server.
    """

    def __init__(
        self,
        message: str = "Rate limited",
        *,
        status_code: int = 429,
        retry_after: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, status_code=status_code, **kwargs)
        self.retry_after = retry_after
