"""Shared case conversion and HTTP plumbing for messaging API clients."""

from .const import __version__
from ._client import MessagingApiClient
from ._request import create_request_hook, default_on_request
from .case import (
    camel_case_keys,
    camel_case_keys_deep,
    map_keys,
    pascal_case_keys,
    pascal_case_keys_deep,
    snake_case_keys,
    snake_case_keys_deep,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from .exceptions import (
    ApiConnectionError,
    ApiResponseError,
    AuthenticationError,
    MessagingApiError,
    RateLimitError,
)
from .models import ConversionOptions, JsonValue, RequestPayload

__all__ = [
    "__version__",
    "MessagingApiClient",
    "create_request_hook",
    "default_on_request",
    "camel_case_keys",
    "camel_case_keys_deep",
    "map_keys",
    "pascal_case_keys",
    "pascal_case_keys_deep",
    "snake_case_keys",
    "snake_case_keys_deep",
    "to_camel_case",
    "to_pascal_case",
    "to_snake_case",
    "ApiConnectionError",
    "ApiResponseError",
    "AuthenticationError",
    "MessagingApiError",
    "RateLimitError",
    "ConversionOptions",
    "JsonValue",
    "RequestPayload",
]
