"""Constants for the messaging API common package."""

__version__ = "0.1.0"

DEFAULT_TIMEOUT_SECONDS = 30.0

HEADER_CONTENT_TYPE = "Content-Type"
HEADER_RETRY_AFTER = "Retry-After"
CONTENT_TYPE_JSON = "application/json"

REQUEST_LOGGER_NAME = "messaging_api_common.request"
