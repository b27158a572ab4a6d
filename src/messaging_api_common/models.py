"""Data models shared by the case converter and the HTTP layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

JsonValue = Union[
    None, bool, int, float, str, List["JsonValue"], Dict[str, "JsonValue"]
]


@dataclass(frozen=True)
class ConversionOptions:
    """Options for key mapping.

    Attributes:
        deep: Recurse into nested mappings and sequences.
    """

    deep: bool = False


@dataclass(frozen=True)
class RequestPayload:
    """An outgoing request as seen by the request hook."""

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
