"""Identifier case conversion and JSON key transformation.

Messaging platforms speak snake_case on the wire while the clients expose
camelCase. The string converters wrap a conventional word-segmentation
transform with extra rules for digit runs, so keys such as ``has2fa`` and
``image1024`` travel as ``has_2fa`` and ``image_1024`` and come back intact.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Callable

from .models import ConversionOptions

_LOGGER = logging.getLogger(__name__)

_LOWER_UPPER = re.compile(r"([a-z0-9])([A-Z])")
_ACRONYM_WORD = re.compile(r"([A-Z])([A-Z][a-z])")
_DELIMITERS = re.compile(r"[^A-Za-z0-9]+")

_DIGIT_RUN = re.compile(r"[0-9]+")
_LEADING_DIGITS = re.compile(r"^[0-9]+")
_SINGLE_DIGIT = re.compile(r"^[0-9]$")

KeyConverter = Callable[[str], str]


# --------------------------------------------------------------------------- #
#  Plain transforms (word boundaries only)
# --------------------------------------------------------------------------- #


def _split_words(text: str) -> list[str]:
    text = _LOWER_UPPER.sub(r"\1 \2", text)
    text = _ACRONYM_WORD.sub(r"\1 \2", text)
    return [word for word in _DELIMITERS.split(text) if word]


def _capitalize_word(word: str, index: int) -> str:
    first, rest = word[0], word[1:].lower()
    # Digits past the first word keep an underscore in front.
    if index > 0 and "0" <= first <= "9":
        return f"_{first}{rest}"
    return first.upper() + rest


def plain_snake_case(text: str) -> str:
    """Join the words of ``text`` lowercased with underscores."""
    return "_".join(word.lower() for word in _split_words(text))


def plain_pascal_case(text: str) -> str:
    """Join the words of ``text`` with each word capitalized."""
    return "".join(
        _capitalize_word(word, index) for index, word in enumerate(_split_words(text))
    )


def plain_camel_case(text: str) -> str:
    """Like :func:`plain_pascal_case`, but the first word is all lowercase."""
    return "".join(
        word.lower() if index == 0 else _capitalize_word(word, index)
        for index, word in enumerate(_split_words(text))
    )


# --------------------------------------------------------------------------- #
#  Identifier converters
# --------------------------------------------------------------------------- #


def to_snake_case(text: str, *, transform: KeyConverter = plain_snake_case) -> str:
    """Convert an identifier to snake_case.

    Each digit run is split off from the text before it. Runs are located by
    their first occurrence in the text built so far, so a run repeated later
    in the identifier is not split again (``a1b1`` gives ``a_1b1``)::

        >>> to_snake_case("has2fa")
        'has_2fa'
        >>> to_snake_case("image1024")
        'image_1024'
    """
    for run in _DIGIT_RUN.findall(text):
        index = text.find(run)
        text = f"{text[:index]}_{text[index:]}"
    return transform(text)


def to_camel_case(text: str, *, transform: KeyConverter = plain_camel_case) -> str:
    """Convert an underscore-delimited identifier to camelCase.

    A segment starting with digits is glued to the previous segment, so
    ``has_2fa`` becomes ``has2fa`` rather than ``has_2fa``.
    """
    joined = ""
    for part in text.split("_"):
        if not joined:
            joined = part
        elif _LEADING_DIGITS.match(part):
            joined += part
        else:
            joined = f"{joined}_{part}"
    return transform(joined)


def to_pascal_case(text: str, *, transform: KeyConverter = plain_pascal_case) -> str:
    """Convert an identifier to PascalCase.

    A single trailing digit is split off as its own word before conversion.
    Only the last character is inspected.
    """
    if _SINGLE_DIGIT.match(text[-1:]):
        text = f"{text[:-1]}_{text[-1]}"
    return transform(text)


# --------------------------------------------------------------------------- #
#  Key mapping
# --------------------------------------------------------------------------- #


def map_keys(
    data: Any,
    convert: KeyConverter,
    options: ConversionOptions | None = None,
) -> Any:
    """Return a copy of ``data`` with its mapping keys passed through ``convert``.

    Keys keep the source's iteration order. When two keys convert to the same
    name the later one wins. With ``options.deep`` the conversion descends
    into nested dicts and into dicts held by lists and tuples; sequence
    indices are never renamed. Sequences passed in directly are always
    walked, and the dicts inside them follow the same ``deep`` setting.
    Any other value is returned unchanged. The input is never mutated.
    """
    deep = options.deep if options is not None else False
    return _map_value(data, convert, deep, {})


def _map_value(value: Any, convert: KeyConverter, deep: bool, seen: dict[int, Any]) -> Any:
    if isinstance(value, dict):
        return _map_mapping(value, convert, deep, seen)
    if isinstance(value, list):
        return _map_list(value, convert, deep, seen)
    if isinstance(value, tuple):
        return tuple(_map_value(item, convert, deep, seen) for item in value)
    return value


def _map_mapping(
    mapping: dict[Any, Any],
    convert: KeyConverter,
    deep: bool,
    seen: dict[int, Any],
) -> dict[Any, Any]:
    if id(mapping) in seen:
        return seen[id(mapping)]

    result: dict[Any, Any] = {}
    seen[id(mapping)] = result
    for key, value in mapping.items():
        new_key = convert(key) if isinstance(key, str) else key
        if new_key in result:
            _LOGGER.debug("Key %r overwrites an earlier key converted to %r", key, new_key)
        result[new_key] = _map_value(value, convert, deep, seen) if deep else value
    return result


def _map_list(
    items: list[Any],
    convert: KeyConverter,
    deep: bool,
    seen: dict[int, Any],
) -> list[Any]:
    if id(items) in seen:
        return seen[id(items)]

    result: list[Any] = []
    seen[id(items)] = result
    result.extend(_map_value(item, convert, deep, seen) for item in items)
    return result


def snake_case_keys(data: Any, *, deep: bool = False) -> Any:
    """Convert mapping keys to snake_case."""
    return map_keys(data, to_snake_case, ConversionOptions(deep=deep))


def snake_case_keys_deep(data: Any) -> Any:
    """Convert mapping keys to snake_case at every depth."""
    return snake_case_keys(data, deep=True)


def camel_case_keys(data: Any, *, deep: bool = False) -> Any:
    """Convert mapping keys to camelCase."""
    return map_keys(data, to_camel_case, ConversionOptions(deep=deep))


def camel_case_keys_deep(data: Any) -> Any:
    """Convert mapping keys to camelCase at every depth."""
    return camel_case_keys(data, deep=True)


def pascal_case_keys(data: Any, *, deep: bool = False) -> Any:
    """Convert mapping keys to PascalCase."""
    return map_keys(data, to_pascal_case, ConversionOptions(deep=deep))


def pascal_case_keys_deep(data: Any) -> Any:
    """Convert mapping keys to PascalCase at every depth."""
    return pascal_case_keys(data, deep=True)
