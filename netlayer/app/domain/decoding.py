"""Response body decoding.

Success bodies are JSON with snake_case keys; they are converted to camelCase
before validation into the caller's target type. Error bodies are mined for
optional ``message`` / ``user_error_message`` strings and never raise.
"""
from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, TypeVar

from loguru import logger
from pydantic import TypeAdapter

from netlayer.app.constants import ERROR_BODY_MESSAGE_KEY, ERROR_BODY_USER_MESSAGE_KEY

T = TypeVar("T")


def convert_from_snake_case(key: str) -> str:
    """``user_error_message`` -> ``userErrorMessage``.

    Leading and trailing underscores are kept; keys without an inner
    underscore are returned unchanged.
    """
    if not key:
        return key
    stripped = key.strip("_")
    if not stripped or "_" not in stripped:
        return key
    leading = key[: len(key) - len(key.lstrip("_"))]
    trailing = key[len(key.rstrip("_")) :]
    words = [word for word in stripped.split("_") if word]
    camel = words[0] + "".join(word.capitalize() for word in words[1:])
    return f"{leading}{camel}{trailing}"


def convert_keys(value: Any) -> Any:
    """Recursively convert every object key in a decoded JSON value."""
    if isinstance(value, dict):
        return {convert_from_snake_case(k): convert_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [convert_keys(item) for item in value]
    return value


@lru_cache(maxsize=128)
def _adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode_body(data: bytes, target: type[T]) -> T:
    """Decode a JSON body into ``target``.

    Raises json.JSONDecodeError, pydantic.ValidationError or RecursionError
    (pathologically nested bodies) unchanged.
    """
    payload = json.loads(data)
    return _adapter_for(target).validate_python(convert_keys(payload))


def extract_error_fields(data: bytes) -> tuple[str, str | None]:
    """Best-effort ``(message, user_error_message)`` from an error body."""
    message = ""
    user_message: str | None = None
    try:
        payload = json.loads(data)
    except (ValueError, TypeError, RecursionError) as exc:
        logger.debug("error body is not JSON: {}", exc)
        return message, user_message

    if isinstance(payload, dict):
        candidate = payload.get(ERROR_BODY_MESSAGE_KEY)
        if isinstance(candidate, str):
            message = candidate
        candidate = payload.get(ERROR_BODY_USER_MESSAGE_KEY)
        if isinstance(candidate, str):
            user_message = candidate
    return message, user_message


def pretty_json(data: bytes | None) -> str:
    """Indented JSON for diagnostics; empty string when ``data`` is not JSON."""
    if not data:
        return ""
    try:
        return json.dumps(json.loads(data), indent=2, ensure_ascii=False)
    except (ValueError, TypeError, RecursionError):
        return ""
