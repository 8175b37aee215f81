"""
Deserialization functions with configuration.

Each function parses JSON into ``type_``, decoding every ``Bytes`` field.
A byte field accepts an array of numbers, a hex string (with or without
``0x``) or Base64 in either alphabet, whatever ``config`` selects; the
selected format is only tried first.
"""

from __future__ import annotations
import logging
from typing import Any, IO, Optional, Type, TypeVar, Union

from pydantic import ValidationError

from .config import Config
from .runtime.adapter import get_adapter, make_context
from .runtime.errors import ErrorCode, UnmarshalError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _unmarshal_error(e: ValidationError, type_: Any) -> UnmarshalError:
    errors = e.errors(include_url=False, include_context=False)
    code = ErrorCode.UNMARSHAL_ERROR
    if any(err.get("type") == "json_invalid" for err in errors):
        code = ErrorCode.INVALID_JSON

    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ())) or "<root>"
    message = f"Failed to deserialize {getattr(type_, '__name__', repr(type_))} at {location}: {first.get('msg', e)}"
    logger.debug(message)
    return UnmarshalError(message, code, details={"errors": errors}, cause=e)


def from_str(text: str, type_: Type[T], config: Optional[Config] = None) -> T:
    """
    Deserialize a JSON string into ``type_``.

    Args:
        text: JSON document
        type_: Target type (a pydantic model, a dataclass, ``Bytes``, ...)
        config: Byte rendering config (default: array of numbers)

    Returns:
        The validated value

    Raises:
        UnmarshalError: On malformed JSON, a type mismatch or an undecodable
            byte field; ``details["errors"]`` lists each failure with its
            location
    """
    try:
        return get_adapter(type_).validate_json(text, context=make_context(config))
    except ValidationError as e:
        raise _unmarshal_error(e, type_) from e


def from_slice(data: Union[bytes, bytearray], type_: Type[T], config: Optional[Config] = None) -> T:
    """Deserialize UTF-8 JSON bytes into ``type_``."""
    try:
        return get_adapter(type_).validate_json(bytes(data), context=make_context(config))
    except ValidationError as e:
        raise _unmarshal_error(e, type_) from e


def from_reader(reader: IO, type_: Type[T], config: Optional[Config] = None) -> T:
    """
    Deserialize JSON read from a binary or text reader into ``type_``.

    The reader is consumed to its end.
    """
    data = reader.read()
    if isinstance(data, str):
        return from_str(data, type_, config)
    return from_slice(data, type_, config)


def from_value(value: Any, type_: Type[T], config: Optional[Config] = None) -> T:
    """
    Deserialize an already parsed JSON value (dicts, lists, scalars) into ``type_``.
    """
    try:
        return get_adapter(type_).validate_python(value, context=make_context(config))
    except ValidationError as e:
        raise _unmarshal_error(e, type_) from e


__all__ = ["from_str", "from_slice", "from_reader", "from_value"]
