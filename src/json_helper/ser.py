"""
Serialization functions with configuration.

Each function renders ``value`` as JSON, encoding every ``Bytes`` field
with the given Config. ``type_`` defaults to ``type(value)``; pass it to
tag a bare value, e.g. ``to_string(b"Hello", config, type_=Bytes)``.

    config = Config.default().set_bytes_hex().enable_hex_prefix()
    to_string(Transaction(nonce=1, data=b"\\x01\\x02"), config)
    # '{"nonce":1,"data":"0x0102"}'
"""

from __future__ import annotations
import logging
from typing import Any, BinaryIO, Optional

from pydantic_core import PydanticSerializationError

from .config import Config
from .runtime.adapter import get_adapter, make_context
from .runtime.errors import MarshalError

logger = logging.getLogger(__name__)

PRETTY_INDENT = 2


def _dump_json(value: Any, config: Optional[Config], type_: Any, indent: Optional[int]) -> bytes:
    target = type(value) if type_ is None else type_
    adapter = get_adapter(target)
    try:
        return adapter.dump_json(value, indent=indent, context=make_context(config))
    except PydanticSerializationError as e:
        logger.debug(f"Serialization of {target!r} failed: {e}")
        raise MarshalError(
            f"Failed to serialize {getattr(target, '__name__', repr(target))}",
            details={"reason": str(e)},
            cause=e,
        ) from e


def to_vec(value: Any, config: Optional[Config] = None, *, type_: Any = None) -> bytes:
    """
    Serialize a value to compact UTF-8 JSON bytes.

    Args:
        value: Value to serialize
        config: Byte rendering config (default: array of numbers)
        type_: Type to serialize ``value`` as

    Returns:
        JSON document as bytes

    Raises:
        MarshalError: If the value cannot be serialized
    """
    return _dump_json(value, config, type_, None)


def to_vec_pretty(value: Any, config: Optional[Config] = None, *, type_: Any = None) -> bytes:
    """Serialize a value to pretty-printed UTF-8 JSON bytes."""
    return _dump_json(value, config, type_, PRETTY_INDENT)


def to_string(value: Any, config: Optional[Config] = None, *, type_: Any = None) -> str:
    """
    Serialize a value to a compact JSON string.

    Raises:
        MarshalError: If the value cannot be serialized
    """
    return to_vec(value, config, type_=type_).decode("utf-8")


def to_string_pretty(value: Any, config: Optional[Config] = None, *, type_: Any = None) -> str:
    """Serialize a value to a pretty-printed JSON string."""
    return to_vec_pretty(value, config, type_=type_).decode("utf-8")


def to_writer(writer: BinaryIO, value: Any, config: Optional[Config] = None, *, type_: Any = None) -> None:
    """
    Serialize a value as compact JSON into a binary writer.

    The document is rendered fully before anything is written, so a
    failed conversion leaves the writer untouched.
    """
    writer.write(to_vec(value, config, type_=type_))


def to_writer_pretty(writer: BinaryIO, value: Any, config: Optional[Config] = None, *, type_: Any = None) -> None:
    """Serialize a value as pretty-printed JSON into a binary writer."""
    writer.write(to_vec_pretty(value, config, type_=type_))


def to_value(value: Any, config: Optional[Config] = None, *, type_: Any = None) -> Any:
    """
    Convert a value to a JSON-compatible Python object.

    Dicts, lists, strings, numbers, booleans and None only; ``Bytes``
    fields are already encoded per ``config``.
    """
    target = type(value) if type_ is None else type_
    adapter = get_adapter(target)
    try:
        return adapter.dump_python(value, mode="json", context=make_context(config))
    except PydanticSerializationError as e:
        logger.debug(f"Conversion of {target!r} to a JSON value failed: {e}")
        raise MarshalError(
            f"Failed to serialize {getattr(target, '__name__', repr(target))}",
            details={"reason": str(e)},
            cause=e,
        ) from e


__all__ = [
    "to_string",
    "to_string_pretty",
    "to_vec",
    "to_vec_pretty",
    "to_writer",
    "to_writer_pretty",
    "to_value",
]
