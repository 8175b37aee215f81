"""
Byte Format Codec

Converts a raw byte sequence to its JSON representation under a Config and
back. Encoding is total. Decoding accepts any of the representations so a
document written under one byte format can be read under another:

- a JSON array of integers in [0, 255]
- a hex string, with or without ``0x``, digits in any case
- a standard or URL-safe Base64 string with padding

String decoding tries the configured alphabet first, then hex, standard
Base64 and URL-safe Base64, in that order. EIP-55 casing is never checked.
"""

from __future__ import annotations
import base64
import binascii
import logging
import re
from typing import Any, Callable, List, Optional, Tuple, Union

from ..config import BytesFormat, Config
from ..runtime.errors import BytesDecodeError, MarshalError
from .checksum import to_checksum_hex

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]
JsonBytes = Union[List[int], str]

_BASE64_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")
_BASE64_URL_SAFE_RE = re.compile(r"[A-Za-z0-9\-_]*={0,2}")


def encode_hex(value: BytesLike, prefix: bool = False, eip55: bool = False) -> str:
    """
    Encode bytes as lowercase hex, two digits per byte.

    Args:
        value: Bytes to encode
        prefix: Prepend ``0x``
        eip55: Apply EIP-55 checksum casing to the digits

    Returns:
        Hex string
    """
    digits = bytes(value).hex()
    if eip55:
        digits = to_checksum_hex(digits)
    return "0x" + digits if prefix else digits


def decode_hex(text: str) -> bytes:
    """
    Decode a hex string; an optional ``0x``/``0X`` prefix is stripped.

    Raises:
        BytesDecodeError: On odd length or a non-hex character
    """
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    if len(digits) % 2:
        raise BytesDecodeError(f"odd-length hex string ({len(digits)} digits)", text)
    try:
        return binascii.unhexlify(digits)
    except ValueError as e:
        raise BytesDecodeError(f"invalid hex string: {e}", text, cause=e) from e


def encode_base64(value: BytesLike, url_safe: bool = False) -> str:
    """Encode bytes as padded standard or URL-safe Base64."""
    if url_safe:
        return base64.urlsafe_b64encode(bytes(value)).decode("ascii")
    return base64.b64encode(bytes(value)).decode("ascii")


def decode_base64(text: str, url_safe: bool = False) -> bytes:
    """
    Decode padded Base64 text in exactly one alphabet.

    Characters of the other alphabet (``+/`` vs ``-_``) are rejected, as are
    non-zero bits in the last symbol: only the canonical encoding of the
    decoded bytes is accepted.

    Raises:
        BytesDecodeError: On a character outside the alphabet, bad padding
            or non-canonical trailing bits
    """
    pattern = _BASE64_URL_SAFE_RE if url_safe else _BASE64_RE
    alphabet = "base64 url-safe" if url_safe else "base64"
    if not pattern.fullmatch(text):
        raise BytesDecodeError(f"invalid {alphabet} character", text)
    if len(text) % 4 or text.startswith("="):
        raise BytesDecodeError(f"invalid {alphabet} padding", text)
    try:
        if url_safe:
            result = base64.b64decode(text, altchars=b"-_", validate=True)
        else:
            result = base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise BytesDecodeError(f"invalid {alphabet} string: {e}", text, cause=e) from e
    if encode_base64(result, url_safe=url_safe) != text:
        raise BytesDecodeError(f"non-canonical {alphabet} trailing bits", text)
    return result


def encode_bytes(value: BytesLike, config: Optional[Config] = None) -> JsonBytes:
    """
    Encode bytes to their JSON representation.

    Args:
        value: Bytes to encode
        config: Conversion config (default: array of numbers)

    Returns:
        List of ints for the default format, a string otherwise

    Raises:
        MarshalError: If value is not bytes-like
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise MarshalError(f"Expected a byte sequence, got {type(value).__name__}",
                           details={"value": repr(value)})
    config = config or Config()

    if config.bytes_format == BytesFormat.HEX:
        return encode_hex(value, prefix=config.hex_prefix, eip55=config.hex_eip55)
    elif config.bytes_format == BytesFormat.BASE64:
        return encode_base64(value)
    elif config.bytes_format == BytesFormat.BASE64_URL_SAFE:
        return encode_base64(value, url_safe=True)
    else:
        return list(bytes(value))


def _decode_array(node: list) -> bytes:
    for index, item in enumerate(node):
        if isinstance(item, bool) or not isinstance(item, int):
            raise BytesDecodeError(
                f"array element {index} is {type(item).__name__}, expected an integer",
                node, details={"index": index, "element": item},
            )
        if not 0 <= item <= 255:
            raise BytesDecodeError(
                f"array element {index} is {item}, out of byte range [0, 255]",
                node, details={"index": index, "element": item},
            )
    return bytes(node)


def _decode_unprefixed_hex(text: str) -> bytes:
    if text[:2] in ("0x", "0X"):
        raise BytesDecodeError("prefixed string is not plain hex", text)
    return decode_hex(text)


_FALLBACKS: Tuple[Tuple[str, Callable[[str], bytes]], ...] = (
    ("hex", _decode_unprefixed_hex),
    ("base64", decode_base64),
    ("base64_url_safe", lambda text: decode_base64(text, url_safe=True)),
)

_PREFERRED = {
    BytesFormat.HEX: ("hex", decode_hex),
    BytesFormat.BASE64: ("base64", decode_base64),
    BytesFormat.BASE64_URL_SAFE: ("base64_url_safe", lambda text: decode_base64(text, url_safe=True)),
}


def _decode_string(text: str, config: Config) -> bytes:
    failures = {}

    preferred = _PREFERRED.get(config.bytes_format)
    if preferred is not None:
        name, decoder = preferred
        try:
            return decoder(text)
        except BytesDecodeError as e:
            failures[name] = e.reason

    if text[:2] in ("0x", "0X"):
        try:
            return decode_hex(text)
        except BytesDecodeError as e:
            logger.debug(f"Rejected 0x-prefixed byte string: {e.reason}")
            raise

    for name, decoder in _FALLBACKS:
        if name in failures:
            continue
        try:
            result = decoder(text)
        except BytesDecodeError as e:
            failures[name] = e.reason
            continue
        logger.debug(f"Decoded byte string as {name}")
        return result

    logger.debug(f"No byte format matched string of length {len(text)}")
    raise BytesDecodeError("string is not valid hex, base64 or base64 url-safe", text,
                           details={"attempts": failures})


def decode_bytes(node: Any, config: Optional[Config] = None) -> bytes:
    """
    Decode a JSON node into bytes.

    Args:
        node: Parsed JSON value (a list of ints or a string)
        config: Conversion config; only decides which alphabet is tried first

    Returns:
        Decoded bytes

    Raises:
        BytesDecodeError: If the node matches no byte representation
    """
    config = config or Config()
    if isinstance(node, list):
        return _decode_array(node)
    if isinstance(node, str):
        return _decode_string(node, config)
    raise BytesDecodeError(f"expected an array or string, got {type(node).__name__}", node)


__all__ = [
    "BytesLike",
    "JsonBytes",
    "encode_hex",
    "decode_hex",
    "encode_base64",
    "decode_base64",
    "encode_bytes",
    "decode_bytes",
]
