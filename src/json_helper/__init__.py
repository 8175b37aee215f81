"""
json_helper - JSON conversion with configurable raw byte rendering

Fields annotated with ``Bytes`` are rendered as an array of numbers, a hex
string (optionally ``0x``-prefixed and EIP-55 checksum-cased) or Base64
(standard or URL-safe). Everything else is plain pydantic JSON.

Example:
    from pydantic import BaseModel
    from json_helper import Bytes, Config, to_string, from_str

    class Message(BaseModel):
        payload: Bytes

    config = Config.default().set_bytes_base64()
    to_string(Message(payload=b"Hello"), config)   # '{"payload":"SGVsbG8="}'
    from_str('{"payload":"0x48656c6c6f"}', Message, config).payload   # b'Hello'
"""

from .runtime.errors import (
    ErrorCode,
    JsonHelperError,
    ConfigError,
    EncodingError,
    MarshalError,
    UnmarshalError,
    BytesDecodeError,
)
from .config import BytesFormat, Config
from .codec import (
    keccak256,
    to_checksum_hex,
    is_checksum_hex,
    encode_bytes,
    decode_bytes,
    encode_hex,
    decode_hex,
    encode_base64,
    decode_base64,
)
from .runtime.raw_bytes import Bytes, OptionalBytes, RawBytes
from .ser import (
    to_string,
    to_string_pretty,
    to_vec,
    to_vec_pretty,
    to_writer,
    to_writer_pretty,
    to_value,
)
from .de import from_str, from_slice, from_reader, from_value

__version__ = "0.1.0"

__all__ = [
    # Config
    "BytesFormat",
    "Config",
    # Field type
    "Bytes",
    "OptionalBytes",
    "RawBytes",
    # Codec
    "keccak256",
    "to_checksum_hex",
    "is_checksum_hex",
    "encode_bytes",
    "decode_bytes",
    "encode_hex",
    "decode_hex",
    "encode_base64",
    "decode_base64",
    # Serialization
    "to_string",
    "to_string_pretty",
    "to_vec",
    "to_vec_pretty",
    "to_writer",
    "to_writer_pretty",
    "to_value",
    # Deserialization
    "from_str",
    "from_slice",
    "from_reader",
    "from_value",
    # Errors
    "ErrorCode",
    "JsonHelperError",
    "ConfigError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "BytesDecodeError",
    "__version__",
]
