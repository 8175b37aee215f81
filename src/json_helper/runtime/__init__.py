"""Runtime helpers for json_helper: error model, bytes-tagged field type and TypeAdapter lookup.

Only the errors are re-exported here; import ``Bytes`` from ``json_helper``.
"""

from .errors import (
    ErrorCode,
    JsonHelperError,
    ConfigError,
    EncodingError,
    MarshalError,
    UnmarshalError,
    BytesDecodeError,
)

__all__ = [
    "ErrorCode",
    "JsonHelperError",
    "ConfigError",
    "EncodingError",
    "MarshalError",
    "UnmarshalError",
    "BytesDecodeError",
]
