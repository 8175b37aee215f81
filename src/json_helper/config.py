"""
Conversion configuration.

A Config selects how fields annotated as raw bytes are rendered in JSON.
It is frozen: every setter returns an updated copy, so calls chain
left-to-right and one instance can be shared by concurrent conversions.

    config = Config.default().set_bytes_hex().enable_hex_prefix()
"""

from __future__ import annotations
import os
from enum import Enum
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .runtime.errors import ConfigError


class BytesFormat(str, Enum):
    """JSON rendering of a raw byte sequence."""

    DEFAULT = "default"  # array of numbers
    HEX = "hex"
    BASE64 = "base64"
    BASE64_URL_SAFE = "base64_url_safe"


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


class Config(BaseModel):
    """
    Byte rendering options for one conversion.

    ``hex_prefix`` and ``hex_eip55`` only take effect when
    ``bytes_format`` is HEX.
    """
    bytes_format: BytesFormat = Field(default=BytesFormat.DEFAULT, description="Bytes encoding format")
    hex_prefix: bool = Field(default=False, description="Prepend 0x to hex values")
    hex_eip55: bool = Field(default=False, description="Apply EIP-55 checksum casing to hex values")

    model_config = {"frozen": True}

    @classmethod
    def default(cls) -> "Config":
        """Array-of-numbers format, no prefix, no checksum casing."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "JSON_HELPER_", environ: Optional[Mapping[str, str]] = None) -> "Config":
        """
        Build a Config from environment variables.

        Reads ``<prefix>BYTES_FORMAT``, ``<prefix>HEX_PREFIX`` and
        ``<prefix>HEX_EIP55``. Unset variables keep their defaults.

        Raises:
            ConfigError: On an unknown format or boolean spelling
        """
        env = os.environ if environ is None else environ
        config = cls()

        raw_format = env.get(f"{prefix}BYTES_FORMAT")
        if raw_format:
            try:
                config = config.model_copy(update={"bytes_format": BytesFormat(raw_format.strip().lower())})
            except ValueError as e:
                raise ConfigError(
                    f"Unknown bytes format: {raw_format}",
                    details={"variable": f"{prefix}BYTES_FORMAT",
                             "allowed": [f.value for f in BytesFormat]},
                    cause=e,
                ) from e

        for name in ("hex_prefix", "hex_eip55"):
            variable = f"{prefix}{name.upper()}"
            raw = env.get(variable)
            if raw is None or not raw.strip():
                continue
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                config = config.model_copy(update={name: True})
            elif value in _FALSE_VALUES:
                config = config.model_copy(update={name: False})
            else:
                raise ConfigError(f"Invalid boolean for {variable}: {raw}", details={"variable": variable})

        return config

    # Format selection (mutually exclusive)

    def set_bytes_default(self) -> "Config":
        """Render bytes as an array of numbers."""
        return self.model_copy(update={"bytes_format": BytesFormat.DEFAULT})

    def set_bytes_hex(self) -> "Config":
        """Render bytes as a hexadecimal string."""
        return self.model_copy(update={"bytes_format": BytesFormat.HEX})

    def set_bytes_base64(self) -> "Config":
        """Render bytes as standard Base64."""
        return self.model_copy(update={"bytes_format": BytesFormat.BASE64})

    def set_bytes_base64_url_safe(self) -> "Config":
        """Render bytes as URL-safe Base64."""
        return self.model_copy(update={"bytes_format": BytesFormat.BASE64_URL_SAFE})

    # Hex options

    def enable_hex_prefix(self) -> "Config":
        return self.model_copy(update={"hex_prefix": True})

    def disable_hex_prefix(self) -> "Config":
        return self.model_copy(update={"hex_prefix": False})

    def enable_hex_eip55(self) -> "Config":
        return self.model_copy(update={"hex_eip55": True})

    def disable_hex_eip55(self) -> "Config":
        return self.model_copy(update={"hex_eip55": False})


__all__ = ["BytesFormat", "Config"]
