"""
Bytes-tagged fields for pydantic models.

Annotating a field with ``Bytes`` routes it through the Byte Format Codec
while pydantic handles every other field as usual:

    class Transaction(BaseModel):
        nonce: int
        data: Bytes
        signatures: List[Bytes] = []

The Config travels in the pydantic ``context`` under the ``"config"`` key;
the entry points in ``json_helper.ser`` and ``json_helper.de`` set it.
"""

from __future__ import annotations
from typing import Annotated, Any, Optional

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import CoreSchema, PydanticCustomError, core_schema

from ..codec.bytes_codec import decode_bytes, encode_bytes
from ..config import Config
from .errors import BytesDecodeError

CONTEXT_KEY = "config"


def config_from_context(context: Any) -> Config:
    """Return the Config carried in a pydantic context, or the default one."""
    if isinstance(context, dict):
        config = context.get(CONTEXT_KEY)
        if isinstance(config, Config):
            return config
    return Config()


class RawBytes:
    """Marker that tags an annotated ``bytes`` field as a raw byte sequence."""

    def __get_pydantic_core_schema__(
        self,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        """Return a CoreSchema that validates and serializes through the codec."""
        return core_schema.with_info_plain_validator_function(
            self._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                self._serialize,
                info_arg=True,
            ),
        )

    def __get_pydantic_json_schema__(
        self,
        schema: CoreSchema,
        handler: GetJsonSchemaHandler,
    ) -> JsonSchemaValue:
        # The format is chosen per call, so the schema admits all of them.
        return {
            "anyOf": [
                {"type": "array", "items": {"type": "integer", "minimum": 0, "maximum": 255}},
                {"type": "string", "format": "hex"},
                {"type": "string", "format": "base64"},
            ]
        }

    @staticmethod
    def _validate(value: Any, info: core_schema.ValidationInfo) -> bytes:
        if isinstance(value, (bytes, bytearray, memoryview)):
            return bytes(value)
        try:
            return decode_bytes(value, config_from_context(info.context))
        except BytesDecodeError as e:
            raise PydanticCustomError(
                "bytes_decode",
                "Invalid byte sequence: {reason}",
                {"reason": e.reason},
            ) from e

    @staticmethod
    def _serialize(value: Any, info: core_schema.SerializationInfo) -> Any:
        if not info.mode_is_json():
            return value
        return encode_bytes(value, config_from_context(info.context))

    def __repr__(self) -> str:
        return "RawBytes()"


Bytes = Annotated[bytes, RawBytes()]
"""A field holding raw bytes, rendered per the conversion Config."""

OptionalBytes = Optional[Bytes]


__all__ = ["Bytes", "OptionalBytes", "RawBytes", "CONTEXT_KEY", "config_from_context"]
