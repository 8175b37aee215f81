"""
Tests for the Bytes field type.

Checks that only fields annotated with Bytes go through the byte codec,
that the Config comes from the pydantic context and that decode errors
carry the field location.
"""

import pytest
from pydantic import BaseModel, TypeAdapter, ValidationError

from json_helper import Bytes, Config, OptionalBytes
from json_helper.runtime.raw_bytes import CONTEXT_KEY, config_from_context
from helpers import Envelope, Message


class TestConfigFromContext:
    """Tests for config_from_context."""

    def test_missing_context(self):
        """Test that no context yields the default config."""
        assert config_from_context(None) == Config.default()

    def test_context_without_config(self):
        """Test a context that carries other keys only."""
        assert config_from_context({"other": 1}) == Config.default()

    def test_context_with_config(self, hex_config):
        """Test that the carried config is returned."""
        assert config_from_context({CONTEXT_KEY: hex_config}) is hex_config


class TestSerialization:
    """Serialization of Bytes fields through pydantic."""

    def test_default_without_context(self, hello):
        """Test that plain pydantic dumping uses the array format."""
        assert Message(nonce=1, payload=hello).model_dump_json() == '{"nonce":1,"payload":[72,101,108,108,111]}'

    def test_context_selects_format(self, hello, hex_prefix_config):
        """Test that the context config drives the rendering."""
        message = Message(nonce=1, payload=hello)
        dumped = message.model_dump_json(context={CONTEXT_KEY: hex_prefix_config})
        assert dumped == '{"nonce":1,"payload":"0x48656c6c6f"}'

    def test_python_mode_keeps_bytes(self, hello, hex_config):
        """Test that model_dump() returns raw bytes."""
        message = Message(nonce=1, payload=hello)
        assert message.model_dump(context={CONTEXT_KEY: hex_config}) == {"nonce": 1, "payload": hello}

    def test_python_json_mode_encodes(self, hello, base64_config):
        """Test that model_dump(mode='json') encodes."""
        message = Message(nonce=1, payload=hello)
        dumped = message.model_dump(mode="json", context={CONTEXT_KEY: base64_config})
        assert dumped == {"nonce": 1, "payload": "SGVsbG8="}

    def test_nested_containers(self, hex_config):
        """Test Bytes inside lists, optionals and dicts."""
        envelope = Envelope(
            message=Message(nonce=7, payload=b"\x01"),
            signatures=[b"\x02", b"\x03\x04"],
            memo=b"\xff",
            extras={"k": b"\x00"},
        )
        dumped = envelope.model_dump(mode="json", context={CONTEXT_KEY: hex_config})
        assert dumped == {
            "message": {"nonce": 7, "payload": "01"},
            "signatures": ["02", "0304"],
            "memo": "ff",
            "extras": {"k": "00"},
        }

    def test_optional_none(self, hex_config):
        """Test that a missing optional field serializes as null."""
        adapter = TypeAdapter(OptionalBytes)
        assert adapter.dump_json(None, context={CONTEXT_KEY: hex_config}) == b"null"

    def test_untagged_bytes_unchanged(self, hex_config):
        """Test that a plain bytes annotation keeps pydantic's rendering."""

        class Raw(BaseModel):
            data: bytes

        raw = Raw(data=b"abc")
        assert raw.model_dump_json(context={CONTEXT_KEY: hex_config}) == raw.model_dump_json()


class TestValidation:
    """Validation of Bytes fields through pydantic."""

    def test_python_bytes_passthrough(self):
        """Test that bytes-like input is accepted as-is."""
        assert Message(nonce=1, payload=bytearray(b"\x01")).payload == b"\x01"
        assert Message(nonce=1, payload=memoryview(b"\x02")).payload == b"\x02"

    def test_python_string_decoded(self):
        """Test that string input is decoded."""
        assert Message(nonce=1, payload="0x0102").payload == b"\x01\x02"

    def test_json_any_format(self, hello, hex_config):
        """Test that every representation validates under one config."""
        for payload in ('"0x48656c6c6f"', '"48656c6c6f"', '"SGVsbG8="', "[72,101,108,108,111]"):
            message = Message.model_validate_json(
                f'{{"nonce":1,"payload":{payload}}}', context={CONTEXT_KEY: hex_config}
            )
            assert message.payload == hello

    def test_error_location(self, default_config):
        """Test that a decode error points at the field."""
        with pytest.raises(ValidationError) as exc_info:
            Envelope.model_validate_json(
                '{"message":{"nonce":1,"payload":"00"},"signatures":["0102","zz"]}',
                context={CONTEXT_KEY: default_config},
            )

        errors = exc_info.value.errors()
        assert len(errors) == 1
        assert errors[0]["loc"] == ("signatures", 1)
        assert errors[0]["type"] == "bytes_decode"
        assert errors[0]["input"] == "zz"

    def test_array_out_of_range_message(self):
        """Test the reason carried in the error message."""
        with pytest.raises(ValidationError) as exc_info:
            Message.model_validate_json('{"nonce":1,"payload":[72,101,300]}')

        error = exc_info.value.errors()[0]
        assert error["loc"] == ("payload",)
        assert "out of byte range" in error["msg"]

    def test_number_rejected(self):
        """Test that a bare number is not a byte sequence."""
        with pytest.raises(ValidationError):
            TypeAdapter(Bytes).validate_json("42")


class TestJsonSchema:
    """JSON schema of Bytes fields."""

    def test_schema_admits_every_format(self):
        """Test that the schema lists array and string forms."""
        schema = TypeAdapter(Bytes).json_schema()
        kinds = {entry["type"] for entry in schema["anyOf"]}
        assert kinds == {"array", "string"}

    def test_model_schema(self):
        """Test that a model with Bytes fields has a schema."""
        schema = Message.model_json_schema()
        assert "payload" in schema["properties"]
