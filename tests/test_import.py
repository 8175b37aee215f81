"""Test basic imports from the json_helper package."""

import pytest


def test_main_import():
    """Test that the main package imports successfully."""
    import json_helper
    assert json_helper.__version__ == "0.1.0"
    assert hasattr(json_helper, 'Config')
    assert hasattr(json_helper, 'Bytes')


def test_codec_import():
    """Test codec module imports."""
    import json_helper.codec as codec
    assert hasattr(codec, 'encode_bytes')
    assert hasattr(codec, 'decode_bytes')
    assert hasattr(codec, 'to_checksum_hex')


def test_runtime_import():
    """Test runtime module imports."""
    import json_helper.runtime as runtime
    assert hasattr(runtime, 'JsonHelperError')
    assert hasattr(runtime, 'BytesDecodeError')


@pytest.mark.parametrize("name", [
    "to_string", "to_string_pretty", "to_vec", "to_vec_pretty",
    "to_writer", "to_writer_pretty", "to_value",
    "from_str", "from_slice", "from_reader", "from_value",
])
def test_entry_points_exported(name):
    """Test that every entry point is exported at package level."""
    import json_helper
    assert callable(getattr(json_helper, name))
    assert name in json_helper.__all__
