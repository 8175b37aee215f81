"""
Shared fixtures for json_helper tests.
"""

import sys
import pathlib

import pytest

# Ensure tests directory is in Python path for the helpers package
TESTS_DIR = pathlib.Path(__file__).parent
if str(TESTS_DIR) not in sys.path:
    sys.path.insert(0, str(TESTS_DIR))

from json_helper import Config
from helpers import HELLO


@pytest.fixture
def hello() -> bytes:
    """The bytes of ASCII 'Hello'."""
    return HELLO


@pytest.fixture
def default_config() -> Config:
    return Config.default()


@pytest.fixture
def hex_config() -> Config:
    return Config.default().set_bytes_hex()


@pytest.fixture
def hex_prefix_config() -> Config:
    return Config.default().set_bytes_hex().enable_hex_prefix()


@pytest.fixture
def base64_config() -> Config:
    return Config.default().set_bytes_base64()


@pytest.fixture
def base64_url_safe_config() -> Config:
    return Config.default().set_bytes_base64_url_safe()
