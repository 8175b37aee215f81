from .models import Message, Envelope, Plain
from .parity import assert_bytes_equal
from .factories import HELLO, SAMPLES, ALL_CONFIGS, config_id

__all__ = [
    "Message",
    "Envelope",
    "Plain",
    "assert_bytes_equal",
    "HELLO",
    "SAMPLES",
    "ALL_CONFIGS",
    "config_id",
]
