"""
Byte codec module

Key components:
- hashes.py: Keccak-256 hashing
- checksum.py: EIP-55 checksum casing of hex strings
- bytes_codec.py: encoding/decoding of byte sequences to array, hex and Base64 JSON forms
"""

from .hashes import keccak256, keccak256_hex
from .checksum import to_checksum_hex, is_checksum_hex
from .bytes_codec import (
    encode_bytes,
    decode_bytes,
    encode_hex,
    decode_hex,
    encode_base64,
    decode_base64,
)

__all__ = [
    "keccak256",
    "keccak256_hex",
    "to_checksum_hex",
    "is_checksum_hex",
    "encode_bytes",
    "decode_bytes",
    "encode_hex",
    "decode_hex",
    "encode_base64",
    "decode_base64",
]
