"""
Hash Functions

Keccak-256 as used by Ethereum. Note that this is the original Keccak
submission, not the standardized SHA3-256 (different padding).
"""

from Crypto.Hash import keccak


def keccak256(data: bytes) -> bytes:
    """
    Compute Keccak-256 hash.

    Args:
        data: Input data to hash

    Returns:
        32-byte Keccak-256 hash
    """
    return keccak.new(digest_bits=256).update(data).digest()


def keccak256_hex(data: bytes) -> str:
    """Compute Keccak-256 hash as a 64-character lowercase hex string."""
    return keccak256(data).hex()


__all__ = ["keccak256", "keccak256_hex"]
