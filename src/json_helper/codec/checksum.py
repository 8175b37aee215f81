"""
EIP-55 checksum casing for hexadecimal strings.

The case of each letter digit encodes one bit of the Keccak-256 hash of
the lowercase digit string: digit ``i`` is upper-cased when nibble ``i``
of the hash is 8 or more. Numeric digits have no case and are left alone.

Reference: https://eips.ethereum.org/EIPS/eip-55
"""

from .hashes import keccak256_hex

_HEX_DIGITS = frozenset("0123456789abcdef")


def to_checksum_hex(hex_digits: str) -> str:
    """
    Apply EIP-55 casing to a hex digit string.

    The hash has 64 nibbles; digit ``i`` of a longer input uses nibble
    ``i % 64``.

    Args:
        hex_digits: Hex digits without ``0x`` prefix, any case

    Returns:
        The same digits with checksum casing applied

    Raises:
        ValueError: If the input contains a prefix or non-hex characters
    """
    lowered = hex_digits.lower()
    if lowered.startswith("0x"):
        raise ValueError("checksum input must not carry a 0x prefix")
    if not _HEX_DIGITS.issuperset(lowered):
        raise ValueError(f"not a hex digit string: {hex_digits!r}")

    digest = keccak256_hex(lowered.encode("ascii"))
    out = []
    for i, ch in enumerate(lowered):
        if ch.isalpha() and int(digest[i % len(digest)], 16) >= 8:
            out.append(ch.upper())
        else:
            out.append(ch)
    return "".join(out)


def is_checksum_hex(text: str) -> bool:
    """
    Check whether ``text`` carries valid EIP-55 casing.

    Accepts an optional ``0x``/``0X`` prefix. Never used by decoding;
    callers opt in explicitly.
    """
    digits = text[2:] if text[:2] in ("0x", "0X") else text
    try:
        return to_checksum_hex(digits) == digits
    except ValueError:
        return False


__all__ = ["to_checksum_hex", "is_checksum_hex"]
