"""
Hex encoding helpers for manifest values.

Integers use the minimal whole-byte form (``0x00`` for zero, ``0x0177`` for
375), hashes always use the full 32-byte form.
"""

from eth_utils import add_0x_prefix, is_hex, remove_0x_prefix

HASH_SIZE = 32


def int_to_hex(value: int) -> str:
    """Minimal-width, even-length 0x hex of a non-negative integer."""
    if value < 0:
        raise ValueError(f"Cannot hex-encode negative value {value}")
    digits = format(value, "x")
    if len(digits) % 2:
        digits = "0" + digits
    return "0x" + digits


def hex_to_int(value: str) -> int:
    if not isinstance(value, str) or not is_hex(value):
        raise ValueError(f"Not a hex string: {value!r}")
    digits = remove_0x_prefix(value)
    return int(digits, 16) if digits else 0


def hash_to_hex(node: bytes) -> str:
    return add_0x_prefix(bytes(node).hex())


def hex_to_hash(value) -> bytes:
    """Accept a 32-byte value as bytes or (0x-)hex text."""
    if isinstance(value, (bytes, bytearray)):
        node = bytes(value)
    elif isinstance(value, str) and is_hex(value):
        node = bytes.fromhex(remove_0x_prefix(value))
    else:
        raise ValueError(f"Not a hash value: {value!r}")
    if len(node) != HASH_SIZE:
        raise ValueError(f"Hash must be {HASH_SIZE} bytes, got {len(node)}")
    return node
