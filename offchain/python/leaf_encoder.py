"""
Leaf Encoder

Turns one allocation entry into the 32-byte leaf the distributor contract
recomputes on claim:

    keccak256(abi.encodePacked(uint256 index, address account,
                               uint256 amount0, uint256 amount1))
"""

from eth_utils import (
    is_address,
    is_binary_address,
    is_checksum_address,
    is_checksum_formatted_address,
    to_canonical_address,
)
from web3 import Web3

LEAF_ABI_TYPES = ["uint256", "address", "uint256", "uint256"]
UINT256_MAX = 2**256 - 1


def is_valid_address(value):
    """20-byte address; mixed-case text must carry a correct EIP-55 checksum."""
    if isinstance(value, (bytes, bytearray)):
        return is_binary_address(bytes(value))
    if not isinstance(value, str) or not is_address(value):
        return False
    # Newer eth-utils accept any hex address here, including bad checksums
    return not (is_checksum_formatted_address(value) and not is_checksum_address(value))


def encode_leaf(index, account, amount0, amount1) -> bytes:
    """Hash one (index, account, amount0, amount1) entry into a leaf."""
    checksummed = Web3.to_checksum_address(account)
    return bytes(Web3.solidity_keccak(LEAF_ABI_TYPES, [index, checksummed, amount0, amount1]))


def pack_leaf(index, account, amount0, amount1) -> bytes:
    """The 116-byte buffer that encode_leaf hashes."""
    return (
        int(index).to_bytes(32, "big")
        + to_canonical_address(account)
        + int(amount0).to_bytes(32, "big")
        + int(amount1).to_bytes(32, "big")
    )
