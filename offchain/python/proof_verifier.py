"""
Stateless proof verification.

Mirrors the on-chain check: fold the proof into the leaf with the same
sorted-pair hash the tree was built with and compare with the stored root.
Needs nothing but the leaf, the proof and the root.
"""

from hex_encoding import hex_to_hash
from merkle_tree_builder import combine_and_hash


def compute_root_from_proof(leaf_hash, proof):
    """Root implied by a leaf and its proof. Elements may be bytes or 0x hex."""
    candidate = hex_to_hash(leaf_hash)
    for item in proof:
        candidate = combine_and_hash(candidate, hex_to_hash(item))
    return candidate


def verify_proof(leaf_hash, proof, expected_root):
    """True iff the proof folds the leaf into expected_root."""
    try:
        return compute_root_from_proof(leaf_hash, proof) == hex_to_hash(expected_root)
    except ValueError:
        # Malformed hash element: cannot be a valid proof
        return False
