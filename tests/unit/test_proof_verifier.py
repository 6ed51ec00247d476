"""
Stateless verification tests: tampering with any part of a proof, the leaf
or the root must make verification fail.
"""
import pytest
from eth_utils import keccak

from merkle_tree_builder import MerkleTreeBuilder
from proof_verifier import compute_root_from_proof, verify_proof


@pytest.fixture
def tree_and_leaves():
    leaves = [keccak(f"leaf{i}".encode()) for i in range(9)]
    return MerkleTreeBuilder(leaves), leaves


def flip_bit(node, byte_index, bit):
    data = bytearray(node)
    data[byte_index] ^= 1 << bit
    return bytes(data)


class TestVerifyProof:
    """Tests for verify_proof."""

    def test_valid_proof(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        assert verify_proof(leaves[4], tree.get_proof(leaves[4]), tree.get_root())

    def test_accepts_hex_inputs(self, tree_and_leaves):
        """Proof, leaf and root may all be 0x hex strings."""
        tree, leaves = tree_and_leaves
        leaf_hex = "0x" + leaves[3].hex()

        assert verify_proof(leaf_hex, tree.get_hex_proof(leaves[3]), tree.get_hex_root())

    def test_compute_root(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        assert compute_root_from_proof(leaves[0], tree.get_proof(leaves[0])) == tree.get_root()

    def test_empty_proof_only_for_single_leaf(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        assert not verify_proof(leaves[0], [], tree.get_root())
        assert verify_proof(leaves[0], [], leaves[0])

    def test_flipped_bit_in_any_proof_element_fails(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        proof = tree.get_proof(leaves[5])

        for position in range(len(proof)):
            for byte_index, bit in [(0, 7), (15, 0), (31, 3)]:
                tampered = list(proof)
                tampered[position] = flip_bit(proof[position], byte_index, bit)
                assert not verify_proof(leaves[5], tampered, tree.get_root())

    def test_wrong_leaf_fails(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        assert not verify_proof(leaves[1], tree.get_proof(leaves[2]), tree.get_root())

    def test_wrong_root_fails(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        root = flip_bit(tree.get_root(), 0, 0)
        assert not verify_proof(leaves[1], tree.get_proof(leaves[1]), root)

    def test_truncated_or_extended_proof_fails(self, tree_and_leaves):
        tree, leaves = tree_and_leaves
        proof = tree.get_proof(leaves[6])

        assert not verify_proof(leaves[6], proof[:-1], tree.get_root())
        assert not verify_proof(leaves[6], proof + [leaves[0]], tree.get_root())

    def test_malformed_element_returns_false(self, tree_and_leaves):
        """Short or non-hex elements are rejected rather than raising."""
        tree, leaves = tree_and_leaves
        proof = tree.get_hex_proof(leaves[0])

        assert not verify_proof(leaves[0], proof[:-1] + ["0x1234"], tree.get_root())
        assert not verify_proof(leaves[0], proof[:-1] + ["not hex"], tree.get_root())
        assert not verify_proof(leaves[0], proof, "0xdeadbeef")
