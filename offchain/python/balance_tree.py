"""
Balance Tree

Field-level view of the allocation tree: callers pass (index, account,
amount0, amount1) instead of raw leaf hashes. Entries are indexed in the
order they are given; canonical ordering is BalanceMapBuilder's job.
"""

from hex_encoding import hash_to_hex
from leaf_encoder import encode_leaf
from merkle_tree_builder import MerkleTreeBuilder
from proof_verifier import verify_proof


class BalanceTree:
    """Merkle tree over (index, account, amount0, amount1) leaves."""

    def __init__(self, balances):
        self.tree = MerkleTreeBuilder(
            BalanceTree.to_node(index, entry.account, entry.amount0, entry.amount1)
            for index, entry in enumerate(balances)
        )

    @staticmethod
    def to_node(index, account, amount0, amount1):
        return encode_leaf(index, account, amount0, amount1)

    @staticmethod
    def verify_proof(index, account, amount0, amount1, proof, root):
        """Check a claim using only its fields, a proof and a root."""
        leaf = BalanceTree.to_node(index, account, amount0, amount1)
        return verify_proof(leaf, proof, root)

    def get_root(self):
        return self.tree.get_root()

    def get_hex_root(self):
        return self.tree.get_hex_root()

    def get_proof(self, index, account, amount0, amount1):
        """Hex bytes32 proof for one entry."""
        return self.tree.get_hex_proof(BalanceTree.to_node(index, account, amount0, amount1))

    def get_proof_at(self, index):
        """Hex proof for the entry at `index`, without re-hashing its leaf."""
        return [hash_to_hex(node) for node in self.tree.get_proof_at(index)]
