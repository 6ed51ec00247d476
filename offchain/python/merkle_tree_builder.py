"""
Sorted-Pair Merkle Tree Builder

Flat keccak Merkle tree compatible with OpenZeppelin's MerkleProof.verify:
each parent is keccak(min(a, b) ++ max(a, b)), so proofs carry no
left/right flags. An unpaired last node is hashed with itself.
"""

from eth_utils import keccak

from airdrop_errors import EmptyInputError, ProofNotFoundError
from hex_encoding import hash_to_hex


def combine_and_hash(hash1, hash2):
    # bytes comparison of equal-length digests == unsigned big-endian comparison
    combined = hash1 + hash2 if hash1 < hash2 else hash2 + hash1
    return keccak(combined)


class MerkleTreeBuilder:
    """Immutable sorted-pair Merkle tree over an ordered list of leaf hashes."""

    def __init__(self, leaves):
        self.ordered_leaves = [bytes(leaf) for leaf in leaves]
        if not self.ordered_leaves:
            raise EmptyInputError()
        self.layers = []
        self.merkle_root = None
        # First occurrence wins, like list.index()
        self._positions = {}
        for position, leaf in enumerate(self.ordered_leaves):
            self._positions.setdefault(leaf, position)
        self.build()

    def build(self):
        """Build tree layers bottom-up and return the root."""
        self.layers = [list(self.ordered_leaves)]
        nodes = self.layers[0]

        while len(nodes) > 1:
            parents = []
            for i in range(0, len(nodes), 2):
                left = nodes[i]
                right = nodes[i + 1] if i + 1 < len(nodes) else left  # duplicate last if odd
                parents.append(combine_and_hash(left, right))

            self.layers.append(parents)
            nodes = parents

        self.merkle_root = nodes[0]
        return self.merkle_root

    @property
    def leaf_count(self):
        return len(self.ordered_leaves)

    @property
    def depth(self):
        """Number of levels above the leaves (= proof length)."""
        return len(self.layers) - 1

    def get_root(self):
        return self.merkle_root

    def get_hex_root(self):
        return hash_to_hex(self.merkle_root)

    def get_proof(self, leaf_hash):
        """Sibling hashes from the given leaf up to the root."""
        position = self._positions.get(bytes(leaf_hash))
        if position is None:
            raise ProofNotFoundError(bytes(leaf_hash))
        return self._walk(position)

    def get_proof_at(self, position):
        """Same as get_proof, addressed by layer-0 position."""
        if not 0 <= position < self.leaf_count:
            raise ProofNotFoundError(f"position {position}")
        return self._walk(position)

    def get_hex_proof(self, leaf_hash):
        return [hash_to_hex(node) for node in self.get_proof(leaf_hash)]

    def _walk(self, position):
        proof = []
        current_index = position
        for layer in self.layers[:-1]:  # Exclude root layer
            sibling_index = current_index ^ 1
            if sibling_index < len(layer):
                proof.append(layer[sibling_index])
            else:
                proof.append(layer[current_index])  # odd last node pairs with itself

            # Move to parent
            current_index = current_index // 2
        return proof
