"""
Airdrop Snapshot Errors

All failures raised while validating allocation records, building the
Merkle tree or looking up proofs. Every error is a ValueError so callers
that only care about "bad input" can catch the builtin.
"""


class AirdropError(ValueError):
    """Base class for all snapshot errors."""
    pass


class InvalidAddressError(AirdropError):
    """Account identifier is not a well-formed 20-byte address."""
    def __init__(self, address):
        self.address = address
        super().__init__(f"Found invalid address: {address!r}")


class DuplicateAddressError(AirdropError):
    """Two records normalize to the same account."""
    def __init__(self, address):
        self.address = address
        super().__init__(f"Duplicate address: {address}")


class InvalidAmountError(AirdropError):
    """Amount is negative, unparseable or does not fit in a uint256."""
    def __init__(self, address, amount, reason="must be a non-negative uint256"):
        self.address = address
        self.amount = amount
        super().__init__(f"Invalid amount for account {address}: {amount!r} ({reason})")


class EmptyInputError(AirdropError):
    """No records or no leaves to build a tree from."""
    def __init__(self, message="No leaves to build tree"):
        super().__init__(message)


class ProofNotFoundError(AirdropError):
    """Requested leaf is not part of the tree."""
    def __init__(self, leaf):
        self.leaf = leaf
        shown = "0x" + leaf.hex() if isinstance(leaf, (bytes, bytearray)) else leaf
        super().__init__(f"Leaf not found in tree: {shown}")


class ManifestSelfCheckError(AirdropError):
    """A freshly built manifest does not re-verify from its own contents."""
    def __init__(self, problems):
        self.problems = list(problems)
        super().__init__(f"Built manifest failed self-check: {self.problems[0]}")
