from dataclasses import dataclass, field

from hex_encoding import hex_to_int, int_to_hex


@dataclass(frozen=True)
class AllocationRecord:
    """One account's share of the airdrop, before indexing."""
    account: str
    amount0: int
    amount1: int


@dataclass
class Claim:
    """Everything an account needs to claim on-chain."""
    index: int
    amount0: int
    amount1: int
    proof: list[str] = field(default_factory=list)

    def to_dict(self):
        return {
            'index': self.index,
            'amount0': int_to_hex(self.amount0),
            'amount1': int_to_hex(self.amount1),
            'proof': list(self.proof),
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            index=int(data['index']),
            amount0=_parse_int(data['amount0']),
            amount1=_parse_int(data['amount1']),
            proof=list(data['proof']),
        )


@dataclass
class AirdropManifest:
    """
    The blob that gets published alongside the distributor contract.

    It is sufficient on its own to recreate the whole tree, so anyone can
    check that every allocation is included and nothing else is.
    """
    merkle_root: str
    token_total0: int
    token_total1: int
    claims: dict[str, Claim] = field(default_factory=dict)

    def __len__(self):
        return len(self.claims)

    def to_dict(self):
        return {
            'merkleRoot': self.merkle_root,
            'tokenTotal0': int_to_hex(self.token_total0),
            'tokenTotal1': int_to_hex(self.token_total1),
            'claims': {account: claim.to_dict() for account, claim in self.claims.items()},
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            merkle_root=data['merkleRoot'],
            token_total0=_parse_int(data['tokenTotal0']),
            token_total1=_parse_int(data['tokenTotal1']),
            claims={account: Claim.from_dict(c) for account, c in data['claims'].items()},
        )


def _parse_int(value):
    # Manifests written by other tools may carry plain integers
    if isinstance(value, int):
        return value
    return hex_to_int(value)
