"""
Balance Map Builder

Turns raw airdrop allocations into the published manifest:

1. Validate and checksum every address, parse both amounts
2. Reject duplicates (after normalization)
3. Sort by checksummed address; the sorted position is the claim index
4. Build the balance tree and collect one proof per account
5. Sum both token columns exactly

Validation covers the whole input before any hashing starts, so a bad
record never yields a partial manifest.
"""

import re
import time
from collections.abc import Mapping

from eth_utils import to_checksum_address

from airdrop_errors import (
    DuplicateAddressError,
    EmptyInputError,
    InvalidAddressError,
    InvalidAmountError,
    ManifestSelfCheckError,
)
from balance_tree import BalanceTree
from basic_data_structure import AirdropManifest, AllocationRecord, Claim
from leaf_encoder import UINT256_MAX, is_valid_address
from manifest_io import verify_manifest
from snapshot_config import get_snapshot_config

_AMOUNT_RE = re.compile(r"^(-?)(0[xX][0-9a-fA-F]+|[0-9]+)\Z")


class BalanceMapBuilder:
    """Builds an AirdropManifest from raw allocation records."""

    def __init__(self, records, config=None):
        self.records = list(records)
        self.config = config if config is not None else get_snapshot_config()
        self.sorted_records = []
        self.tree = None
        self.manifest = None

    def print_verbose(self, message: str):
        if self.config.verbose_logging:
            print(message)

    def build(self) -> AirdropManifest:
        """Validate, index, hash and emit the manifest."""
        start = time.time()
        by_account = self._validate_records()
        if not by_account:
            raise EmptyInputError("No allocation records to build a snapshot from")

        # Canonical ordering: string order of the checksummed addresses
        self.sorted_records = [by_account[account] for account in sorted(by_account)]
        self.print_verbose(f"🌳 Building balance tree for {len(self.sorted_records)} accounts...")

        self.tree = BalanceTree(self.sorted_records)

        claims = {}
        token_total0 = 0
        token_total1 = 0
        for index, record in enumerate(self.sorted_records):
            claims[record.account] = Claim(
                index=index,
                amount0=record.amount0,
                amount1=record.amount1,
                proof=self.tree.get_proof_at(index),
            )
            token_total0 += record.amount0
            token_total1 += record.amount1

        manifest = AirdropManifest(
            merkle_root=self.tree.get_hex_root(),
            token_total0=token_total0,
            token_total1=token_total1,
            claims=claims,
        )

        if self.config.verify_after_build:
            problems = verify_manifest(manifest)
            if problems:
                raise ManifestSelfCheckError(problems)
            self.print_verbose(f"  ✅ Self-check passed for {len(claims)} claims")

        self.manifest = manifest
        self.print_verbose(f"-> Merkle root: {manifest.merkle_root} ({time.time() - start:.2f}s)")
        return manifest

    def _validate_records(self):
        by_account = {}
        for raw in self.records:
            record = self._normalize_record(raw)
            if record.account in by_account:
                raise DuplicateAddressError(record.account)
            by_account[record.account] = record
        return by_account

    def _normalize_record(self, raw):
        if isinstance(raw, AllocationRecord):
            address, amount0, amount1 = raw.account, raw.amount0, raw.amount1
        elif isinstance(raw, Mapping):
            address = _first_field(raw, self.config.address_fields)
            amount0 = _first_field(raw, self.config.amount0_fields)
            amount1 = _first_field(raw, self.config.amount1_fields)
        else:
            raise TypeError(f"Unsupported allocation record: {raw!r}")

        if not is_valid_address(address):
            raise InvalidAddressError(address)
        account = to_checksum_address(address)

        return AllocationRecord(
            account=account,
            amount0=parse_amount(account, amount0),
            amount1=parse_amount(account, amount1),
        )


def parse_amount(account, value):
    """Parse an int, decimal string or 0x hex string into a uint256 amount."""
    # bool is an int subclass; floats silently lose precision
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidAmountError(account, value, "must be an integer or integer string")
    if isinstance(value, str):
        text = value.strip()
        # int() alone would also take "1_000" and non-ASCII digits
        match = _AMOUNT_RE.match(text)
        if match is None:
            raise InvalidAmountError(account, value, "not an integer")
        sign, digits = match.groups()
        amount = int(digits, 16 if digits[:2] in ("0x", "0X") else 10)
        if sign:
            amount = -amount
    else:
        amount = value

    if amount < 0:
        raise InvalidAmountError(account, value, "negative")
    if amount > UINT256_MAX:
        raise InvalidAmountError(account, value, "exceeds uint256")
    return amount


def parse_balance_map(records, config=None) -> AirdropManifest:
    """Build the manifest for a list of allocation records."""
    return BalanceMapBuilder(records, config).build()


def _first_field(raw, names):
    for name in names:
        if name in raw:
            return raw[name]
    return None
