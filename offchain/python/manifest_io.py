"""
Manifest I/O and Re-verification

Loading raw allocation files (JSON or CSV), saving/loading the published
manifest, and checking a manifest against nothing but its own contents.
"""

import csv
import json
from pathlib import Path

from eth_utils import to_checksum_address

from balance_tree import BalanceTree
from basic_data_structure import AirdropManifest
from leaf_encoder import UINT256_MAX, is_valid_address
from snapshot_config import get_snapshot_config


# --- RAW ALLOCATIONS ---

def load_allocations(path, config=None):
    """Read allocation rows from a .json or .csv file."""
    config = config if config is not None else get_snapshot_config()
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == '.json':
        return _load_json_allocations(path, config)
    if suffix == '.csv':
        return _load_csv_allocations(path, config)
    raise ValueError(f"Unsupported allocation file type: {path.name} (expected .json or .csv)")


def _load_json_allocations(path, config):
    with open(path, 'r') as f:
        data = json.load(f)

    if isinstance(data, dict):
        # {address: {amount0, amount1}} map form
        address_field = config.address_fields[0]
        return [{address_field: address, **amounts} for address, amounts in data.items()]
    if isinstance(data, list):
        return data
    raise ValueError(f"{path.name}: expected a list of records or an address map")


def _load_csv_allocations(path, config):
    rows = []
    with open(path, newline='') as f:
        reader = csv.DictReader(f)
        fieldnames = [name.strip() for name in (reader.fieldnames or [])]
        address_field = next((name for name in config.address_fields if name in fieldnames), None)
        if address_field is None:
            raise ValueError(f"{path.name}: CSV needs an address column ({', '.join(config.address_fields)})")
        for row in reader:
            row = {(k or '').strip(): (v or '').strip() for k, v in row.items()}
            if not row.get(address_field):
                continue
            rows.append(row)
    return rows


def write_sample_csv(path):
    """Write a three-account sample allocation file."""
    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['address', 'amount0', 'amount1'])
        writer.writerow(['0x1111111111111111111111111111111111111111', '100', '200'])
        writer.writerow(['0x2222222222222222222222222222222222222222', '150', '300'])
        writer.writerow(['0x3333333333333333333333333333333333333333', '125', '250'])
    return path


# --- MANIFEST FILES ---

def save_manifest(manifest: AirdropManifest, path, config=None):
    config = config if config is not None else get_snapshot_config()
    with open(path, 'w') as f:
        json.dump(manifest.to_dict(), f, indent=config.manifest_indent)
    if config.verbose_logging:
        print(f"💾 Saved manifest: {path}")
    return path


def load_manifest(path) -> AirdropManifest:
    with open(path, 'r') as f:
        return AirdropManifest.from_dict(json.load(f))


# --- RE-VERIFICATION ---

def verify_claim(manifest: AirdropManifest, account, amount0=None, amount1=None):
    """Check one account's claim; optional amounts must match the stored ones."""
    if not is_valid_address(account):
        return False
    claim = find_claim(manifest, to_checksum_address(account))
    if claim is None:
        return False
    if amount0 is not None and amount0 != claim.amount0:
        return False
    if amount1 is not None and amount1 != claim.amount1:
        return False
    if not _fits_uint256(claim.index, claim.amount0, claim.amount1):
        return False
    return BalanceTree.verify_proof(
        claim.index, account, claim.amount0, claim.amount1, claim.proof, manifest.merkle_root
    )


def verify_manifest(manifest: AirdropManifest):
    """
    Re-check a manifest from its own contents.

    Returns a list of human-readable problems; an empty list means every
    claim is included under the root, indices are exactly 0..n-1 and the
    token totals match the claimed amounts.
    """
    problems = []
    indices = []
    total0 = 0
    total1 = 0

    for account, claim in manifest.claims.items():
        indices.append(claim.index)
        total0 += claim.amount0
        total1 += claim.amount1
        if not is_valid_address(account):
            problems.append(f"{account}: not a valid address")
            continue
        if not _fits_uint256(claim.index, claim.amount0, claim.amount1):
            problems.append(f"{account}: index or amount outside uint256 range")
            continue
        if not BalanceTree.verify_proof(
            claim.index, account, claim.amount0, claim.amount1, claim.proof, manifest.merkle_root
        ):
            problems.append(f"{account}: proof does not verify against {manifest.merkle_root}")

    if sorted(indices) != list(range(len(indices))):
        problems.append("claim indices are not exactly 0..n-1")
    if total0 != manifest.token_total0:
        problems.append(f"tokenTotal0 mismatch: manifest {manifest.token_total0}, claims sum {total0}")
    if total1 != manifest.token_total1:
        problems.append(f"tokenTotal1 mismatch: manifest {manifest.token_total1}, claims sum {total1}")
    return problems


def _fits_uint256(*values):
    return all(0 <= value <= UINT256_MAX for value in values)


def find_claim(manifest, checksummed):
    """Claim keyed by the checksummed address, or by its lowercase form."""
    claim = manifest.claims.get(checksummed)
    if claim is not None:
        return claim
    return manifest.claims.get(checksummed.lower())
