#!/usr/bin/env python3
"""
Airdrop Snapshot CLI

Builds the distributor manifest from an allocation file and checks claims
against a published manifest.

    airdrop-snapshot sample --out sample.csv
    airdrop-snapshot build --input sample.csv --out merkle.json
    airdrop-snapshot proof --manifest merkle.json --address 0x...
    airdrop-snapshot verify --manifest merkle.json --address 0x... --amount0 100 --amount1 200
    airdrop-snapshot check --manifest merkle.json
"""

import argparse
import json
import sys

from eth_utils import to_checksum_address

from balance_map_builder import parse_amount, parse_balance_map
from leaf_encoder import is_valid_address
from manifest_io import (
    find_claim,
    load_allocations,
    load_manifest,
    save_manifest,
    verify_claim,
    verify_manifest,
    write_sample_csv,
)
from snapshot_config import get_snapshot_config, set_snapshot_config


def cmd_sample(args):
    write_sample_csv(args.out)
    print(f"📝 Sample CSV written to {args.out}")
    return 0


def cmd_build(args):
    config = get_snapshot_config()
    print(f"--- [SNAPSHOT] Loading allocations from {args.input} ---")
    records = load_allocations(args.input, config)
    print(f"Loaded {len(records)} allocation rows.")

    manifest = parse_balance_map(records, config)
    out = args.out or config.manifest_filename
    save_manifest(manifest, out, config)

    print(f"-> Merkle root: {manifest.merkle_root}")
    print(f"-> Token total 0: {manifest.token_total0}")
    print(f"-> Token total 1: {manifest.token_total1}")
    print(f"✅ Wrote {len(manifest)} claims to {out}")
    return 0


def cmd_proof(args):
    manifest = load_manifest(args.manifest)
    if not is_valid_address(args.address):
        print(f"❌ Invalid address: {args.address}")
        return 1
    account = to_checksum_address(args.address)
    claim = find_claim(manifest, account)
    if claim is None:
        print(f"❌ Address not found in claims: {account}")
        return 1
    print(json.dumps({'address': account, **claim.to_dict()}, indent=2))
    return 0


def cmd_verify(args):
    manifest = load_manifest(args.manifest)
    amount0 = parse_amount(args.address, args.amount0) if args.amount0 is not None else None
    amount1 = parse_amount(args.address, args.amount1) if args.amount1 is not None else None
    ok = verify_claim(manifest, args.address, amount0, amount1)
    print(f"{'✅' if ok else '❌'} Valid proof: {ok}")
    return 0 if ok else 1


def cmd_check(args):
    manifest = load_manifest(args.manifest)
    print(f"🔍 Re-verifying {len(manifest)} claims against {manifest.merkle_root}...")
    problems = verify_manifest(manifest)
    for problem in problems:
        print(f"  ⚠️ {problem}")
    if problems:
        print(f"❌ Manifest has {len(problems)} problem(s)")
        return 1
    print("✅ Every claim verifies and totals match")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description='Airdrop Merkle snapshot builder (two-token claims)')
    parser.add_argument('--verbose', action='store_true', help='Print build progress')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('sample', help='Write a sample allocation CSV')
    p.add_argument('--out', default='sample.csv')
    p.set_defaults(func=cmd_sample)

    p = sub.add_parser('build', help='Build the manifest from a .json or .csv allocation file')
    p.add_argument('--input', required=True)
    p.add_argument('--out', default=None, help='Manifest path (default: merkle.json)')
    p.add_argument('--verify', action='store_true', help='Self-check the manifest after building')
    p.set_defaults(func=cmd_build)

    p = sub.add_parser('proof', help='Print the claim for one address')
    p.add_argument('--manifest', default='merkle.json')
    p.add_argument('--address', required=True)
    p.set_defaults(func=cmd_proof)

    p = sub.add_parser('verify', help='Verify one claim against a manifest')
    p.add_argument('--manifest', default='merkle.json')
    p.add_argument('--address', required=True)
    p.add_argument('--amount0', default=None)
    p.add_argument('--amount1', default=None)
    p.set_defaults(func=cmd_verify)

    p = sub.add_parser('check', help='Re-verify every claim and the totals of a manifest')
    p.add_argument('--manifest', default='merkle.json')
    p.set_defaults(func=cmd_check)

    return parser


def main(argv=None):
    """Main CLI interface."""
    args = build_parser().parse_args(argv)
    settings = {'verbose_logging': args.verbose}
    if getattr(args, 'verify', False):
        settings['verify_after_build'] = True
    set_snapshot_config(**settings)

    try:
        return args.func(args)
    except (ValueError, OSError) as e:
        print(f"❌ {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
