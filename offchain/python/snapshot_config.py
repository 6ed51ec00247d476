#!/usr/bin/env python3
"""
Snapshot Configuration

Central switches for building airdrop snapshots:
1. Logging verbosity of the builders
2. Self-check of every manifest right after it is built
3. Field names accepted when reading raw allocation rows
4. JSON layout of the written manifest
"""

from dataclasses import dataclass, field, replace
from typing import Tuple


@dataclass
class SnapshotConfig:
    """Configuration for snapshot building and manifest output."""
    # Logging
    verbose_logging: bool = False       # Print build progress

    # Safety
    verify_after_build: bool = False    # Re-check every claim before returning the manifest

    # Raw record field names (first match wins)
    address_fields: Tuple[str, ...] = ("address", "account")
    amount0_fields: Tuple[str, ...] = ("amount0", "p5")
    amount1_fields: Tuple[str, ...] = ("amount1", "p6")

    # Output
    manifest_indent: int = 2
    manifest_filename: str = field(default="merkle.json")


# Global configuration used when a builder is not handed one explicitly
SNAPSHOT_CONFIG = SnapshotConfig()


def get_snapshot_config() -> SnapshotConfig:
    """Get the active snapshot configuration."""
    return SNAPSHOT_CONFIG


def set_snapshot_config(**kwargs) -> SnapshotConfig:
    """Update fields of the active configuration; unknown keys raise."""
    global SNAPSHOT_CONFIG
    for key in kwargs:
        if not hasattr(SNAPSHOT_CONFIG, key):
            raise AttributeError(f"Unknown snapshot setting: {key}")
    SNAPSHOT_CONFIG = replace(SNAPSHOT_CONFIG, **kwargs)
    if SNAPSHOT_CONFIG.verbose_logging:
        print(f"🔧 Snapshot config updated: {', '.join(sorted(kwargs))}")
    return SNAPSHOT_CONFIG


def enable_verbose_logging():
    """Print progress lines while building."""
    return set_snapshot_config(verbose_logging=True)


def reset_to_default_config():
    """Reset configuration to default values."""
    global SNAPSHOT_CONFIG
    SNAPSHOT_CONFIG = SnapshotConfig()
    return SNAPSHOT_CONFIG
