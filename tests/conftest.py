"""
Pytest configuration and shared fixtures for the airdrop snapshot tests.

1. Puts offchain/python on sys.path so tests run without an install
2. Resets the global snapshot configuration around every test
3. Provides a handful of fixed accounts
"""

import sys
from pathlib import Path

import pytest

_SOURCE_ROOT = Path(__file__).resolve().parent.parent / "offchain" / "python"
if str(_SOURCE_ROOT) not in sys.path:
    sys.path.insert(0, str(_SOURCE_ROOT))

from basic_data_structure import AllocationRecord  # noqa: E402
from snapshot_config import reset_to_default_config  # noqa: E402


# Deterministic, all-lowercase so no checksum is involved in the fixture itself
ACCOUNTS = [
    "0x" + f"{i:02x}" * 20 for i in range(1, 11)
]


@pytest.fixture(autouse=True)
def default_config():
    reset_to_default_config()
    yield
    reset_to_default_config()


@pytest.fixture
def accounts():
    return list(ACCOUNTS)


@pytest.fixture
def two_records(accounts):
    return [
        AllocationRecord(accounts[0], 50, 100),
        AllocationRecord(accounts[1], 51, 102),
    ]


@pytest.fixture
def three_rows(accounts):
    return [
        {"address": accounts[0], "amount0": 100, "amount1": 200},
        {"address": accounts[1], "amount0": 150, "amount1": 300},
        {"address": accounts[2], "amount0": 125, "amount1": 250},
    ]
