"""Pytest configuration and fixtures for chainconf tests."""

import os

import pytest

from chainconf.environment import ResolvedEnvironment
from chainconf.observability.logging import configure_logging

ENV_VARS = (
    "PRIVATE_KEY",
    "ALCHEMY_API_KEY",
    "INFURA_PROJECT_ID",
    "ETHERSCAN_API_KEY",
    "ARBISCAN_API_KEY",
    "POLYGONSCAN_API_KEY",
    "BSCSCAN_API_KEY",
    "REPORT_GAS",
)

# Test private key (DO NOT USE IN PRODUCTION - this is a well-known test key)
VALID_KEY = "0123456789abcdef0123456789abcdef0123456789abcdef0123456789abcdef"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Clear toolchain environment variables and keep .env files out."""
    for key in list(os.environ.keys()):
        if key in ENV_VARS or key.startswith("CHAINCONF_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def stdlib_logging():
    """Route structlog through stdlib logging so stdout holds only command output."""
    configure_logging(level="WARNING", log_format="json")


@pytest.fixture
def full_env():
    """Environment with every key set."""
    return ResolvedEnvironment(
        private_key=VALID_KEY,
        provider_api_keys={"alchemy": "alchemy-key", "infura": "infura-id"},
        verification_api_keys={
            "etherscan": "eth-key",
            "arbiscan": "arb-key",
            "polygonscan": "poly-key",
            "bscscan": "bsc-key",
        },
        report_gas=True,
    )
