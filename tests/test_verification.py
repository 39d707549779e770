"""Tests for verification key projection."""

from chainconf.environment import ResolvedEnvironment
from chainconf.networks import DEFAULT_NETWORKS, NetworkDefinition
from chainconf.verification import VerificationKeyTable


class TestVerificationKeyTable:
    """Tests for VerificationKeyTable."""

    def test_keys_for_every_explorer_network(self, full_env):
        """Every remote network appears under its verification name."""
        table = VerificationKeyTable.from_definitions(DEFAULT_NETWORKS, full_env)

        assert table.as_dict() == {
            "mainnet": "eth-key",
            "goerli": "eth-key",
            "sepolia": "eth-key",
            "arbitrumOne": "arb-key",
            "arbitrumGoerli": "arb-key",
            "polygon": "poly-key",
            "polygonMumbai": "poly-key",
            "bsc": "bsc-key",
            "bscTestnet": "bsc-key",
        }

    def test_local_networks_absent(self, full_env):
        """Local networks have no verification entry."""
        table = VerificationKeyTable.from_definitions(DEFAULT_NETWORKS, full_env)

        assert "hardhat" not in table.keys
        assert "localhost" not in table.keys

    def test_unset_keys_are_empty(self):
        """Unset explorer keys resolve to empty strings."""
        table = VerificationKeyTable.from_definitions(DEFAULT_NETWORKS, ResolvedEnvironment())

        assert set(table.as_dict().values()) == {""}
        assert table.is_supported("mainnet") is False

    def test_family_shares_key(self):
        """Only the BSC key set: only BSC networks are supported."""
        env = ResolvedEnvironment(verification_api_keys={"bscscan": "bsc-key"})

        table = VerificationKeyTable.from_definitions(DEFAULT_NETWORKS, env)

        assert table.is_supported("bsc") is True
        assert table.is_supported("bscTestnet") is True
        assert table.is_supported("mainnet") is False
        assert table.get("polygonMumbai") == ""

    def test_unknown_name(self, full_env):
        """Unknown names resolve to empty string."""
        table = VerificationKeyTable.from_definitions(DEFAULT_NETWORKS, full_env)

        assert table.get("optimism") == ""
        assert table.is_supported("optimism") is False

    def test_falls_back_to_network_name(self):
        """Definitions without a verification name use their own name."""
        definitions = [NetworkDefinition(name="custom", chain_id=9, explorer="etherscan")]
        env = ResolvedEnvironment(verification_api_keys={"etherscan": "k"})

        table = VerificationKeyTable.from_definitions(definitions, env)

        assert table.as_dict() == {"custom": "k"}
