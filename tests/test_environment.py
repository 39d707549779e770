"""Tests for the environment snapshot."""

import pytest

from chainconf.environment import ResolvedEnvironment


class TestResolvedEnvironment:
    """Tests for ResolvedEnvironment."""

    def test_defaults(self):
        """Empty snapshot has no keys."""
        env = ResolvedEnvironment()

        assert env.private_key is None
        assert env.report_gas is False
        assert env.provider_key("alchemy") == ""
        assert env.verification_key("etherscan") == ""

    def test_lookups(self):
        """Keys are returned by provider and explorer name."""
        env = ResolvedEnvironment(
            provider_api_keys={"infura": "inf"},
            verification_api_keys={"arbiscan": "arb"},
        )

        assert env.provider_key("infura") == "inf"
        assert env.verification_key("arbiscan") == "arb"
        assert env.provider_key(None) == ""
        assert env.verification_key(None) == ""

    def test_mappings_are_read_only(self):
        """Snapshot mappings can't be modified."""
        env = ResolvedEnvironment(provider_api_keys={"alchemy": "a"})

        with pytest.raises(TypeError):
            env.provider_api_keys["alchemy"] = "b"  # type: ignore

    def test_snapshot_detached_from_source(self):
        """Changing the source dict does not change the snapshot."""
        keys = {"alchemy": "a"}
        env = ResolvedEnvironment(provider_api_keys=keys)

        keys["alchemy"] = "b"

        assert env.provider_key("alchemy") == "a"
