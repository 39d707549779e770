"""Secrets and flags read once from the process environment."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class ResolvedEnvironment:
    """Snapshot of the environment values resolution depends on.

    Empty strings are treated as absent by every consumer.

    Attributes
    ----------
    private_key : str | None
        Raw signing key, expected to be 64 hex characters without ``0x``.
    provider_api_keys : Mapping[str, str]
        RPC provider name to API key (``alchemy``, ``infura``).
    verification_api_keys : Mapping[str, str]
        Block explorer family to API key (``etherscan``, ``arbiscan``, ...).
    report_gas : bool
        Whether the gas reporter is enabled.
    """

    private_key: str | None = None
    provider_api_keys: Mapping[str, str] = field(default_factory=dict)
    verification_api_keys: Mapping[str, str] = field(default_factory=dict)
    report_gas: bool = False

    def __post_init__(self) -> None:
        # Freeze the mappings so a snapshot can't drift after it is taken
        object.__setattr__(self, "provider_api_keys", MappingProxyType(dict(self.provider_api_keys)))
        object.__setattr__(
            self, "verification_api_keys", MappingProxyType(dict(self.verification_api_keys))
        )

    def provider_key(self, provider: str | None) -> str:
        """API key for a provider, or an empty string when unset."""
        if provider is None:
            return ""
        return self.provider_api_keys.get(provider) or ""

    def verification_key(self, explorer: str | None) -> str:
        """API key for a block explorer, or an empty string when unset."""
        if explorer is None:
            return ""
        return self.verification_api_keys.get(explorer) or ""
