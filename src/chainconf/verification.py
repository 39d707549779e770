"""Block explorer API keys for contract source verification."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from chainconf.environment import ResolvedEnvironment
from chainconf.networks import NetworkDefinition


@dataclass(frozen=True)
class VerificationKeyTable:
    """Verification API key per network, keyed by verification name.

    An empty key means verification is unsupported for that network.
    """

    keys: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_definitions(
        cls,
        definitions: Iterable[NetworkDefinition],
        env: ResolvedEnvironment,
    ) -> "VerificationKeyTable":
        """Project explorer keys onto every network that has an explorer.

        Parameters
        ----------
        definitions : Iterable[NetworkDefinition]
            Network table.
        env : ResolvedEnvironment
            Environment snapshot.

        Returns
        -------
        VerificationKeyTable
            Networks of the same explorer family share one key.
        """
        keys = {
            d.verification_name or d.name: env.verification_key(d.explorer)
            for d in definitions
            if d.explorer is not None
        }
        return cls(keys=keys)

    def get(self, name: str) -> str:
        return self.keys.get(name, "")

    def is_supported(self, name: str) -> bool:
        return bool(self.get(name))

    def as_dict(self) -> dict[str, Any]:
        return dict(self.keys)
