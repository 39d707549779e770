"""Per-network configuration resolution.

Turns the static network table plus an environment snapshot into the
connection descriptors the build tool consumes. Resolution never fails:
a missing provider key leaves an empty URL segment and a missing or
malformed signing key leaves the network unsigned. Both surface later,
when the build tool actually connects or signs.
"""

from collections.abc import Iterable

from chainconf.environment import ResolvedEnvironment
from chainconf.networks import (
    API_KEY_PLACEHOLDER,
    DEFAULT_NETWORKS,
    NetworkDefinition,
    ResolvedNetworkConfig,
)
from chainconf.observability.logging import get_logger

logger = get_logger(__name__)

# Hex-encoded secp256k1 key without the 0x prefix.
# Only the length is checked; the character set is not.
PRIVATE_KEY_LENGTH = 64


def accepts_private_key(private_key: str | None) -> bool:
    """Whether a raw key passes the length gate."""
    return bool(private_key) and len(private_key) == PRIVATE_KEY_LENGTH


def resolve_url(definition: NetworkDefinition, env: ResolvedEnvironment) -> str | None:
    """Fill the provider key into a network's endpoint.

    Parameters
    ----------
    definition : NetworkDefinition
        The network.
    env : ResolvedEnvironment
        Environment snapshot.

    Returns
    -------
    str | None
        The endpoint URL, or None for networks without one. An unset
        provider key is substituted as an empty string.
    """
    if definition.endpoint is None:
        return None
    if not definition.has_placeholder:
        return definition.endpoint
    return definition.endpoint.replace(API_KEY_PLACEHOLDER, env.provider_key(definition.provider))


def select_accounts(definition: NetworkDefinition, env: ResolvedEnvironment) -> tuple[str, ...]:
    """Signing keys to attach to a network: none or exactly one."""
    if definition.requires_credential and accepts_private_key(env.private_key):
        return (env.private_key,)
    return ()


class NetworkConfigResolver:
    """Resolve a table of network definitions against an environment.

    Parameters
    ----------
    definitions : Iterable[NetworkDefinition]
        Network table. Names must be unique.

    Raises
    ------
    ValueError
        If two definitions share a name.
    """

    def __init__(self, definitions: Iterable[NetworkDefinition] = DEFAULT_NETWORKS):
        self._definitions = tuple(definitions)
        seen: set[str] = set()
        for definition in self._definitions:
            if definition.name in seen:
                raise ValueError(f"Duplicate network name: {definition.name!r}")
            seen.add(definition.name)

    @property
    def definitions(self) -> tuple[NetworkDefinition, ...]:
        return self._definitions

    def resolve_network(
        self, definition: NetworkDefinition, env: ResolvedEnvironment
    ) -> ResolvedNetworkConfig:
        """Resolve a single network."""
        if definition.has_placeholder and not env.provider_key(definition.provider):
            logger.warning(
                "provider_api_key_missing",
                network=definition.name,
                provider=definition.provider,
            )
        return ResolvedNetworkConfig(
            url=resolve_url(definition, env),
            chain_id=definition.chain_id,
            accounts=select_accounts(definition, env),
            gas_pricing_mode=definition.gas_pricing_mode,
            requires_credential=definition.requires_credential,
        )

    def resolve(self, env: ResolvedEnvironment) -> dict[str, ResolvedNetworkConfig]:
        """Resolve every network in the table.

        Returns
        -------
        dict[str, ResolvedNetworkConfig]
            Resolved configs keyed by network name, in table order.
        """
        if env.private_key and not accepts_private_key(env.private_key):
            logger.warning(
                "private_key_ignored",
                expected_length=PRIVATE_KEY_LENGTH,
                actual_length=len(env.private_key),
            )

        resolved = {d.name: self.resolve_network(d, env) for d in self._definitions}
        logger.debug(
            "networks_resolved",
            count=len(resolved),
            signed=sorted(name for name, cfg in resolved.items() if cfg.signed),
        )
        return resolved


def resolve(
    definitions: Iterable[NetworkDefinition], env: ResolvedEnvironment
) -> dict[str, ResolvedNetworkConfig]:
    """Resolve ``definitions`` against ``env``."""
    return NetworkConfigResolver(definitions).resolve(env)
