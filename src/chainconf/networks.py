"""Network definitions for chainconf.

Every network a build can target is declared once in ``DEFAULT_NETWORKS``.
Endpoints that need a provider key carry the ``{api_key}`` placeholder,
which the resolver fills in from the environment.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

API_KEY_PLACEHOLDER = "{api_key}"


class GasPricingMode(str, Enum):
    """Gas pricing modes understood by the build tool."""

    AUTO = "auto"


@dataclass(frozen=True)
class NetworkDefinition:
    """Static description of one network.

    Attributes
    ----------
    name : str
        Unique network name within a table.
    chain_id : int
        The chain ID.
    endpoint : str | None
        RPC URL, or a URL template containing ``{api_key}``. ``None`` for
        the in-process simulated network.
    provider : str | None
        Provider whose API key fills the placeholder.
    gas_pricing_mode : GasPricingMode | None
        Gas pricing mode, absent for local networks.
    requires_credential : bool
        Whether a signing key may be attached.
    explorer : str | None
        Block explorer family used for source verification.
    verification_name : str | None
        Name the verification plugin uses for this network.
    """

    name: str
    chain_id: int
    endpoint: str | None = None
    provider: str | None = None
    gas_pricing_mode: GasPricingMode | None = None
    requires_credential: bool = False
    explorer: str | None = None
    verification_name: str | None = None

    def __post_init__(self) -> None:
        if self.chain_id <= 0:
            raise ValueError(f"Invalid chain ID for {self.name!r}: {self.chain_id}")

    @property
    def has_placeholder(self) -> bool:
        """Whether the endpoint needs a provider key substituted."""
        return self.endpoint is not None and API_KEY_PLACEHOLDER in self.endpoint


@dataclass(frozen=True)
class ResolvedNetworkConfig:
    """Connection descriptor handed to the build tool for one network."""

    url: str | None
    chain_id: int
    accounts: tuple[str, ...] = ()
    gas_pricing_mode: GasPricingMode | None = None
    requires_credential: bool = True

    @property
    def signed(self) -> bool:
        """Whether a signing key is attached."""
        return bool(self.accounts)

    def as_dict(self) -> dict[str, Any]:
        """Render in the build tool's network shape."""
        data: dict[str, Any] = {}
        if self.url is not None:
            data["url"] = self.url
        data["chainId"] = self.chain_id
        # Local networks leave accounts to the node
        if self.requires_credential:
            data["accounts"] = list(self.accounts)
        if self.gas_pricing_mode is not None:
            data["gasPrice"] = self.gas_pricing_mode.value
        return data


def _remote(
    name: str,
    endpoint: str,
    chain_id: int,
    explorer: str,
    verification_name: str | None = None,
    provider: str | None = None,
) -> NetworkDefinition:
    return NetworkDefinition(
        name=name,
        chain_id=chain_id,
        endpoint=endpoint,
        provider=provider,
        gas_pricing_mode=GasPricingMode.AUTO,
        requires_credential=True,
        explorer=explorer,
        verification_name=verification_name or name,
    )


DEFAULT_NETWORKS: tuple[NetworkDefinition, ...] = (
    # Local
    NetworkDefinition(name="hardhat", chain_id=1337),
    NetworkDefinition(name="localhost", chain_id=1337, endpoint="http://127.0.0.1:8545"),
    # Ethereum
    _remote(
        "ethereum",
        "https://eth-mainnet.alchemyapi.io/v2/{api_key}",
        1,
        "etherscan",
        verification_name="mainnet",
        provider="alchemy",
    ),
    _remote("goerli", "https://goerli.infura.io/v3/{api_key}", 5, "etherscan", provider="infura"),
    _remote(
        "sepolia", "https://sepolia.infura.io/v3/{api_key}", 11155111, "etherscan", provider="infura"
    ),
    # Arbitrum
    _remote(
        "arbitrum", "https://arb1.arbitrum.io/rpc", 42161, "arbiscan", verification_name="arbitrumOne"
    ),
    _remote("arbitrumGoerli", "https://goerli-rollup.arbitrum.io/rpc", 421613, "arbiscan"),
    # Polygon
    _remote("polygon", "https://polygon-rpc.com/", 137, "polygonscan"),
    _remote(
        "mumbai",
        "https://matic-mumbai.chainstacklabs.com",
        80001,
        "polygonscan",
        verification_name="polygonMumbai",
    ),
    # BSC
    _remote("bsc", "https://bsc-dataseed.binance.org/", 56, "bscscan"),
    _remote("bscTestnet", "https://data-seed-prebsc-1-s1.binance.org:8545/", 97, "bscscan"),
)


def get_network(name: str, definitions=DEFAULT_NETWORKS) -> NetworkDefinition:
    """Look up a network definition by name.

    Raises
    ------
    ValueError
        If no definition has that name.
    """
    for definition in definitions:
        if definition.name == name:
            return definition
    known = ", ".join(d.name for d in definitions)
    raise ValueError(f"Unknown network: {name!r}. Known networks: {known}")
