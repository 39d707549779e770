"""
chainconf: network, compiler and verification configuration for smart-contract builds
"""

from .environment import ResolvedEnvironment
from .networks import (
    DEFAULT_NETWORKS,
    GasPricingMode,
    NetworkDefinition,
    ResolvedNetworkConfig,
    get_network,
)
from .resolver import NetworkConfigResolver, resolve
from .toolchain import ToolchainConfig, build_toolchain_config
from .verification import VerificationKeyTable

__all__ = [
    "DEFAULT_NETWORKS",
    "GasPricingMode",
    "NetworkConfigResolver",
    "NetworkDefinition",
    "ResolvedEnvironment",
    "ResolvedNetworkConfig",
    "ToolchainConfig",
    "VerificationKeyTable",
    "build_toolchain_config",
    "get_network",
    "resolve",
]
