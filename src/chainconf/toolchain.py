"""Complete toolchain configuration: compiler, networks, verification, paths."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from chainconf.environment import ResolvedEnvironment
from chainconf.networks import DEFAULT_NETWORKS, NetworkDefinition, ResolvedNetworkConfig
from chainconf.resolver import NetworkConfigResolver
from chainconf.verification import VerificationKeyTable


@dataclass(frozen=True)
class CompilerSettings:
    """Solidity compiler settings."""

    version: str = "0.8.19"
    optimizer_enabled: bool = True
    optimizer_runs: int = 200
    via_ir: bool = True

    def as_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "settings": {
                "optimizer": {
                    "enabled": self.optimizer_enabled,
                    "runs": self.optimizer_runs,
                },
                "viaIR": self.via_ir,
            },
        }


@dataclass(frozen=True)
class ProjectPaths:
    """Filesystem roles used by the build tool."""

    sources: str = "./contracts"
    tests: str = "./test"
    cache: str = "./cache"
    artifacts: str = "./artifacts"

    def as_dict(self) -> dict[str, Any]:
        return {
            "sources": self.sources,
            "tests": self.tests,
            "cache": self.cache,
            "artifacts": self.artifacts,
        }


@dataclass(frozen=True)
class GasReporterSettings:
    """Gas usage reporter settings."""

    enabled: bool = False
    currency: str = "USD"

    def as_dict(self) -> dict[str, Any]:
        return {"enabled": self.enabled, "currency": self.currency}


@dataclass(frozen=True)
class ToolchainConfig:
    """Everything the build tool reads from its configuration file.

    Attributes
    ----------
    networks : dict[str, ResolvedNetworkConfig]
        Resolved networks keyed by name.
    verification : VerificationKeyTable
        Explorer API keys keyed by verification name.
    compiler : CompilerSettings
        Solidity compiler settings.
    gas_reporter : GasReporterSettings
        Gas reporter settings.
    paths : ProjectPaths
        Project directory layout.
    """

    networks: dict[str, ResolvedNetworkConfig]
    verification: VerificationKeyTable
    compiler: CompilerSettings = field(default_factory=CompilerSettings)
    gas_reporter: GasReporterSettings = field(default_factory=GasReporterSettings)
    paths: ProjectPaths = field(default_factory=ProjectPaths)

    def as_dict(self) -> dict[str, Any]:
        """Render in the build tool's configuration shape."""
        return {
            "solidity": self.compiler.as_dict(),
            "networks": {name: cfg.as_dict() for name, cfg in self.networks.items()},
            "etherscan": {"apiKey": self.verification.as_dict()},
            "gasReporter": self.gas_reporter.as_dict(),
            "paths": self.paths.as_dict(),
        }


def build_toolchain_config(
    env: ResolvedEnvironment,
    definitions: Iterable[NetworkDefinition] = DEFAULT_NETWORKS,
) -> ToolchainConfig:
    """Build a fresh toolchain configuration from an environment snapshot.

    Parameters
    ----------
    env : ResolvedEnvironment
        Environment snapshot.
    definitions : Iterable[NetworkDefinition]
        Network table.

    Returns
    -------
    ToolchainConfig
        The complete configuration. Never raises for any ``env`` content.
    """
    definitions = tuple(definitions)
    return ToolchainConfig(
        networks=NetworkConfigResolver(definitions).resolve(env),
        verification=VerificationKeyTable.from_definitions(definitions, env),
        gas_reporter=GasReporterSettings(enabled=env.report_gas),
    )
