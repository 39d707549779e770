"""CLI subcommands for chainconf.

Provides command-line interface for:
- Toolchain configuration (show)
- Network operations (networks, network NAME)
- Verification keys (verify-keys)
- Signer inspection (signer)
"""

import argparse
import json
import sys
from collections.abc import Mapping
from dataclasses import replace

from eth_account import Account

from chainconf.config import ToolchainSettings
from chainconf.environment import ResolvedEnvironment
from chainconf.networks import get_network
from chainconf.observability.logging import configure_logging
from chainconf.resolver import accepts_private_key
from chainconf.toolchain import ToolchainConfig, build_toolchain_config

REDACTED = "[REDACTED]"


def _mask_values(keys: Mapping[str, str]) -> dict[str, str]:
    return {name: REDACTED if value else value for name, value in keys.items()}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="chainconf",
        description="chainconf - smart-contract toolchain configuration",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    # Global flags
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output in JSON format",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Show private keys and API keys instead of redacting them",
    )
    parser.add_argument(
        "--generate-key",
        metavar="FILE",
        help="Generate a new signing key and save it to FILE, then exit",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("show", help="Show the full toolchain configuration")
    subparsers.add_parser("networks", help="List networks with chain ID and signing state")

    network_parser = subparsers.add_parser("network", help="Show one resolved network")
    network_parser.add_argument("name", type=str, help="Network name")

    subparsers.add_parser("verify-keys", help="Show verification API keys per network")
    subparsers.add_parser("signer", help="Show the address of the configured signing key")

    return parser


class CLIContext:
    """Shared context for CLI commands."""

    def __init__(self, config: ToolchainSettings, json_output: bool = False, reveal: bool = False):
        self.config = config
        self.json_output = json_output
        self.reveal = reveal
        self._environment: ResolvedEnvironment | None = None
        self._toolchain: ToolchainConfig | None = None

    @property
    def environment(self) -> ResolvedEnvironment:
        """Get environment snapshot (lazy loaded)."""
        if self._environment is None:
            self._environment = self.config.to_environment()
        return self._environment

    @property
    def display_environment(self) -> ResolvedEnvironment:
        """Environment with provider and explorer keys masked unless revealing.

        The private key is kept so the length gate still decides which
        networks are signed; accounts are masked after resolution.
        """
        env = self.environment
        if self.reveal:
            return env
        return ResolvedEnvironment(
            private_key=env.private_key,
            provider_api_keys=_mask_values(env.provider_api_keys),
            verification_api_keys=_mask_values(env.verification_api_keys),
            report_gas=env.report_gas,
        )

    @property
    def toolchain(self) -> ToolchainConfig:
        """Get toolchain configuration for display (lazy loaded)."""
        if self._toolchain is None:
            toolchain = build_toolchain_config(self.display_environment)
            if not self.reveal:
                networks = {
                    name: replace(cfg, accounts=tuple(REDACTED for _ in cfg.accounts))
                    for name, cfg in toolchain.networks.items()
                }
                toolchain = replace(toolchain, networks=networks)
            self._toolchain = toolchain
        return self._toolchain

    def output(self, data: dict) -> None:
        """Output data in the appropriate format."""
        if self.json_output:
            print(json.dumps(data, indent=2))
        else:
            self._print_formatted(data)

    def _print_formatted(self, data: dict, indent: int = 0) -> None:
        """Print data in human-readable format."""
        prefix = "  " * indent
        for key, value in data.items():
            if isinstance(value, dict):
                print(f"{prefix}{key}:")
                self._print_formatted(value, indent + 1)
            else:
                print(f"{prefix}{key}: {value}")


def cmd_show(ctx: CLIContext) -> int:
    """Show the full toolchain configuration."""
    try:
        ctx.output(ctx.toolchain.as_dict())
        return 0
    except Exception as e:
        ctx.output({"error": str(e)})
        return 1


def cmd_networks(ctx: CLIContext) -> int:
    """List networks."""
    try:
        networks = {
            name: {
                "chain_id": cfg.chain_id,
                "url": cfg.url if cfg.url is not None else "(in-process)",
                "signed": cfg.signed,
            }
            for name, cfg in ctx.toolchain.networks.items()
        }
        ctx.output(networks)
        return 0
    except Exception as e:
        ctx.output({"error": str(e)})
        return 1


def cmd_network(ctx: CLIContext, name: str) -> int:
    """Show one resolved network."""
    try:
        definition = get_network(name)
        data = {"name": name, **ctx.toolchain.networks[definition.name].as_dict()}
        if definition.explorer is not None:
            data["explorer"] = definition.explorer
        ctx.output(data)
        return 0
    except Exception as e:
        ctx.output({"error": str(e)})
        return 1


def cmd_verify_keys(ctx: CLIContext) -> int:
    """Show verification keys per network."""
    try:
        table = ctx.toolchain.verification
        ctx.output(
            {
                name: {"key": key, "supported": table.is_supported(name)}
                for name, key in table.keys.items()
            }
        )
        return 0
    except Exception as e:
        ctx.output({"error": str(e)})
        return 1


def cmd_signer(ctx: CLIContext) -> int:
    """Show the address derived from the signing key."""
    try:
        private_key = ctx.environment.private_key
        if not private_key:
            ctx.output({"error": "No signing key configured. Set PRIVATE_KEY"})
            return 1
        if not accepts_private_key(private_key):
            ctx.output(
                {"error": "PRIVATE_KEY is ignored: expected 64 hex characters without 0x prefix"}
            )
            return 1

        account = Account.from_key(private_key)
        signed = [name for name, cfg in ctx.toolchain.networks.items() if cfg.signed]
        ctx.output({"address": account.address, "networks": ", ".join(signed)})
        return 0
    except Exception as e:
        # eth_account echoes the key in some errors
        ctx.output({"error": f"Invalid signing key: {type(e).__name__}"})
        return 1


def run_cli(args: argparse.Namespace) -> int:
    """Execute CLI command based on parsed arguments.

    Returns
    -------
    int
        Exit code: 0 for success, positive for error, -1 signals caller
        to show help (no CLI command specified).
    """
    try:
        config = ToolchainSettings()
        configure_logging(level=config.log_level, log_format=config.log_format)
    except Exception as e:
        if args.json:
            print(json.dumps({"error": f"Configuration error: {e}"}))
        else:
            print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    ctx = CLIContext(config, json_output=args.json, reveal=args.reveal)

    if args.command == "show":
        return cmd_show(ctx)
    elif args.command == "networks":
        return cmd_networks(ctx)
    elif args.command == "network":
        return cmd_network(ctx, args.name)
    elif args.command == "verify-keys":
        return cmd_verify_keys(ctx)
    elif args.command == "signer":
        return cmd_signer(ctx)
    else:
        return -1
