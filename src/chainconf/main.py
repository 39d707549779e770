#!/usr/bin/env python3
"""chainconf - smart-contract toolchain configuration.

Entry point for the chainconf command.
"""

import os
import sys
import tempfile
from pathlib import Path

from eth_account import Account

from chainconf.cli import create_parser, run_cli


def generate_key(output_path: str) -> None:
    """Generate a new signing key and save it to a file.

    The key is written as 64 hex characters without a ``0x`` prefix,
    the format ``PRIVATE_KEY`` expects.

    Parameters
    ----------
    output_path : str
        Path to save the private key file.
    """
    account = Account.create()

    # Write private key to file atomically with restrictive permissions.
    # Temp file lives in the same directory so the rename stays on one filesystem.
    key_path = Path(output_path)
    key_path.parent.mkdir(parents=True, exist_ok=True)

    fd, temp_path = tempfile.mkstemp(dir=key_path.parent, prefix=".chainconf-key-")
    fd_closed = False
    try:
        os.fchmod(fd, 0o600)
        os.write(fd, bytes(account.key).hex().encode())
        os.close(fd)
        fd_closed = True
        os.rename(temp_path, key_path)
    except Exception:
        if not fd_closed:
            os.close(fd)
        Path(temp_path).unlink(missing_ok=True)
        raise

    print(f"""
Signing key generated successfully!

  Address:     {account.address}
  Private Key: {key_path.absolute()}

Next steps:

  1. Fund this address on the networks you deploy to

  2. Add the key to your .env file:

     echo "PRIVATE_KEY=$(cat {key_path.absolute()})" >> .env

  3. Check which networks will sign with it:

     chainconf signer

IMPORTANT: Keep this private key secure. Anyone with access can control the account.
""")


def parse_args(argv: list[str] | None = None):
    """Parse command line arguments."""
    return create_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point for chainconf."""
    args = parse_args(argv)

    if args.generate_key:
        generate_key(args.generate_key)
        return

    exit_code = run_cli(args)
    if exit_code >= 0:
        sys.exit(exit_code)
    # exit_code < 0 means no subcommand was given
    create_parser().print_help()
    sys.exit(0)


if __name__ == "__main__":
    main()
