"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m keylib_cli keyid <key_path> [--type rsa|ed25519] [--private] [--json]
    python -m keylib_cli sign <key_path> <data_path> [--type ...] [--out PATH]
    python -m keylib_cli verify <key_path> <signature_path> <data_path> [--type ...] [--private] [--json]
    python -m keylib_cli config --init | --show

Environment Variables:
    KEYLIB_LOG_LEVEL        Log level (default: INFO)
    KEYLIB_LOG_FILE         Also write logs to this file
    KEYLIB_KEY_TYPE         Default keytype (default: ed25519)
    KEYLIB_KEY_DIR          Directory for relative key paths
    KEYLIB_OUTPUT_FORMAT    human or json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from keylib.config import get_default_config_template
from keylib.schemas.errors import KeylibException
from keylib.schemas.keys import KEY_VARIANTS

from keylib_cli import __version__
from keylib_cli.commands import keyid, sign, verify
from keylib_cli.commands.common import EXIT_RUNTIME_ERROR, EXIT_SUCCESS, wants_json
from keylib_cli.config import load_config


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
    )


def _add_key_type_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--type", "-t",
        dest="key_type",
        type=str,
        choices=sorted(KEY_VARIANTS),
        default=None,
        help="Key type (default: from config, ed25519)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="keylib",
        description="keylib CLI - Compute key IDs, sign files and verify signatures.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to YAML configuration file (default: ./keylib.yaml or ~/.config/keylib/config.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- keyid command ---
    keyid_parser = subparsers.add_parser(
        "keyid",
        help="Print the key ID of a key file",
        description="Load a key file and print its key ID.",
    )
    keyid_parser.add_argument("key_path", type=str, help="Path to the key file")
    _add_key_type_argument(keyid_parser)
    keyid_parser.add_argument(
        "--private",
        action="store_true",
        default=False,
        help="The key file holds a private key",
    )
    keyid_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Print the public key object instead of the key ID",
    )
    keyid_parser.set_defaults(func=keyid.keyid_cmd)

    # --- sign command ---
    sign_parser = subparsers.add_parser(
        "sign",
        help="Sign a file with a private key",
        description="Sign the bytes of a file and write a {keyid, sig} signature object.",
    )
    sign_parser.add_argument("key_path", type=str, help="Path to the private key file")
    sign_parser.add_argument("data_path", type=str, help="Path to the file to sign")
    _add_key_type_argument(sign_parser)
    sign_parser.add_argument(
        "--out", "-o",
        type=str,
        default=None,
        help="Write the signature object to this path (default: stdout)",
    )
    sign_parser.set_defaults(func=sign.sign_cmd)

    # --- verify command ---
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a signature over a file",
        description="Verify a {keyid, sig} signature object against a key and a file.",
    )
    verify_parser.add_argument("key_path", type=str, help="Path to the key file")
    verify_parser.add_argument("signature_path", type=str, help="Path to the signature object")
    verify_parser.add_argument("data_path", type=str, help="Path to the signed file")
    _add_key_type_argument(verify_parser)
    verify_parser.add_argument(
        "--private",
        action="store_true",
        default=False,
        help="The key file holds a private key; its public half is used",
    )
    verify_parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON summary",
    )
    verify_parser.set_defaults(func=verify.verify_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage configuration",
        description="Create or show configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="keylib.yaml",
        help="Path for config file (default: keylib.yaml)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("\nEdit this file to configure your settings.")
        print("You can also use environment variables (KEYLIB_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    # Default: show help
    print("Usage: keylib config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    # Load configuration
    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    # Setup logging
    log_level = args.log_level or config.logging.level
    setup_logging(level=log_level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except KeylibException as e:
        if args.debug:
            traceback.print_exc()
        if wants_json(args, config):
            error = e.to_error_model()
            print(json.dumps({"error": error.model_dump(mode="json")}, indent=config.output.indent))
        print(f"Error [{e.code}]: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except Exception as e:
        if args.debug:
            traceback.print_exc()
        else:
            print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
