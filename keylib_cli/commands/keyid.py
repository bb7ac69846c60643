"""
CLI Keyid Command

Load a key file and print its key ID, or the public key object with --json.

Usage:
    keylib keyid alice.pub --type rsa
    keylib keyid alice --type rsa --private --json
"""

from __future__ import annotations

import logging
from argparse import Namespace

from keylib.crypto.signatures import load_key

from keylib_cli.commands.common import EXIT_SUCCESS, resolve_key_type, wants_json


logger = logging.getLogger(__name__)


def keyid_cmd(args: Namespace) -> int:
    """
    Execute the keyid command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    key_type = resolve_key_type(args, config)
    key_path = config.keys.resolve(args.key_path)

    logger.info(f"Loading {key_type} key from: {key_path}")
    key = load_key(key_path, key_type, private=args.private)

    if wants_json(args, config):
        # never print private key material
        print(key.public_only().to_json(indent=config.output.indent))
    else:
        print(key.key_id)

    return EXIT_SUCCESS
