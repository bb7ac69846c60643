"""
CLI Sign Command

Sign a file with a private key and emit the signature object
``{"keyid": ..., "sig": ...}``.

Usage:
    keylib sign alice layout.json --type rsa --out layout.sig
"""

from __future__ import annotations

import logging
from argparse import Namespace
from pathlib import Path

from keylib.crypto.signatures import generate_signature, load_key

from keylib_cli.commands.common import EXIT_SUCCESS, read_payload, resolve_key_type


logger = logging.getLogger(__name__)


def sign_cmd(args: Namespace) -> int:
    """
    Execute the sign command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code
    """
    config = args.cli_config
    key_type = resolve_key_type(args, config)
    key_path = config.keys.resolve(args.key_path)

    logger.info(f"Loading {key_type} private key from: {key_path}")
    key = load_key(key_path, key_type, private=True)

    data = read_payload(args.data_path)
    signature = generate_signature(data, key)
    logger.info(f"Signed {len(data)} bytes with key {signature.key_id}")

    output = signature.to_json(indent=config.output.indent)
    if args.out:
        out_path = Path(args.out)
        out_path.write_text(output + "\n")
        print(f"Signature written to: {out_path}")
    else:
        print(output)

    return EXIT_SUCCESS
