"""
CLI Verify Command

Verify a signature object against a public key and a file.

Usage:
    keylib verify alice.pub layout.sig layout.json --type rsa [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass, field

from keylib.crypto.keyfile import read_key_file
from keylib.crypto.signatures import load_key, verify_signature
from keylib.schemas.errors import FormatException, SignatureVerificationException
from keylib.schemas.keys import Signature

from keylib_cli.commands.common import (
    EXIT_SUCCESS,
    EXIT_VERIFICATION_FAILED,
    read_payload,
    resolve_key_type,
    wants_json,
)


logger = logging.getLogger(__name__)


@dataclass
class VerifySummary:
    """Summary of a signature check for CLI output."""
    key_path: str = ""
    keyid: str = ""
    signature_keyid: str = ""
    ok: bool = False
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        d = asdict(self)
        if not d["errors"]:
            del d["errors"]
        return d


def print_summary_human(summary: VerifySummary) -> None:
    """Print summary in human-readable format."""
    print(f"key: {summary.key_path}")
    print(f"keyid: {summary.keyid}")
    print(f"signature keyid: {summary.signature_keyid}")
    print(f"ok: {str(summary.ok).lower()}")
    for err in summary.errors:
        print(f"  ✗ {err}")


def verify_cmd(args: Namespace) -> int:
    """
    Execute the verify command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 valid, 2 invalid signature)
    """
    config = args.cli_config
    key_type = resolve_key_type(args, config)
    key_path = config.keys.resolve(args.key_path)

    key = load_key(key_path, key_type, private=args.private)
    signature = Signature.from_json(read_key_file(args.signature_path, what="signature file"))
    data = read_payload(args.data_path)

    summary = VerifySummary(
        key_path=str(key_path),
        keyid=key.key_id,
        signature_keyid=signature.key_id,
    )

    if signature.key_id != key.key_id:
        logger.warning(
            f"Signature keyid {signature.key_id} does not match key {key.key_id}"
        )

    try:
        verify_signature(key, signature, data)
        summary.ok = True
    except (SignatureVerificationException, FormatException) as e:
        logger.info(f"Verification failed: {e.message}")
        summary.errors.append(e.message)

    if wants_json(args, config):
        print(json.dumps(summary.to_dict(), indent=config.output.indent))
    else:
        print_summary_human(summary)

    if not summary.ok:
        print("Signature verification FAILED", file=sys.stderr)
        return EXIT_VERIFICATION_FAILED
    return EXIT_SUCCESS
