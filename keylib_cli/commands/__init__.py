"""
CLI command modules.
"""

from keylib_cli.commands import keyid, sign, verify

__all__ = ["keyid", "sign", "verify"]
