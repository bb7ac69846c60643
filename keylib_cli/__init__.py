"""
keylib CLI

Command-line interface for keylib.

Usage:
    python -m keylib_cli keyid alice.pub --type rsa
    python -m keylib_cli sign alice layout.json --type rsa --out layout.sig
    python -m keylib_cli verify alice.pub layout.sig layout.json --type rsa
"""

__version__ = "0.1.0"
