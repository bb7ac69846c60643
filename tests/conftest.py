"""
Pytest configuration and shared fixtures for keylib tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used key fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_keys = importlib.import_module("fixtures.keys")

rsa_private_pem = _keys.rsa_private_pem
rsa_public_pem = _keys.rsa_public_pem
write_key_file = _keys.write_key_file
make_ed25519_public_json = _keys.make_ed25519_public_json
make_ed25519_private_json = _keys.make_ed25519_private_json


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def rsa_private_key_path(tmp_path):
    """PKCS#1 RSA private key file."""
    return write_key_file(tmp_path, "alice", rsa_private_pem())


@pytest.fixture
def rsa_public_key_path(tmp_path):
    """SPKI RSA public key file matching ``rsa_private_key_path``."""
    return write_key_file(tmp_path, "alice.pub", rsa_public_pem())


@pytest.fixture
def ed25519_private_key_path(tmp_path):
    """Sample ed25519 private key file."""
    return write_key_file(tmp_path, "bob", make_ed25519_private_json())


@pytest.fixture
def ed25519_public_key_path(tmp_path):
    """Sample ed25519 public key file."""
    return write_key_file(tmp_path, "bob.pub", make_ed25519_public_json())


@pytest.fixture
def rsa_key(rsa_private_key_path):
    """Loaded RSA private key."""
    from keylib.crypto.rsa import load_rsa_private_key
    return load_rsa_private_key(rsa_private_key_path)


@pytest.fixture
def ed25519_key(ed25519_private_key_path):
    """Loaded sample ed25519 private key."""
    from keylib.crypto.ed25519 import load_ed25519_private_key
    return load_ed25519_private_key(ed25519_private_key_path)


@pytest.fixture(autouse=True)
def _clean_keylib_env(monkeypatch):
    """Keep KEYLIB_* variables from the developer's shell out of tests."""
    for name in (
        "KEYLIB_LOG_LEVEL",
        "KEYLIB_LOG_FILE",
        "KEYLIB_KEY_TYPE",
        "KEYLIB_KEY_DIR",
        "KEYLIB_OUTPUT_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
