"""
Shared fixtures for hex dump tests.
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest


@pytest.fixture
def sample_file(tmp_path):
    """Ten bytes, 0x00 through 0x09."""
    path = tmp_path / "sample.bin"
    path.write_bytes(bytes(range(10)))
    return path
