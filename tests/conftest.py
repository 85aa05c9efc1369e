# SPDX-License-Identifier: MIT
# Copyright (c) 2026 ADNT Sarl <info@adnt.io>

"""Shared fixtures for CRC-32 tests."""

import pytest

# Standard check input for CRC catalogues
CHECK_INPUT = b"123456789"


@pytest.fixture
def check_input():
    """The "123456789" check string."""
    return CHECK_INPUT


@pytest.fixture
def sample_data():
    """A buffer covering every byte value several times."""
    return bytes(range(256)) * 4 + b"trailing bytes"


@pytest.fixture
def sample_file(tmp_path, sample_data):
    """A file holding sample_data."""
    path = tmp_path / "sample.bin"
    path.write_bytes(sample_data)
    return path
