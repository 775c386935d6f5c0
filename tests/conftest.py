"""Test fixtures and mocks."""

from unittest.mock import patch

import pytest

from pysrp6a.config import Config
from pysrp6a.parameters import Parameters
from pysrp6a.routines import create_verifier_and_salt

from . import IDENTITY, PASSWORD, MockClock


@pytest.fixture(scope="session")
def config():
    """The default 2048-bit / SHA512 config."""
    yield Config()


@pytest.fixture(scope="session")
def small_config():
    """A 512-bit / SHA256 config, enough to exercise the state machines."""
    yield Config(Parameters.for_group(512, hash_name="SHA256"), timeout=60)


@pytest.fixture
def record(config):
    yield create_verifier_and_salt(config.routines, IDENTITY, PASSWORD)


@pytest.fixture
def small_record(small_config):
    yield create_verifier_and_salt(small_config.routines, IDENTITY, PASSWORD)


@pytest.fixture
def clock():
    with patch("pysrp6a.session.monotonic", MockClock()) as mock_clock:
        yield mock_clock
