"""Tests for pysrp6a.config."""
from unittest.mock import Mock

import pytest

from pysrp6a.config import Config
from pysrp6a.const import DEFAULT_TIMEOUT, PRIME_GROUPS
from pysrp6a.exceptions import ConfigurationError
from pysrp6a.parameters import Parameters
from pysrp6a.routines import Routines


def test_defaults():
    """Test a bare config uses the default parameters and timeout."""
    config = Config()
    assert config.parameters.NBits == 2048
    assert config.parameters.hash_name == "SHA512"
    assert isinstance(config.routines, Routines)
    assert config.routines.parameters is config.parameters
    assert config.timeout == DEFAULT_TIMEOUT


def test_from_options():
    """Test the recognized options are honoured."""
    config = Config.from_options(group=1024, g=5, hash_name="SHA256", timeout=10)
    assert config.parameters.N == PRIME_GROUPS[1024]
    assert config.parameters.g == 5
    assert config.parameters.hash_name == "SHA256"
    assert config.timeout == 10


def test_from_options_explicit_prime():
    """Test an explicit N wins over the group selection."""
    config = Config.from_options(group=2048, N=PRIME_GROUPS[256])
    assert config.parameters.N == PRIME_GROUPS[256]


def test_from_options_errors():
    """Test bad options raise ConfigurationError."""
    with pytest.raises(ConfigurationError):
        Config.from_options(group=333)
    with pytest.raises(ConfigurationError):
        Config.from_options(hash_name="WHIRLPOOL")
    with pytest.raises(ConfigurationError):
        Config.from_options(timeout=-1)


def test_timeout_disabled():
    """Test a None timeout disables expiry."""
    assert Config(timeout=None).timeout == 0
    assert Config(timeout=0).timeout == 0


def test_routines_class_and_rng_injection():
    """Test the routines factory receives the parameters and the CSPRNG."""
    params = Parameters.for_group(256)
    random_bytes = Mock(return_value=b"\x01" * 32)
    routines_class = Mock()

    config = Config(params, routines_class=routines_class, random_bytes=random_bytes)

    routines_class.assert_called_once_with(params, random_bytes=random_bytes)
    assert config.routines is routines_class.return_value


def test_non_callable_rng():
    """Test a non-callable random source is refused."""
    with pytest.raises(ConfigurationError):
        Config(random_bytes=b"not random")


def test_immutable():
    """Test the config cannot be modified after construction."""
    config = Config(Parameters.for_group(256))
    with pytest.raises(AttributeError):
        config.timeout = 5
    with pytest.raises(AttributeError):
        config.routines = None
