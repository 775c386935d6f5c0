"""Test for pysrp6a.util."""
import pytest

from pysrp6a import util
from pysrp6a.exceptions import StateError, ValidationError


def test_even_length_hex():
    """Test odd-length hex gets a leading zero nibble."""
    assert util.even_length_hex("abc") == "0abc"
    assert util.even_length_hex("0abc") == "0abc"
    assert util.even_length_hex("") == ""


def test_hex_to_int_normalizes_odd_length():
    """Test "abc" and "0abc" decode to the same integer."""
    assert util.hex_to_int("abc") == util.hex_to_int("0abc") == 0xABC
    assert util.hex_to_int("F") == 15


@pytest.mark.parametrize("bad", ["", None, "xyz", "0x12", " 12", "12\n", "1_2", "-1", 12])
def test_hex_to_int_rejects_malformed(bad):
    """Test malformed input raises ValidationError."""
    with pytest.raises(ValidationError):
        util.hex_to_int(bad, "B")


def test_int_to_hex():
    """Test encoding is lowercase and of even length."""
    assert util.int_to_hex(0) == "00"
    assert util.int_to_hex(0xABC) == "0abc"
    assert util.int_to_hex(255) == "ff"


def test_int_to_bytes():
    """Test minimal big-endian encoding."""
    assert util.int_to_bytes(0) == b"\x00"
    assert util.int_to_bytes(1) == b"\x01"
    assert util.int_to_bytes(0x1234) == b"\x12\x34"


def test_pad():
    """Test left padding with zero bytes."""
    assert util.pad(2, 4) == b"\x00\x00\x00\x02"
    with pytest.raises(OverflowError):
        util.pad(0x10000, 2)


def test_scoped_secret_consume_wipes():
    """Test the secret can be consumed once and is zeroed afterwards."""
    secret = util.ScopedSecret("hunter2")
    assert not secret.consumed
    assert secret.peek() == "hunter2"
    assert "hunter2" not in repr(secret)

    with secret.consume() as data:
        buffer = data
        assert bytes(data) == b"hunter2"

    assert secret.consumed
    assert buffer == bytearray(7)
    with pytest.raises(StateError):
        secret.peek()
    with pytest.raises(StateError):
        with secret.consume():
            pass


def test_scoped_secret_wiped_on_error():
    """Test an exception inside the consume block still wipes the buffer."""
    secret = util.ScopedSecret(b"hunter2")
    with pytest.raises(KeyError):
        with secret.consume() as data:
            buffer = data
            raise KeyError
    assert secret.consumed
    assert buffer == bytearray(7)
    secret.wipe()
