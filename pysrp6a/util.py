"""Hex codec and small helpers shared by the routines and the sessions."""
from contextlib import contextmanager
import re

from .exceptions import StateError, ValidationError

HEX_RE = re.compile(r"[0-9a-fA-F]+")


def even_length_hex(hex_str):
    """Left-pad ``hex_str`` with one zero nibble if its length is odd."""
    if len(hex_str) % 2 == 1:
        return "0" + hex_str
    return hex_str


def hex_to_int(hex_str, name="value"):
    """
    Convert a hex string received from the transport to an ``int``.

    Odd-length input is normalized first, so ``"abc"`` and ``"0abc"`` decode
    to the same integer.

    :param hex_str: Unsigned big-endian hex, without a ``0x`` prefix.
    :type hex_str: str

    :param name: Name of the field, only used in error messages.
    :type name: str

    :return: The decoded integer.
    :rtype: int

    :raises ValidationError: if ``hex_str`` is empty or not hexadecimal.
    """
    if not isinstance(hex_str, str) or not hex_str:
        raise ValidationError(f"{name} must be a non-empty hex string")
    if not HEX_RE.fullmatch(hex_str):
        raise ValidationError(f"{name} is not a valid hex string")
    return int(even_length_hex(hex_str), 16)


def int_to_hex(n):
    """Convert an ``int`` to an even-length, lowercase hex string."""
    return even_length_hex(f"{n:x}")


def int_to_bytes(n):
    """
    Convert an ``int`` to its minimal big-endian ``bytes`` form.

    Zero is encoded as a single zero byte.

    :param n: Unsigned integer.
    :type n: int

    :rtype: bytes
    """
    return n.to_bytes(max(1, (n.bit_length() + 7) // 8), byteorder="big")


def pad(n, length):
    """Encode ``n`` big-endian and left-pad it with zero bytes to ``length``."""
    return n.to_bytes(length, byteorder="big")


class ScopedSecret:
    """A secret that may be read exactly once.

    The value lives in a ``bytearray`` that is zeroed as soon as the
    ``consume`` block exits. Erasure is best-effort: the caller's original
    ``str`` and any copies the interpreter made along the way are out of
    reach and are reclaimed whenever the garbage collector decides to.
    """

    __slots__ = ("_buffer",)

    def __init__(self, value):
        if isinstance(value, str):
            value = value.encode("utf-8")
        self._buffer = bytearray(value)

    def __repr__(self):
        return "<ScopedSecret consumed>" if self.consumed else "<ScopedSecret ***>"

    @property
    def consumed(self):
        """Return if the secret was already read or wiped."""
        return self._buffer is None

    def peek(self):
        """Return a decoded copy of the secret without consuming it."""
        if self._buffer is None:
            raise StateError("Secret already consumed")
        return self._buffer.decode("utf-8")

    @contextmanager
    def consume(self):
        """Yield the backing ``bytearray`` once and wipe it on exit."""
        if self._buffer is None:
            raise StateError("Secret already consumed")
        try:
            yield self._buffer
        finally:
            self.wipe()

    def wipe(self):
        """Zero the backing buffer and drop the reference to it."""
        if self._buffer is None:
            return
        self._buffer[:] = bytes(len(self._buffer))
        self._buffer = None
