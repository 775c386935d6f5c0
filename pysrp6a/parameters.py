"""Module for the `Parameters` class: the group (N, g) and the hash H."""
import logging
from types import MappingProxyType

from cryptography.hazmat.primitives import hashes

from .const import DEFAULT_GENERATOR, DEFAULT_GROUP, DEFAULT_HASH, PRIME_GROUPS
from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

HASH_PROBE = b"a"

HASH_ALGORITHMS = MappingProxyType(
    {
        "SHA1": hashes.SHA1,
        "SHA224": hashes.SHA224,
        "SHA256": hashes.SHA256,
        "SHA384": hashes.SHA384,
        "SHA512": hashes.SHA512,
        "SHA3_256": hashes.SHA3_256,
        "SHA3_384": hashes.SHA3_384,
        "SHA3_512": hashes.SHA3_512,
    }
)


def _to_integer(value, name):
    """Accept an ``int`` or a decimal ``str``."""
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 10)
        except ValueError:
            pass
    raise ConfigurationError(f"{name} must be an integer or a decimal string")


class Parameters:
    """Immutable description of the SRP group and hash function.

    The hash name is resolved once, here, to a ``cryptography`` hash
    algorithm; every later hash call reuses that algorithm.
    """

    __slots__ = ("_N", "_NBits", "_g", "_hash_name", "_H", "_HBits")

    def __init__(self, N=None, g=None, hash_name=None):
        """Initialize the parameters.

        :param N: The large safe prime, 2048-bit group when omitted.
        :type N: int or str

        :param g: The generator modulo N, 2 when omitted.
        :type g: int or str

        :param hash_name: One of :data:`HASH_ALGORITHMS`, SHA512 when omitted.
        :type hash_name: str

        :raises ConfigurationError: on an unknown hash or an invalid group.
        """
        N = _to_integer(PRIME_GROUPS[DEFAULT_GROUP] if N is None else N, "N")
        g = _to_integer(DEFAULT_GENERATOR if g is None else g, "g")
        if N <= 2 or N % 2 == 0:
            raise ConfigurationError("N must be an odd prime greater than 2")
        if not 1 < g < N:
            raise ConfigurationError("g must satisfy 1 < g < N")

        hash_name = (hash_name or DEFAULT_HASH).upper()
        if hash_name not in HASH_ALGORITHMS:
            raise ConfigurationError(f"Unknown hash function: {hash_name}")

        self._N = N
        self._NBits = N.bit_length()
        self._g = g
        self._hash_name = hash_name
        self._H = HASH_ALGORITHMS[hash_name]()
        # Measure the output size instead of trusting the algorithm metadata
        self._HBits = len(self.digest(HASH_PROBE)) * 8
        logger.debug(
            "Using %d-bit group with %s (%d bits)",
            self._NBits,
            self._hash_name,
            self._HBits,
        )

    @classmethod
    def for_group(cls, bits, g=None, hash_name=None):
        """Build parameters from one of the predefined prime groups."""
        if bits not in PRIME_GROUPS:
            raise ConfigurationError(
                f"Unknown prime group: {bits} (expected one of {sorted(PRIME_GROUPS)})"
            )
        return cls(PRIME_GROUPS[bits], g, hash_name)

    def __repr__(self):
        return f"<Parameters N={self._NBits} bits g={self._g} H={self._hash_name}>"

    @property
    def N(self) -> int:
        return self._N

    @property
    def NBits(self) -> int:
        return self._NBits

    @property
    def N_length(self) -> int:
        """Length of N in bytes, the width every padded operand gets."""
        return (self._NBits + 7) // 8

    @property
    def g(self) -> int:
        return self._g

    @property
    def H(self) -> hashes.HashAlgorithm:
        return self._H

    @property
    def hash_name(self) -> str:
        return self._hash_name

    @property
    def HBits(self) -> int:
        return self._HBits

    @property
    def H_length(self) -> int:
        """Length of a digest in bytes."""
        return self._HBits // 8

    def digest(self, *chunks) -> bytes:
        """Hash the concatenation of the given byte chunks."""
        h = hashes.Hash(self._H)
        for chunk in chunks:
            h.update(chunk)
        return h.finalize()
