"""SRP-6a arithmetic over a given set of `Parameters`.

Every method is a pure function of its arguments and the parameters, except
for the two random generators, which draw from the injected CSPRNG.
"""
import os
from typing import NamedTuple

from cryptography.hazmat.primitives import constant_time

from .const import DEFAULT_SALT_LENGTH, MIN_PRIVATE_VALUE_BITS
from .exceptions import ConfigurationError, ValidationError
from .util import hex_to_int, int_to_bytes, int_to_hex, pad

# a    Client private ephemeral value (int)
# A    Client public ephemeral value (int)
# b    Server private ephemeral value (int)
# B    Server public ephemeral value (int)
# g    A generator modulo N (int)
# I    Username (str)
# k    Multiplier parameter (int)
# M1   Client evidence (int)
# M2   Server evidence (int)
# N    Large safe prime (int)
# P    Cleartext password (str, bytes or bytearray)
# s    Salt (int)
# S    Premaster secret (int)
# u    Random scrambling parameter (int)
# v    Password verifier (int)
# x    Private key derived from I, P and s (int)


def _to_bytes(value):
    if isinstance(value, str):
        return value.encode("utf-8")
    return value


class VerifierRecord(NamedTuple):
    """What the identity store keeps for a user. ``s`` and ``v`` are hex."""

    I: str
    s: str
    v: str


class Routines:
    """SRP-6a routines bound to one set of parameters."""

    def __init__(self, parameters, random_bytes=None):
        """Bind the routines to ``parameters``.

        :param parameters: The group and hash to compute over.
        :type parameters: Parameters

        :param random_bytes: CSPRNG taking a byte count and returning that many
            random bytes. Defaults to ``os.urandom``; inject a deterministic
            source only in tests.
        :type random_bytes: callable
        """
        if random_bytes is None:
            random_bytes = os.urandom
        if not callable(random_bytes):
            raise ConfigurationError("random_bytes must be callable")
        self._parameters = parameters
        self._random_bytes = random_bytes

    @property
    def parameters(self):
        return self._parameters

    def _pad(self, n):
        return pad(n, self.parameters.N_length)

    def _hash_to_int(self, *chunks):
        return int.from_bytes(self.parameters.digest(*chunks), byteorder="big")

    def compute_k(self):
        """k = H(N | PAD(g))"""
        params = self.parameters
        return self._hash_to_int(self._pad(params.N), self._pad(params.g))

    def compute_identity_hash(self, I, P):
        """H(I | ":" | P), the only place the password is ever read."""
        return self.parameters.digest(_to_bytes(I), b":", _to_bytes(P))

    def compute_x_from_identity_hash(self, s, identity_hash):
        """x = H(s | identity_hash) mod N"""
        return self._hash_to_int(int_to_bytes(s), identity_hash) % self.parameters.N

    def compute_x(self, I, s, P):
        """x = H(s | H(I | ":" | P)) mod N"""
        return self.compute_x_from_identity_hash(s, self.compute_identity_hash(I, P))

    def generate_verifier(self, I, s, P):
        """v = g^x mod N, computed once at registration."""
        params = self.parameters
        return pow(params.g, self.compute_x(I, s, P), params.N)

    def generate_random_salt(self, num_bytes=DEFAULT_SALT_LENGTH):
        """Return a fresh random salt as a hex string."""
        return self._random_bytes(num_bytes).hex()

    def generate_private_value(self):
        """Return a random non-zero private ephemeral value below N."""
        params = self.parameters
        num_bytes = (max(MIN_PRIVATE_VALUE_BITS, params.NBits) + 7) // 8
        while True:
            value = int.from_bytes(self._random_bytes(num_bytes), byteorder="big")
            value %= params.N
            if value != 0:
                return value

    def compute_client_public_value(self, a):
        """A = g^a mod N"""
        params = self.parameters
        return pow(params.g, a, params.N)

    def compute_server_public_value(self, v, b, k=None):
        """B = (k * v + g^b) mod N"""
        params = self.parameters
        if k is None:
            k = self.compute_k()
        return (k * v + pow(params.g, b, params.N)) % params.N

    def is_valid_public_value(self, value):
        """Return False if ``value`` is congruent to zero modulo N."""
        return value % self.parameters.N != 0

    def compute_u(self, A, B):
        """u = H(PAD(A) | PAD(B))"""
        return self._hash_to_int(self._pad(A), self._pad(B))

    def compute_client_session_key(self, k, x, u, a, B):
        """S = (B - k * g^x) ^ (a + u * x) mod N"""
        N = self.parameters.N
        base = (B - k * pow(self.parameters.g, x, N)) % N
        return pow(base, a + u * x, N)

    def compute_server_session_key(self, v, u, A, b):
        """S = (A * v^u) ^ b mod N"""
        N = self.parameters.N
        return pow(A * pow(v, u, N) % N, b, N)

    def compute_client_evidence(self, I, s, A, B, S):
        """M1 = H(PAD(A) | PAD(B) | PAD(S))

        ``I`` and ``s`` are accepted so both peers share one signature, but
        they are not part of the hash.
        """
        return self._hash_to_int(self._pad(A), self._pad(B), self._pad(S))

    def compute_server_evidence(self, A, M1, S):
        """M2 = H(PAD(A) | M1 | PAD(S)), with M1 padded to the digest length."""
        return self._hash_to_int(
            self._pad(A), pad(M1, self.parameters.H_length), self._pad(S)
        )

    def evidence_equals(self, expected, received):
        """Compare two evidence values in constant time."""
        length = self.parameters.H_length
        if received.bit_length() > length * 8:
            return False
        return constant_time.bytes_eq(pad(expected, length), pad(received, length))


def create_verifier_and_salt(routines, I, P, salt_bytes=None):
    """Register a user: draw a salt and derive the verifier.

    :param routines: Routines bound to the parameters the server will use.
    :type routines: Routines

    :param I: User identity.
    :type I: str

    :param P: User password.
    :type P: str

    :param salt_bytes: Salt length in bytes, defaults to 16.
    :type salt_bytes: int

    :return: The record to hand to the identity store.
    :rtype: VerifierRecord
    """
    if not I or not I.strip():
        raise ValidationError("User identity must not be empty")
    if P is None:
        raise ValidationError("User password must not be None")

    s_hex = routines.generate_random_salt(salt_bytes or DEFAULT_SALT_LENGTH)
    v = routines.generate_verifier(I, hex_to_int(s_hex, "s"), P)
    return VerifierRecord(I, s_hex, int_to_hex(v))
