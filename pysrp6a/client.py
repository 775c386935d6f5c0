"""This module implements the client side of the SRP-6a handshake.

The ClientSession walks through INIT -> STEP_1 -> STEP_2 -> STEP_3:

1. ``step1`` stores the credentials.
2. ``step2`` takes the salt and B from the server and returns A and M1.
3. ``step3`` checks the server's M2; on success ``S`` is authenticated.
"""
import logging
from typing import NamedTuple

from .exceptions import (
    AuthenticationError,
    ProtocolError,
    StateError,
    ValidationError,
)
from .session import Session, WriteOnce, step
from .util import ScopedSecret, hex_to_int, int_to_hex

logger = logging.getLogger(__name__)


class ClientState:
    INIT = "INIT"
    STEP_1 = "STEP_1"
    STEP_2 = "STEP_2"
    STEP_3 = "STEP_3"


class ClientCredentials(NamedTuple):
    """Values the client sends to the server, hex encoded."""

    A: str
    M1: str


class ClientSession(Session):
    """One login attempt on the client side."""

    INITIAL_STATE = ClientState.INIT
    TERMINAL_STATE = ClientState.STEP_3

    _password = WriteOnce("User password (P)")
    A = WriteOnce("Public client value (A)")
    M1 = WriteOnce("Client evidence (M1)")

    @property
    def P(self) -> str:
        """The password, until ``step2`` consumes it."""
        secret = self._password
        if secret.consumed:
            raise StateError("User password (P) not set")
        return secret.peek()

    @step(ClientState.INIT, ClientState.STEP_1, check_timeout=False)
    def step1(self, user_id, user_password):
        """Store the user's credentials.

        :param user_id: The user identity I, must not be empty.
        :type user_id: str

        :param user_password: The password P, must not be None.
        :type user_password: str
        """
        if not isinstance(user_id, str) or not user_id.strip():
            raise ValidationError("User identity must not be None nor empty")
        if user_password is None:
            raise ValidationError("User password must not be None")

        self.I = user_id
        self._password = ScopedSecret(user_password)
        logger.debug("%s: Handshake [1/3]", user_id)

    @step(ClientState.STEP_1, ClientState.STEP_2)
    def step2(self, s_hex, B_hex) -> ClientCredentials:
        """Process the server challenge and compute the client's proof.

        :param s_hex: The user's salt, as sent by the server.
        :type s_hex: str

        :param B_hex: The server public value B.
        :type B_hex: str

        :return: A and M1 to send to the server.
        :rtype: ClientCredentials
        """
        logger.debug("%s: Handshake [2/3]", self.I)
        s = hex_to_int(s_hex, "Salt (s)")
        B = hex_to_int(B_hex, "Public server value (B)")
        self._check_public_value("public server value (B)", B)

        routines = self.config.routines
        with self._password.consume() as password:
            x = routines.compute_x(self.I, s, password)

        a = routines.generate_private_value()
        A = routines.compute_client_public_value(a)
        self._check_public_value("public client value (A)", A)
        self.A = A

        k = routines.compute_k()
        u = routines.compute_u(A, B)
        if u == 0:
            raise ProtocolError("Bad scrambling parameter (u): value is 0")

        self._S = routines.compute_client_session_key(k, x, u, a, B)
        self.M1 = routines.compute_client_evidence(self.I, s, A, B, self._S)

        return ClientCredentials(int_to_hex(self.A), int_to_hex(self.M1))

    @step(ClientState.STEP_2, ClientState.STEP_3)
    def step3(self, M2_hex):
        """Authenticate the server by checking its evidence M2.

        :param M2_hex: The server evidence.
        :type M2_hex: str

        :raises AuthenticationError: if the server failed to prove it knows
            the verifier.
        """
        logger.debug("%s: Handshake [3/3]", self.I)
        M2 = hex_to_int(M2_hex, "Server evidence (M2)")
        routines = self.config.routines
        expected = routines.compute_server_evidence(self.A, self.M1, self._S)
        if not routines.evidence_equals(expected, M2):
            raise AuthenticationError("Bad server credentials")

    def _wipe(self):
        if self._is_set("_password"):
            self._password.wipe()
