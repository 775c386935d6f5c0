"""This module implements the server side of the SRP-6a handshake.

The ServerSession walks through INIT -> STEP_1 -> STEP_2. The verifier record
comes from the caller's identity store; this module never looks it up.
"""
import logging

from .exceptions import AuthenticationError, ProtocolError, ValidationError
from .session import Session, WriteOnce, step
from .util import hex_to_int, int_to_hex

logger = logging.getLogger(__name__)


class ServerState:
    INIT = "INIT"
    STEP_1 = "STEP_1"
    STEP_2 = "STEP_2"


class ServerSession(Session):
    """One login attempt on the server side.

    The client's public value A may arrive together with the identity, in
    which case it is passed to ``step1``, or together with M1, in which case
    it is passed to ``step2``. It must be given exactly once.
    """

    INITIAL_STATE = ServerState.INIT
    TERMINAL_STATE = ServerState.STEP_2

    s = WriteOnce("Salt (s)")
    v = WriteOnce("Verifier (v)")
    _b = WriteOnce("Private server value (b)")
    B = WriteOnce("Public server value (B)")
    A = WriteOnce("Public client value (A)")
    M1 = WriteOnce("Client evidence (M1)")
    M2 = WriteOnce("Server evidence (M2)")

    @step(ServerState.INIT, ServerState.STEP_1, check_timeout=False)
    def step1(self, identifier, salt, verifier, A_hex=None) -> str:
        """Load the verifier record and compute the server public value B.

        :param identifier: The user identity I.
        :type identifier: str

        :param salt: The salt s from the verifier record.
        :type salt: str

        :param verifier: The verifier v from the verifier record.
        :type verifier: str

        :param A_hex: The client public value, if it was already received.
        :type A_hex: str

        :return: B, to send to the client along with the salt.
        :rtype: str
        """
        if not isinstance(identifier, str) or not identifier.strip():
            raise ValidationError("User identity must not be None nor empty")
        if salt is None:
            raise ValidationError("Salt (s) must not be None")
        if verifier is None:
            raise ValidationError("Verifier (v) must not be None")

        routines = self.config.routines
        s = hex_to_int(salt, "Salt (s)")
        v = hex_to_int(verifier, "Verifier (v)")
        if v % routines.parameters.N == 0:
            raise ValidationError("Bad verifier (v): value is 0 mod N")

        A = None
        if A_hex is not None:
            A = hex_to_int(A_hex, "Public client value (A)")
            self._check_public_value("public client value (A)", A)

        self.I = identifier
        self.s = s
        self.v = v
        logger.debug("%s: Handshake [1/2]", identifier)

        k = routines.compute_k()
        self._b = routines.generate_private_value()
        self.B = routines.compute_server_public_value(v, self._b, k)

        if A is not None:
            self._derive_shared_secret(A)

        return int_to_hex(self.B)

    @step(ServerState.STEP_1, ServerState.STEP_2)
    def step2(self, M1_hex, A_hex=None) -> str:
        """Authenticate the client by checking its evidence M1.

        :param M1_hex: The client evidence.
        :type M1_hex: str

        :param A_hex: The client public value, unless given to ``step1``.
        :type A_hex: str

        :return: M2, to send to the client.
        :rtype: str

        :raises AuthenticationError: if the client failed to prove it knows
            the password.
        """
        logger.debug("%s: Handshake [2/2]", self.I)
        M1 = hex_to_int(M1_hex, "Client evidence (M1)")

        if A_hex is None:
            if not self._is_set("A"):
                raise ValidationError("Public client value (A) must not be None")
        else:
            if self._is_set("A"):
                raise ValidationError("Public client value (A) already received")
            A = hex_to_int(A_hex, "Public client value (A)")
            self._check_public_value("public client value (A)", A)
            self._derive_shared_secret(A)

        self.M1 = M1
        routines = self.config.routines
        expected = routines.compute_client_evidence(
            self.I, self.s, self.A, self.B, self._S
        )
        if not routines.evidence_equals(expected, M1):
            raise AuthenticationError("Bad client credentials")

        self.M2 = routines.compute_server_evidence(self.A, M1, self._S)
        return int_to_hex(self.M2)

    def _derive_shared_secret(self, A):
        routines = self.config.routines
        self.A = A
        u = routines.compute_u(A, self.B)
        if u == 0:
            raise ProtocolError("Bad scrambling parameter (u): value is 0")
        self._S = routines.compute_server_session_key(self.v, u, A, self._b)
