"""Shared machinery of the client and server session state machines."""
import functools
import logging
from time import monotonic

from .exceptions import ProtocolError, SessionTimeoutError, StateError
from .util import int_to_hex

logger = logging.getLogger(__name__)


class WriteOnce:
    """A session field that can be assigned exactly once.

    The value is kept in the instance ``__dict__`` under the field's own name;
    since this is a data descriptor, every access still goes through it.
    """

    def __init__(self, description):
        self.description = description
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        try:
            return obj.__dict__[self.name]
        except KeyError:
            raise StateError(f"{self.description} not set") from None

    def __set__(self, obj, value):
        if self.name in obj.__dict__:
            raise StateError(f"{self.description} already set")
        obj.__dict__[self.name] = value


def step(expected_state, next_state, check_timeout=True):
    """Decorator for session step operations.

    Guards the state and the timeout before running the step, advances to
    ``next_state`` on success and aborts the session on any failure.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            if self._aborted:
                raise StateError("Session was aborted, start a new one")
            try:
                self._expect_state(expected_state)
                if check_timeout:
                    self._throw_on_timeout()
                result = func(self, *args, **kwargs)
            except Exception as ex:
                self._abort(ex)
                raise
            self._state = next_state
            self._register_activity()
            return result

        return wrapper

    return decorator


class Session:
    """Base class of `ClientSession` and `ServerSession`.

    A session is single-use and not thread-safe: callers must serialize the
    step calls made on one instance.
    """

    INITIAL_STATE = "INIT"
    TERMINAL_STATE = None

    I = WriteOnce("User identity (I)")
    _S = WriteOnce("Shared secret (S)")

    def __init__(self, config, timeout=None):
        """Create a session in its initial state.

        :param config: Shared configuration.
        :type config: Config

        :param timeout: Override of ``config.timeout`` in seconds.
        :type timeout: float
        """
        self.config = config
        self._timeout = config.timeout if timeout is None else timeout
        self._state = self.INITIAL_STATE
        self._aborted = False
        self._last_activity = monotonic()

    def __repr__(self):
        identity = self.__dict__.get("I", "?")
        return f"<{type(self).__name__} I={identity} state={self._state}>"

    @property
    def state(self) -> str:
        return self._state

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def aborted(self) -> bool:
        return self._aborted

    @property
    def S(self) -> int:
        """The shared secret, available once the peer is authenticated."""
        if self._state != self.TERMINAL_STATE:
            raise StateError("Shared secret (S) not available before authentication")
        return self._S

    @property
    def S_hex(self) -> str:
        return int_to_hex(self.S)

    def _is_set(self, name):
        return name in self.__dict__

    def _expect_state(self, state):
        if self._state != state:
            raise StateError(
                f"State violation: Session must be in {state} state "
                f"but is in {self._state}"
            )

    def _register_activity(self):
        self._last_activity = monotonic()

    def _throw_on_timeout(self):
        if not self._timeout:
            return
        elapsed = monotonic() - self._last_activity
        if elapsed > self._timeout:
            raise SessionTimeoutError(
                f"Session timeout: {elapsed:.1f}s elapsed, "
                f"limit is {self._timeout}s"
            )

    def _check_public_value(self, description, value):
        """Abort on a public value that is zero or out of range modulo N."""
        routines = self.config.routines
        if not routines.is_valid_public_value(value):
            raise ProtocolError(f"Bad {description}: value is 0 mod N")
        if value >= routines.parameters.N:
            raise ProtocolError(f"Bad {description}: value is not below N")

    def _abort(self, ex):
        """Make the session permanently unusable."""
        self._aborted = True
        self._wipe()
        logger.warning("%s: %s, abort.", self, ex)

    def _wipe(self):
        """Drop secrets held by the session, if any."""
