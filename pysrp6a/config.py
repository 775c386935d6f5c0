"""Module for `Config` class."""
import logging

from .const import DEFAULT_GROUP, DEFAULT_HASH, DEFAULT_TIMEOUT
from .exceptions import ConfigurationError
from .parameters import Parameters
from .routines import Routines

logger = logging.getLogger(__name__)


class Config:
    """Binds `Parameters` to a `Routines` instance and a session timeout.

    Built once and shared read-only by any number of sessions.
    """

    __slots__ = ("_parameters", "_routines", "_timeout")

    def __init__(
        self,
        parameters=None,
        *,
        routines_class=Routines,
        timeout=DEFAULT_TIMEOUT,
        random_bytes=None
    ):
        """Initialize a new config.

        :param parameters: Group and hash, the 2048-bit/SHA512 defaults
            when omitted.
        :type parameters: Parameters

        :param routines_class: Factory called as
            ``routines_class(parameters, random_bytes=random_bytes)``.

        :param timeout: Session lifetime in seconds between two steps.
            ``0`` or ``None`` disables expiry.
        :type timeout: float

        :param random_bytes: CSPRNG override, see `Routines`.
        """
        if timeout is not None and timeout < 0:
            raise ConfigurationError("timeout must not be negative")
        self._parameters = parameters or Parameters()
        self._routines = routines_class(self._parameters, random_bytes=random_bytes)
        self._timeout = timeout or 0

    @classmethod
    def from_options(
        cls,
        group=DEFAULT_GROUP,
        N=None,
        g=None,
        hash_name=DEFAULT_HASH,
        timeout=DEFAULT_TIMEOUT,
    ):
        """Build a config from the recognized options.

        An explicit ``N`` takes precedence over ``group``.
        """
        if N is not None:
            parameters = Parameters(N, g, hash_name)
        else:
            parameters = Parameters.for_group(group, g, hash_name)
        logger.debug("Created config %r with timeout %s", parameters, timeout)
        return cls(parameters, timeout=timeout)

    @property
    def parameters(self) -> Parameters:
        return self._parameters

    @property
    def routines(self) -> Routines:
        return self._routines

    @property
    def timeout(self) -> float:
        """Session timeout in seconds, 0 when sessions never expire."""
        return self._timeout
