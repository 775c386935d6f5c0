"""Exceptions raised by the SRP-6a engine.

All of them derive from :class:`SRPError`. None of them is recoverable on the
session that raised it: discard the session and start over with a new one.
"""


class SRPError(Exception):
    """Base class for all SRP errors."""


class ConfigurationError(SRPError, ValueError):
    """Unsupported hash, group or option given when building a Config."""


class ValidationError(SRPError, ValueError):
    """Empty or malformed input given to a step operation."""


class ProtocolError(SRPError):
    """A public value (or the scrambler u) is zero modulo N."""


class AuthenticationError(SRPError):
    """The peer's evidence message did not match the expected one."""


class SessionTimeoutError(SRPError, TimeoutError):
    """The session outlived its configured timeout."""


class StateError(SRPError, RuntimeError):
    """Operation out of sequence or a write-once field assigned twice."""
