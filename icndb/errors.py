"""
Error taxonomy for the ICNDB client.
"""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    """The three ways a call against ICNDB can fail."""

    # ICNDB rarely returns a useful status code or even a JSON error body.
    # Broken requests tend to come back as an HTML page about an undefined
    # method, so anything that is not the expected envelope lands here.
    API = "ICNDB returned an error"

    # The response body could not be read as text.
    DECODE = "unable to decode response"

    # The request never completed (DNS, connection, TLS, truncated stream).
    NETWORK = "unable to contact ICNDB"

    @property
    def description(self) -> str:
        return self.value


class IcndbError(Exception):
    """
    Raised by every client operation that does not produce a joke.

    The message is fixed per kind; the underlying exception, if any, is
    kept on ``cause`` (and ``__cause__``) for debugging only.
    """

    def __init__(self, kind: ErrorKind, cause: Optional[BaseException] = None):
        super().__init__(kind.description)
        self.kind = kind
        self.cause = cause
        self.__cause__ = cause

    @classmethod
    def api(cls, cause: Optional[BaseException] = None) -> "IcndbError":
        return cls(ErrorKind.API, cause)

    @classmethod
    def decode(cls, cause: Optional[BaseException] = None) -> "IcndbError":
        return cls(ErrorKind.DECODE, cause)

    @classmethod
    def network(cls, cause: Optional[BaseException] = None) -> "IcndbError":
        return cls(ErrorKind.NETWORK, cause)

    @property
    def description(self) -> str:
        return self.kind.description

    def __str__(self) -> str:
        return self.kind.description

    def __reduce__(self):
        return (type(self), (self.kind, self.cause))

    def __repr__(self) -> str:
        return f"IcndbError(kind={self.kind.name}, cause={self.cause!r})"
