"""Failure kinds reported by a namespace lookup."""

from enum import Enum


class NamespaceErrorCode(str, Enum):
    """Classification of a failed namespace request.

    Exactly one of these is attached to every failed lookup:
    the API server says the namespace does not exist, the API server
    answered with some other Status, or the request never produced a
    Status at all (connection refused, TLS failure, timeout).
    """

    NOT_FOUND = "NOT_FOUND"
    STATUS = "STATUS"
    TRANSPORT = "TRANSPORT"

    def is_fatal(self) -> bool:
        """Check whether the demo should abort on this kind of failure.

        Returns:
            True only for transport-level failures
        """
        return self is NamespaceErrorCode.TRANSPORT

    def __str__(self) -> str:
        return self.value
