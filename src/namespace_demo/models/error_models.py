"""Pydantic models for namespace request failures.

This module turns the exceptions raised by the Kubernetes client into a
structured error with one of three codes, so callers can branch on the
code instead of inspecting exception types.
"""

import json
import logging
from typing import Any, Optional

from kubernetes.client.rest import ApiException
from pydantic import BaseModel, ConfigDict, Field

from namespace_demo.enums import NamespaceErrorCode

logger = logging.getLogger(__name__)


class NamespaceError(BaseModel):
    """Error details for a failed namespace request."""
    code: NamespaceErrorCode = Field(..., description="Kind of failure")
    message: str = Field(..., description="Human-readable error message")
    status: Optional[int] = Field(None, description="HTTP status code, if the API server answered")
    reason: Optional[str] = Field(None, description="Status reason reported by the API server")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_exception(cls, exception: Exception) -> "NamespaceError":
        """Create a NamespaceError from an exception raised by the client.

        Args:
            exception: The original exception

        Returns:
            NamespaceError: Structured error with its code resolved
        """
        if not isinstance(exception, ApiException):
            return cls(code=NamespaceErrorCode.TRANSPORT, message=str(exception))

        # urllib3 failures (TLS, connection) are re-raised by the client with status 0
        if not exception.status:
            return cls(code=NamespaceErrorCode.TRANSPORT, message=exception.reason or str(exception))

        status_body = cls._parse_status_body(exception.body)
        reason = status_body.get("reason") or exception.reason
        message = status_body.get("message") or exception.reason or str(exception)

        if exception.status == 404 or reason == "NotFound":
            code = NamespaceErrorCode.NOT_FOUND
        else:
            code = NamespaceErrorCode.STATUS

        return cls(code=code, message=message, status=exception.status, reason=reason)

    @staticmethod
    def _parse_status_body(body: Any) -> dict[str, Any]:
        """Decode a Kubernetes Status object from an error response body.

        Args:
            body: Raw response body (str, bytes or None)

        Returns:
            Decoded Status fields, or an empty dict if the body is not a Status
        """
        if not body:
            return {}
        try:
            decoded = json.loads(body)
        except (TypeError, ValueError):
            logger.debug(f"Error response body is not JSON: {body!r}")
            return {}
        return decoded if isinstance(decoded, dict) else {}

    def is_not_found(self) -> bool:
        return self.code == NamespaceErrorCode.NOT_FOUND

    def is_status_error(self) -> bool:
        return self.code == NamespaceErrorCode.STATUS

    def is_fatal(self) -> bool:
        return self.code.is_fatal()


class NamespaceLookup(BaseModel):
    """Outcome of reading a namespace back by name.

    Exactly one of `namespace` and `error` is set.
    """
    name: str = Field(..., description="Namespace name that was requested")
    namespace: Optional[Any] = Field(None, description="V1Namespace returned by the API server")
    error: Optional[NamespaceError] = Field(None, description="Failure details when the read did not succeed")

    @property
    def found(self) -> bool:
        return self.error is None


class NamespaceLookupError(Exception):
    """Raised when a namespace lookup failed in a way the demo cannot continue from."""

    def __init__(self, name: str, error: NamespaceError):
        super().__init__(f"Failed to get namespace '{name}': {error.message}")
        self.name = name
        self.error = error
