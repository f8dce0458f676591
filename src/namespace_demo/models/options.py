"""Run options for the namespace demo."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from namespace_demo.constants import Config

logger = logging.getLogger(__name__)


def parse_labels(pairs: Iterable[str]) -> dict[str, str]:
    """Parse KEY=VALUE strings into a labels mapping.

    Args:
        pairs: Label specifications such as "team=platform"

    Returns:
        Labels mapping; later keys override earlier ones

    Raises:
        ValueError: If a pair has no '=' or an empty key
    """
    labels = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Invalid label '{pair}', expected KEY=VALUE")
        labels[key] = value.strip()
    return labels


def parse_grace_period(value: Optional[str]) -> Optional[int]:
    """Convert a grace period given as text into seconds.

    Returns None for an unset or blank value. Raises ValueError if the
    value is not a non-negative integer.
    """
    if value is None or not value.strip():
        return None
    try:
        seconds = int(value)
    except ValueError:
        raise ValueError(f"Invalid grace period '{value}', expected a whole number of seconds")
    if seconds < 0:
        raise ValueError("grace_period_seconds cannot be negative")
    return seconds


@dataclass(frozen=True)
class DemoOptions:
    """Options for one run of the namespace demo.

    Attributes:
        namespace_name: Name of the namespace to create, verify and delete
        labels: Labels attached to the created namespace (empty by default)
        isolation: Ingress isolation written into the network-policy annotation
            (empty by default)
        grace_period_seconds: Grace period for the deletion; None leaves the
            server default in place
    """

    namespace_name: str = Config.NAMESPACE_NAME
    labels: dict[str, str] = field(default_factory=lambda: parse_labels(Config.LABELS))
    isolation: str = Config.ISOLATION
    grace_period_seconds: Optional[int] = field(default_factory=lambda: parse_grace_period(Config.GRACE_PERIOD_SECONDS))

    def __post_init__(self):
        if not self.namespace_name or not self.namespace_name.strip():
            logger.error("Namespace name is empty")
            raise ValueError("namespace_name cannot be empty")
        if self.grace_period_seconds is not None and self.grace_period_seconds < 0:
            logger.error(f"Negative grace period: {self.grace_period_seconds}")
            raise ValueError("grace_period_seconds cannot be negative")
