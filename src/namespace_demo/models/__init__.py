"""Data models shared by the namespace demo."""

from .error_models import NamespaceError, NamespaceLookup, NamespaceLookupError
from .options import DemoOptions, parse_grace_period, parse_labels
from .policy import IngressPolicy, NamespacePolicy

__all__ = [
    "NamespaceError",
    "NamespaceLookup",
    "NamespaceLookupError",
    "DemoOptions",
    "parse_grace_period",
    "parse_labels",
    "IngressPolicy",
    "NamespacePolicy",
]
