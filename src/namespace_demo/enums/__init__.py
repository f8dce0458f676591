"""Enums for the namespace demo."""

from .error_code import NamespaceErrorCode

__all__ = ["NamespaceErrorCode"]
