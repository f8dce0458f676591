"""Kubernetes resource managers."""

from .namespace import K8Manager

__all__ = ["K8Manager"]
