"""Kubernetes namespace create/verify/delete demo."""

from .demo import NamespaceDemo
from .manager import K8Manager
from .models import DemoOptions
from .utils import ClientManager

__all__ = ["NamespaceDemo", "K8Manager", "DemoOptions", "ClientManager"]
