"""Client and kubeconfig helpers."""

from .client import ClientManager
from .kubeconfig import default_kubeconfig_path, home_dir, resolve_kubeconfig_path

__all__ = ["ClientManager", "default_kubeconfig_path", "home_dir", "resolve_kubeconfig_path"]
