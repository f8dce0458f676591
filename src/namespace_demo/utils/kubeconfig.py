"""Kubeconfig path resolution."""

import os
from typing import Mapping, Optional

from namespace_demo.constants import Config


def home_dir(environ: Optional[Mapping[str, str]] = None) -> str:
    """Return the user's home directory from the environment.

    HOME wins over USERPROFILE (set on Windows). Returns an empty
    string when neither is set.
    """
    environ = os.environ if environ is None else environ
    return environ.get("HOME") or environ.get("USERPROFILE") or ""


def default_kubeconfig_path(environ: Optional[Mapping[str, str]] = None) -> str:
    home = home_dir(environ)
    if not home:
        return ""
    return os.path.join(home, Config.KUBECONFIG_DIR, Config.KUBECONFIG_FILE)


def resolve_kubeconfig_path(explicit: Optional[str] = None, environ: Optional[Mapping[str, str]] = None) -> str:
    """Pick the kubeconfig path to load.

    Args:
        explicit: Path given on the command line, if any
        environ: Environment to read the home directory from (defaults to os.environ)

    Returns:
        The explicit path if given, else <home>/.kube/config, else ""
    """
    if explicit is not None:
        return explicit
    return default_kubeconfig_path(environ)
