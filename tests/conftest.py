"""Pytest configuration and fixtures."""

import json
import logging
from typing import Callable, Optional
from unittest.mock import MagicMock

import pytest
import yaml
from kubernetes import client
from kubernetes.client.rest import ApiException

from namespace_demo.manager import K8Manager

logger = logging.getLogger(__name__)


def make_namespace(name: str) -> client.V1Namespace:
    return client.V1Namespace(metadata=client.V1ObjectMeta(name=name))


def make_api_exception(status: int, reason: str, message: Optional[str] = None,
                       status_reason: Optional[str] = None) -> ApiException:
    """Build an ApiException shaped like a Kubernetes Status error response."""
    exception = ApiException(status=status, reason=reason)
    if message is not None:
        exception.body = json.dumps({
            "kind": "Status",
            "apiVersion": "v1",
            "status": "Failure",
            "message": message,
            "reason": status_reason or reason.replace(" ", ""),
            "code": status,
        })
    return exception


@pytest.fixture
def core_v1_api() -> MagicMock:
    """CoreV1Api stand-in that holds three namespaces and echoes created ones back."""
    api = MagicMock(spec=client.CoreV1Api)
    api.list_namespace.return_value = client.V1NamespaceList(
        items=[make_namespace(name) for name in ("default", "kube-public", "kube-system")]
    )
    api.create_namespace.side_effect = lambda body: body
    api.read_namespace.side_effect = lambda name: make_namespace(name)
    api.delete_namespace.return_value = client.V1Status(status="Success")
    return api


@pytest.fixture
def k8_manager(core_v1_api) -> K8Manager:
    return K8Manager(core_v1_api)


@pytest.fixture
def write_kubeconfig(tmp_path) -> Callable[..., str]:
    """Write a token-authenticated kubeconfig with one context per server."""

    def _write(servers: Optional[dict[str, str]] = None, current: Optional[str] = None) -> str:
        servers = servers or {"kind": "https://127.0.0.1:6443"}
        kubeconfig = {
            "apiVersion": "v1",
            "kind": "Config",
            "clusters": [{"name": name, "cluster": {"server": server}} for name, server in servers.items()],
            "users": [{"name": "admin", "user": {"token": "test-token"}}],
            "contexts": [{"name": name, "context": {"cluster": name, "user": "admin"}} for name in servers],
            "current-context": current or next(iter(servers)),
        }
        path = tmp_path / "kubeconfig"
        path.write_text(yaml.safe_dump(kubeconfig))
        logger.debug(f"Wrote kubeconfig to {path}")
        return str(path)

    return _write
