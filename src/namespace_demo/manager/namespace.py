"""Kubernetes Namespace management."""

import logging
from typing import Optional

from kubernetes import client
from kubernetes.client.rest import ApiException

from namespace_demo.models import NamespaceError, NamespaceLookup, NamespacePolicy

logger = logging.getLogger(__name__)


class K8Manager:
    """Manager for Kubernetes namespace operations."""

    def __init__(self, core_v1_api: client.CoreV1Api):
        """Initialize K8Manager.

        Args:
            core_v1_api: Kubernetes CoreV1 API client
        """
        self.core_v1_api = core_v1_api

    def list_namespaces(self) -> list[client.V1Namespace]:
        """List all namespaces in the cluster.

        Returns:
            Namespaces in the order the API server returned them

        Raises:
            ApiException: If the list request fails
        """
        logger.debug("Listing namespaces")
        try:
            namespace_list = self.core_v1_api.list_namespace()
        except ApiException as e:
            logger.error(f"Failed to list namespaces: {e}")
            raise
        logger.info(f"Listed {len(namespace_list.items)} namespaces")
        return namespace_list.items

    def list_namespace_names(self) -> list[str]:
        return [namespace.metadata.name for namespace in self.list_namespaces()]

    def create_namespace(
        self,
        name: str,
        labels: Optional[dict[str, str]] = None,
        isolation: str = "",
    ) -> client.V1Namespace:
        """Create a Kubernetes namespace carrying a network isolation policy.

        Args:
            name: Namespace name
            labels: Labels for the namespace (optional)
            isolation: Ingress isolation written to the network-policy annotation

        Returns:
            The namespace as returned by the API server

        Raises:
            ApiException: If creation fails, including when the namespace already exists
        """
        annotations = NamespacePolicy.with_isolation(isolation).to_annotations()
        namespace = client.V1Namespace(
            metadata=client.V1ObjectMeta(name=name, labels=labels or None, annotations=annotations)
        )

        logger.debug(f"Creating namespace '{name}' with labels={labels} annotations={annotations}")
        try:
            created = self.core_v1_api.create_namespace(body=namespace)
        except ApiException as e:
            logger.error(f"Failed to create namespace '{name}': {e}")
            raise
        logger.info(f"Created namespace '{created.metadata.name}'")
        return created

    def get_namespace(self, name: str) -> NamespaceLookup:
        """Read a namespace back by name.

        Failures are returned rather than raised, classified as not found,
        a structured API error, or a transport error.

        Args:
            name: Namespace name

        Returns:
            Lookup result holding either the namespace or the error
        """
        logger.debug(f"Reading namespace '{name}'")
        try:
            namespace = self.core_v1_api.read_namespace(name=name)
        except Exception as e:
            error = NamespaceError.from_exception(e)
            logger.warning(f"Reading namespace '{name}' failed ({error.code}): {error.message}")
            return NamespaceLookup(name=name, error=error)
        logger.info(f"Read namespace '{name}'")
        return NamespaceLookup(name=name, namespace=namespace)

    def delete_namespace(self, name: str, grace_period_seconds: Optional[int] = None) -> None:
        """Delete a Kubernetes namespace.

        Args:
            name: Namespace name
            grace_period_seconds: Seconds before forceful removal; None uses the server default

        Raises:
            ApiException: If deletion fails
        """
        delete_options = client.V1DeleteOptions(grace_period_seconds=grace_period_seconds)
        logger.debug(f"Deleting namespace '{name}' (grace_period_seconds={grace_period_seconds})")
        try:
            self.core_v1_api.delete_namespace(name=name, body=delete_options)
        except ApiException as e:
            logger.error(f"Failed to delete namespace '{name}': {e}")
            raise
        logger.info(f"Deleted namespace '{name}'")
