"""Scripted namespace walkthrough: list, create, verify, delete."""

import logging

from kubernetes import client

from namespace_demo.manager import K8Manager
from namespace_demo.models import DemoOptions, NamespaceLookup, NamespaceLookupError

logger = logging.getLogger(__name__)


class NamespaceDemo:
    """Runs the namespace walkthrough against one cluster.

    Every step either returns or raises. A namespace created before a
    fatal error in a later step is left in the cluster.
    """

    def __init__(self, k8_manager: K8Manager, options: DemoOptions = None):
        self.k8_manager = k8_manager
        self.options = options or DemoOptions()

    def print_namespaces(self) -> list[str]:
        """Print every namespace in the cluster, preceded by a count line."""
        names = self.k8_manager.list_namespace_names()
        print(f"There are {len(names)} namespaces in the cluster")
        for name in names:
            print(f"Namespace = {name}")
        return names

    def create_namespace(self) -> client.V1Namespace:
        namespace = self.k8_manager.create_namespace(
            self.options.namespace_name,
            labels=self.options.labels,
            isolation=self.options.isolation,
        )
        print(f"Namespace = {namespace.metadata.name}")
        return namespace

    def verify_namespace(self, name: str) -> NamespaceLookup:
        """Read the namespace back and report the outcome.

        Not found and structured API errors are printed and the run goes on.

        Raises:
            NamespaceLookupError: If the lookup failed without an API status
        """
        lookup = self.k8_manager.get_namespace(name)
        if lookup.found:
            print(f"Found namespace {name}")
        elif lookup.error.is_fatal():
            raise NamespaceLookupError(name, lookup.error)
        elif lookup.error.is_not_found():
            print(f"namespace {name} not found")
        elif lookup.error.is_status_error():
            print(f"Error getting namespace {name}: {lookup.error.message}")
        return lookup

    def delete_namespace(self, name: str) -> None:
        self.k8_manager.delete_namespace(name, grace_period_seconds=self.options.grace_period_seconds)

    def run(self) -> None:
        logger.info("=" * 80)
        logger.info(f"STARTING NAMESPACE DEMO FOR '{self.options.namespace_name}'")
        logger.info("=" * 80)

        self.print_namespaces()
        namespace = self.create_namespace()
        self.verify_namespace(self.options.namespace_name)
        self.delete_namespace(namespace.metadata.name)

        logger.info("Namespace demo completed successfully")
