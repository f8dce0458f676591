"""Client creation utilities for Kubernetes."""

import logging
import os
from typing import Optional

import yaml
from kubernetes import client, config

logger = logging.getLogger(__name__)


class ClientManager:

    @classmethod
    def create_k8s_client(cls, kubeconfig: str = "", context: Optional[str] = None) -> client.CoreV1Api:
        """Create a Kubernetes CoreV1 API client.

        The client gets its own Configuration, so loading credentials never
        touches the library's global default configuration.

        Args:
            kubeconfig: Path to the kubeconfig file. If empty, in-cluster
                configuration is tried first, then the default kubeconfig location.
            context: Kubeconfig context to use. Defaults to the current context.

        Returns:
            CoreV1Api client bound to the loaded configuration

        Raises:
            ConfigException: If the kubeconfig file is missing or malformed,
                or no configuration could be found at all
        """
        configuration = client.Configuration()

        if kubeconfig:
            if not os.path.isfile(kubeconfig):
                logger.error(f"Kubeconfig file not found: {kubeconfig}")
                raise config.ConfigException(f"Kubeconfig file not found: {kubeconfig}")
            logger.debug(f"Loading kubeconfig from {kubeconfig} (context={context})")
            cls._load_kube_config(configuration, kubeconfig, context)
        else:
            try:
                config.load_incluster_config(client_configuration=configuration)
                logger.debug("Loaded in-cluster configuration")
            except config.ConfigException:
                logger.debug(f"No in-cluster configuration, loading default kubeconfig (context={context})")
                cls._load_kube_config(configuration, None, context)

        logger.info(f"Created Kubernetes client for {configuration.host}")
        return client.CoreV1Api(api_client=client.ApiClient(configuration=configuration))

    @staticmethod
    def _load_kube_config(configuration: client.Configuration, kubeconfig: Optional[str],
                          context: Optional[str]) -> None:
        """Load a kubeconfig file into the given configuration.

        Raises:
            ConfigException: If the file is not valid YAML or has no usable configuration
        """
        try:
            config.load_kube_config(config_file=kubeconfig, context=context, client_configuration=configuration)
        except yaml.YAMLError as e:
            source = kubeconfig or "at the default location"
            logger.error(f"Kubeconfig file {source} is not valid YAML: {e}")
            raise config.ConfigException(f"Invalid kubeconfig file {source}: {e}")
