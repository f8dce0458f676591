import os
from typing import Optional


class Config:

    NETWORK_POLICY_ANNOTATION: str = "net.beta.kubernetes.io/network-policy"
    KUBECONFIG_DIR: str = ".kube"
    KUBECONFIG_FILE: str = "config"

    NAMESPACE_NAME: str = os.getenv("NAMESPACE_DEMO_NAME", "my-test-namespace")
    ISOLATION: str = os.getenv("NAMESPACE_DEMO_ISOLATION", "")
    # Raw value, converted and validated when options are built
    GRACE_PERIOD_SECONDS: Optional[str] = os.getenv("NAMESPACE_DEMO_GRACE_PERIOD_SECONDS") or None
    LOG_LEVEL: str = os.getenv("NAMESPACE_DEMO_LOG_LEVEL", "WARNING").upper()

    LABELS: list[str] = [
        label.strip()
        for label in os.getenv("NAMESPACE_DEMO_LABELS", "").split(",")
        if label.strip()  # Filter out empty strings after stripping
    ]
