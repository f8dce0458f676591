"""
Namespace demo

Connects to a Kubernetes cluster, lists its namespaces, creates a namespace
with a network-policy annotation, reads it back and deletes it.

Example usage:
    # Using ~/.kube/config
    namespace-demo

    # Using an explicit kubeconfig and isolation mode
    namespace-demo --kubeconfig /tmp/kind.kubeconfig --isolation DefaultDeny --label team=platform
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from namespace_demo.constants import Config
from namespace_demo.demo import NamespaceDemo
from namespace_demo.manager import K8Manager
from namespace_demo.models import DemoOptions, parse_grace_period, parse_labels
from namespace_demo.utils import ClientManager, default_kubeconfig_path, resolve_kubeconfig_path

logger = logging.getLogger(__name__)


def _label(value: str) -> str:
    try:
        parse_labels([value])
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))
    return value


def _grace_period(value: str) -> Optional[int]:
    try:
        return parse_grace_period(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def build_parser() -> argparse.ArgumentParser:
    kubeconfig = default_kubeconfig_path()
    if kubeconfig:
        kubeconfig_help = f"(optional) absolute path to the kubeconfig file (default: {kubeconfig})"
    else:
        kubeconfig_help = "absolute path to the kubeconfig file"

    parser = argparse.ArgumentParser(
        prog="namespace-demo",
        description="Create, verify and delete a Kubernetes namespace",
    )
    parser.add_argument("--kubeconfig", default=None, help=kubeconfig_help)
    parser.add_argument("--context", default=None,
                        help="kubeconfig context to use (default: current context)")
    parser.add_argument("--name", default=Config.NAMESPACE_NAME,
                        help=f"namespace to create (default: {Config.NAMESPACE_NAME})")
    parser.add_argument("--label", dest="labels", action="append", type=_label, default=list(Config.LABELS),
                        metavar="KEY=VALUE", help="label for the namespace, may be repeated")
    parser.add_argument("--isolation", default=Config.ISOLATION,
                        help="ingress isolation stored in the network-policy annotation (default: empty)")
    parser.add_argument("--grace-period-seconds", type=_grace_period, default=Config.GRACE_PERIOD_SECONDS,
                        help="grace period for the deletion (default: server default)")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def log_level(name: str) -> int:
    """Map a level name such as "INFO" to its number, falling back to WARNING."""
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level(Config.LOG_LEVEL)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = DemoOptions(
            namespace_name=args.name,
            labels=parse_labels(args.labels),
            isolation=args.isolation,
            grace_period_seconds=args.grace_period_seconds,
        )
        kubeconfig = resolve_kubeconfig_path(args.kubeconfig)
        core_v1_api = ClientManager.create_k8s_client(kubeconfig, context=args.context)
        NamespaceDemo(K8Manager(core_v1_api), options).run()
    except Exception as e:
        logger.error(f"Namespace demo failed: {e}", exc_info=True)
        print(f"❌ Namespace demo failed: {e}")
        sys.exit(1)

    return 0


if __name__ == "__main__":
    sys.exit(main())
