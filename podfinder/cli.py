#!/usr/bin/env python3
"""
Command line front end for podfinder
"""

import os
import sys
import logging
import argparse
from typing import Any, Dict, List, Optional
import yaml
from .connections.kubernetes import KubernetesClientProvider
from .discovery.finder import PodFinder
from .discovery.selection import DEFAULT_NAMESPACE, PodSelection
from .exceptions import ClientInitializationError, PodFinderError

logger = logging.getLogger(__name__)

NAMESPACE_ENV = "PODFINDER_NAMESPACE"

EXIT_OK = 0
EXIT_INIT_FAILED = 1
EXIT_LOOKUP_FAILED = 2


def pod_summary(pod) -> Dict[str, Any]:
    """Plain dictionary view of a pod for printing"""
    metadata = pod.metadata
    status = pod.status
    spec = pod.spec
    return {
        'name': metadata.name if metadata else None,
        'namespace': metadata.namespace if metadata else None,
        'phase': status.phase if status else None,
        'node': spec.node_name if spec else None,
        'ip': status.pod_ip if status else None,
        'labels': dict(metadata.labels or {}) if metadata else {}
    }


def format_pods(pods: List, output: str) -> str:
    """Render pods as names, a wide table or YAML"""
    summaries = [pod_summary(pod) for pod in pods]

    if output == "yaml":
        return yaml.safe_dump(summaries, default_flow_style=False, sort_keys=False)

    if output == "wide":
        lines = []
        for s in summaries:
            labels = ",".join(f"{k}={v}" for k, v in s['labels'].items())
            lines.append(f"{s['name'] or ''}\t{s['phase']}\t{labels}")
        return "\n".join(lines)

    return "\n".join(s['name'] or '' for s in summaries)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="podfinder",
        description="List running pods matching a name expression and labels"
    )
    parser.add_argument("-n", "--namespace",
                        default=os.environ.get(NAMESPACE_ENV, DEFAULT_NAMESPACE),
                        help="Namespace to search (default: $PODFINDER_NAMESPACE or 'default')")
    parser.add_argument("--name", dest="name_expr", default="",
                        help="Regular expression searched anywhere in the pod name")
    parser.add_argument("-l", "--label", dest="labels", action="append", default=[],
                        metavar="KEY=VALUE", help="Required label, may be repeated")
    parser.add_argument("--kubeconfig", help="Path to kubeconfig file")
    parser.add_argument("--context", help="Kubernetes context to use")
    parser.add_argument("-o", "--output", choices=["name", "wide", "yaml"], default="name",
                        help="Output format")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Increase log verbosity")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        selection = PodSelection.from_label_args(
            args.labels, namespace=args.namespace, name_expr=args.name_expr
        )
    except PodFinderError as e:
        logger.error(str(e))
        return EXIT_LOOKUP_FAILED

    provider = KubernetesClientProvider(kubeconfig_path=args.kubeconfig, context=args.context)
    finder = PodFinder(provider)

    try:
        pods = finder.find(selection)
    except ClientInitializationError as e:
        logger.critical(f"failed to connect kubernetes: {e}")
        return EXIT_INIT_FAILED
    except PodFinderError as e:
        logger.error(str(e))
        return EXIT_LOOKUP_FAILED

    if pods:
        print(format_pods(pods, args.output))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
