"""
Kubernetes client provider
"""

import os
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from kubernetes import client, config
from .base import BaseClientProvider
from ..exceptions import ClientInitializationError

logger = logging.getLogger(__name__)

KUBECONFIG_ENV = "KUBECONFIG"
DEFAULT_KUBECONFIG = os.path.join("~", ".kube", "config")


def resolve_kubeconfig_path(kubeconfig_path: Optional[str] = None) -> str:
    """
    Pick the kubeconfig file to load

    Args:
        kubeconfig_path: Explicit path, wins over everything else

    Returns:
        The explicit path, else $KUBECONFIG, else ~/.kube/config. A value
        listing several files separated by os.pathsep is kept as a list for
        the kubeconfig loader to merge.
    """
    path = kubeconfig_path or os.environ.get(KUBECONFIG_ENV)
    if not path:
        path = DEFAULT_KUBECONFIG
    return os.pathsep.join(os.path.expanduser(p) for p in path.split(os.pathsep))


@dataclass(frozen=True)
class KubernetesHandle:
    """Authenticated Kubernetes API handle, shared read-only"""
    configuration: client.Configuration
    api_client: client.ApiClient
    core_v1: client.CoreV1Api
    kubeconfig_path: str


class KubernetesClientProvider(BaseClientProvider):
    """Builds one KubernetesHandle from a kubeconfig file on first demand"""

    def __init__(self,
                 kubeconfig_path: Optional[str] = None,
                 context: Optional[str] = None):
        """
        Initialize Kubernetes client provider

        Args:
            kubeconfig_path: Path to kubeconfig file (defaults to $KUBECONFIG, then ~/.kube/config)
            context: Kubernetes context to use (defaults to the kubeconfig's current context)
        """
        super().__init__()
        self.kubeconfig_path = kubeconfig_path
        self.context = context

    def get_handle(self) -> KubernetesHandle:
        return super().get_handle()

    def _build_handle(self) -> KubernetesHandle:
        path = resolve_kubeconfig_path(self.kubeconfig_path)
        details = {"kubeconfig_path": path, "context": self.context}

        if not any(Path(p).exists() for p in path.split(os.pathsep) if p):
            raise ClientInitializationError(
                f"Kubeconfig file not found: {path}", details=details
            )

        configuration = client.Configuration()
        try:
            config.load_kube_config(
                config_file=path,
                context=self.context,
                client_configuration=configuration
            )
        except Exception as e:
            raise ClientInitializationError(
                f"Failed to load kubeconfig: {str(e)}", details=details
            ) from e

        try:
            api_client = client.ApiClient(configuration)
            core_v1 = client.CoreV1Api(api_client)
        except Exception as e:
            raise ClientInitializationError(
                f"Failed to connect to Kubernetes: {str(e)}", details=details
            ) from e

        logger.info(f"Kubernetes client initialized from {path} (host: {configuration.host})")
        return KubernetesHandle(
            configuration=configuration,
            api_client=api_client,
            core_v1=core_v1,
            kubeconfig_path=path
        )


_default_provider: Optional[KubernetesClientProvider] = None
_default_provider_lock = threading.Lock()


def default_provider() -> KubernetesClientProvider:
    """Process-wide provider used when callers do not inject their own"""
    global _default_provider
    if _default_provider is None:
        with _default_provider_lock:
            if _default_provider is None:
                _default_provider = KubernetesClientProvider()
    return _default_provider
