"""
Pod discovery against the Kubernetes API
"""

import logging
from typing import List, Mapping, Optional
from kubernetes.client import V1Pod
from kubernetes.client.rest import ApiException
from .filters import compile_name_pattern, filter_pods
from .selection import PodSelection
from ..connections.base import BaseClientProvider
from ..connections.kubernetes import default_provider
from ..exceptions import PodListError

logger = logging.getLogger(__name__)


class PodFinder:
    """Resolves the running pods of a namespace matching name and label criteria"""

    def __init__(self, provider: Optional[BaseClientProvider] = None):
        """
        Initialize pod finder

        Args:
            provider: Client provider to take the API handle from
                      (defaults to the process-wide Kubernetes provider)
        """
        self.provider = provider or default_provider()

    def list_pods(self,
                  namespace: str,
                  name_expr: str = "",
                  labels: Optional[Mapping[str, str]] = None) -> List[V1Pod]:
        """
        List running pods matching all criteria

        Args:
            namespace: Namespace to look in
            name_expr: Regular expression searched anywhere in the pod name
                       (empty matches every name)
            labels: Labels every returned pod must carry with equal values

        Returns:
            Matching pods in the order the API returned them

        Raises:
            ClientInitializationError: the API handle could not be built
            PodListError: the list request failed
            InvalidPatternError: name_expr is not a valid regular expression
        """
        handle = self.provider.get_handle()

        try:
            pod_list = handle.core_v1.list_namespaced_pod(namespace=namespace)
        except ApiException as e:
            raise PodListError(
                f"Failed to list pods in namespace '{namespace}': {e.reason}",
                code=e.status,
                details={"namespace": namespace}
            ) from e
        except Exception as e:
            raise PodListError(
                f"Failed to list pods in namespace '{namespace}': {str(e)}",
                details={"namespace": namespace}
            ) from e

        pattern = compile_name_pattern(name_expr)
        pods = pod_list.items or []
        result = filter_pods(pods, pattern, labels)

        logger.debug(f"Matched {len(result)} of {len(pods)} pods in namespace '{namespace}'")
        return result

    def find(self, selection: PodSelection) -> List[V1Pod]:
        """List pods for a PodSelection"""
        return self.list_pods(selection.namespace, selection.name_expr, selection.labels)


def list_pods(namespace: str,
              name_expr: str = "",
              labels: Optional[Mapping[str, str]] = None,
              provider: Optional[BaseClientProvider] = None) -> List[V1Pod]:
    """List matching running pods using the given or the process-wide provider"""
    return PodFinder(provider).list_pods(namespace, name_expr, labels)
