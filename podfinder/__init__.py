"""
podfinder - running pod discovery for Kubernetes
Resolve the live pods of a namespace by name expression and labels
"""

__version__ = "0.1.0"
__author__ = "podfinder Development Team"

from .connections import KubernetesClientProvider, default_provider
from .discovery import DEFAULT_NAMESPACE, PodFinder, PodSelection, list_pods
from .exceptions import (
    PodFinderError,
    ConnectionError,
    ClientInitializationError,
    InvalidPatternError,
    PodListError,
    SelectionError,
)

__all__ = [
    "DEFAULT_NAMESPACE",
    "KubernetesClientProvider",
    "PodFinder",
    "PodSelection",
    "default_provider",
    "list_pods",
    "PodFinderError",
    "ConnectionError",
    "ClientInitializationError",
    "InvalidPatternError",
    "PodListError",
    "SelectionError",
]
