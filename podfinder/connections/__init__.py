"""
Connection management modules
"""

from .base import BaseClientProvider
from .kubernetes import (
    KubernetesClientProvider,
    KubernetesHandle,
    default_provider,
    resolve_kubeconfig_path,
)

__all__ = [
    'BaseClientProvider',
    'KubernetesClientProvider',
    'KubernetesHandle',
    'default_provider',
    'resolve_kubeconfig_path'
]
