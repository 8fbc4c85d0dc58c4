"""
Pod discovery modules
"""

from .filters import (
    POD_PHASE_RUNNING,
    compile_name_pattern,
    filter_pods,
    matches_labels,
    matches_name,
)
from .finder import PodFinder, list_pods
from .selection import DEFAULT_NAMESPACE, PodSelection

__all__ = [
    'DEFAULT_NAMESPACE',
    'POD_PHASE_RUNNING',
    'PodFinder',
    'PodSelection',
    'compile_name_pattern',
    'filter_pods',
    'list_pods',
    'matches_labels',
    'matches_name'
]
