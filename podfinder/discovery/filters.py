"""
In-memory pod filtering

Pods are matched in two steps: an optional unanchored regular expression on
the pod name, then a label/phase gate. The gate only admits pods that are
Running and carry at least one label, even when no labels are required.
"""

import re
from typing import Dict, Iterable, List, Mapping, Optional, Pattern
from ..exceptions import InvalidPatternError

POD_PHASE_RUNNING = "Running"


def compile_name_pattern(name_expr: Optional[str]) -> Optional[Pattern]:
    """Compile a pod name expression, None when there is nothing to match"""
    if not name_expr:
        return None
    try:
        return re.compile(name_expr)
    except re.error as e:
        raise InvalidPatternError(
            f"Invalid pod name expression '{name_expr}': {str(e)}",
            details={"name_expr": name_expr}
        ) from e


# metadata and status may be None on partially populated records
def _pod_name(pod) -> str:
    return getattr(getattr(pod, "metadata", None), "name", None) or ""


def _pod_labels(pod) -> Dict[str, str]:
    return getattr(getattr(pod, "metadata", None), "labels", None) or {}


def _pod_phase(pod) -> Optional[str]:
    return getattr(getattr(pod, "status", None), "phase", None)


def matches_name(pod, pattern: Optional[Pattern]) -> bool:
    """True when no pattern is set or the pattern occurs anywhere in the name"""
    if pattern is None:
        return True
    return pattern.search(_pod_name(pod)) is not None


def matches_labels(pod, labels: Optional[Mapping[str, str]]) -> bool:
    """
    Check the label/phase gate for a pod

    The pod must be Running and have a non-empty label set. Every required
    label must then be present with an identical value; no required labels
    is a vacuous match.
    """
    pod_labels = _pod_labels(pod)
    if not pod_labels or _pod_phase(pod) != POD_PHASE_RUNNING:
        return False

    required = labels or {}
    unmatched = len(required)
    for key, value in required.items():
        if key in pod_labels and pod_labels[key] == value:
            unmatched -= 1
    return unmatched == 0


def filter_pods(pods: Iterable,
                pattern: Optional[Pattern] = None,
                labels: Optional[Mapping[str, str]] = None) -> List:
    """Return the pods passing both checks, in their original order"""
    result = []
    for pod in pods:
        if not matches_name(pod, pattern):
            continue
        if matches_labels(pod, labels):
            result.append(pod)
    return result
