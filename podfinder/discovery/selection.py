"""
Pod selection criteria
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Mapping, Optional
from ..exceptions import SelectionError

DEFAULT_NAMESPACE = "default"


@dataclass(frozen=True)
class PodSelection:
    """Namespace, name expression and required labels for one lookup

    Labels are copied into a read-only mapping, so later changes to the
    caller's dict do not affect the selection.
    """
    namespace: str = DEFAULT_NAMESPACE
    name_expr: str = ""
    labels: Optional[Mapping[str, str]] = None

    def __post_init__(self):
        if self.labels is not None:
            object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    @classmethod
    def from_label_args(cls,
                        label_args: Iterable[str],
                        namespace: str = DEFAULT_NAMESPACE,
                        name_expr: str = "") -> "PodSelection":
        """
        Build a selection from ``key=value`` label arguments

        Args:
            label_args: Strings of the form key=value (value may be empty)
            namespace: Namespace to search
            name_expr: Pod name regular expression

        Returns:
            PodSelection with the parsed labels
        """
        labels = {}
        for arg in label_args:
            key, sep, value = arg.partition("=")
            key = key.strip()
            if not sep or not key:
                raise SelectionError(
                    f"Invalid label '{arg}', expected key=value",
                    details={"label": arg}
                )
            labels[key] = value.strip()
        return cls(namespace=namespace, name_expr=name_expr, labels=labels)
