"""Per-field clone policies.

An entity declares, for every attribute that ``clone()`` copies, whether the
clone shares the original's value or receives a deep copy of it.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any

from coursekit.core.utils.null_safe import null_safe_clone, null_safe_clone_sequence


class ClonePolicy(Enum):
    """How a single attribute is carried over into a clone."""

    SHARED = "shared"
    DEEP = "deep"


def clone_value(value: Any, policy: ClonePolicy) -> Any:
    if policy is ClonePolicy.SHARED:
        return value
    if isinstance(value, (list, tuple)):
        return null_safe_clone_sequence(value)
    return null_safe_clone(value)


def apply_clone_policy(source: Any, target: Any, policy: Mapping[str, ClonePolicy]) -> Any:
    """Copy the attributes named in ``policy`` from ``source`` to ``target``.

    Returns ``target`` for convenience.
    """
    for attribute, attribute_policy in policy.items():
        setattr(target, attribute, clone_value(getattr(source, attribute), attribute_policy))
    return target


__all__ = ["ClonePolicy", "apply_clone_policy", "clone_value"]
