"""
    Capability support for node values and edge weights.

    Node values must be hashable and ordered. Some operations need more:
    shortest paths need additive weights, clone needs copyable payloads.
"""
from copy import deepcopy
from enum import Enum
from typing import Any, Hashable, Optional, Tuple


class Capability(Enum):
    HASHABLE = "hashable"
    ORDERED = "ordered"
    ADDITIVE = "additive"
    COPYABLE = "copyable"


class CapabilityValidator:
    """Runtime checks for the capabilities an operation relies on"""

    @staticmethod
    def has_capability(value: Any, capability: Capability) -> bool:
        """Check whether the value provides the capability"""
        if capability == Capability.HASHABLE:
            try:
                hash(value)
            except TypeError:
                return False
            return True
        elif capability == Capability.ORDERED:
            try:
                value < value
            except TypeError:
                return False
            return True
        elif capability == Capability.ADDITIVE:
            try:
                value + value
            except TypeError:
                return False
            return True
        else:  # COPYABLE
            try:
                deepcopy(value)
            except (TypeError, AttributeError):
                return False
            return True

    @staticmethod
    def require(value: Any, *capabilities: Capability) -> None:
        """Raise TypeError if the value lacks any of the capabilities"""
        for capability in capabilities:
            if not CapabilityValidator.has_capability(value, capability):
                raise TypeError(
                    f"{type(value).__name__} value {value!r} is not {capability.value}"
                )

    @staticmethod
    def require_comparable(value: Any, other: Any) -> None:
        """Raise TypeError if two values cannot be ordered against each other"""
        try:
            value < other
            other < value
        except TypeError as e:
            raise TypeError(
                f"Cannot order {type(value).__name__} against "
                f"{type(other).__name__}: {str(e)}"
            )


def weight_key(weight: Optional[Hashable]) -> Tuple:
    """
    Sort key for an optional weight.
    An absent weight orders before every present weight.
    """
    if weight is None:
        return (0,)
    return (1, weight)
