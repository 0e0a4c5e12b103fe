"""
Value shapes a YAML document may hold, and helpers that treat them structurally.
"""

from __future__ import annotations

import copy
from enum import Enum
from typing import Any, Dict, List, Union

YAMLValue = Union[None, bool, int, float, str, List["YAMLValue"], Dict[str, "YAMLValue"]]
Document = Dict[str, YAMLValue]


class ValueType(str, Enum):
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    ANY = "any"


def value_type_of(value: Any) -> ValueType | None:
    """Return the shape tag of a value, or None when YAML cannot hold it."""
    # bool before int: bool is an int subclass.
    if value is None:
        return ValueType.NULL
    if isinstance(value, bool):
        return ValueType.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueType.NUMBER
    if isinstance(value, str):
        return ValueType.STRING
    if isinstance(value, list):
        return ValueType.SEQUENCE
    if isinstance(value, dict):
        return ValueType.MAPPING
    return None


def matches(value: Any, expected: ValueType) -> bool:
    if expected is ValueType.ANY:
        return is_yaml_value(value)
    return value_type_of(value) is expected


def is_yaml_value(value: Any) -> bool:
    kind = value_type_of(value)
    if kind is None:
        return False
    if kind is ValueType.SEQUENCE:
        return all(is_yaml_value(v) for v in value)
    if kind is ValueType.MAPPING:
        return all(isinstance(k, str) and is_yaml_value(v) for k, v in value.items())
    return True


def values_equal(left: Any, right: Any) -> bool:
    """
    Structural equality.

    Same as == except that booleans never equal numbers (True != 1) at any depth.
    """
    lt, rt = value_type_of(left), value_type_of(right)
    if lt is not rt:
        return False
    if lt is ValueType.SEQUENCE:
        return len(left) == len(right) and all(values_equal(a, b) for a, b in zip(left, right))
    if lt is ValueType.MAPPING:
        if left.keys() != right.keys():
            return False
        return all(values_equal(left[k], right[k]) for k in left)
    return left == right


def clone(value: Any) -> Any:
    return copy.deepcopy(value)
