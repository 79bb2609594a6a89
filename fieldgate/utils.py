"""Comparison helpers for field values.

This module provides the generic comparison rules used by Condition
predicates. Field values form a closed set of kinds:

- ``str``
- ``bool`` (its own kind, never equal to a number)
- numbers (``int`` and ``float``)
- sequences (``list`` and ``tuple`` are one kind)
- sets and mappings, for values a host field might produce
- ``None`` or UNSET, both treated as "absent"

Every helper is total: any pair of values yields a boolean, nothing raises.
"""

from collections.abc import Mapping, Sized
from typing import Any

Scalar = str | bool | int | float
"""A single field value."""

FieldValue = Scalar | list[Scalar] | None
"""A value a predicate slot can hold. ``None`` means the slot is not set."""


class _Unset:
    """Sentinel class to represent an absent field value.

    This is used instead of None to distinguish between "the field is not
    registered" and "the field holds None".
    """

    def __repr__(self) -> str:
        return "UNSET"


# Singleton instance representing an absent value
UNSET = _Unset()


def _kind(value: Any) -> str | None:
    """Return the comparison kind of a value, or None if it is absent."""
    if value is UNSET or value is None:
        return None
    # bool must be checked before numbers since bool subclasses int
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "str"
    if isinstance(value, (list, tuple)):
        return "sequence"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, Mapping):
        return "mapping"
    return type(value).__name__


def is_empty(value: Any) -> bool:
    """Check whether a value is "empty".

    Empty values are: UNSET, None, zero-length strings and collections,
    False, and numeric zero.

    Examples:
        >>> is_empty("")
        True
        >>> is_empty([])
        True
        >>> is_empty(0)
        True
        >>> is_empty("feat")
        False
    """
    if value is UNSET or value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def is_not_empty(value: Any) -> bool:
    """Check whether a value is not empty. See is_empty."""
    return not is_empty(value)


def equal(expected: Any, actual: Any) -> bool:
    """Check two field values for equality.

    Two values are equal when they are of the same kind with the same content.
    An absent value (UNSET or None) equals any empty value. Sequences and
    mappings are compared element-wise with the same rules, so ``[1]`` does
    not equal ``[True]``.

    Args:
        expected: The value configured on a condition.
        actual: The current value of the field.

    Returns:
        True if the values are equal.

    Examples:
        >>> equal("feat", "feat")
        True
        >>> equal(1, True)
        False
        >>> equal("", None)
        True
    """
    expected_kind = _kind(expected)
    actual_kind = _kind(actual)

    if actual_kind is None:
        return is_empty(expected)
    if expected_kind is None:
        return is_empty(actual)
    if expected_kind != actual_kind:
        return False

    if expected_kind == "sequence":
        return len(expected) == len(actual) and all(
            equal(e, a) for e, a in zip(expected, actual)
        )
    if expected_kind == "mapping":
        return expected.keys() == actual.keys() and all(
            equal(expected[key], actual[key]) for key in expected
        )
    return bool(expected == actual)


def not_equal(expected: Any, actual: Any) -> bool:
    """Check two field values for inequality.

    Mirrors equal() branch by branch: an absent actual value differs from any
    non-empty expected value, and values of different kinds always differ.

    Args:
        expected: The value configured on a condition.
        actual: The current value of the field.

    Returns:
        True if the values are not equal.
    """
    expected_kind = _kind(expected)
    actual_kind = _kind(actual)

    if actual_kind is None:
        return is_not_empty(expected)
    if expected_kind is None:
        return is_not_empty(actual)
    if expected_kind != actual_kind:
        return True
    return not equal(expected, actual)


def _contains_element(container: Any, item: Any) -> tuple[bool, bool]:
    """Look for item in container.

    Returns:
        A pair ``(ok, found)``. ``ok`` is False when the container is absent
        or is not of a containable kind.
    """
    kind = _kind(container)

    if kind == "str":
        if not isinstance(item, str):
            return True, False
        return True, item in container
    if kind in ("sequence", "set"):
        return True, any(equal(item, element) for element in container)
    if kind == "mapping":
        return True, any(equal(item, key) for key in container)
    return False, False


def contains(container: Any, item: Any) -> bool:
    """Check whether container holds item.

    Strings are searched for substrings, sequences and sets for elements, and
    mappings for keys.

    Examples:
        >>> contains("feat: add parser", "parser")
        True
        >>> contains(["api", "cli"], "cli")
        True
        >>> contains(None, "cli")
        False
    """
    ok, found = _contains_element(container, item)
    return ok and found


def not_contains(container: Any, item: Any) -> bool:
    """Check whether container does not hold item.

    This is not the plain negation of contains(): an absent or non-containable
    container yields False here too.

    Examples:
        >>> not_contains(["api", "cli"], "docs")
        True
        >>> not_contains(None, "docs")
        False
    """
    ok, found = _contains_element(container, item)
    return ok and not found
