"""Field handles and the live Field Value Source.

The host form-rendering subsystem owns the interactive fields and their
current values. Conditions only read those values, through the
FieldValueSource protocol:

    source.get(key) -> (value, found)

FieldRegistry is the concrete source: it maps FieldKey to PromptField and
always reports the field's value at call time, so conditions see edits as
soon as the host writes them.
"""

from collections.abc import Iterable, Iterator
import hashlib
from typing import Any, NewType, Protocol, runtime_checkable

from .utils import UNSET

FieldKey = NewType("FieldKey", str)
"""Opaque identity of a field, derived from its declared name."""


def field_key(name: str) -> FieldKey:
    """Derive the key for a field name.

    The key is a pure function of the name (surrounding whitespace ignored):
    the same name always yields the same key.

    Args:
        name: The declared field name.

    Returns:
        The field's key.

    Raises:
        TypeError: If name is not a string.
    """
    if not isinstance(name, str):
        raise TypeError(f"field name must be str, got {type(name).__name__}")
    return FieldKey(hashlib.sha256(name.strip().encode()).hexdigest())


@runtime_checkable
class FieldValueSource(Protocol):
    """Read-only lookup of current field values by key."""

    def get(self, key: FieldKey) -> tuple[Any, bool]:
        """Return ``(value, True)`` for a registered field, else ``(UNSET, False)``."""
        ...


class PromptField:
    """Handle to a single interactive field owned by the host.

    The host writes ``value`` as the user edits the field; fieldgate never
    does.

    Examples:
        >>> scope = PromptField("scope", "")
        >>> scope.value = "parser"
    """

    def __init__(self, name: str, value: Any = None, *, title: str | None = None) -> None:
        """Create a field handle.

        Args:
            name: Declared field name. Must be a non-empty string.
            value: Initial value.
            title: Optional human-readable label.

        Raises:
            TypeError: If name is not a string.
            ValueError: If name is empty.
        """
        if not isinstance(name, str):
            raise TypeError(f"name must be str, got {type(name).__name__}")
        name = name.strip()
        if name == "":
            raise ValueError("name cannot be empty")

        self._name = name
        self._key = field_key(name)
        self.value = value
        self.title = title

    @property
    def name(self) -> str:
        """Return the declared field name."""
        return self._name

    @property
    def key(self) -> FieldKey:
        """Return the key derived from the field name."""
        return self._key

    def __repr__(self) -> str:
        return f"PromptField({self._name!r}, {self.value!r})"


class FieldRegistry:
    """The set of fields registered for one render session.

    Implements FieldValueSource. Registering a second field under the same
    name replaces the first.

    Examples:
        >>> registry = FieldRegistry([PromptField("type", "feat")])
        >>> registry.get(field_key("type"))
        ('feat', True)
        >>> registry.get(field_key("scope"))
        (UNSET, False)
    """

    def __init__(self, fields: Iterable[PromptField] = ()) -> None:
        self._fields: dict[FieldKey, PromptField] = {}
        self.register(*fields)

    def register(self, *fields: PromptField) -> None:
        """Register one or more fields.

        Raises:
            TypeError: If any item is not a PromptField.
        """
        for i, field in enumerate(fields):
            if not isinstance(field, PromptField):
                raise TypeError(
                    f"All fields must be PromptField instances, "
                    f"got {type(field).__name__} at index {i}"
                )
            self._fields[field.key] = field

    def get(self, key: FieldKey) -> tuple[Any, bool]:
        field = self._fields.get(key)
        if field is None:
            return UNSET, False
        return field.value, True

    def field(self, name: str) -> PromptField:
        """Return the field registered under name.

        Raises:
            KeyError: If no such field is registered.
        """
        try:
            return self._fields[field_key(name)]
        except KeyError:
            raise KeyError(f"no field registered under {name!r}") from None

    def get_value(self, name: str) -> Any:
        """Return the current value of the named field, or UNSET."""
        value, _ = self.get(field_key(name))
        return value

    def set_value(self, name: str, value: Any) -> None:
        """Write a new value into the named field.

        Raises:
            KeyError: If no such field is registered.
        """
        self.field(name).value = value

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[PromptField]:
        return iter(list(self._fields.values()))

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        names = [field.name for field in self._fields.values()]
        return f"FieldRegistry({names!r})"
