"""Conditions over a single field's current value.

A Condition names one target field (``parameter_name``) and one predicate
slot to test that field's value with. Conditions are deserialized from
configuration and later bound, by the Group that owns them, to the live
FieldValueSource of a render session.

Predicate slots, in evaluation priority order:

1. ``value_empty``: the field exists and is empty (True) or non-empty (False)
2. ``value_equals``: the field's value equals the configured value
3. ``value_not_equals``: the field's value differs from the configured value
4. ``value_contains``: the field's value contains the configured value
5. ``value_not_contains``: the field's value does not contain it

Only the first slot that is set is evaluated. A slot holding ``None`` is
not set; ``False``, ``0`` and ``""`` are set values.

Examples:
    >>> from fieldgate import Condition, FieldRegistry, PromptField
    >>>
    >>> registry = FieldRegistry([PromptField("type", "feat")])
    >>> condition = Condition(parameter_name="type", value_equals="feat")
    >>> condition.bind(registry)
    >>> condition.match()
    True
"""

from typing import Any

from pydantic import BaseModel, PrivateAttr

from . import utils
from .errors import ConfigError, MissingFieldError, MissingPredicateError
from .fields import FieldValueSource, field_key
from .utils import UNSET, FieldValue

PREDICATE_SLOTS = (
    "value_empty",
    "value_equals",
    "value_not_equals",
    "value_contains",
    "value_not_contains",
)
"""Predicate slot names, highest priority first."""


class Condition(BaseModel):
    """A single predicate over one named field.

    Attributes:
        parameter_name: Name of the field the condition inspects.
        value_empty: Test for (non-)emptiness.
        value_equals: Value the field must equal.
        value_not_equals: Value the field must differ from.
        value_contains: Element or substring the field must contain.
        value_not_contains: Element or substring the field must not contain.
    """

    parameter_name: str | None = None
    value_empty: bool | None = None
    value_equals: FieldValue = None
    value_not_equals: FieldValue = None
    value_contains: FieldValue = None
    value_not_contains: FieldValue = None

    # Non-owning reference to the render session's values, set by bind()
    _fields: FieldValueSource | None = PrivateAttr(default=None)

    def bind(self, fields: FieldValueSource | None) -> None:
        """Attach the Field Value Source this condition reads from.

        The source is borrowed, not copied. Binding again replaces the
        previous source.
        """
        self._fields = fields

    def __eq__(self, other: object) -> bool:
        """Compare wire fields only; the bound source is not part of identity."""
        if not isinstance(other, Condition):
            return NotImplemented
        return self.model_dump() == other.model_dump()

    def __deepcopy__(self, memo: dict[int, Any] | None = None) -> "Condition":
        """Deep-copy the condition, sharing the bound source with the copy."""
        if memo is None:
            memo = {}
        if self._fields is not None:
            memo[id(self._fields)] = self._fields
        return super().__deepcopy__(memo)

    @property
    def is_bound(self) -> bool:
        """Whether a Field Value Source has been attached."""
        return self._fields is not None

    @property
    def active_predicate(self) -> str | None:
        """Return the name of the predicate slot match() evaluates, if any."""
        for slot in PREDICATE_SLOTS:
            if getattr(self, slot) is not None:
                return slot
        return None

    def validate_rules(self) -> list[ConfigError]:
        """Collect the structural problems of this condition.

        Returns:
            An empty list if the condition is valid. Otherwise a
            MissingFieldError when ``parameter_name`` is missing or empty,
            followed by a MissingPredicateError when no predicate slot is set.
        """
        errors: list[ConfigError] = []
        if not self.parameter_name or not self.parameter_name.strip():
            errors.append(MissingFieldError("parameter_name", "condition"))
        if self.active_predicate is None:
            errors.append(MissingPredicateError(self.parameter_name))
        return errors

    def match(self) -> bool:
        """Evaluate the highest-priority predicate slot that is set.

        Returns:
            The predicate result, or False if no slot is set.
        """
        if self.value_empty is not None:
            return self.is_empty(self.value_empty)
        if self.value_equals is not None:
            return self.equal()
        if self.value_not_equals is not None:
            return self.not_equal()
        if self.value_contains is not None:
            return self.contains()
        if self.value_not_contains is not None:
            return self.not_contains()
        return False

    def _lookup(self) -> tuple[Any, bool]:
        if self._fields is None or not self.parameter_name:
            return UNSET, False
        return self._fields.get(field_key(self.parameter_name))

    def equal(self) -> bool:
        """Check that the field's value equals ``value_equals``."""
        value, _ = self._lookup()
        return utils.equal(self.value_equals, value)

    def not_equal(self) -> bool:
        """Check that the field's value differs from ``value_not_equals``."""
        value, _ = self._lookup()
        return utils.not_equal(self.value_not_equals, value)

    def contains(self) -> bool:
        """Check that the field's value contains ``value_contains``."""
        value, _ = self._lookup()
        return utils.contains(value, self.value_contains)

    def not_contains(self) -> bool:
        """Check that the field's value does not contain ``value_not_contains``."""
        value, _ = self._lookup()
        return utils.not_contains(value, self.value_not_contains)

    def is_empty(self, empty: bool) -> bool:
        """Check the field's value for emptiness.

        A field that is not registered never matches, whichever polarity is
        requested.

        Args:
            empty: True to require an empty value, False to require a
                non-empty one.

        Returns:
            True if the field exists and its emptiness matches ``empty``.
        """
        value, found = self._lookup()
        if not found:
            return False
        if empty:
            return utils.is_empty(value)
        return utils.is_not_empty(value)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping of this condition, omitting unset slots."""
        return self.model_dump(exclude_none=True)
