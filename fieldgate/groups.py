"""Groups of prompt fields with conditional visibility.

A Group is a named collection of fields plus a DependsOn: two buckets of
Conditions, ``and_conditions`` and ``or_conditions``. On every layout pass
the host asks the rendering group whether to hide it; the answer comes from
DependsOn.is_visible(), which combines the buckets as follows:

==========  ==========  =================================================
OR bucket   AND bucket  Visible when
==========  ==========  =================================================
empty       empty       always
non-empty   empty       at least one OR condition matches
empty       non-empty   every AND condition matches
non-empty   non-empty   at least one OR condition matches and the number
                        of matching AND conditions equals the size of the
                        OR bucket
==========  ==========  =================================================

The last row compares against the OR bucket's size, not the AND bucket's.
Existing configurations depend on this, so it is kept as is.

Examples:
    >>> from fieldgate import Condition, FieldRegistry, Group, PromptField
    >>>
    >>> group = Group.new("breaking_change")
    >>> group.depends_on.or_conditions.append(
    ...     Condition(parameter_name="type", value_equals="feat")
    ... )
    >>> registry = FieldRegistry([PromptField("type", "fix")])
    >>> rendered = group.render(registry, [PromptField("footer")])
    >>> rendered.hidden
    True
"""

from collections.abc import Iterable
import logging
from typing import Any, Self

from pydantic import BaseModel, Field, field_validator

from .conditions import Condition
from .errors import ConfigError, MissingFieldError
from .fields import FieldValueSource, PromptField
from .rendering import RenderGroup

logger = logging.getLogger(__name__)


class DependsOn(BaseModel):
    """The AND bucket and OR bucket of conditions attached to a Group."""

    and_conditions: list[Condition] = Field(default_factory=list)
    or_conditions: list[Condition] = Field(default_factory=list)

    @field_validator("and_conditions", "or_conditions", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        # An empty YAML key ("or_conditions:") loads as None
        return [] if value is None else value

    def is_empty(self) -> bool:
        """Whether both buckets are empty."""
        return not self.and_conditions and not self.or_conditions

    def bind(self, fields: FieldValueSource) -> None:
        """Bind every condition in both buckets to fields."""
        for condition in self.or_conditions:
            condition.bind(fields)
        for condition in self.and_conditions:
            condition.bind(fields)

    def is_visible(self) -> bool:
        """Combine both buckets into a visibility decision.

        See the module docstring for the combination table.

        Returns:
            True if the group should be shown.
        """
        or_count = len(self.or_conditions)
        and_count = len(self.and_conditions)

        if or_count == 0 and and_count == 0:
            return True

        or_met = any(condition.match() for condition in self.or_conditions)
        and_met_count = sum(1 for condition in self.and_conditions if condition.match())

        if and_count == 0:
            return or_met
        if or_count == 0:
            return and_met_count == and_count
        # Matched AND conditions are counted against the OR bucket size
        return or_met and and_met_count == or_count

    def should_hide(self) -> bool:
        """Hide decision for the rendering group: the negation of is_visible()."""
        return not self.is_visible()


class Group(BaseModel):
    """A named cluster of prompt fields whose visibility is gated.

    Groups are built once from configuration, validated once, then rendered
    once per session against that session's FieldRegistry.

    Attributes:
        name: Group name. Required.
        depends_on: Conditions gating the group's visibility.
    """

    name: str | None = None
    depends_on: DependsOn = Field(default_factory=DependsOn)

    @field_validator("depends_on", mode="before")
    @classmethod
    def _none_as_default(cls, value: Any) -> Any:
        return DependsOn() if value is None else value

    @classmethod
    def new(cls, name: str) -> Self:
        """Create a group with no conditions."""
        return cls(name=name)

    def validate_rules(self) -> list[ConfigError]:
        """Collect every structural problem of this group.

        Returns:
            The missing-name error first (if any), then the errors of each OR
            condition, then those of each AND condition, in bucket order.
        """
        errors: list[ConfigError] = []
        if not self.name or not self.name.strip():
            errors.append(MissingFieldError("name", "group"))
        for condition in self.depends_on.or_conditions:
            errors.extend(condition.validate_rules())
        for condition in self.depends_on.and_conditions:
            errors.extend(condition.validate_rules())
        return errors

    def get_required_fields(self) -> set[str]:
        """Return the names of the fields this group's conditions inspect."""
        conditions = self.depends_on.or_conditions + self.depends_on.and_conditions
        return {
            condition.parameter_name
            for condition in conditions
            if condition.parameter_name
        }

    def render(
        self, all_fields: FieldValueSource, fields: Iterable[PromptField]
    ) -> RenderGroup:
        """Wire the conditions to all_fields and build the rendering group.

        Args:
            all_fields: Every field of the render session. Borrowed, not
                copied; the host keeps ownership and keeps writing values.
            fields: The fields this group owns.

        Returns:
            A RenderGroup over ``fields`` whose hide function evaluates this
            group's conditions against ``all_fields``.
        """
        self.depends_on.bind(all_fields)
        logger.debug(
            "Bound group %r: %d OR condition(s), %d AND condition(s)",
            self.name,
            len(self.depends_on.or_conditions),
            len(self.depends_on.and_conditions),
        )
        return RenderGroup(fields, title=self.name).with_hide_func(
            self.depends_on.should_hide
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping of this group, omitting unset slots."""
        return self.model_dump(exclude_none=True)
