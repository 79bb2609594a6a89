"""Rendering group handle handed to the host.

A RenderGroup wraps the fields a Group owns together with a zero-argument
hide function. The host calls ``hidden`` (or visible_fields()) on every
layout pass; the hide function only reads current field values, so calling
it repeatedly is safe.
"""

from collections.abc import Callable, Iterable
from typing import Self

from .fields import PromptField


class RenderGroup:
    """A list of owned fields plus a hide decision.

    Examples:
        >>> group = RenderGroup([PromptField("breaking", False)])
        >>> group.hidden
        False
        >>> group = group.with_hide_func(lambda: True)
        >>> group.visible_fields()
        []
    """

    def __init__(self, fields: Iterable[PromptField] = (), *, title: str | None = None) -> None:
        self._fields = list(fields)
        self._hide_func: Callable[[], bool] | None = None
        self.title = title

    @property
    def fields(self) -> list[PromptField]:
        """Return a copy of the owned fields."""
        return self._fields.copy()

    def with_hide_func(self, hide_func: Callable[[], bool]) -> Self:
        """Attach the hide decision and return this group.

        Raises:
            TypeError: If hide_func is not callable.
        """
        if not callable(hide_func):
            raise TypeError(
                f"hide_func must be callable, got {type(hide_func).__name__}"
            )
        self._hide_func = hide_func
        return self

    @property
    def hidden(self) -> bool:
        """Whether the group is hidden right now. Without a hide function, never."""
        if self._hide_func is None:
            return False
        return bool(self._hide_func())

    def visible_fields(self) -> list[PromptField]:
        """Return the owned fields, or an empty list while the group is hidden."""
        if self.hidden:
            return []
        return self.fields

    def __repr__(self) -> str:
        names = [field.name for field in self._fields]
        return f"RenderGroup(title={self.title!r}, fields={names!r})"
