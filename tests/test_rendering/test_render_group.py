"""Tests for the RenderGroup handle."""

import pytest

from fieldgate import PromptField, RenderGroup


class TestRenderGroup:
    """Test RenderGroup."""

    def test_without_hide_func(self):
        """Test a group without a hide function is never hidden."""
        field = PromptField("body")
        group = RenderGroup([field])
        assert group.hidden is False
        assert group.visible_fields() == [field]

    def test_with_hide_func_is_chainable(self):
        """Test with_hide_func returns the group itself."""
        group = RenderGroup()
        assert group.with_hide_func(lambda: False) is group

    def test_hidden(self):
        """Test a hidden group exposes no visible fields."""
        group = RenderGroup([PromptField("body")]).with_hide_func(lambda: True)
        assert group.hidden is True
        assert group.visible_fields() == []
        assert len(group.fields) == 1

    def test_hide_func_called_per_query(self):
        """Test the hide function is invoked on every query."""
        calls = []

        def hide():
            calls.append(1)
            return len(calls) > 1

        group = RenderGroup().with_hide_func(hide)
        assert group.hidden is False
        assert group.hidden is True
        assert len(calls) == 2

    def test_fields_copy(self):
        """Test fields returns a copy."""
        group = RenderGroup([PromptField("body")])
        group.fields.clear()
        assert len(group.fields) == 1

    def test_non_callable_error(self):
        """Test error with a non-callable hide function."""
        with pytest.raises(TypeError, match="must be callable"):
            RenderGroup().with_hide_func(True)

    def test_repr(self):
        """Test the representation lists field names."""
        group = RenderGroup([PromptField("body")], title="details")
        assert repr(group) == "RenderGroup(title='details', fields=['body'])"
