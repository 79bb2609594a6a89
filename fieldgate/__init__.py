"""fieldgate: conditional visibility for grouped prompt fields.

fieldgate decides, on every render pass of an interactive prompt form,
whether a group of fields should be shown, based on the current values of
other fields. It is used to collect structured commit-message parameters,
where, say, a "breaking change" group only appears for feature commits.

Core Components:
---------------
- Condition: a single predicate over one field's current value
- DependsOn: an AND bucket and an OR bucket of conditions
- Group: a named group of fields gated by a DependsOn
- FormConfig: the configuration root holding every group
- FieldRegistry / PromptField: the live field values of a render session
- RenderGroup: the handle a host renders, with its hide decision

Quick Start:
-----------
    >>> import fieldgate as fg
    >>>
    >>> config = fg.FormConfig.model_validate_yaml('''
    ... groups:
    ...   - name: breaking_change
    ...     depends_on:
    ...       or_conditions:
    ...         - parameter_name: type
    ...           value_equals: feat
    ... ''').ensure_valid()
    >>>
    >>> commit_type = fg.PromptField("type", "fix")
    >>> footer = fg.PromptField("footer", "")
    >>> registry = fg.FieldRegistry([commit_type, footer])
    >>> (group,) = config.render(registry, {"breaking_change": [footer]})
    >>> group.hidden
    True
    >>> commit_type.value = "feat"
    >>> group.hidden
    False
"""

from .conditions import PREDICATE_SLOTS, Condition
from .config import FormConfig
from .errors import (
    ConfigError,
    ConfigValidationError,
    MissingFieldError,
    MissingPredicateError,
)
from .fields import FieldKey, FieldRegistry, FieldValueSource, PromptField, field_key
from .groups import DependsOn, Group
from .rendering import RenderGroup
from .utils import UNSET, FieldValue

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "FormConfig",
    "Group",
    "DependsOn",
    "Condition",
    "PREDICATE_SLOTS",
    # Field values
    "FieldKey",
    "field_key",
    "FieldValue",
    "FieldValueSource",
    "FieldRegistry",
    "PromptField",
    "UNSET",
    # Rendering
    "RenderGroup",
    # Errors
    "ConfigError",
    "ConfigValidationError",
    "MissingFieldError",
    "MissingPredicateError",
    # Version
    "__version__",
]
