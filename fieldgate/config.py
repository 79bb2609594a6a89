"""Configuration root for conditional prompt groups.

FormConfig holds the groups a host deserializes from its configuration file.
It validates them all at once, serializes them in JSON, YAML and TOML, and
renders them against a render session's FieldRegistry.

Wire format (YAML shown):

    groups:
      - name: breaking_change
        depends_on:
          or_conditions:
            - parameter_name: type
              value_equals: feat
          and_conditions:
            - parameter_name: scope
              value_empty: false

Examples:
    >>> config = FormConfig.model_validate_yaml(yaml_str).ensure_valid()
    >>> registry = FieldRegistry(all_fields)
    >>> groups = config.render(registry, {"breaking_change": [footer]})
    >>> [group.hidden for group in groups]
"""

from collections.abc import Mapping, Sequence
import json
import logging
from pathlib import Path
import tomllib
from typing import Any, Self

from pydantic import BaseModel, Field, field_validator
import tomli_w
import yaml

from .errors import ConfigError, ConfigValidationError
from .fields import FieldRegistry, PromptField, field_key
from .groups import Group
from .rendering import RenderGroup

logger = logging.getLogger(__name__)


class FormConfig(BaseModel):
    """The set of groups making up one prompt form.

    Attributes:
        groups: Groups in display order.
    """

    groups: list[Group] = Field(default_factory=list)

    @field_validator("groups", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def validate_rules(self) -> list[ConfigError]:
        """Collect the structural problems of every group, in group order."""
        errors: list[ConfigError] = []
        for group in self.groups:
            errors.extend(group.validate_rules())
        return errors

    def ensure_valid(self) -> Self:
        """Validate the whole configuration.

        Returns:
            This config, if it is valid.

        Raises:
            ConfigValidationError: Carrying every problem found.
        """
        errors = self.validate_rules()
        if errors:
            logger.debug("Configuration rejected with %d error(s)", len(errors))
            raise ConfigValidationError(errors)
        logger.debug("Configuration with %d group(s) is valid", len(self.groups))
        return self

    def get_group(self, name: str) -> Group:
        """Return the group called name.

        Raises:
            KeyError: If there is no such group.
        """
        for group in self.groups:
            if group.name == name:
                return group
        raise KeyError(f"Unknown group {name!r}")

    def get_required_fields(self) -> set[str]:
        """Return the names of all fields referenced by any condition."""
        required: set[str] = set()
        for group in self.groups:
            required.update(group.get_required_fields())
        return required

    def render(
        self,
        registry: FieldRegistry,
        fields_by_group: Mapping[str, Sequence[PromptField]] | None = None,
    ) -> list[RenderGroup]:
        """Render every group against the session's fields.

        Conditions referencing a field that is not registered are allowed
        (they never match) but logged as a warning, as are entries of
        fields_by_group naming no group.

        Args:
            registry: Every field of the render session.
            fields_by_group: Fields owned by each group, keyed by group name.
                Groups without an entry own no fields.

        Returns:
            One RenderGroup per group, in group order.
        """
        fields_by_group = fields_by_group or {}
        rendered: list[RenderGroup] = []

        group_names = {group.name for group in self.groups}
        for name in fields_by_group:
            if name not in group_names:
                logger.warning("Fields given for unknown group %r are ignored", name)

        for group in self.groups:
            for name in sorted(group.get_required_fields()):
                if field_key(name) not in registry:
                    logger.warning(
                        "Group %r depends on unregistered field %r", group.name, name
                    )
            owned = fields_by_group.get(group.name or "", ())
            rendered.append(group.render(registry, owned))

        return rendered

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping of this config, omitting unset slots.

        Leaving unset slots out keeps "not set" distinct from falsy values
        such as ``value_empty: false`` in every format.
        """
        return self.model_dump(exclude_none=True)

    def model_dump_json(self, *, indent: int | None = 2, **json_kwargs: Any) -> str:  # type: ignore[override]
        """Serialize the configuration to JSON.

        Args:
            indent: Indentation level.
            **json_kwargs: Additional arguments passed to json.dumps.

        Returns:
            JSON string representation.
        """
        return json.dumps(self.to_dict(), indent=indent, **json_kwargs)

    def model_dump_yaml(self, **yaml_kwargs: Any) -> str:
        """Serialize the configuration to YAML.

        Args:
            **yaml_kwargs: Additional arguments passed to yaml.safe_dump.

        Returns:
            YAML string representation.
        """
        return yaml.safe_dump(self.to_dict(), sort_keys=False, **yaml_kwargs)

    def model_dump_toml(self) -> str:
        """Serialize the configuration to TOML."""
        return tomli_w.dumps(self.to_dict())

    @classmethod
    def model_validate_json(cls, json_data: str | bytes, **json_kwargs: Any) -> Self:  # type: ignore[override]
        """Create a configuration from JSON.

        Args:
            json_data: JSON string or bytes.
            **json_kwargs: Additional arguments passed to json.loads.
        """
        data = json.loads(json_data, **json_kwargs)
        return cls.model_validate(data)

    @classmethod
    def model_validate_yaml(cls, yaml_data: str | bytes) -> Self:
        """Create a configuration from YAML.

        An empty document yields a configuration with no groups.
        """
        data = yaml.safe_load(yaml_data)
        return cls.model_validate(data or {})

    @classmethod
    def model_validate_toml(cls, toml_data: str | bytes) -> Self:
        """Create a configuration from TOML."""
        if isinstance(toml_data, bytes):
            toml_data = toml_data.decode()

        data = tomllib.loads(toml_data)
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> Self:
        """Load a configuration file, choosing the format by extension.

        Supported extensions are ``.json``, ``.yaml``, ``.yml`` and ``.toml``.

        Raises:
            ValueError: If the extension is not supported.
            OSError: If the file cannot be read.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        loaders = {
            ".json": cls.model_validate_json,
            ".yaml": cls.model_validate_yaml,
            ".yml": cls.model_validate_yaml,
            ".toml": cls.model_validate_toml,
        }
        if suffix not in loaders:
            raise ValueError(
                f"Unsupported configuration format {suffix!r} for {path}; "
                f"expected one of {sorted(loaders)}"
            )

        logger.debug("Loading form configuration from %s", path)
        return loaders[suffix](path.read_text(encoding="utf-8"))
