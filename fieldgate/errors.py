"""Error types produced by configuration validation.

Validation in fieldgate is aggregating rather than fail-fast: ``validate_rules()``
methods return a list of ConfigError instances describing every structural
problem at once. Only FormConfig.ensure_valid() raises, wrapping the full list
in a ConfigValidationError so a host can reject a configuration before any
interactive session begins.
"""


class ConfigError(ValueError):
    """Base class for a single structural problem in a configuration.

    Instances are returned as values by ``validate_rules()``; they are raised
    only as part of a ConfigValidationError.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConfigError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class MissingFieldError(ConfigError):
    """A required field is missing or empty.

    Examples:
        >>> str(MissingFieldError("parameter_name", "condition"))
        'the condition missing required field: parameter_name'
    """

    def __init__(self, field: str, owner: str) -> None:
        self.field = field
        self.owner = owner
        super().__init__(f"the {owner} missing required field: {field}")


class MissingPredicateError(ConfigError):
    """A condition sets none of its predicate slots."""

    def __init__(self, parameter_name: str | None = None) -> None:
        self.parameter_name = parameter_name
        super().__init__("missing a valid condition")


class ConfigValidationError(ValueError):
    """Raised when a configuration fails validation.

    Attributes:
        errors: Every problem found, in validation order.
    """

    def __init__(self, errors: list[ConfigError]) -> None:
        self.errors = list(errors)
        lines = "\n".join(f"  - {error.message}" for error in self.errors)
        super().__init__(
            f"configuration has {len(self.errors)} error(s):\n{lines}"
        )
