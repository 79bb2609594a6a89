"""Loading groups from configuration.

Parses a YAML configuration, rejects it with every error at once if it is
invalid, and renders the groups against a set of fields.
"""

import logging

import fieldgate as fg

logging.basicConfig(level=logging.DEBUG)

YAML = """
groups:
  - name: summary
  - name: details
    depends_on:
      or_conditions:
        - parameter_name: type
          value_not_equals: docs
      and_conditions:
        - parameter_name: scope
          value_empty: false
  - name: labels
    depends_on:
      or_conditions:
        - parameter_name: labels
          value_contains: api
"""

BROKEN_YAML = """
groups:
  - depends_on:
      or_conditions:
        - value_equals: feat
        - parameter_name: scope
"""

try:
    fg.FormConfig.model_validate_yaml(BROKEN_YAML).ensure_valid()
except fg.ConfigValidationError as e:
    print(e)

config = fg.FormConfig.model_validate_yaml(YAML).ensure_valid()

commit_type = fg.PromptField("type", "feat")
scope = fg.PromptField("scope", "")
labels = fg.PromptField("labels", ["cli"])
body = fg.PromptField("body", "")
registry = fg.FieldRegistry([commit_type, scope, labels, body])

groups = config.render(
    registry,
    {"summary": [commit_type, scope], "details": [body], "labels": [labels]},
)


def show() -> None:
    for group in groups:
        names = [field.name for field in group.visible_fields()]
        print(f"  {group.title}: {'hidden' if group.hidden else names}")


print("initial:")
show()

scope.value = "parser"
labels.value = ["cli", "api"]
print("after editing scope and labels:")
show()

print("round trip as TOML:")
print(config.model_dump_toml())
