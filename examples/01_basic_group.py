"""Basic conditional group.

Shows a "breaking change" group only while the commit type is a feature or
a refactor, re-evaluating the decision as the field value changes.
"""

import fieldgate as fg

# Fields of the render session, owned by the host
commit_type = fg.PromptField("type", "fix", title="Type of change")
footer = fg.PromptField("footer", "", title="Breaking change description")
registry = fg.FieldRegistry([commit_type, footer])

group = fg.Group(
    name="breaking_change",
    depends_on=fg.DependsOn(
        or_conditions=[
            fg.Condition(parameter_name="type", value_equals="feat"),
            fg.Condition(parameter_name="type", value_equals="refactor"),
        ]
    ),
)

errors = group.validate_rules()
if errors:
    raise SystemExit("\n".join(str(error) for error in errors))

rendered = group.render(registry, [footer])

for value in ("fix", "feat", "docs", "refactor"):
    commit_type.value = value
    state = "hidden" if rendered.hidden else "shown"
    print(f"type={value!r}: {rendered.title} is {state}")
