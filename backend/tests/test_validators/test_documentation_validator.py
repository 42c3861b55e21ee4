"""Tests for the documentation rule set."""

from tfadvisor.validators.documentation_validator import DocumentationValidator
from tfadvisor.validators.models import Category, ConfigurationBundle, Severity

README = {"README.md": "# Module\n"}


def _run(files: dict[str, str]):
    return DocumentationValidator().validate(ConfigurationBundle({**README, **files}))


class TestReadme:
    def test_missing_readme(self) -> None:
        findings = DocumentationValidator().validate(ConfigurationBundle({"main.tf": ""}))
        assert [f.rule for f in findings] == ["readme-exists"]
        assert findings[0].severity == Severity.WARNING
        assert findings[0].category == Category.DOCUMENTATION

    def test_lowercase_readme_accepted(self) -> None:
        findings = DocumentationValidator().validate(ConfigurationBundle({"readme.md": ""}))
        assert findings == []


class TestVariableDescriptions:
    def test_missing_description(self) -> None:
        findings = _run({"variables.tf": 'variable "region" {\n  type = string\n}\n'})
        assert len(findings) == 1
        assert findings[0].rule == "variable-description"
        assert findings[0].severity == Severity.WARNING
        assert "'region'" in findings[0].message
        assert findings[0].file == "variables.tf"

    def test_described_variable_passes(self) -> None:
        content = 'variable "region" {\n  description = "AWS region"\n}\n'
        assert _run({"variables.tf": content}) == []

    def test_empty_description_is_missing(self) -> None:
        content = 'variable "region" {\n  description = ""\n}\n'
        assert [f.rule for f in _run({"variables.tf": content})] == ["variable-description"]

    def test_each_block_checked_separately(self) -> None:
        content = (
            'variable "a" {\n  description = "A"\n}\n\n'
            'variable "b" {\n  type = string\n}\n'
        )
        findings = _run({"variables.tf": content})
        assert [f.message for f in findings] == ["Variable 'b' is missing a description"]

    def test_block_ends_at_first_unindented_brace(self) -> None:
        # Nested block closed at column 0 hides the description that follows
        content = (
            'variable "env" {\n'
            "  validation {\n"
            "    condition = true\n"
            "}\n"
            '  description = "Environment"\n'
            "}\n"
        )
        assert [f.rule for f in _run({"variables.tf": content})] == ["variable-description"]

    def test_indented_nested_block_is_fine(self) -> None:
        content = (
            'variable "env" {\n'
            "  validation {\n"
            "    condition = true\n"
            "  }\n"
            '  description = "Environment"\n'
            "}\n"
        )
        assert _run({"variables.tf": content}) == []

    def test_only_variable_files_are_checked(self) -> None:
        assert _run({"main.tf": 'variable "region" {\n}\n'}) == []


class TestOutputDescriptions:
    def test_missing_description_is_info(self) -> None:
        findings = _run({"outputs.tf": 'output "id" {\n  value = aws_vpc.main.id\n}\n'})
        assert [f.rule for f in findings] == ["output-description"]
        assert findings[0].severity == Severity.INFO

    def test_alias_file_is_checked(self) -> None:
        findings = _run({"output": 'output "id" {\n  value = 1\n}\n'})
        assert [f.file for f in findings] == ["output"]
