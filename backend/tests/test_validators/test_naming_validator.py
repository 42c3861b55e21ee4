"""Tests for the naming rule set."""

from tfadvisor.validators.models import ConfigurationBundle, Severity
from tfadvisor.validators.naming_validator import NamingValidator


def _run(files: dict[str, str]):
    return NamingValidator().validate(ConfigurationBundle(files))


class TestVariableNames:
    def test_hyphen_is_a_warning(self) -> None:
        findings = _run({"variables.tf": 'variable "instance-type" {\n}\n'})
        assert [f.rule for f in findings] == ["variable-name-hyphens"]
        assert findings[0].severity == Severity.WARNING
        assert "instance-type" in findings[0].message

    def test_uppercase_is_info(self) -> None:
        findings = _run({"variables.tf": 'variable "InstanceType" {\n}\n'})
        assert [f.rule for f in findings] == ["variable-name-case"]
        assert findings[0].severity == Severity.INFO

    def test_both_conventions_broken(self) -> None:
        findings = _run({"variables.tf": 'variable "Instance-Type" {\n}\n'})
        assert [f.rule for f in findings] == ["variable-name-hyphens", "variable-name-case"]

    def test_snake_case_passes(self) -> None:
        assert _run({"variables.tf": 'variable "instance_type" {\n}\n'}) == []


class TestResourceNames:
    def test_underscore_name_passes(self) -> None:
        assert _run({"main.tf": 'resource "aws_vpc" "main_vpc" {\n}\n'}) == []

    def test_single_word_name_is_flagged(self) -> None:
        findings = _run({"main.tf": 'resource "aws_vpc" "main" {\n}\n'})
        assert [f.rule for f in findings] == ["resource-name-convention"]
        assert findings[0].severity == Severity.INFO

    def test_hyphenated_name_is_flagged(self) -> None:
        findings = _run({"main.tf": 'resource "aws_vpc" "main-vpc" {\n}\n'})
        assert [f.rule for f in findings] == ["resource-name-convention"]

    def test_mixed_hyphen_and_underscore_is_flagged(self) -> None:
        findings = _run({"main.tf": 'resource "aws_vpc" "main_vpc-a" {\n}\n'})
        assert len(findings) == 1

    def test_non_config_files_are_ignored(self) -> None:
        assert _run({"README.md": 'resource "aws_vpc" "main" {\n}\n'}) == []
