"""Tests for bundle construction and report aggregation."""

import pytest
from pydantic import ValidationError

from tfadvisor.validators.formatting import format_validation_report
from tfadvisor.validators.models import (
    Category,
    ConfigurationBundle,
    Finding,
    InvalidBundleError,
    Severity,
    ValidationReport,
)


def _finding(severity: Severity, rule: str = "test-rule") -> Finding:
    return Finding(rule=rule, message="m", severity=severity, category=Category.STRUCTURE)


class TestConfigurationBundle:
    def test_iterates_in_sorted_order(self) -> None:
        bundle = ConfigurationBundle({"variables.tf": "", "main.tf": "", "a.tf": ""})
        assert list(bundle) == ["a.tf", "main.tf", "variables.tf"]

    def test_config_sources_skip_markdown(self) -> None:
        bundle = ConfigurationBundle({"README.md": "x", "vars": "y"})
        assert [name for name, _ in bundle.config_sources()] == ["vars"]

    def test_has_role_uses_normalization(self) -> None:
        bundle = ConfigurationBundle({"resources.tf": ""})
        assert bundle.has_role("main.tf")
        assert not bundle.has_role("outputs.tf")

    def test_has_dir(self) -> None:
        bundle = ConfigurationBundle({"modules/vpc/main.tf": ""})
        assert bundle.has_dir("modules")
        assert not bundle.has_dir("module")

    @pytest.mark.parametrize("files", [None, ["main.tf"], "main.tf"])
    def test_rejects_non_mapping(self, files) -> None:
        with pytest.raises(InvalidBundleError):
            ConfigurationBundle(files)

    def test_rejects_non_string_content(self) -> None:
        with pytest.raises(InvalidBundleError, match="main.tf"):
            ConfigurationBundle({"main.tf": b"bytes"})

    def test_rejects_empty_name(self) -> None:
        with pytest.raises(InvalidBundleError):
            ConfigurationBundle({"": "x"})

    def test_invalid_bundle_error_is_value_error(self) -> None:
        assert issubclass(InvalidBundleError, ValueError)

    def test_coerce_returns_existing_bundle(self) -> None:
        bundle = ConfigurationBundle({})
        assert ConfigurationBundle.coerce(bundle) is bundle


class TestValidationReport:
    def test_counts_by_severity(self) -> None:
        findings = [
            _finding(Severity.ERROR),
            _finding(Severity.WARNING),
            _finding(Severity.WARNING),
            _finding(Severity.INFO),
        ]
        report = ValidationReport.build(findings, file_count=3)

        assert report.summary.file_count == 3
        assert report.summary.error_count == 1
        assert report.summary.warning_count == 2
        assert report.summary.info_count == 1
        assert report.successful is False

    def test_keeps_rule_execution_order(self) -> None:
        findings = [_finding(Severity.INFO, "a"), _finding(Severity.ERROR, "b")]
        report = ValidationReport.build(findings, file_count=0)
        assert [f.rule for f in report.findings] == ["a", "b"]

    def test_empty_report_is_successful(self) -> None:
        report = ValidationReport.build([], file_count=0)
        assert report.successful is True
        assert report.formatted == ""
        assert "No issues found!" in format_validation_report(report)

    def test_serializes_camel_case(self) -> None:
        finding = Finding(
            rule="r",
            message="m",
            severity=Severity.WARNING,
            category=Category.DOCUMENTATION,
            best_practice="bp",
        )
        report = ValidationReport.build([finding], file_count=1)
        data = report.model_dump(by_alias=True, mode="json")

        assert data["summary"]["warningCount"] == 1
        assert data["findings"][0]["bestPractice"] == "bp"
        assert data["findings"][0]["severity"] == "warning"

    def test_finding_is_frozen(self) -> None:
        finding = _finding(Severity.INFO)
        with pytest.raises(ValidationError):
            finding.message = "changed"
