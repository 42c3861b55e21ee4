"""Validation Engine — runs the fixed rule set over a bundle and produces a report.

This is the main entry point for configuration validation. It runs every
registered validator against the bundle and produces a ValidationReport.

Usage:
    engine = ValidationEngine()
    report = engine.validate({"main.tf": "...", "variables.tf": "..."})
    if not report.successful:
        # report.findings carries the errors
"""

import time
from collections.abc import Mapping
from typing import Optional, Union

import structlog

from tfadvisor.validators.base import BaseValidator
from tfadvisor.validators.formatting import format_validation_report
from tfadvisor.validators.models import ConfigurationBundle, Finding, ValidationReport

# Import all validators
from tfadvisor.validators.structure_validator import StructureValidator
from tfadvisor.validators.naming_validator import NamingValidator
from tfadvisor.validators.security_validator import SecurityValidator
from tfadvisor.validators.documentation_validator import DocumentationValidator
from tfadvisor.validators.module_validator import ModuleValidator
from tfadvisor.validators.resource_validator import ResourceValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Runs every validator in a fixed order and aggregates the findings.

    The validator tuple is built once and never changed, so one engine can be
    shared by any number of threads. Each call builds its own finding list.
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with the default rule set or a custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators: tuple[BaseValidator, ...] = tuple(validators or self._default_validators())

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in execution order."""
        return [
            StructureValidator(),      # Standard files, file size
            NamingValidator(),         # Variable and resource identifiers
            SecurityValidator(),       # Secrets, sensitive flags, open ingress
            DocumentationValidator(),  # README, descriptions
            ModuleValidator(),         # Version pinning, unused local modules
            ResourceValidator(),       # Tags, count vs for_each
        ]

    @property
    def rule_set_names(self) -> list[str]:
        return [v.name for v in self.validators]

    def run(self, bundle: Union[ConfigurationBundle, Mapping[str, str]]) -> list[Finding]:
        """Run all validators and return their findings in rule-set order.

        Raises:
            InvalidBundleError: if ``bundle`` is not a usable file mapping
        """
        bundle = ConfigurationBundle.coerce(bundle)
        findings: list[Finding] = []
        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                found = validator.validate(bundle)
            except Exception:
                logger.exception("validator_failed", validator=validator.name)
                raise
            findings.extend(found)
            logger.debug(
                "validator_finished",
                validator=validator.name,
                findings=len(found),
                duration_ms=round((time.perf_counter() - v_start) * 1000, 2),
            )
        return findings

    def validate(self, bundle: Union[ConfigurationBundle, Mapping[str, str]]) -> ValidationReport:
        """Run all validators against the bundle and produce a report.

        Args:
            bundle: File name → content mapping (or an already-built bundle)

        Returns:
            ValidationReport with findings in execution order and severity counts
        """
        start_time = time.perf_counter()

        bundle = ConfigurationBundle.coerce(bundle)
        findings = self.run(bundle)
        report = ValidationReport.build(findings, file_count=len(bundle))
        report.formatted = format_validation_report(report)

        logger.info(
            "validation_complete",
            files=report.summary.file_count,
            errors=report.summary.error_count,
            warnings=report.summary.warning_count,
            info=report.summary.info_count,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )

        return report


# Module-level singleton
validation_engine = ValidationEngine()
