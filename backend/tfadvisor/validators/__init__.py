"""Configuration Validator — deterministic best-practice checks for Terraform bundles.

Usage:
    from tfadvisor.validators import validation_engine

    report = validation_engine.validate({"main.tf": "...", "variables.tf": "..."})
    if not report.successful:
        # Hand report.findings to the improvement synthesizer
"""

from tfadvisor.validators.engine import ValidationEngine, validation_engine
from tfadvisor.validators.models import (
    Category,
    ConfigurationBundle,
    Finding,
    InvalidBundleError,
    Severity,
    ValidationReport,
    ValidationSummary,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "ValidationReport",
    "ValidationSummary",
    "ConfigurationBundle",
    "Finding",
    "InvalidBundleError",
    "Severity",
    "Category",
]
