"""Validation models — severity levels, categories, findings, and report structure.

All validation is deterministic: same bundle → same findings, in the same order.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tfadvisor.validators.files import is_config_source, normalize_file_name


class InvalidBundleError(ValueError):
    """Raised when a bundle cannot be used as input at all."""


class Severity(str, Enum):
    """Finding severity, in descending order of urgency."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Category(str, Enum):
    """What aspect of the configuration a finding is about."""

    STRUCTURE = "structure"
    NAMING = "naming"
    SECURITY = "security"
    PERFORMANCE = "performance"
    MAINTENANCE = "maintenance"
    DOCUMENTATION = "documentation"


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Finding(_CamelModel):
    """A single issue reported by a rule. Never mutated after creation."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )

    rule: str
    message: str
    severity: Severity
    category: Category
    file: Optional[str] = None            # None for bundle-level findings
    best_practice: Optional[str] = None
    suggestion: Optional[str] = None


class ValidationSummary(_CamelModel):
    """Counts derived from a finding list."""

    file_count: int = Field(default=0, ge=0)
    error_count: int = Field(default=0, ge=0)
    warning_count: int = Field(default=0, ge=0)
    info_count: int = Field(default=0, ge=0)


class ValidationReport(_CamelModel):
    """Complete validation report — the output of the validation engine."""

    findings: list[Finding] = Field(default_factory=list)
    summary: ValidationSummary = Field(default_factory=ValidationSummary)
    successful: bool = Field(default=True, description="True if no error-level findings")
    formatted: str = ""

    @classmethod
    def build(cls, findings: list[Finding], file_count: int) -> "ValidationReport":
        """Build a report from findings, keeping rule-execution order."""
        counts = {severity: 0 for severity in Severity}
        for finding in findings:
            counts[finding.severity] += 1

        summary = ValidationSummary(
            file_count=file_count,
            error_count=counts[Severity.ERROR],
            warning_count=counts[Severity.WARNING],
            info_count=counts[Severity.INFO],
        )
        return cls(
            findings=list(findings),
            summary=summary,
            successful=summary.error_count == 0,
        )

    def by_rule(self, rule: str) -> list[Finding]:
        return [f for f in self.findings if f.rule == rule]


class ConfigurationBundle:
    """Read-only view over the caller's file name → content mapping.

    Files are always visited in sorted name order so the finding sequence
    does not depend on how the caller built the mapping.
    """

    __slots__ = ("_files", "_roles")

    def __init__(self, files: Mapping[str, str]):
        if files is None or not isinstance(files, Mapping):
            raise InvalidBundleError(
                f"Bundle must be a mapping of file name to content, got {type(files).__name__}"
            )
        for name, content in files.items():
            if not isinstance(name, str) or not name:
                raise InvalidBundleError(f"File names must be non-empty strings, got {name!r}")
            if not isinstance(content, str):
                raise InvalidBundleError(
                    f"Content of '{name}' must be a string, got {type(content).__name__}"
                )
        self._files = dict(sorted(files.items()))
        self._roles = frozenset(normalize_file_name(name) for name in self._files)

    @classmethod
    def coerce(cls, bundle: "ConfigurationBundle | Mapping[str, str]") -> "ConfigurationBundle":
        if isinstance(bundle, cls):
            return bundle
        return cls(bundle)

    def __len__(self) -> int:
        return len(self._files)

    def __iter__(self) -> Iterator[str]:
        return iter(self._files)

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self._files.get(name, default)

    def items(self) -> Iterator[tuple[str, str]]:
        """All files, sorted by name."""
        return iter(self._files.items())

    def config_sources(self) -> Iterator[tuple[str, str]]:
        """Files that hold configuration language text, sorted by name."""
        return ((name, content) for name, content in self._files.items() if is_config_source(name))

    def has_role(self, role: str) -> bool:
        """True if some file normalizes to the given canonical role name."""
        return role in self._roles

    def has_dir(self, directory: str) -> bool:
        """True if any file path is rooted at ``directory/``."""
        prefix = f"{directory.rstrip('/')}/"
        return any(name.startswith(prefix) for name in self._files)
