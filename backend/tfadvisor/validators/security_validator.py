"""Security Validator — hardcoded credentials, unflagged sensitive variables, open ingress.

Scans the raw text of every file in the bundle, not only configuration sources,
since secrets leak into scripts and docs just as often.
"""

import re

from tfadvisor.validators.base import VARIABLE_HEADER, BaseValidator
from tfadvisor.validators.files import normalize_file_name
from tfadvisor.validators.models import Category, ConfigurationBundle, Finding, Severity
from tfadvisor.validators.reference_data import CREDENTIAL_KEYWORDS, OPEN_WORLD_CIDR

CREDENTIAL_ASSIGNMENT = re.compile(
    rf'({"|".join(CREDENTIAL_KEYWORDS)})s?\s*=\s*"[^"]+"',
    re.IGNORECASE,
)
SENSITIVE_FLAG = re.compile(r"sensitive\s*=\s*true", re.IGNORECASE)
OPEN_INGRESS = re.compile(
    rf'ingress\s*\{{[^}}]*cidr_blocks\s*=\s*\[\s*"{re.escape(OPEN_WORLD_CIDR)}"\s*\]',
    re.IGNORECASE,
)


class SecurityValidator(BaseValidator):
    """Detects credentials in source text and world-open security group rules."""

    @property
    def name(self) -> str:
        return "SecurityValidator"

    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        findings = []
        findings.extend(self._check_hardcoded_secrets(bundle))
        findings.extend(self._check_sensitive_variables(bundle))
        findings.extend(self._check_open_ingress(bundle))
        return findings

    def _check_hardcoded_secrets(self, bundle: ConfigurationBundle) -> list[Finding]:
        """One error per credential-looking assignment."""
        findings = []
        for file_name, content in bundle.items():
            for match in CREDENTIAL_ASSIGNMENT.finditer(content):
                # Report the attribute, never the literal value
                attribute = match.group(0).split("=", 1)[0].strip()
                findings.append(self._finding(
                    rule="hardcoded-secret",
                    severity=Severity.ERROR,
                    category=Category.SECURITY,
                    message=f"Possible hardcoded secret found in '{attribute}'",
                    file=file_name,
                    best_practice="Never hardcode sensitive values in Terraform configuration",
                    suggestion=(
                        "Use variables with sensitive = true or integrate with a "
                        "secrets management solution"
                    ),
                ))
        return findings

    def _check_sensitive_variables(self, bundle: ConfigurationBundle) -> list[Finding]:
        """One warning per variables file that holds credentials but flags none as sensitive."""
        findings = []
        for file_name, content in bundle.items():
            if "variable" not in normalize_file_name(file_name).lower():
                continue
            if not CREDENTIAL_ASSIGNMENT.search(content):
                continue
            flagged = any(
                SENSITIVE_FLAG.search(block.text)
                for block in self._find_blocks(content, VARIABLE_HEADER)
            )
            if not flagged:
                findings.append(self._finding(
                    rule="sensitive-variables",
                    severity=Severity.WARNING,
                    category=Category.SECURITY,
                    message="Sensitive variables should be marked with sensitive = true",
                    file=file_name,
                    best_practice="Mark sensitive variables with sensitive = true",
                    suggestion=(
                        "Add sensitive = true to variable definitions containing "
                        "sensitive information"
                    ),
                ))
        return findings

    def _check_open_ingress(self, bundle: ConfigurationBundle) -> list[Finding]:
        """One warning per ingress rule open to the whole internet."""
        findings = []
        for file_name, content in bundle.items():
            for _ in OPEN_INGRESS.finditer(content):
                findings.append(self._finding(
                    rule="open-ingress-cidr",
                    severity=Severity.WARNING,
                    category=Category.SECURITY,
                    message=f"Security group allows access from {OPEN_WORLD_CIDR} (any IP)",
                    file=file_name,
                    best_practice="Restrict security group access to specific IP ranges",
                    suggestion=(
                        f"Replace {OPEN_WORLD_CIDR} with specific IP ranges or use a "
                        "variable for allowed IPs"
                    ),
                ))
        return findings
