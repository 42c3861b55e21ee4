"""Naming Validator — identifier conventions for variables and resources.

Only declaration headers are inspected; block bodies are ignored.
"""

from tfadvisor.validators.base import RESOURCE_HEADER, VARIABLE_HEADER, BaseValidator
from tfadvisor.validators.models import Category, ConfigurationBundle, Finding, Severity


class NamingValidator(BaseValidator):
    """Flags hyphenated, mixed-case, or non-underscore identifiers."""

    @property
    def name(self) -> str:
        return "NamingValidator"

    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        findings = []

        # Variables: underscores, lowercase
        for file_name, content in bundle.config_sources():
            for match in VARIABLE_HEADER.finditer(content):
                var_name = match.group(1)
                if "-" in var_name:
                    findings.append(self._finding(
                        rule="variable-name-hyphens",
                        severity=Severity.WARNING,
                        category=Category.NAMING,
                        message=f"Variable name '{var_name}' uses hyphens instead of underscores",
                        file=file_name,
                        best_practice="Use underscores, not hyphens, in variable names",
                        suggestion=f"Rename variable '{var_name}' to use underscores instead of hyphens",
                    ))
                if var_name.lower() != var_name:
                    findings.append(self._finding(
                        rule="variable-name-case",
                        severity=Severity.INFO,
                        category=Category.NAMING,
                        message=f"Variable name '{var_name}' uses uppercase letters",
                        file=file_name,
                        best_practice="Use lowercase letters in variable names",
                        suggestion=f"Rename variable '{var_name}' to use all lowercase letters",
                    ))

        # Resources: underscore style local names
        for file_name, content in bundle.config_sources():
            for match in RESOURCE_HEADER.finditer(content):
                res_name = match.group(2)
                if "_" in res_name and "-" not in res_name:
                    continue
                findings.append(self._finding(
                    rule="resource-name-convention",
                    severity=Severity.INFO,
                    category=Category.NAMING,
                    message=f"Resource name '{res_name}' doesn't follow naming convention",
                    file=file_name,
                    best_practice="Use underscores in resource names for readability",
                    suggestion=f"Rename resource '{res_name}' to use underscores",
                ))

        return findings
