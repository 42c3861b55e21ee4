"""Documentation Validator — README presence and descriptions on variables and outputs."""

import re

from tfadvisor.validators.base import OUTPUT_HEADER, VARIABLE_HEADER, BaseValidator
from tfadvisor.validators.files import README_MD, normalize_file_name
from tfadvisor.validators.models import Category, ConfigurationBundle, Finding, Severity

DESCRIPTION_ATTR = re.compile(r'description\s*=\s*"[^"]+"')


class DocumentationValidator(BaseValidator):
    """Checks that the module explains itself to its users."""

    @property
    def name(self) -> str:
        return "DocumentationValidator"

    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        findings = []

        if not bundle.has_role(README_MD):
            findings.append(self._finding(
                rule="readme-exists",
                severity=Severity.WARNING,
                category=Category.DOCUMENTATION,
                message="Missing README.md file",
                best_practice="Include a README.md file with module documentation",
                suggestion="Create a README.md file with module usage examples and documentation",
            ))

        for file_name, content in self._sources_named(bundle, "variable"):
            for block in self._find_blocks(content, VARIABLE_HEADER):
                if DESCRIPTION_ATTR.search(block.text):
                    continue
                var_name = block.labels[0]
                findings.append(self._finding(
                    rule="variable-description",
                    severity=Severity.WARNING,
                    category=Category.DOCUMENTATION,
                    message=f"Variable '{var_name}' is missing a description",
                    file=file_name,
                    best_practice="Include descriptions for all variables",
                    suggestion=f"Add a description attribute to variable '{var_name}'",
                ))

        for file_name, content in self._sources_named(bundle, "output"):
            for block in self._find_blocks(content, OUTPUT_HEADER):
                if DESCRIPTION_ATTR.search(block.text):
                    continue
                out_name = block.labels[0]
                findings.append(self._finding(
                    rule="output-description",
                    severity=Severity.INFO,
                    category=Category.DOCUMENTATION,
                    message=f"Output '{out_name}' is missing a description",
                    file=file_name,
                    best_practice="Include descriptions for all outputs",
                    suggestion=f"Add a description attribute to output '{out_name}'",
                ))

        return findings

    def _sources_named(self, bundle: ConfigurationBundle, fragment: str):
        """Configuration sources whose normalized name mentions ``fragment``."""
        for file_name, content in bundle.config_sources():
            if fragment in normalize_file_name(file_name).lower():
                yield file_name, content
