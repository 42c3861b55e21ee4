"""Structure Validator — standard module files and file size.

The itemized missing-file checks and the aggregate module-structure check
overlap on purpose: consumers key on both rule identities.
"""

from tfadvisor.validators.base import BaseValidator
from tfadvisor.validators.files import MAIN_TF, OUTPUTS_TF, VARIABLES_TF, missing_roles
from tfadvisor.validators.models import Category, ConfigurationBundle, Finding, Severity
from tfadvisor.validators.reference_data import MAX_FILE_LINES


class StructureValidator(BaseValidator):
    """Checks that the bundle is laid out like a standard module."""

    @property
    def name(self) -> str:
        return "StructureValidator"

    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        findings = []

        # 1. Essential files
        if not bundle.has_role(MAIN_TF):
            findings.append(self._finding(
                rule="missing-main-tf",
                severity=Severity.ERROR,
                category=Category.STRUCTURE,
                message="Missing main.tf file",
                best_practice="Include a main.tf file with core resource definitions",
                suggestion="Create a main.tf file with core resource definitions",
            ))

        if not bundle.has_role(VARIABLES_TF):
            findings.append(self._finding(
                rule="missing-variables-tf",
                severity=Severity.WARNING,
                category=Category.STRUCTURE,
                message="Missing variables.tf file",
                best_practice="Include a variables.tf file for input variable definitions",
                suggestion="Create a variables.tf file with input variable definitions",
            ))

        if not bundle.has_role(OUTPUTS_TF):
            findings.append(self._finding(
                rule="missing-outputs-tf",
                severity=Severity.WARNING,
                category=Category.STRUCTURE,
                message="Missing outputs.tf file",
                best_practice="Include an outputs.tf file for output definitions",
                suggestion="Create an outputs.tf file with output definitions",
            ))

        # 2. Monolithic files
        for name, content in bundle.config_sources():
            line_count = self._line_count(content)
            if line_count > MAX_FILE_LINES:
                findings.append(self._finding(
                    rule="file-too-large",
                    severity=Severity.WARNING,
                    category=Category.MAINTENANCE,
                    message=(
                        f"File {name} is too large ({line_count} lines). "
                        "Consider splitting it into multiple files."
                    ),
                    file=name,
                    best_practice=f"Keep Terraform files under {MAX_FILE_LINES} lines for better maintainability",
                    suggestion="Split the file into multiple logical files based on resource types or functionality",
                ))

        # 3. Standard module layout as a whole
        missing = missing_roles(bundle)
        if missing:
            findings.append(self._finding(
                rule="module-structure-files",
                severity=Severity.INFO,
                category=Category.STRUCTURE,
                message=f"Module is missing standard files: {', '.join(missing)}",
                best_practice=(
                    "Follow standard module structure with main.tf, variables.tf, "
                    "outputs.tf, and README.md"
                ),
                suggestion="Add the missing files to follow the standard module structure",
            ))

        return findings
