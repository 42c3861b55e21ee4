"""Module Validator — version pinning for remote modules and unused local modules."""

import re

from tfadvisor.validators.base import MODULE_HEADER, BaseValidator
from tfadvisor.validators.models import Category, ConfigurationBundle, Finding, Severity
from tfadvisor.validators.reference_data import LOCAL_MODULES_DIR, REMOTE_MODULE_MARKERS

SOURCE_ATTR = re.compile(r'source\s*=\s*"([^"]+)"')
VERSION_ATTR = re.compile(r'version\s*=\s*"([^"]+)"')

# Any module block anywhere counts as module usage
MODULE_KEYWORD = "module "


class ModuleValidator(BaseValidator):
    """Checks how the configuration consumes modules."""

    @property
    def name(self) -> str:
        return "ModuleValidator"

    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        findings = []

        # 1. Remote modules must pin a version
        for file_name, content in bundle.config_sources():
            for block in self._find_blocks(content, MODULE_HEADER):
                source = SOURCE_ATTR.search(block.text)
                if source is None or not self._is_remote(source.group(1)):
                    continue
                if VERSION_ATTR.search(block.text):
                    continue
                mod_name = block.labels[0]
                findings.append(self._finding(
                    rule="module-version-pinning",
                    severity=Severity.WARNING,
                    category=Category.MAINTENANCE,
                    message=f"Module '{mod_name}' does not specify a version",
                    file=file_name,
                    best_practice="Always pin module versions for consistency and stability",
                    suggestion=f"Add version constraint to module '{mod_name}'",
                ))

        # 2. Local modules nobody calls
        if bundle.has_dir(LOCAL_MODULES_DIR):
            used = any(MODULE_KEYWORD in content for _, content in bundle.items())
            if not used:
                findings.append(self._finding(
                    rule="unused-local-modules",
                    severity=Severity.INFO,
                    category=Category.MAINTENANCE,
                    message="Local modules directory exists but modules are not used",
                    best_practice="Use a modular approach for complex configurations",
                    suggestion="Consider using the modules in your configuration for better organization",
                ))

        return findings

    def _is_remote(self, source: str) -> bool:
        return any(marker in source for marker in REMOTE_MODULE_MARKERS)
