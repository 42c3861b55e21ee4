"""Resource Validator — tagging and count-vs-for_each hygiene."""

import re

from tfadvisor.validators.base import RESOURCE_HEADER, BaseValidator
from tfadvisor.validators.models import Category, ConfigurationBundle, Finding, Severity
from tfadvisor.validators.reference_data import (
    TAGGABLE_PROVIDER_PREFIXES,
    UNTAGGABLE_RESOURCE_TYPES,
)

TAGS_ATTR = re.compile(r"tags\s*=\s*")
COUNT_LENGTH = re.compile(r"\s+count\s*=\s*length\(([^)]+)\)")


class ResourceValidator(BaseValidator):
    """Checks individual resource blocks."""

    @property
    def name(self) -> str:
        return "ResourceValidator"

    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        findings = []

        # 1. Missing tags on taggable provider resources
        for file_name, content in bundle.config_sources():
            for block in self._find_blocks(content, RESOURCE_HEADER):
                res_type, res_name = block.labels
                if not self._is_taggable(res_type) or TAGS_ATTR.search(block.text):
                    continue
                findings.append(self._finding(
                    rule="resource-tags",
                    severity=Severity.INFO,
                    category=Category.MAINTENANCE,
                    message=f"Resource '{res_name}' of type '{res_type}' is missing tags",
                    file=file_name,
                    best_practice="Apply consistent tagging to all resources for better management",
                    suggestion=f"Add tags to resource '{res_name}'",
                ))

        # 2. count = length(...) reorders instances when the collection changes
        for file_name, content in bundle.config_sources():
            for block in self._find_blocks(content, RESOURCE_HEADER):
                match = COUNT_LENGTH.search(block.text)
                if match is None:
                    continue
                res_name = block.labels[1]
                collection = match.group(1).strip()
                findings.append(self._finding(
                    rule="count-over-for-each",
                    severity=Severity.INFO,
                    category=Category.MAINTENANCE,
                    message=(
                        f"Resource '{res_name}' uses count with length({collection}), "
                        "consider using for_each"
                    ),
                    file=file_name,
                    best_practice="Use for_each instead of count when iterating over complex values",
                    suggestion=(
                        f"Change 'count = length({collection})' to "
                        f"'for_each = toset({collection})'"
                    ),
                ))

        return findings

    def _is_taggable(self, resource_type: str) -> bool:
        if any(skip in resource_type for skip in UNTAGGABLE_RESOURCE_TYPES):
            return False
        return resource_type.startswith(TAGGABLE_PROVIDER_PREFIXES)
