"""Improvement Synthesizer — turns findings back into file content.

Two passes over a bundle:
    1. Scaffold every canonical role the bundle lacks
    2. Annotate files named by error/warning findings with remediation comments

Usage:
    synthesizer = ImprovementSynthesizer()
    file_contents = synthesizer.suggest({"main.tf": "..."})
"""

from collections.abc import Mapping
from typing import Optional, Union

import structlog

from tfadvisor.suggestions.scaffolds import render_scaffold
from tfadvisor.validators.engine import ValidationEngine, validation_engine
from tfadvisor.validators.files import missing_roles
from tfadvisor.validators.models import ConfigurationBundle, Finding, Severity

logger = structlog.get_logger()

ACTIONABLE_SEVERITIES = frozenset({Severity.ERROR, Severity.WARNING})


class ImprovementSynthesizer:
    """Builds a file name → suggested content map for a bundle.

    Holds only a reference to a read-only engine; safe to share across threads.
    """

    def __init__(self, engine: Optional[ValidationEngine] = None):
        self.engine = engine or validation_engine

    def suggest(self, bundle: Union[ConfigurationBundle, Mapping[str, str]]) -> dict[str, str]:
        """Produce scaffolds for missing roles and annotated copies of flagged files.

        Args:
            bundle: File name → content mapping (or an already-built bundle)

        Returns:
            Suggested file contents keyed by file name. Files that need no
            change are absent.
        """
        bundle = ConfigurationBundle.coerce(bundle)
        file_contents: dict[str, str] = {}

        # Pass 1: scaffolds, in canonical order
        scaffolded = missing_roles(bundle)
        for role in scaffolded:
            file_contents[role] = render_scaffold(role)

        # Pass 2: remediation notes, grouped per file in finding order
        notes: dict[str, list[str]] = {}
        for finding in self.engine.run(bundle):
            if not self._is_actionable(finding):
                continue
            notes.setdefault(finding.file, []).append(f"# TODO: {finding.message}\n")

        for file_name, comments in notes.items():
            content = file_contents.get(file_name)
            if content is None:
                content = bundle.get(file_name, "")
            file_contents[file_name] = "".join(comments) + content

        logger.info(
            "suggestions_generated",
            files=len(bundle),
            scaffolded=len(scaffolded),
            annotated=len(notes),
        )
        return file_contents

    @staticmethod
    def _is_actionable(finding: Finding) -> bool:
        return (
            finding.severity in ACTIONABLE_SEVERITIES
            and bool(finding.file)
            and bool(finding.suggestion)
        )

