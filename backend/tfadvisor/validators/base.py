"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is one rule set: a fixed, ordered group of checks over a
configuration bundle. Validators hold no mutable state, so a single instance
is shared by every concurrent caller.
"""

from abc import ABC, abstractmethod
import re
from typing import NamedTuple, Optional

from tfadvisor.validators.models import (
    Category,
    ConfigurationBundle,
    Finding,
    Severity,
)

# A line consisting solely of a closing brace ends a block.
BLOCK_END = re.compile(r"^\}[ \t\r]*$", re.MULTILINE)

VARIABLE_HEADER = re.compile(r'variable\s+"([^"]+)"\s*\{')
OUTPUT_HEADER = re.compile(r'output\s+"([^"]+)"\s*\{')
MODULE_HEADER = re.compile(r'module\s+"([^"]+)"\s*\{')
RESOURCE_HEADER = re.compile(r'resource\s+"([^"]+)"\s+"([^"]+)"\s*\{')


class Block(NamedTuple):
    """A declaration block located by pattern matching, not parsing."""

    labels: tuple[str, ...]
    text: str          # header through the terminating line (or end of text)


class BaseValidator(ABC):
    """Abstract base for all rule-set validators.

    Contract:
        - validate() is deterministic: same bundle → same findings, same order
        - validate() never raises on malformed text; no match means no finding
        - No I/O, no network calls, no randomness
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Stable rule-set name, used for logging and timings."""
        ...

    @abstractmethod
    def validate(self, bundle: ConfigurationBundle) -> list[Finding]:
        """Run every check in this rule set against the bundle.

        Args:
            bundle: The files under analysis

        Returns:
            List of findings (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _finding(
        self,
        rule: str,
        severity: Severity,
        category: Category,
        message: str,
        file: Optional[str] = None,
        best_practice: Optional[str] = None,
        suggestion: Optional[str] = None,
    ) -> Finding:
        """Convenience method to create a Finding."""
        return Finding(
            rule=rule,
            severity=severity,
            category=category,
            message=message,
            file=file,
            best_practice=best_practice,
            suggestion=suggestion,
        )

    def _find_blocks(self, content: str, header: re.Pattern) -> list[Block]:
        """Locate declaration blocks whose header matches ``header``.

        A block runs from its header to the first following line that is
        exactly ``}``, or to the end of the text if there is none. Nested
        braces are not balanced, so a nested block closed at column 0 cuts
        the outer block short. Matches do not overlap: scanning resumes after
        the end of the previous block.
        """
        blocks = []
        pos = 0
        while True:
            match = header.search(content, pos)
            if match is None:
                break
            end_match = BLOCK_END.search(content, match.end())
            end = end_match.end() if end_match else len(content)
            blocks.append(Block(labels=match.groups(), text=content[match.start():end]))
            pos = max(end, match.end())
        return blocks

    def _line_count(self, content: str) -> int:
        return len(content.split("\n"))
