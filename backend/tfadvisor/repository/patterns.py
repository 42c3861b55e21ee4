"""Pattern Repository — filtered lookup over the template corpus.

A single writer replaces the whole index; readers always see either the old
or the new snapshot, never a partially built one.
"""

import threading
from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping, Optional

import structlog

from tfadvisor.repository.models import Pattern, PatternFilter

logger = structlog.get_logger()


class PatternNotFoundError(LookupError):
    """Raised when no pattern has the requested id."""

    def __init__(self, pattern_id: str):
        super().__init__(f"Pattern not found: {pattern_id}")
        self.pattern_id = pattern_id


class PatternRepository:
    """In-memory pattern index keyed by id."""

    def __init__(self, patterns: Optional[Iterable[Pattern]] = None):
        self._lock = threading.Lock()
        self._patterns: Mapping[str, Pattern] = MappingProxyType({})
        if patterns is not None:
            self.load(patterns)

    def load(self, patterns: Iterable[Pattern]) -> None:
        """Replace the index. Later duplicates of an id win."""
        snapshot = {p.id: p for p in patterns}
        with self._lock:
            self._patterns = MappingProxyType(snapshot)
        logger.info("pattern_index_loaded", count=len(snapshot))

    def get(self, pattern_id: str) -> Pattern:
        """Return the pattern with ``pattern_id``.

        Raises:
            PatternNotFoundError: if no such pattern exists
        """
        pattern = self._patterns.get(pattern_id)
        if pattern is None:
            raise PatternNotFoundError(pattern_id)
        return pattern

    def find(self, criteria: Optional[PatternFilter] = None) -> list[Pattern]:
        """All patterns satisfying ``criteria``, sorted by id."""
        criteria = criteria or PatternFilter()
        snapshot = self._patterns
        results = [p for _, p in sorted(snapshot.items()) if criteria.matches(p)]
        logger.debug(
            "pattern_lookup",
            filter=criteria.model_dump(exclude_defaults=True, mode="json"),
            matches=len(results),
        )
        return results

    def __len__(self) -> int:
        return len(self._patterns)
