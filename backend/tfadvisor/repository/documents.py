"""Document Index — best-practice articles and module-structure documents by URI.

URIs:
    bestpractice:<category>/<id>
    modulestructure:<provider|generic>/<type>
"""

import threading
from collections.abc import Iterable
from types import MappingProxyType
from typing import Mapping, Optional, Union

import structlog

from tfadvisor.repository.models import BestPracticeDoc, ModuleStructureDoc

logger = structlog.get_logger()

BEST_PRACTICE_SCHEME = "bestpractice"
MODULE_STRUCTURE_SCHEME = "modulestructure"

Document = Union[BestPracticeDoc, ModuleStructureDoc]


class DocumentNotFoundError(LookupError):
    """Raised when no document is registered under the requested URI."""

    def __init__(self, uri: str):
        super().__init__(f"Resource not found: {uri}")
        self.uri = uri


class DocumentIndex:
    """Read-mostly index over the guidance corpus.

    ``authority_sources`` records where the guidance comes from. The index
    never fetches from them.
    """

    def __init__(
        self,
        best_practices: Iterable[BestPracticeDoc] = (),
        module_structures: Iterable[ModuleStructureDoc] = (),
        authority_sources: Iterable[str] = (),
    ):
        self.authority_sources: tuple[str, ...] = tuple(authority_sources)
        self._lock = threading.Lock()
        self._documents: Mapping[str, Document] = MappingProxyType({})
        self.load(best_practices, module_structures)

    def load(
        self,
        best_practices: Iterable[BestPracticeDoc],
        module_structures: Iterable[ModuleStructureDoc],
    ) -> None:
        """Replace every indexed document in one swap."""
        snapshot: dict[str, Document] = {}
        for doc in best_practices:
            snapshot[doc.uri] = doc
        for doc in module_structures:
            snapshot[doc.uri] = doc
        with self._lock:
            self._documents = MappingProxyType(dict(sorted(snapshot.items())))

    def __len__(self) -> int:
        return len(self._documents)

    # ── Resource access ──

    def list_resources(self, prefix: str = "") -> list[str]:
        """URIs starting with ``prefix``, sorted."""
        return [uri for uri in self._documents if uri.startswith(prefix)]

    def get_resource(self, uri: str) -> Document:
        """Return the document registered under ``uri``.

        Raises:
            DocumentNotFoundError: if the URI is unknown
        """
        doc = self._documents.get(uri)
        if doc is None:
            raise DocumentNotFoundError(uri)
        return doc

    # ── Filtered lookups ──

    def get_best_practices(
        self,
        topic: Optional[str] = None,
        category: Optional[str] = None,
        provider: Optional[str] = None,
        keywords: Optional[list[str]] = None,
    ) -> list[BestPracticeDoc]:
        """Best-practice articles matching every given criterion.

        Args:
            topic: Case-insensitive substring of the title or description
            category: Exact category
            provider: Exact provider; provider-neutral articles do not match
            keywords: Any keyword found in title, description, content or a tag

        Returns:
            Matching articles ordered by URI
        """
        results = []
        for doc in self._documents.values():
            if not isinstance(doc, BestPracticeDoc):
                continue
            if topic and not _contains_any(topic, doc.title, doc.description):
                continue
            if category and doc.category != category:
                continue
            if provider and doc.provider != provider:
                continue
            if keywords and not any(
                _contains_any(kw, doc.title, doc.description, doc.content, *doc.tags)
                for kw in keywords
            ):
                continue
            results.append(doc)
        return results

    def get_module_structures(
        self,
        structure_type: Optional[str] = None,
        provider: Optional[str] = None,
    ) -> list[ModuleStructureDoc]:
        """Module-structure documents by exact type and provider, ordered by URI."""
        return [
            doc
            for doc in self._documents.values()
            if isinstance(doc, ModuleStructureDoc)
            and (not structure_type or doc.type == structure_type)
            and (not provider or doc.provider == provider)
        ]

    @property
    def best_practice_count(self) -> int:
        return len(self.list_resources(f"{BEST_PRACTICE_SCHEME}:"))

    @property
    def module_structure_count(self) -> int:
        return len(self.list_resources(f"{MODULE_STRUCTURE_SCHEME}:"))


def _contains_any(needle: str, *haystacks: str) -> bool:
    needle = needle.lower()
    return any(needle in h.lower() for h in haystacks)
