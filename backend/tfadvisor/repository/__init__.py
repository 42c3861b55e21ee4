"""Pattern/Document Repository — indexed lookup over templates and guidance articles."""

from tfadvisor.repository.documents import DocumentIndex, DocumentNotFoundError
from tfadvisor.repository.loader import Corpus, load_corpus
from tfadvisor.repository.models import (
    BestPracticeDoc,
    CloudProvider,
    ComplexityLevel,
    ModuleStructureDoc,
    ModuleStructureFile,
    Pattern,
    PatternCategory,
    PatternFilter,
)
from tfadvisor.repository.patterns import PatternNotFoundError, PatternRepository

__all__ = [
    "Corpus",
    "load_corpus",
    "DocumentIndex",
    "DocumentNotFoundError",
    "PatternRepository",
    "PatternNotFoundError",
    "Pattern",
    "PatternFilter",
    "PatternCategory",
    "CloudProvider",
    "ComplexityLevel",
    "BestPracticeDoc",
    "ModuleStructureDoc",
    "ModuleStructureFile",
]
