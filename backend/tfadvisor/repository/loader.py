"""Corpus loader — reads patterns and guidance documents from JSON files.

Looks in the configured corpus directory first and falls back, file by file,
to the default corpus shipped in ``data/``. Nothing is fetched over the network.
"""

import json
from pathlib import Path
from typing import NamedTuple, Optional, Union

import structlog
from pydantic import BaseModel, ValidationError

from tfadvisor.repository.models import BestPracticeDoc, ModuleStructureDoc, Pattern

logger = structlog.get_logger()

DEFAULT_CORPUS_DIR = Path(__file__).parent / "data"

PATTERNS_FILE = "patterns.json"
DOCUMENTS_FILE = "documents.json"


class Corpus(NamedTuple):
    patterns: list[Pattern]
    best_practices: list[BestPracticeDoc]
    module_structures: list[ModuleStructureDoc]


def _resolve(corpus_dir: Optional[Path], file_name: str) -> Path:
    if corpus_dir is not None:
        candidate = corpus_dir / file_name
        if candidate.is_file():
            return candidate
        logger.warning("corpus_file_missing", path=str(candidate), fallback="default")
    return DEFAULT_CORPUS_DIR / file_name


def _parse_entries(model: type[BaseModel], entries: list, source: Path) -> list:
    """Validate each raw entry, skipping the ones that don't fit the model."""
    parsed = []
    for index, entry in enumerate(entries):
        try:
            parsed.append(model.model_validate(entry))
        except ValidationError as e:
            logger.warning(
                "corpus_entry_skipped",
                source=str(source),
                index=index,
                model=model.__name__,
                errors=e.error_count(),
            )
    return parsed


def load_corpus(corpus_dir: Optional[Union[str, Path]] = None) -> Corpus:
    """Load the pattern and document corpus.

    Args:
        corpus_dir: Directory holding patterns.json and documents.json.
            None loads the packaged default corpus.

    Returns:
        Corpus with every entry that validated

    Raises:
        json.JSONDecodeError: if a corpus file is not valid JSON
    """
    directory = Path(corpus_dir) if corpus_dir is not None else None

    patterns_path = _resolve(directory, PATTERNS_FILE)
    raw_patterns = json.loads(patterns_path.read_text(encoding="utf-8"))

    documents_path = _resolve(directory, DOCUMENTS_FILE)
    raw_documents = json.loads(documents_path.read_text(encoding="utf-8"))

    corpus = Corpus(
        patterns=_parse_entries(Pattern, raw_patterns, patterns_path),
        best_practices=_parse_entries(
            BestPracticeDoc, raw_documents.get("best_practices", []), documents_path
        ),
        module_structures=_parse_entries(
            ModuleStructureDoc, raw_documents.get("module_structures", []), documents_path
        ),
    )

    logger.info(
        "corpus_loaded",
        patterns=len(corpus.patterns),
        best_practices=len(corpus.best_practices),
        module_structures=len(corpus.module_structures),
        source=str(directory) if directory else "default",
    )
    return corpus
