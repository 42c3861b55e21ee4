"""API response models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Literal


class SuggestionResponse(BaseModel):
    """Suggested file contents for a bundle."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    file_contents: dict[str, str] = Field(default_factory=dict)
    formatted: str = ""


class CorpusStats(BaseModel):
    """Size of the loaded pattern/document corpus."""

    patterns: int
    best_practices: int
    module_structures: int


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    rule_sets: list[str]
    corpus: CorpusStats
    authority_sources: list[str]
