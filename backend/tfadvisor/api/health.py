"""Health check endpoint."""

import time
from fastapi import APIRouter, Request

from tfadvisor.models.responses import CorpusStats, HealthResponse

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Engine and corpus status. An empty corpus degrades, never fails, the service."""
    state = request.app.state
    corpus = CorpusStats(
        patterns=len(state.pattern_repository),
        best_practices=state.document_index.best_practice_count,
        module_structures=state.document_index.module_structure_count,
    )

    status = "healthy" if corpus.patterns and corpus.best_practices else "degraded"

    return HealthResponse(
        status=status,
        uptime_seconds=round(time.time() - _start_time, 2),
        rule_sets=state.validation_engine.rule_set_names,
        corpus=corpus,
        authority_sources=list(state.document_index.authority_sources),
    )
