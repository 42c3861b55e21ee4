"""Repository API — pattern templates, best practices, module structures, resources."""

from typing import Optional, Union

from fastapi import APIRouter, HTTPException, Query, Request

from tfadvisor.repository.documents import DocumentNotFoundError
from tfadvisor.repository.models import (
    BestPracticeDoc,
    CloudProvider,
    ComplexityLevel,
    ModuleStructureDoc,
    Pattern,
    PatternCategory,
    PatternFilter,
)
from tfadvisor.repository.patterns import PatternNotFoundError

router = APIRouter()


@router.get("/patterns", response_model=list[Pattern])
async def list_patterns(
    request: Request,
    category: Optional[PatternCategory] = None,
    provider: Optional[CloudProvider] = None,
    complexity: Optional[ComplexityLevel] = None,
    tags: list[str] = Query(default=[]),
    query: Optional[str] = None,
):
    """Patterns matching every given filter, ordered by id."""
    criteria = PatternFilter(
        category=category,
        provider=provider,
        complexity=complexity,
        tags=tags,
        query=query,
    )
    return request.app.state.pattern_repository.find(criteria)


@router.get("/patterns/{pattern_id}", response_model=Pattern)
async def get_pattern(pattern_id: str, request: Request):
    try:
        return request.app.state.pattern_repository.get(pattern_id)
    except PatternNotFoundError:
        raise HTTPException(status_code=404, detail=f"Pattern {pattern_id} not found")


@router.get("/best-practices", response_model=list[BestPracticeDoc])
async def list_best_practices(
    request: Request,
    topic: Optional[str] = None,
    category: Optional[str] = None,
    provider: Optional[str] = None,
    keywords: list[str] = Query(default=[]),
):
    return request.app.state.document_index.get_best_practices(
        topic=topic, category=category, provider=provider, keywords=keywords,
    )


@router.get("/module-structures", response_model=list[ModuleStructureDoc])
async def list_module_structures(
    request: Request,
    structure_type: Optional[str] = Query(default=None, alias="type"),
    provider: Optional[str] = None,
):
    return request.app.state.document_index.get_module_structures(
        structure_type=structure_type, provider=provider,
    )


@router.get("/resources", response_model=list[str])
async def list_resources(request: Request, prefix: str = ""):
    """URIs of every indexed document starting with ``prefix``."""
    return request.app.state.document_index.list_resources(prefix)


@router.get(
    "/resources/{uri:path}",
    response_model=Union[BestPracticeDoc, ModuleStructureDoc],
)
async def get_resource(uri: str, request: Request):
    try:
        return request.app.state.document_index.get_resource(uri)
    except DocumentNotFoundError:
        raise HTTPException(status_code=404, detail=f"Resource {uri} not found")
