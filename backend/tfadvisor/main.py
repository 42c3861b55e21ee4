"""TF Advisor — Terraform best-practice validation and improvement service.

Main FastAPI application with lifespan management, CORS, and global error handling.
"""

import logging
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tfadvisor.config import get_settings
from tfadvisor.api.router import api_router
from tfadvisor.repository import DocumentIndex, PatternRepository, load_corpus
from tfadvisor.suggestions import ImprovementSynthesizer
from tfadvisor.validators import ValidationEngine

# Configure structured logging
structlog.configure(
    processors=[
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.dev.ConsoleRenderer() if get_settings().DEBUG else structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(get_settings().LOG_LEVEL.upper())
    ),
)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    settings = get_settings()

    # ── Startup ──
    logger.info("app_starting", debug=settings.DEBUG)

    # Rule set is assembled once and shared read-only by every request
    app.state.validation_engine = ValidationEngine()
    app.state.improvement_synthesizer = ImprovementSynthesizer(app.state.validation_engine)

    corpus = load_corpus(settings.CORPUS_PATH)
    app.state.pattern_repository = PatternRepository(corpus.patterns)
    app.state.document_index = DocumentIndex(
        best_practices=corpus.best_practices,
        module_structures=corpus.module_structures,
        authority_sources=settings.AUTHORITY_SOURCES,
    )

    logger.info("app_started", rule_sets=app.state.validation_engine.rule_set_names)

    yield

    # ── Shutdown ──
    logger.info("app_stopped")


# ── Create Application ──

app = FastAPI(
    title="TF Advisor",
    description=(
        "Rule-based validation of Terraform configuration bundles, "
        "file-level improvement suggestions, and a searchable corpus "
        "of module patterns and best-practice guidance."
    ),
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ── Middleware ──

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Global Exception Handlers ──

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch-all error handler for unhandled exceptions."""
    logger.error(
        "unhandled_exception",
        path=request.url.path,
        method=request.method,
        error=str(exc),
        error_type=type(exc).__name__,
    )
    return JSONResponse(
        status_code=500,
        content={
            "error": "internal_server_error",
            "message": "An unexpected error occurred. Please try again.",
        },
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Handle input contract violations (malformed or oversized bundles)."""
    return JSONResponse(
        status_code=422,
        content={"error": "validation_error", "message": str(exc)},
    )


@app.exception_handler(LookupError)
async def lookup_error_handler(request: Request, exc: LookupError):
    """Handle repository misses that escape a route."""
    return JSONResponse(
        status_code=404,
        content={"error": "not_found", "message": str(exc)},
    )


# ── Routes ──

app.include_router(api_router, prefix="/api/v1")


# ── Root endpoint ──

@app.get("/")
async def root():
    """Root endpoint — API info."""
    return {
        "name": "TF Advisor",
        "version": "1.0.0",
        "description": "Terraform best-practice validation and improvement suggestions",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
