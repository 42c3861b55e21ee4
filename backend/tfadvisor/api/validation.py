"""Validation API — validate a bundle and synthesize improvements.

Handlers are plain ``def`` so FastAPI runs them in its thread pool; the
engine and synthesizer are shared and hold no per-call state.
"""

from fastapi import APIRouter, Depends, Request

import structlog

from tfadvisor.config import Settings, get_settings
from tfadvisor.models.requests import BundleRequest
from tfadvisor.models.responses import SuggestionResponse
from tfadvisor.validators.formatting import format_improvement_suggestions
from tfadvisor.validators.models import ConfigurationBundle, InvalidBundleError, ValidationReport

logger = structlog.get_logger()

router = APIRouter()


def _checked_bundle(files: dict[str, str], settings: Settings) -> ConfigurationBundle:
    """Apply the request-size limits, then build the bundle.

    Raises:
        InvalidBundleError: if the bundle is too large to analyze
    """
    if len(files) > settings.MAX_BUNDLE_FILES:
        raise InvalidBundleError(
            f"Bundle has {len(files)} files, limit is {settings.MAX_BUNDLE_FILES}"
        )
    for name, content in files.items():
        size = len(content.encode("utf-8"))
        if size > settings.MAX_FILE_SIZE_BYTES:
            raise InvalidBundleError(
                f"File '{name}' is {size} bytes, limit is {settings.MAX_FILE_SIZE_BYTES}"
            )
    return ConfigurationBundle(files)


@router.post("/validate", response_model=ValidationReport)
def validate_bundle(
    body: BundleRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """Run every rule set over the bundle."""
    bundle = _checked_bundle(body.files, settings)
    return request.app.state.validation_engine.validate(bundle)


@router.post("/suggest", response_model=SuggestionResponse)
def suggest_improvements(
    body: BundleRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """Scaffold missing files and annotate flagged ones."""
    bundle = _checked_bundle(body.files, settings)
    file_contents = request.app.state.improvement_synthesizer.suggest(bundle)
    return SuggestionResponse(
        file_contents=file_contents,
        formatted=format_improvement_suggestions(file_contents),
    )
