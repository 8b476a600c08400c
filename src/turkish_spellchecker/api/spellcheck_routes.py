"""Spell check routes for the Turkish Spell Checker Service."""

from __future__ import annotations

import time
from typing import Any, TypeVar

from dishka import FromDishka
from pydantic import BaseModel, ValidationError
from quart import Blueprint, request
from quart_dishka import inject

from turkish_spellchecker.api_models import (
    SpellcheckRequest,
    SpellcheckResponse,
    SuggestionsResponse,
    WordCheckResponse,
    WordRequest,
    WordResult,
)
from turkish_spellchecker.config import Settings
from turkish_spellchecker.error_handling import raise_processing_error, raise_validation_error
from turkish_spellchecker.error_handling.correlation import CorrelationContext
from turkish_spellchecker.logging_utils import create_service_logger
from turkish_spellchecker.protocols import SpellCheckerProtocol

logger = create_service_logger("turkish_spellchecker.api.spellcheck")
spellcheck_bp = Blueprint("spellcheck_routes", __name__)

SERVICE = "turkish-spellchecker"

RequestModel = TypeVar("RequestModel", bound=BaseModel)


async def _parse_body(
    model: type[RequestModel],
    operation: str,
    endpoint: str,
    corr: CorrelationContext,
    metrics: dict[str, Any],
) -> RequestModel:
    request_data = await request.get_json(silent=True)
    if not request_data:
        metrics["api_errors_total"].labels(endpoint=endpoint, error_type="validation_error").inc()
        raise_validation_error(
            service=SERVICE,
            operation=operation,
            field="request_body",
            message="Request body must be a non-empty JSON object",
            correlation_id=corr.uuid,
        )

    try:
        return model.model_validate(request_data)
    except ValidationError as e:
        logger.warning(f"{operation} request validation failed: {e}", correlation_id=corr.original)
        metrics["api_errors_total"].labels(endpoint=endpoint, error_type="validation_error").inc()
        raise_validation_error(
            service=SERVICE,
            operation=operation,
            field="request_format",
            message=f"Invalid request format: {e.errors(include_url=False)}",
            correlation_id=corr.uuid,
        )


def _record_word(metrics: dict[str, Any], correct: bool) -> None:
    metrics["words_checked_total"].labels(result="correct" if correct else "incorrect").inc()


@spellcheck_bp.route("/v1/check", methods=["POST"])
@inject
async def check_word(
    corr: FromDishka[CorrelationContext],
    spell_checker: FromDishka[SpellCheckerProtocol],
    metrics: FromDishka[dict[str, Any]],
) -> tuple[dict[str, Any], int]:
    """Check a single word."""
    word_request = await _parse_body(WordRequest, "check_word", "/v1/check", corr, metrics)

    try:
        correct = spell_checker.is_correct(word_request.word)
    except Exception as e:
        logger.error(f"Word check failed: {e}", correlation_id=corr.original, exc_info=True)
        metrics["api_errors_total"].labels(
            endpoint="/v1/check", error_type="processing_error"
        ).inc()
        raise_processing_error(
            service=SERVICE,
            operation="check_word",
            message=f"Word check failed: {e}",
            correlation_id=corr.uuid,
        )

    _record_word(metrics, correct)
    return WordCheckResponse(word=word_request.word, correct=correct).model_dump(), 200


@spellcheck_bp.route("/v1/suggestions", methods=["POST"])
@inject
async def suggest_word(
    corr: FromDishka[CorrelationContext],
    spell_checker: FromDishka[SpellCheckerProtocol],
    metrics: FromDishka[dict[str, Any]],
) -> tuple[dict[str, Any], int]:
    """Return suggestions for a single word."""
    word_request = await _parse_body(
        WordRequest, "suggest_word", "/v1/suggestions", corr, metrics
    )

    start = time.perf_counter()
    try:
        suggestions = spell_checker.get_suggestions(word_request.word)
    except Exception as e:
        logger.error(
            f"Suggestion generation failed: {e}", correlation_id=corr.original, exc_info=True
        )
        metrics["api_errors_total"].labels(
            endpoint="/v1/suggestions", error_type="processing_error"
        ).inc()
        raise_processing_error(
            service=SERVICE,
            operation="suggest_word",
            message=f"Suggestion generation failed: {e}",
            correlation_id=corr.uuid,
        )
    metrics["suggestion_duration_seconds"].observe(time.perf_counter() - start)

    return SuggestionsResponse(word=word_request.word, suggestions=suggestions).model_dump(), 200


@spellcheck_bp.route("/v1/spellcheck", methods=["POST"])
@inject
async def spellcheck_words(
    corr: FromDishka[CorrelationContext],
    spell_checker: FromDishka[SpellCheckerProtocol],
    settings: FromDishka[Settings],
    metrics: FromDishka[dict[str, Any]],
) -> tuple[dict[str, Any], int]:
    """
    Check a batch of words and attach suggestions to the misspelled ones.

    Returns:
        Tuple of (response_dict, status_code)

    Raises:
        SpellCheckerError: For validation errors and processing failures
    """
    request_start = time.perf_counter()
    spellcheck_request = await _parse_body(
        SpellcheckRequest, "spellcheck_words", "/v1/spellcheck", corr, metrics
    )

    word_count = len(spellcheck_request.words)
    if word_count > settings.MAX_WORDS_PER_REQUEST:
        metrics["api_errors_total"].labels(
            endpoint="/v1/spellcheck", error_type="validation_error"
        ).inc()
        raise_validation_error(
            service=SERVICE,
            operation="spellcheck_words",
            field="words",
            message=f"At most {settings.MAX_WORDS_PER_REQUEST} words are accepted per request",
            correlation_id=corr.uuid,
            value=word_count,
        )

    logger.info(f"Starting spell check for {word_count} words", correlation_id=corr.original)

    results: list[WordResult] = []
    try:
        for word in spellcheck_request.words:
            correct = spell_checker.is_correct(word)
            _record_word(metrics, correct)
            if correct:
                results.append(WordResult(word=word, correct=True))
                continue

            suggestion_start = time.perf_counter()
            suggestions = spell_checker.get_suggestions(word)
            metrics["suggestion_duration_seconds"].observe(time.perf_counter() - suggestion_start)
            results.append(WordResult(word=word, correct=False, suggestions=suggestions))
    except Exception as e:
        logger.error(f"Spell check failed: {e}", correlation_id=corr.original, exc_info=True)
        metrics["api_errors_total"].labels(
            endpoint="/v1/spellcheck", error_type="processing_error"
        ).inc()
        raise_processing_error(
            service=SERVICE,
            operation="spellcheck_words",
            message=f"Spell check failed: {e}",
            correlation_id=corr.uuid,
            words_processed=len(results),
        )

    misspelled_count = sum(1 for result in results if not result.correct)
    processing_time_ms = max(1, int((time.perf_counter() - request_start) * 1000))
    logger.info(
        f"Spell check completed: {misspelled_count}/{word_count} misspelled "
        f"in {processing_time_ms}ms",
        correlation_id=corr.original,
    )

    response = SpellcheckResponse(
        results=results,
        misspelled_count=misspelled_count,
        processing_time_ms=processing_time_ms,
    )
    return response.model_dump(), 200
