"""Quart error handlers rendering SpellCheckerError as structured JSON."""

from __future__ import annotations

from quart import Quart, Response, jsonify

from turkish_spellchecker.error_handling.error_models import ErrorCode
from turkish_spellchecker.error_handling.spellchecker_error import SpellCheckerError
from turkish_spellchecker.logging_utils import create_service_logger

logger = create_service_logger("turkish_spellchecker.error_handling.quart")

_STATUS_BY_CODE: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.CONFIGURATION_ERROR: 503,
    ErrorCode.INITIALIZATION_FAILED: 503,
    ErrorCode.PROCESSING_ERROR: 500,
    ErrorCode.UNKNOWN_ERROR: 500,
}


def status_code_for(error_code: ErrorCode) -> int:
    return _STATUS_BY_CODE.get(error_code, 500)


def register_error_handlers(app: Quart) -> None:
    """Register handlers so route code can simply raise SpellCheckerError."""

    @app.errorhandler(SpellCheckerError)
    async def handle_spellchecker_error(error: SpellCheckerError) -> tuple[Response, int]:
        status = status_code_for(error.error_detail.error_code)
        logger.warning(
            f"Request failed with {error.error_code}: {error.error_detail.message}",
            correlation_id=error.correlation_id,
            operation=error.operation,
            status=status,
        )
        body = {"error": error.error_detail.model_dump(mode="json", exclude={"stack_trace"})}
        return jsonify(body), status
