"""
Factory functions that build an ErrorDetail and raise SpellCheckerError.

Both factories are typed NoReturn so callers can rely on control flow ending
at the call site.
"""

from __future__ import annotations

from typing import Any, NoReturn
from uuid import UUID

from turkish_spellchecker.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from turkish_spellchecker.error_handling.error_models import ErrorCode
from turkish_spellchecker.error_handling.spellchecker_error import SpellCheckerError


def raise_validation_error(
    service: str,
    operation: str,
    field: str,
    message: str,
    correlation_id: UUID | None = None,
    value: Any = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise a validation error for a single request field."""
    details = {"field": field, **additional_context}
    if value is not None:
        details["value"] = value
    error_detail = create_error_detail_with_context(
        error_code=ErrorCode.VALIDATION_ERROR,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details=details,
    )
    raise SpellCheckerError(error_detail)


def raise_processing_error(
    service: str,
    operation: str,
    message: str,
    correlation_id: UUID | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Raise an internal processing error."""
    error_detail = create_error_detail_with_context(
        error_code=ErrorCode.PROCESSING_ERROR,
        message=message,
        service=service,
        operation=operation,
        correlation_id=correlation_id,
        details=additional_context,
    )
    raise SpellCheckerError(error_detail)

