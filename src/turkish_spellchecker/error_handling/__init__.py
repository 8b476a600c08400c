"""Structured error handling for the Turkish spell checker."""

from .error_detail_factory import create_error_detail_with_context
from .error_models import ErrorCode, ErrorDetail
from .factories import raise_processing_error, raise_validation_error
from .spellchecker_error import SpellCheckerError

__all__ = [
    "ErrorCode",
    "ErrorDetail",
    "SpellCheckerError",
    "create_error_detail_with_context",
    "raise_processing_error",
    "raise_validation_error",
]
