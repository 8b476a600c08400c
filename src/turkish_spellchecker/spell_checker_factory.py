"""Construction of spell checkers as an explicit, fallible step."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from turkish_spellchecker.config import Settings
from turkish_spellchecker.error_handling import (
    ErrorCode,
    ErrorDetail,
    create_error_detail_with_context,
)
from turkish_spellchecker.implementations.spell_checker_impl import DefaultSpellChecker
from turkish_spellchecker.logging_utils import create_service_logger
from turkish_spellchecker.result import Result

if TYPE_CHECKING:  # pragma: no cover - imported for static typing only
    from turkish_spellchecker.protocols import SpellCheckerBackend

logger = create_service_logger("turkish_spellchecker.spell_checker_factory")

BackendBuilder = Callable[[Settings, Any], "SpellCheckerBackend"]


def _default_backend_builder(settings: Settings, lexicon: Any) -> SpellCheckerBackend:
    # zemberek is only imported when the default backend is requested
    from turkish_spellchecker.implementations.zemberek_backend import build_zemberek_backend

    return build_zemberek_backend(settings, lexicon)


def create_spell_checker(
    settings: Settings,
    lexicon: Any = None,
    backend_builder: BackendBuilder | None = None,
) -> Result[DefaultSpellChecker, ErrorDetail]:
    """
    Build a spell checker, reporting construction failures instead of raising.

    Args:
        settings: Service settings
        lexicon: Optional custom root lexicon passed to the backend builder
        backend_builder: Builds the NLP backend; zemberek-python when None

    Returns:
        Result with a ready DefaultSpellChecker, or a CONFIGURATION_ERROR /
        INITIALIZATION_FAILED ErrorDetail
    """
    if settings.SPLIT_MIN_LENGTH > settings.SPLIT_MAX_LENGTH:
        logger.error(
            "Invalid split length bounds",
            split_min_length=settings.SPLIT_MIN_LENGTH,
            split_max_length=settings.SPLIT_MAX_LENGTH,
        )
        return Result.err(
            create_error_detail_with_context(
                error_code=ErrorCode.CONFIGURATION_ERROR,
                message="SPLIT_MIN_LENGTH must not exceed SPLIT_MAX_LENGTH",
                service=settings.SERVICE_NAME,
                operation="create_spell_checker",
                details={
                    "config_key": "SPLIT_MIN_LENGTH",
                    "split_min_length": settings.SPLIT_MIN_LENGTH,
                    "split_max_length": settings.SPLIT_MAX_LENGTH,
                },
                capture_stack=False,
            )
        )

    builder = backend_builder or _default_backend_builder
    try:
        backend = builder(settings, lexicon)
    except Exception as e:
        logger.error(f"Failed to build spell checker backend: {e}", exc_info=True)
        return Result.err(
            create_error_detail_with_context(
                error_code=ErrorCode.INITIALIZATION_FAILED,
                message=f"Spell checker backend could not be initialized: {e}",
                service=settings.SERVICE_NAME,
                operation="create_spell_checker",
                details={
                    "component": "spell_checker_backend",
                    "exception_type": type(e).__name__,
                    "custom_lexicon": lexicon is not None,
                },
            )
        )

    logger.info("Spell checker created", service=settings.SERVICE_NAME)
    return Result.ok(DefaultSpellChecker(backend, settings))
