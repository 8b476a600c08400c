"""Tests for create_spell_checker's Result-based construction."""

from __future__ import annotations

from typing import Any

from turkish_spellchecker.config import Settings
from turkish_spellchecker.error_handling import ErrorCode
from turkish_spellchecker.implementations.spell_checker_impl import DefaultSpellChecker
from turkish_spellchecker.protocols import SpellCheckerBackend
from turkish_spellchecker.spell_checker_factory import create_spell_checker

from .mocks import FakeBackendSpec, create_fake_backend


class RecordingBuilder:
    def __init__(self, backend: SpellCheckerBackend) -> None:
        self.backend = backend
        self.calls: list[tuple[Settings, Any]] = []

    def __call__(self, settings: Settings, lexicon: Any) -> SpellCheckerBackend:
        self.calls.append((settings, lexicon))
        return self.backend


def test_successful_build_returns_ready_checker() -> None:
    settings = Settings()
    builder = RecordingBuilder(create_fake_backend(FakeBackendSpec(known_words={"okul"})))

    result = create_spell_checker(settings, backend_builder=builder)

    assert result.is_ok
    checker = result.value
    assert isinstance(checker, DefaultSpellChecker)
    assert checker.settings is settings
    assert checker.is_correct("okul")
    assert not checker.is_correct("okl")


def test_custom_lexicon_is_passed_to_builder() -> None:
    settings = Settings()
    lexicon = object()
    builder = RecordingBuilder(create_fake_backend())

    create_spell_checker(settings, lexicon, backend_builder=builder)

    assert builder.calls == [(settings, lexicon)]


def test_backend_failure_is_reported_as_initialization_error() -> None:
    def failing_builder(settings: Settings, lexicon: Any) -> SpellCheckerBackend:
        raise OSError("lexicon resource missing")

    result = create_spell_checker(Settings(), backend_builder=failing_builder)

    assert result.is_err
    error = result.error
    assert error.error_code == ErrorCode.INITIALIZATION_FAILED
    assert "lexicon resource missing" in error.message
    assert error.operation == "create_spell_checker"
    assert error.service == "turkish-spellchecker"
    assert error.details == {
        "component": "spell_checker_backend",
        "exception_type": "OSError",
        "custom_lexicon": False,
    }


def test_failure_with_custom_lexicon_is_flagged() -> None:
    def failing_builder(settings: Settings, lexicon: Any) -> SpellCheckerBackend:
        raise ValueError("bad lexicon")

    result = create_spell_checker(Settings(), object(), backend_builder=failing_builder)

    assert result.is_err
    assert result.error.details["custom_lexicon"] is True
    assert result.error.details["exception_type"] == "ValueError"


def test_inconsistent_split_bounds_are_a_configuration_error() -> None:
    builder = RecordingBuilder(create_fake_backend())

    result = create_spell_checker(
        Settings(SPLIT_MIN_LENGTH=10, SPLIT_MAX_LENGTH=5), backend_builder=builder
    )

    assert result.is_err
    assert result.error.error_code == ErrorCode.CONFIGURATION_ERROR
    assert result.error.details["config_key"] == "SPLIT_MIN_LENGTH"
    assert builder.calls == []
