"""Tests for the Result[T, E] type."""

import pytest

from turkish_spellchecker.error_handling import ErrorCode, create_error_detail_with_context
from turkish_spellchecker.result import Result


class TestResultOk:
    """Tests for Result.ok() success path."""

    def test_ok_creates_success_result(self) -> None:
        result: Result[list[str], str] = Result.ok(["okul", "okulu"])

        assert result.is_ok
        assert not result.is_err
        assert result.value == ["okul", "okulu"]

    def test_empty_value_is_still_success(self) -> None:
        """An empty suggestion list is a valid success value."""
        result: Result[list[str], str] = Result.ok([])

        assert result.is_ok
        assert result.value == []

    def test_ok_accessing_error_raises_value_error(self) -> None:
        result: Result[str, str] = Result.ok("okul")

        with pytest.raises(ValueError, match="Called error on Result.ok"):
            _ = result.error


class TestResultErr:
    """Tests for Result.err() error path."""

    def test_err_carries_error_detail(self) -> None:
        detail = create_error_detail_with_context(
            error_code=ErrorCode.INITIALIZATION_FAILED,
            message="lexicon missing",
            service="turkish-spellchecker",
            operation="create_spell_checker",
        )
        result: Result[str, object] = Result.err(detail)

        assert result.is_err
        assert not result.is_ok
        assert result.error is detail

    def test_err_accessing_value_raises_value_error(self) -> None:
        result: Result[str, str] = Result.err("error")

        with pytest.raises(ValueError, match="Called value on Result.err"):
            _ = result.value


def test_result_is_frozen() -> None:
    result: Result[str, str] = Result.ok("value")

    with pytest.raises(AttributeError):
        result._value = "changed"  # type: ignore[misc]
