"""Core exception carrying a structured ErrorDetail."""

from __future__ import annotations

from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

from turkish_spellchecker.error_handling.error_models import ErrorDetail


class SpellCheckerError(Exception):
    """Exception raised for all structured spell checker failures.

    The ErrorDetail is recorded on the active OpenTelemetry span, if any,
    when the exception is created.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail
        self._record_to_span()

    def _record_to_span(self) -> None:
        span = trace.get_current_span()
        if not span or not span.is_recording():
            return

        span.record_exception(self)
        span.set_status(Status(StatusCode.ERROR, self.error_detail.message))
        span.set_attribute("error", True)
        span.set_attribute("error.code", self.error_detail.error_code.value)
        span.set_attribute("error.message", self.error_detail.message)
        span.set_attribute("error.service", self.error_detail.service)
        span.set_attribute("error.operation", self.error_detail.operation)
        span.set_attribute("correlation_id", str(self.error_detail.correlation_id))

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def correlation_id(self) -> str:
        return str(self.error_detail.correlation_id)

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": str(self),
            "error_detail": self.error_detail.model_dump(mode="json"),
        }

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.error_detail.message}"

    def __repr__(self) -> str:
        return (
            f"SpellCheckerError(error_code={self.error_code!r}, "
            f"message={self.error_detail.message!r}, service={self.service!r})"
        )
