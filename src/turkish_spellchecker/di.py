"""Dependency injection configuration for the Turkish Spell Checker Service using Dishka."""

from __future__ import annotations

from typing import Any

from dishka import Provider, Scope, provide
from prometheus_client import REGISTRY, CollectorRegistry
from quart import g, request

from turkish_spellchecker.config import Settings, settings
from turkish_spellchecker.error_handling import SpellCheckerError
from turkish_spellchecker.error_handling.correlation import (
    CorrelationContext,
    extract_correlation_context_from_request,
)
from turkish_spellchecker.metrics import METRICS
from turkish_spellchecker.protocols import SpellCheckerProtocol
from turkish_spellchecker.spell_checker_factory import create_spell_checker


class CoreInfrastructureProvider(Provider):
    """Provider for core infrastructure dependencies (settings, metrics, correlation context)."""

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide service settings."""
        return settings

    @provide(scope=Scope.APP)
    def provide_metrics_registry(self) -> CollectorRegistry:
        """Provide the global Prometheus metrics registry shared across collectors."""
        return REGISTRY

    @provide(scope=Scope.APP)
    def provide_metrics(self) -> dict[str, Any]:
        """Provide shared Prometheus metrics dictionary."""
        return METRICS

    @provide(scope=Scope.REQUEST)
    def provide_correlation_context(self) -> CorrelationContext:
        """Provide correlation context set by middleware, or extract it from the request."""
        ctx = getattr(g, "correlation_context", None)
        if isinstance(ctx, CorrelationContext):
            return ctx

        return extract_correlation_context_from_request(request)


class SpellCheckerProvider(Provider):
    """Provider for the spell checker, built once per application."""

    @provide(scope=Scope.APP)
    def provide_spell_checker(self, settings: Settings) -> SpellCheckerProtocol:
        """Provide the spell checker; a failed construction aborts startup."""
        result = create_spell_checker(settings)
        if result.is_err:
            raise SpellCheckerError(result.error)
        return result.value
