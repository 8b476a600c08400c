"""Shared Prometheus metrics for the Turkish Spell Checker Service.

`METRICS` holds every collector and is created once at import time; it is
injected via Dishka so routes and middleware share the same collectors and
avoid duplicated registration errors.
"""

from __future__ import annotations

import time
from typing import Any

from prometheus_client import REGISTRY, Counter, Histogram
from quart import Quart, Response, g, request


def _create_metrics() -> dict[str, Any]:
    """Create Prometheus metric collectors for the spell checker service."""

    return {
        # HTTP request metrics
        "request_count": Counter(
            "turkish_spellchecker_http_requests_total",
            "Total number of HTTP requests",
            ["method", "endpoint", "status"],
            registry=REGISTRY,
        ),
        "request_duration": Histogram(
            "turkish_spellchecker_http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            registry=REGISTRY,
        ),
        # Spell checking metrics
        "words_checked_total": Counter(
            "turkish_spellchecker_words_checked_total",
            "Total words checked, by outcome",
            ["result"],
            registry=REGISTRY,
        ),
        "suggestion_duration_seconds": Histogram(
            "turkish_spellchecker_suggestion_duration_seconds",
            "Time spent generating suggestions for a single word",
            registry=REGISTRY,
        ),
        "api_errors_total": Counter(
            "turkish_spellchecker_api_errors_total",
            "Total API errors by endpoint and error type",
            ["endpoint", "error_type"],
            registry=REGISTRY,
        ),
    }


# Singleton instance shared across the application
METRICS: dict[str, Any] = _create_metrics()


def setup_metrics_middleware(app: Quart, metrics: dict[str, Any]) -> None:
    """Record request count and duration for every request except /metrics."""

    @app.before_request
    async def _start_timer() -> None:
        g.request_start_time = time.perf_counter()

    @app.after_request
    async def _record_request(response: Response) -> Response:
        start = getattr(g, "request_start_time", None)
        endpoint = request.url_rule.rule if request.url_rule else "unknown"
        if start is None or endpoint == "/metrics":
            return response

        metrics["request_count"].labels(
            method=request.method, endpoint=endpoint, status=str(response.status_code)
        ).inc()
        metrics["request_duration"].labels(method=request.method, endpoint=endpoint).observe(
            time.perf_counter() - start
        )
        return response
