"""Health and metrics routes for the Turkish Spell Checker Service."""

from __future__ import annotations

import time

from dishka import FromDishka
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, current_app, jsonify
from quart_dishka import inject

from turkish_spellchecker.config import Settings
from turkish_spellchecker.error_handling.correlation import CorrelationContext
from turkish_spellchecker.logging_utils import create_service_logger
from turkish_spellchecker.protocols import SpellCheckerProtocol

logger = create_service_logger("turkish_spellchecker.api.health")
health_bp = Blueprint("health_routes", __name__)

# Known-good word used to confirm the analyzer answers
_PROBE_WORD = "okul"


@health_bp.route("/healthz")
@inject
async def health_check(
    settings: FromDishka[Settings],
    corr: FromDishka[CorrelationContext],
    spell_checker: FromDishka[SpellCheckerProtocol],
) -> tuple[Response, int]:
    """Standardized health check endpoint with spell checker status."""
    checks = {"service_responsive": True, "spell_checker_ready": True}
    dependencies: dict[str, dict[str, object]] = {}

    probe_start = time.perf_counter()
    try:
        probe_ok = spell_checker.is_correct(_PROBE_WORD)
        dependencies["spell_checker"] = {
            "status": "healthy" if probe_ok else "degraded",
            "probe_word_accepted": probe_ok,
            "response_time_ms": round((time.perf_counter() - probe_start) * 1000, 2),
        }
        checks["spell_checker_ready"] = probe_ok
    except Exception as e:
        logger.warning(f"Spell checker health probe failed: {e}", correlation_id=corr.original)
        dependencies["spell_checker"] = {"status": "unhealthy", "error": str(e)}
        checks["spell_checker_ready"] = False

    overall_status = "healthy" if all(checks.values()) else "unhealthy"

    uptime_seconds = 0.0
    start_time = current_app.extensions.get("service_start_time")
    if start_time:
        uptime_seconds = time.time() - start_time

    health_response = {
        "service": settings.SERVICE_NAME,
        "status": overall_status,
        "message": f"Turkish Spell Checker Service is {overall_status}",
        "version": settings.VERSION,
        "uptime_seconds": uptime_seconds,
        "checks": checks,
        "dependencies": dependencies,
        "environment": settings.ENVIRONMENT.value,
        "correlation_id": corr.original,
    }

    status_code = 200 if overall_status == "healthy" else 503
    return jsonify(health_response), status_code


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    try:
        metrics_data = generate_latest(registry)
        return Response(metrics_data, content_type=CONTENT_TYPE_LATEST)
    except Exception as e:
        logger.error(f"Error generating metrics: {e}", exc_info=True)
        return Response("Error generating metrics", status=500)
