"""
Turkish Spell Checker Service Application.

Exposes word checking and suggestion endpoints over HTTP using Quart.
"""

from __future__ import annotations

import time

from dishka import AsyncContainer

from turkish_spellchecker.api.health_routes import health_bp
from turkish_spellchecker.api.spellcheck_routes import spellcheck_bp
from turkish_spellchecker.config import settings
from turkish_spellchecker.error_handling.correlation import setup_correlation_middleware
from turkish_spellchecker.error_handling.quart import register_error_handlers
from turkish_spellchecker.logging_utils import configure_service_logging, create_service_logger
from turkish_spellchecker.metrics import METRICS, setup_metrics_middleware
from turkish_spellchecker.quart_app import SpellCheckerApp
from turkish_spellchecker.startup_setup import (
    attach_container,
    create_container,
    initialize_services,
    shutdown_services,
)

logger = create_service_logger("turkish_spellchecker.app")


def create_app(container: AsyncContainer | None = None) -> SpellCheckerApp:
    """
    Build the Quart application.

    Args:
        container: DI container to use; the production container when None

    Returns:
        Configured SpellCheckerApp
    """
    app = SpellCheckerApp(__name__)
    attach_container(app, container or create_container())
    register_error_handlers(app)
    setup_correlation_middleware(app)
    setup_metrics_middleware(app, METRICS)

    app.extensions["metrics"] = METRICS
    app.extensions["service_start_time"] = time.time()

    @app.before_serving
    async def startup() -> None:
        await initialize_services(app)
        logger.info("Turkish Spell Checker Service startup completed successfully")

    @app.after_serving
    async def shutdown() -> None:
        await shutdown_services(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(spellcheck_bp)
    return app


def build_service_app() -> SpellCheckerApp:
    """Entry point for hypercorn: configure logging, then build the app."""
    configure_service_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level=settings.LOG_LEVEL,
    )
    return create_app()
