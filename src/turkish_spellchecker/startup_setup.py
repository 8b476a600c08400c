"""Startup and shutdown logic for the Turkish Spell Checker Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from quart_dishka import QuartDishka

from turkish_spellchecker.di import CoreInfrastructureProvider, SpellCheckerProvider
from turkish_spellchecker.logging_utils import create_service_logger
from turkish_spellchecker.protocols import SpellCheckerProtocol
from turkish_spellchecker.quart_app import SpellCheckerApp

logger = create_service_logger("turkish_spellchecker.startup")


def create_container() -> AsyncContainer:
    return make_async_container(CoreInfrastructureProvider(), SpellCheckerProvider())


def attach_container(app: SpellCheckerApp, container: AsyncContainer) -> None:
    """Wire the DI container into the app and quart-dishka."""
    app.container = container
    QuartDishka(app=app, container=container)


async def initialize_services(app: SpellCheckerApp) -> None:
    """Build the spell checker eagerly so lexicon failures stop startup."""
    try:
        await app.container.get(SpellCheckerProtocol)
        logger.info("Spell checker loaded and registered in DI container")
    except Exception as e:
        logger.critical(f"Failed to initialize Turkish Spell Checker Service: {e}", exc_info=True)
        raise


async def shutdown_services(app: SpellCheckerApp) -> None:
    """Close the DI container and everything it finalizes."""
    try:
        await app.container.close()
        logger.info("Turkish Spell Checker Service shutdown completed")
    except Exception as e:
        logger.error(f"Error during service shutdown: {e}", exc_info=True)
