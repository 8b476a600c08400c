"""
Type-safe Quart application class for the spell checker service.

Provides typed attributes for the app-level infrastructure instead of
setattr()/getattr() on a plain Quart instance.
"""

from __future__ import annotations

from typing import Any

from dishka import AsyncContainer
from quart import Quart


class SpellCheckerApp(Quart):
    """Quart application with a guaranteed DI container.

    GUARANTEED INFRASTRUCTURE:
        container: Dishka async container, set by ``create_app``
        extensions: Standard Quart extensions dictionary (metrics, start time)
    """

    container: AsyncContainer
    extensions: dict[str, Any]

    def __init__(self, import_name: str, *args: Any, **kwargs: Any) -> None:
        super().__init__(import_name, *args, **kwargs)

        # container MUST be set by create_app()
        self.extensions = {}
