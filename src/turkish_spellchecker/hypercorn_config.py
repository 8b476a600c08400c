"""Hypercorn settings module: ``--config python:turkish_spellchecker.hypercorn_config``."""

from __future__ import annotations

import os

from turkish_spellchecker.config import settings

bind = f"{settings.HOST}:{settings.HTTP_PORT}"
# Each worker loads its own lexicon and language model
workers = int(os.getenv("WEB_CONCURRENCY", 1))
worker_class = "asyncio"

loglevel = settings.LOG_LEVEL.lower()
accesslog = "-"
errorlog = "-"

graceful_timeout = int(os.getenv("GRACEFUL_TIMEOUT", 30))
keep_alive_timeout = int(os.getenv("KEEP_ALIVE_TIMEOUT", 5))
