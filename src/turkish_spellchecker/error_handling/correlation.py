"""Correlation context extraction for HTTP requests."""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Literal
from uuid import UUID

from quart import Quart, Request, Response, g, request

from turkish_spellchecker.logging_utils import bind_request_context

CORRELATION_HEADER = "X-Correlation-ID"


@dataclass(frozen=True)
class CorrelationContext:
    """Correlation ID as received (``original``) and in canonical UUID form."""

    original: str
    uuid: UUID
    source: Literal["header", "query", "generated"]


def _to_uuid(value: str) -> UUID:
    try:
        return UUID(value)
    except ValueError:
        # Non-UUID IDs from upstream callers map to a stable UUID
        return uuid.uuid5(uuid.NAMESPACE_OID, value)


def extract_correlation_context_from_request(request: Request) -> CorrelationContext:
    """Read the correlation ID from the header, then the query string, else generate one."""
    header_value = request.headers.get(CORRELATION_HEADER)
    if header_value:
        return CorrelationContext(
            original=header_value, uuid=_to_uuid(header_value), source="header"
        )

    query_value = request.args.get("correlation_id")
    if query_value:
        return CorrelationContext(original=query_value, uuid=_to_uuid(query_value), source="query")

    generated = uuid.uuid4()
    return CorrelationContext(original=str(generated), uuid=generated, source="generated")


def setup_correlation_middleware(app: Quart) -> None:
    """Attach a correlation context to every request and echo it on the response."""

    @app.before_request
    async def _bind_correlation_context() -> None:
        corr = extract_correlation_context_from_request(request)
        g.correlation_context = corr
        bind_request_context(corr.original, path=request.path, method=request.method)

    @app.after_request
    async def _echo_correlation_id(response: Response) -> Response:
        corr = getattr(g, "correlation_context", None)
        if isinstance(corr, CorrelationContext):
            response.headers[CORRELATION_HEADER] = corr.original
        return response
