"""FastAPI adapter for the metrics endpoint."""

import logging
from collections.abc import Awaitable, Callable

from fastapi import APIRouter, FastAPI, Request, Response

from nginx_log_exporter.core.encoding.prometheus import CONTENT_TYPE, encode_error
from nginx_log_exporter.core.errors import ScrapeError
from nginx_log_exporter.exporter import Exporter

logger = logging.getLogger(__name__)

POWERED_BY = "nginx-prometheus-exporter"


def create_metrics_router(exporter: Exporter) -> APIRouter:
    """Create a FastAPI router with the /metrics endpoint.

    Args:
        exporter: Exporter scraped on every request.

    Returns:
        APIRouter with /metrics configured.
    """
    router = APIRouter()

    # Sync endpoint: scrapes do blocking file I/O and run on the threadpool.
    @router.get("/metrics")
    def get_metrics() -> Response:
        """Return request duration histograms in Prometheus text format."""
        try:
            body = exporter.scrape()
        except ScrapeError as e:
            logger.error("Error reading log entries: %s", e)
            return Response(
                content=encode_error(str(e)),
                status_code=500,
                media_type=CONTENT_TYPE,
            )
        return Response(content=body, media_type=CONTENT_TYPE)

    return router


def create_app(exporter: Exporter) -> FastAPI:
    """Create the exporter application.

    Every response carries an X-Powered-By header.
    """
    app = FastAPI(title="Nginx Prometheus Exporter")
    app.include_router(create_metrics_router(exporter))

    @app.middleware("http")
    async def powered_by_header(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        response.headers["X-Powered-By"] = POWERED_BY
        return response

    return app
