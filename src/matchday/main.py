"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from matchday.api.fixtures import router as fixtures_router
from matchday.api.standings import router as standings_router
from matchday.config import Settings
from matchday.core.errors import TournamentError

logger = logging.getLogger(__name__)


async def _tournament_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Bad teams or scheduling options are the caller's to fix: answer 422."""
    logger.info("request_rejected path=%s error=%s", request.url.path, type(exc).__name__)
    return JSONResponse(
        status_code=422,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the Matchday FastAPI application."""
    settings = settings or Settings()

    logging.basicConfig(
        level=getattr(logging, settings.matchday_log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title="Matchday",
        version="0.1.0",
        description="Round-robin fixture generation and league standings",
        docs_url="/docs" if settings.matchday_env != "production" else None,
    )
    app.state.settings = settings
    app.add_exception_handler(TournamentError, _tournament_error_handler)

    # API routers
    app.include_router(fixtures_router)
    app.include_router(standings_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "env": settings.matchday_env}

    return app


app = create_app()
