"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from rectiling import __version__
from rectiling.config import settings
from rectiling.engine.errors import TilingError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.rectiling_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def tiling_error_handler(request: Request, exc: TilingError) -> JSONResponse:
    logger.info("%s on %s: %s", exc.kind, request.url.path, exc)
    return JSONResponse(status_code=422, content={"error": exc.kind, "detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Rectiling",
        description="Rectangular tiling generator — seed rectangles in, positioned tiling out",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TilingError, tiling_error_handler)

    from rectiling.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
