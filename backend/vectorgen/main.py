"""FastAPI app factory."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vectorgen import __version__
from vectorgen.config import configure_logging, settings

load_dotenv()
configure_logging(settings.vectorgen_log_level)


def create_app() -> FastAPI:
    app = FastAPI(
        title="vectorgen",
        description="SVG and Android vector drawable to Jetpack Compose ImageVector compiler",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Importing the parser package registers both dialects
    import vectorgen.parser  # noqa: F401
    from vectorgen.api.router import api_router

    app.include_router(api_router)
    return app


app = create_app()
