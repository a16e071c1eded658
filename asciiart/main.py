"""FastAPI app factory."""

from __future__ import annotations

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from asciiart import __version__
from asciiart.config import settings
from asciiart.logging_setup import configure_logging

load_dotenv()
configure_logging(settings)


def create_app() -> FastAPI:
    app = FastAPI(
        title="asciiart",
        description="Image to ASCII art conversion",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    from asciiart.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
