"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from codeblocks import __version__
from codeblocks.config import settings

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.codeblocks_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="codeblocks",
        description="Code-editor-like block skeletons from raster images",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Importing the engine registers the built-in style policies
    import codeblocks.engine  # noqa: F401

    from codeblocks.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
