"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.engine.pipeline import register_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.concept_connector_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Concept Connector",
        description="Concept map layout engine: circular placement and label overflow resolution",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all layer modules to trigger registration
    register_transforms()

    from app.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
