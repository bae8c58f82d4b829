"""
api/main.py — FastAPI entry point.

Lifespan:
  - Creates the stateless pipeline adapters (parser, evaluator) once
  - They are shared by every request through api/dependencies.py
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from adapters.evaluator.ast_evaluator import ASTEvaluator
from adapters.expression_parser.span_split_parser import SpanSplitParser
from api.routers import evaluate
from api.schemas import HealthResponse
from config import Settings

logger = logging.getLogger("expr_calc.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.parser = SpanSplitParser()
    app.state.evaluator = ASTEvaluator()
    logger.info("ExprCalc API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    return app


app = create_app()
