"""POST /api/layout — full layout computation for one container size."""

from __future__ import annotations

import time

from fastapi import APIRouter

from app.engine.pipeline import create_pipeline
from app.graph.loader import load_connections
from app.models.requests import LayoutRequest
from app.models.responses import LayoutResponse

router = APIRouter()


@router.post("/layout", response_model=LayoutResponse)
async def layout(req: LayoutRequest) -> LayoutResponse:
    start = time.perf_counter()

    pipeline = create_pipeline()
    ctx = load_connections(req.connections, req.width, req.height, config=pipeline.config)
    ctx = pipeline.run(ctx)

    elapsed = (time.perf_counter() - start) * 1000

    return LayoutResponse.from_result(
        ctx.to_result(),
        processing_time_ms=round(elapsed, 3),
        errors=ctx.errors,
    )
