"""Connection loader — normalizes raw connection records into a PipelineContext.

Accepts mappings with ``from``/``to``/``label`` keys (the shape the text
service emits), objects exposing ``source``/``target``/``label`` attributes
(such as the API request model), or any mix of both. Nothing is rejected
here: malformed entries are carried through and dropped by the edge stage.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from app.engine.config import LayoutConfig
from app.engine.context import ConnectionData, PipelineContext

logger = logging.getLogger(__name__)


def _text(value: Any) -> str | None:
    """Only strings name concepts or relationships; anything else counts as missing."""
    return value if isinstance(value, str) else None


def _dimension(value: Any) -> float:
    try:
        result = float(value)
    except (TypeError, ValueError):
        return 0.0
    return result if math.isfinite(result) else 0.0


def to_connection(raw: Any, index: int) -> ConnectionData:
    """Normalize one raw record. Unknown shapes become an all-missing connection."""
    if isinstance(raw, ConnectionData):
        return ConnectionData(source=raw.source, target=raw.target, label=raw.label, index=index)

    if isinstance(raw, Mapping):
        source = raw.get("from", raw.get("source"))
        target = raw.get("to", raw.get("target"))
        label = raw.get("label")
    else:
        source = getattr(raw, "source", None)
        target = getattr(raw, "target", None)
        label = getattr(raw, "label", None)

    return ConnectionData(
        source=_text(source),
        target=_text(target),
        label=_text(label),
        index=index,
    )


def load_connections(
    connections: Iterable[Any] | None,
    width: Any,
    height: Any,
    config: LayoutConfig | None = None,
) -> PipelineContext:
    """Build a fresh PipelineContext for one layout computation."""
    ctx = PipelineContext(
        canvas_width=_dimension(width),
        canvas_height=_dimension(height),
        config=config or LayoutConfig(),
    )

    if connections is None:
        return ctx

    ctx.connections = [to_connection(raw, i) for i, raw in enumerate(connections)]
    logger.debug(
        "Loaded %d connections for %sx%s container",
        len(ctx.connections),
        ctx.canvas_width,
        ctx.canvas_height,
    )
    return ctx
