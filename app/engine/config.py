"""Layout configuration — footprints used for collision testing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LayoutConfig:
    """Sizes of the rendered boxes the collision stage reasons about."""

    # Node box, centered on the node position
    node_width: float = 140.0
    node_height: float = 56.0

    # Edge label box, centered on the edge midpoint
    label_width: float = 160.0
    label_height: float = 50.0

    # Gap below which two boxes still count as overlapping
    overlap_padding: float = 15.0

    # Number of cosmetic node colors (see app.engine.display)
    palette_size: int = 5
