"""Fixed layout constants shared by the placement and overflow stages.

Margins are fractions of the container axis. The side bands they leave free
hold the four overflow regions, so nodes and labels never land there.
"""

# Top margin is larger than the bottom one so the circle sits slightly low.
MARGIN_TOP_FRACTION = 0.10
MARGIN_BOTTOM_FRACTION = 0.04
MARGIN_SIDE_FRACTION = 0.24

# Radius as a fraction of the shorter usable-area side.
RADIUS_FRACTION = 0.5

# Overflowed edges are spread over exactly this many display regions.
OVERFLOW_BUCKET_COUNT = 4

# Position along an edge where its label is anchored.
LABEL_ANCHOR_T = 0.5
