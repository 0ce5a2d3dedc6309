"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import logging
from collections.abc import Iterable

import numpy as np
from svgpathtools import parse_path

logger = logging.getLogger(__name__)

BBox = tuple[float, float, float, float]


def path_bbox(d: str) -> BBox | None:
    """Compute (xmin, ymin, xmax, ymax) of SVG path data, or None if nothing is drawn."""
    if not d.strip():
        return None
    try:
        path = parse_path(d)
    except Exception as e:
        logger.warning("Failed to parse path for bounds: %s", e)
        return None
    if len(path) == 0:
        return None
    xmin, xmax, ymin, ymax = path.bbox()
    return (float(xmin), float(ymin), float(xmax), float(ymax))


def union_bbox(boxes: Iterable[BBox | None]) -> BBox | None:
    """Smallest box containing every given box."""
    arr = np.array([b for b in boxes if b is not None], dtype=np.float64)
    if arr.size == 0:
        return None
    return (
        float(np.min(arr[:, 0])),
        float(np.min(arr[:, 1])),
        float(np.max(arr[:, 2])),
        float(np.max(arr[:, 3])),
    )


def grid_extent(positions: Iterable[tuple[int, int]]) -> tuple[int, int]:
    """Number of (columns, rows) needed to hold every position."""
    arr = np.array(list(positions), dtype=np.int64)
    if arr.size == 0:
        return (0, 0)
    return (int(np.max(arr[:, 0])) + 1, int(np.max(arr[:, 1])) + 1)
