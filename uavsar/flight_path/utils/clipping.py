# uavsar/flight_path/utils/clipping.py
"""
Scan-line generation and clipping against the search polygon.

The polygon is rotated so the sweep direction lies on +x; scan lines are then
horizontal lines y = offset in that frame, the first one half a spacing above
the lowest vertex. Crossings use the half-open edge rule so a line through a
vertex is never counted twice.
"""
import math
from typing import List, Sequence, Tuple

import numpy as np

from ..constants import PlannerConstants
from ..data_models import CoveredSegment, PlanarPoint, ScanLine
from ..exceptions import DegeneratePolygon, InvalidParameter
from .coordinates import as_array, rotate_points
from .metrics import is_zero_area


def generate_scan_lines(rotated: np.ndarray, orientation_deg: float, spacing_m: float) -> List[ScanLine]:
    """Parallel lines every spacing_m across the perpendicular extent of a rotated polygon."""
    y_min = float(rotated[:, 1].min())
    y_max = float(rotated[:, 1].max())
    extent = y_max - y_min
    if extent < spacing_m / 2.0:
        return []
    count = int(math.floor((extent - spacing_m / 2.0) / spacing_m + 1e-9)) + 1
    return [
        ScanLine(index=k, offset_m=y_min + spacing_m * (k + 0.5), angle_deg=orientation_deg)
        for k in range(count)
    ]


def line_crossings(rotated: np.ndarray, offset_m: float) -> np.ndarray:
    """Sorted x positions where the horizontal line y = offset_m crosses the polygon boundary."""
    start = rotated
    end = np.roll(rotated, -1, axis=0)
    y1, y2 = start[:, 1], end[:, 1]
    mask = ((y1 <= offset_m) & (offset_m < y2)) | ((y2 <= offset_m) & (offset_m < y1))
    if not mask.any():
        return np.empty(0)
    x1, x2 = start[mask, 0], end[mask, 0]
    y1, y2 = y1[mask], y2[mask]
    t = (offset_m - y1) / (y2 - y1)
    return np.sort(x1 + t * (x2 - x1))


def clip_line(rotated: np.ndarray, offset_m: float) -> List[Tuple[float, float]]:
    """Disjoint (x_start, x_end) intervals of the line lying inside the polygon."""
    xs = line_crossings(rotated, offset_m)
    intervals = []
    for x_start, x_end in zip(xs[0::2], xs[1::2]):
        if x_end - x_start > PlannerConstants.GEOMETRY_TOLERANCE_M:
            intervals.append((float(x_start), float(x_end)))
    return intervals


def generate_covered_segments(
    polygon: Sequence[PlanarPoint], orientation_deg: float, spacing_m: float
) -> List[CoveredSegment]:
    """
    Covered segments ordered by line index, then along the sweep direction.

    Each segment runs start -> end in the +sweep direction and is expressed in
    the unrotated planar frame. Lines that miss the polygon contribute nothing.
    """
    if not spacing_m > 0 or not math.isfinite(spacing_m):
        raise InvalidParameter("spacing", spacing_m, "Line spacing must be positive")

    points = as_array(polygon)
    if len(points) < PlannerConstants.MIN_POLYGON_POINTS:
        raise DegeneratePolygon(f"polygon has {len(points)} points, at least 3 are required")
    if is_zero_area(polygon):
        raise DegeneratePolygon("polygon has zero area")

    rotated = rotate_points(points, -orientation_deg)
    segments: List[CoveredSegment] = []
    for line in generate_scan_lines(rotated, orientation_deg, spacing_m):
        for x_start, x_end in clip_line(rotated, line.offset_m):
            ends = rotate_points(np.array([[x_start, line.offset_m], [x_end, line.offset_m]]), orientation_deg)
            segments.append(CoveredSegment(
                line_index=line.index,
                start=PlanarPoint(float(ends[0, 0]), float(ends[0, 1])),
                end=PlanarPoint(float(ends[1, 0]), float(ends[1, 1])),
            ))
    return segments
