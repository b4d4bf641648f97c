# uavsar/flight_path/utils/orientation.py
"""
Sweep orientation selection.

The sweep direction is the long side of the polygon's minimum enclosing
rectangle, found with rotating calipers over the convex hull. Angles are in
degrees counter-clockwise from the planar +x (east) axis, normalised to [0, 180).
"""
import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np
from shapely.geometry import MultiPoint, Polygon
from shapely.geometry.polygon import orient

from ..constants import PlannerConstants
from ..data_models import PlanarPoint
from ..exceptions import DegeneratePolygon, InvalidParameter
from .coordinates import as_array, rotate_points


@dataclass(frozen=True)
class EnclosingRectangle:
    angle_deg: float        # direction of the long side
    length_m: float
    width_m: float

    @property
    def area(self) -> float:
        return self.length_m * self.width_m

    @property
    def perimeter(self) -> float:
        return 2.0 * (self.length_m + self.width_m)


def convex_hull(points: np.ndarray) -> np.ndarray:
    """
    Hull vertices counter-clockwise, without repeating the first. Collinear
    input gives the two end points (or one, if all points coincide).
    """
    hull = MultiPoint([tuple(p) for p in points]).convex_hull
    if not isinstance(hull, Polygon):
        return np.array(hull.coords, dtype=float).reshape(-1, 2)
    return np.array(orient(hull, sign=1.0).exterior.coords[:-1], dtype=float)


def _normalise_angle(angle_deg: float) -> float:
    angle = angle_deg % 180.0
    if angle >= 180.0 - 1e-9:
        angle = 0.0
    return angle


def enclosing_rectangles(hull: np.ndarray) -> List[EnclosingRectangle]:
    """One candidate rectangle per hull edge direction."""
    candidates = []
    n = len(hull)
    for i in range(n):
        dx, dy = hull[(i + 1) % n] - hull[i]
        if math.hypot(dx, dy) <= PlannerConstants.GEOMETRY_TOLERANCE_M:
            continue
        edge_angle = math.degrees(math.atan2(dy, dx))
        aligned = rotate_points(hull, -edge_angle)
        along = float(aligned[:, 0].max() - aligned[:, 0].min())
        across = float(aligned[:, 1].max() - aligned[:, 1].min())
        if along >= across:
            candidates.append(EnclosingRectangle(_normalise_angle(edge_angle), along, across))
        else:
            candidates.append(EnclosingRectangle(_normalise_angle(edge_angle + 90.0), across, along))
    return candidates


def minimum_enclosing_rectangle(points: Sequence[PlanarPoint], metric: str = "area") -> EnclosingRectangle:
    if metric not in ("area", "perimeter"):
        raise InvalidParameter("orientation_metric", metric, "Unknown orientation metric")

    hull = convex_hull(as_array(points))
    if len(hull) < 3:
        raise DegeneratePolygon("all points are collinear")

    candidates = enclosing_rectangles(hull)
    if not candidates:
        raise DegeneratePolygon("convex hull has no usable edges")

    # A near-zero width relative to the length is rounding noise on a straight line
    length = max(r.length_m for r in candidates)
    zero_area = max(PlannerConstants.AREA_TOLERANCE_M2, PlannerConstants.AREA_REL_TOLERANCE * length ** 2)
    if min(r.area for r in candidates) <= zero_area:
        raise DegeneratePolygon("enclosing rectangle has zero area")

    score = (lambda r: r.area) if metric == "area" else (lambda r: r.perimeter)
    best_score = min(score(r) for r in candidates)

    # Equal scores within tolerance resolve to the smallest angle
    threshold = best_score * (1.0 + PlannerConstants.ORIENTATION_REL_TOLERANCE)
    tied = [r for r in candidates if score(r) <= threshold]
    return min(tied, key=lambda r: r.angle_deg)


def select_orientation(points: Sequence[PlanarPoint], metric: str = "area") -> float:
    """Sweep angle in degrees that minimises the number of parallel passes."""
    return minimum_enclosing_rectangle(points, metric).angle_deg
