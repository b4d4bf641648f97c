# uavsar/flight_path/utils/metrics.py
import math
from typing import Sequence

from ..constants import PlannerConstants
from ..data_models import CoverageRect, GeoPoint, PlanarPoint
from ..exceptions import InvalidParameter
from .coordinates import NULL_ISLAND, to_geographic


def polygon_area_m2(polygon: Sequence[PlanarPoint]) -> float:
    """Unsigned shoelace area; the ring is closed implicitly."""
    n = len(polygon)
    if n < 3:
        return 0.0
    twice_area = 0.0
    for i in range(n):
        a, b = polygon[i], polygon[(i + 1) % n]
        twice_area += a.x * b.y - b.x * a.y
    return abs(twice_area) / 2.0


def is_zero_area(polygon: Sequence[PlanarPoint]) -> bool:
    """True when the enclosed area is rounding noise for a polygon of this size."""
    if len(polygon) < 3:
        return True
    xs = [p.x for p in polygon]
    ys = [p.y for p in polygon]
    diagonal_sq = (max(xs) - min(xs)) ** 2 + (max(ys) - min(ys)) ** 2
    tolerance = max(PlannerConstants.AREA_TOLERANCE_M2, PlannerConstants.AREA_REL_TOLERANCE * diagonal_sq)
    return polygon_area_m2(polygon) <= tolerance


def compute_search_area(polygon: Sequence[PlanarPoint]) -> float:
    """Area of the search polygon in square kilometers."""
    return polygon_area_m2(polygon) / PlannerConstants.SQUARE_METERS_PER_KM2


def path_length_m(positions: Sequence[PlanarPoint]) -> float:
    distance = 0.0
    for i in range(len(positions) - 1):
        distance += positions[i].distance_to(positions[i + 1])
    return distance


def compute_flight_time(positions: Sequence[PlanarPoint], speed_mps: float) -> float:
    """Minutes needed to fly the waypoint sequence at a constant ground speed."""
    if speed_mps <= 0:
        raise InvalidParameter("speed", speed_mps, "Speed must be positive")
    return path_length_m(positions) / speed_mps / PlannerConstants.SECONDS_PER_MINUTE


def build_coverage_rect(
    position: PlanarPoint,
    bearing_deg: float,
    footprint_m: float,
    reference_latitude: float,
    origin: GeoPoint = NULL_ISLAND,
) -> CoverageRect:
    """
    Square camera footprint of side footprint_m centred on the waypoint, with
    two sides parallel to the direction of travel. Corners are ordered
    front-left, rear-left, rear-right, front-right and the ring is closed.
    """
    half = footprint_m / 2.0
    bearing = math.radians(bearing_deg)
    # unit vectors along track and to the right of track
    along = (math.sin(bearing), math.cos(bearing))
    right = (math.cos(bearing), -math.sin(bearing))

    corners = []
    for cross, ahead in ((-half, half), (-half, -half), (half, -half), (half, half)):
        corner = PlanarPoint(
            position.x + cross * right[0] + ahead * along[0],
            position.y + cross * right[1] + ahead * along[1],
        )
        corners.append(to_geographic(corner, reference_latitude, origin))
    corners.append(corners[0])

    return CoverageRect(coords=tuple(corners), center=to_geographic(position, reference_latitude, origin))
