# uavsar/flight_path/utils/coordinates.py
"""
Local planar projection and planar heading helpers.

Equirectangular approximation around a reference latitude: longitude degrees
are scaled by cos(reference latitude), latitude degrees by a constant. Planar
coordinates are measured from a local origin, normally the centre of the
polygon's bounding box, so survey geometry stays within a few kilometers of
(0, 0). Only valid for survey-scale areas away from the poles. Logging is
omitted here as these are high-frequency, low-level functions.
"""
import math
from typing import Iterable, List, Sequence

import numpy as np

from ..constants import PlannerConstants
from ..data_models import GeoPoint, PlanarPoint

NULL_ISLAND: GeoPoint = (0.0, 0.0)


def _longitude_scale(reference_latitude: float) -> float:
    if not -90.0 < reference_latitude < 90.0:
        raise ValueError(f"reference latitude must lie strictly between -90 and 90, got {reference_latitude}")
    return PlannerConstants.METERS_PER_DEGREE_LAT * math.cos(math.radians(reference_latitude))


def wrap_longitude(lon: float) -> float:
    """Brings an unwrapped longitude back into [-180, 180]."""
    if lon > 180.0:
        return lon - 360.0
    if lon < -180.0:
        return lon + 360.0
    return lon


def unwrap_longitudes(coords: Sequence[GeoPoint]) -> List[GeoPoint]:
    """
    Shifts longitudes by 360 degrees where needed so every point lies within
    180 degrees of the first one. A ring crossing the antimeridian then stays
    contiguous instead of spanning the globe. Other rings are returned as is.
    """
    if not coords:
        return []
    first_lon = coords[0][0]
    unwrapped = []
    for lon, lat in coords:
        if lon - first_lon > 180.0:
            lon -= 360.0
        elif lon - first_lon < -180.0:
            lon += 360.0
        unwrapped.append((lon, lat))
    return unwrapped


def to_planar(geo_point: Sequence[float], reference_latitude: float, origin: GeoPoint = NULL_ISLAND) -> PlanarPoint:
    """Converts a (lon, lat) pair in degrees to meters east and north of origin."""
    lon, lat = geo_point[0], geo_point[1]
    return PlanarPoint(
        x=(lon - origin[0]) * _longitude_scale(reference_latitude),
        y=(lat - origin[1]) * PlannerConstants.METERS_PER_DEGREE_LAT,
    )


def to_geographic(planar_point: PlanarPoint, reference_latitude: float, origin: GeoPoint = NULL_ISLAND) -> GeoPoint:
    """Inverse of to_planar; longitudes are wrapped into [-180, 180]."""
    return (
        wrap_longitude(planar_point.x / _longitude_scale(reference_latitude) + origin[0]),
        planar_point.y / PlannerConstants.METERS_PER_DEGREE_LAT + origin[1],
    )


def reference_latitude_for(coords: Iterable[Sequence[float]]) -> float:
    """Mid-latitude of the polygon's bounding box; independent of vertex order."""
    lats = [c[1] for c in coords]
    return (min(lats) + max(lats)) / 2.0


def local_origin_for(coords: Iterable[Sequence[float]]) -> GeoPoint:
    """Centre of the polygon's bounding box; independent of vertex order."""
    coords = list(coords)
    lons = [c[0] for c in coords]
    lats = [c[1] for c in coords]
    return ((min(lons) + max(lons)) / 2.0, (min(lats) + max(lats)) / 2.0)


def polygon_to_planar(
    coords: Iterable[Sequence[float]], reference_latitude: float, origin: GeoPoint = NULL_ISLAND
) -> List[PlanarPoint]:
    return [to_planar(c, reference_latitude, origin) for c in coords]


def as_array(points: Sequence[PlanarPoint]) -> np.ndarray:
    """(N, 2) float array of planar points."""
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def rotate_points(points: np.ndarray, angle_deg: float) -> np.ndarray:
    """Rotates (N, 2) points counter-clockwise about the origin."""
    theta = math.radians(angle_deg)
    c, s = math.cos(theta), math.sin(theta)
    rotation = np.array([[c, -s], [s, c]])
    return points @ rotation.T


def planar_bearing(origin: PlanarPoint, target: PlanarPoint) -> float:
    """Degrees clockwise from north (+y) for travel from origin to target, in [0, 360)."""
    dx, dy = target.x - origin.x, target.y - origin.y
    bearing = math.degrees(math.atan2(dx, dy)) % 360.0
    # tiny negative angles round up to exactly 360 under modulo
    return 0.0 if bearing >= 360.0 else bearing
