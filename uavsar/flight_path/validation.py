# uavsar/flight_path/validation.py
"""
Input validation for a planning call.

Callers hand over loosely-typed data (decoded JSON, CLI arguments); this module
turns it into a fixed-shape DroneProfile and a cleaned polygon, or raises one
of the typed planner errors. Nothing past this boundary sees raw input.
"""
import logging
import math
from typing import Any, List, Mapping, Sequence, Union

from shapely.geometry import Polygon
from shapely.validation import explain_validity

from .constants import PlannerConstants
from .data_models import DroneProfile, GeoPoint, PlannerConfig
from .exceptions import DegeneratePolygon, InvalidParameter
from .utils.coordinates import unwrap_longitudes

# Accepted input names -> DroneProfile attribute. The short names are the
# persisted preset format.
PROFILE_FIELDS = {
    "model": "model",
    "fieldOfView": "field_of_view_deg",
    "fov": "field_of_view_deg",
    "altitude": "altitude_m",
    "overlapFraction": "overlap_pct",
    "overlap": "overlap_pct",
    "speed": "speed_mps",
}
NUMERIC_FIELDS = ("field_of_view_deg", "altitude_m", "overlap_pct", "speed_mps")
PUBLIC_NAMES = {
    "field_of_view_deg": "fieldOfView",
    "altitude_m": "altitude",
    "overlap_pct": "overlapFraction",
    "speed_mps": "speed",
}


def _as_number(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(name, value, "Expected a number")
    if not math.isfinite(value):
        raise InvalidParameter(name, value, "Expected a finite number")
    return float(value)


def parse_drone_profile(data: Union[DroneProfile, Mapping[str, Any]], config: PlannerConfig) -> DroneProfile:
    """Builds a DroneProfile from a mapping, applying the unknown-field policy."""
    if isinstance(data, DroneProfile):
        return data
    if not isinstance(data, Mapping):
        raise InvalidParameter("drone", data, "Drone profile must be an object")

    values = {}
    unknown = []
    for key, value in data.items():
        attr = PROFILE_FIELDS.get(key)
        if attr is None:
            unknown.append(key)
            continue
        if attr in values:
            raise InvalidParameter(key, value, "Drone profile field given twice")
        values[attr] = value

    if unknown:
        if config.unknown_profile_fields == "reject":
            raise InvalidParameter(unknown[0], data[unknown[0]], "Unknown drone profile field")
        logging.warning(f"Ignoring unknown drone profile fields: {', '.join(sorted(map(str, unknown)))}")

    for attr in NUMERIC_FIELDS:
        if attr not in values:
            raise InvalidParameter(PUBLIC_NAMES[attr], None, "Missing drone profile field")
        values[attr] = _as_number(PUBLIC_NAMES[attr], values[attr])

    model = values.get("model", "")
    if not isinstance(model, str):
        raise InvalidParameter("model", model, "Model must be text")
    values["model"] = model

    return DroneProfile(**values)


def validate_drone_profile(profile: DroneProfile) -> DroneProfile:
    """Range checks on every numeric profile value."""
    for attr in NUMERIC_FIELDS:
        _as_number(PUBLIC_NAMES[attr], getattr(profile, attr))
    if not PlannerConstants.MIN_FOV_DEG < profile.field_of_view_deg < PlannerConstants.MAX_FOV_DEG:
        raise InvalidParameter("fieldOfView", profile.field_of_view_deg, "Field of view must be in (0, 180) degrees")
    if profile.altitude_m <= 0:
        raise InvalidParameter("altitude", profile.altitude_m, "Altitude must be positive")
    if not PlannerConstants.MIN_OVERLAP_PCT <= profile.overlap_pct < PlannerConstants.MAX_OVERLAP_PCT:
        raise InvalidParameter("overlapFraction", profile.overlap_pct, "Overlap must be in [0, 100) percent")
    if profile.speed_mps <= 0:
        raise InvalidParameter("speed", profile.speed_mps, "Speed must be positive")
    return profile


def validate_polygon(coords: Sequence[Sequence[float]], config: PlannerConfig) -> List[GeoPoint]:
    """
    Returns the polygon as a list of distinct (lon, lat) points.

    Consecutive duplicates and a repeated closing point are dropped; the ring
    is always closed implicitly. A ring crossing the antimeridian comes back
    with longitudes unwrapped past +/-180 so it stays contiguous.
    """
    if coords is None or isinstance(coords, (str, bytes)) or not isinstance(coords, Sequence):
        raise DegeneratePolygon("polygon must be a sequence of [longitude, latitude] pairs")

    points: List[GeoPoint] = []
    for i, raw in enumerate(coords):
        if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence) or len(raw) != 2:
            raise DegeneratePolygon(f"point {i} is not a [longitude, latitude] pair")
        lon = _as_coordinate(i, "longitude", raw[0])
        lat = _as_coordinate(i, "latitude", raw[1])
        if not -180.0 <= lon <= 180.0:
            raise DegeneratePolygon(f"point {i} longitude {lon} is outside [-180, 180]")
        if not -90.0 < lat < 90.0:
            raise DegeneratePolygon(f"point {i} latitude {lat} is outside (-90, 90)")
        if points and points[-1] == (lon, lat):
            continue
        points.append((lon, lat))

    if len(points) > 1 and points[0] == points[-1]:
        points.pop()

    if len(points) < PlannerConstants.MIN_POLYGON_POINTS:
        raise DegeneratePolygon(f"polygon has {len(points)} distinct points, at least 3 are required")

    points = unwrap_longitudes(points)
    lons = [p[0] for p in points]
    if max(lons) - min(lons) > PlannerConstants.MAX_LONGITUDE_SPAN_DEG:
        raise DegeneratePolygon(f"polygon spans {max(lons) - min(lons):.1f} degrees of longitude")

    if config.reject_self_intersecting:
        shape = Polygon(points)
        if shape.area > 0 and not shape.is_valid:
            raise DegeneratePolygon(f"polygon is self-intersecting ({explain_validity(shape)})")

    return points


def _as_coordinate(index: int, axis: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise DegeneratePolygon(f"point {index} {axis} {value!r} is not a finite number")
    return float(value)
