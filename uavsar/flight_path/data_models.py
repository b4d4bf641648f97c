# uavsar/flight_path/data_models.py
"""
Defines the data structures shared by every stage of the flight path planner.

Geographic positions are always (lon, lat) tuples in degrees, matching the
[longitude, latitude] pairs exchanged with callers. Planar positions are in
meters in the local frame produced by utils.coordinates.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

GeoPoint = Tuple[float, float]


@dataclass(frozen=True)
class DroneProfile:
    """A single, resolved camera/drone profile used for one planning call."""
    model: str
    field_of_view_deg: float
    altitude_m: float
    overlap_pct: float
    speed_mps: float

    def to_dict(self) -> Dict[str, Any]:
        """Serialises using the short field names of the persisted preset list."""
        return {
            "model": self.model,
            "fov": self.field_of_view_deg,
            "altitude": self.altitude_m,
            "overlap": self.overlap_pct,
            "speed": self.speed_mps,
        }


@dataclass
class PlannerConfig:
    """Tunable planner behaviour. Passed explicitly into every planning call."""
    orientation_metric: str = "area"          # "area" | "perimeter"
    reject_self_intersecting: bool = True
    unknown_profile_fields: str = "ignore"    # "ignore" | "reject"


@dataclass(frozen=True)
class PlanarPoint:
    x: float
    y: float

    def distance_to(self, other: "PlanarPoint") -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class ScanLine:
    """A sweep line at a fixed perpendicular offset in the rotated frame."""
    index: int
    offset_m: float
    angle_deg: float


@dataclass(frozen=True)
class CoveredSegment:
    """The part of a scan line inside the polygon, start -> end along the sweep direction."""
    line_index: int
    start: PlanarPoint
    end: PlanarPoint

    @property
    def length_m(self) -> float:
        return self.start.distance_to(self.end)


@dataclass(frozen=True)
class RoutePoint:
    """A planar waypoint with the heading flown when leaving it."""
    position: PlanarPoint
    bearing_deg: float


@dataclass(frozen=True)
class CoverageRect:
    """Camera footprint around a waypoint: a closed ring of 5 corners plus its centre."""
    coords: Tuple[GeoPoint, ...]
    center: GeoPoint

    def to_dict(self) -> Dict[str, Any]:
        return {
            "coords": [list(c) for c in self.coords],
            "center": list(self.center),
        }


@dataclass(frozen=True)
class Waypoint:
    """Represents a single point of the survey flight, in flight order."""
    position: GeoPoint
    bearing: float
    altitude: float
    coverage_rect: CoverageRect

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": list(self.position),
            "bearing": self.bearing,
            "altitude": self.altitude,
            "coverageRect": self.coverage_rect.to_dict(),
        }


@dataclass(frozen=True)
class FlightPathResult:
    """The complete, immutable output of one planning call."""
    waypoints: Tuple[Waypoint, ...]
    search_area: float                  # km^2
    estimated_flight_time: float        # minutes
    sweep_angle_deg: Optional[float] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "waypoints": [wp.to_dict() for wp in self.waypoints],
            "searchArea": self.search_area,
            "estimatedFlightTime": self.estimated_flight_time,
        }

    @property
    def positions(self) -> List[GeoPoint]:
        return [wp.position for wp in self.waypoints]
