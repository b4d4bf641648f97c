# uavsar/flight_path/core.py
import logging
from typing import Any, Mapping, Optional, Sequence, Union

from .data_models import DroneProfile, FlightPathResult, PlannerConfig, Waypoint
from .exceptions import DegeneratePolygon, EmptyPath
from .utils.assembly import assemble_path
from .utils.clipping import generate_covered_segments
from .utils.coordinates import local_origin_for, polygon_to_planar, reference_latitude_for, to_geographic
from .utils.footprint import compute_footprint, compute_line_spacing
from .utils.metrics import build_coverage_rect, compute_flight_time, compute_search_area, is_zero_area
from .utils.orientation import select_orientation
from .validation import parse_drone_profile, validate_drone_profile, validate_polygon


class FlightPathPlanner:
    """
    Plans a boustrophedon survey over a polygon for one drone profile.

    The planner holds only its configuration; every call works on its own
    copies of the input, so one instance can serve concurrent callers.
    """

    def __init__(self, config: Optional[PlannerConfig] = None):
        self.config = config or PlannerConfig()

    def plan(
        self,
        coords: Sequence[Sequence[float]],
        drone: Union[DroneProfile, Mapping[str, Any]],
    ) -> FlightPathResult:
        profile = validate_drone_profile(parse_drone_profile(drone, self.config))
        points = validate_polygon(coords, self.config)
        logging.info(f"Planning survey for '{profile.model}' over a {len(points)}-point polygon")

        reference_lat = reference_latitude_for(points)
        origin = local_origin_for(points)
        planar = polygon_to_planar(points, reference_lat, origin)
        if is_zero_area(planar):
            raise DegeneratePolygon("polygon has zero area (points are collinear)")

        footprint = compute_footprint(profile.field_of_view_deg, profile.altitude_m)
        spacing = compute_line_spacing(footprint, profile.overlap_pct)
        orientation = select_orientation(planar, self.config.orientation_metric)
        logging.debug(f"Footprint {footprint:.2f} m, line spacing {spacing:.2f} m, sweep angle {orientation:.2f} deg")

        segments = generate_covered_segments(planar, orientation, spacing)
        if not segments:
            raise EmptyPath(spacing)
        logging.debug(f"{len(segments)} covered segments on {len({s.line_index for s in segments})} scan lines")

        route = assemble_path(segments)
        waypoints = tuple(
            Waypoint(
                position=to_geographic(point.position, reference_lat, origin),
                bearing=point.bearing_deg,
                altitude=profile.altitude_m,
                coverage_rect=build_coverage_rect(point.position, point.bearing_deg, footprint, reference_lat, origin),
            )
            for point in route
        )

        result = FlightPathResult(
            waypoints=waypoints,
            search_area=compute_search_area(planar),
            estimated_flight_time=compute_flight_time([p.position for p in route], profile.speed_mps),
            sweep_angle_deg=orientation,
        )
        logging.info(
            f"Flight path ready: {len(waypoints)} waypoints, {result.search_area:.3f} km2, "
            f"{result.estimated_flight_time:.1f} min"
        )
        return result


def generate_flight_path(
    coords: Sequence[Sequence[float]],
    drone: Union[DroneProfile, Mapping[str, Any]],
    config: Optional[PlannerConfig] = None,
) -> FlightPathResult:
    """Single planning call: polygon of [lon, lat] pairs and a drone profile in, flight path out."""
    return FlightPathPlanner(config).plan(coords, drone)
