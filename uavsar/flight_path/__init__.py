# uavsar/flight_path/__init__.py
"""
Initializes the flight_path module, defining its public API.

Client modules plan a survey with generate_flight_path (or a configured
FlightPathPlanner) and export the result with the writer functions.
"""
# Core planning entry points from core.py
from .core import FlightPathPlanner, generate_flight_path

# Public data models and errors
from .data_models import DroneProfile, PlannerConfig, Waypoint, CoverageRect, FlightPathResult
from .exceptions import FlightPathError, InvalidParameter, DegeneratePolygon, EmptyPath

# Mission export
from .writer import write_flightpath_kml, write_wpmz, generate_wpml

__all__ = [
    "FlightPathPlanner",
    "generate_flight_path",
    "DroneProfile",
    "PlannerConfig",
    "Waypoint",
    "CoverageRect",
    "FlightPathResult",
    "FlightPathError",
    "InvalidParameter",
    "DegeneratePolygon",
    "EmptyPath",
    "write_flightpath_kml",
    "write_wpmz",
    "generate_wpml",
]
