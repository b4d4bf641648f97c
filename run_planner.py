# run_planner.py
import argparse
import json
import logging
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)

from uavsar.flight_path.core import FlightPathPlanner
from uavsar.flight_path.data_models import PlannerConfig
from uavsar.flight_path.exceptions import FlightPathError
from uavsar.flight_path.validation import parse_drone_profile, validate_drone_profile
from uavsar.flight_path.writer import write_flightpath_kml, write_wpmz


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Plan a full-coverage survey flight over a polygon.")
    parser.add_argument("polygon", help="JSON file with a list of [longitude, latitude] pairs")
    parser.add_argument("--model", default="custom", help="Drone model label")
    parser.add_argument("--fov", type=float, required=True, help="Camera field of view (degrees)")
    parser.add_argument("--altitude", type=float, required=True, help="Flight altitude (meters)")
    parser.add_argument("--overlap", type=float, default=50.0, help="Side overlap (percent)")
    parser.add_argument("--speed", type=float, required=True, help="Ground speed (m/s)")
    parser.add_argument("--metric", choices=["area", "perimeter"], default="area",
                        help="Enclosing rectangle objective for the sweep orientation")
    parser.add_argument("--allow-self-intersecting", action="store_true",
                        help="Skip the self-intersection check")
    parser.add_argument("--json", dest="json_out", help="Write the flight path result as JSON")
    parser.add_argument("--kml", help="Write the waypoints as KML")
    parser.add_argument("--wpmz", help="Write a DJI WPML mission archive (KMZ)")
    return parser


def main(argv=None) -> int:
    """
    Plans one survey from the command line and prints a short summary.
    """
    args = build_parser().parse_args(argv)
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

    with open(args.polygon, 'r', encoding='utf-8') as f:
        coords = json.load(f)

    config = PlannerConfig(
        orientation_metric=args.metric,
        reject_self_intersecting=not args.allow_self_intersecting,
    )
    try:
        drone = validate_drone_profile(parse_drone_profile({
            "model": args.model,
            "fieldOfView": args.fov,
            "altitude": args.altitude,
            "overlapFraction": args.overlap,
            "speed": args.speed,
        }, config))
        result = FlightPathPlanner(config).plan(coords, drone)
    except FlightPathError as e:
        print(f"No flight path could be generated: {e}", file=sys.stderr)
        return 1

    print("--- Survey Flight Path ---")
    print(f"Drone:          {drone.model}")
    print(f"Waypoints:      {len(result.waypoints)}")
    print(f"Search area:    {result.search_area:.3f} km2")
    print(f"Flight time:    {result.estimated_flight_time:.1f} min")
    print(f"Sweep angle:    {result.sweep_angle_deg:.1f} deg from east")

    if args.json_out:
        with open(args.json_out, 'w', encoding='utf-8') as f:
            json.dump(result.to_dict(), f, indent=2)
        print(f"Result written to {args.json_out}")
    if args.kml:
        print(f"KML written to {write_flightpath_kml(result, drone, args.kml)}")
    if args.wpmz:
        print(f"Mission written to {write_wpmz(result, drone, args.wpmz)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
