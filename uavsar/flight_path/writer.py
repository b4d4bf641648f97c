# uavsar/flight_path/writer.py
"""
Mission export for a planned flight path.

Produces a plain KML of the waypoints and a DJI WPML waypoint mission packed
as KMZ. Export consumes a finished FlightPathResult; the planner itself never
touches the filesystem.
"""
import logging
import xml.etree.ElementTree as ET
import zipfile
from pathlib import Path
from typing import Union

from .constants import MissionExportConstants as MEC
from .data_models import DroneProfile, FlightPathResult

ET.register_namespace("", MEC.KML_NAMESPACE)
ET.register_namespace("wpml", MEC.WPML_NAMESPACE)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'


def _kml(tag: str) -> str:
    return f"{{{MEC.KML_NAMESPACE}}}{tag}"


def _wpml(tag: str) -> str:
    return f"{{{MEC.WPML_NAMESPACE}}}{tag}"


def _number(value: float) -> str:
    return f"{value:.10g}"


def _add(parent: ET.Element, tag: str, text=None) -> ET.Element:
    element = ET.SubElement(parent, tag)
    if text is not None:
        element.text = text if isinstance(text, str) else _number(text)
    return element


def _to_string(root: ET.Element) -> str:
    ET.indent(root)
    return XML_DECLARATION + ET.tostring(root, encoding="unicode")


def heading_angle(bearing: float) -> float:
    """Maps a [0, 360) bearing to the [-180, 180] heading range used by WPML."""
    return bearing - 360.0 if bearing > 180.0 else bearing


def generate_flightpath_kml(result: FlightPathResult, drone: DroneProfile) -> str:
    root = ET.Element(_kml("kml"))
    document = _add(root, _kml("Document"))
    _add(document, _kml("name"), f"Flight path {drone.model}")

    for i, waypoint in enumerate(result.waypoints):
        lon, lat = waypoint.position
        placemark = _add(document, _kml("Placemark"))
        _add(placemark, _kml("name"), f"Waypoint {i + 1}")
        _add(placemark, _kml("description"), f"Lat: {lat}, Lon: {lon}")
        point = _add(placemark, _kml("Point"))
        _add(point, _kml("altitudeMode"), "relativeToGround")
        _add(point, _kml("coordinates"), f"{lon:.8f},{lat:.8f},{_number(waypoint.altitude)}")

    route = _add(document, _kml("Placemark"))
    _add(route, _kml("name"), "Route")
    line = _add(route, _kml("LineString"))
    _add(line, _kml("altitudeMode"), "relativeToGround")
    altitude = _number(result.waypoints[0].altitude) if result.waypoints else "0"
    _add(line, _kml("coordinates"), " ".join(f"{lon:.8f},{lat:.8f},{altitude}" for lon, lat in result.positions))
    return _to_string(root)


def create_template_kml() -> str:
    root = ET.Element(_kml("kml"))
    document = _add(root, _kml("Document"))
    _add(document, _kml("name"), "Template")
    return _to_string(root)


def _mission_config(document: ET.Element, drone: DroneProfile) -> None:
    config = _add(document, _wpml("missionConfig"))
    _add(config, _wpml("flyToWaylineMode"), MEC.FLY_TO_WAYLINE_MODE)
    _add(config, _wpml("finishAction"), MEC.FINISH_ACTION)
    _add(config, _wpml("exitOnRCLost"), MEC.EXIT_ON_RC_LOST)
    _add(config, _wpml("executeRCLostAction"), MEC.EXECUTE_RC_LOST_ACTION)
    _add(config, _wpml("takeOffSecurityHeight"), MEC.TAKEOFF_SECURITY_HEIGHT_M)
    _add(config, _wpml("globalTransitionalSpeed"), drone.speed_mps)
    _add(config, _wpml("globalRTHHeight"), MEC.GLOBAL_RTH_HEIGHT_M)
    drone_info = _add(config, _wpml("droneInfo"))
    _add(drone_info, _wpml("droneEnumValue"), MEC.DRONE_ENUM_VALUE)
    _add(drone_info, _wpml("droneSubEnumValue"), MEC.DRONE_SUB_ENUM_VALUE)
    payload_info = _add(config, _wpml("payloadInfo"))
    _add(payload_info, _wpml("payloadEnumValue"), MEC.PAYLOAD_ENUM_VALUE)
    _add(payload_info, _wpml("payloadPositionIndex"), MEC.PAYLOAD_POSITION_INDEX)


def _photo_actions(placemark: ET.Element, index: int) -> None:
    group = _add(placemark, _wpml("actionGroup"))
    _add(group, _wpml("actionGroupId"), index)
    _add(group, _wpml("actionGroupStartIndex"), index)
    _add(group, _wpml("actionGroupEndIndex"), index)
    _add(group, _wpml("actionGroupMode"), "sequence")
    trigger = _add(group, _wpml("actionTrigger"))
    _add(trigger, _wpml("actionTriggerType"), "reachPoint")

    gimbal = _add(group, _wpml("action"))
    _add(gimbal, _wpml("actionId"), 0)
    _add(gimbal, _wpml("actionActuatorFunc"), "gimbalRotate")
    params = _add(gimbal, _wpml("actionActuatorFuncParam"))
    _add(params, _wpml("gimbalRotateMode"), "absoluteAngle")
    _add(params, _wpml("gimbalPitchRotateEnable"), 1)
    _add(params, _wpml("gimbalPitchRotateAngle"), MEC.GIMBAL_PITCH_NADIR_DEG)
    for axis in ("Roll", "Yaw"):
        _add(params, _wpml(f"gimbal{axis}RotateEnable"), 0)
        _add(params, _wpml(f"gimbal{axis}RotateAngle"), 0)
    _add(params, _wpml("gimbalRotateTimeEnable"), 0)
    _add(params, _wpml("gimbalRotateTime"), 0)
    _add(params, _wpml("payloadPositionIndex"), MEC.PAYLOAD_POSITION_INDEX)

    photo = _add(group, _wpml("action"))
    _add(photo, _wpml("actionId"), 1)
    _add(photo, _wpml("actionActuatorFunc"), "takePhoto")
    params = _add(photo, _wpml("actionActuatorFuncParam"))
    _add(params, _wpml("fileSuffix"), f"wp{index}")
    _add(params, _wpml("payloadPositionIndex"), MEC.PAYLOAD_POSITION_INDEX)


def generate_wpml(result: FlightPathResult, drone: DroneProfile) -> str:
    """DJI WPML wayline document: one stop-and-shoot placemark per waypoint."""
    root = ET.Element(_kml("kml"))
    document = _add(root, _kml("Document"))
    _mission_config(document, drone)

    folder = _add(document, _kml("Folder"))
    _add(folder, _wpml("templateId"), 0)
    _add(folder, _wpml("executeHeightMode"), MEC.EXECUTE_HEIGHT_MODE)
    _add(folder, _wpml("waylineId"), 0)
    _add(folder, _wpml("autoFlightSpeed"), drone.speed_mps)

    for i, waypoint in enumerate(result.waypoints):
        placemark = _add(folder, _kml("Placemark"))
        point = _add(placemark, _kml("Point"))
        _add(point, _kml("coordinates"), f"{waypoint.position[0]:.8f},{waypoint.position[1]:.8f}")
        _add(placemark, _wpml("index"), i)
        _add(placemark, _wpml("executeHeight"), waypoint.altitude)
        _add(placemark, _wpml("waypointSpeed"), drone.speed_mps)

        heading = _add(placemark, _wpml("waypointHeadingParam"))
        _add(heading, _wpml("waypointHeadingMode"), "fixed")
        _add(heading, _wpml("waypointHeadingAngle"), heading_angle(waypoint.bearing))

        turn = _add(placemark, _wpml("waypointTurnParam"))
        _add(turn, _wpml("waypointTurnMode"), MEC.TURN_MODE)
        _add(turn, _wpml("waypointTurnDampingDist"), 0)

        _photo_actions(placemark, i)

    return _to_string(root)


def write_flightpath_kml(result: FlightPathResult, drone: DroneProfile, path: Union[str, Path]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_flightpath_kml(result, drone), encoding="utf-8")
    logging.info(f"Wrote {len(result.waypoints)} waypoints to KML at {path}")
    return path


def write_wpmz(result: FlightPathResult, drone: DroneProfile, path: Union[str, Path]) -> Path:
    """Writes the KMZ mission archive (uncompressed entries, as DJI expects)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, mode="w", compression=zipfile.ZIP_STORED) as archive:
        archive.writestr("wpmz/template.kml", create_template_kml())
        archive.writestr("wpmz/waylines.wpml", generate_wpml(result, drone))
    logging.info(f"Created WPMZ mission at {path}")
    return path
