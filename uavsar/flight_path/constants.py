# uavsar/flight_path/constants.py
import math


class PlannerConstants:
    EARTH_RADIUS_M: float = 6371008.8
    METERS_PER_DEGREE_LAT: float = EARTH_RADIUS_M * math.pi / 180.0

    # Geometry tolerances in the planar frame
    GEOMETRY_TOLERANCE_M: float = 1e-6
    AREA_TOLERANCE_M2: float = 1e-6
    AREA_REL_TOLERANCE: float = 1e-9      # of the squared bounding-box diagonal
    ORIENTATION_REL_TOLERANCE: float = 1e-9

    SQUARE_METERS_PER_KM2: float = 1_000_000.0
    SECONDS_PER_MINUTE: float = 60.0

    # Drone profile limits
    MIN_FOV_DEG: float = 0.0
    MAX_FOV_DEG: float = 180.0
    MIN_OVERLAP_PCT: float = 0.0
    MAX_OVERLAP_PCT: float = 100.0

    MIN_POLYGON_POINTS: int = 3
    MAX_LONGITUDE_SPAN_DEG: float = 180.0


class MissionExportConstants:
    """Fixed values written into exported DJI waypoint missions."""
    KML_NAMESPACE = "http://www.opengis.net/kml/2.2"
    WPML_NAMESPACE = "http://www.dji.com/wpmz/1.0.2"

    FLY_TO_WAYLINE_MODE = "safely"
    FINISH_ACTION = "goHome"
    EXIT_ON_RC_LOST = "executeLostAction"
    EXECUTE_RC_LOST_ACTION = "goBack"
    TAKEOFF_SECURITY_HEIGHT_M = 20
    GLOBAL_RTH_HEIGHT_M = 30
    DRONE_ENUM_VALUE = 67
    DRONE_SUB_ENUM_VALUE = 0
    PAYLOAD_ENUM_VALUE = 52
    PAYLOAD_POSITION_INDEX = 0
    EXECUTE_HEIGHT_MODE = "WGS84"
    TURN_MODE = "toPointAndStopWithDiscontinuityCurvature"
    GIMBAL_PITCH_NADIR_DEG = -90
