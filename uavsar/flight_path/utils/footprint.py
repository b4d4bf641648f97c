# uavsar/flight_path/utils/footprint.py
import math

from ..constants import PlannerConstants
from ..exceptions import InvalidParameter


def compute_footprint(field_of_view_deg: float, altitude_m: float) -> float:
    """Side length in meters of the square ground footprint (pinhole camera)."""
    if not PlannerConstants.MIN_FOV_DEG < field_of_view_deg < PlannerConstants.MAX_FOV_DEG:
        raise InvalidParameter("fieldOfView", field_of_view_deg, "Field of view must be in (0, 180) degrees")
    if altitude_m <= 0:
        raise InvalidParameter("altitude", altitude_m, "Altitude must be positive")
    return 2.0 * altitude_m * math.tan(math.radians(field_of_view_deg) / 2.0)


def compute_line_spacing(footprint_m: float, overlap_pct: float) -> float:
    """Distance between adjacent scan lines for the requested side overlap."""
    if footprint_m <= 0:
        raise InvalidParameter("footprint", footprint_m, "Footprint must be positive")
    if not PlannerConstants.MIN_OVERLAP_PCT <= overlap_pct < PlannerConstants.MAX_OVERLAP_PCT:
        raise InvalidParameter("overlapFraction", overlap_pct, "Overlap must be in [0, 100) percent")
    return footprint_m * (1.0 - overlap_pct / 100.0)
