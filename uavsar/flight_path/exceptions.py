# uavsar/flight_path/exceptions.py
"""
Flight Path Planner Exceptions
Typed failures for a single planning call. None of them carry a partial result.
"""


class FlightPathError(Exception):
    """Base class for all flight path planning errors"""
    pass


class InvalidParameter(FlightPathError):
    """A drone profile value is missing, non-numeric or out of range"""
    def __init__(self, parameter, value=None, message="Invalid parameter"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{message}: {parameter}={value!r}")


class DegeneratePolygon(FlightPathError):
    """The search polygon does not enclose a usable area"""
    def __init__(self, reason, message="Degenerate polygon"):
        self.reason = reason
        super().__init__(f"{message}: {reason}")


class EmptyPath(FlightPathError):
    """Valid inputs produced no covered scan-line segments"""
    def __init__(self, spacing_m=None, message="No flight path could be generated"):
        self.spacing_m = spacing_m
        if spacing_m is not None:
            message = f"{message}: no scan line at {spacing_m:.2f} m spacing intersects the polygon"
        super().__init__(message)
