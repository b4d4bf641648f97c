# uavsar/flight_path/utils/assembly.py
"""
Boustrophedon path assembly.

Scan lines are flown in increasing offset order and alternate direction, so
each line starts next to where the previous one ended. A line split into
several segments by a concavity has each segment flown as its own leg; the
next leg is the remaining segment endpoint closest to the current position.
"""
from itertools import groupby
from typing import List, Sequence, Tuple

from ..constants import PlannerConstants
from ..data_models import CoveredSegment, PlanarPoint, RoutePoint
from ..exceptions import EmptyPath
from .coordinates import planar_bearing

Leg = Tuple[PlanarPoint, PlanarPoint]


def _oriented(segment: CoveredSegment, forward: bool) -> Leg:
    return (segment.start, segment.end) if forward else (segment.end, segment.start)


def _nearest_leg(current: PlanarPoint, remaining: List[CoveredSegment], forward: bool) -> Tuple[int, bool]:
    """Index and direction of the segment whose entry point is closest to current; ties keep line order."""
    best = None
    for idx, segment in enumerate(remaining):
        for rank, leg_forward in enumerate((forward, not forward)):
            entry = _oriented(segment, leg_forward)[0]
            key = (current.distance_to(entry), idx, rank)
            if best is None or key < best[0]:
                best = (key, idx, leg_forward)
    return best[1], best[2]


def order_legs(segments: Sequence[CoveredSegment]) -> List[Leg]:
    """Orders and orients covered segments into a connected sequence of legs."""
    legs: List[Leg] = []
    forward = True
    ordered = sorted(segments, key=lambda s: s.line_index)
    for _, group in groupby(ordered, key=lambda s: s.line_index):
        remaining = list(group)
        split_line = len(remaining) > 1
        if not forward:
            remaining.reverse()

        leg_forward = forward
        while remaining:
            if legs and split_line:
                idx, leg_forward = _nearest_leg(legs[-1][1], remaining, forward)
            else:
                idx, leg_forward = 0, forward
            legs.append(_oriented(remaining.pop(idx), leg_forward))

        forward = not leg_forward
    return legs


def assemble_path(segments: Sequence[CoveredSegment]) -> List[RoutePoint]:
    """Waypoints in flight order; each covered segment contributes its two endpoints."""
    if not segments:
        raise EmptyPath()

    positions: List[PlanarPoint] = []
    for start, end in order_legs(segments):
        positions.extend((start, end))

    bearings: List[float] = []
    for i in range(len(positions) - 1):
        if positions[i].distance_to(positions[i + 1]) > PlannerConstants.GEOMETRY_TOLERANCE_M:
            bearings.append(planar_bearing(positions[i], positions[i + 1]))
        else:
            # no movement between coincident points keeps the previous heading
            bearings.append(bearings[-1] if bearings else 0.0)
    bearings.append(bearings[-1])

    return [RoutePoint(position=p, bearing_deg=b) for p, b in zip(positions, bearings)]
