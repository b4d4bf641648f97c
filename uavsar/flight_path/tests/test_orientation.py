# uavsar/flight_path/tests/test_orientation.py

import sys
import math
import unittest
from pathlib import Path

import numpy as np

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from uavsar.flight_path.data_models import PlanarPoint
from uavsar.flight_path.exceptions import DegeneratePolygon, InvalidParameter
from uavsar.flight_path.utils.orientation import (
    convex_hull, minimum_enclosing_rectangle, select_orientation
)


def rectangle(width, height, angle_deg=0.0):
    theta = math.radians(angle_deg)
    corners = [(0, 0), (width, 0), (width, height), (0, height)]
    return [
        PlanarPoint(x * math.cos(theta) - y * math.sin(theta), x * math.sin(theta) + y * math.cos(theta))
        for x, y in corners
    ]


class TestSweepOrientation(unittest.TestCase):
    def test_wide_rectangle_sweeps_east_west(self):
        self.assertEqual(select_orientation(rectangle(1000, 200)), 0.0)

    def test_tall_rectangle_sweeps_north_south(self):
        self.assertAlmostEqual(select_orientation(rectangle(200, 1000)), 90.0, places=6)

    def test_rotated_rectangle_follows_long_side(self):
        self.assertAlmostEqual(select_orientation(rectangle(1000, 200, 30.0)), 30.0, places=6)
        self.assertAlmostEqual(select_orientation(rectangle(1000, 200, 120.0)), 120.0, places=6)

    def test_square_tie_picks_smallest_angle(self):
        self.assertEqual(select_orientation(rectangle(100, 100)), 0.0)

    def test_angle_range(self):
        for angle in (0, 15, 89, 91, 170, 200, 300):
            result = select_orientation(rectangle(800, 100, angle))
            self.assertGreaterEqual(result, 0.0)
            self.assertLess(result, 180.0)

    def test_concave_polygon_uses_hull(self):
        # L-shape whose hull is dominated by its 1000 m east-west extent
        l_shape = [PlanarPoint(*p) for p in [(0, 0), (1000, 0), (1000, 100), (100, 100), (100, 300), (0, 300)]]
        rect = minimum_enclosing_rectangle(l_shape)
        self.assertGreaterEqual(rect.length_m, rect.width_m)
        self.assertAlmostEqual(math.sin(math.radians(rect.angle_deg)), 0.0, places=6)

    def test_perimeter_metric(self):
        self.assertEqual(select_orientation(rectangle(1000, 200), metric="perimeter"), 0.0)
        with self.assertRaises(InvalidParameter):
            select_orientation(rectangle(1000, 200), metric="volume")

    def test_collinear_points_are_degenerate(self):
        points = [PlanarPoint(0, 0), PlanarPoint(1, 1), PlanarPoint(2, 2)]
        with self.assertRaises(DegeneratePolygon):
            select_orientation(points)

    def test_convex_hull_drops_interior_points(self):
        points = np.array([[0, 0], [10, 0], [10, 10], [0, 10], [5, 5], [5, 0]], dtype=float)
        hull = convex_hull(points)
        self.assertEqual(len(hull), 4)
        self.assertNotIn([5.0, 5.0], hull.tolist())

    def test_convex_hull_is_counter_clockwise(self):
        points = np.array([[0, 0], [0, 10], [10, 10], [10, 0]], dtype=float)
        hull = convex_hull(points)
        x, y = hull[:, 0], hull[:, 1]
        signed_area = 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))
        self.assertAlmostEqual(signed_area, 100.0)

    def test_collinear_points_with_rounding_noise(self):
        # 40 km line bent by a tenth of a micrometer
        points = [PlanarPoint(0.0, 0.0), PlanarPoint(20000.0, 0.0), PlanarPoint(40000.0, 1e-7)]
        with self.assertRaises(DegeneratePolygon):
            select_orientation(points)


if __name__ == '__main__':
    unittest.main()
