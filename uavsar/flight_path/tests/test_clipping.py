# uavsar/flight_path/tests/test_clipping.py

import sys
import unittest
from pathlib import Path

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from uavsar.flight_path.data_models import PlanarPoint
from uavsar.flight_path.exceptions import DegeneratePolygon, InvalidParameter
from uavsar.flight_path.utils.clipping import generate_covered_segments
from uavsar.flight_path.utils.footprint import compute_footprint, compute_line_spacing

RECTANGLE = [PlanarPoint(*p) for p in [(0, 0), (1000, 0), (1000, 300), (0, 300)]]
# U-shape: the notch splits the upper scan lines in two
U_SHAPE = [PlanarPoint(*p) for p in [
    (0, 0), (300, 0), (300, 300), (200, 300), (200, 100), (100, 100), (100, 300), (0, 300)
]]


def line_count(segments):
    return len({s.line_index for s in segments})


class TestScanLineClipper(unittest.TestCase):
    def test_first_line_offset_by_half_spacing(self):
        segments = generate_covered_segments(RECTANGLE, 0.0, 100.0)
        offsets = [s.start.y for s in segments]
        self.assertEqual(offsets, [50.0, 150.0, 250.0])

    def test_segments_span_polygon_in_sweep_direction(self):
        for segment in generate_covered_segments(RECTANGLE, 0.0, 100.0):
            self.assertAlmostEqual(segment.start.x, 0.0)
            self.assertAlmostEqual(segment.end.x, 1000.0)
            self.assertAlmostEqual(segment.length_m, 1000.0)

    def test_concave_line_keeps_disjoint_segments(self):
        segments = generate_covered_segments(U_SHAPE, 0.0, 100.0)
        self.assertEqual(len(segments), 5)
        upper = [s for s in segments if s.line_index == 1]
        self.assertEqual([(s.start.x, s.end.x) for s in upper], [(0.0, 100.0), (200.0, 300.0)])

    def test_rotated_sweep_returns_unrotated_points(self):
        segments = generate_covered_segments(RECTANGLE, 90.0, 100.0)
        # lines run north-south, spaced along x
        self.assertEqual(line_count(segments), 10)
        for segment in segments:
            self.assertAlmostEqual(segment.start.x, segment.end.x, places=6)
            self.assertAlmostEqual(abs(segment.end.y - segment.start.y), 300.0, places=6)

    def test_spacing_wider_than_polygon_gives_nothing(self):
        thin = [PlanarPoint(*p) for p in [(0, 0), (1000, 0), (1000, 20), (0, 20)]]
        self.assertEqual(generate_covered_segments(thin, 0.0, 100.0), [])

    def test_more_overlap_never_fewer_lines(self):
        footprint = compute_footprint(60.0, 100.0)
        counts = [
            line_count(generate_covered_segments(U_SHAPE, 0.0, compute_line_spacing(footprint, overlap)))
            for overlap in (0.0, 20.0, 40.0, 60.0, 80.0, 95.0)
        ]
        self.assertEqual(counts, sorted(counts))

    def test_zero_area_polygon(self):
        flat = [PlanarPoint(0, 0), PlanarPoint(50, 0), PlanarPoint(100, 0)]
        with self.assertRaises(DegeneratePolygon):
            generate_covered_segments(flat, 0.0, 10.0)

    def test_non_positive_spacing(self):
        with self.assertRaises(InvalidParameter):
            generate_covered_segments(RECTANGLE, 0.0, 0.0)


if __name__ == '__main__':
    unittest.main()
