# test_app.py
import sys
import tempfile
import unittest
from pathlib import Path

# Add project root
sys.path.insert(0, str(Path(__file__).resolve().parent))

from app import create_app

SQUARE = [[0.0, 0.0], [0.0, 0.01], [0.01, 0.01], [0.01, 0.0]]
DRONE = {"model": "Test", "fieldOfView": 60, "altitude": 100, "overlapFraction": 50, "speed": 10}


class TestFlightPathApi(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.client = create_app(data_dir=self._tmp.name).test_client()

    def tearDown(self):
        self._tmp.cleanup()

    def test_plan(self):
        response = self.client.post('/flightpath', json={'coords': SQUARE, 'drone': DRONE})
        self.assertEqual(response.status_code, 200)
        data = response.get_json()
        self.assertEqual(len(data['waypoints']) % 2, 0)
        self.assertAlmostEqual(data['searchArea'], 1.23, delta=0.01)
        self.assertGreater(data['estimatedFlightTime'], 0)

    def test_no_area_defined(self):
        response = self.client.post('/flightpath', json={'coords': SQUARE[:2], 'drone': DRONE})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {'result': None})

    def test_planner_failure(self):
        response = self.client.post('/flightpath', json={'coords': SQUARE, 'drone': {**DRONE, 'overlapFraction': 100}})
        self.assertEqual(response.status_code, 422)
        self.assertEqual(response.get_json()['error'], 'InvalidParameter')

    def test_malformed_body(self):
        response = self.client.post('/flightpath', data='nope', content_type='application/json')
        self.assertEqual(response.status_code, 400)

    def test_drone_presets(self):
        self.assertEqual(len(self.client.get('/drones').get_json()), 3)

        saved = [{"model": "Custom", "fov": 75, "altitude": 60, "overlap": 40, "speed": 6}]
        response = self.client.post('/drones', json=saved)
        self.assertEqual(response.get_json(), {'success': True, 'count': 1})
        self.assertEqual(self.client.get('/drones').get_json()[0]['model'], 'Custom')

    def test_invalid_preset_rejected(self):
        response = self.client.post('/drones', json=[{"model": "X", "fov": 0, "altitude": 60, "overlap": 40, "speed": 6}])
        self.assertEqual(response.status_code, 422)

    def test_unusable_data_dir_lists_no_presets(self):
        blocker = Path(self._tmp.name) / 'not_a_dir'
        blocker.write_text('', encoding='utf-8')
        client = create_app(data_dir=str(blocker)).test_client()
        with self.assertLogs(level='WARNING'):
            response = client.get('/drones')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), [])


if __name__ == '__main__':
    unittest.main()
