# uavsar/drone_types/tests/test_drone_types.py

import json
import sys
import tempfile
import unittest
from pathlib import Path

# Add project root
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

from uavsar.drone_types import DroneTypeStore
from uavsar.flight_path.data_models import DroneProfile


class TestDroneTypeStore(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.data_dir = Path(self._tmp.name) / "uavsar"
        self.store = DroneTypeStore(self.data_dir)

    def tearDown(self):
        self._tmp.cleanup()

    def test_first_load_copies_defaults(self):
        profiles = self.store.load()
        self.assertTrue(self.store.path.exists())
        self.assertEqual(len(profiles), 3)
        self.assertTrue(all(isinstance(p, DroneProfile) for p in profiles))

    def test_save_and_reload(self):
        profiles = [DroneProfile("Survey X", 70.0, 90.0, 60.0, 9.5)]
        self.store.save(profiles)
        self.assertEqual(self.store.load(), profiles)
        with open(self.store.path, 'r', encoding='utf-8') as f:
            self.assertEqual(json.load(f)[0]["fov"], 70.0)

    def test_corrupt_file_gives_empty_list(self):
        self.data_dir.mkdir(parents=True)
        self.store.path.write_text("{not json", encoding='utf-8')
        with self.assertLogs(level='WARNING'):
            self.assertEqual(self.store.load(), [])

    def test_data_dir_is_a_file(self):
        blocker = Path(self._tmp.name) / "blocker"
        blocker.write_text("", encoding='utf-8')
        store = DroneTypeStore(blocker)
        with self.assertLogs(level='WARNING'):
            self.assertEqual(store.load(), [])

    def test_invalid_entries_skipped(self):
        self.data_dir.mkdir(parents=True)
        entries = [
            {"model": "Good", "fov": 60, "altitude": 100, "overlap": 50, "speed": 10},
            {"model": "Bad", "fov": 60, "altitude": 100, "overlap": 100, "speed": 10},
        ]
        self.store.path.write_text(json.dumps(entries), encoding='utf-8')
        with self.assertLogs(level='WARNING'):
            profiles = self.store.load()
        self.assertEqual([p.model for p in profiles], ["Good"])


if __name__ == '__main__':
    unittest.main()
