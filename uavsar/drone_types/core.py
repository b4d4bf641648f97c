# uavsar/drone_types/core.py
"""
Load and save the user's drone profile presets as JSON.

On first use the packaged default list is copied into the data directory.
The planner never reads presets; callers resolve one profile and pass it in.
"""
import json
import logging
import shutil
from pathlib import Path
from typing import List, Optional, Union

from ..flight_path.data_models import DroneProfile, PlannerConfig
from ..flight_path.exceptions import InvalidParameter
from ..flight_path.validation import parse_drone_profile, validate_drone_profile

DEFAULT_FILE_NAME = "drone_list.json"
DEFAULT_DATA_DIR = Path.home() / ".local" / "share" / "uavsar"
RESOURCE_DIR = Path(__file__).resolve().parent / "resources"


class DroneTypeStore:
    """A JSON file of drone profiles inside a data directory."""

    def __init__(self, data_dir: Optional[Union[str, Path]] = None, filename: str = DEFAULT_FILE_NAME):
        self.data_dir = Path(data_dir) if data_dir else DEFAULT_DATA_DIR
        self.path = self.data_dir / filename
        self._config = PlannerConfig()

    def _ensure_data_dir(self) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            default = RESOURCE_DIR / DEFAULT_FILE_NAME
            shutil.copyfile(default, self.path)
            logging.info(f"Copied default drone list to {self.path}")

    def load(self) -> List[DroneProfile]:
        """Returns the stored profiles; an unreadable file or data directory yields an empty list."""
        try:
            self._ensure_data_dir()
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logging.warning(f"Drone types file {self.path} could not be read: {e}")
            return []

        if not isinstance(raw, list):
            logging.warning(f"Drone types file {self.path} does not contain a list.")
            return []

        profiles = []
        for i, entry in enumerate(raw):
            try:
                profiles.append(validate_drone_profile(parse_drone_profile(entry, self._config)))
            except InvalidParameter as e:
                logging.warning(f"Skipping drone profile #{i + 1}: {e}")
        return profiles

    def save(self, profiles: List[DroneProfile]) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump([p.to_dict() for p in profiles], f, indent=2)
        logging.info(f"Saved {len(profiles)} drone profiles to {self.path}")
        return self.path
