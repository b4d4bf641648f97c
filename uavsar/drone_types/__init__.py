"""
drone_types - Persisted list of named drone profiles for the survey planner.
"""

from .core import DroneTypeStore, DEFAULT_FILE_NAME

__all__ = [
    'DroneTypeStore',
    'DEFAULT_FILE_NAME',
]
