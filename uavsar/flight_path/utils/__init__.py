# uavsar/flight_path/utils/__init__.py
"""Geometry stages of the planner: projection, footprint, orientation, clipping, assembly, metrics."""
