"""
UAVSAR - Aerial search survey planner.
Plans full-coverage drone flight paths over a search polygon.
"""
