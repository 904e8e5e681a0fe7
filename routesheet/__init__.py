"""
routesheet: route segments to reviewable spreadsheets.
"""

__version__ = "0.1.0"
