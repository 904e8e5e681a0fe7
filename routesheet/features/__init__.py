"""
Feature modules for routesheet.

Each feature is a self-contained module with:
- models.py - dataclasses for the feature's values
- client.py - external service access (optional)
- columns.py - spreadsheet columns (optional)
"""
