# backend/floorplan/__init__.py
"""Procedural floor plan layout service."""

__version__ = "1.0.0"
