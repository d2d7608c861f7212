"""
Geocoder service package

This package builds the Geo-6 POI provider from application configuration.
"""

from .factory import createGeo6Provider

__all__ = ["createGeo6Provider"]
