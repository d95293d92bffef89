"""Gauge station finder - search river-gauging stations by name, postcode or location."""

__version__ = "0.1.0"
