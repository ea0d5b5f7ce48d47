"""Airspace-export settings state: snapshot model, actions and reducer."""

__version__ = "0.1.0"
