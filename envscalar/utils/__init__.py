"""Utility modules for envscalar."""
