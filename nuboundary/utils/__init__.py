"""Utility functions for nuboundary."""
