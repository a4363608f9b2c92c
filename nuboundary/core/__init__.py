"""Core types, contracts and constants for nuboundary."""
