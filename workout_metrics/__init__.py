"""
Workout metrics package.

This package derives training metrics from structured workout records:
per-workout volume, intensity score and muscle group distribution, plus
plan-level aggregation and training recommendations.
"""

__version__ = "0.1.0"
