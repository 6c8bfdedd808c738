"""
Diet Journal - Daily health tracking log with derived analytics.

Keeps one entry per day (weight, protein, exercise, notes) and derives a
short-term weight trend, chart series, and an exercise-activity summary.
"""

__version__ = "0.1.0"
