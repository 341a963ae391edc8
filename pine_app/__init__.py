"""
Pine App - Indicator Script Engine

Parses line-oriented trading indicator scripts into a structured program and
evaluates them against a historical price series to produce named, colored
indicator lines for a chart.
"""

__version__ = "0.1.0"
__author__ = "Pine App Team"
