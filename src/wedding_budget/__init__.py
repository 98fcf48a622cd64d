"""
Wedding Budget Package

Estimates total wedding cost from guest count, location, catering tier,
venue type and a miscellaneous budget.
Resolves costs using Lookup → Location Adjustment → Rounded Breakdown pipeline.
"""

__version__ = "1.0.0"
