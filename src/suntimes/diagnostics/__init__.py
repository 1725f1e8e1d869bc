"""Diagnostics package.

- diagnostics: day_length, compare_engines (stdlib), eot_curve (numpy, optional matplotlib)
- diagnostics.ephem: optional (requires ephemeris extras + a JPL ephemeris file)
"""

__all__ = ["eot_curve", "day_length", "compare_engines"]
