"""Diagnostics package.

- round_trip, pretty_month: always available
- new_year_drift: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "pretty_month", "new_year_drift"]
