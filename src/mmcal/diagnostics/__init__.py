"""Diagnostics package.

- thingyan_table, pretty_month, round_trip: plain-text tools, no extra dependencies
- watat_years, new_year_scatter: plots, need the "diagnostics" extra (numpy, matplotlib)
"""

__all__ = ["thingyan_table", "pretty_month", "round_trip", "watat_years", "new_year_scatter"]
