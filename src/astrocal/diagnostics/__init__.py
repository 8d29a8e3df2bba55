"""Diagnostics package.

- easter_table, round_trip: always available, stdlib only
- easter_scatter: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["easter_table", "easter_scatter", "round_trip"]
