"""Diagnostics package.

- pretty_month, easter_table, season_coverage: always available, standard library only
- easter_scatter: optional (requires the "diagnostics" extra: numpy, matplotlib)
"""

__all__ = ["pretty_month", "easter_table", "season_coverage", "easter_scatter"]
