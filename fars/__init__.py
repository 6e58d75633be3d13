"""
FARS Toolbox — Analysis helpers for the Fatality Analysis Reporting System.

FARS is the US nationwide census of fatal motor-vehicle crashes maintained
by NHTSA.  It is distributed as one ``accident_<year>.csv.bz2`` file per year.

This toolbox provides:
    - Loading of yearly accident files
    - Month × year accident-count summaries across several years
    - State-level accident scatter maps
"""

__version__ = "1.0.0"
