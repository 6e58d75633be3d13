"""
Multi-year loading and monthly accident summaries.

This module handles:
  1. Loading several yearly files, keeping only ``(MONTH, year)`` and
     isolating failures per year.
  2. Counting accidents per month and spreading the counts by year.

A year that cannot be loaded (missing file, unreadable file, missing
columns) never aborts the whole run: it is logged as a warning and
recorded as a failed ``YearResult``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

import pandas as pd

from fars.config.constants import COL_MONTH, COL_YEAR, YEAR_PROJECTION
from fars.io.readers import Year, coerce_year, fars_read, year_path

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Per-year result
# ═══════════════════════════════════════════════════════════════════════════════

@dataclass
class YearResult:
    """Outcome of loading a single year.

    Attributes
    ----------
    year : int, float or str
        The year exactly as requested.
    status : str
        ``"ok"`` or ``"failed"``.
    data : pd.DataFrame | None
        ``(MONTH, year)`` projection of the year's records, or ``None`` when
        loading failed.
    error : str | None
        Reason for the failure.
    """

    year: Year
    status: str  # "ok" | "failed"
    data: Optional[pd.DataFrame] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @property
    def row_count(self) -> int:
        return 0 if self.data is None else len(self.data)


# ═══════════════════════════════════════════════════════════════════════════════
# Multi-year loading
# ═══════════════════════════════════════════════════════════════════════════════

def _read_year(year: Year, data_dir: Optional[str | Path]) -> pd.DataFrame:
    year_int = coerce_year(year)
    df = fars_read(year_path(year_int, data_dir), required=(COL_MONTH,))
    return df.assign(**{COL_YEAR: year_int})[YEAR_PROJECTION]


def read_years(
    years: Iterable[Year],
    *,
    data_dir: Optional[str | Path] = None,
) -> list[YearResult]:
    """Load each year's ``(MONTH, year)`` projection.

    Parameters
    ----------
    years : iterable of int, float or str
        Years to load, in the order the results should appear.
    data_dir : str or Path, optional
        Directory holding the ``accident_<year>.csv.bz2`` files.  Defaults
        to the current working directory.

    Returns
    -------
    list[YearResult]
        One entry per requested year, in input order.
    """
    results = []
    for year in years:
        try:
            data = _read_year(year, data_dir)
        except Exception as exc:
            logger.warning("invalid year: %s", year, extra={"year": year, "reason": str(exc)})
            results.append(YearResult(year=year, status="failed", error=str(exc)))
        else:
            results.append(YearResult(year=year, status="ok", data=data))
    return results


def fars_read_years(
    years: Iterable[Year],
    *,
    data_dir: Optional[str | Path] = None,
) -> list[Optional[pd.DataFrame]]:
    """Return one ``(MONTH, year)`` frame per year, ``None`` for bad years.

    Never raises for a bad year; a warning naming it is logged instead.
    Use :func:`read_years` to inspect why a year failed.
    """
    return [r.data for r in read_years(years, data_dir=data_dir)]


# ═══════════════════════════════════════════════════════════════════════════════
# Monthly summary
# ═══════════════════════════════════════════════════════════════════════════════

def empty_summary() -> pd.DataFrame:
    """Summary with no months and no year columns."""
    return pd.DataFrame({COL_MONTH: pd.Series(dtype="int64")})


def summarize_frames(frames: Sequence[Optional[pd.DataFrame]]) -> pd.DataFrame:
    """Count accidents per month and spread the counts by year.

    Parameters
    ----------
    frames : sequence of pd.DataFrame or None
        Output of :func:`fars_read_years`.  ``None`` entries contribute no
        rows.

    Returns
    -------
    pd.DataFrame
        ``MONTH`` column (ascending) followed by one ``Int64`` column per
        year (ascending).  Month/year combinations with no accidents are
        ``<NA>``.
    """
    present = [f for f in frames if f is not None]
    if not present:
        return empty_summary()

    combined = pd.concat(present, ignore_index=True)
    if combined.empty:
        return empty_summary()

    counts = (
        combined.groupby([COL_YEAR, COL_MONTH])
        .size()
        .rename("n")
        .reset_index()
    )
    summary = (
        counts.pivot(index=COL_MONTH, columns=COL_YEAR, values="n")
        .sort_index()
        .sort_index(axis=1)
        .astype("Int64")
    )
    summary.columns.name = None
    return summary.reset_index()


def fars_summarize_years(
    years: Iterable[Year],
    *,
    data_dir: Optional[str | Path] = None,
) -> pd.DataFrame:
    """Monthly accident totals for *years*.

    Years that fail to load are warned about and left out of the table.
    If none of them loads, the result is the empty summary.

    Examples
    --------
    >>> fars_summarize_years([2013, 2014, 2015], data_dir="data")  # doctest: +SKIP
    """
    return summarize_frames(fars_read_years(years, data_dir=data_dir))
