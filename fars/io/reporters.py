"""
Report writers for FARS monthly summaries.

The plain-text report lists which years loaded (and why any failed)
followed by the month × year accident-count grid.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import pandas as pd

from fars.config.constants import COL_MONTH

if TYPE_CHECKING:
    from fars.core.years import YearResult


# ═══════════════════════════════════════════════════════════════════════════════
# Plain-text report
# ═══════════════════════════════════════════════════════════════════════════════

def format_count(value) -> str:
    """Render a summary cell; missing counts become ``-``."""
    if pd.isna(value):
        return "-"
    return f"{int(value):,}"


def write_text_report(
    results: Sequence["YearResult"],
    summary: pd.DataFrame,
    path: str | Path,
    *,
    title: str = "FARS Monthly Accident Summary",
) -> Path:
    """Write a human-readable plain-text report.

    Parameters
    ----------
    results : sequence of YearResult
        Per-year load outcomes, in request order.
    summary : pd.DataFrame
        Month × year table from ``summarize_frames``.
    path : str or Path
        Output file path.
    title : str
        Report title.

    Returns
    -------
    Path — the written file.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, "w", encoding="utf-8") as fh:
        # Header
        fh.write("=" * 80 + "\n")
        fh.write(f"{title}\n")
        fh.write(f"Generated: {datetime.now():%Y-%m-%d %H:%M:%S}\n")
        fh.write("=" * 80 + "\n\n")

        # Per-year load status
        fh.write("-" * 80 + "\n")
        fh.write(f"{'Year':<8} {'Status':<10} {'Rows':>10}  {'Details'}\n")
        fh.write("-" * 80 + "\n")
        for r in results:
            icon = "✓" if r.ok else "✗"
            details = r.error or ""
            fh.write(f"{str(r.year):<8} {icon} {r.status:<8} {r.row_count:>10,}  {details}\n")
        fh.write("-" * 80 + "\n\n")

        _write_summary(fh, summary)

        fh.write("=" * 80 + "\n")
        fh.write("End of Report\n")
        fh.write("=" * 80 + "\n")

    return path


def _write_summary(fh, summary: pd.DataFrame) -> None:
    """Write the month × year grid to the text report."""
    year_cols = [c for c in summary.columns if c != COL_MONTH]
    if summary.empty or not year_cols:
        fh.write("No accident data loaded for the requested years.\n\n")
        return

    fh.write(f"{COL_MONTH:<8}" + "".join(f"{str(c):>10}" for c in year_cols) + "\n")
    fh.write("-" * (8 + 10 * len(year_cols)) + "\n")
    for _, row in summary.iterrows():
        cells = "".join(f"{format_count(row[c]):>10}" for c in year_cols)
        fh.write(f"{int(row[COL_MONTH]):<8}{cells}\n")
    totals = "".join(f"{format_count(summary[c].sum()):>10}" for c in year_cols)
    fh.write("-" * (8 + 10 * len(year_cols)) + "\n")
    fh.write(f"{'Total':<8}{totals}\n\n")
