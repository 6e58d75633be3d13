"""
FARS Toolbox — Command-line interface.

Usage examples::

    # Monthly accident counts for several years
    fars summarize 2013 2014 2015 --data-dir ./data

    # Same, also saving the table and a text report
    fars summarize 2013 2014 2015 -d ./data --output summary.csv --report summary.txt

    # Map all 2014 accidents in Vermont over state outlines
    fars map 50 2014 -d ./data --boundaries cb_2018_us_state_20m.shp

    # List the years available in a data directory
    fars years -d ./data
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from fars.errors import FarsError

app = typer.Typer(
    name="fars",
    help="FARS Accident Analysis Toolkit",
    add_completion=False,
    rich_markup_mode="rich",
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v",
        help="Show debug messages.",
    ),
):
    """Analyse yearly FARS accident files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _fail(exc: Exception) -> typer.Exit:
    console.print(f"\n[red]✗ {escape(str(exc))}[/red]\n")
    return typer.Exit(code=1)


# ─────────────────────────────────────────────────────────────────────────────
#  summarize
# ─────────────────────────────────────────────────────────────────────────────

@app.command()
def summarize(
    years: List[str] = typer.Argument(
        ...,
        help="Years to summarise, e.g. 2013 2014 2015.",
    ),
    data_dir: Path = typer.Option(
        ".", "--data-dir", "-d",
        help="Directory holding the accident_<year>.csv.bz2 files.",
        file_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="Write the month × year table to this CSV file.",
    ),
    report: Optional[Path] = typer.Option(
        None, "--report",
        help="Write a plain-text report to this file.",
    ),
):
    """Count accidents per month for each year."""
    from fars.config.constants import COL_MONTH
    from fars.core.years import read_years, summarize_frames
    from fars.io.readers import save_csv
    from fars.io.reporters import format_count, write_text_report

    console.print(f"\n[bold]Loading {len(years)} year(s)…[/bold]")
    results = read_years(years, data_dir=data_dir)

    # ── Load status ────────────────────────────────────────────────────────
    status = Table(title="Years")
    status.add_column("Year", style="cyan")
    status.add_column("Status", justify="center")
    status.add_column("Rows", justify="right")
    for r in results:
        icon = "[green]✓[/green]" if r.ok else "[red]✗[/red]"
        status.add_row(str(r.year), icon, f"{r.row_count:,}")
    console.print(status)

    summary = summarize_frames([r.data for r in results])

    # ── Summary grid ───────────────────────────────────────────────────────
    year_cols = [c for c in summary.columns if c != COL_MONTH]
    if summary.empty:
        console.print("\n[yellow]⚠ No accident data loaded for the requested years.[/yellow]\n")
    else:
        grid = Table(title="Accidents per Month")
        grid.add_column(COL_MONTH, style="cyan", justify="right")
        for c in year_cols:
            grid.add_column(str(c), justify="right")
        for _, row in summary.iterrows():
            grid.add_row(str(int(row[COL_MONTH])), *(format_count(row[c]) for c in year_cols))
        console.print(grid)

    if output is not None:
        out_path = save_csv(summary, output)
        console.print(f"\n  Summary CSV: [cyan]{out_path}[/cyan]")

    if report is not None:
        report_path = write_text_report(results, summary, report)
        console.print(f"  Text report: [cyan]{report_path}[/cyan]")

    failed = [r for r in results if not r.ok]
    if failed:
        console.print(f"\n[yellow]⚠ {len(failed)} year(s) could not be loaded.[/yellow]\n")
    else:
        console.print("\n[green]✓ Summary complete.[/green]\n")


# ─────────────────────────────────────────────────────────────────────────────
#  map
# ─────────────────────────────────────────────────────────────────────────────

@app.command("map")
def map_state(
    state: str = typer.Argument(..., help="FARS STATE code, e.g. 6 for California."),
    year: str = typer.Argument(..., help="Year of the data file."),
    data_dir: Path = typer.Option(
        ".", "--data-dir", "-d",
        help="Directory holding the accident_<year>.csv.bz2 files.",
        file_okay=False,
    ),
    boundaries: Optional[Path] = typer.Option(
        None, "--boundaries", "-b",
        help="State boundaries file (shapefile or GeoJSON) for the base map.",
        exists=True,
        dir_okay=False,
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o",
        help="PNG file to write.  Defaults to fars_<state>_<year>.png.",
    ),
    dpi: int = typer.Option(150, "--dpi", help="Output resolution."),
):
    """Plot one state's accidents for one year."""
    from fars.core.maps import fars_map_state, load_boundaries

    base = load_boundaries(boundaries) if boundaries is not None else None

    console.print(f"\n[bold]Mapping STATE {state}, {year}…[/bold]")
    try:
        ax = fars_map_state(state, year, boundaries=base, data_dir=data_dir)
    except (FarsError, FileNotFoundError, ValueError) as exc:
        raise _fail(exc) from exc

    if ax is None:
        console.print("\n[yellow]⚠ Nothing drawn.[/yellow]\n")
        return

    output = output or Path(f"fars_{state}_{year}.png")
    output.parent.mkdir(parents=True, exist_ok=True)
    ax.figure.savefig(output, dpi=dpi, bbox_inches="tight")
    console.print(f"\n  Map: [cyan]{output}[/cyan]")
    console.print("\n[green]✓ Map complete.[/green]\n")


# ─────────────────────────────────────────────────────────────────────────────
#  years
# ─────────────────────────────────────────────────────────────────────────────

@app.command()
def years(
    data_dir: Path = typer.Option(
        ".", "--data-dir", "-d",
        help="Directory to scan for accident_<year>.csv.bz2 files.",
        file_okay=False,
    ),
):
    """List the years with a data file in the data directory."""
    from fars.io.readers import available_years, make_filename

    try:
        found = available_years(data_dir)
    except FileNotFoundError as exc:
        raise _fail(exc) from exc

    if not found:
        console.print(f"\n[yellow]⚠ No accident files in {data_dir}[/yellow]\n")
        return

    table = Table(title=f"Accident files in {data_dir}")
    table.add_column("Year", style="cyan")
    table.add_column("File")
    for y in found:
        table.add_row(str(y), make_filename(y))
    console.print(table)


# ─────────────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app()
