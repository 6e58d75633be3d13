"""
State-level accident maps.

The renderer draws onto an explicit matplotlib ``Axes``.  When the caller
does not supply one, a standalone ``Figure`` is created, so pyplot's global
"current figure" is never touched.

Unknown coordinates are encoded in FARS as out-of-range values; rows with
``LONGITUD > 900`` or ``LATITUDE > 90`` are excluded from both the plotted
extent and the points.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import geopandas as gpd
import numpy as np
import pandas as pd
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from fars.config.constants import (
    BOUNDARY_COLOR,
    BOUNDARY_LINEWIDTH,
    COL_LATITUDE,
    COL_LONGITUDE,
    COL_STATE,
    DEGENERATE_RANGE_PAD,
    LATITUDE_SENTINEL,
    LONGITUDE_SENTINEL,
    MAP_CRS,
    MARKER,
    MARKER_COLOR,
    MARKER_SIZE,
    NO_ACCIDENTS_MESSAGE,
    STATE_NAMES,
)
from fars.errors import InvalidStateError
from fars.io.readers import Year, coerce_year, fars_read, year_path

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════════════════════════
# Row selection
# ═══════════════════════════════════════════════════════════════════════════════

def coerce_state(state_num) -> int:
    """Return *state_num* as an ``int`` or raise ``InvalidStateError``.

    Numeric strings are accepted and truncated (``"50.0"`` → ``50``).
    """
    value = state_num
    try:
        if isinstance(value, str):
            value = float(value.strip())
        return int(value)
    except (TypeError, ValueError, OverflowError):
        raise InvalidStateError(state_num) from None


def filter_state(df: pd.DataFrame, state_num) -> pd.DataFrame:
    """Return a copy of the rows whose ``STATE`` equals *state_num*.

    Raises
    ------
    InvalidStateError
        If *state_num* is not an integer or does not occur in ``STATE``.
    """
    code = coerce_state(state_num)
    if code not in set(df[COL_STATE].dropna().unique()):
        raise InvalidStateError(code)
    return df.loc[df[COL_STATE] == code].copy()


def sanitize_coordinates(df: pd.DataFrame) -> pd.DataFrame:
    """Replace sentinel coordinates with ``NaN`` on a copy of *df*."""
    out = df.copy()
    out[COL_LONGITUDE] = out[COL_LONGITUDE].mask(out[COL_LONGITUDE] > LONGITUDE_SENTINEL)
    out[COL_LATITUDE] = out[COL_LATITUDE].mask(out[COL_LATITUDE] > LATITUDE_SENTINEL)
    return out


def plottable_points(df: pd.DataFrame) -> pd.DataFrame:
    """Rows of a sanitised frame that have both coordinates."""
    return df.dropna(subset=[COL_LONGITUDE, COL_LATITUDE])


def _axis_range(values: pd.Series) -> tuple[float, float]:
    lo = float(np.nanmin(values))
    hi = float(np.nanmax(values))
    if lo == hi:
        lo -= DEGENERATE_RANGE_PAD
        hi += DEGENERATE_RANGE_PAD
    return lo, hi


# ═══════════════════════════════════════════════════════════════════════════════
# Base map
# ═══════════════════════════════════════════════════════════════════════════════

def load_boundaries(path: str | Path) -> gpd.GeoDataFrame:
    """Read state boundary polygons for use as a base map.

    Parameters
    ----------
    path : str or Path
        Any vector file ``geopandas.read_file`` understands, e.g. the US
        Census cartographic state boundaries shapefile or a GeoJSON export.

    Returns
    -------
    gpd.GeoDataFrame — in longitude/latitude (EPSG:4326).
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Boundary file not found: {path}")

    gdf = gpd.read_file(path)
    if gdf.crs is not None and gdf.crs != MAP_CRS:
        gdf = gdf.to_crs(MAP_CRS)
    return gdf


# ═══════════════════════════════════════════════════════════════════════════════
# Rendering
# ═══════════════════════════════════════════════════════════════════════════════

def draw_accidents(
    points: pd.DataFrame,
    ax: Axes,
    *,
    extent_from: Optional[pd.DataFrame] = None,
    boundaries: Optional[gpd.GeoDataFrame] = None,
    title: Optional[str] = None,
) -> Axes:
    """Scatter accident locations on *ax* over optional state outlines.

    The view is limited to the longitude and latitude ranges of
    *extent_from* (defaults to *points*), each computed over its valid
    values only.
    """
    source = points if extent_from is None else extent_from

    if boundaries is not None:
        boundaries.boundary.plot(
            ax=ax, color=BOUNDARY_COLOR, linewidth=BOUNDARY_LINEWIDTH
        )

    ax.scatter(
        points[COL_LONGITUDE],
        points[COL_LATITUDE],
        s=MARKER_SIZE,
        marker=MARKER,
        color=MARKER_COLOR,
    )
    ax.set_xlim(*_axis_range(source[COL_LONGITUDE]))
    ax.set_ylim(*_axis_range(source[COL_LATITUDE]))
    ax.set_axis_off()
    if title:
        ax.set_title(title)
    return ax


def fars_map_state(
    state_num,
    year: Year,
    *,
    ax: Optional[Axes] = None,
    boundaries: Optional[gpd.GeoDataFrame] = None,
    data_dir: Optional[str | Path] = None,
) -> Optional[Axes]:
    """Plot every accident in one state for one year.

    Parameters
    ----------
    state_num : int or str
        FARS ``STATE`` code (FIPS), e.g. ``6`` for California.
    year : int, float or str
        Year of the data file to load.
    ax : matplotlib.axes.Axes, optional
        Drawing target.  A new ``Figure`` with a single ``Axes`` is created
        if omitted; reach it through ``ax.figure``.
    boundaries : gpd.GeoDataFrame, optional
        State outlines to draw beneath the points (see
        :func:`load_boundaries`).
    data_dir : str or Path, optional
        Directory holding the yearly files.

    Returns
    -------
    Axes or None
        ``None`` when there is nothing to plot.

    Raises
    ------
    FileNotFoundError
        If the year's file does not exist.
    InvalidStateError
        If *state_num* does not occur in the year's ``STATE`` column.
    """
    data = fars_read(year_path(year, data_dir))
    subset = filter_state(data, state_num)
    code = coerce_state(state_num)

    if subset.empty:
        logger.info(NO_ACCIDENTS_MESSAGE, extra={"state": code, "year": year})
        return None

    clean = sanitize_coordinates(subset)
    points = plottable_points(clean)
    if points.empty:
        logger.info(NO_ACCIDENTS_MESSAGE, extra={"state": code, "year": year})
        return None

    if ax is None:
        ax = Figure().subplots()

    name = STATE_NAMES.get(code, f"STATE {code}")
    title = f"{name}, {coerce_year(year)} ({len(points):,} accidents)"
    return draw_accidents(
        points, ax, extent_from=clean, boundaries=boundaries, title=title
    )
