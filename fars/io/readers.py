"""
Readers for FARS accident files.

File naming, compression and column validation are centralised here.
"""

from __future__ import annotations

import errno
import re
from pathlib import Path
from typing import Iterable, Optional, Union

import pandas as pd

from fars.config.constants import (
    CSV_ENCODING,
    FILENAME_GLOB,
    FILENAME_PATTERN,
    FILENAME_TEMPLATE,
    REQUIRED_COLUMNS,
)
from fars.errors import MissingColumnsError

Year = Union[int, float, str]


def make_filename(year: Year) -> str:
    """Return the FARS file name for *year*.

    Parameters
    ----------
    year : int, float or str
        A four-digit year.  Floats are truncated (``2014.7`` → ``2014``) and
        numeric strings are accepted (``"2013"``).

    Returns
    -------
    str — e.g. ``"accident_2013.csv.bz2"``.

    Raises
    ------
    ValueError
        If *year* is not numeric.
    """
    return FILENAME_TEMPLATE % coerce_year(year)


def coerce_year(year: Year) -> int:
    """Truncate *year* to an ``int``, accepting numeric strings."""
    if isinstance(year, str):
        try:
            year = float(year.strip())
        except ValueError:
            raise ValueError(f"invalid year: {year!r}") from None
    try:
        return int(year)
    except (TypeError, ValueError, OverflowError):
        raise ValueError(f"invalid year: {year!r}") from None


def fars_read(
    filename: str | Path,
    *,
    required: Iterable[str] = REQUIRED_COLUMNS,
) -> pd.DataFrame:
    """Read a FARS accident file into a DataFrame.

    Compression is inferred from the extension, so ``.csv.bz2`` files are
    decompressed transparently.  Nothing is cached: every call re-reads the
    file from disk.

    Parameters
    ----------
    filename : str or Path
        Absolute or relative path to the ``.csv`` or ``.csv.bz2`` file.
    required : iterable of str, optional
        Columns that must be present.  Defaults to ``MONTH``, ``STATE``,
        ``LONGITUD`` and ``LATITUDE``.  Pass ``()`` to skip the check.

    Returns
    -------
    pd.DataFrame

    Raises
    ------
    FileNotFoundError
        If *filename* does not exist.
    MissingColumnsError
        If any of the *required* columns is absent.
    """
    path = Path(filename)
    if not path.exists():
        raise FileNotFoundError(
            errno.ENOENT, f"file '{filename}' does not exist", str(filename)
        )

    df = pd.read_csv(path, compression="infer", low_memory=False)

    missing = [col for col in required if col not in df.columns]
    if missing:
        raise MissingColumnsError(filename, missing)

    return df


def year_path(year: Year, data_dir: Optional[str | Path] = None) -> Path:
    """Return the path of *year*'s file, optionally inside *data_dir*."""
    name = make_filename(year)
    if data_dir is None:
        return Path(name)
    return Path(data_dir) / name


def available_years(data_dir: str | Path = ".") -> list[int]:
    """List the years that have an accident file in *data_dir*.

    Parameters
    ----------
    data_dir : str or Path
        Directory to scan.  Only files matching ``accident_<YYYY>.csv.bz2``
        are considered.

    Returns
    -------
    list[int] — sorted ascending.
    """
    data_dir = Path(data_dir)
    if not data_dir.is_dir():
        raise FileNotFoundError(
            errno.ENOENT, f"directory '{data_dir}' does not exist", str(data_dir)
        )

    pattern = re.compile(FILENAME_PATTERN)
    years = []
    for path in data_dir.glob(FILENAME_GLOB):
        match = pattern.match(path.name)
        if match and path.is_file():
            years.append(int(match.group(1)))
    return sorted(years)


def save_csv(
    df: pd.DataFrame,
    path: str | Path,
    *,
    encoding: str = CSV_ENCODING,
) -> Path:
    """Write a DataFrame to CSV.

    Parameters
    ----------
    df : pd.DataFrame
    path : str or Path
    encoding : str, optional

    Returns
    -------
    Path — the written file path.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, encoding=encoding)
    return path
