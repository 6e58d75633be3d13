from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest


def write_year(data_dir: Path, year: int, rows: list[dict]) -> Path:
    """Write a bz2-compressed FARS-like accident file for *year*."""
    path = data_dir / f"accident_{year}.csv.bz2"
    pd.DataFrame(rows).to_csv(path, index=False, compression="bz2")
    return path


def accident(month: int, state: int = 50, lon: float = -72.5, lat: float = 44.0, **extra) -> dict:
    row = {
        "ST_CASE": extra.pop("st_case", 500001),
        "STATE": state,
        "MONTH": month,
        "LONGITUD": lon,
        "LATITUDE": lat,
        "FATALS": extra.pop("fatals", 1),
    }
    row.update(extra)
    return row


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """2013: 40 in January, 35 in February.  2014: 50 in January."""
    write_year(
        tmp_path,
        2013,
        [accident(1) for _ in range(40)] + [accident(2) for _ in range(35)],
    )
    write_year(tmp_path, 2014, [accident(1) for _ in range(50)])
    return tmp_path


@pytest.fixture
def map_dir(tmp_path) -> Path:
    """2015 data for Vermont (50, with sentinels), California (6) and
    Montana (30, no row with both coordinates known)."""
    write_year(
        tmp_path,
        2015,
        [
            accident(1, state=50, lon=-72.5, lat=44.0),
            accident(2, state=50, lon=-73.0, lat=44.5),
            accident(3, state=50, lon=999.9999, lat=44.2),
            accident(4, state=50, lon=-72.0, lat=99.9999),
            accident(5, state=6, lon=-120.0, lat=37.0),
            accident(6, state=30, lon=999.9999, lat=99.9999),
            accident(7, state=30, lon=-110.0, lat=99.9999),
        ],
    )
    return tmp_path
