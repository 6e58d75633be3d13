import pandas as pd
import pytest

from fars.errors import MissingColumnsError
from fars.io.readers import (
    available_years,
    fars_read,
    make_filename,
    save_csv,
    year_path,
)

from conftest import accident, write_year


class TestMakeFilename:

    @pytest.mark.parametrize("year", [1975, 2013, 2014, 2015])
    def test_integer_year(self, year):
        assert make_filename(year) == f"accident_{year}.csv.bz2"

    def test_float_is_truncated(self):
        assert make_filename(2014.9) == "accident_2014.csv.bz2"

    def test_numeric_string(self):
        assert make_filename("2013") == "accident_2013.csv.bz2"
        assert make_filename(" 2013.0 ") == "accident_2013.csv.bz2"

    def test_non_numeric_raises(self):
        with pytest.raises(ValueError, match="invalid year"):
            make_filename("twenty-thirteen")

    def test_none_raises(self):
        with pytest.raises(ValueError):
            make_filename(None)


class TestFarsRead:

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "accident_1999.csv.bz2"
        with pytest.raises(FileNotFoundError, match="does not exist") as excinfo:
            fars_read(missing)
        assert excinfo.value.filename == str(missing)

    def test_reads_compressed_file(self, data_dir):
        path = data_dir / "accident_2013.csv.bz2"
        assert path.read_bytes()[:3] == b"BZh"

        df = fars_read(path)
        assert len(df) == 75
        assert list(df.columns) == ["ST_CASE", "STATE", "MONTH", "LONGITUD", "LATITUDE", "FATALS"]
        assert df["MONTH"].tolist() == [1] * 40 + [2] * 35

    def test_accepts_str_path(self, data_dir):
        df = fars_read(str(data_dir / "accident_2014.csv.bz2"))
        assert len(df) == 50

    def test_repeated_reads_are_equal(self, data_dir):
        path = data_dir / "accident_2013.csv.bz2"
        first = fars_read(path)
        second = fars_read(path)
        assert first is not second
        pd.testing.assert_frame_equal(first, second)

    def test_missing_required_column(self, tmp_path):
        path = tmp_path / "accident_2016.csv.bz2"
        pd.DataFrame({"MONTH": [1, 2], "STATE": [1, 1]}).to_csv(path, index=False)

        with pytest.raises(MissingColumnsError) as excinfo:
            fars_read(path)
        assert excinfo.value.missing == ["LONGITUD", "LATITUDE"]
        assert isinstance(excinfo.value, ValueError)

    def test_required_columns_can_be_relaxed(self, tmp_path):
        path = tmp_path / "accident_2016.csv.bz2"
        pd.DataFrame({"MONTH": [1, 2]}).to_csv(path, index=False)

        df = fars_read(path, required=("MONTH",))
        assert df["MONTH"].tolist() == [1, 2]

    def test_plain_csv(self, tmp_path):
        path = tmp_path / "accident_2016.csv"
        pd.DataFrame([accident(3)]).to_csv(path, index=False)
        assert fars_read(path)["MONTH"].tolist() == [3]


def test_year_path(tmp_path):
    assert str(year_path(2013)) == "accident_2013.csv.bz2"
    assert year_path("2013", tmp_path) == tmp_path / "accident_2013.csv.bz2"


class TestAvailableYears:

    def test_lists_sorted_years(self, tmp_path):
        write_year(tmp_path, 2015, [accident(1)])
        write_year(tmp_path, 2013, [accident(1)])
        (tmp_path / "accident_2014.csv").write_text("MONTH\n1\n")
        (tmp_path / "notes.txt").write_text("ignore me")

        assert available_years(tmp_path) == [2013, 2015]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            available_years(tmp_path / "nope")


def test_save_csv_creates_parent(tmp_path):
    out = save_csv(pd.DataFrame({"MONTH": [1]}), tmp_path / "out" / "summary.csv")
    assert out.exists()
    assert pd.read_csv(out)["MONTH"].tolist() == [1]
