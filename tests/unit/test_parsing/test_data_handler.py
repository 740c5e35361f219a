"""Unit tests for point file loading."""

import numpy as np
import pandas as pd
import pytest

from pysplinelib.parsing.io.data_handler import load_point_data


def _config(path, x_column="x", y_column="y"):
    return {'file_path': str(path), 'x_column': x_column, 'y_column': y_column}


class TestLoadPointData:
    """Test cases for load_point_data."""

    def test_csv_by_name(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1.5,2\n2.5,4\n3.5,3\n")
        x, y = load_point_data(_config(path))
        np.testing.assert_array_equal(x, [1.5, 2.5, 3.5])
        np.testing.assert_array_equal(y, [2.0, 4.0, 3.0])

    def test_csv_by_index(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("a,b,c\n1,9,2\n2,9,4\n")
        x, y = load_point_data(_config(path, 0, 2))
        np.testing.assert_array_equal(x, [1.0, 2.0])
        np.testing.assert_array_equal(y, [2.0, 4.0])

    def test_text_file(self, tmp_path):
        path = tmp_path / "data.txt"
        path.write_text("x y\n1 10\n2 15\n3 12\n")
        x, y = load_point_data(_config(path))
        np.testing.assert_array_equal(y, [10.0, 15.0, 12.0])

    def test_excel_file(self, tmp_path):
        path = tmp_path / "data.xlsx"
        pd.DataFrame({'x': [1.0, 2.0, 3.0], 'y': [10.0, 15.0, 12.0]}).to_excel(path, index=False)
        x, y = load_point_data(_config(path))
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0])

    def test_relative_path_uses_base_dir(self, tmp_path):
        (tmp_path / "data.csv").write_text("x,y\n1,1\n2,2\n")
        x, _ = load_point_data(_config("data.csv"), base_dir=tmp_path)
        assert len(x) == 2

    def test_order_is_kept(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n3,1\n1,2\n2,3\n")
        x, _ = load_point_data(_config(path))
        np.testing.assert_array_equal(x, [3.0, 1.0, 2.0])

    def test_missing_rows_are_dropped(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,1\n2,\n3,3\n4,4\n")
        x, y = load_point_data(_config(path))
        np.testing.assert_array_equal(x, [1.0, 3.0, 4.0])
        np.testing.assert_array_equal(y, [1.0, 3.0, 4.0])


class TestLoadPointDataErrors:
    """Invalid files and configurations."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_point_data(_config(tmp_path / "missing.csv"))

    def test_unsupported_extension(self, tmp_path):
        path = tmp_path / "data.json"
        path.write_text("{}")
        with pytest.raises(ValueError, match="Unsupported file type"):
            load_point_data(_config(path))

    def test_missing_config_keys(self, tmp_path):
        with pytest.raises(ValueError, match="Missing required configuration keys"):
            load_point_data({'file_path': str(tmp_path / "data.csv")})

    def test_unknown_column(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,1\n2,2\n")
        with pytest.raises(ValueError, match="column 'z' not found"):
            load_point_data(_config(path, y_column="z"))

    def test_index_out_of_bounds(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,1\n2,2\n")
        with pytest.raises(ValueError, match="out of bounds"):
            load_point_data(_config(path, 0, 5))

    def test_too_many_missing_values(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,\n2,\n3,\n4,4\n")
        with pytest.raises(ValueError, match="Too many missing values"):
            load_point_data(_config(path))

    def test_too_few_points(self, tmp_path):
        path = tmp_path / "data.csv"
        path.write_text("x,y\n1,1\n")
        with pytest.raises(ValueError, match="Insufficient valid data points"):
            load_point_data(_config(path))
