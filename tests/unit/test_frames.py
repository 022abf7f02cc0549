from __future__ import annotations

import numpy as np
import pandas as pd

from sheetlens.excel.frames import normalize_columns, sheet_from_frame, to_cell


def test_normalize_columns_blank_unnamed_and_duplicates():
    raw = [" Name ", "", "Unnamed: 2", "Name", None, "Name"]
    assert normalize_columns(raw) == ["Name", "Column 2", "Column 3", "Name (2)", "Column 5", "Name (3)"]


def test_to_cell_narrows_numpy_and_missing_values():
    assert to_cell(np.int64(7)) == 7
    assert type(to_cell(np.int64(7))) is int
    assert to_cell(np.float64(1.5)) == 1.5
    assert to_cell(np.bool_(True)) is True
    assert to_cell(float("nan")) is None
    assert to_cell(pd.NA) is None
    assert to_cell(pd.NaT) is None
    assert to_cell(None) is None


def test_to_cell_timestamps_become_iso_text():
    assert to_cell(pd.Timestamp("2024-01-02 03:04:05")) == "2024-01-02T03:04:05"
    assert to_cell(np.datetime64("2024-01-02")) == "2024-01-02T00:00:00"


def test_to_cell_null_sentinels():
    assert to_cell(" n/a ", {"N/A"}) is None
    assert to_cell("n/a") == "n/a"
    assert to_cell("", {"N/A"}) == ""


def test_sheet_from_frame_drops_empty_rows_and_omits_nulls():
    df = pd.DataFrame(
        {
            "Name": ["Ann", None, "Bob"],
            "Age": [30, np.nan, np.nan],
            "": ["x", None, "NULL"],
        }
    )
    sheet = sheet_from_frame(df, sheet_id=3, name="People", project_id=1, null_sentinels={"null"})

    assert sheet.columns == ["Name", "Age", "Column 3"]
    assert sheet.data == [{"Name": "Ann", "Age": 30.0, "Column 3": "x"}, {"Name": "Bob"}]
    assert sheet.project_id == 1
    assert sheet.cell(1, "Age") is None
