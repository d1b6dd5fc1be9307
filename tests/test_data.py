from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from scorecard.data import (
	_coerce_blank_numeric,
	check_loaded,
	default_input_path,
	get_column,
	load_scorecard,
	numeric_column,
)


def test_null_is_missing_but_na_text_is_kept(scorecard_csv: Path):
	df = load_scorecard(scorecard_csv)
	assert np.isnan(df.loc[1, "SAT_AVG"])
	assert df.loc[1, "NOTES"] == "NA"


def test_blank_is_missing_only_in_numeric_columns(scorecard_csv: Path):
	df = load_scorecard(scorecard_csv)
	assert pd.api.types.is_numeric_dtype(df["ACTCMMID"])
	assert df["ACTCMMID"].isna().tolist() == [False, True, True, False]
	assert df.loc[0, "NOTES"] == ""


def test_load_report(scorecard_csv: Path):
	report = check_loaded(load_scorecard(scorecard_csv))
	assert report.is_data_frame
	assert (report.n_rows, report.n_cols) == (4, 6)
	# SAT_AVG: 1 NULL; ACTCMMID: 1 NULL + 1 blank
	assert report.n_missing == 3
	assert report.n_cells == 24
	assert report.missing_fraction == pytest.approx(0.125)


def test_load_report_on_non_frame():
	assert not check_loaded([1, 2, 3]).is_data_frame


def test_custom_na_strings(tmp_path: Path):
	path = tmp_path / "alt.csv"
	path.write_text("INSTNM,SAT_AVG\nA,1100\nB,PrivacySuppressed\n")
	df = load_scorecard(path, na_strings=["NULL", "PrivacySuppressed"])
	assert df["SAT_AVG"].isna().tolist() == [False, True]


def test_tab_delimiter(tmp_path: Path):
	path = tmp_path / "scores.tsv"
	path.write_text("INSTNM\tSAT_AVG\nA\t1100\nB\tNULL\n")
	df = load_scorecard(path, delimiter="\\t")
	assert df["SAT_AVG"].isna().sum() == 1


def test_missing_file(tmp_path: Path):
	with pytest.raises(FileNotFoundError):
		load_scorecard(tmp_path / "nope.csv")


def test_empty_file(tmp_path: Path):
	path = tmp_path / "empty.csv"
	path.write_text("")
	with pytest.raises(ValueError, match="empty"):
		load_scorecard(path)


def test_unknown_column_suggests_close_match(scorecard_csv: Path):
	df = load_scorecard(scorecard_csv)
	with pytest.raises(KeyError, match="SAT_AVG"):
		get_column(df, "SAT_AVE")


def test_numeric_column_coerces_suppressed_values(tmp_path: Path, capsys):
	path = tmp_path / "supp.csv"
	path.write_text("INSTNM,SAT_AVG\nA,1200\nB,PrivacySuppressed\nC,NULL\n")
	df = load_scorecard(path)
	col = numeric_column(df, "SAT_AVG")
	assert col.iloc[0] == 1200
	assert col.isna().tolist() == [False, True, True]
	assert "1 non-numeric values" in capsys.readouterr().err


def test_default_input_path_from_env(monkeypatch):
	monkeypatch.setenv("SCORECARD_CSV", "/data/scorecard.csv")
	assert default_input_path() == Path("/data/scorecard.csv")
	monkeypatch.delenv("SCORECARD_CSV")
	assert default_input_path() == Path("MERGED2013_PP.csv")


def test_blank_cells_in_string_dtype_columns():
	# pandas may hand text back as a string dtype rather than object
	df = pd.DataFrame({
		"ACTCMMID": pd.array(["33", "", None, "32"], dtype="string"),
		"NOTES": pd.array(["", "ok", None, "PrivacySuppressed"], dtype="string"),
	})
	df = _coerce_blank_numeric(df)
	assert pd.api.types.is_numeric_dtype(df["ACTCMMID"])
	assert df["ACTCMMID"].isna().tolist() == [False, True, True, False]
	assert df["ACTCMMID"].iloc[0] == 33
	assert df.loc[0, "NOTES"] == ""
	assert check_loaded(df).n_missing == 3


def test_numeric_column_rejects_text_column(scorecard_csv: Path):
	df = load_scorecard(scorecard_csv)
	with pytest.raises(TypeError, match="not numeric"):
		numeric_column(df, "INSTNM")
