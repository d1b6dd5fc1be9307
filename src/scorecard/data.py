import difflib
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

import pandas as pd


INSTNM = "INSTNM"  # school name
UNITID = "UNITID"  # school id
STABBR = "STABBR"  # state
LATITUDE = "LATITUDE"
LONGITUDE = "LONGITUDE"
ADM_RATE = "ADM_RATE"  # admission rate
SAT_AVG = "SAT_AVG"  # mean SAT
ACTCMMID = "ACTCMMID"  # midpoint ACT

COLUMNS_OF_INTEREST = [INSTNM, UNITID, STABBR, LATITUDE, LONGITUDE, ADM_RATE, SAT_AVG, ACTCMMID]

DEFAULT_CSV = "MERGED2013_PP.csv"
DEFAULT_NA_STRINGS = ("NULL",)


@dataclass
class LoadReport:
	is_data_frame: bool
	n_rows: int
	n_cols: int
	n_missing: int

	@property
	def n_cells(self) -> int:
		return self.n_rows * self.n_cols

	@property
	def missing_fraction(self) -> float:
		return self.n_missing / self.n_cells if self.n_cells else 0.0


def default_input_path() -> Path:
	return Path(os.environ.get("SCORECARD_CSV") or DEFAULT_CSV)


def _is_blank(v) -> bool:
	return bool(pd.isna(v)) or (isinstance(v, str) and not v.strip())


def _coerce_blank_numeric(df: pd.DataFrame) -> pd.DataFrame:
	# Blank cells stay "" in text columns but are missing in numeric ones.
	# Text may come back as object or as a string dtype depending on pandas.
	for c in df.columns:
		col = df[c]
		if pd.api.types.is_numeric_dtype(col) or pd.api.types.is_bool_dtype(col):
			continue
		blank = col.astype(object).map(_is_blank).astype(bool).to_numpy()
		if blank.all():
			if col.notna().any():
				df[c] = pd.Series(float("nan"), index=col.index)
			continue
		try:
			converted = pd.to_numeric(col[~blank].astype(object))
		except (ValueError, TypeError):
			continue
		out = pd.Series(float("nan"), index=col.index)
		out[~blank] = converted.to_numpy(dtype=float)
		df[c] = out
	return df


def load_scorecard(
	path: Union[str, Path],
	na_strings: Sequence[str] = DEFAULT_NA_STRINGS,
	delimiter: str = ",",
) -> pd.DataFrame:
	"""
	Read a scorecard CSV with a header row.

	Only the strings in `na_strings` are read as missing; "NA", "N/A" and friends
	are kept as text. Blank cells are missing only in numeric columns.
	"""
	path = Path(path)
	if not path.exists():
		raise FileNotFoundError(f"No such file: {path}")
	if delimiter == "\\t":
		delimiter = "\t"
	try:
		df = pd.read_csv(
			path,
			sep=delimiter,
			header=0,
			na_values=list(na_strings),
			keep_default_na=False,
			low_memory=False,
		)
	except pd.errors.EmptyDataError:
		raise ValueError(f"{path} is empty") from None
	return _coerce_blank_numeric(df)


def check_loaded(df) -> LoadReport:
	"""Does the loaded object look like the dataset we expect, and how much of it is missing?"""
	if not isinstance(df, pd.DataFrame):
		return LoadReport(is_data_frame=False, n_rows=0, n_cols=0, n_missing=0)
	n_rows, n_cols = df.shape
	return LoadReport(
		is_data_frame=True,
		n_rows=int(n_rows),
		n_cols=int(n_cols),
		n_missing=int(df.isna().to_numpy().sum()),
	)


def get_column(df: pd.DataFrame, name: str) -> pd.Series:
	if name not in df.columns:
		close = difflib.get_close_matches(name, [str(c) for c in df.columns], n=3)
		hint = f"; did you mean {', '.join(close)}?" if close else ""
		raise KeyError(f"Column {name!r} not found{hint}")
	return df[name]


def numeric_column(df: pd.DataFrame, name: str) -> pd.Series:
	"""
	Column `name` as numbers; text such as PrivacySuppressed becomes NaN.
	A column with values but no numeric ones at all raises TypeError.
	"""
	col = get_column(df, name)
	if pd.api.types.is_numeric_dtype(col):
		return col
	converted = pd.to_numeric(col.astype(object), errors="coerce")
	if col.notna().any() and converted.isna().all():
		raise TypeError(f"Column {name!r} is not numeric")
	n_coerced = int((converted.isna() & col.notna()).sum())
	if n_coerced:
		print(f"[data] {name}: {n_coerced} non-numeric values treated as missing", file=sys.stderr)
	return converted
