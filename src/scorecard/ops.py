from dataclasses import dataclass
from typing import Any, Iterable, Union

import numpy as np
import pandas as pd


ArrayLike = Union[pd.Series, np.ndarray, Iterable[Any]]


@dataclass
class ScoreSummary:
	minimum: float
	q1: float
	median: float
	mean: float
	q3: float
	maximum: float
	n_missing: int
	n: int

	def as_dict(self) -> dict:
		return {
			"Min.": self.minimum,
			"1st Qu.": self.q1,
			"Median": self.median,
			"Mean": self.mean,
			"3rd Qu.": self.q3,
			"Max.": self.maximum,
			"NA's": self.n_missing,
		}


def _as_series(v: ArrayLike) -> pd.Series:
	if isinstance(v, pd.Series):
		return v
	return pd.Series(v if isinstance(v, np.ndarray) else list(v))


def list_hi_to_low(v: ArrayLike) -> pd.Series:
	"""
	Values of `v` sorted high to low with missing values dropped.

	The index of the result is the original index of each value, so it can be
	used to look up the paired row (e.g. the institution name).
	"""
	s = _as_series(v)
	# stable sort keeps tied values in input order
	return s.dropna().sort_values(ascending=False, kind="stable")


def list_over_x(vlist: ArrayLike, vtest: ArrayLike, x: float) -> pd.Series:
	"""
	Elements of `vlist` whose paired `vtest` value is >= x and not missing.
	Pairing is positional; index labels are ignored.
	"""
	values = _as_series(vlist)
	test = _as_series(vtest)
	if len(values) != len(test):
		raise ValueError(f"vlist and vtest must have same length ({len(values)} != {len(test)})")
	test_arr = pd.to_numeric(test, errors="raise").to_numpy(dtype=float, na_value=np.nan)
	with np.errstate(invalid="ignore"):
		mask = (test_arr >= x) & ~np.isnan(test_arr)
	return values[mask]


def summarize(v: ArrayLike) -> ScoreSummary:
	"""Six-number summary plus missing count, quartiles by linear interpolation."""
	s = _as_series(v)
	if len(s) and not pd.api.types.is_numeric_dtype(s):
		# all-missing object columns are still summarizable
		if s.notna().any():
			raise TypeError(f"summarize needs numeric values, got dtype {s.dtype}")
		s = s.astype(float)
	arr = s.to_numpy(dtype=float, na_value=np.nan)
	present = arr[~np.isnan(arr)]
	n_missing = int(arr.size - present.size)
	if present.size == 0:
		nan = float("nan")
		return ScoreSummary(nan, nan, nan, nan, nan, nan, n_missing, int(arr.size))
	q1, median, q3 = np.percentile(present, [25, 50, 75])
	return ScoreSummary(
		minimum=float(present.min()),
		q1=float(q1),
		median=float(median),
		mean=float(present.mean()),
		q3=float(q3),
		maximum=float(present.max()),
		n_missing=n_missing,
		n=int(arr.size),
	)
