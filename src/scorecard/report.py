import math
from typing import List, Optional

import numpy as np
import pandas as pd

from .data import LoadReport
from .ops import ScoreSummary


def _format_together(values: List[float], digits: int = 4) -> List[str]:
	"""
	Format numbers with one shared count of decimals, like R's format(x, digits=).

	Each value asks for as many decimals as it needs to show `digits` significant
	digits; all values are then printed with the largest such count.
	"""
	decimals = 0
	for x in values:
		if x is None or math.isnan(x) or x == 0:
			continue
		text = np.format_float_positional(float(f"{x:.{digits}g}"), trim="-")
		if "." in text:
			decimals = max(decimals, len(text.split(".")[1]))
	return ["NA" if x is None or math.isnan(x) else f"{x:.{decimals}f}" for x in values]


def _format_value(x) -> str:
	if isinstance(x, (float, np.floating)):
		if math.isnan(x):
			return "NA"
		if float(x).is_integer():
			return str(int(x))
		return np.format_float_positional(float(x), trim="-")
	return str(x)


def format_load_report(report: LoadReport) -> str:
	lines = [
		f"Data frame: {'yes' if report.is_data_frame else 'no'}",
		f"Dimensions: {report.n_rows} rows x {report.n_cols} columns",
		f"Missing values: {report.n_missing} of {report.n_cells} ({100.0 * report.missing_fraction:.1f}%)",
	]
	return "\n".join(lines)


def format_summary(summary: ScoreSummary, digits: int = 4) -> str:
	"""Two-line table in the layout of R's summary() for a numeric vector."""
	items = summary.as_dict()
	n_missing = items.pop("NA's")
	headers = list(items)
	values = _format_together([float(v) for v in items.values()], digits)
	if n_missing:
		headers.append("NA's")
		values.append(str(n_missing))
	widths = [max(len(h), len(v)) for h, v in zip(headers, values)]
	head = " ".join(h.rjust(w) for h, w in zip(headers, widths))
	body = " ".join(v.rjust(w) for v, w in zip(values, widths))
	return f"{head}\n{body}"


def format_ranking(ranked: pd.Series, labels: Optional[pd.Series] = None, top: Optional[int] = None) -> str:
	"""
	One ranked value per line. With `labels`, each value is followed by the label
	found at the same index (`ranked` keeps the source index).
	"""
	if top is not None and top < 1:
		raise ValueError(f"top must be at least 1, got {top}")
	shown = ranked if top is None else ranked.iloc[:top]
	if shown.empty:
		return "(no values)"
	rank_width = len(str(len(shown)))
	value_strs = [_format_value(v) for v in shown.tolist()]
	value_width = max(len(s) for s in value_strs)
	lines = []
	for i, (idx, text) in enumerate(zip(shown.index, value_strs), start=1):
		line = f"{str(i).rjust(rank_width)}. {text.rjust(value_width)}"
		if labels is not None:
			line += f"  {labels.loc[idx]}"
		lines.append(line)
	if len(shown) < len(ranked):
		lines.append(f"... {len(ranked) - len(shown)} more")
	return "\n".join(lines)


def format_over(selected: pd.Series, column: str, threshold: float) -> str:
	lines = [_format_value(v) for v in selected.tolist()]
	lines.append(f"{len(selected)} with {column} >= {_format_value(float(threshold))}")
	return "\n".join(lines)
