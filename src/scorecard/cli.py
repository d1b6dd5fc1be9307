import argparse
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from .data import (
	ACTCMMID,
	DEFAULT_NA_STRINGS,
	INSTNM,
	SAT_AVG,
	check_loaded,
	default_input_path,
	get_column,
	load_scorecard,
	numeric_column,
)
from .ops import list_hi_to_low, list_over_x, summarize
from .report import format_load_report, format_over, format_ranking, format_summary


def _load(args) -> pd.DataFrame:
	path = Path(args.input) if args.input else default_input_path()
	print(f"[load] Reading {path}", file=sys.stderr)
	return load_scorecard(path, na_strings=args.na_strings, delimiter=args.delimiter)


def _print_profile(profiler: Dict[str, float], total_time: float) -> None:
	print("\nProfiling:")
	print(f"  Total time: {total_time:.3f}s")
	print("  Time breakdown:")
	for stage, stage_time in sorted(profiler.items(), key=lambda x: x[1], reverse=True):
		percentage = (stage_time / total_time) * 100 if total_time > 0 else 0.0
		print(f"    {stage:20s}: {stage_time:7.3f}s ({percentage:5.1f}%)")


def inspect_file(df: pd.DataFrame) -> None:
	print(format_load_report(check_loaded(df)))


def rank_column(
	df: pd.DataFrame,
	column: str,
	label: Optional[str] = None,
	top: Optional[int] = None,
	values: Optional[pd.Series] = None,
) -> None:
	values = numeric_column(df, column) if values is None else values
	ranked = list_hi_to_low(values)
	labels = get_column(df, label) if label else None
	print(format_ranking(ranked, labels=labels, top=top))


def summarize_column(df: pd.DataFrame, column: str, values: Optional[pd.Series] = None) -> None:
	values = numeric_column(df, column) if values is None else values
	print(format_summary(summarize(values)))


def over_threshold(
	df: pd.DataFrame,
	column: str,
	threshold: float,
	label: str = INSTNM,
	values: Optional[pd.Series] = None,
) -> None:
	values = numeric_column(df, column) if values is None else values
	selected = list_over_x(get_column(df, label), values, threshold)
	print(format_over(selected, column, threshold))


def explore(
	df: pd.DataFrame,
	sat_threshold: float = 1400,
	act_threshold: float = 32,
	top: Optional[int] = None,
	profiler: Optional[Dict[str, float]] = None,
) -> None:
	"""
	Walk through the dataset: check the load, then look at SAT and ACT scores
	one after the other (ranking, summary, institutions at or above a threshold).
	"""
	profiler = profiler if profiler is not None else {}

	stage_start = time.time()
	print("== Load check ==")
	inspect_file(df)
	profiler["inspect"] = time.time() - stage_start

	sections = [("SAT", SAT_AVG, sat_threshold), ("ACT", ACTCMMID, act_threshold)]
	for name, column, threshold in sections:
		stage_start = time.time()
		values = numeric_column(df, column)
		print(f"\n== {name} scores ({column}), high to low ==")
		rank_column(df, column, top=top, values=values)
		print(f"\n== {name} summary ==")
		summarize_column(df, column, values=values)
		print(f"\n== Institutions with {column} >= {threshold:g} ==")
		over_threshold(df, column, threshold, values=values)
		profiler[name.lower()] = time.time() - stage_start


def _positive_int(text: str) -> int:
	try:
		n = int(text)
	except ValueError:
		raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
	if n < 1:
		raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
	return n


def _add_common(p: argparse.ArgumentParser) -> None:
	p.add_argument("--input", default=None, help="Scorecard CSV (default: $SCORECARD_CSV or MERGED2013_PP.csv)")
	p.add_argument("--delimiter", default=",")
	p.add_argument("--na-strings", nargs="+", default=list(DEFAULT_NA_STRINGS), help="Cell values read as missing")


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(prog="scorecard", description="Explore SAT/ACT scores in the College Scorecard data")
	sub = parser.add_subparsers(dest="cmd", required=True)

	pi = sub.add_parser("inspect", help="Check the loaded data: shape and missing values")
	_add_common(pi)

	pr = sub.add_parser("rank", help="List a column's values high to low, missing values dropped")
	_add_common(pr)
	pr.add_argument("--column", required=True)
	pr.add_argument("--label", default=None, help="Column printed next to each value (e.g. INSTNM)")
	pr.add_argument("--top", type=_positive_int, default=None, help="Only show the first N values")

	ps = sub.add_parser("summary", help="Min/quartiles/mean/max of a numeric column")
	_add_common(ps)
	ps.add_argument("--column", required=True)

	po = sub.add_parser("over", help="List labels whose column value is >= threshold")
	_add_common(po)
	po.add_argument("--column", required=True)
	po.add_argument("--threshold", type=float, required=True)
	po.add_argument("--label", default=INSTNM)

	pe = sub.add_parser("explore", help="Full SAT/ACT walkthrough")
	_add_common(pe)
	pe.add_argument("--sat-threshold", type=float, default=1400)
	pe.add_argument("--act-threshold", type=float, default=32)
	pe.add_argument("--top", type=_positive_int, default=None, help="Only show the first N ranked values")
	pe.add_argument("--profile", action="store_true", help="Print per-stage timings")

	return parser


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	args = parser.parse_args(argv)

	total_start = time.time()
	profiler: Dict[str, float] = {}
	try:
		stage_start = time.time()
		df = _load(args)
		profiler["load_csv"] = time.time() - stage_start

		if args.cmd == "inspect":
			inspect_file(df)
		elif args.cmd == "rank":
			rank_column(df, args.column, label=args.label, top=args.top)
		elif args.cmd == "summary":
			summarize_column(df, args.column)
		elif args.cmd == "over":
			over_threshold(df, args.column, args.threshold, label=args.label)
		elif args.cmd == "explore":
			explore(df, args.sat_threshold, args.act_threshold, top=args.top, profiler=profiler)
			if args.profile:
				_print_profile(profiler, time.time() - total_start)
		else:
			parser.print_help()
			return 2
	except (FileNotFoundError, KeyError, TypeError, ValueError) as e:
		# KeyError str() wraps the message in quotes
		msg = e.args[0] if isinstance(e, KeyError) and e.args else str(e)
		print(f"error: {msg}", file=sys.stderr)
		return 2
	return 0


if __name__ == "__main__":
	sys.exit(main())
