"""
Per-column profile of a scorecard CSV: dtype, missing count, and ranges of the
columns of interest.

Usage:
    python scripts/analyze_data.py MERGED2013_PP.csv
"""
import sys

import pandas as pd

from scorecard.data import COLUMNS_OF_INTEREST, check_loaded, load_scorecard


def main(path: str) -> None:
    df = load_scorecard(path)
    report = check_loaded(df)
    print(f"Shape: {df.shape}")
    print(f"Missing: {report.n_missing} / {report.n_cells} cells ({100.0 * report.missing_fraction:.2f}%)")

    print(f"\nMost-missing columns:")
    missing = df.isna().sum().sort_values(ascending=False)
    nrows = len(df)
    for c, n in missing.head(20).items():
        pct = 100.0 * n / nrows if nrows > 0 else 0
        print(f"  {str(c):20s}: {n:6d} missing / {nrows:6d} rows ({pct:5.2f}%)")

    print(f"\nColumns of interest:")
    for c in COLUMNS_OF_INTEREST:
        if c not in df.columns:
            print(f"  {c}: (absent)")
        elif pd.api.types.is_numeric_dtype(df[c]):
            print(f"  {c}: min={df[c].min()}, max={df[c].max()}, mean={df[c].mean():.2f}")
        else:
            print(f"  {c}: {df[c].nunique()} distinct values, dtype={df[c].dtype}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    main(sys.argv[1])
