import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from scorecard.data import ACTCMMID, SAT_AVG, load_scorecard, numeric_column
from scorecard.ops import summarize


SCORE_COLORS = {
    SAT_AVG: "#1f77b4",   # Blue
    ACTCMMID: "#ff7f0e",  # Orange
}

SCORE_NAMES = {
    SAT_AVG: "Average SAT",
    ACTCMMID: "Midpoint ACT",
}


def plot_scores(input_csv: Path, output_png: Path, bins: int = 40) -> None:
    """Histogram of each score column, with its median marked."""
    df = load_scorecard(input_csv)
    columns = [SAT_AVG, ACTCMMID]
    fig, axes = plt.subplots(1, len(columns), figsize=(6 * len(columns), 4))
    for ax, column in zip(axes, columns):
        values = numeric_column(df, column)
        stats = summarize(values)
        ax.hist(values.dropna(), bins=bins, color=SCORE_COLORS[column], alpha=0.8)
        ax.axvline(stats.median, color="black", linestyle="--", linewidth=1, label=f"median {stats.median:g}")
        ax.set_title(f"{SCORE_NAMES[column]} ({stats.n - stats.n_missing} institutions)")
        ax.set_xlabel(column)
        ax.set_ylabel("Institutions")
        ax.legend()
    fig.tight_layout()
    output_png.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(output_png, dpi=150)
    plt.close(fig)
    print(f"Saved plot to {output_png}")


def main() -> None:
    parser = argparse.ArgumentParser(description="Plot SAT/ACT score distributions")
    parser.add_argument("--input", required=True, help="Scorecard CSV")
    parser.add_argument("--output", default="results/scores.png")
    parser.add_argument("--bins", type=int, default=40)
    args = parser.parse_args()

    input_csv = Path(args.input)
    if not input_csv.exists():
        print(f"Error: {input_csv} not found", file=sys.stderr)
        sys.exit(1)
    plot_scores(input_csv, Path(args.output), bins=args.bins)


if __name__ == "__main__":
    main()
