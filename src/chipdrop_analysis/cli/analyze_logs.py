from __future__ import annotations

import argparse
from pathlib import Path

from ..io.load_logs import LoadSpec, load_game_logs
from ..metrics.summarize import column_frequency, game_results, opening_moves, outcome_summary
from ..plots.chart import plot_column_frequency, plot_game_lengths


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Summarize saved Connect-4 move logs.")
    ap.add_argument("--saves-dir", type=str, default=".", help="Directory containing saved games")
    ap.add_argument("--pattern", type=str, default="*.txt", help="Glob pattern for save files")

    ap.add_argument("--outdir", type=str, default="figures", help="Directory for saving plots")
    ap.add_argument("--show", action="store_true", help="Show plots instead of saving")
    ap.add_argument("--no-plots", action="store_true", help="Print tables only")

    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_argparser()
    args = ap.parse_args(argv)

    saves_dir = Path(args.saves_dir)
    df = load_game_logs(LoadSpec(saves_dir=saves_dir, pattern=args.pattern))

    print(f"\nLoaded: {saves_dir}")
    print(f"Games: {df['game'].nunique():,}  Moves: {len(df):,}")

    results = game_results(df)
    freq = column_frequency(df)

    print("\n=== Outcomes ===")
    print(outcome_summary(results).to_string())

    print("\n=== Column frequency ===")
    print(freq.to_string(float_format=lambda x: f"{x:.3f}"))

    openings = opening_moves(df)
    if not openings.empty:
        print("\n=== Opening column ===")
        print(openings.to_string())

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    saved = [
        plot_column_frequency(freq, outdir, show=args.show),
        plot_game_lengths(results, outdir, show=args.show),
    ]

    if not args.show:
        for p in saved:
            if p is not None:
                print(f"Saved figure: {p}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
