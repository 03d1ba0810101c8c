#!/usr/bin/env python3
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import litcal


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "litcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "litcal[diagnostics]"') from e


def days_since_equinox(d: date) -> int:
    """Days since the ecclesiastical equinox, with Mar 21 = 0."""
    return (d - date(d.year, 3, 21)).days


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(days_since_equinox(litcal.compute_easter(int(Y))))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Easter dates (days after March 21).")
    p.add_argument("--from-year", type=int, default=1900)
    p.add_argument("--to-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_scatter", help="Output base name (writes .png)")
    p.add_argument("--histogram", action="store_true", help="Add a frequency histogram panel.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.from_year, args.to_year)

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "axes.linewidth": 0.8,
    })

    if args.histogram:
        fig, (ax, axh) = plt.subplots(1, 2, figsize=(11.0, 4.8), constrained_layout=True,
                                      gridspec_kw={"width_ratios": [3, 1]})
    else:
        fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
        axh = None

    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=12, c="tab:blue", alpha=0.5, linewidths=0.0)
    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Days after March 21")
    ax.set_title("Gregorian Easter")

    if axh is not None:
        counts = np.bincount(y.astype(int), minlength=36)
        axh.barh(np.arange(len(counts)), counts, color="0.45")
        axh.set_xlabel("Years")
        axh.set_ylim(ax.get_ylim())

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
