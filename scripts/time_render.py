#!/usr/bin/env python3
"""Quick perf benchmark for rendering across a range of widths."""

from __future__ import annotations

import argparse
import cProfile
import io
import pstats
import statistics
import time

from tqdm import tqdm

from prettypy import NEWLINE, Doc, group, join, parameters, render, text
from render_demo import build_demo


def _build_wide_document(calls: int, args_per_call: int) -> Doc:
    statements = []
    for call_idx in range(calls):
        arguments = [text(f"argument_{call_idx}_{arg_idx}") for arg_idx in range(args_per_call)]
        statements.append(group(text(f"call_{call_idx}(") + parameters(arguments) + text(");")))
    return join(statements, NEWLINE)


def _run_once(
    doc: Doc,
    widths: list[int],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int]:
    start = time.perf_counter()
    total_chars = 0
    iterator = tqdm(widths, desc=label, unit="width") if show_progress else widths
    for width in iterator:
        total_chars += len(render(doc, width))
    duration = time.perf_counter() - start
    return duration, total_chars


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark document rendering throughput")
    parser.add_argument(
        "--document",
        choices=("demo", "wide"),
        default="wide",
        help="Document to render (default: wide)",
    )
    parser.add_argument(
        "--calls",
        type=int,
        default=4,
        help="Calls in the wide document; render cost grows exponentially with calls that do not fit",
    )
    parser.add_argument("--args", type=int, default=4, help="Arguments per call in the wide document")
    parser.add_argument("--min-width", type=int, default=0, help="Smallest width to render")
    parser.add_argument("--max-width", type=int, default=120, help="Largest width to render")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args()

    if args.min_width < 0 or args.max_width < args.min_width:
        raise SystemExit(f"Invalid width range: {args.min_width}..{args.max_width}")

    doc = build_demo() if args.document == "demo" else _build_wide_document(args.calls, args.args)
    widths = list(range(args.min_width, args.max_width + 1))
    show_progress = not args.no_progress

    def _benchmark() -> tuple[list[float], int]:
        for warmup_idx in range(max(args.warmups, 0)):
            _run_once(
                doc,
                widths,
                label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
                show_progress=show_progress,
            )

        timings: list[float] = []
        chars = 0
        for run_idx in range(max(args.runs, 1)):
            duration, chars = _run_once(
                doc,
                widths,
                label=f"run {run_idx + 1}/{max(args.runs, 1)}",
                show_progress=show_progress,
            )
            timings.append(duration)
        return timings, chars

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        timings, chars = _benchmark()
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        timings, chars = _benchmark()

    mean = statistics.mean(timings)

    print(f"Document: {args.document}")
    print(f"Widths: {args.min_width}..{args.max_width} ({len(widths)})")
    print(f"Chars per run: {chars}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    print(f"Renders/s (mean): {len(widths) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
