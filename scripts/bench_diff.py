#!/usr/bin/env python3
"""Benchmark line diff: in-process computation and the cached diff endpoint.

Usage:
  In-process (synthetic documents):
    uv run python scripts/bench_diff.py --lines 500 1000 3000 --changes 20

  Against a running API (cached diff reads):
    export API_URL=http://localhost:8000
    uv run python scripts/bench_diff.py --old-id <uuid> --new-id <uuid> --num-requests 200
"""
from __future__ import annotations

import argparse
import os
import random
import statistics
import sys
import time

import httpx

from doclineage.domain.services import compute_line_diff


def make_revision(num_lines: int, num_changes: int, seed: int) -> tuple[str, str]:
    rng = random.Random(seed)
    old_lines = [f"Clause {i}: the parties agree to term {rng.randint(0, 10_000)}." for i in range(num_lines)]
    new_lines = list(old_lines)
    for _ in range(num_changes):
        idx = rng.randrange(len(new_lines))
        new_lines[idx] = f"Amended clause {idx}: revised term {rng.randint(0, 10_000)}."
    return "\n".join(old_lines), "\n".join(new_lines)


def bench_local(sizes: list[int], num_changes: int, repeats: int) -> str:
    rows = []
    for size in sizes:
        old_text, new_text = make_revision(size, num_changes, seed=size)
        timings = []
        hunks = 0
        for _ in range(repeats):
            t0 = time.perf_counter()
            hunks = len(compute_line_diff(old_text, new_text))
            timings.append(time.perf_counter() - t0)
        rows.append(
            f"  lines={size:>5}  hunks={hunks:>4}  "
            f"median={statistics.median(timings) * 1000:.1f} ms  max={max(timings) * 1000:.1f} ms"
        )
    return f"Local diff benchmark (changes={num_changes}, repeats={repeats})\n" + "\n".join(rows) + "\n"


def bench_api(api_url: str, old_id: str, new_id: str, num_requests: int) -> str | None:
    latencies: list[float] = []
    errors = 0
    with httpx.Client(timeout=30.0) as client:
        for _ in range(num_requests):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/documents/{new_id}/diff/{old_id}")
            elapsed = time.perf_counter() - t0
            if r.status_code == 200:
                latencies.append(elapsed)
            else:
                errors += 1

    n = len(latencies)
    if n == 0:
        return None
    p50 = statistics.median(latencies) * 1000
    p95 = sorted(latencies)[int(n * 0.95) - 1] * 1000 if n >= 20 else p50
    return (
        f"Diff endpoint benchmark (requests={n}, errors={errors})\n"
        f"  Latency: p50={p50:.1f} ms, p95={p95:.1f} ms\n"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark line diff")
    parser.add_argument("--lines", type=int, nargs="+", default=[100, 1000, 3000], help="Document sizes in lines")
    parser.add_argument("--changes", type=int, default=10, help="Changed lines per revision")
    parser.add_argument("--repeats", type=int, default=5, help="Runs per size")
    parser.add_argument("--old-id", type=str, default=None, help="Old document id (API mode)")
    parser.add_argument("--new-id", type=str, default=None, help="New document id (API mode)")
    parser.add_argument("--num-requests", type=int, default=100, help="Requests in API mode")
    parser.add_argument("--output", type=str, default="/results/bench_diff.txt", help="Output file path")
    args = parser.parse_args()

    if args.old_id and args.new_id:
        api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
        summary = bench_api(api_url, args.old_id, args.new_id, args.num_requests)
        if summary is None:
            print("No successful diff requests.")
            return 1
    else:
        summary = bench_local(args.lines, args.changes, args.repeats)
    print(summary)

    try:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    except OSError:
        pass

    return 0


if __name__ == "__main__":
    sys.exit(main())
