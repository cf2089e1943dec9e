#!/usr/bin/env python3
"""Benchmark role/privilege CRUD: latency (p50, p95, p99) and QPS.

Usage:
  export API_URL=http://localhost:8000
  uv run python scripts/bench_authz.py [--num-privileges 200] [--num-reads 500]
"""
from __future__ import annotations

import argparse
import os
import statistics
import sys
import time

import httpx


def percentile(values: list[float], pct: float) -> float:
    if not values:
        return 0.0
    ordered = sorted(values)
    idx = min(len(ordered) - 1, int(round(pct / 100 * (len(ordered) - 1))))
    return ordered[idx]


def report(label: str, latencies: list[float], elapsed: float) -> str:
    qps = len(latencies) / elapsed if elapsed > 0 else 0.0
    return (
        f"{label}: n={len(latencies)} "
        f"mean={statistics.mean(latencies) * 1000:.1f}ms "
        f"p50={percentile(latencies, 50) * 1000:.1f}ms "
        f"p95={percentile(latencies, 95) * 1000:.1f}ms "
        f"p99={percentile(latencies, 99) * 1000:.1f}ms "
        f"qps={qps:.1f}"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark authorization configuration API")
    parser.add_argument("--num-privileges", type=int, default=100, help="Method privileges to create")
    parser.add_argument("--num-reads", type=int, default=200, help="Number of GET /v1/roles/{id} requests")
    parser.add_argument("--output", type=str, default="", help="Optional output file path")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")
    lines: list[str] = []

    with httpx.Client(timeout=30.0) as client:
        privilege_ids: list[str] = []
        latencies: list[float] = []
        start = time.perf_counter()
        for i in range(args.num_privileges):
            t0 = time.perf_counter()
            r = client.post(
                f"{api_url}/v1/privileges",
                json={
                    "name": f"bench-{i}",
                    "type": "method",
                    "properties": {"method": "create", "permission": f"bench:target{i}"},
                },
            )
            latencies.append(time.perf_counter() - t0)
            r.raise_for_status()
            privilege_ids.append(r.json()["id"])
        lines.append(report("add_privilege", latencies, time.perf_counter() - start))

        r = client.post(
            f"{api_url}/v1/roles",
            json={"name": "bench-role", "privileges": privilege_ids},
        )
        r.raise_for_status()
        role_id = r.json()["role_id"]

        latencies = []
        start = time.perf_counter()
        for _ in range(args.num_reads):
            t0 = time.perf_counter()
            r = client.get(f"{api_url}/v1/roles/{role_id}")
            latencies.append(time.perf_counter() - t0)
            r.raise_for_status()
        lines.append(report("get_role", latencies, time.perf_counter() - start))

        client.delete(f"{api_url}/v1/roles/{role_id}").raise_for_status()
        for privilege_id in privilege_ids:
            client.delete(f"{api_url}/v1/privileges/{privilege_id}").raise_for_status()

    for line in lines:
        print(line)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write("\n".join(lines) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
