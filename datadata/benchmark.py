"""
Benchmarking for map/reduce strategies.
Runs each strategy configuration over synthetic records, collects run
metrics, and aggregates and plots the results.
"""

import json
import random
from collections import defaultdict

import matplotlib
matplotlib.use('Agg')  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from datadata import geo, mappers, reducers
from datadata.engine import MapReduceExecutor

REGIONS = ['north', 'south', 'east', 'west', 'central']

# Benchmark configurations: factories so every run gets fresh strategy state
BENCHMARKS = [
    {
        "name": "group_last",
        "description": "Group by region, last value wins",
        "map": lambda: mappers.key('region'),
        "reduce": reducers.last,
    },
    {
        "name": "group_ident",
        "description": "Group by region, keep all values",
        "map": lambda: mappers.key('region'),
        "reduce": reducers.ident,
    },
    {
        "name": "group_merge",
        "description": "Group by region, merge records",
        "map": lambda: mappers.key('region'),
        "reduce": reducers.merge,
    },
    {
        "name": "group_sum",
        "description": "Group by region, sum count and value",
        "map": lambda: mappers.key('region'),
        "reduce": lambda: reducers.sum_fields(['count', 'value']),
    },
    {
        "name": "geo_segments",
        "description": "Group by track, emit line segments",
        "map": lambda: mappers.key('track'),
        "reduce": geo.segments,
    },
]


def generate_records(num_records: int, num_tracks: int = 20, seed: int = 42) -> list:
    """Generate synthetic records with a region, a track id, counters and a position."""
    rng = random.Random(seed)
    return [
        {
            'id': i,
            'region': rng.choice(REGIONS),
            'track': i % num_tracks,
            'count': rng.randint(1, 100),
            'value': round(rng.uniform(0, 1000), 2),
            'lat': round(rng.uniform(-90, 90), 5),
            'lon': round(rng.uniform(-180, 180), 5),
        }
        for i in range(num_records)
    ]


def run_benchmark(config: dict, records: list, run_number: int = 1) -> dict:
    """Run a single benchmark configuration and return its result row."""
    executor = MapReduceExecutor(records, config['map'](), config['reduce']())
    executor.execute()
    metrics = executor.metrics

    total = metrics.total_time_seconds
    return {
        "benchmark_name": config['name'],
        "description": config['description'],
        "run_number": run_number,
        "num_records": metrics.num_records,
        "num_groups": metrics.num_groups,
        "num_results": metrics.num_results,
        "total_runtime_seconds": total,
        "map_phase_seconds": metrics.map_phase_time_seconds,
        "reduce_phase_seconds": metrics.reduce_phase_time_seconds,
        "records_per_second": metrics.num_records / total if total > 0 else 0,
        "memory_delta_bytes": metrics.memory_delta_bytes,
    }


def run_all(num_records: int = 10000, runs: int = 3, benchmarks=None) -> list:
    """Run every benchmark configuration `runs` times over the same records."""
    records = generate_records(num_records)
    results = []
    for config in benchmarks or BENCHMARKS:
        for run in range(1, runs + 1):
            results.append(run_benchmark(config, records, run_number=run))
    return results


def aggregate_runs(results: list) -> dict:
    """
    Aggregate multiple runs of the same benchmark.
    Returns dict: benchmark_name -> {avg_runtime, std_runtime, ...}
    """
    by_benchmark = defaultdict(list)
    for r in results:
        by_benchmark[r['benchmark_name']].append(r)

    aggregated = {}
    for name, runs in by_benchmark.items():
        runtimes = [r['total_runtime_seconds'] for r in runs]
        throughputs = [r['records_per_second'] for r in runs]
        first = runs[0]

        aggregated[name] = {
            'benchmark_name': name,
            'description': first['description'],
            'num_records': first['num_records'],
            'avg_runtime': float(np.mean(runtimes)),
            'std_runtime': float(np.std(runtimes)),
            'min_runtime': float(np.min(runtimes)),
            'max_runtime': float(np.max(runtimes)),
            'avg_throughput': float(np.mean(throughputs)),
            'num_runs': len(runs)
        }

    return aggregated


def save_results(results: list, filepath: str):
    """Save raw benchmark results to a JSON file."""
    with open(filepath, 'w') as f:
        json.dump(results, f, indent=2)


def plot_strategy_comparison(aggregated: dict, output_file: str):
    """Bar chart of average runtime per strategy, with std error bars."""
    names = list(aggregated)
    runtimes = [aggregated[n]['avg_runtime'] * 1000 for n in names]
    stds = [aggregated[n]['std_runtime'] * 1000 for n in names]

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.bar(names, runtimes, yerr=stds, capsize=5, color='#4ECDC4')
    ax.set_ylabel('Runtime (ms)', fontsize=12)
    ax.set_title('Map/Reduce Strategy Runtime', fontsize=14, fontweight='bold')
    ax.grid(axis='y', alpha=0.3)
    plt.xticks(rotation=20)
    plt.tight_layout()
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)


def print_summary(aggregated: dict):
    """Print a summary table of aggregated results."""
    print(f"{'Benchmark':<16} {'Runs':>5} {'Avg (ms)':>10} {'Std (ms)':>10} {'Records/s':>12}")
    print('-' * 57)
    for name, a in aggregated.items():
        print(f"{name:<16} {a['num_runs']:>5} {a['avg_runtime'] * 1000:>10.3f} "
              f"{a['std_runtime'] * 1000:>10.3f} {a['avg_throughput']:>12.0f}")
