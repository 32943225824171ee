#!/usr/bin/env python3
"""
datadata CLI
Provides commands for map/reducing a data file and benchmarking strategies
"""

import argparse
import json
import logging
import sys

from datadata import config, reducers
from datadata.errors import DatadataError
from datadata.function_loader import FunctionLoader
from datadata.loading import datadata

logger = logging.getLogger(__name__)

REDUCERS = {
    'last': reducers.last,
    'first': reducers.first,
    'ident': reducers.ident,
    'merge': reducers.merge,
}


def build_reducer(args):
    """Build the reduce function selected on the command line"""
    if args.reduce == 'sum':
        return reducers.sum_fields(args.include, args.exclude)
    return REDUCERS[args.reduce]()


def report_metrics(metrics, target):
    """Print run metrics to stderr, or save them when target is a file path"""
    if target == '-':
        print(json.dumps(metrics.to_dict(), indent=2), file=sys.stderr)
        return
    metrics.save_to_file(target)
    logger.info(f"Metrics saved to: {target}")


def run_job(args):
    """Load a data file, map/reduce it and print the result as JSON"""
    options = {}
    if args.type:
        options['type'] = args.type
    if args.no_convert:
        options['accessor'] = None
    collected = []
    options['on_metrics'] = collected.append

    try:
        if args.job:
            loader = FunctionLoader(args.job)
            map_fn = loader.get_map_function()
            reduce_fn = loader.get_reduce_function() or build_reducer(args)
        else:
            map_fn = args.key
            reduce_fn = build_reducer(args)

        result = datadata(args.source, map_fn, reduce_fn, options).result()
    except (DatadataError, FileNotFoundError, AttributeError, ImportError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.metrics:
        report_metrics(collected[0], args.metrics)

    output = {str(k): v for k, v in result.items()}
    print(json.dumps(output, indent=args.indent, default=str))
    return 0


def run_benchmarks(args):
    """Benchmark the built-in strategies on synthetic records"""
    from datadata import benchmark

    results = benchmark.run_all(num_records=args.records, runs=args.runs)
    aggregated = benchmark.aggregate_runs(results)
    benchmark.print_summary(aggregated)

    if args.output:
        benchmark.save_results(results, args.output)
        print(f"✓ Results saved to: {args.output}")
    if args.plot:
        benchmark.plot_strategy_comparison(aggregated, args.plot)
        print(f"✓ Saved: {args.plot}")
    return 0


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description='datadata: load and map/reduce CSV, TSV and JSON data',
        epilog='Example: %(prog)s run data.csv --key country --reduce sum --exclude year'
    )
    parser.add_argument('--log-level', default=config.LOG_LEVEL,
                        help='Logging level (default: $DATADATA_LOG_LEVEL or WARNING)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # run command
    run_parser = subparsers.add_parser(
        'run',
        help='Map/reduce a data file',
        description='Load a file or URL, group and reduce its records, print JSON'
    )
    run_parser.add_argument('source', help='Path or URL of a CSV, TSV or JSON file')
    group = run_parser.add_mutually_exclusive_group()
    group.add_argument('--key', help='Attribute to group records by')
    group.add_argument('--job', help='Python file defining map_function (and optionally reduce_function)')
    run_parser.add_argument('--reduce', choices=['last', 'first', 'ident', 'merge', 'sum'],
                            default='last', help='Reduce strategy (default: last)')
    run_parser.add_argument('--include', nargs='+', help='Field patterns to sum (with --reduce sum)')
    run_parser.add_argument('--exclude', nargs='+', help='Field patterns never to sum (with --reduce sum)')
    run_parser.add_argument('--type', help='Override the file type guessed from the extension')
    run_parser.add_argument('--no-convert', action='store_true',
                            help='Keep CSV/TSV values as strings')
    run_parser.add_argument('--indent', type=int, default=2, help='JSON indentation (default: 2)')
    run_parser.add_argument('--metrics', nargs='?', const='-', metavar='FILE',
                            help='Report run metrics; saved as JSON to FILE, else printed to stderr')
    run_parser.set_defaults(func=run_job)

    # benchmark command
    bench_parser = subparsers.add_parser(
        'benchmark',
        help='Benchmark map/reduce strategies',
        description='Time the built-in strategies on synthetic records'
    )
    bench_parser.add_argument('--records', type=int, default=10000, help='Number of records (default: 10000)')
    bench_parser.add_argument('--runs', type=int, default=3, help='Runs per strategy (default: 3)')
    bench_parser.add_argument('--output', help='Save raw results to this JSON file')
    bench_parser.add_argument('--plot', help='Save a runtime chart to this image file')
    bench_parser.set_defaults(func=run_benchmarks)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format=config.LOG_FORMAT
    )

    # If no command specified, print help
    if not hasattr(args, 'func'):
        parser.print_help()
        return 1

    return args.func(args)


if __name__ == '__main__':
    sys.exit(main())
