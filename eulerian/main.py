# main.py
import argparse
import json
import logging
import sys
import time
from typing import Dict, List, Optional

from eulerian.check import edges_from_trail, verify_trail
from eulerian.errors import EulerianError, InternalConsistencyError, ResourceExhaustedError
from eulerian.graph import Graph
from eulerian.input import parse_file
from eulerian.solver import RunContext, solve

# ============================================================
# Default params
# ============================================================
DEFAULT_VERBOSITY = 0 # warnings only, stdout carries the trail
DEFAULT_EXPORT_FORMAT = "json"
NO_SOLUTION = "-1"
USAGE = "Usage: eulerian <filename>"

# ============================================================
# CLI & Logging
# ============================================================
def build_argparser():
    p = argparse.ArgumentParser(prog="eulerian", usage="eulerian <filename> [options]",
                                description="Compute an Eulerian trail or circuit iff one exists")
    # exactly one path is expected, anything else prints the usage line
    p.add_argument("paths", nargs="*", metavar="filename", help="Path to the instance file")

    p.add_argument("-v", "--verbose", action="count", default=DEFAULT_VERBOSITY)
    # verbosity: 0=warning, 1=info, 2=debug

    # Diagnostics
    p.add_argument("--print-graph", action="store_true", help="Log node and adjacency lists")
    p.add_argument("--summary", action="store_true", help="Print a summary of the run on stderr")
    p.add_argument("--stats", action="store_true", help="Print bookkeeping counters on stderr")
    p.add_argument("--verify", action="store_true", help="Check the trail with networkx before printing it")
    p.add_argument("--progress", action="store_true", help="Show a progress bar while splicing")

    # Export
    p.add_argument("--export", help="Output path for the trail (JSON/TXT)")
    p.add_argument("--export-format", choices=["json", "txt"], default=DEFAULT_EXPORT_FORMAT)
    return p


def configure_logging(verbosity: int):
    """Configure logging level based on verbosity.
    Parameters
    ----------
    verbosity : int
        0 = warning, 1 = info, 2 = debug
    """
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(message)s",
        datefmt="%H:%M:%S",
        force=True,
    )

# ============================================================
# Printing utils
# ============================================================
def format_trail(trail: Optional[List[int]]) -> str:
    '''
    Space separated node ids, or -1 if there is no trail.
    '''
    if trail is None:
        return NO_SOLUTION
    return " ".join(str(v) for v in trail)


def log_graph(graph: Graph):
    '''
    Log node list with degrees and the adjacency list of every node.
    '''
    logging.info(graph.describe_nodes())
    logging.info("Adjacency lists:")
    for line in graph.describe_adjacency():
        logging.info(line)


def print_summary(meta: Dict, out=None):
    '''
    Print run summary.
    '''
    out = out or sys.stderr
    print("\n=== Solution Summary ===", file=out)
    print(f"Resolution mode        : {meta.get('mode') or 'none'}", file=out)
    print(f"Total nodes            : {meta.get('nodes')} (declared {meta.get('declared_nodes')})", file=out)
    print(f"Total edges            : {meta.get('edges')}", file=out)
    print(f"Odd-degree nodes (k)   : {meta.get('k', '-')}", file=out)
    print(f"Required visits        : {meta.get('required_visits')}", file=out)
    print(f"Sub-circuits spliced   : {meta.get('sub_circuits_spliced')}", file=out)
    print(f"Final trail length     : {meta.get('trail_length')}", file=out)
    if meta.get("reason"):
        print(f"Not solvable           : {meta.get('reason')}", file=out)
    print(f"Total time             : {meta.get('total_time_sec')} s", file=out)
    print("========================\n", file=out)


def print_stats(stats: Dict[str, int], out=None):
    out = out or sys.stderr
    print("\nBookkeeping information:\n", file=out)
    for key, value in stats.items():
        print(f"\t{key.replace('_', ' ').capitalize() + ':':<24}{value}", file=out)
    print("", file=out)

# ============================================================
# Export
# ============================================================
def export_trail(path: Optional[str], trail: Optional[List[int]], meta: Dict, fmt: str = "json"):
    '''
    Export trail and meta to file in JSON or plain text format.
    '''
    if not path: return
    extra_stats = {"total_nodes": len(trail or []), "total_edges": len(edges_from_trail(trail or []))}
    meta = {**meta, **extra_stats}
    if fmt == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"trail": trail, "meta": meta}, f, ensure_ascii=False, indent=2)
    else:
        with open(path, "w", encoding="utf-8") as f:
            f.write(format_trail(trail) + "\n")

# ============================================================
# Main
# ============================================================
def run(args) -> int:
    '''
    Solve the instance named by ``args`` and print the trail.
    Returns the process exit status.
    '''
    try:
        declared, edges = parse_file(args.paths[0])
    except MemoryError as exc:
        raise ResourceExhaustedError("Out of memory.") from exc

    t0 = time.time()
    ctx: RunContext = solve(edges, declared, progress=args.progress)
    meta = ctx.meta()
    meta["total_time_sec"] = round(time.time() - t0, 3)

    if args.print_graph:
        log_graph(ctx.graph)

    trail = ctx.trail_ids()
    if trail is not None and args.verify:
        ok, msg = verify_trail(ctx.graph, trail)
        if not ok:
            raise InternalConsistencyError(f"trail check failed: {msg}")
        logging.info("Trail check passed")

    print(format_trail(trail))

    if args.summary:
        print_summary(meta)
    if args.stats:
        print_stats(ctx.collect_stats())
    if args.export:
        export_trail(args.export, trail, meta, fmt=args.export_format)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_argparser().parse_args(argv)
    if len(args.paths) != 1:
        print(USAGE)
        return 0
    # node and adjacency lists are logged at INFO
    configure_logging(max(args.verbose, 1) if args.print_graph else args.verbose)

    try:
        return run(args)
    except EulerianError as exc:
        logging.error(str(exc))
        return 1
    except OSError as exc:
        logging.error(f"I/O error: {exc}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
