"""Command line demonstration of the graph traversals and sort algorithms.

Run ``classic-algorithms-demo`` (or ``python -m classic_algorithms.demo``)
to print the reference graph, its traversals and the instrumented sorts.
"""
from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional, Sequence

from colorama import Fore, Style

from .graph.basic.bfs import bfs
from .graph.basic.dfs import dfs
from .sorting.advanced.merge_sort import merge_sort
from .sorting.basic.bubble_sort import bubble_sort
from .sorting.basic.counting_sort import counting_sort
from .sorting.basic.insertion_sort import insertion_sort
from .sorting.basic.quick_sort import quick_sort
from .stats import RuntimeStats
from .utils import Graph, format_sequence


def heading(text: str) -> str:
    return f"{Fore.CYAN}{Style.BRIGHT}== {text} =={Style.RESET_ALL}"


def build_reference_graph() -> Graph[str]:
    """The five node undirected graph used throughout the demo."""
    graph: Graph[str] = Graph()
    for src, dest in [("0", "1"), ("0", "4"),
                      ("1", "2"), ("1", "3"), ("1", "4"),
                      ("2", "3"),
                      ("3", "4")]:
        graph.add_edge(src, dest)
    return graph


def run_graphs(out: Callable[[str], None] = print) -> None:
    out(heading("graphs"))
    graph = build_reference_graph()
    out(graph.describe().rstrip("\n"))

    out(heading("breadth first search traversal"))
    out(f"bfs_traversal(graph, '0', 5) = {format_sequence(bfs(graph, '0', 5))}")
    out(f"bfs_traversal(graph, '0', 1) = {format_sequence(bfs(graph, '0', 1))}")

    out(heading("depth first search traversal"))
    out(format_sequence(dfs(graph, "0")))


def _sort_line(items: Sequence, stats: RuntimeStats) -> str:
    return f"sorted list=[{format_sequence(items)}], {stats}"


def run_sorts(out: Callable[[str], None] = print) -> None:
    stats = RuntimeStats()
    out(heading("bubble_sort O(n^2)"))
    out(_sort_line(bubble_sort(["x", "d", "c", "b", "a"], stats), stats))

    stats = RuntimeStats()
    out(heading("insertion_sort O(n^2)"))
    out(_sort_line(insertion_sort(["x", "d", "c", "b", "a"], stats), stats))

    stats = RuntimeStats()
    out(heading("merge_sort O(n * log(n))"))
    unsorted = ["123", "989", "000", "981", "778", "996", "993", "781"]
    out(_sort_line(merge_sort(unsorted, stats), stats))

    stats = RuntimeStats()
    out(heading("quick_sort O(n * log(n))"))
    out(_sort_line(quick_sort([100, 200, 300, 20, 30, 10, 50], stats), stats))

    stats = RuntimeStats()
    out(heading("counting_sort O(n)"))
    out(_sort_line(counting_sort([100, 200, 15, 30, 10, 50], stats), stats))


SECTIONS = {
    "graphs": [run_graphs],
    "sorts": [run_sorts],
    "all": [run_graphs, run_sorts],
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="classic-algorithms-demo",
        description="Demonstrate graph traversals and instrumented sorts.",
    )
    parser.add_argument("section", nargs="?", default="all", choices=sorted(SECTIONS))
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    for section in SECTIONS[args.section]:
        section()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
