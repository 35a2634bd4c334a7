"""Scripted exercise of :class:`Graph` driven by a random number generator."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Sequence
from typing import TextIO

from adjgraph.graph import Graph

ROUND_ONE_IDS = (60, 20, 10, 70, 30, 40, 50, 100, 90, 80)
STRANGER_IDS = (62, 26, 13, 79, 34, 48, 52, 101, 93, 84)
ROUND_ONE_WEIGHTS = (15, 35, 25, 55, 45, 75, 65, 95, 85)
VERTEX_WEIGHT_CHOICES = 9
LARGE_SIZE = 30
ROUND_ONE_EDGES = 5
ROUND_TWO_EDGES = 15
VALUE_RANGE = 1000
PLACEHOLDER = 10


def _report_empty(graph: Graph, out: TextIO) -> None:
    print("Graph is empty" if graph.is_empty() else "Graph is not empty", file=out)


def _try_add_vertex(graph: Graph, new: int, old: int, weight: int, out: TextIO) -> None:
    print("Successfully added vertex" if graph.add_vertex(new, old, weight) else "Failed", file=out)


def _try_add_edge(graph: Graph, one: int, two: int, weight: int, out: TextIO) -> None:
    print("Succefsully added edge" if graph.add_edge(one, two, weight) else "failed", file=out)


def _run_round(
    graph: Graph,
    rng: random.Random,
    out: TextIO,
    ids: Sequence[int],
    strangers: Sequence[int],
    weights: Sequence[int],
    edge_tries: int,
    show_matrix: bool,
) -> None:
    vertex_weights = weights[:VERTEX_WEIGHT_CHOICES]

    print("Testing graph...", file=out)
    print("=" * 31, file=out)
    print(file=out)
    print("Testing operations on empty graph...", file=out)
    print(file=out)
    _report_empty(graph, out)
    print(f"Number of vertices: {graph.vertex_count}", file=out)
    print(f"Number of edges: {graph.edge_count}", file=out)

    pos = rng.randrange(len(ids) - 1)
    first, second = ids[pos], ids[pos + 1]
    print("Trying to remove edge on empty graph...", end="", file=out)
    if graph.delete_edge(first, second):
        print(f"Removed edge between {first} and {second}", file=out)
    else:
        print("Failed to remove edge", file=out)

    print(file=out)
    print("Testing if connection exists between two nonexistent vertices..", file=out)
    if graph.is_connected(first, second):
        print(f"Vertices {first} and {second} have edge between them", file=out)
    else:
        print("No edge between vertices", file=out)

    print(file=out)
    print(file=out)
    print("Filling graph", file=out)
    print("=" * 38, file=out)
    print(file=out)
    added = [PLACEHOLDER]
    for _ in range(len(ids)):
        candidate = rng.choice(ids)
        anchor = rng.choice(added)
        weight = rng.choice(vertex_weights)
        if graph.add_vertex(candidate, anchor, weight):
            print(f"Added vertex {candidate}", file=out)
            added.append(candidate)
        else:
            print("Failed to add vertex", file=out)
    added.pop(0)

    weight = rng.choice(vertex_weights)
    known = added[0] if added else ids[0]
    neighbour = added[min(1, len(added) - 1)] if added else ids[0]
    print("Adding known duplicate...", end="", file=out)
    if added:
        _try_add_vertex(graph, known, neighbour, weight, out)
    else:
        print("Failed", file=out)

    print("Adding vertex connected to nonexistent vertex...", end="", file=out)
    _try_add_vertex(graph, rng.choice(strangers), rng.choice(strangers), weight, out)

    print("Adding vertex with invalid data...", end="", file=out)
    _try_add_vertex(graph, -1, rng.choice(added) if added else ids[0], weight, out)

    print(file=out)
    print(f"Number of vertices: {graph.vertex_count}", file=out)
    print(f"Number of edges: {graph.edge_count}", file=out)

    print(file=out)
    print("Testing adding edges between vertices...", file=out)
    print("=" * 45, file=out)
    if added:
        for _ in range(edge_tries):
            one, two = rng.choice(added), rng.choice(added)
            weight = rng.choice(weights)
            if graph.add_edge(one, two, weight):
                print(f"Added edge between {one} and {two} with weight {weight}", file=out)
            else:
                print("Failed to add edge", file=out)

    print("Adding between non existent vertices...", end="", file=out)
    _try_add_edge(graph, rng.choice(strangers), rng.choice(strangers), weight, out)

    print("Adding edge with invalid data...", end="", file=out)
    if added:
        _try_add_edge(graph, rng.choice(added), rng.choice(added), -1, out)
    else:
        print("failed", file=out)
    print(file=out)

    print(f"Vertex count: {graph.vertex_count}", file=out)
    print(f"Edge count: {graph.edge_count}", file=out)
    _report_empty(graph, out)
    print(file=out)

    print("Testing for edges between vertices...", file=out)
    print("=" * 43, file=out)
    print(file=out)
    if added:
        for _ in range(len(ids)):
            one, two = rng.choice(added), rng.choice(added)
            if graph.is_connected(one, two):
                print(f"An edge exists between {one} and {two}", file=out)
            else:
                print(f"No edge between {one} and {two}", file=out)
    print(file=out)

    print(file=out)
    print("BFS print: ", file=out)
    print(file=out)
    if added:
        for vertex in graph.breadth_first_search(rng.choice(added)):
            print(f"Visited: {vertex}", file=out)

    if show_matrix:
        print(file=out)
        print("Adjacency matrix: ", file=out)
        graph.print_matrix(out)
        print(file=out)
        print(file=out)

    removed = 0
    while added and removed < graph.vertex_count:
        pos = rng.randrange(len(added))
        victim = added[pos]
        if graph.remove_vertex(victim):
            print(f"Deleted vertex {victim}", file=out)
            del added[pos]
        else:
            print(f"Failed to delete vertex {victim}", file=out)
        removed += 1

    print(file=out)
    print("Printing graph with depth first search...", file=out)
    if added:
        for vertex in graph.depth_first_search(rng.choice(added)):
            print(f"visited: {vertex}", file=out)

    if show_matrix:
        print(file=out)
        print("Adjacency matrix: ", file=out)
        graph.print_matrix(out)
        print(file=out)
        print(file=out)

    print("Clearing graph...", file=out)
    graph.clear()
    _report_empty(graph, out)


def run_demo(rng: random.Random | None = None, out: TextIO | None = None) -> None:
    """Run both exercise rounds, writing a transcript to ``out``."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    graph = Graph()

    _run_round(
        graph, rng, out, ROUND_ONE_IDS, STRANGER_IDS, ROUND_ONE_WEIGHTS,
        ROUND_ONE_EDGES, show_matrix=True,
    )

    print("Creating a large graph", file=out)
    print("=" * 31, file=out)
    large_ids: list[int] = []
    large_weights: list[int] = []
    for _ in range(LARGE_SIZE):
        large_ids.append(rng.randrange(VALUE_RANGE))
        large_weights.append(rng.randrange(VALUE_RANGE))

    _run_round(
        graph, rng, out, large_ids, large_ids, large_weights,
        ROUND_TWO_EDGES, show_matrix=False,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Exercise an adjacency-matrix graph.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)
    run_demo(random.Random(args.seed), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())