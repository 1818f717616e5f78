"""
Console formatting for search and spanning-tree results.

Functions return strings; callers decide where to print them.
"""

from typing import Mapping, Optional, Sequence, Tuple

from .pathing import Path
from .tree import TreeEdge


def format_airports(airports: Sequence[str]) -> str:
    """A -> B -> C"""
    return " -> ".join(airports)


def format_route(origin: str, destination: str, path: Optional[Path]) -> str:
    if path is None:
        return f"Shortest route from {origin} to {destination}: None"
    return (
        f"Shortest route from {origin} to {destination}: "
        f"{format_airports(path.airports)}. "
        f"The length is {path.distance}. The cost is {path.cost}."
    )


def format_state_routes(origin: str, state: str, paths: Mapping[str, Path]) -> str:
    lines = [
        f"The shortest paths from {origin} to {state} state airports are:",
        "",
        "Path\tLength\tCost",
    ]
    for path in paths.values():
        lines.append(f"{format_airports(path.airports)}\t{path.distance}\t{path.cost}")
    return "\n".join(lines)


def _stops_label(stops: int) -> str:
    return "stop" if stops == 1 else "stops"


def format_stops_route(
    origin: str, destination: str, stops: int, path: Optional[Path]
) -> str:
    label = _stops_label(stops)
    if path is None:
        return f"Shortest route from {origin} to {destination} with {stops} {label}: None"
    return (
        f"The shortest route from {origin} to {destination} with {stops} {label}: "
        f"{format_airports(path.airports)}. "
        f"The length is {path.distance}. The cost is {path.cost}."
    )


def format_connections(counts: Sequence[Tuple[str, int, int, int]]) -> str:
    lines = ["Airport\tConnections"]
    for code, _inbound, _outbound, total in counts:
        lines.append(f"{code}\t{total}")
    return "\n".join(lines)


def format_tree(edges: Sequence[TreeEdge]) -> str:
    """MST table: one "A - B<TAB>cost" line per edge, then the total."""
    lines = ["Minimal Spanning Tree", "Edge\tWeight"]
    for edge in edges:
        lines.append(f"{edge.a} - {edge.b}\t{edge.cost}")
    lines.append(f"Total Cost of MST: {sum(edge.cost for edge in edges)}")
    return "\n".join(lines)
