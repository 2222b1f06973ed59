"""Breadth-first searches: island counting and bus route planning."""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Sequence


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of groups of '1' cells joined up, down, left or right."""
    rows = len(grid)
    if rows == 0:
        return 0
    cols = len(grid[0])
    seen: set[tuple[int, int]] = set()
    islands = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell != "1" or (r, c) in seen:
                continue
            islands += 1
            seen.add((r, c))
            queue = deque([(r, c)])
            while queue:
                cr, cc = queue.popleft()
                for nr, nc in ((cr - 1, cc), (cr, cc + 1), (cr + 1, cc), (cr, cc - 1)):
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in seen
                    ):
                        seen.add((nr, nc))
                        queue.append((nr, nc))
    return islands


def num_buses_to_destination(
    routes: Sequence[Sequence[int]], source: int, target: int
) -> int:
    """Fewest buses needed to travel from ``source`` to ``target``, or -1 if impossible."""
    if source == target:
        return 0

    buses_at: defaultdict[int, list[int]] = defaultdict(list)
    for bus, route in enumerate(routes):
        for stop in route:
            buses_at[stop].append(bus)

    frontier = list(dict.fromkeys(buses_at.get(source, [])))
    boarded = set(frontier)
    buses = 1
    while frontier:
        following: list[int] = []
        for bus in frontier:
            for stop in routes[bus]:
                if stop == target:
                    return buses
                for other in buses_at[stop]:
                    if other not in boarded:
                        boarded.add(other)
                        following.append(other)
        frontier = following
        buses += 1
    return -1