"""Fewest refuelling stops for a truck driving to a town past fuel stations."""

from __future__ import annotations

import argparse
import heapq
import sys
from collections.abc import Iterable, Iterator, Sequence


def min_refuels(
    stations: Iterable[tuple[int, int]], distance: int, fuel: int
) -> int | None:
    """Return the fewest stops needed to reach the town, or None if it cannot be reached.

    ``stations`` holds ``(distance_from_town, fuel_available)`` pairs; the truck
    starts ``distance`` units from the town with ``fuel`` units, using one unit
    per unit of distance.
    """
    if distance < 0 or fuel < 0:
        raise ValueError("distance and fuel must not be negative")
    ahead = sorted(
        ((distance - where, amount) for where, amount in stations if 0 <= where <= distance),
        key=lambda station: station[0],
    )
    passed: list[int] = []
    stops = 0
    position = 0

    def reach(target: int) -> bool:
        nonlocal fuel, stops
        while fuel < target - position:
            if not passed:
                return False
            fuel -= heapq.heappop(passed)
            stops += 1
        return True

    for point, amount in ahead:
        if not reach(point):
            return None
        fuel -= point - position
        position = point
        heapq.heappush(passed, -amount)
    if not reach(distance):
        return None
    return stops


def _cases(tokens: Iterator[int]) -> Iterator[tuple[list[tuple[int, int]], int, int]]:
    for _ in range(next(tokens)):
        count = next(tokens)
        stations = [(next(tokens), next(tokens)) for _ in range(count)]
        distance, fuel = next(tokens), next(tokens)
        yield stations, distance, fuel


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the fewest stops for each, or -1 when impossible."""
    parser = argparse.ArgumentParser(description="Fewest refuelling stops to reach town.")
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=sys.stdin,
        help="input file; standard input when omitted",
    )
    args = parser.parse_args(argv)
    with args.input as handle:
        text = handle.read()
    try:
        tokens = iter([int(token) for token in text.split()])
        for stations, distance, fuel in _cases(tokens):
            answer = min_refuels(stations, distance, fuel)
            print(-1 if answer is None else answer)
    except (ValueError, StopIteration) as error:
        parser.error(f"malformed input: {error or 'unexpected end of input'}")
    return 0