"""A rover on a grid that turns and moves in response to command strings."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from enum import Enum

DEFAULT_COMMANDS = "MMRMMRMRRM"


class Orientation(Enum):
    """A compass heading."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"

    @property
    def left(self) -> Orientation:
        return _LEFT[self]

    @property
    def right(self) -> Orientation:
        return _RIGHT[self]


_LEFT = {
    Orientation.N: Orientation.W,
    Orientation.W: Orientation.S,
    Orientation.S: Orientation.E,
    Orientation.E: Orientation.N,
}
_RIGHT = {heading: turned for turned, heading in _LEFT.items()}
_STEP = {
    Orientation.N: (0, 1),
    Orientation.S: (0, -1),
    Orientation.E: (1, 0),
    Orientation.W: (-1, 0),
}


class Rover:
    """A rover at integer coordinates facing one of the four compass headings."""

    def __init__(self, x: int, y: int, orientation: Orientation | str) -> None:
        self.x = x
        self.y = y
        self.orientation = Orientation(orientation)

    def rotate_left(self) -> None:
        """Turn ninety degrees to the left."""
        self.orientation = self.orientation.left

    def rotate_right(self) -> None:
        """Turn ninety degrees to the right."""
        self.orientation = self.orientation.right

    def move_forward(self) -> None:
        """Move one cell in the current heading."""
        dx, dy = _STEP[self.orientation]
        self.x += dx
        self.y += dy

    def process(self, message: str) -> None:
        """Run commands: 'L' turns left, 'R' turns right, anything else moves forward."""
        for command in message:
            if command == "L":
                self.rotate_left()
            elif command == "R":
                self.rotate_right()
            else:
                self.move_forward()

    @property
    def position(self) -> tuple[int, int, Orientation]:
        return self.x, self.y, self.orientation

    def __str__(self) -> str:
        return f"{self.x} {self.y} {self.orientation.value}"

    def __repr__(self) -> str:
        return f"Rover({self.x}, {self.y}, {self.orientation.value!r})"


def main(argv: Sequence[str] | None = None) -> int:
    """Place a rover, run a command string and print its final position."""
    parser = argparse.ArgumentParser(description="Drive a rover over a grid.")
    parser.add_argument(
        "start", nargs="*", help="x y orientation; read from standard input when omitted"
    )
    parser.add_argument("--commands", default=DEFAULT_COMMANDS, help="command string")
    args = parser.parse_args(argv)

    tokens = args.start or sys.stdin.read().split()
    if len(tokens) != 3:
        parser.error("expected: x y orientation")
    try:
        rover = Rover(int(tokens[0]), int(tokens[1]), tokens[2])
    except ValueError as error:
        parser.error(str(error))
    rover.process(args.commands)
    print(rover)
    return 0