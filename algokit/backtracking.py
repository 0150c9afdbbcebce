"""Backtracking puzzles: sudoku, n queens, rat in a maze and the towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

Board = list[list[int]]


def is_safe(board: Sequence[Sequence[int]], row: int, col: int, num: int) -> bool:
    """Report whether ``num`` may go at ``(row, col)`` without a row, column or box clash."""
    if num in board[row]:
        return False
    if any(line[col] == num for line in board):
        return False
    top, left = row - row % 3, col - col % 3
    return all(
        board[r][c] != num for r in range(top, top + 3) for c in range(left, left + 3)
    )


def _check_grid(board: Sequence[Sequence[int]]) -> None:
    if len(board) != 9 or any(len(line) != 9 for line in board):
        raise ValueError("sudoku board must be 9x9")


def _empty_cell(board: Board) -> tuple[int, int] | None:
    for r, line in enumerate(board):
        for c, value in enumerate(line):
            if value == 0:
                return r, c
    return None


def _fill(board: Board) -> bool:
    cell = _empty_cell(board)
    if cell is None:
        return True
    row, col = cell
    for num in range(1, 10):
        if is_safe(board, row, col, num):
            board[row][col] = num
            if _fill(board):
                return True
            board[row][col] = 0
    return False


def solve_sudoku(board: Sequence[Sequence[int]]) -> Board | None:
    """Return a solved copy of a 9x9 board (0 marks an empty cell), or None."""
    _check_grid(board)
    grid = [list(line) for line in board]
    return grid if _fill(grid) else None


def solve_sudoku_text(rows: Iterable[str]) -> list[str] | None:
    """Solve a sudoku given as nine text rows of digits with '0' for empty cells.

    Whitespace inside rows is ignored. Returns the solved rows, or None.
    """
    grid: Board = []
    for text in rows:
        cells = "".join(text.split())
        if len(cells) != 9 or not all(ch in "0123456789" for ch in cells):
            raise ValueError(f"bad sudoku row {text!r}")
        grid.append([int(ch) for ch in cells])
    _check_grid(grid)
    solved = solve_sudoku(grid)
    if solved is None:
        return None
    return ["".join(str(value) for value in line) for line in solved]


def solve_n_queens(n: int) -> Board | None:
    """Place ``n`` non-attacking queens; return the board of 0/1 cells or None."""
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []
    used_cols: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> bool:
        if row == n:
            return True
        for col in range(n):
            if col in used_cols or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.append(col)
            used_cols.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            if place(row + 1):
                return True
            columns.pop()
            used_cols.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)
        return False

    if not place(0):
        return None
    return [[1 if c == col else 0 for c in range(n)] for col in columns]


def rat_in_maze(maze: Sequence[Sequence[int]]) -> Board | None:
    """Find a path of open (1) cells from the top-left to the bottom-right corner.

    Moves go down or right only, down tried first. The bottom-right cell is
    accepted as soon as it is reached. Returns the path as a 0/1 matrix, or None.
    """
    size = len(maze)
    if any(len(line) != size for line in maze):
        raise ValueError("maze must be square")
    if size == 0:
        return None
    path = [[0] * size for _ in range(size)]

    def walk(x: int, y: int) -> bool:
        if x == size - 1 and y == size - 1:
            path[x][y] = 1
            return True
        if x < size and y < size and maze[x][y] == 1:
            path[x][y] = 1
            if walk(x + 1, y) or walk(x, y + 1):
                return True
            path[x][y] = 0
        return False

    return path if walk(0, 0) else None


def tower_of_hanoi(
    n: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> Iterator[tuple[int, str, str]]:
    """Yield the moves ``(disk, from_peg, to_peg)`` that shift ``n`` disks to ``target``."""
    if n < 1:
        raise ValueError("number of disks must be at least 1")
    return _hanoi(n, source, auxiliary, target)


def _hanoi(n: int, source: str, auxiliary: str, target: str) -> Iterator[tuple[int, str, str]]:
    if n == 1:
        yield 1, source, target
        return
    yield from _hanoi(n - 1, source, target, auxiliary)
    yield n, source, target
    yield from _hanoi(n - 1, auxiliary, source, target)