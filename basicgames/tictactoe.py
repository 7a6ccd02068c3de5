"""Tic-tac-toe on the console: a human player ('o') against the computer ('x')."""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

PLAYER_MARK = "o"
CPU_MARK = "x"

WIN_LINES: tuple[tuple[int, int, int], ...] = (
    (0, 1, 2),
    (0, 3, 6),
    (0, 4, 8),
    (1, 4, 7),
    (3, 4, 5),
    (2, 4, 6),
    (2, 5, 8),
    (6, 7, 8),
)

# Preferred cells when no line needs finishing or blocking: centre, then corners.
_FALLBACK_CELLS = (4, 0, 2, 6, 8)

INSTRUCTIONS = (
    "TicTacToe rules: ",
    "The goal is to mark 3 contiguous spots horizontally, vertically or diagonally.",
    "Each spot is identified by a number between 0 and 9",
    "To mark a spot, enter the corresponding number when prompted.",
    "The starting player is chosen at random. The players alternate turns.",
)


def new_board() -> list[str]:
    """Return an empty board: each cell holds its own index as a character."""
    return [str(i) for i in range(9)]


def _is_free(cell: str) -> bool:
    return cell not in (PLAYER_MARK, CPU_MARK)


def format_board(board: Sequence[str]) -> str:
    """Render the board as three rows separated by dashed lines."""
    rows = [" {} | {} | {} ".format(*board[start:start + 3]) for start in (0, 3, 6)]
    separator = "-" * 11
    return f"\n{separator}\n".join(rows)


def has_won(board: Sequence[str], mark: str) -> bool:
    """Return True if ``mark`` fills any complete line."""
    return any(all(board[i] == mark for i in line) for line in WIN_LINES)


def is_tie(board: Sequence[str]) -> bool:
    """Return True when no line can still be completed by either side."""
    for line in WIN_LINES:
        cells = [board[i] for i in line]
        x_count = cells.count(CPU_MARK)
        o_count = cells.count(PLAYER_MARK)
        free = sum(1 for cell in cells if _is_free(cell))
        if x_count == 2 and o_count == 0:
            return False
        if o_count == 2 and x_count == 0:
            return False
        if free >= 2:
            return False
    return True


def cpu_move(board: Sequence[str]) -> int:
    """Choose the computer's cell: finish or block a line, else centre, else a corner."""
    for line in WIN_LINES:
        cells = [board[i] for i in line]
        x_count = cells.count(CPU_MARK)
        o_count = cells.count(PLAYER_MARK)
        if (x_count == 2 and o_count == 0) or (o_count == 2 and x_count == 0):
            free = [i for i in line if _is_free(board[i])]
            return free[-1]
    for cell in _FALLBACK_CELLS:
        if board[cell] == str(cell):
            return cell
    free_cells = [i for i, cell in enumerate(board) if _is_free(cell)]
    if not free_cells:
        raise ValueError("the board is full")
    return free_cells[0]


def _read_player_move(board: Sequence[str], read: Callable[[], str],
                      write: Callable[[str], object]) -> int:
    choice = read()
    while True:
        try:
            cell = int(choice.strip())
        except ValueError:
            cell = -1
        if not 0 <= cell <= 8:
            write("Invalid input. Pick a number between 0 and 8")
        elif not _is_free(board[cell]):
            write("Sorry already taken, choose again.")
        else:
            return cell
        choice = read()


def play(read: Callable[[], str] = input,
         write: Callable[[str], object] = print,
         rng: random.Random | None = None) -> int:
    """Play one game; return 1 if the player wins, 2 if the computer wins, 0 on a tie."""
    rng = rng or random.Random()
    for line in INSTRUCTIONS:
        write(line)

    board = new_board()
    turn = rng.randint(1, 2)
    write(f"The starting player is Player {turn}")
    write(format_board(board))

    while True:
        if turn == 1:
            write("Player 1, choose a spot to mark: ")
            board[_read_player_move(board, read, write)] = PLAYER_MARK
            mark = PLAYER_MARK
        else:
            write("Computer's turn to play: ")
            board[cpu_move(board)] = CPU_MARK
            mark = CPU_MARK
        write(format_board(board))

        if has_won(board, mark):
            write(f"Victory! Congratulations Player {turn}!")
            return turn
        if is_tie(board):
            write("it's a tie")
            return 0
        turn = 2 if turn == 1 else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Start an interactive game."""
    try:
        play(input, print, random.Random())
    except (EOFError, KeyboardInterrupt):
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())