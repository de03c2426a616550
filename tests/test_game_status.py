from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from draughts.board import Board  # noqa: E402
from draughts.coordinate import Coordinate  # noqa: E402
from draughts.engine import movable_pieces, new_board, winner  # noqa: E402
from draughts.pieces import Color  # noqa: E402
from draughts.turn import Turn  # noqa: E402


class MovablePiecesTests(unittest.TestCase):
    def test_opening_front_row_can_move(self) -> None:
        self.assertEqual(
            movable_pieces(new_board()),
            [Coordinate(0, 5), Coordinate(2, 5), Coordinate(4, 5), Coordinate(6, 5)],
        )

    def test_only_capturing_pieces_when_capture_is_forced(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            ........
            ..d.....
            ...l....
            ......l.
            ........
            ........
            """
        )
        self.assertEqual(movable_pieces(board), [Coordinate(3, 4)])


class WinnerTests(unittest.TestCase):
    def test_open_game_has_no_winner(self) -> None:
        self.assertIsNone(winner(new_board()))

    def test_side_without_pieces_loses(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            ........
            ........
            ...l....
            ........
            ........
            ........
            """,
            turn=Turn.DARK,
        )
        self.assertIs(winner(board), Color.LIGHT)
        board.turn = Turn.LIGHT
        self.assertIs(winner(board), Color.LIGHT)

    def test_blocked_side_loses(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            ........
            ........
            ........
            ..d.....
            .d......
            l.......
            """
        )
        self.assertIs(winner(board), Color.DARK)
        board.turn = Turn.DARK
        self.assertIsNone(winner(board))


if __name__ == "__main__":
    unittest.main()
