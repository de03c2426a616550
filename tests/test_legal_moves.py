from __future__ import annotations

import sys
import unittest
from pathlib import Path


REPO_DIR = Path(__file__).resolve().parents[1]
if str(REPO_DIR) not in sys.path:
    sys.path.insert(0, str(REPO_DIR))


from draughts.board import Board  # noqa: E402
from draughts.cell import Cell, CellKind  # noqa: E402
from draughts.coordinate import Coordinate  # noqa: E402
from draughts.engine import legal_moves, make_move, new_board, with_legal_moves  # noqa: E402
from draughts.pieces import Piece  # noqa: E402
from draughts.rules import Rules  # noqa: E402
from draughts.turn import Turn  # noqa: E402


SINGLE_CAPTURE = """
........
........
........
..d.....
...l....
........
........
........
"""

MANDATORY = """
........
........
........
..d.....
...l....
......l.
........
........
"""

RING = """
........
........
...d.d..
........
...d.d..
....l...
........
........
"""


class SimpleMoveTests(unittest.TestCase):
    def test_opening_man_marks_forward_squares_only(self) -> None:
        board = new_board()
        annotated = legal_moves(board, Coordinate(2, 5))
        self.assertEqual(annotated.marked(CellKind.MOVE), {Coordinate(1, 4), Coordinate(3, 4)})
        self.assertFalse(annotated.marked(CellKind.CAPTURE))

    def test_edge_and_blocked_men(self) -> None:
        board = new_board()
        self.assertEqual(legal_moves(board, Coordinate(0, 5)).marked(), {Coordinate(1, 4)})
        self.assertEqual(legal_moves(board, Coordinate(1, 6)).marked(), set())

    def test_men_never_step_backward(self) -> None:
        board = Board.from_text(SINGLE_CAPTURE.replace("..d.....", "........"))
        annotated = legal_moves(board, Coordinate(3, 4))
        self.assertEqual(annotated.marked(CellKind.MOVE), {Coordinate(2, 3), Coordinate(4, 3)})

    def test_dark_men_move_down_the_board(self) -> None:
        board = Board.from_text(SINGLE_CAPTURE.replace("...l....", "........"), turn=Turn.DARK)
        annotated = legal_moves(board, Coordinate(2, 3))
        self.assertEqual(annotated.marked(CellKind.MOVE), {Coordinate(1, 4), Coordinate(3, 4)})

    def test_king_slides_until_the_first_occupied_square(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            .l......
            ........
            ...L....
            ........
            ........
            ........
            """
        )
        moves = legal_moves(board, Coordinate(3, 4)).marked(CellKind.MOVE)
        self.assertIn(Coordinate(2, 3), moves)
        self.assertNotIn(Coordinate(1, 2), moves)
        self.assertNotIn(Coordinate(0, 1), moves)
        self.assertIn(Coordinate(7, 0), moves)
        self.assertIn(Coordinate(0, 7), moves)
        self.assertIn(Coordinate(6, 7), moves)
        self.assertEqual(len(moves), 11)


class CaptureMarkerTests(unittest.TestCase):
    def test_square_beyond_adjacent_enemy_is_a_capture(self) -> None:
        board = Board.from_text(SINGLE_CAPTURE)
        annotated = legal_moves(board, Coordinate(3, 4))
        self.assertEqual(annotated.marked(CellKind.CAPTURE), {Coordinate(1, 2)})

    def test_men_capture_backward(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            ........
            ........
            ...l....
            ....d...
            ........
            ........
            """
        )
        annotated = legal_moves(board, Coordinate(3, 4))
        self.assertEqual(annotated.marked(CellKind.CAPTURE), {Coordinate(5, 6)})

    def test_king_marks_every_square_beyond_the_enemy(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            .....l..
            ........
            ........
            ..d.....
            ........
            L.......
            """
        )
        annotated = legal_moves(board, Coordinate(0, 7))
        self.assertEqual(annotated.marked(CellKind.CAPTURE), {Coordinate(3, 4), Coordinate(4, 3)})

    def test_intermediate_landings_are_marked(self) -> None:
        board = Board.from_text(
            """
            ........
            ........
            ........
            ........
            ...d....
            ........
            .d......
            l.......
            """
        )
        annotated = legal_moves(board, Coordinate(0, 7))
        self.assertEqual(annotated.marked(CellKind.CAPTURE), {Coordinate(2, 5), Coordinate(4, 3)})

    def test_chain_back_to_the_origin_marks_the_origin(self) -> None:
        board = Board.from_text(RING)
        origin = Coordinate(4, 5)
        annotated = legal_moves(board, origin)
        self.assertEqual(
            annotated.marked(CellKind.CAPTURE),
            {origin, Coordinate(2, 3), Coordinate(4, 1), Coordinate(6, 3)},
        )
        self.assertEqual(annotated.get(origin), Cell.of(Piece.LIGHT_MAN))

        playable = {point for point in annotated.marked() if make_move(board, origin, point).moved}
        self.assertEqual(playable, {origin})


class MandatoryCaptureTests(unittest.TestCase):
    def test_capture_suppresses_simple_moves_side_wide(self) -> None:
        board = Board.from_text(MANDATORY)
        capturing = legal_moves(board, Coordinate(3, 4))
        self.assertEqual(capturing.marked(CellKind.CAPTURE), {Coordinate(1, 2)})
        self.assertFalse(capturing.marked(CellKind.MOVE))
        self.assertEqual(legal_moves(board, Coordinate(6, 5)).marked(), set())

    def test_optional_capture_marks_both(self) -> None:
        board = Board.from_text(MANDATORY)
        rules = Rules(mandatory_capture=False)
        capturing = legal_moves(board, Coordinate(3, 4), rules)
        self.assertEqual(capturing.marked(CellKind.CAPTURE), {Coordinate(1, 2)})
        self.assertEqual(capturing.marked(CellKind.MOVE), {Coordinate(4, 3)})
        self.assertEqual(
            legal_moves(board, Coordinate(6, 5), rules).marked(CellKind.MOVE),
            {Coordinate(5, 4), Coordinate(7, 4)},
        )


class InformationalQueryTests(unittest.TestCase):
    def test_empty_origin_gives_clean_board(self) -> None:
        board = new_board()
        self.assertEqual(with_legal_moves(board, Coordinate(3, 4)).marked(), set())

    def test_wrong_side_gives_clean_board(self) -> None:
        board = new_board()
        self.assertEqual(with_legal_moves(board, Coordinate(1, 2)).marked(), set())

    def test_out_of_range_origin_gives_clean_board(self) -> None:
        board = new_board()
        self.assertEqual(with_legal_moves(board, Coordinate(9, 9)).marked(), set())

    def test_previous_markers_are_cleared_and_input_untouched(self) -> None:
        board = new_board()
        first = legal_moves(board, Coordinate(2, 5))
        second = legal_moves(first, Coordinate(6, 5))
        self.assertEqual(second.marked(), {Coordinate(5, 4), Coordinate(7, 4)})
        self.assertEqual(first.marked(), {Coordinate(1, 4), Coordinate(3, 4)})
        self.assertEqual(board, new_board())
        self.assertIs(second.turn, Turn.LIGHT)


if __name__ == "__main__":
    unittest.main()
