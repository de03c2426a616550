"""Stateless draughts rules: legal moves, capture chains, move execution.

Every function reads a board and returns a new one. Boards passed in are
never mutated, so independent games can be evaluated side by side without
any locking.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from .board import Board
from .cell import Cell, CellKind
from .coordinate import DIAGONALS, Coordinate
from .errors import EngineError, IllegalDestination, NoPieceAtOrigin, OutOfBounds, WrongTurn
from .pieces import Color, Piece
from .route import Route
from .rules import DEFAULT_RULES, Rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveResult:
    board: Board
    moved: bool
    route: Optional[Route] = None
    captured: tuple[Coordinate, ...] = ()
    error: Optional[EngineError] = None


def new_board(size: int = 8) -> Board:
    """Opening position with light to move."""
    return Board(size)


def check_origin(board: Board, origin: Coordinate) -> Piece:
    if not board.contains(origin):
        raise OutOfBounds(f"{origin} is outside the board.", origin)
    piece = board.piece_at(origin)
    if piece is None:
        raise NoPieceAtOrigin(f"No piece at {origin}.", origin)
    if piece.color is not board.turn.color:
        raise WrongTurn(f"It is {board.turn}'s turn, not {piece.color.value}'s.", origin)
    return piece


class _ChainView:
    """The board as seen by a piece that has already travelled along ``route``.

    The origin and every jumped piece are treated as gone, the mover stands on
    the route's last square. The base board itself is left untouched.
    """

    def __init__(self, board: Board, route: Route, mover: Piece) -> None:
        self.board = board
        self.mover = mover
        self.at = route.last
        self.vacated = {route.first}
        for prev, curr in route.steps():
            self.vacated.update(_jumped_squares(board, prev, curr, self.vacated))

    def occupant(self, point: Coordinate) -> Optional[Piece]:
        if point == self.at:
            return self.mover
        if point in self.vacated:
            return None
        return self.board.piece_at(point)

    def is_empty(self, point: Coordinate) -> bool:
        return self.occupant(point) is None

    def is_enemy(self, point: Coordinate) -> bool:
        occupant = self.occupant(point)
        return occupant is not None and occupant.is_enemy(self.mover)


def _jumped_squares(
    board: Board,
    prev: Coordinate,
    curr: Coordinate,
    vacated: Iterable[Coordinate] = (),
) -> list[Coordinate]:
    gone = set(vacated)
    delta = curr.subtract(prev).signum()
    squares: list[Coordinate] = []
    point = prev.add(delta)
    while point != curr:
        if point not in gone and board.piece_at(point) is not None:
            squares.append(point)
        point = point.add(delta)
    return squares


def _landings(view: _ChainView) -> list[Coordinate]:
    size = view.board.size
    found: list[Coordinate] = []
    for delta in DIAGONALS:
        if view.mover.is_king:
            enemy = next((point for point in view.at.ray(delta, size) if not view.is_empty(point)), None)
            if enemy is None or not view.is_enemy(enemy):
                continue
            for point in enemy.ray(delta, size):
                if not view.is_empty(point):
                    break
                found.append(point)
        else:
            enemy = view.at.add(delta)
            landing = enemy.add(delta)
            if landing.is_valid(size) and view.is_enemy(enemy) and view.is_empty(landing):
                found.append(landing)
    return found


def get_captures(board: Board, start: Coordinate, rules: Rules = DEFAULT_RULES) -> list[Route]:
    """Every complete capture chain available to the piece on ``start``.

    Breadth-first over ``(route, mover)`` branches; a branch is reported once
    no further jump exists from its last square. Returns ``[]`` for an empty
    square or a piece with nothing to capture.
    """
    piece = board.piece_at(start)
    if piece is None:
        return []

    routes: list[Route] = []
    frontier: deque[tuple[Route, Piece]] = deque([(Route.start(start), piece)])
    while frontier:
        route, mover = frontier.popleft()
        landings = _landings(_ChainView(board, route, mover))
        if not landings:
            if route.jumps:
                routes.append(route)
            continue
        for landing in landings:
            next_mover = mover
            if rules.promote_mid_chain and not mover.is_king and landing.y == mover.promotion_row(board.size):
                next_mover = mover.promote()
            frontier.append((route.add_point(landing), next_mover))

    logger.debug("Found %d capture route(s) from %s", len(routes), start)
    return routes


def has_any_capture(board: Board, rules: Rules = DEFAULT_RULES) -> bool:
    return any(get_captures(board, point, rules) for point, _ in board.pieces(board.turn.color))


def simple_moves(board: Board, origin: Coordinate) -> list[Coordinate]:
    """Empty squares reachable from ``origin`` without capturing."""
    piece = board.piece_at(origin)
    if piece is None:
        return []
    if piece.is_king:
        moves: list[Coordinate] = []
        for delta in DIAGONALS:
            for point in origin.ray(delta, board.size):
                if board.piece_at(point) is not None:
                    break
                moves.append(point)
        return moves
    return [
        point
        for point in origin.neighbours(board.size)
        if point.y - origin.y == piece.forward and board.piece_at(point) is None
    ]


def with_legal_moves(board: Board, origin: Coordinate, rules: Rules = DEFAULT_RULES) -> Board:
    """Marker-cleared copy of ``board`` highlighting what ``origin`` may do.

    Simple moves are marked ``MOVE``. Every landing square of every capture
    route is marked ``CAPTURE``, intermediate landings included. When
    ``rules.mandatory_capture`` holds and the side to move can capture
    anywhere, simple moves are not marked at all.
    """
    annotated = board.clear_markers()
    try:
        check_origin(annotated, origin)
    except EngineError as exc:
        logger.debug("No legal moves from %s: %s", origin, exc.code)
        return annotated

    routes = get_captures(annotated, origin, rules)
    forced = rules.mandatory_capture and (bool(routes) or has_any_capture(annotated, rules))
    if not forced:
        for point in simple_moves(annotated, origin):
            annotated.set(point, Cell.MOVE)
    for route in routes:
        for point in route.after_first():
            annotated.mark(point, CellKind.CAPTURE)
    return annotated


def legal_moves(board: Board, origin: Coordinate, rules: Rules = DEFAULT_RULES) -> Board:
    return with_legal_moves(board, origin, rules)


def _find_route(
    routes: Sequence[Route],
    destination: Coordinate,
    path: Optional[Sequence[Coordinate]] = None,
) -> Optional[Route]:
    for route in routes:
        if route.last != destination:
            continue
        if path is not None and tuple(path) != route.points[1:-1]:
            continue
        return route
    return None


def _replay(board: Board, route: Route, rules: Rules) -> tuple[Board, tuple[Coordinate, ...]]:
    replayed = board.clear_markers()
    piece = replayed.piece_at(route.first)
    if piece is None:
        raise NoPieceAtOrigin(f"No piece at {route.first}.", route.first)

    captured: list[Coordinate] = []
    for prev, curr in route.steps():
        delta = curr.subtract(prev).signum()
        replayed.set(prev, Cell.EMPTY)
        point = prev.add(delta)
        while point != curr:
            if replayed.piece_at(point) is not None:
                captured.append(point)
            replayed.set(point, Cell.EMPTY)
            point = point.add(delta)
        replayed.set(curr, Cell.of(piece))
        if rules.promote_mid_chain and replayed.check_promotion(curr):
            piece = piece.promote()
    replayed.check_promotion(route.last)
    return replayed, tuple(captured)


def capture(
    board: Board,
    origin: Coordinate,
    destination: Coordinate,
    rules: Rules = DEFAULT_RULES,
) -> Board:
    """Replay the capture chain from ``origin`` ending on ``destination``.

    The turn is left alone; see :func:`make_move` for a full move.
    """
    route = _find_route(get_captures(board, origin, rules), destination)
    if route is None:
        return board.clear_markers()
    replayed, _ = _replay(board, route, rules)
    return replayed


def make_move(
    board: Board,
    origin: Coordinate,
    destination: Coordinate,
    path: Optional[Sequence[Coordinate]] = None,
    rules: Rules = DEFAULT_RULES,
) -> MoveResult:
    """Play one full move and report what happened.

    ``path`` optionally lists the intermediate landings of a capture chain
    when more than one chain ends on ``destination``; by default the first
    one found is played. Rejected moves return the marker-cleared board with
    the turn unchanged and the reason in ``error``.
    """
    cleared = board.clear_markers()
    try:
        check_origin(cleared, origin)
        if not cleared.contains(destination):
            raise OutOfBounds(f"{destination} is outside the board.", destination)
    except EngineError as exc:
        logger.debug("Rejected move %s -> %s: %s", origin, destination, exc.code)
        return MoveResult(board=cleared, moved=False, error=exc)

    annotated = with_legal_moves(cleared, origin, rules)
    route = _find_route(get_captures(cleared, origin, rules), destination, path)
    captured: tuple[Coordinate, ...] = ()
    if route is not None and destination in annotated.marked(CellKind.CAPTURE):
        moved, captured = _replay(cleared, route, rules)
    elif path is None and annotated.get(destination) == Cell.MOVE:
        moved = cleared.copy()
        moved.set(destination, cleared.get(origin))
        moved.set(origin, Cell.EMPTY)
        moved.check_promotion(destination)
    else:
        error = IllegalDestination(f"{destination} is not a legal destination from {origin}.", destination)
        logger.debug("Rejected move %s -> %s: %s", origin, destination, error.code)
        return MoveResult(board=cleared, moved=False, error=error)

    moved.turn = moved.turn.next()
    logger.debug("Moved %s -> %s capturing %d piece(s)", origin, destination, len(captured))
    return MoveResult(board=moved, moved=True, route=route, captured=captured)


def apply_move(
    board: Board,
    origin: Coordinate,
    destination: Coordinate,
    rules: Rules = DEFAULT_RULES,
) -> Board:
    return make_move(board, origin, destination, rules=rules).board


def movable_pieces(board: Board, rules: Rules = DEFAULT_RULES) -> list[Coordinate]:
    """Squares of the side to move holding a piece with at least one legal move."""
    own = [point for point, _ in board.pieces(board.turn.color)]
    capturing = [point for point in own if get_captures(board, point, rules)]
    if capturing and rules.mandatory_capture:
        return capturing
    return [point for point in own if point in capturing or simple_moves(board, point)]


def winner(board: Board, rules: Rules = DEFAULT_RULES) -> Optional[Color]:
    """The side that has won, or ``None`` while the game is still open.

    A side loses when it is to move and has no pieces or no legal move.
    """
    to_move = board.turn.color
    if board.count(to_move.opponent) == 0 and board.count(to_move) > 0:
        return to_move
    if not movable_pieces(board, rules):
        return to_move.opponent
    return None
