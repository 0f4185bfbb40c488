"""GameController: the central orchestrator of a chess game.

Coordinates: Players, Chessboard, legality filtering, outcome derivation.
Emits events via simple callbacks so a display layer / tests can subscribe.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TypeVar

from chessrules.config import EngineSettings
from chessrules.core.board import Chessboard
from chessrules.core.enums import GameState, MoveSpecial, PieceColor, PieceType
from chessrules.core.errors import (
    InvalidMoveError,
    PromotionChoiceError,
    PromotionRequiredButMissingError,
)
from chessrules.core.execution import execute_move
from chessrules.core.legality import all_legal_moves, legal_moves
from chessrules.core.location import Location, as_location
from chessrules.core.move_generator import last_row
from chessrules.core.move_pattern import MoveList
from chessrules.core.piece import Piece, parse_promotion
from chessrules.core.rules import GameStatus, Rules
from chessrules.game.handoff import Handoff, HandoffCancelled
from chessrules.game.history import MoveRecord
from chessrules.game.interfaces import GamePhase, IPlayer, PromotionChoice

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, GameStatus], None]
GameOverCallback = Callable[[GameState], None]
PhaseCallback = Callable[[GamePhase], None]

_REJECTIONS = (InvalidMoveError, PromotionRequiredButMissingError, PromotionChoiceError)


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns the live board: validates and commits moves, derives the outcome,
    runs the promotion protocol and asks players for their moves.

    Thread-safety: every method except :meth:`cancel_request` must be called
    from the thread that drives the game. Players answer through
    :class:`Handoff` objects, which are safe to resolve from any thread.
    """

    __slots__ = (
        "_board",
        "_settings",
        "_status",
        "_phase",
        "_players",
        "_history",
        "_pending_promotion",
        "_active_request",
        "_request_lock",
        "_requesting",
        "_cancel_requested",
        "events",
    )

    def __init__(
        self,
        board: Chessboard | None = None,
        settings: EngineSettings | None = None,
    ) -> None:
        self._settings = settings if settings is not None else EngineSettings()
        self._players: dict[PieceColor, IPlayer] = {}
        self._active_request: Handoff | None = None
        self._request_lock = threading.Lock()
        # True from the moment a player is asked until its handoff resolves
        self._requesting = False
        self._cancel_requested = False
        self.events = GameEvents()
        self._reset(board)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> Chessboard:
        """The live board. Collaborators should treat it as read-only."""
        return self._board

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def state(self) -> GameState:
        return self._status.state

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def to_move(self) -> PieceColor:
        return self._board.to_move

    @property
    def is_game_over(self) -> bool:
        return self.state.is_terminal

    @property
    def history(self) -> list[MoveRecord]:
        return list(self._history)

    @property
    def pending_promotion(self) -> PieceType | None:
        return self._pending_promotion

    @property
    def current_player(self) -> IPlayer | None:
        return self._players.get(self._board.to_move)

    def player(self, color: PieceColor) -> IPlayer | None:
        return self._players.get(color)

    def piece_at(self, location: Location | str) -> Piece | None:
        return self._board.piece_at(as_location(location))

    # ── Game set-up ──────────────────────────────────────────────────────

    def new_game(
        self,
        white: IPlayer | None = None,
        black: IPlayer | None = None,
        board: Chessboard | None = None,
    ) -> None:
        """Reset to *board* (standard start by default) with the given players."""
        self.cancel_request()
        self._players = {}
        if white is not None:
            self._players[PieceColor.WHITE] = white
        if black is not None:
            self._players[PieceColor.BLACK] = black
        self._reset(board)
        self._emit_phase(self._phase)

    # ── Move queries ─────────────────────────────────────────────────────

    def available_moves(self, location: Location | str) -> MoveList:
        """Legal moves of the piece on *location*.

        Empty if the cell is empty, the piece is not on the move, or the game
        is over.
        """
        location = as_location(location)
        piece = self._board.piece_at(location)
        if piece is None or piece.color != self._board.to_move or self.is_game_over:
            return MoveList()
        return legal_moves(self._board, location, self._settings.simulation_promotion)

    def all_available_moves(self) -> dict[Location, MoveList]:
        """Legal moves for every piece of the side to move."""
        if self.is_game_over:
            return {}
        return all_legal_moves(
            self._board, self._board.to_move, self._settings.simulation_promotion
        )

    def is_promotion_required(self, origin: Location | str, target: Location | str) -> bool:
        """Whether moving from *origin* to *target* is a pawn reaching its last row."""
        piece = self._board.piece_at(as_location(origin))
        return (
            piece is not None
            and piece.piece_type == PieceType.PAWN
            and as_location(target).row == last_row(piece.color)
        )

    # ── Move application ─────────────────────────────────────────────────

    def set_promotion(self, choice: PromotionChoice) -> None:
        """Choose the piece used by the next promoting move."""
        self._pending_promotion = parse_promotion(choice)

    def apply_move(self, origin: Location | str, target: Location | str) -> MoveRecord:
        """Commit a legal move on the live board.

        Raises:
            InvalidMoveError: not a legal move, not that side's turn, or the
                game is over.
            PromotionRequiredButMissingError: the move promotes and
                :meth:`set_promotion` was not called first.
        """
        origin = as_location(origin)
        target = as_location(target)
        board = self._board

        if self.is_game_over:
            raise InvalidMoveError(f"Game is over ({self.state.name})")
        piece = board.piece_at(origin)
        if piece is None:
            raise InvalidMoveError(f"No piece on {origin}")
        if piece.color != board.to_move:
            raise InvalidMoveError(f"It is {board.to_move}'s turn, not {piece.color}'s")

        info = self.available_moves(origin).get(target)
        if info is None:
            raise InvalidMoveError(f"{origin}{target} is not a legal move")

        promotion: PieceType | None = None
        if info.special == MoveSpecial.PROMOTION:
            if self._pending_promotion is None:
                raise PromotionRequiredButMissingError(
                    f"{origin}{target} promotes; call set_promotion() first"
                )
            promotion = self._pending_promotion

        color = piece.color
        captured = execute_move(board, origin, target, info, promotion)
        self._pending_promotion = None
        self._status = self._derive_status()

        record = MoveRecord(
            origin=origin,
            target=target,
            color=color,
            piece_type=piece.piece_type,
            special=info.special,
            status_after=self._status,
            captured=captured.piece_type if captured is not None else None,
            promotion=promotion,
        )
        self._history.append(record)
        _LOGGER.debug("%s played %s, now %s", color, record.notation, self._status)

        self._emit_move(record)
        if self.is_game_over:
            _LOGGER.info("Game over: %s (%s)", self.state.name, self._status)
            self._set_phase(GamePhase.GAME_OVER)
            self._emit_game_over(self.state)
        return record

    # ── Driving players ──────────────────────────────────────────────────

    def play_turn(self, timeout: float | None = None) -> MoveRecord | None:
        """Ask the player on the move for a move, block until it arrives, apply it.

        Returns ``None`` if the request was cancelled; nothing is applied
        then. *timeout* defaults to ``settings.request_timeout``.
        """
        if self.is_game_over:
            raise InvalidMoveError(f"Game is over ({self.state.name})")
        player = self.current_player
        if player is None:
            raise RuntimeError(f"No player assigned for {self._board.to_move}")
        if timeout is None:
            timeout = self._settings.request_timeout

        choice = self._await(lambda: player.request_move(self), timeout)
        if choice is None:
            return None
        origin, target = choice

        if self.is_promotion_required(origin, target):
            if target not in self.available_moves(origin):
                raise InvalidMoveError(f"{origin}{target} is not a legal move")
            self._set_phase(GamePhase.AWAITING_PROMOTION)
            try:
                promotion = self._await(
                    lambda: player.request_promotion(self, origin, target), timeout
                )
            finally:
                self._set_phase(GamePhase.AWAITING_MOVE)
            if promotion is None:
                return None
            self.set_promotion(promotion)

        return self.apply_move(origin, target)

    def play(self, max_plies: int | None = None) -> list[MoveRecord]:
        """Run :meth:`play_turn` until the game ends, a request is cancelled
        or *max_plies* half-moves were played.

        A rejected move from a human player is logged and the same player is
        asked again; rejections from other players propagate.
        """
        played: list[MoveRecord] = []
        while not self.is_game_over and (max_plies is None or len(played) < max_plies):
            player = self.current_player
            try:
                record = self.play_turn()
            except _REJECTIONS as exc:
                if player is None or not player.is_human:
                    raise
                _LOGGER.warning("Rejected move from %s: %s", player.name, exc)
                continue
            if record is None:
                break
            played.append(record)
        return played

    def cancel_request(self) -> bool:
        """Cancel the outstanding move/promotion request. Safe from any thread.

        Also honoured while the player is still being asked, e.g. from inside
        a request callback, before its handoff reaches the controller.
        """
        with self._request_lock:
            request = self._active_request
            if request is None:
                if not self._requesting or self._cancel_requested:
                    return False
                self._cancel_requested = True
                return True
        return request.cancel()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _reset(self, board: Chessboard | None) -> None:
        self._board = board if board is not None else Chessboard.initial()
        self._history: list[MoveRecord] = []
        self._pending_promotion: PieceType | None = None
        self._status = self._derive_status()
        self._phase = GamePhase.GAME_OVER if self.is_game_over else GamePhase.AWAITING_MOVE

    def _derive_status(self) -> GameStatus:
        return Rules.status(self._board, self._settings.insufficient_material_draw)

    def _await(self, ask: Callable[[], Handoff[T]], timeout: float | None) -> T | None:
        with self._request_lock:
            self._requesting = True
            self._cancel_requested = False
        try:
            request = ask()
            with self._request_lock:
                self._active_request = request
                if self._cancel_requested:
                    request.cancel()
            return request.wait(timeout)
        except HandoffCancelled:
            _LOGGER.info("Request for %s cancelled", request.label or self._board.to_move)
            return None
        except TimeoutError:
            request.cancel()
            raise
        finally:
            with self._request_lock:
                self._active_request = None
                self._requesting = False

    def _set_phase(self, phase: GamePhase) -> None:
        if phase != self._phase:
            self._phase = phase
            self._emit_phase(phase)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self._status)

    def _emit_game_over(self, state: GameState) -> None:
        for cb in self.events.on_game_over:
            cb(state)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)
