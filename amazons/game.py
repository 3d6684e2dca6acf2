"""
Game state management and turn logic for Amazons.

This module provides:
- GameState class owning the board and the turn/phase state machine
- The three selection operations of a turn (piece, destination, blocker)
- Read-only snapshots for the presentation layer
- Game-over detection and the one-shot winner notification
"""

import logging
from typing import Callable, NamedTuple, Optional, Tuple

from .board import Board, FrozenBoard, clone_board, freeze_board, standard_setup
from .piece import Cell, Player, TurnPhase
from .rules import has_any_legal_move, is_legal_move
from .utils import in_bounds

logger = logging.getLogger(__name__)

Square = Tuple[int, int]


class Snapshot(NamedTuple):
    """描画用の局面スナップショット（読み取り専用）"""
    board: FrozenBoard
    turn: Player
    phase: TurnPhase
    selection: Optional[Square]


class GameState:
    """ゲーム状態を管理するクラス

    盤面・手番・フェーズを唯一管理する。各 select_* は入力を受け付けたら
    True、無視したら False を返し、無視した場合は状態を一切変えない。
    """

    def __init__(self, on_game_over: Optional[Callable[[Player], None]] = None):
        self.on_game_over = on_game_over
        self._pending_winner: Optional[Player] = None
        self.initialize()

    @classmethod
    def from_position(cls, board: Board, turn: Player = Player.A,
                      on_game_over: Optional[Callable[[Player], None]] = None) -> 'GameState':
        """任意の局面から開始する（テスト・検討用）"""
        state = cls(on_game_over)
        state.board = clone_board(board)
        state.turn = turn
        return state

    def initialize(self) -> None:
        """初期配置に戻す"""
        self.board: Board = standard_setup()
        self.turn = Player.A
        self.phase = TurnPhase.SELECT_PIECE
        self.selection: Optional[Square] = None

    def current_state(self) -> Snapshot:
        return Snapshot(freeze_board(self.board), self.turn, self.phase, self.selection)

    def pop_game_over(self) -> Optional[Player]:
        """未通知の勝者を返す（一度だけ）"""
        winner, self._pending_winner = self._pending_winner, None
        return winner

    def handle_select(self, row: int, col: int) -> bool:
        """現在のフェーズに応じてマス選択を振り分ける"""
        if self.phase is TurnPhase.SELECT_PIECE:
            return self.select_piece(row, col)
        if self.phase is TurnPhase.SELECT_DESTINATION:
            return self.select_destination(row, col)
        if self.phase is TurnPhase.SELECT_BLOCK_CELL:
            return self.select_block_cell(row, col)
        return False

    def select_piece(self, row: int, col: int) -> bool:
        """動かす駒を選ぶ"""
        if self.phase is not TurnPhase.SELECT_PIECE or not in_bounds(row, col):
            return False
        if self.board[row][col] != self.turn.piece:
            return False
        self.selection = (row, col)
        self.phase = TurnPhase.SELECT_DESTINATION
        return True

    def select_destination(self, row: int, col: int) -> bool:
        """選択中の駒の移動先を選ぶ。自分の別の駒なら選び直し"""
        if self.phase is not TurnPhase.SELECT_DESTINATION or not in_bounds(row, col):
            return False
        if self.selection is None:
            return False
        if is_legal_move(self.board, self.selection, (row, col)):
            sr, sc = self.selection
            self.board[row][col] = self.turn.piece
            self.board[sr][sc] = Cell.EMPTY
            self.selection = (row, col)
            self.phase = TurnPhase.SELECT_BLOCK_CELL
            return True
        if self.board[row][col] == self.turn.piece:
            self.selection = (row, col)
            return True
        return False

    def select_block_cell(self, row: int, col: int) -> bool:
        """移動した駒から矢を放つマスを選び、手番を終える"""
        if self.phase is not TurnPhase.SELECT_BLOCK_CELL or not in_bounds(row, col):
            return False
        if self.selection is None or not is_legal_move(self.board, self.selection, (row, col)):
            return False
        self.board[row][col] = Cell.BLOCKER
        self.selection = None
        self.turn = self.turn.opponent
        self.phase = TurnPhase.SELECT_PIECE
        self._check_game_over()
        return True

    def _check_game_over(self) -> None:
        """手番側に合法手がなければ相手の勝ちとして新しい対局を始める"""
        if has_any_legal_move(self.board, self.turn):
            return
        winner = self.turn.opponent
        logger.info("Player %s has no legal move; %s wins", self.turn.name, winner.name)
        # 通知より先に盤面を戻す
        self.initialize()
        self._pending_winner = winner
        if self.on_game_over is not None:
            self.on_game_over(winner)
