"""
Cell contents, players, turn phases and movement constants for Amazons.

This module defines:
- Cell enumeration for the contents of a single board square
- Player enumeration and the piece belonging to each player
- TurnPhase enumeration for the three-step turn protocol
- Canonical starting squares and queen movement directions
"""

from enum import Enum, IntEnum
from typing import Dict, List, Tuple


class Cell(IntEnum):
    """マスの中身"""
    EMPTY = 0
    PIECE_A = 1
    PIECE_B = 2
    BLOCKER = 3

    @property
    def is_piece(self) -> bool:
        return self in (Cell.PIECE_A, Cell.PIECE_B)


class Player(IntEnum):
    """手番プレイヤー (A が先手)"""
    A = 0
    B = 1

    @property
    def piece(self) -> Cell:
        return PLAYER_PIECES[self]

    @property
    def opponent(self) -> 'Player':
        return Player.B if self is Player.A else Player.A

    @property
    def display_name(self) -> str:
        return PLAYER_NAMES[self]


class TurnPhase(Enum):
    """次の入力が何を意味するか"""
    SELECT_PIECE = 'select_piece'
    SELECT_DESTINATION = 'select_destination'
    SELECT_BLOCK_CELL = 'select_block_cell'


PLAYER_PIECES: Dict[Player, Cell] = {Player.A: Cell.PIECE_A, Player.B: Cell.PIECE_B}

# ダイアログ表示用の名前 (A=白, B=黒)
PLAYER_NAMES: Dict[Player, str] = {Player.A: 'White', Player.B: 'Black'}

# 初期配置 (row, col)
STARTING_SQUARES: Dict[Player, List[Tuple[int, int]]] = {
    Player.A: [(6, 0), (6, 9), (9, 3), (9, 6)],
    Player.B: [(0, 3), (0, 6), (3, 0), (3, 9)],
}

# クイーンの8方向 (drow, dcol)
QUEEN_DIRS: List[Tuple[int, int]] = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
]

