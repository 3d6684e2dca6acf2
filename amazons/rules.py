"""
Game rules and move validation for Amazons.

This module provides:
- Queen-style move validation with blocking
- Queen move generation for highlighting
- Mobility checks used for game-over detection
"""

from typing import List, Tuple

from .board import Board, find_pieces
from .piece import Cell, Player, QUEEN_DIRS
from .utils import in_bounds

# 型エイリアス
Square = Tuple[int, int]


def _unit(delta: int) -> int:
    return (delta > 0) - (delta < 0)


def is_legal_move(board: Board, src: Square, dst: Square) -> bool:
    """src から dst へのクイーン移動が可能か判定

    縦・横・斜めの直線のみ。途中のマスと移動先がすべて空でなければならない
    （飛び越し不可）。駒の移動と矢の発射の両方に使う。
    """
    (r1, c1), (r2, c2) = src, dst
    if not (in_bounds(r1, c1) and in_bounds(r2, c2)):
        return False
    if (r1, c1) == (r2, c2):
        return False
    dr, dc = r2 - r1, c2 - c1
    if dr != 0 and dc != 0 and abs(dr) != abs(dc):
        return False

    step_r, step_c = _unit(dr), _unit(dc)
    r, c = r1 + step_r, c1 + step_c
    while True:
        if board[r][c] != Cell.EMPTY:
            return False
        if (r, c) == (r2, c2):
            return True
        r, c = r + step_r, c + step_c


def legal_destinations(board: Board, src: Square) -> List[Square]:
    """src からクイーン移動で到達できるマスを列挙"""
    moves: List[Square] = []
    r1, c1 = src
    if not in_bounds(r1, c1):
        return moves
    for dr, dc in QUEEN_DIRS:
        r, c = r1 + dr, c1 + dc
        while in_bounds(r, c) and board[r][c] == Cell.EMPTY:
            moves.append((r, c))
            r, c = r + dr, c + dc
    return moves


def can_move(board: Board, row: int, col: int) -> bool:
    """隣接8マスに空きがあるか

    どんなクイーン移動も最初の1歩は隣接マスに入るので、隣接マスがすべて
    埋まっていれば移動は一切できない。逆に空きがあればその1歩自体が合法手。
    よって全探索に置き換える必要はない。
    """
    for dr, dc in QUEEN_DIRS:
        r, c = row + dr, col + dc
        if in_bounds(r, c) and board[r][c] == Cell.EMPTY:
            return True
    return False


def has_any_legal_move(board: Board, player: Player) -> bool:
    """プレイヤーの駒のうち一つでも動けるか"""
    return any(can_move(board, r, c) for r, c in find_pieces(board, player))
