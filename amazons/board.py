"""
Board representation, setup, and rendering for the Amazons game.

This module provides:
- Board type definitions and utilities
- Initial board setup
- Read-only board copies for snapshots
- Board drawing functions
"""

from typing import Iterable, List, Optional, Tuple

import pygame

from .piece import Cell, Player, STARTING_SQUARES
from .utils import (
    BOARD_SIZE, CELL_SIZE, PIECE_INSET, BLOCKER_INSET,
    LIGHT_SQUARE, DARK_SQUARE, HIGHLIGHT, TARGET_OUTLINE,
    PIECE_A_COLOR, PIECE_B_COLOR, PIECE_OUTLINE, BLOCKER_COLOR, BLOCKER_OUTLINE
)

# 型エイリアス
Board = List[List[Cell]]
FrozenBoard = Tuple[Tuple[Cell, ...], ...]


def empty_board() -> Board:
    """空の盤面を作成"""
    return [[Cell.EMPTY for _ in range(BOARD_SIZE)] for __ in range(BOARD_SIZE)]


def standard_setup() -> Board:
    """標準的な初期配置を作成"""
    board = empty_board()
    for player in (Player.A, Player.B):
        for row, col in STARTING_SQUARES[player]:
            board[row][col] = player.piece
    return board


def clone_board(board) -> Board:
    """Board の書き換え可能なコピー"""
    return [list(row) for row in board]


def freeze_board(board: Board) -> FrozenBoard:
    """外部へ渡すための読み取り専用コピー"""
    return tuple(tuple(row) for row in board)


def count_cells(board, cell: Cell) -> int:
    """指定した中身のマス数を数える"""
    return sum(1 for row in board for c in row if c == cell)


def find_pieces(board, player: Player) -> List[Tuple[int, int]]:
    """プレイヤーの駒の位置を列挙"""
    piece = player.piece
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE) if board[r][c] == piece]


def draw_board(screen, board, selection: Optional[Tuple[int, int]] = None,
               targets: Iterable[Tuple[int, int]] = ()) -> None:
    """盤面・選択マス・駒・矢を描画"""
    highlight = pygame.Surface((CELL_SIZE, CELL_SIZE), pygame.SRCALPHA)
    highlight.fill(HIGHLIGHT)
    target_set = set(targets)

    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            rect = pygame.Rect(c * CELL_SIZE, r * CELL_SIZE, CELL_SIZE, CELL_SIZE)
            pygame.draw.rect(screen, LIGHT_SQUARE if (r + c) % 2 == 0 else DARK_SQUARE, rect)

            if selection == (r, c):
                screen.blit(highlight, rect.topleft)
            elif (r, c) in target_set:
                pygame.draw.rect(screen, TARGET_OUTLINE, rect, 3)

            cell = board[r][c]
            if cell.is_piece:
                color = PIECE_A_COLOR if cell == Cell.PIECE_A else PIECE_B_COLOR
                disc = rect.inflate(-PIECE_INSET * 2, -PIECE_INSET * 2)
                pygame.draw.ellipse(screen, color, disc)
                pygame.draw.ellipse(screen, PIECE_OUTLINE, disc, 1)
            elif cell == Cell.BLOCKER:
                block = rect.inflate(-BLOCKER_INSET * 2, -BLOCKER_INSET * 2)
                pygame.draw.rect(screen, BLOCKER_COLOR, block)
                pygame.draw.rect(screen, BLOCKER_OUTLINE, block, 1)
