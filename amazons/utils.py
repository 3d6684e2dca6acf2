"""
Utility functions, constants, and UI helpers for the Amazons game.

This module provides:
- Board and window constants and color definitions
- Font loading functionality
- Coordinate conversion from pixels to board cells
- The game-over dialog
"""

import sys
from typing import Optional, Tuple

import pygame

# 盤面とウィンドウの基本設定
BOARD_SIZE = 10
CELL_SIZE = 60
WIDTH = BOARD_SIZE * CELL_SIZE
HEIGHT = BOARD_SIZE * CELL_SIZE
FPS = 60
WINDOW_TITLE = "Game of the Amazons"

# 駒と矢の描画サイズ
PIECE_INSET = 8
BLOCKER_INSET = 20

# 色の定義
LIGHT_SQUARE = (240, 217, 181)
DARK_SQUARE = (181, 136, 99)
HIGHLIGHT = (255, 255, 0, 120)
TARGET_OUTLINE = (90, 160, 90)
PIECE_A_COLOR = (255, 255, 255)
PIECE_B_COLOR = (0, 0, 0)
PIECE_OUTLINE = (128, 128, 128)
BLOCKER_COLOR = (255, 0, 0)
BLOCKER_OUTLINE = (0, 0, 0)
DIALOG_BG = (230, 230, 230)
BLACK = (20, 20, 20)
BUTTON_BLUE = (28, 93, 158)
WHITE = (255, 255, 255)


# グローバルフォントオブジェクト（遅延初期化）
FONT = LARGE_FONT = None


def initialize_fonts():
    """フォントを初期化する（pygame.init()後に呼び出す）"""
    global FONT, LARGE_FONT
    if FONT is None:
        try:
            FONT = pygame.font.SysFont(None, 24)
            LARGE_FONT = pygame.font.SysFont(None, 36)
        except pygame.error as e:
            print(f"Font initialisation failed, using default font: {e}")
            FONT = pygame.font.Font(None, 24)
            LARGE_FONT = pygame.font.Font(None, 36)


def in_bounds(row: int, col: int) -> bool:
    """座標が盤面内かチェック"""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def pixel_to_cell(x: int, y: int) -> Optional[Tuple[int, int]]:
    """ピクセル座標を (row, col) に変換。盤外なら None"""
    if x < 0 or y < 0:
        return None
    row, col = y // CELL_SIZE, x // CELL_SIZE
    if not in_bounds(row, col):
        return None
    return row, col


def show_game_over(screen, message: str) -> None:
    """勝敗ダイアログを表示し、OK が押されるまで待つ"""
    initialize_fonts()
    dialog = pygame.Surface((360, 160))
    dialog.fill(DIALOG_BG)
    dialog_rect = dialog.get_rect(center=(WIDTH//2, HEIGHT//2))
    pygame.draw.rect(dialog, BLACK, dialog.get_rect(), 3)

    title = LARGE_FONT.render("Game Over", True, BLACK)
    dialog.blit(title, title.get_rect(center=(dialog.get_width()//2, 30)))
    text = FONT.render(message, True, BLACK)
    dialog.blit(text, text.get_rect(center=(dialog.get_width()//2, 70)))

    ok_rect = pygame.Rect(dialog.get_width()//2 - 50, 100, 100, 40)
    pygame.draw.rect(dialog, BUTTON_BLUE, ok_rect, 0, 8)
    ok_text = FONT.render("OK", True, WHITE)
    dialog.blit(ok_text, ok_text.get_rect(center=ok_rect.center))

    screen.blit(dialog, dialog_rect.topleft)
    pygame.display.flip()

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit()
                sys.exit()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if ok_rect.move(dialog_rect.topleft).collidepoint(event.pos):
                    return
            elif event.type == pygame.KEYDOWN and event.key in (pygame.K_RETURN, pygame.K_ESCAPE):
                return
