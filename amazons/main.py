"""
Main entry point and game loop for the Amazons application.

This module provides:
- Window setup and the game loop
- Mouse input mapped to board cells
- The game-over dialog between games
"""

import logging
import sys

import pygame

from .board import draw_board
from .game import GameState
from .piece import TurnPhase
from .rules import legal_destinations
from .utils import WIDTH, HEIGHT, FPS, WINDOW_TITLE, initialize_fonts, pixel_to_cell, show_game_over


def draw_game_elements(screen, state: GameState) -> None:
    """ゲーム要素を描画"""
    snapshot = state.current_state()
    targets = []
    if snapshot.selection is not None and snapshot.phase is not TurnPhase.SELECT_PIECE:
        targets = legal_destinations(snapshot.board, snapshot.selection)
    draw_board(screen, snapshot.board, snapshot.selection, targets)
    pygame.display.flip()


def _handle_events(screen, state: GameState) -> bool:
    """イベント処理。終了要求なら False"""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            cell = pixel_to_cell(*event.pos)
            if cell is None:
                continue
            state.handle_select(*cell)
            winner = state.pop_game_over()
            if winner is not None:
                draw_game_elements(screen, state)
                show_game_over(screen, f"{winner.display_name} wins!")
    return True


def main() -> None:
    """メイン関数"""
    logging.basicConfig(level=logging.INFO, format="%(name)s - %(levelname)s - %(message)s")
    pygame.init()
    initialize_fonts()

    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(WINDOW_TITLE)
    clock = pygame.time.Clock()
    state = GameState()

    running = True
    while running:
        running = _handle_events(screen, state)
        draw_game_elements(screen, state)
        clock.tick(FPS)

    pygame.quit()


if __name__ == "__main__":
    main()
    sys.exit(0)
