"""
Game of the Amazons Package

A two-player Game of the Amazons rules engine with a pygame front end.

Modules:
- piece: Cell, player and turn-phase enumerations and starting squares
- board: Board representation, setup and drawing
- rules: Queen-move validation and mobility checks
- game: Game state and turn logic
- utils: Constants, coordinate conversion and UI helpers
- main: Entry point for the application
"""

from .piece import Cell, Player, TurnPhase
from .board import Board, standard_setup
from .rules import is_legal_move, has_any_legal_move
from .game import GameState, Snapshot

__version__ = "1.0.0"
__all__ = [
    'Cell', 'Player', 'TurnPhase', 'Board', 'standard_setup',
    'is_legal_move', 'has_any_legal_move', 'GameState', 'Snapshot'
]
