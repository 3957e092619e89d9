"""Keyboard handling for the menu and for moving the player."""

from __future__ import annotations

from typing import Iterable

import pygame

from .constants import PLAYER, GameState
from .maps import MapManager
from .player import Player

MENU_OPTIONS = 7
EXIT_OPTION = 6
_BOT_DEMO_FIRST_OPTION = 3
_BATTERY_BY_DIFFICULTY = {1: 50, 2: 40, 3: 35}

_MOVES = {
    pygame.K_w: (-1, 0),
    pygame.K_s: (1, 0),
    pygame.K_a: (0, -1),
    pygame.K_d: (0, 1),
}


class InputHandler:
    """Applies input events to a game.

    The game object needs ``current_state``, ``selected_option``, ``player``
    and ``map_manager`` attributes.
    """

    def handle_input(self, events: Iterable[pygame.event.Event], game) -> bool:
        """Process events; return False when the game should quit."""
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and not self.handle_key(event.key, game):
                return False
        return True

    def handle_key(self, key: int, game) -> bool:
        """Handle one key press; return False when the game should quit."""
        if game.current_state == GameState.MENU:
            return self._handle_menu_key(key, game)
        if game.current_state == GameState.PLAYING:
            player = game.player
            self.handle_player_movement(key, player, game.map_manager)
            if key == pygame.K_e and player.waiting_for_break:
                player.break_wall(game.map_manager.grid)
                player.waiting_for_break = False
            elif key == pygame.K_ESCAPE:
                game.current_state = GameState.MENU
        return True

    def _handle_menu_key(self, key: int, game) -> bool:
        if key == pygame.K_UP:
            game.selected_option = (game.selected_option - 1) % MENU_OPTIONS
        elif key == pygame.K_DOWN:
            game.selected_option = (game.selected_option + 1) % MENU_OPTIONS
        elif key == pygame.K_RETURN:
            if game.selected_option == EXIT_OPTION:
                return False
            is_bot_demo = game.selected_option >= _BOT_DEMO_FIRST_OPTION
            difficulty = (
                game.selected_option - 2 if is_bot_demo else game.selected_option + 1
            )
            self._start_level(difficulty, game.player, game.map_manager)
            game.current_state = GameState.BOT_DEMO if is_bot_demo else GameState.PLAYING
        return True

    @staticmethod
    def _start_level(difficulty: int, player: Player, map_manager: MapManager) -> None:
        map_manager.load_level(difficulty)
        player.set_position(1, 1)
        player.under_player = map_manager.get_cell(1, 1)
        map_manager.set_cell(1, 1, PLAYER)
        if difficulty in _BATTERY_BY_DIFFICULTY:
            player.battery = _BATTERY_BY_DIFFICULTY[difficulty]
        player.reset()

    def handle_player_movement(
        self, key: int, player: Player, map_manager: MapManager
    ) -> None:
        """Move on W/A/S/D, or wait for E when facing a wall with energy to break it."""
        move = _MOVES.get(key)
        if move is None:
            return
        dx, dy = move
        player.set_last_direction(dx, dy)
        if player.can_break and map_manager.is_wall(player.x + dx, player.y + dy):
            player.waiting_for_break = True
        else:
            player.move(dx, dy, map_manager.grid, map_manager.rows, map_manager.cols)