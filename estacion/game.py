"""The game loop: menu, human play, the bot demo and the end-of-round screen."""

from __future__ import annotations

import argparse
import time
from typing import Callable, Optional

import pygame

from .aibot import AIBot
from .constants import (
    BOT_DEMO_DELAY,
    FINISH,
    FLOOR,
    GAME_OVER_DELAY,
    MAX_ENERGY,
    PLAYER,
    WALL,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    GameState,
)
from .inputhandler import InputHandler
from .maps import MapManager
from .player import Player
from .renderer import Renderer

WINDOW_TITLE = "Estacion Espacial"
FRAME_RATE = 60
BOT_DEMO_RESULT_DELAY = 3.0
_BATTERY_BY_LEVEL = {1: 50, 2: 40, 3: 35}
_START = (1, 1)


class _Stopwatch:
    """Measures the seconds since it was last restarted."""

    def __init__(self, clock: Callable[[], float]) -> None:
        self._clock = clock
        self._started = clock()

    def restart(self) -> None:
        self._started = self._clock()

    @property
    def elapsed(self) -> float:
        return self._clock() - self._started


class Game:
    """Owns the level, the player, the bot and the screen, and drives them each frame."""

    def __init__(
        self,
        surface: Optional[pygame.Surface] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
            pygame.display.set_caption(WINDOW_TITLE)
        self.surface = surface
        self._clock = clock or time.monotonic

        self.current_state = GameState.MENU
        self.selected_option = 0
        self.game_won = False

        self.bot_demo_level = 0
        self.bot_demo_active = False
        self.bot_path: list[tuple[int, int]] = []
        self.current_bot_step = 0
        self.bot_demo_won = False
        self.bot_demo_finished = False

        self._game_over_timer = _Stopwatch(self._clock)
        self._bot_demo_timer = _Stopwatch(self._clock)

        self.player = Player()
        self.map_manager = MapManager()
        self.ai_bot = AIBot()
        self.renderer = Renderer(surface)
        self.input_handler = InputHandler()
        self.renderer.initialize_graphics()

    def run(self) -> None:
        """Process input, update and draw until the window is closed or Exit is chosen."""
        frame_clock = pygame.time.Clock()
        try:
            while True:
                if not self.input_handler.handle_input(pygame.event.get(), self):
                    break
                self.update()
                self.render()
                frame_clock.tick(FRAME_RATE)
        finally:
            pygame.quit()

    def update(self) -> None:
        """Advance whatever the current state needs: outcome checks, timers, bot moves."""
        if self.current_state == GameState.PLAYING:
            self.check_game_over()
        elif self.current_state == GameState.GAME_OVER_SCREEN:
            if self._game_over_timer.elapsed >= GAME_OVER_DELAY:
                self.current_state = GameState.MENU
                self.selected_option = 0
        elif self.current_state == GameState.BOT_DEMO:
            if not self.bot_demo_active:
                level = self.selected_option - 2 if self.selected_option >= 3 else 1
                self.start_bot_demo(level)
            else:
                self.update_bot_demo()

    def render(self) -> None:
        """Draw one frame for the current state and show it."""
        state = self.current_state
        if state == GameState.MENU:
            self.renderer.draw_menu(self.selected_option)
        elif state in (GameState.PLAYING, GameState.GAME_OVER_SCREEN):
            self.renderer.clear()
            self.renderer.draw_map(self.map_manager, self.player)
            self.renderer.draw_ui(self.player)
            if state == GameState.GAME_OVER_SCREEN:
                self.renderer.draw_game_over_screen(self.game_won)
        elif state == GameState.BOT_DEMO:
            self.renderer.clear()
            self.renderer.draw_map(self.map_manager, self.player)
            self.renderer.draw_bot_demo_ui(
                self.player,
                self.current_bot_step,
                len(self.bot_path),
                self.bot_demo_won,
                self.bot_demo_finished,
            )
        self.renderer.display()

    def start_bot_demo(self, level: int) -> None:
        """Load a level, place the bot at the start and plan its route to the finish."""
        if level not in _BATTERY_BY_LEVEL:
            raise ValueError(f"unknown level: {level}")
        self.bot_demo_level = level
        self.bot_demo_active = True
        self.current_bot_step = 0
        self.bot_demo_won = False
        self.bot_demo_finished = False
        self.bot_path = []

        self.map_manager.load_level(level)
        self.player.set_position(*_START)
        self.player.under_player = self.map_manager.get_cell(*_START)
        self.map_manager.set_cell(*_START, PLAYER)
        self.player.battery = _BATTERY_BY_LEVEL[level]
        self.player.reset()

        self.find_bot_path()

        if self.bot_path:
            self.current_state = GameState.BOT_DEMO
            self._bot_demo_timer.restart()
        else:
            self.current_state = GameState.MENU
            self.bot_demo_active = False

    def find_bot_path(self) -> None:
        """Plan the bot's route from its position to the first finish cell found."""
        finish = next(
            (
                (i, j)
                for i, row in enumerate(self.map_manager.grid)
                for j, cell in enumerate(row)
                if cell == FINISH
            ),
            None,
        )
        if finish is not None:
            self.bot_path = self.ai_bot.find_path(
                self.player.x, self.player.y, finish[0], finish[1], self.map_manager
            )

    def update_bot_demo(self) -> None:
        """Take the next bot step when due, or return to the menu after the result shows."""
        if self.bot_demo_finished:
            if self._bot_demo_timer.elapsed >= BOT_DEMO_RESULT_DELAY:
                self.current_state = GameState.MENU
                self.selected_option = 0
                self.bot_demo_active = False
                self.bot_demo_finished = False
                self.bot_demo_won = False
                self.current_bot_step = 0
                self.bot_path = []
            return

        if self._bot_demo_timer.elapsed >= BOT_DEMO_DELAY:
            self.execute_bot_step()
            self._bot_demo_timer.restart()

    def execute_bot_step(self) -> None:
        """Move the bot one cell along its planned route."""
        player = self.player
        grid = self.map_manager
        if self.current_bot_step >= len(self.bot_path) - 1 or player.battery <= 0:
            self.bot_demo_finished = True
            return

        current_x, current_y = self.bot_path[self.current_bot_step]
        next_x, next_y = self.bot_path[self.current_bot_step + 1]
        next_cell = grid.get_cell(next_x, next_y)

        if next_cell == WALL:
            if not player.can_break:
                self.bot_demo_finished = True
                return
            grid.set_cell(next_x, next_y, FLOOR)
            player.can_break = False
            player.energy = 0
            next_cell = FLOOR

        grid.set_cell(current_x, current_y, player.under_player)

        if next_cell == FINISH:
            player.under_player = FINISH
            player.set_position(next_x, next_y)
            grid.set_cell(next_x, next_y, PLAYER)
            self.bot_demo_won = True
            self.bot_demo_finished = True
        else:
            if grid.is_tank(next_cell):
                player.current_atmosphere = next_cell
                player.update_doors(grid.grid, grid.rows, grid.cols)
            player.under_player = next_cell
            player.set_position(next_x, next_y)
            grid.set_cell(next_x, next_y, PLAYER)

        player.battery -= 1
        player.energy += 1
        if player.energy >= MAX_ENERGY:
            player.energy = MAX_ENERGY
            player.can_break = True

        self.current_bot_step += 1

        if player.battery <= 0:
            self.bot_demo_finished = True

    def check_game_over(self) -> None:
        """End the round when the player has won or the battery is empty."""
        if self.player.game_won:
            self.start_game_over_screen(True)
        elif self.player.battery <= 0:
            self.start_game_over_screen(False)

    def start_game_over_screen(self, won: bool) -> None:
        """Show the end-of-round screen and start its countdown to the menu."""
        self.game_won = won
        self.current_state = GameState.GAME_OVER_SCREEN
        self._game_over_timer.restart()


def main(argv: Optional[list[str]] = None) -> int:
    """Open the game window and play until it is closed."""
    parser = argparse.ArgumentParser(
        prog="estacion", description="A space-station maze game with a bot demo."
    )
    parser.parse_args(argv)
    Game().run()
    return 0