"""Drawing of the level, status panel, menu and end screens onto a pygame surface."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pygame

from .constants import (
    CELL_SIZE,
    DOOR_CLOSED,
    DOOR_CLOSED_COLOR,
    DOOR_OPEN,
    DOOR_OPEN_COLOR,
    ENERGY_BAR_COLOR,
    ENERGY_FILL_COLOR,
    ERROR_COLOR,
    FINISH,
    FINISH_COLOR,
    FLOOR,
    FLOOR_COLOR,
    HIGHLIGHT_COLOR,
    MAX_ENERGY,
    PLAYER,
    PLAYER_COLOR,
    SUCCESS_COLOR,
    TANK_A,
    TANK_A_COLOR,
    TANK_B_COLOR,
    TANKS,
    TEXT_COLOR,
    UI_BACKGROUND_COLOR,
    UI_HEIGHT,
    WALL,
    WALL_COLOR,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)

if TYPE_CHECKING:
    from .maps import MapManager
    from .player import Player

FONT_PATHS = (
    "/System/Library/Fonts/Helvetica.ttc",
    "/System/Library/Fonts/Arial.ttf",
    "/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/STHeiti Light.ttc",
    "/System/Library/Fonts/STHeiti Medium.ttc",
    "/System/Library/Fonts/PingFang.ttc",
)

MENU_ITEMS = (
    "Jugar - Facil",
    "Jugar - Medio",
    "Jugar - Dificil",
    "Bot Demo - Facil",
    "Bot Demo - Medio",
    "Bot Demo - Dificil",
    "Salir",
)

MIN_CELL_SIZE = 20
_OUTLINE_COLOR = (60, 60, 80)
_WALL_OUTLINE_COLOR = (30, 30, 50)
_DOOR_OUTLINE_COLOR = (100, 80, 40)
_WHITE = (255, 255, 255)
_GLOW_COLOR = (0, 150, 255, 50)
_EFFICIENCY_COLOR = (0, 200, 255)
_INSTRUCTIONS_COLOR = (150, 150, 170)
_ENERGY_BAR_WIDTH = 250
_ENERGY_BAR_HEIGHT = 25
_ENERGY_FILL_MAX = 246
_ENERGY_FILL_HEIGHT = 21
_TEXT_SIZE = 22
_RETURN_MESSAGE = "Regresando al menu en 3 segundos..."


class Renderer:
    """Draws the game onto a target surface, usually the window's display surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.font_path: str | None = None
        self.font_loaded = False
        self._fonts: dict[int, pygame.font.Font] = {}

    def initialize_graphics(self) -> bool:
        """Pick the first usable system font, falling back to pygame's built-in one."""
        if not pygame.font.get_init():
            pygame.font.init()
        self.font_loaded = False
        self.font_path = None
        self._fonts.clear()
        for path in FONT_PATHS:
            if not os.path.isfile(path):
                continue
            try:
                pygame.font.Font(path, 12)
            except (OSError, pygame.error):
                continue
            self.font_path = path
            self.font_loaded = True
            print(f"Font loaded successfully from: {path}")
            break
        return True

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(self.font_path, size)
            self._fonts[size] = font
        return font

    def create_text(self, text: str, size: int, color) -> pygame.Surface:
        """Render a line of text in the given size and colour."""
        return self._font(size).render(text, True, color)

    def _blit_text(self, text: str, size: int, color, position: tuple[int, int]) -> None:
        self.surface.blit(self.create_text(text, size, color), position)

    def _blend_rect(self, rect: pygame.Rect, rgba: tuple[int, int, int, int]) -> None:
        layer = pygame.Surface(rect.size, pygame.SRCALPHA)
        layer.fill(rgba)
        self.surface.blit(layer, rect.topleft)

    def _blend_circle(self, center: tuple[int, int], radius: int, rgba) -> None:
        if radius <= 0:
            return
        layer = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
        pygame.draw.circle(layer, rgba, (radius, radius), radius)
        self.surface.blit(layer, (center[0] - radius, center[1] - radius))

    def _outlined_rect(self, rect: pygame.Rect, fill, outline, thickness: int) -> None:
        pygame.draw.rect(self.surface, fill, rect)
        pygame.draw.rect(self.surface, outline, rect, thickness)

    def _outlined_circle(self, center, radius: int, fill, outline, thickness: int) -> None:
        if radius <= 0:
            return
        pygame.draw.circle(self.surface, fill, center, radius)
        pygame.draw.circle(self.surface, outline, center, radius + thickness, thickness)

    def cell_size(self, map_manager: MapManager) -> int:
        """Side of one cell in pixels so the level fits above the status panel."""
        if map_manager.rows <= 0 or map_manager.cols <= 0:
            raise ValueError("no level is loaded")
        by_width = WINDOW_WIDTH // map_manager.cols
        by_height = (WINDOW_HEIGHT - UI_HEIGHT) // map_manager.rows
        size = max(min(by_width, by_height), MIN_CELL_SIZE)
        return min(size, CELL_SIZE)

    def draw_map(self, map_manager: MapManager, player: Player) -> None:
        """Draw every cell of the level, centred in the play area, and the player."""
        size = self.cell_size(map_manager)
        offset_x = (WINDOW_WIDTH - map_manager.cols * size) // 2
        offset_y = (WINDOW_HEIGHT - UI_HEIGHT - map_manager.rows * size) // 2
        radius = size // 2 - 3

        for i, row in enumerate(map_manager.grid):
            for j, cell in enumerate(row):
                rect = pygame.Rect(offset_x + j * size, offset_y + i * size, size, size)

                if cell == WALL:
                    self._outlined_rect(rect, WALL_COLOR, _WALL_OUTLINE_COLOR, 1)
                elif cell in (FLOOR, PLAYER):
                    self._outlined_rect(rect, FLOOR_COLOR, _OUTLINE_COLOR, 1)
                elif cell in TANKS:
                    self._outlined_rect(rect, FLOOR_COLOR, _OUTLINE_COLOR, 1)
                    tank_color = TANK_A_COLOR if cell == TANK_A else TANK_B_COLOR
                    self._outlined_circle(rect.center, radius, tank_color, _WHITE, 3)
                elif cell in (DOOR_CLOSED, DOOR_OPEN):
                    door_color = DOOR_OPEN_COLOR if cell == DOOR_OPEN else DOOR_CLOSED_COLOR
                    self._outlined_rect(rect, door_color, _DOOR_OUTLINE_COLOR, 2)
                elif cell == FINISH:
                    self._outlined_rect(rect, FINISH_COLOR, _WHITE, 3)

                if (i, j) == (player.x, player.y):
                    self._blend_circle(rect.center, size // 2, _GLOW_COLOR)
                    self._outlined_circle(rect.center, radius, PLAYER_COLOR, _WHITE, 3)

    def _draw_status_panel(self, player: Player) -> None:
        panel = pygame.Rect(0, WINDOW_HEIGHT - UI_HEIGHT, WINDOW_WIDTH, UI_HEIGHT)
        self._outlined_rect(panel, UI_BACKGROUND_COLOR, _OUTLINE_COLOR, 2)

        bar = pygame.Rect(50, WINDOW_HEIGHT - 150, _ENERGY_BAR_WIDTH, _ENERGY_BAR_HEIGHT)
        self._outlined_rect(bar, ENERGY_BAR_COLOR, _OUTLINE_COLOR, 2)
        fill_width = player.energy * _ENERGY_FILL_MAX // MAX_ENERGY
        if fill_width > 0:
            fill = pygame.Rect(52, WINDOW_HEIGHT - 148, fill_width, _ENERGY_FILL_HEIGHT)
            pygame.draw.rect(self.surface, ENERGY_FILL_COLOR, fill)

        self._blit_text(
            f"Bateria: {player.battery}", _TEXT_SIZE, TEXT_COLOR, (50, WINDOW_HEIGHT - 120)
        )
        self._blit_text(
            f"Energia: {player.energy} / {MAX_ENERGY}",
            _TEXT_SIZE,
            TEXT_COLOR,
            (50, WINDOW_HEIGHT - 90),
        )
        atmosphere = "Normal" if player.current_atmosphere == FLOOR else player.current_atmosphere
        self._blit_text(
            f"Atmosfera: {atmosphere}", _TEXT_SIZE, TEXT_COLOR, (50, WINDOW_HEIGHT - 60)
        )

    def draw_ui(self, player: Player) -> None:
        """Draw the status panel for a human player."""
        self._draw_status_panel(player)
        if player.can_break:
            self._blit_text(
                "Puedes romper paredes (presiona direccion + e)",
                _TEXT_SIZE,
                HIGHLIGHT_COLOR,
                (350, WINDOW_HEIGHT - 120),
            )
        if player.waiting_for_break:
            self._blit_text(
                "Esperando 'e' para romper pared...",
                _TEXT_SIZE,
                HIGHLIGHT_COLOR,
                (350, WINDOW_HEIGHT - 90),
            )

    def draw_menu(self, selected_option: int) -> None:
        """Draw the main menu with the selected option highlighted."""
        self.surface.fill(UI_BACKGROUND_COLOR)
        self._blit_text("ESTACION ESPACIAL", 48, HIGHLIGHT_COLOR, (WINDOW_WIDTH // 2 - 200, 80))

        for i, label in enumerate(MENU_ITEMS):
            color = TEXT_COLOR
            if i == selected_option:
                color = HIGHLIGHT_COLOR
                label = f"> {label}"
                highlight = pygame.Rect(180, 195 + i * 55, 400, 40)
                self._blend_rect(highlight, (60, 60, 80, 100))
                pygame.draw.rect(self.surface, HIGHLIGHT_COLOR, highlight.inflate(4, 4), 2)
            self._blit_text(label, 26, color, (200, 200 + i * 55))

        self._blit_text(
            "Usa W/A/S/D para mover, direccion + E para romper paredes",
            18,
            _INSTRUCTIONS_COLOR,
            (50, WINDOW_HEIGHT - 50),
        )

    def draw_game_over_screen(self, game_won: bool) -> None:
        """Dim the screen and announce whether the round was won."""
        self._blend_rect(pygame.Rect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT), (0, 0, 0, 180))
        message = "Ganaste" if game_won else "Perdiste"
        color = SUCCESS_COLOR if game_won else ERROR_COLOR
        self._blit_text(message, 72, color, (WINDOW_WIDTH // 2 - 150, WINDOW_HEIGHT // 2 - 100))
        self._blit_text(
            _RETURN_MESSAGE, 28, TEXT_COLOR, (WINDOW_WIDTH // 2 - 200, WINDOW_HEIGHT // 2 + 50)
        )

    def draw_bot_demo_ui(
        self,
        player: Player,
        current_step: int,
        total_steps: int,
        bot_won: bool,
        demo_finished: bool,
    ) -> None:
        """Draw the status panel with the bot's progress and, once done, its result."""
        self._draw_status_panel(player)
        self._blit_text(
            f"Bot Demo - Paso {current_step}/{total_steps - 1}",
            _TEXT_SIZE,
            HIGHLIGHT_COLOR,
            (350, WINDOW_HEIGHT - 120),
        )
        if demo_finished:
            message = "El bot completo el nivel" if bot_won else "El bot se quedo sin bateria"
            color = SUCCESS_COLOR if bot_won else ERROR_COLOR
            self._blit_text(message, _TEXT_SIZE, color, (350, WINDOW_HEIGHT - 90))
            self._blit_text(_RETURN_MESSAGE, _TEXT_SIZE, TEXT_COLOR, (350, WINDOW_HEIGHT - 60))
        else:
            self._blit_text(
                f"Eficiencia: {total_steps - 1} pasos",
                _TEXT_SIZE,
                _EFFICIENCY_COLOR,
                (350, WINDOW_HEIGHT - 90),
            )

    def clear(self) -> None:
        """Fill the whole surface with the background colour."""
        self.surface.fill(UI_BACKGROUND_COLOR)

    def display(self) -> None:
        """Show the finished frame when drawing onto the window."""
        if pygame.display.get_init() and pygame.display.get_surface() is self.surface:
            pygame.display.flip()