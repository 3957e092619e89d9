import pygame
import pytest

from estacion.constants import (
    CELL_SIZE,
    DOOR_CLOSED_COLOR,
    DOOR_OPEN_COLOR,
    ENERGY_FILL_COLOR,
    ERROR_COLOR,
    FINISH_COLOR,
    HIGHLIGHT_COLOR,
    MAX_ENERGY,
    PLAYER,
    PLAYER_COLOR,
    SUCCESS_COLOR,
    TANK_A_COLOR,
    TANK_B_COLOR,
    UI_BACKGROUND_COLOR,
    WALL_COLOR,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from estacion.maps import MapManager
from estacion.player import Player
from estacion.renderer import Renderer

EFFICIENCY_COLOR = (0, 200, 255)


def count(surface, color):
    return pygame.mask.from_threshold(surface, color, (1, 1, 1, 255)).count()


@pytest.fixture
def renderer():
    r = Renderer(pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT)))
    r.initialize_graphics()
    r.clear()
    return r


@pytest.fixture
def level():
    mm = MapManager()
    mm.load_level(1)
    player = Player()
    player.set_position(1, 1)
    player.under_player = mm.get_cell(1, 1)
    mm.set_cell(1, 1, PLAYER)
    return mm, player


def test_initialize_graphics_returns_true():
    r = Renderer(pygame.Surface((10, 10)))
    assert r.initialize_graphics() is True


def test_cell_size_easy_level_is_capped():
    mm = MapManager()
    mm.load_level(1)
    r = Renderer(pygame.Surface((10, 10)))
    assert r.cell_size(mm) == CELL_SIZE


@pytest.mark.parametrize("difficulty", [1, 2, 3])
def test_cell_size_fits_play_area(difficulty):
    mm = MapManager()
    mm.load_level(difficulty)
    size = Renderer(pygame.Surface((10, 10))).cell_size(mm)
    assert 20 <= size <= CELL_SIZE
    assert mm.cols * size <= WINDOW_WIDTH


def test_cell_size_hard_not_larger_than_easy():
    r = Renderer(pygame.Surface((10, 10)))
    easy, hard = MapManager(), MapManager()
    easy.load_level(1)
    hard.load_level(3)
    assert r.cell_size(hard) < r.cell_size(easy)


def test_cell_size_without_level_raises():
    with pytest.raises(ValueError):
        Renderer(pygame.Surface((10, 10))).cell_size(MapManager())


def test_create_text_grows_with_length_and_size(renderer):
    short = renderer.create_text("Bateria", 22, (255, 255, 255))
    long = renderer.create_text("Bateria: 50 / Energia", 22, (255, 255, 255))
    big = renderer.create_text("Bateria", 48, (255, 255, 255))
    assert long.get_width() > short.get_width()
    assert big.get_height() > short.get_height()


def test_clear_fills_background():
    surface = pygame.Surface((WINDOW_WIDTH, WINDOW_HEIGHT))
    surface.fill((1, 2, 3))
    Renderer(surface).clear()
    assert tuple(surface.get_at((5, 5)))[:3] == UI_BACKGROUND_COLOR
    assert tuple(surface.get_at((WINDOW_WIDTH - 1, WINDOW_HEIGHT - 1)))[:3] == UI_BACKGROUND_COLOR


def test_draw_map_shows_level_features(renderer, level):
    mm, player = level
    renderer.draw_map(mm, player)
    surface = renderer.surface
    assert count(surface, PLAYER_COLOR) > 0
    assert count(surface, WALL_COLOR) > 0
    assert count(surface, FINISH_COLOR) > 0
    assert count(surface, TANK_A_COLOR) > 0
    assert count(surface, TANK_B_COLOR) > 0
    assert count(surface, DOOR_CLOSED_COLOR) > 0
    assert count(surface, DOOR_OPEN_COLOR) == 0


def test_draw_map_shows_open_doors_in_atmosphere_a(renderer, level):
    mm, player = level
    player.current_atmosphere = "A"
    player.update_doors(mm.grid, mm.rows, mm.cols)
    renderer.draw_map(mm, player)
    assert count(renderer.surface, DOOR_OPEN_COLOR) > 0
    assert count(renderer.surface, DOOR_CLOSED_COLOR) == 0


def test_draw_map_player_moves_with_position(renderer, level):
    mm, player = level
    renderer.draw_map(mm, player)
    before = pygame.mask.from_threshold(renderer.surface, PLAYER_COLOR, (1, 1, 1, 255)).centroid()
    player.move(0, 1, mm.grid, mm.rows, mm.cols)
    renderer.clear()
    renderer.draw_map(mm, player)
    after = pygame.mask.from_threshold(renderer.surface, PLAYER_COLOR, (1, 1, 1, 255)).centroid()
    assert after[0] > before[0]
    assert after[1] == before[1]


def test_draw_ui_energy_fill_grows(renderer):
    fills = []
    for energy in (0, 2, MAX_ENERGY):
        renderer.clear()
        renderer.draw_ui(Player(energy=energy))
        fills.append(count(renderer.surface, ENERGY_FILL_COLOR))
    assert fills[0] == 0
    assert fills[0] < fills[1] < fills[2]


def test_draw_ui_break_hint_only_when_possible(renderer):
    renderer.draw_ui(Player())
    assert count(renderer.surface, HIGHLIGHT_COLOR) == 0
    renderer.clear()
    renderer.draw_ui(Player(can_break=True))
    assert count(renderer.surface, HIGHLIGHT_COLOR) > 0


def test_draw_ui_waiting_hint(renderer):
    renderer.draw_ui(Player(waiting_for_break=True))
    assert count(renderer.surface, HIGHLIGHT_COLOR) > 0


def test_draw_menu_background_and_highlight(renderer):
    renderer.surface.fill((1, 2, 3))
    renderer.draw_menu(0)
    assert tuple(renderer.surface.get_at((0, 0)))[:3] == UI_BACKGROUND_COLOR
    assert count(renderer.surface, HIGHLIGHT_COLOR) > 0


def test_draw_menu_highlight_follows_selection(renderer):
    def highlight_centroid(option):
        renderer.draw_menu(option)
        mask = pygame.mask.from_threshold(renderer.surface, HIGHLIGHT_COLOR, (1, 1, 1, 255))
        return mask.centroid()[1]

    assert highlight_centroid(0) < highlight_centroid(3) < highlight_centroid(6)


def test_game_over_screen_won(renderer):
    renderer.draw_game_over_screen(True)
    assert count(renderer.surface, SUCCESS_COLOR) > 0
    assert count(renderer.surface, ERROR_COLOR) == 0


def test_game_over_screen_lost(renderer):
    renderer.draw_game_over_screen(False)
    assert count(renderer.surface, ERROR_COLOR) > 0
    assert count(renderer.surface, SUCCESS_COLOR) == 0


def test_bot_demo_ui_running_shows_efficiency(renderer):
    renderer.draw_bot_demo_ui(Player(), 2, 10, False, False)
    assert count(renderer.surface, EFFICIENCY_COLOR) > 0
    assert count(renderer.surface, SUCCESS_COLOR) == 0
    assert count(renderer.surface, ERROR_COLOR) == 0
    assert count(renderer.surface, HIGHLIGHT_COLOR) > 0


def test_bot_demo_ui_finished_won(renderer):
    renderer.draw_bot_demo_ui(Player(), 9, 10, True, True)
    assert count(renderer.surface, SUCCESS_COLOR) > 0
    assert count(renderer.surface, ERROR_COLOR) == 0
    assert count(renderer.surface, EFFICIENCY_COLOR) == 0


def test_bot_demo_ui_finished_lost(renderer):
    renderer.draw_bot_demo_ui(Player(), 4, 10, False, True)
    assert count(renderer.surface, ERROR_COLOR) > 0
    assert count(renderer.surface, SUCCESS_COLOR) == 0