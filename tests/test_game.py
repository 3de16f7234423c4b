import pygame
import pytest

from bullsparade.game import FRAME_DURATION_MS, Game, main
from bullsparade.geometry import SCREEN_HEIGHT, SCREEN_WIDTH, CollisionSide, Vector2
from bullsparade.level import Level, LevelData
from bullsparade.player import SPEED, Key, Player

TILE = 16
RED = (255, 0, 0)
SHEET_COLOUR = (10, 20, 30)


def _level_dict():
    return {
        "width": 30,
        "height": 2,
        "tilewidth": TILE,
        "tileheight": TILE,
        "tilesets": [
            {"firstgid": 1, "columns": 1, "tilewidth": TILE, "tileheight": TILE, "image": "tiles.png"}
        ],
        "layers": [
            {"type": "tilelayer", "width": 1, "height": 1, "data": [1]},
            {
                "type": "objectgroup",
                "name": "collisions",
                "objects": [{"x": 0, "y": 100, "width": 64, "height": 16}],
            },
        ],
    }


@pytest.fixture
def sheet_path(tmp_path):
    sheet = pygame.Surface((8 * TILE, 2 * TILE))
    sheet.fill(SHEET_COLOUR)
    path = tmp_path / "character.png"
    pygame.image.save(sheet, str(path))
    return path


@pytest.fixture
def game(sheet_path):
    player = Player(sheet_path)
    tiles = pygame.Surface((TILE, TILE))
    tiles.fill(RED)
    level = Level(LevelData.from_dict(_level_dict()), player, {1: tiles})
    return Game(player, level)


def test_update_steps_at_fifteen_fps(game):
    game.player.game_object.position = Vector2(200, 10)
    game.update(1000)
    assert game.update(1065) is False
    assert game.update(1066) is True


def test_first_update_only_starts_timer(game):
    game.player.game_object.position = Vector2(200, 10)
    assert game.update(1000) is False
    assert game.player.game_object.position == Vector2(200, 10)


def test_update_steps_once_per_frame(game):
    game.player.game_object.position = Vector2(200, 10)
    game.update(1000)
    assert game.update(1000 + FRAME_DURATION_MS - 1) is False
    assert game.player.game_object.position.y == 10
    assert game.update(1000 + FRAME_DURATION_MS) is True
    assert game.player.game_object.position.y > 10
    assert game.update(1000 + FRAME_DURATION_MS + 1) is False


def test_handle_update_lands_player_on_box(game):
    game.player.game_object.position = Vector2(20, 90)
    game.handle_update(set())
    box = game.level.collisions[0].game_object
    assert game.player.collided_side == CollisionSide.BOTTOM
    assert game.player.game_object.position.y == box.top - game.player.game_object.size.height


def test_handle_update_player_stays_on_ground(game):
    game.player.game_object.position = Vector2(20, 90)
    game.handle_update(set())
    landed = game.player.game_object.position.y
    game.handle_update(set())
    assert game.player.game_object.position.y == landed


def test_handle_update_moving_right_scrolls_level(game):
    game.player.game_object.position = Vector2(200, 10)
    game.handle_update({Key.RIGHT})
    assert game.player.game_object.position.x == 200 + SPEED
    assert game.level.current_scroll.x == -SPEED
    assert game.player.x_movement_enabled is False
    game.handle_update({Key.RIGHT})
    assert game.player.game_object.position.x == 200 + SPEED


def test_layout_is_fixed(game):
    assert game.layout(1, 1) == (SCREEN_WIDTH, SCREEN_HEIGHT)
    assert game.layout(SCREEN_WIDTH * 3, SCREEN_HEIGHT * 5) == (SCREEN_WIDTH, SCREEN_HEIGHT)


def test_draw_shows_level_and_player(game):
    game.player.game_object.position = Vector2(100, 100)
    screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    game.draw(screen)
    assert tuple(screen.get_at((0, 0)))[:3] == RED
    assert tuple(screen.get_at((100, 100)))[:3] == SHEET_COLOUR
    assert tuple(screen.get_at((200, 200)))[:3] == (0, 0, 0)


def test_main_fails_on_missing_map(tmp_path, sheet_path):
    code = main(["--map", str(tmp_path / "missing.json"), "--sprite-sheet", str(sheet_path)])
    assert code == 1


def test_main_fails_on_missing_sprite_sheet(tmp_path):
    code = main(["--sprite-sheet", str(tmp_path / "missing.png")])
    assert code == 1