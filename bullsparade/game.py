"""The game loop: fixed-rate updates, drawing and the window."""

import argparse
import sys
import time

import pygame

from .geometry import SCALE, SCREEN_HEIGHT, SCREEN_WIDTH, Vector2
from .level import DEFAULT_TILESET_DIR, load_level
from .player import DEFAULT_SPRITE_SHEET, Key, Player

FPS = 15
FRAME_DURATION_MS = 1000 // FPS
TICKS_PER_SECOND = 60
WINDOW_TITLE = "Animation"
DEFAULT_MAP = "content/maps/map_1.json"

_KEY_BINDINGS = (
    (pygame.K_RIGHT, Key.RIGHT),
    (pygame.K_LEFT, Key.LEFT),
    (pygame.K_UP, Key.UP),
    (pygame.K_DOWN, Key.DOWN),
    (pygame.K_SPACE, Key.SPACE),
)


class Game:
    """Ties the player and the level together and steps them at a fixed rate."""

    def __init__(self, player, level):
        self.player = player
        self.level = level
        self.time_to_update = 0

    def update(self, now_ms, keys=()):
        """Step the game if a frame's time has passed; return whether it stepped."""
        if self.time_to_update == 0:
            self.time_to_update = now_ms + FRAME_DURATION_MS
        if now_ms < self.time_to_update:
            return False
        self.time_to_update = now_ms + FRAME_DURATION_MS
        self.handle_update(keys)
        return True

    def handle_update(self, keys):
        """Move the player, resolve level collisions and scroll the level."""
        self.player.update(keys)
        collisions = self.level.get_level_collisions(self.player.game_object)
        self.player.handle_level_collisions(collisions)
        self.level.update()

    def draw(self, screen):
        """Draw the level, then the player on top."""
        self.level.draw(screen)
        self.player.draw(screen)

    def layout(self, outside_width, outside_height):
        """The logical screen size, whatever the window size."""
        return SCREEN_WIDTH, SCREEN_HEIGHT


def _pressed_keys():
    pressed = pygame.key.get_pressed()
    return {key for code, key in _KEY_BINDINGS if pressed[code]}


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Side-scrolling platform game.")
    parser.add_argument("--map", default=DEFAULT_MAP, help="Tiled JSON map file")
    parser.add_argument("--sprite-sheet", default=DEFAULT_SPRITE_SHEET, help="player sprite sheet")
    parser.add_argument("--tileset-dir", default=DEFAULT_TILESET_DIR, help="directory of tileset images")
    return parser.parse_args(argv)


def main(argv=None):
    """Load the map and run the game window until it is closed."""
    args = _parse_args(argv)
    try:
        player = Player(args.sprite_sheet)
        level = load_level(args.map, player, args.tileset_dir)
    except (OSError, ValueError, KeyError, TypeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    spawn = level.player_spawn_position
    player.game_object.position = Vector2(spawn.x, spawn.y)
    game = Game(player, level)

    pygame.init()
    try:
        window = pygame.display.set_mode((SCREEN_WIDTH * SCALE, SCREEN_HEIGHT * SCALE))
        pygame.display.set_caption(WINDOW_TITLE)
        canvas = pygame.Surface(game.layout(*window.get_size()))
        clock = pygame.time.Clock()
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
            game.update(int(time.time() * 1000), _pressed_keys())
            canvas.fill((0, 0, 0))
            game.draw(canvas)
            pygame.transform.scale(canvas, window.get_size(), window)
            pygame.display.flip()
            clock.tick(TICKS_PER_SECOND)
    finally:
        pygame.quit()