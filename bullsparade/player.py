"""The player-controlled character."""

from enum import Enum

from .animator import FrameProperties
from .game_object import GameObject
from .geometry import CollisionSide, Size, Vector2

SPEED = 1.5
GRAVITY = 20.0
GRAVITY_SMOOTHING = 0.4541561
JUMP_SPEED = 40.0
FALL_SPEED = GRAVITY / 2
JUMP_HEIGHT = 35

DEFAULT_SPRITE_SHEET = "character.png"

_FRAME_SIZE = 16

# name, row, column, orientation, frame count
_ANIMATIONS = (
    ("walk-left", 0, 0, "horizontal", 6),
    ("walk-right", 1, 0, "horizontal", 6),
    ("walk-up", 0, 7, "vertical", 2),
    ("walk-down", 0, 5, "vertical", 2),
    ("idle", 0, 0, "vertical", 1),
)


class Key(Enum):
    """Keys the player reacts to."""

    RIGHT = "right"
    LEFT = "left"
    UP = "up"
    DOWN = "down"
    SPACE = "space"


class Player:
    """A walking, jumping character subject to gravity and level collisions."""

    def __init__(self, sprite_sheet_path=DEFAULT_SPRITE_SHEET):
        self.game_object = GameObject(
            position=Vector2(0.0, 0.0),
            size=Size(float(_FRAME_SIZE), float(_FRAME_SIZE)),
            velocity=Vector2(0.0, 0.0),
        )
        self.collided_side = CollisionSide.NONE
        self.is_jumping = False
        self.x_movement_enabled = True

        animator = self.game_object.animator
        for name, row, column, orientation, count in _ANIMATIONS:
            animator.add_animation(
                name,
                sprite_sheet_path,
                row,
                column,
                orientation,
                FrameProperties(_FRAME_SIZE, _FRAME_SIZE, count),
            )
        animator.change_animation("walk-right")

    def update(self, keys):
        """Advance animation, react to the pressed ``keys`` and apply gravity."""
        self.game_object.update()
        self.move(keys)
        self._handle_gravity()

    def _handle_gravity(self):
        if self.collided_side == CollisionSide.BOTTOM:
            return
        if self.is_jumping:
            self.game_object.position.y += FALL_SPEED * GRAVITY_SMOOTHING
            return
        self.game_object.position.y += GRAVITY * GRAVITY_SMOOTHING

    def move(self, keys):
        """Move according to the set of pressed keys; one direction at a time."""
        keys = set(keys)
        if Key.RIGHT in keys:
            self.move_right()
        elif Key.LEFT in keys:
            self.move_left()
        elif Key.UP in keys:
            self.move_up()
        elif Key.DOWN in keys:
            self.move_down()
        else:
            self.game_object.velocity.x = 0
            self.game_object.animator.change_animation("idle")
        if Key.SPACE in keys and self.collided_side == CollisionSide.BOTTOM:
            self.jump()

    def draw(self, screen):
        """Draw the player's current frame."""
        self.game_object.draw(screen)

    def move_right(self):
        self.game_object.animator.change_animation("walk-right")
        if self.collided_side != CollisionSide.RIGHT:
            self.game_object.velocity.x = SPEED
        if self.x_movement_enabled:
            self.game_object.position.x += self.game_object.velocity.x

    def move_left(self):
        self.game_object.animator.change_animation("walk-left")
        if self.collided_side != CollisionSide.LEFT:
            self.game_object.velocity.x = -SPEED
        if self.x_movement_enabled:
            self.game_object.position.x += self.game_object.velocity.x

    def move_up(self):
        self.game_object.animator.change_animation("walk-up")
        if self.collided_side != CollisionSide.TOP:
            self.game_object.velocity.y = SPEED
        self.game_object.position.y -= self.game_object.velocity.y

    def move_down(self):
        self.game_object.animator.change_animation("walk-down")
        if self.collided_side != CollisionSide.BOTTOM:
            self.game_object.velocity.y = SPEED
        self.game_object.position.y += self.game_object.velocity.y

    def jump(self):
        self.game_object.position.y -= JUMP_HEIGHT
        self.is_jumping = True

    def handle_level_collisions(self, collisions):
        """Push the player out of every overlapping collision box."""
        self.collided_side = CollisionSide.NONE
        obj = self.game_object
        for collision in collisions:
            other = collision.game_object
            side = obj.collision_side(other)
            if side == CollisionSide.RIGHT:
                obj.position.x = other.left - obj.size.width
                obj.velocity.x = 0
            elif side == CollisionSide.LEFT:
                obj.position.x = other.right
                obj.velocity.x = 0
            elif side == CollisionSide.TOP:
                obj.position.y = other.bottom
                obj.velocity.y = 0
            elif side == CollisionSide.BOTTOM:
                obj.position.y = other.top - obj.size.height
                obj.velocity.y = 0
            else:
                continue
            self.collided_side = side