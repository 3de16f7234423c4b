"""Positioned, sized and animated objects with box collision tests."""

from dataclasses import dataclass, field

from .animator import Animator
from .geometry import CollisionSide, Size, Vector2


@dataclass
class GameObject:
    """An axis-aligned box in the world that may carry an animation."""

    animator: Animator = field(default_factory=Animator)
    position: Vector2 = field(default_factory=Vector2)
    size: Size = field(default_factory=Size)
    velocity: Vector2 = field(default_factory=Vector2)

    @property
    def left(self):
        return self.position.x

    @property
    def right(self):
        return self.position.x + self.size.width

    @property
    def top(self):
        return self.position.y

    @property
    def bottom(self):
        return self.position.y + self.size.height

    def update(self):
        """Advance the object's animation."""
        self.animator.update()

    def draw(self, screen):
        """Draw the object's current animation frame."""
        self.animator.draw(screen, self.position)

    def collides_with(self, other):
        """Whether the two boxes overlap or touch."""
        return (
            self.right >= other.left
            and self.left <= other.right
            and self.top <= other.bottom
            and self.bottom >= other.top
        )

    def collision_side(self, other):
        """The side of this object that ``other`` overlaps, by least overlap."""
        center_ax = self.position.x + self.size.width / 2
        center_ay = self.position.y + self.size.height / 2
        center_bx = other.position.x + other.size.width / 2
        center_by = other.position.y + other.size.height / 2

        dx = center_bx - center_ax
        overlap_x = (self.size.width + other.size.width) / 2 - abs(dx)
        if overlap_x <= 0:
            return CollisionSide.NONE

        dy = center_by - center_ay
        overlap_y = (self.size.height + other.size.height) / 2 - abs(dy)
        if overlap_y <= 0:
            return CollisionSide.NONE

        if overlap_x < overlap_y:
            return CollisionSide.RIGHT if dx > 0 else CollisionSide.LEFT
        return CollisionSide.BOTTOM if dy > 0 else CollisionSide.TOP

    def set_offset(self, offset):
        """Move the object by ``offset``."""
        self.position.x += offset.x
        self.position.y += offset.y