"""Static collision boxes taken from a level."""

from dataclasses import dataclass, field

import pygame

from .game_object import GameObject

_BORDER_COLOUR = (255, 0, 0, 255)
_BORDER_THICKNESS = 1


@dataclass
class Collision:
    """A solid area of the level."""

    game_object: GameObject = field(default_factory=GameObject)

    def debug_draw(self, screen):
        """Outline the collision box in red."""
        width = int(self.game_object.size.width)
        height = int(self.game_object.size.height)
        x = int(self.game_object.position.x)
        y = int(self.game_object.position.y)
        t = _BORDER_THICKNESS

        for rect in (
            pygame.Rect(x, y, width, t),
            pygame.Rect(x, y + height - t, width, t),
            pygame.Rect(x, y, t, height),
            pygame.Rect(x + width - t, y, t, height),
        ):
            screen.fill(_BORDER_COLOUR, rect)