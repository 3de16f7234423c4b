"""Sprite-sheet based frame animation."""

from dataclasses import dataclass, field

import pygame

from .images import read_image_file


@dataclass
class FrameProperties:
    """Size of one frame on a sprite sheet and how many frames to take."""

    width: int
    height: int
    count: int


def _crop(sheet, x, y, width, height):
    rect = pygame.Rect(x, y, width, height).clip(sheet.get_rect())
    if rect.width == 0 or rect.height == 0:
        return pygame.Surface((0, 0))
    return sheet.subsurface(rect)


@dataclass
class Animator:
    """Holds named frame sequences and steps through the current one."""

    animations: dict = field(default_factory=dict)
    current_animation: str = ""
    current_frame_index: int = 0

    def add_animation(
        self,
        animation_name,
        sprite_sheet_path,
        initial_row,
        initial_column,
        orientation,
        frame_properties,
    ):
        """Cut frames out of a sprite sheet and store them under a name.

        Frames run to the right for "horizontal" and downwards for
        "vertical"; any other orientation yields no frames. The first
        animation added becomes the current one.
        """
        sheet = read_image_file(sprite_sheet_path)

        if not self.animations:
            self.current_animation = animation_name

        width = frame_properties.width
        height = frame_properties.height
        start_x = initial_column * width
        start_y = initial_row * height

        if orientation == "horizontal":
            offsets = ((start_x + width * i, start_y) for i in range(frame_properties.count))
        elif orientation == "vertical":
            offsets = ((start_x, start_y + height * i) for i in range(frame_properties.count))
        else:
            offsets = ()

        self.animations[animation_name] = [
            _crop(sheet, x, y, width, height) for x, y in offsets
        ]

    def change_animation(self, animation_name):
        """Switch to another animation, restarting it from its first frame."""
        if animation_name != self.current_animation:
            self.current_animation = animation_name
            self.current_frame_index = 0

    def update(self):
        """Advance to the next frame, wrapping around at the end."""
        frames = self.animations[self.current_animation]
        self.current_frame_index = (self.current_frame_index + 1) % len(frames)

    @property
    def current_frame(self):
        """The surface shown for the current frame."""
        return self.animations[self.current_animation][self.current_frame_index]

    def draw(self, screen, position):
        """Draw the current frame onto ``screen`` at ``position``."""
        if self.animations:
            screen.blit(self.current_frame, (position.x, position.y))