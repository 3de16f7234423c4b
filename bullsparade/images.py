"""Loading of image files into drawable surfaces."""

import io
from pathlib import Path

import pygame


def read_image_file(path):
    """Read and decode the image at ``path`` into a surface.

    Raises FileNotFoundError if the file is missing and ValueError if it
    cannot be decoded as an image.
    """
    path = Path(path)
    data = path.read_bytes()
    try:
        return pygame.image.load(io.BytesIO(data), path.name)
    except pygame.error as exc:
        raise ValueError(f"cannot decode image {path}: {exc}") from exc