"""Tiled JSON maps: parsing, tile placement, collisions and scrolling."""

import json
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from .collision import Collision
from .game_object import GameObject
from .geometry import SCREEN_WIDTH, Size, Vector2
from .images import read_image_file

DEFAULT_TILESET_DIR = "content/tilesets"

COLLISIONS_LAYER = "collisions"
SPAWN_POINTS_LAYER = "spawn points"


@dataclass
class Animation:
    """One frame of an animated tile."""

    duration: int = 0
    tile_id: int = 0


@dataclass
class RawTile:
    """Per-tile data stored in a tileset."""

    animation: list = field(default_factory=list)
    id: int = 0


@dataclass
class TileSet:
    """A tileset referenced by the map."""

    columns: int = 0
    first_gid: int = 0
    image: str = ""
    image_height: float = 0.0
    image_width: float = 0.0
    margin: int = 0
    name: str = ""
    spacing: int = 0
    tile_count: int = 0
    tile_height: float = 0.0
    tile_width: float = 0.0
    tiles: list = field(default_factory=list)


@dataclass
class PolylinePoint:
    """A point of a polyline object."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class ObjectProperty:
    """A custom property attached to a map object."""

    name: str = ""
    type: str = ""
    value: object = ""


@dataclass
class MapObject:
    """An object placed on an object layer."""

    id: int = 0
    height: float = 0.0
    width: float = 0.0
    x: float = 0.0
    y: float = 0.0
    visible: bool = False
    name: str = ""
    rotation: float = 0.0
    properties: list = field(default_factory=list)
    polyline: list = field(default_factory=list)
    ellipse: bool = False
    type: str = ""


@dataclass
class Layer:
    """A tile layer or an object group."""

    data: list = field(default_factory=list)
    height: float = 0.0
    width: float = 0.0
    id: int = 0
    name: str = ""
    opacity: int = 0
    type: str = ""
    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    draw_order: str = ""
    objects: list = field(default_factory=list)
    color: str = ""


def _items(raw, key):
    return raw.get(key) or []


def _parse_tileset(raw):
    return TileSet(
        columns=raw.get("columns", 0),
        first_gid=raw.get("firstgid", 0),
        image=raw.get("image", ""),
        image_height=raw.get("imageheight", 0.0),
        image_width=raw.get("imagewidth", 0.0),
        margin=raw.get("margin", 0),
        name=raw.get("name", ""),
        spacing=raw.get("spacing", 0),
        tile_count=raw.get("tilecount", 0),
        tile_height=raw.get("tileheight", 0.0),
        tile_width=raw.get("tilewidth", 0.0),
        tiles=[
            RawTile(
                animation=[
                    Animation(duration=a.get("duration", 0), tile_id=a.get("tileid", 0))
                    for a in _items(tile, "animation")
                ],
                id=tile.get("id", 0),
            )
            for tile in _items(raw, "tiles")
        ],
    )


def _parse_object(raw):
    return MapObject(
        id=raw.get("id", 0),
        height=raw.get("height", 0.0),
        width=raw.get("width", 0.0),
        x=raw.get("x", 0.0),
        y=raw.get("y", 0.0),
        visible=raw.get("visible", False),
        name=raw.get("name", ""),
        rotation=raw.get("rotation", 0.0),
        properties=[
            ObjectProperty(
                name=p.get("name", ""), type=p.get("type", ""), value=p.get("value", "")
            )
            for p in _items(raw, "properties")
        ],
        polyline=[
            PolylinePoint(x=p.get("x", 0.0), y=p.get("y", 0.0))
            for p in _items(raw, "polyline")
        ],
        ellipse=raw.get("ellipse", False),
        type=raw.get("type", ""),
    )


def _parse_layer(raw):
    return Layer(
        data=list(_items(raw, "data")),
        height=raw.get("height", 0.0),
        width=raw.get("width", 0.0),
        id=raw.get("id", 0),
        name=raw.get("name", ""),
        opacity=raw.get("opacity", 0),
        type=raw.get("type", ""),
        visible=raw.get("visible", False),
        x=raw.get("x", 0.0),
        y=raw.get("y", 0.0),
        draw_order=raw.get("draworder", ""),
        objects=[_parse_object(o) for o in _items(raw, "objects")],
        color=raw.get("color", ""),
    )


@dataclass
class LevelData:
    """The contents of a Tiled JSON map file."""

    width: float = 0.0
    height: float = 0.0
    version: str = ""
    type: str = ""
    compression_level: int = 0
    infinite: bool = False
    next_layer_id: int = 0
    next_object_id: int = 0
    orientation: str = ""
    render_order: str = ""
    tiled_version: str = ""
    tile_height: float = 0.0
    tile_width: float = 0.0
    layers: list = field(default_factory=list)
    tile_sets: list = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        """Build map data from a decoded JSON object; missing keys get defaults."""
        if not isinstance(data, dict):
            raise ValueError("map data must be a JSON object")
        return cls(
            width=data.get("width", 0.0),
            height=data.get("height", 0.0),
            version=data.get("version", ""),
            type=data.get("type", ""),
            compression_level=data.get("compressionlevel", 0),
            infinite=data.get("infinite", False),
            next_layer_id=data.get("nextlayerid", 0),
            next_object_id=data.get("nextobjectid", 0),
            orientation=data.get("orientation", ""),
            render_order=data.get("renderorder", ""),
            tiled_version=data.get("tiledversion", ""),
            tile_height=data.get("tileheight", 0.0),
            tile_width=data.get("tilewidth", 0.0),
            layers=[_parse_layer(layer) for layer in _items(data, "layers")],
            tile_sets=[_parse_tileset(ts) for ts in _items(data, "tilesets")],
        )


@dataclass
class Tile:
    """A placed map tile with its image."""

    game_object: GameObject
    image: object

    def draw(self, screen):
        """Draw the tile at its position."""
        position = self.game_object.position
        screen.blit(self.image, (position.x, position.y))


def _sub_image(sheet, x, y, width, height):
    rect = pygame.Rect(x, y, width, height).clip(sheet.get_rect())
    if rect.width == 0 or rect.height == 0:
        return pygame.Surface((0, 0))
    return sheet.subsurface(rect)


class Level:
    """A loaded map: tiles, collision boxes, spawn point and horizontal scroll."""

    def __init__(self, data, player, tileset_images):
        self.width = data.width
        self.height = data.height
        self.tile_width = float(data.tile_width)
        self.tile_height = float(data.tile_height)
        self.x = 0.0
        self.y = 0.0
        self.layers = data.layers
        self.tile_sets = data.tile_sets
        self.tileset_images = dict(tileset_images)
        self.tiles = []
        self.collisions = []
        self.player_spawn_position = Vector2()
        self.player = player
        self.max_scroll = Vector2(self.tile_width * self.width - SCREEN_WIDTH, 0.0)
        self.current_scroll = Vector2()

        for layer in self.layers:
            if layer.type == "tilelayer":
                self._add_tiles(layer)
            elif layer.type == "objectgroup":
                self._add_objects(layer)

    def _add_objects(self, layer):
        for obj in layer.objects:
            if layer.name == COLLISIONS_LAYER:
                self.collisions.append(
                    Collision(
                        GameObject(
                            position=Vector2(obj.x, obj.y),
                            size=Size(obj.width, obj.height),
                        )
                    )
                )
            elif layer.name == SPAWN_POINTS_LAYER:
                self.player_spawn_position = Vector2(obj.x, obj.y)

    def _tileset_for(self, gid):
        current = None
        for tileset in self.tile_sets:
            if gid >= tileset.first_gid:
                current = tileset
        return current

    def _add_tiles(self, layer):
        rows = int(layer.height)
        columns = int(layer.width)
        for row in range(rows):
            for column in range(columns):
                index = row * columns + column
                if index >= len(layer.data):
                    continue
                gid = layer.data[index]
                if gid == 0:
                    continue
                tileset = self._tileset_for(gid)
                if tileset is None or tileset.first_gid == 0:
                    continue

                local_id = gid - tileset.first_gid
                tile_w = int(tileset.tile_width)
                tile_h = int(tileset.tile_height)
                source_x = (local_id % tileset.columns) * tile_w
                source_y = (local_id // tileset.columns) * tile_h
                image = _sub_image(
                    self.tileset_images[tileset.first_gid], source_x, source_y, tile_w, tile_h
                )
                self.tiles.append(
                    Tile(
                        GameObject(
                            position=Vector2(column * self.tile_width, row * self.tile_height),
                            size=Size(tileset.tile_width, tileset.tile_height),
                        ),
                        image,
                    )
                )

    def update(self):
        """Scroll the level against the player's horizontal velocity."""
        offset_x = -self.player.game_object.velocity.x
        scrolled = abs(self.current_scroll.x)
        move_left = scrolled <= self.max_scroll.x and offset_x < 0
        move_right = offset_x > 0 and scrolled > 0

        if not (move_left or move_right):
            self.player.x_movement_enabled = True
            return

        self.player.x_movement_enabled = False
        offset = Vector2(offset_x, 0.0)
        for tile in self.tiles:
            tile.game_object.set_offset(offset)
        for collision in self.collisions:
            collision.game_object.set_offset(offset)
        self.current_scroll.x += offset_x

    def draw(self, screen):
        """Draw every tile."""
        for tile in self.tiles:
            tile.draw(screen)

    def get_level_collisions(self, other):
        """The collision boxes that ``other`` overlaps or touches."""
        return [c for c in self.collisions if c.game_object.collides_with(other)]


def load_level(file_path, player, tileset_dir=DEFAULT_TILESET_DIR):
    """Read a Tiled JSON map and its tileset images into a Level.

    Tileset images are looked up by file name inside ``tileset_dir``.
    """
    data = LevelData.from_dict(json.loads(Path(file_path).read_text(encoding="utf-8")))
    images = {}
    for tileset in data.tile_sets:
        file_name = tileset.image.split("/")[-1]
        images[tileset.first_gid] = read_image_file(Path(tileset_dir) / file_name)
    return Level(data, player, images)