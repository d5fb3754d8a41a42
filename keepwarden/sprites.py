"""Sprite sheets and the draw commands cut from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional

Color = tuple  # (r, g, b, a)
WHITE: Color = (255, 255, 255, 255)


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class DrawCommand:
    """One textured quad to be rendered."""

    sprite_id: str
    source: Rect
    dest: Rect
    origin: tuple
    rotation: float
    color: Color


@dataclass
class SpriteSheet:
    """A texture cut into equal frames, numbered row by row."""

    sprite_id: str
    texture_width: int
    texture_height: int
    width: int
    height: int
    path: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame size must be positive")
        if self.texture_width < 0 or self.texture_height < 0:
            raise ValueError("texture size must not be negative")

    @property
    def columns(self) -> int:
        return self.texture_width // self.width

    @property
    def rows(self) -> int:
        return self.texture_height // self.height

    def frame_count(self) -> int:
        """Number of whole frames on the sheet."""
        return self.columns * self.rows

    def source_rect(self, sprite_no: int, flipped: bool = False) -> Optional[Rect]:
        """Area of frame ``sprite_no``, or None when there is no such frame."""
        if sprite_no < 0 or sprite_no >= self.frame_count():
            return None
        row, col = divmod(sprite_no, self.columns)
        width = float(self.width)
        return Rect(
            col * width,
            row * float(self.height),
            -width if flipped else width,
            float(self.height),
        )


class SpriteHolder:
    """Registry of sprite sheets that turns draw requests into draw commands.

    Commands go to ``renderer`` when one is given, else they are collected in
    :attr:`commands` for the frontend to consume.
    """

    def __init__(self, renderer: Optional[Callable[[DrawCommand], None]] = None) -> None:
        self._sheets: dict[str, SpriteSheet] = {}
        self.commands: list[DrawCommand] = []
        self._renderer = renderer or self.commands.append

    def __contains__(self, sprite_id: object) -> bool:
        return sprite_id in self._sheets

    def __getitem__(self, sprite_id: str) -> SpriteSheet:
        try:
            return self._sheets[sprite_id]
        except KeyError:
            raise KeyError(f"unknown sprite: {sprite_id!r}") from None

    def add(self, sheet: SpriteSheet) -> None:
        """Register a sheet; the first sheet under an id is kept."""
        self._sheets.setdefault(sheet.sprite_id, sheet)

    def _emit(self, command: DrawCommand) -> DrawCommand:
        self._renderer(command)
        return command

    def draw_sprite(
        self,
        sprite_id: str,
        sprite_no: int,
        dest: Rect,
        origin: tuple = (0.0, 0.0),
        rotation: float = 0.0,
        flipped: bool = False,
    ) -> Optional[DrawCommand]:
        """Draw one frame; frames that do not exist draw nothing."""
        source = self[sprite_id].source_rect(sprite_no, flipped)
        if source is None:
            return None
        return self._emit(DrawCommand(sprite_id, source, dest, origin, rotation, WHITE))

    def draw_sprite_with_color(
        self,
        sprite_id: str,
        sprite_no: int,
        dest: Rect,
        color: Color,
        origin: tuple = (0.0, 0.0),
        rotation: float = 0.0,
    ) -> Optional[DrawCommand]:
        """Draw one frame tinted with ``color``."""
        source = self[sprite_id].source_rect(sprite_no)
        if source is None:
            return None
        return self._emit(DrawCommand(sprite_id, source, dest, origin, rotation, color))

    def draw_whole(
        self,
        sprite_id: str,
        dest: Rect,
        origin: tuple = (0.0, 0.0),
        rotation: float = 0.0,
    ) -> DrawCommand:
        """Draw the entire texture into ``dest``."""
        sheet = self[sprite_id]
        source = Rect(0.0, 0.0, float(sheet.texture_width), float(sheet.texture_height))
        return self._emit(DrawCommand(sprite_id, source, dest, origin, rotation, WHITE))

    def sprite_size(self, sprite_id: str) -> tuple[float, float]:
        """Texture size of a sheet."""
        sheet = self[sprite_id]
        return float(sheet.texture_width), float(sheet.texture_height)