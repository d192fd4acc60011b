"""Material definitions and the texture rules applied when loading them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from actorengine.vec2 import Vec2

_DEFAULT_TEXTURE_REPEAT = Vec2(1.0, 1.0)


class TextureFormat(Enum):
    """Which loader a texture file goes through."""

    DDS = "dds"
    WIC = "wic"


@dataclass(frozen=True, order=True)
class MaterialDef:
    """Texture files of a material; an empty name means no texture in that slot."""

    diffuse_texture_filename: str = ""
    specular_texture_filename: str = ""
    bump_texture_filename: str = ""
    parallax_texture_filename: str = ""
    env_map_texture_filename: str = ""
    texture_repeat: Vec2 = field(default=Vec2())


def effective_texture_repeat(material_def: MaterialDef) -> Vec2:
    """The repeat a material uses: its own when both components are non-zero, else (1, 1)."""
    repeat = material_def.texture_repeat
    if repeat.x != 0.0 and repeat.y != 0.0:
        return repeat
    return _DEFAULT_TEXTURE_REPEAT


def texture_format(filename: str) -> TextureFormat:
    """DDS for names whose text after the first dot is 'dds' in any case, WIC otherwise."""
    extension = filename[filename.find(".") + 1 :].lower()
    if extension == "dds":
        return TextureFormat.DDS
    return TextureFormat.WIC