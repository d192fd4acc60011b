"""Colours, vertices, meshes and models, with the built-in cube."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum

from actorengine.vec2 import Vec2
from actorengine.vec3 import Vec3


@dataclass(frozen=True)
class Color:
    """An RGBA colour; opaque black by default."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0


@dataclass(frozen=True)
class Vertex:
    """A mesh vertex with its shading attributes."""

    position: Vec3 = Vec3()
    color: Color = Color()
    tex_coord: Vec2 = Vec2()
    normal: Vec3 = Vec3()
    tangent: Vec3 = Vec3()
    binormal: Vec3 = Vec3()


@dataclass
class Mesh:
    """Vertices and the triangle-list indices into them."""

    vertices: list[Vertex] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    @property
    def index_count(self) -> int:
        return len(self.indices)


@dataclass
class Model:
    """A model made of one or more meshes."""

    meshes: list[Mesh] = field(default_factory=list)


class ModelType(Enum):
    """Where a model's geometry comes from."""

    LOADED = 0
    BUILT_IN = 1


class BuiltInModelType(Enum):
    """Shapes the engine can build without a file."""

    BOX = 0


def compute_tangents_and_binormals(
    vertices: list[Vertex], indices: list[int]
) -> list[Vertex]:
    """Return the vertices with tangents and binormals accumulated from their triangles.

    Only triangles starting below a third of the index count contribute, stepping
    one triangle at a time.
    """
    tangents = [Vec3()] * len(vertices)
    binormals = [Vec3()] * len(vertices)
    for i in range(0, len(indices) // 3, 3):
        corners = indices[i : i + 3]
        p1, p2, p3 = (vertices[c].position for c in corners)
        uv1, uv2, uv3 = (vertices[c].tex_coord for c in corners)
        edge1, edge2 = p2 - p1, p3 - p1
        edge1uv, edge2uv = uv2 - uv1, uv3 - uv1
        cp = edge1uv.x * edge2uv.y - edge1uv.y * edge2uv.x
        if cp == 0.0:
            continue
        mul = 1.0 / cp
        tan = (edge1 * edge2uv.y - edge2 * edge1uv.y) * mul
        binorm = (edge1 * edge2uv.x - edge2 * edge1uv.x) * mul
        for corner in corners:
            tangents[corner] = tangents[corner] + tan
            binormals[corner] = binormals[corner] + binorm
    return [
        replace(vertex, tangent=tangent.normalized(), binormal=binormal.normalized())
        for vertex, tangent, binormal in zip(vertices, tangents, binormals)
    ]


_CUBE_INDICES = (
    1, 0, 2, 2, 0, 3,  # top
    5, 4, 6, 6, 4, 7,  # bottom
    9, 8, 10, 10, 8, 11,  # right
    13, 12, 14, 14, 12, 15,  # left
    17, 16, 18, 18, 16, 19,  # front
    21, 20, 22, 22, 20, 23,  # back
)


def cube_mesh(dimensions: Vec3) -> Model:
    """A box model centred on the origin with the given width, height and length."""
    hw, hh, hl = dimensions.x / 2.0, dimensions.y / 2.0, dimensions.z / 2.0
    up, right, forward = Vec3.UP, Vec3.RIGHT, Vec3.FORWARD
    down, left, back = -1 * up, -1 * right, -1 * forward
    corners = [
        ((-hw, hh, -hl), (0.0, 0.0), up),
        ((hw, hh, -hl), (1.0, 0.0), up),
        ((hw, hh, hl), (1.0, 1.0), up),
        ((-hw, hh, hl), (0.0, 1.0), up),
        ((-hw, -hh, hl), (0.0, 0.0), down),
        ((hw, -hh, hl), (1.0, 0.0), down),
        ((hw, -hh, -hl), (1.0, 1.0), down),
        ((-hw, -hh, -hl), (0.0, 1.0), down),
        ((hw, hh, hl), (0.0, 0.0), right),
        ((hw, hh, -hl), (1.0, 0.0), right),
        ((hw, -hh, -hl), (1.0, 1.0), right),
        ((hw, -hh, hl), (0.0, 1.0), right),
        ((-hw, hh, -hl), (0.0, 0.0), left),
        ((-hw, hh, hl), (1.0, 0.0), left),
        ((-hw, -hh, hl), (1.0, 1.0), left),
        ((-hw, -hh, -hl), (0.0, 1.0), left),
        ((-hw, hh, hl), (0.0, 0.0), forward),
        ((hw, hh, hl), (1.0, 0.0), forward),
        ((hw, -hh, hl), (1.0, 1.0), forward),
        ((-hw, -hh, hl), (0.0, 1.0), forward),
        ((hw, hh, -hl), (0.0, 0.0), back),
        ((-hw, hh, -hl), (1.0, 0.0), back),
        ((-hw, -hh, -hl), (1.0, 1.0), back),
        ((hw, -hh, -hl), (0.0, 1.0), back),
    ]
    vertices = [
        Vertex(position=Vec3(*pos), tex_coord=Vec2(*uv), normal=normal)
        for pos, uv, normal in corners
    ]
    indices = list(_CUBE_INDICES)
    mesh = Mesh(compute_tangents_and_binormals(vertices, indices), indices)
    return Model([mesh])


def model_file_extension(filename: str) -> str:
    """Lower-cased text after the first dot, or the whole name when there is none."""
    return filename[filename.find(".") + 1 :].lower()