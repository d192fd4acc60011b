"""Actor/component game engine core: vector and matrix math, frustum culling, input state, transforms, cameras and a resource cache."""

__version__ = "0.1.0"