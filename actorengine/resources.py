"""Cache of models and materials, loaded once per definition."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from actorengine.material import MaterialDef
from actorengine.mesh import BuiltInModelType, Model, cube_mesh, model_file_extension
from actorengine.vec3 import Vec3

LoadedModelDef = tuple[str, float]
BuiltInModelDef = tuple[BuiltInModelType, Vec3]

ModelLoader = Callable[[str, float], Model]
MaterialLoader = Callable[[MaterialDef], Any]

_SUPPORTED_MODEL_EXTENSIONS = frozenset({"fbx"})


def _no_model_loader(filename: str, scale: float) -> Model:
    raise RuntimeError(f"no model loader is configured for {filename!r}")


def _material_as_defined(material_def: MaterialDef) -> MaterialDef:
    return material_def


class Resources:
    """Hands out shared models and materials, creating each only on first request."""

    def __init__(
        self,
        model_loader: ModelLoader | None = None,
        material_loader: MaterialLoader | None = None,
    ) -> None:
        self._model_loader = model_loader or _no_model_loader
        self._material_loader = material_loader or _material_as_defined
        self._loaded_models: dict[LoadedModelDef, Model] = {}
        self._built_in_models: dict[BuiltInModelDef, Model] = {}
        self._materials: dict[MaterialDef, Any] = {}

    def get_loaded_model(self, model_def: LoadedModelDef) -> Model:
        """Model read from a file, given as (filename, scale)."""
        if model_def not in self._loaded_models:
            filename, scale = model_def
            extension = model_file_extension(filename)
            if extension not in _SUPPORTED_MODEL_EXTENSIONS:
                raise ValueError(f"unsupported model format {extension!r} for {filename!r}")
            self._loaded_models[model_def] = self._model_loader(filename, scale)
        return self._loaded_models[model_def]

    def get_built_in_model(self, model_def: BuiltInModelDef) -> Model:
        """Model built by the engine, given as (type, dimensions)."""
        if model_def not in self._built_in_models:
            model_type, dimensions = model_def
            if model_type is BuiltInModelType.BOX:
                self._built_in_models[model_def] = cube_mesh(dimensions)
            else:
                raise ValueError(f"missing built-in model for type {model_type!r}")
        return self._built_in_models[model_def]

    def get_material(self, material_def: MaterialDef) -> Any:
        """Material for a definition."""
        if material_def not in self._materials:
            self._materials[material_def] = self._material_loader(material_def)
        return self._materials[material_def]