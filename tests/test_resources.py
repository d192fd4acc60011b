import pytest

from actorengine.material import MaterialDef
from actorengine.mesh import BuiltInModelType, Mesh, Model
from actorengine.resources import Resources
from actorengine.vec3 import Vec3


def test_built_in_box_has_cube_geometry():
    model = Resources().get_built_in_model((BuiltInModelType.BOX, Vec3(1.0, 1.0, 1.0)))
    assert len(model.meshes) == 1
    assert len(model.meshes[0].vertices) == 24
    assert model.meshes[0].index_count == 36


def test_built_in_model_is_cached():
    resources = Resources()
    key = (BuiltInModelType.BOX, Vec3(500.0, 0.1, 500.0))
    first = resources.get_built_in_model(key)
    second = resources.get_built_in_model(key)
    assert first is second
    assert len(first.meshes) == 1
    assert first.meshes[0].index_count == 36
    assert abs(first.meshes[0].vertices[0].position.x) == 250.0


def test_different_dimensions_give_different_models():
    resources = Resources()
    a = resources.get_built_in_model((BuiltInModelType.BOX, Vec3(1.0, 1.0, 1.0)))
    b = resources.get_built_in_model((BuiltInModelType.BOX, Vec3(2.0, 1.0, 1.0)))
    assert a is not b
    assert a.meshes[0].vertices != b.meshes[0].vertices


def test_loaded_model_uses_loader_once():
    calls = []

    def loader(filename, scale):
        calls.append((filename, scale))
        return Model([Mesh()])

    resources = Resources(model_loader=loader)
    first = resources.get_loaded_model(("basketball.fbx", 0.02))
    second = resources.get_loaded_model(("basketball.fbx", 0.02))
    assert first is second
    assert calls == [("basketball.fbx", 0.02)]


def test_loaded_model_extension_is_case_insensitive():
    resources = Resources(model_loader=lambda filename, scale: Model())
    assert resources.get_loaded_model(("ball.FBX", 1.0)) == Model()


def test_unsupported_model_format_raises():
    resources = Resources(model_loader=lambda filename, scale: Model())
    with pytest.raises(ValueError):
        resources.get_loaded_model(("ball.obj", 1.0))


def test_loaded_model_without_loader_raises():
    with pytest.raises(RuntimeError):
        Resources().get_loaded_model(("ball.fbx", 1.0))


def test_material_is_cached_per_definition():
    calls = []

    def loader(material_def):
        calls.append(material_def)
        return {"def": material_def}

    resources = Resources(material_loader=loader)
    a = MaterialDef("a.png")
    b = MaterialDef("b.png")
    assert resources.get_material(a) is resources.get_material(a)
    assert resources.get_material(b)["def"] == b
    assert calls == [a, b]


def test_default_material_loader_returns_definition():
    material_def = MaterialDef("basketball-diffuse.jpg")
    assert Resources().get_material(material_def) == material_def