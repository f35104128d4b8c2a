import json

import pytest

from fixture_shapes import PERSON
from shapematch import Shape
from shapematch.errors import LoadError, TemplateError
from shapematch.loader import load_document, resolve_shape


def test_load_json(tmp_path):
    path = tmp_path / "person.json"
    path.write_text(json.dumps({"name": "Josh", "age": 5}), encoding="utf-8")
    assert load_document(path) == {"name": "Josh", "age": 5}


def test_load_toml(tmp_path):
    path = tmp_path / "person.toml"
    path.write_text('name = "Josh"\nage = 5\n', encoding="utf-8")
    assert load_document(str(path)) == {"name": "Josh", "age": 5}


def test_load_missing_file(tmp_path):
    with pytest.raises(LoadError):
        load_document(tmp_path / "nope.json")


def test_load_unparseable(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(LoadError) as info:
        load_document(path)
    assert "Cannot parse" in info.value.message


def test_resolve_shape_instance():
    assert resolve_shape("fixture_shapes:PERSON") is PERSON


def test_resolve_raw_template():
    shape = resolve_shape("fixture_shapes:Nested.ADDRESS")
    assert isinstance(shape, Shape)
    assert shape.printable_shape == {"street": "string", "zip": "string"}


def test_resolve_alias():
    assert resolve_shape("person", {"person": "fixture_shapes:PERSON"}) is PERSON


@pytest.mark.parametrize("ref", [
    "fixture_shapes",
    ":PERSON",
    "no_such_module_for_shapes:X",
    "fixture_shapes:MISSING",
    ".x:y",
])
def test_unresolvable(ref):
    with pytest.raises(LoadError):
        resolve_shape(ref)


def test_broken_template():
    with pytest.raises(TemplateError):
        resolve_shape("fixture_shapes:BROKEN")
