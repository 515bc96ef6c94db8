import pytest

from wfengine.shader import Shader


def test_missing_location_is_invalid():
    shader = Shader()
    assert not shader.is_valid_location("mvp")


def test_negative_location_is_invalid():
    shader = Shader(handle=1, locs={"mvp": -1})
    assert not shader.is_valid_location("mvp")


def test_zero_and_positive_locations_are_valid():
    shader = Shader(handle=1, locs={"mvp": 0, "matModel": 3})
    assert shader.is_valid_location("mvp")
    assert shader.is_valid_location("matModel")
    assert shader.location("matModel") == 3


def test_location_of_unknown_name_raises():
    with pytest.raises(KeyError):
        Shader().location("diffuseColour")


def test_locations_are_not_shared_between_shaders():
    a = Shader()
    b = Shader()
    a.locs["mvp"] = 2
    assert not b.is_valid_location("mvp")