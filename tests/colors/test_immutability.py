import copy
import pickle
import pytest
from chromahex import Color, rgba, rgb, rgb255, from_hex


def test_cannot_assign_existing_attribute():
    color = rgba(0.1, 0.2, 0.3, 0.4)
    with pytest.raises(AttributeError, match="immutable"):
        color._value = (1.0, 1.0, 1.0, 1.0)


def test_cannot_assign_property():
    color = rgb(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color.red = 1.0


def test_cannot_add_attribute():
    color = rgb(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError):
        color.extra = 1


def test_cannot_delete_attribute():
    color = rgb(0.1, 0.2, 0.3)
    with pytest.raises(AttributeError, match="immutable"):
        del color._value


def test_value_equality_and_hash():
    a = rgb255(255, 128, 0)
    b = from_hex("#ff8000")
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, rgb(1.0, 0.0, 0.0)}) == 2
    assert a != rgb255(255, 128, 1)
    assert a != (1.0, 128 / 255, 0.0, 1.0)


def test_with_alpha_returns_new_instance():
    base = rgb(0.5, 0.5, 0.5)
    faded = base.with_alpha(0.5)
    assert faded is not base
    assert base.alpha == 1.0


def test_copy_and_pickle_preserve_value():
    color = rgba(0.1, 0.2, 0.3, 0.4)
    assert copy.copy(color) == color
    assert copy.deepcopy(color) == color
    restored = pickle.loads(pickle.dumps(color))
    assert restored == color
    with pytest.raises(AttributeError):
        restored._value = None


def test_direct_construction():
    assert Color(1, 0, 0, 1) == rgb(1.0, 0.0, 0.0)
