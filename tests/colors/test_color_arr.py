import numpy as np
import pytest
from chromahex import ColorArray, Color, HexColor, HexParseError, from_hex, to_hex, rgba
from ..samples import samples_hex_bytes


def test_from_hex_matches_scalar():
    texts = list(samples_hex_bytes)
    arr = ColorArray.from_hex(texts)
    assert len(arr) == len(texts)
    for text, color in zip(texts, arr):
        assert color.isclose(from_hex(text), tol=1e-12)


def test_from_hex_invalid():
    with pytest.raises(HexParseError, match="entry 1"):
        ColorArray.from_hex(["#fff", "#ffff0"])


def test_rgb_input_gets_opaque_alpha():
    arr = ColorArray(np.array([[1.0, 0.0, 0.0], [0.0, 0.5, 1.0]]))
    assert arr.value.shape == (2, 4)
    np.testing.assert_array_equal(arr.alpha, [1.0, 1.0])


def test_values_are_kept_verbatim():
    data = np.array([[1.5, -0.2, 0.3, 0.4]])
    arr = ColorArray(data)
    np.testing.assert_array_equal(arr.to_rgba(), data)
    assert arr[0] == rgba(1.5, -0.2, 0.3, 0.4)


def test_backing_array_is_read_only_copy():
    data = np.array([[0.1, 0.2, 0.3, 0.4]])
    arr = ColorArray(data)
    data[0, 0] = 0.9
    assert arr[0].red == 0.1
    with pytest.raises(ValueError):
        arr.value[0, 0] = 0.5


def test_bad_shape():
    with pytest.raises(ValueError, match="expects shape"):
        ColorArray(np.zeros((2, 5)))
    with pytest.raises(ValueError, match="expects shape"):
        ColorArray(np.zeros(4))


def test_from_colors_and_to_hex():
    colors = [from_hex("#ff8000"), from_hex("#2563eb80"), rgba(0.0, 0.0, 0.0, 0.0)]
    arr = ColorArray.from_colors(colors)
    hexes = arr.to_hex()
    assert all(isinstance(h, HexColor) for h in hexes)
    assert hexes == [to_hex(c) for c in colors]


def test_from_colors_rejects_other_items():
    with pytest.raises(TypeError):
        ColorArray.from_colors([(1.0, 0.0, 0.0, 1.0)])


def test_empty():
    arr = ColorArray.from_colors([])
    assert len(arr) == 0
    assert arr.to_hex() == []
    assert len(ColorArray.from_hex([])) == 0


def test_indexing():
    arr = ColorArray.from_hex(["#000", "#fff"])
    assert isinstance(arr[0], Color)
    assert arr[-1] == from_hex("#ffffff")
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(TypeError):
        arr[0:1]


def test_numpy_interface_and_equality():
    arr = ColorArray.from_hex(["#102030", "#405060"])
    np.testing.assert_array_equal(np.asarray(arr), arr.value)
    assert arr == ColorArray(arr.value)
    assert arr != ColorArray.from_hex(["#102030"])
