import numpy as np
import pygame
import pytest

from planar.utils.interop import from_numpy, from_pygame, to_pygame
from planar.utils.vectors import Vector2


def test_from_numpy():
    vec = from_numpy(np.array([3.0, 4.0]))
    assert vec.to_tuple() == (3.0, 4.0)
    assert isinstance(vec.x, float)

    vec = from_numpy([1, 2])
    assert vec.to_tuple() == (1, 2)
    assert isinstance(vec.x, int)


def test_numpy_round_trip():
    vec = Vector2(0.25, -8.0)
    assert from_numpy(vec.to_numpy()) == vec


@pytest.mark.parametrize("bad", [[1.0], [1.0, 2.0, 3.0], np.zeros((2, 2))])
def test_from_numpy_rejects_wrong_shape(bad):
    with pytest.raises(ValueError):
        from_numpy(bad)


def test_to_pygame():
    pv = to_pygame(Vector2(3, 4))
    assert isinstance(pv, pygame.math.Vector2)
    assert (pv.x, pv.y) == (3.0, 4.0)
    assert pv.length() == pytest.approx(Vector2(3, 4).magnitude())


def test_from_pygame():
    vec = from_pygame(pygame.math.Vector2(1.5, -2.5))
    assert vec.to_tuple() == (1.5, -2.5)
    assert isinstance(vec.x, float)
