# test_geometry.py

import math
import numpy as np
import pytest

from geometry import distance, rotate


def test_distance_is_euclidean():
    assert distance((0, 0), (3, 4)) == pytest.approx(5.0)
    assert distance(np.array([1.0, 1.0]), np.array([1.0, 1.0])) == 0.0


def test_distance_is_symmetric():
    p, q = (12.5, -3.0), (-7.25, 40.0)
    assert distance(p, q) == pytest.approx(distance(q, p))


def test_rotate_by_zero_is_identity():
    np.testing.assert_allclose(rotate((2.0, -3.0), 0.0), [2.0, -3.0])


def test_rotate_into_normal_frame():
    # A vector along the normal ends up on the first axis.
    angle = math.atan2(1.0, 1.0)
    normal = rotate((1.0, 1.0), angle)
    np.testing.assert_allclose(normal, [math.sqrt(2.0), 0.0], atol=1e-12)


def test_rotate_back_is_inverse():
    v = np.array([0.3, -1.7])
    for angle in (0.1, 1.0, -2.5, math.pi):
        np.testing.assert_allclose(rotate(rotate(v, angle), -angle), v, atol=1e-12)


def test_rotate_preserves_length():
    v = rotate((3.0, 4.0), 0.77)
    assert np.hypot(*v) == pytest.approx(5.0)
