# test_ball.py

import math
import numpy as np
import pytest

from ball import Ball

WIDTH, HEIGHT = 600.0, 400.0


def test_mass_is_derived_from_radius():
    ball = Ball(100, 100, 10)
    assert ball.mass == pytest.approx(math.pi * 1000 / 100)


def test_mass_scale_is_configurable():
    ball = Ball(100, 100, 10, mass_scale=50)
    assert ball.mass == pytest.approx(math.pi * 1000 / 50)


def test_radius_and_mass_are_read_only():
    ball = Ball(100, 100, 10)
    with pytest.raises(AttributeError):
        ball.radius = 5
    with pytest.raises(AttributeError):
        ball.mass = 1.0


@pytest.mark.parametrize("radius", [0, -3])
def test_non_positive_radius_is_rejected(radius):
    with pytest.raises(ValueError):
        Ball(100, 100, radius)


def test_integrate_moves_by_velocity():
    ball = Ball(100, 100, 10, velocity=(1.5, -2.0))
    ball.integrate(WIDTH, HEIGHT)
    np.testing.assert_allclose(ball.position, [101.5, 98.0])
    np.testing.assert_allclose(ball.velocity, [1.5, -2.0])


def test_right_wall_clamps_and_damps():
    ball = Ball(585, 200, 10, velocity=(10.0, 0.5))
    ball.integrate(WIDTH, HEIGHT, damping=0.98)
    assert ball.position[0] == pytest.approx(WIDTH - 10)
    assert ball.velocity[0] == pytest.approx(-10.0 * 0.98)
    assert ball.velocity[1] == pytest.approx(0.5)


def test_left_wall_points_velocity_inward():
    ball = Ball(12, 200, 10, velocity=(-5.0, 0.0))
    ball.integrate(WIDTH, HEIGHT, damping=0.98)
    assert ball.position[0] == pytest.approx(10)
    assert ball.velocity[0] == pytest.approx(5.0 * 0.98)


def test_wall_correction_does_not_flip_inward_velocity():
    # Already heading back in but still past the wall: sign stays inward.
    ball = Ball(5, 200, 10, velocity=(2.0, 0.0))
    ball.integrate(WIDTH, HEIGHT, damping=0.98)
    assert ball.position[0] == pytest.approx(10)
    assert ball.velocity[0] == pytest.approx(2.0 * 0.98)


def test_top_and_bottom_walls():
    top = Ball(300, 11, 10, velocity=(0.0, -4.0))
    top.integrate(WIDTH, HEIGHT)
    assert top.position[1] == pytest.approx(10)
    assert top.velocity[1] > 0

    bottom = Ball(300, 389, 10, velocity=(0.0, 4.0))
    bottom.integrate(WIDTH, HEIGHT)
    assert bottom.position[1] == pytest.approx(HEIGHT - 10)
    assert bottom.velocity[1] < 0


def test_corner_hits_both_walls():
    ball = Ball(595, 395, 10, velocity=(3.0, 3.0))
    ball.integrate(WIDTH, HEIGHT, damping=0.5)
    np.testing.assert_allclose(ball.position, [WIDTH - 10, HEIGHT - 10])
    np.testing.assert_allclose(ball.velocity, [-1.5, -1.5])


def test_containment_after_integrate():
    rng = np.random.default_rng(7)
    for _ in range(200):
        r = rng.uniform(8, 18)
        ball = Ball(rng.uniform(r, WIDTH - r), rng.uniform(r, HEIGHT - r), r,
                    velocity=rng.uniform(-40, 40, 2))
        ball.integrate(WIDTH, HEIGHT)
        assert r <= ball.position[0] <= WIDTH - r
        assert r <= ball.position[1] <= HEIGHT - r
