# collision.py

import numpy as np
import numba

from geometry import _distance_jit, _rotate_jit

@numba.jit(nopython=True)
def _resolve_pair_jit(pos_a, vel_a, rad_a, m_a, pos_b, vel_b, rad_b, m_b):
    """
    Numba-accelerated elastic collision for a single pair.
    Modifies positions and velocities in place.
    Returns True when the pair was touching or overlapping.
    """
    dist = _distance_jit(pos_a[0], pos_a[1], pos_b[0], pos_b[1])
    min_distance = rad_a + rad_b
    if dist > min_distance:
        return False

    # Normal axis from a to b. Coincident centres give atan2(0, 0) == 0.
    angle = np.arctan2(pos_b[1] - pos_a[1], pos_b[0] - pos_a[0])
    nx = np.cos(angle)
    ny = np.sin(angle)
    total_mass = m_a + m_b

    # 1. Resolve Overlap (the lighter ball moves further)
    overlap = min_distance - dist
    shift_a = overlap * m_b / total_mass
    shift_b = overlap * m_a / total_mass
    pos_a[0] -= shift_a * nx
    pos_a[1] -= shift_a * ny
    pos_b[0] += shift_b * nx
    pos_b[1] += shift_b * ny

    # 2. Elastic Collision Response in the normal frame
    u_a, t_a = _rotate_jit(vel_a[0], vel_a[1], angle)
    u_b, t_b = _rotate_jit(vel_b[0], vel_b[1], angle)

    v_a = (u_a * (m_a - m_b) + 2.0 * m_b * u_b) / total_mass
    v_b = (u_b * (m_b - m_a) + 2.0 * m_a * u_a) / total_mass

    # Tangential components are carried through unchanged
    vax, vay = _rotate_jit(v_a, t_a, -angle)
    vbx, vby = _rotate_jit(v_b, t_b, -angle)
    vel_a[0] = vax
    vel_a[1] = vay
    vel_b[0] = vbx
    vel_b[1] = vby
    return True


def resolve_pair(a, b) -> bool:
    """
    Detects and resolves a collision between two balls.

    Data Contract:
    - Inputs: a, b (Ball) - Two distinct balls.
    - Outputs: bool - True if the pair collided this call.
    - Side Effects: On collision, both balls are pushed apart along the
      collision normal until they just touch, and their normal velocity
      components are exchanged by the 1-D elastic collision formula.
    - Invariants: A pair further apart than the sum of radii is left
      bit-identical. Momentum is conserved; tangential velocity is unchanged.
    """
    return bool(_resolve_pair_jit(
        a.position, a.velocity, a.radius, a.mass,
        b.position, b.velocity, b.radius, b.mass
    ))


def resolve_all(balls) -> int:
    """
    Runs resolve_pair over every unordered pair (i < j) in list order.
    Corrections made by earlier pairs are visible to later pairs.
    Returns the number of colliding pairs.
    """
    collisions = 0
    n = len(balls)
    for i in range(n):
        for j in range(i + 1, n):
            if resolve_pair(balls[i], balls[j]):
                collisions += 1
    return collisions
