# geometry.py

import numpy as np
import numba

# --- JIT-Compiled Vector Kernels ---
# Scalar-only kernels so the collision resolver can call them from nopython code.
# The public wrappers below accept any 2-sequence (tuple, list or array).

@numba.jit(nopython=True)
def _distance_jit(px, py, qx, qy):
    """Euclidean norm of q - p."""
    dx = qx - px
    dy = qy - py
    return np.sqrt(dx * dx + dy * dy)

@numba.jit(nopython=True)
def _rotate_jit(x, y, angle):
    """
    Expresses (x, y) in axes rotated by `angle`.
    With angle = atan2(dy, dx) of a collision normal, the first component is
    the normal component and the second the tangential one.
    """
    c = np.cos(angle)
    s = np.sin(angle)
    return x * c + y * s, -x * s + y * c


def distance(p, q) -> float:
    """Returns the Euclidean distance between points p and q."""
    return float(_distance_jit(float(p[0]), float(p[1]), float(q[0]), float(q[1])))


def rotate(vector, angle: float) -> np.ndarray:
    """
    Applies the 2D rotation matrix for `angle` to `vector`.

    rotate(v, angle) moves a velocity into the collision-normal frame and
    rotate(v, -angle) moves it back out, so the pair is an exact inverse.

    Data Contract:
    - Inputs:
        - vector: Any 2-sequence (vx, vy).
        - angle (float): Radians.
    - Outputs: A new float64 array of shape (2,).
    - Side Effects: None.
    """
    x, y = _rotate_jit(float(vector[0]), float(vector[1]), float(angle))
    return np.array([x, y], dtype=float)
