# ball.py

import logging
import numpy as np
import numba

from constants import LOGGER_NAME, MASS_SCALE, WALL_DAMPING, WHITE

logger = logging.getLogger(LOGGER_NAME)

@numba.jit(nopython=True)
def _integrate_jit(position, velocity, radius, width, height, damping):
    """
    Numba-accelerated Euler step followed by wall correction.
    Modifies position and velocity in place.
    Each wall is checked independently; a ball wider than the arena is
    clamped against both walls of that axis.
    """
    position[0] += velocity[0]
    position[1] += velocity[1]

    # Left wall
    if position[0] - radius < 0:
        position[0] = radius
        velocity[0] = abs(velocity[0]) * damping
    # Right wall
    if position[0] + radius > width:
        position[0] = width - radius
        velocity[0] = -abs(velocity[0]) * damping
    # Top wall
    if position[1] - radius < 0:
        position[1] = radius
        velocity[1] = abs(velocity[1]) * damping
    # Bottom wall
    if position[1] + radius > height:
        position[1] = height - radius
        velocity[1] = -abs(velocity[1]) * damping


class Ball:
    """
    Represents a single ball in the simulation.

    Data Contract:
    - Inputs:
        - x, y (float): Centre in arena coordinates.
        - radius (float): Must be > 0.
        - color (tuple): RGB colour, used only for drawing.
        - velocity: Optional (vx, vy); defaults to rest.
        - mass_scale (float): Divisor in mass = pi * r^3 / mass_scale.
    - Invariants: radius and mass are fixed after construction.
      position and velocity are float64 arrays mutated in place.
    """
    def __init__(self, x: float, y: float, radius: float, color=WHITE, velocity=(0.0, 0.0), mass_scale: float = MASS_SCALE):
        if radius <= 0:
            raise ValueError(f"Ball radius must be positive, got {radius}")
        if mass_scale <= 0:
            raise ValueError(f"Mass scale must be positive, got {mass_scale}")

        self._radius = float(radius)
        self._mass = np.pi * self._radius ** 3 / mass_scale
        self.position = np.array([x, y], dtype=float)
        self.velocity = np.array(velocity, dtype=float)
        self.color = tuple(color)

        logger.debug(f"Ball created: radius={self._radius:.2f}, mass={self._mass:.2f}, pos={self.position}")

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def mass(self) -> float:
        return self._mass

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def integrate(self, width: float, height: float, damping: float = WALL_DAMPING):
        """
        Advances the ball one tick and corrects it against the arena walls.

        The position is advanced first and clamped afterwards, so a ball may
        overshoot a wall within the tick before it is pulled back onto it.
        The normal velocity component after a wall hit is |v| * damping,
        pointing back into the arena.
        """
        _integrate_jit(self.position, self.velocity, self._radius, float(width), float(height), float(damping))

    def __repr__(self):
        return (f"Ball(pos=({self.position[0]:.2f}, {self.position[1]:.2f}), "
                f"vel=({self.velocity[0]:.2f}, {self.velocity[1]:.2f}), r={self._radius:.2f})")
