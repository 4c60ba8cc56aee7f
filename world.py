# world.py

import logging
import numpy as np
import pygame

import constants
from ball import Ball
from collision import resolve_all
from geometry import distance
from interaction import InteractionController

logger = logging.getLogger(constants.LOGGER_NAME)


class PlacementError(RuntimeError):
    """Raised when the initial balls cannot be placed without overlap."""


class World:
    """
    Owns the balls, the arena bounds and the interaction state, and advances
    them one tick at a time.

    Data Contract:
    - Inputs:
        - config (dict): The 'simulation' section of the config file.
        - rng (np.random.Generator): The master seeded random number generator.
        - bounds (tuple): The (width, height) of the arena.
        - balls (list): Optional pre-built balls; skips random placement.
    - Outputs: None. This class modifies its internal state.
    - Side Effects: Manages the lifecycle of all ball data.
    - Invariants: The number of balls is constant throughout the simulation.
      Each tick resolves every collision before any ball is integrated.
    """
    def __init__(self, config: dict, rng: np.random.Generator, bounds: tuple = (constants.WIDTH, constants.HEIGHT), balls: list = None):
        self.config = config
        self.rng = rng
        self.width, self.height = float(bounds[0]), float(bounds[1])
        self.wall_damping = config.get('wall_damping', constants.WALL_DAMPING)
        self.mass_scale = config.get('mass_scale', constants.MASS_SCALE)
        self.tick = 0
        self.last_collision_count = 0

        if balls is None:
            self.balls = self._place_balls(config.get('particle_count', constants.DEFAULT_PARTICLE_COUNT))
        else:
            self.balls = list(balls)

        self.interaction = InteractionController(
            self.balls,
            pick_tolerance=config.get('pick_tolerance', constants.PICK_TOLERANCE),
            spring_constant=config.get('spring_constant', constants.SPRING_CONSTANT),
            drag_friction=config.get('drag_friction', constants.DRAG_FRICTION)
        )

        logger.info(f"World created with {len(self.balls)} balls in a {self.width:g}x{self.height:g} arena.")

    def _random_color(self):
        """Random hue at fixed saturation and lightness."""
        color = pygame.Color(0, 0, 0)
        color.hsla = (float(self.rng.uniform(0, 360)), constants.BALL_SATURATION, constants.BALL_LIGHTNESS, 100)
        return (color.r, color.g, color.b)

    def _place_balls(self, count: int) -> list:
        """
        Rejection-samples `count` non-overlapping balls inside the arena.
        Each ball gets at most 'max_placement_attempts' tries before a
        PlacementError is raised.
        """
        min_radius = self.config.get('min_radius', constants.DEFAULT_MIN_RADIUS)
        max_radius = self.config.get('max_radius', constants.DEFAULT_MAX_RADIUS)
        max_speed = self.config.get('max_initial_speed', constants.DEFAULT_MAX_INITIAL_SPEED)
        max_attempts = self.config.get('max_placement_attempts', constants.MAX_PLACEMENT_ATTEMPTS)

        balls = []
        for i in range(count):
            radius = self.rng.uniform(min_radius, max_radius)
            if 2 * radius > self.width or 2 * radius > self.height:
                logger.error(f"Ball {i} with radius {radius:.2f} does not fit the arena.")
                raise PlacementError(f"Ball {i} with radius {radius:.2f} does not fit a {self.width:g}x{self.height:g} arena")

            for attempt in range(1, max_attempts + 1):
                x = self.rng.uniform(radius, self.width - radius)
                y = self.rng.uniform(radius, self.height - radius)
                if all(distance((x, y), other.position) >= radius + other.radius for other in balls):
                    break
            else:
                logger.error(f"Cannot place ball {i} without overlap after {max_attempts} attempts.")
                raise PlacementError(f"Cannot place ball {i} without overlap after {max_attempts} attempts")

            velocity = self.rng.uniform(-max_speed, max_speed, 2)
            ball = Ball(x, y, radius, self._random_color(), velocity, mass_scale=self.mass_scale)
            balls.append(ball)
            logger.debug(f"Placed ball {i} after {attempt} attempt(s): {ball}")

        logger.info(f"Placed {len(balls)} balls without overlap.")
        return balls

    def step(self, draw=None) -> int:
        """
        Runs one tick.

        1. Collision phase: every unordered pair (i < j), in list order.
        2. Integration phase: the dragged ball is pulled toward the pointer and
           slowed by the drag friction, then every ball is integrated and
           corrected against the walls.
        3. If `draw` is given, it is called as draw(x, y, radius, color) per ball.

        Returns the number of colliding pairs this tick.
        """
        collisions = resolve_all(self.balls)

        selected = self.interaction.selected
        for ball in self.balls:
            if ball is selected:
                self.interaction.apply_spring()
                self.interaction.apply_drag_friction()
            ball.integrate(self.width, self.height, self.wall_damping)

        if draw is not None:
            for ball in self.balls:
                draw(ball.x, ball.y, ball.radius, ball.color)

        self.tick += 1
        self.last_collision_count = collisions
        return collisions

    def draw(self, screen: pygame.Surface):
        """Draws all balls on the screen."""
        for ball in self.balls:
            pygame.draw.circle(screen, ball.color, (ball.x, ball.y), ball.radius)

    def ball_at(self, x: float, y: float):
        """Returns the ball a press at (x, y) would select, or None."""
        return self.interaction.pick(x, y)

    @property
    def positions(self) -> np.ndarray:
        """Snapshot of all centres, shape (n, 2)."""
        return np.array([ball.position for ball in self.balls], dtype=float).reshape(-1, 2)

    @property
    def velocities(self) -> np.ndarray:
        """Snapshot of all velocities, shape (n, 2)."""
        return np.array([ball.velocity for ball in self.balls], dtype=float).reshape(-1, 2)

    @property
    def masses(self) -> np.ndarray:
        return np.array([ball.mass for ball in self.balls], dtype=float)

    def get_total_kinetic_energy(self) -> float:
        """
        Calculates the total kinetic energy of the system.
        KE = sum(0.5 * m * v^2)
        """
        vel_sq = np.sum(self.velocities**2, axis=1)
        return float(np.sum(0.5 * self.masses * vel_sq))

    def get_total_momentum(self) -> np.ndarray:
        """Vector sum of m * v over all balls."""
        return np.sum(self.masses[:, np.newaxis] * self.velocities, axis=0)
