# interaction.py

import logging
import numpy as np

from constants import LOGGER_NAME, PICK_TOLERANCE, SPRING_CONSTANT, DRAG_FRICTION
from geometry import distance

logger = logging.getLogger(LOGGER_NAME)


class InteractionController:
    """
    Translates pointer events into spring-follow dragging of one ball.

    The controller is either idle (no ball selected) or dragging exactly one
    ball. It never owns the balls: `selected` refers into the list it was
    given, and releasing a ball only drops that reference.

    Pointer moves only record the latest position. The spring pull is applied
    once per tick by the world step, from whatever position was seen last.

    Data Contract:
    - Inputs:
        - balls (list): The world's ball list, scanned in order on press.
        - pick_tolerance (float): Extra pick distance beyond a ball's radius.
        - spring_constant (float): Pull per unit displacement.
        - drag_friction (float): Per-tick velocity scale while dragging.
    - Invariants: At most one ball is selected at any time.
    """
    def __init__(self, balls: list, pick_tolerance: float = PICK_TOLERANCE,
                 spring_constant: float = SPRING_CONSTANT, drag_friction: float = DRAG_FRICTION):
        self.balls = balls
        self.pick_tolerance = pick_tolerance
        self.spring_constant = spring_constant
        self.drag_friction = drag_friction

        self.pointer_position = None
        self.previous_pointer_position = None
        self.selected = None

    @property
    def is_dragging(self) -> bool:
        return self.selected is not None

    def pick(self, x: float, y: float):
        """Returns the first ball (in list order) within pick range of (x, y), or None."""
        for ball in self.balls:
            if distance((x, y), ball.position) < ball.radius + self.pick_tolerance:
                return ball
        return None

    def press(self, x: float, y: float):
        """Selects the first ball under the pointer, if any."""
        self.pointer_position = np.array([x, y], dtype=float)
        self.previous_pointer_position = self.pointer_position.copy()
        self.selected = self.pick(x, y)
        if self.selected is not None:
            logger.debug(f"Selected {self.selected} at pointer ({x:.1f}, {y:.1f})")
        return self.selected

    def move(self, x: float, y: float):
        """Records the latest pointer position."""
        if self.pointer_position is not None:
            self.previous_pointer_position = self.pointer_position
        self.pointer_position = np.array([x, y], dtype=float)

    def release(self):
        """
        Drops the selected ball. Its velocity is left as the spring left it,
        so a ball that was moving when released keeps flying ("flick").
        """
        if self.selected is not None:
            logger.debug(f"Released {self.selected}")
        self.selected = None

    def apply_spring(self):
        """
        Pulls the selected ball toward the latest pointer position.

        acceleration = (pointer - position) * spring_constant, and the ball's
        velocity grows by acceleration / mass, so heavier balls follow more
        slowly for the same displacement.
        """
        if self.selected is None or self.pointer_position is None:
            return
        ball = self.selected
        acceleration = (self.pointer_position - ball.position) * self.spring_constant
        ball.velocity += acceleration / ball.mass

    def apply_drag_friction(self):
        """Scales the selected ball's velocity by the drag friction factor."""
        if self.selected is not None:
            self.selected.velocity *= self.drag_friction
