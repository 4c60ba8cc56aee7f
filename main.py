# main.py

import pygame
import constants
import json
import logging
import logger_setup
import numpy as np
from world import World

# Get the application's dedicated logger
logger = logging.getLogger(constants.LOGGER_NAME)


def handle_event(event, world: World) -> bool:
    """
    Routes one pygame event to the world's interaction controller.
    Returns False when the event asks the application to stop.
    """
    controller = world.interaction
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
        return False
    if event.type == pygame.MOUSEMOTION:
        controller.move(*event.pos)
    elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
        controller.press(*event.pos)
    elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
        controller.release()
    return True


def run_simulation_loop(world: World, screen, clock, log_interval: int = constants.LOG_INTERVAL, max_ticks: int = None):
    """
    The main simulation loop: drain events, step the world, draw, wait.
    Runs until the window is closed, Escape is pressed, or `max_ticks` is reached.
    """
    running = True
    accumulated_collisions = 0

    while running and (max_ticks is None or world.tick < max_ticks):
        # Event handling
        for event in pygame.event.get():
            if not handle_event(event, world):
                running = False

        # --- Physics & Interaction Update ---
        screen.fill(constants.BACKGROUND)
        accumulated_collisions += world.step(
            draw=lambda x, y, r, color: pygame.draw.circle(screen, color, (x, y), r)
        )

        # --- Logging (throttled) ---
        if world.tick % log_interval == 0:
            momentum = world.get_total_momentum()
            logger.debug(
                f"Tick={world.tick}, "
                f"Kinetic={world.get_total_kinetic_energy():.2f}, "
                f"Momentum=({momentum[0]:+.2f}, {momentum[1]:+.2f}), "
                f"Collisions={accumulated_collisions}, "
                f"Dragging={world.interaction.is_dragging}"
            )
            accumulated_collisions = 0

        pygame.display.flip()
        clock.tick(constants.FPS)


def main(config_path='config.json'):
    """
    Main function to initialize and run the ball simulation.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)

    with open(config_path, 'r') as f:
        config = json.load(f)
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config['master_seed'])
    logger.info(f"Master RNG initialized with seed: {config['master_seed']}")

    # --- Initialization ---
    pygame.init()
    screen = pygame.display.set_mode((constants.WIDTH, constants.HEIGHT))
    pygame.display.set_caption(constants.TITLE)
    clock = pygame.time.Clock()

    world = World(sim_config, rng, bounds=(constants.WIDTH, constants.HEIGHT))

    try:
        run_simulation_loop(world, screen, clock, log_interval=sim_config.get('log_interval', constants.LOG_INTERVAL))
    finally:
        logger.info(f"Application shutting down after {world.tick} ticks.")
        pygame.quit()

if __name__ == "__main__":
    main()
