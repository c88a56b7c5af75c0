# main.py

import json
import logging

import numpy as np
import pygame

import constants
import logger_setup
from canvas import PygameCanvas
from frame_loop import FrameLoop, FrameScheduler
from pointer import PointerState
from simulation import SimulationState

# Get the application's dedicated logger
logger = logging.getLogger("fireworks")


def window_size():
    """The window fills the desktop, like a canvas sized to the browser window."""
    sizes = pygame.display.get_desktop_sizes()
    if sizes and sizes[0][0] > 0 and sizes[0][1] > 0:
        return tuple(sizes[0])
    logger.info(f"Desktop size unavailable; using {constants.WIDTH}x{constants.HEIGHT}.")
    return (constants.WIDTH, constants.HEIGHT)


def open_window(size):
    """
    Opens the display, asking for vsync so frames follow the display refresh.
    Without vsync the fixed-rate clock alone paces the loop.
    """
    try:
        return pygame.display.set_mode(size, vsync=1)
    except pygame.error as e:
        logger.info(f"Vsync unavailable ({e}); pacing frames at {constants.FPS} FPS.")
        return pygame.display.set_mode(size)


def make_event_pump(pointer: PointerState):
    """Returns a callable that drains pygame events into `pointer` and reports whether to keep running."""
    def pump():
        keep_running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                keep_running = False
            else:
                pointer.handle_event(event)
        return keep_running
    return pump


def main(config_path='config.json'):
    """
    Main function to initialize and run the fireworks animation.
    """
    # --- Setup ---
    logger_setup.setup_logging(config_path)

    with open(config_path, 'r') as f:
        config = json.load(f)
    sim_config = config['simulation']

    logger.info("Application starting...")
    logger.info(f"Loaded configuration: {config}")

    # Initialize the master random number generator (RNG)
    rng = np.random.default_rng(config.get('master_seed'))
    logger.info(f"Master RNG initialized with seed: {config.get('master_seed')}")

    # --- Initialization ---
    pygame.init()
    screen = open_window(window_size())
    pygame.display.set_caption(constants.TITLE)
    screen.fill(constants.BLACK)

    canvas = PygameCanvas(screen)
    pointer = PointerState(canvas.width / 2, canvas.height / 2)
    state = SimulationState(config=sim_config, rng=rng, bounds=(canvas.width, canvas.height))

    loop = FrameLoop(
        state,
        canvas,
        pointer,
        FrameScheduler(pygame.time.Clock(), constants.FPS),
        event_pump=make_event_pump(pointer),
    )

    try:
        loop.start()
    finally:
        logger.info(f"Application shutting down. Launched {state.launch_count} fireworks, "
                    f"{state.explosion_count} explosions.")
        pygame.quit()


if __name__ == "__main__":
    main()
