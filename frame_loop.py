# frame_loop.py

import logging

import constants

logger = logging.getLogger("fireworks")


def _fireworks_pass(state, canvas):
    """Draws then updates each firework, newest first. Returns the targets reached."""
    survivors = []
    reached = []
    for firework in reversed(state.fireworks):
        firework.draw(canvas, state.hue)
        if firework.update():
            reached.append(firework.target)
        else:
            survivors.append(firework)
    survivors.reverse()
    state.fireworks = survivors
    return reached


def _particles_pass(state, canvas, particles):
    survivors = []
    for particle in reversed(particles):
        particle.draw(canvas)
        if not particle.update():
            survivors.append(particle)
    survivors.reverse()
    return survivors


def run_frame(state, canvas, pointer) -> int:
    """
    Advances the simulation by exactly one tick and draws it.

    Order within the tick:
    1. Shift the global hue.
    2. Fade the previous frame with a translucent subtractive fill.
    3. Switch to additive compositing.
    4. Draw then update every firework; the ones that reach their target
       burst into particles and are dropped.
    5. Draw then update every particle that existed before this tick;
       expired ones are dropped. Particles born in step 4 are left as
       created until the next tick.
    6. Run the launch policies.

    Returns the number of fireworks launched this tick.
    """
    state.advance_hue()

    canvas.set_composite(constants.COMPOSITE_DESTINATION_OUT)
    canvas.fill_rect((0, 0, canvas.width, canvas.height), (0, 0, 0, round(state.fade_alpha * 255)))
    canvas.set_composite(constants.COMPOSITE_LIGHTER)

    existing_particles = state.particles
    state.particles = []
    for target in _fireworks_pass(state, canvas):
        state.spawn_explosion(target)
    newborn = state.particles

    state.particles = _particles_pass(state, canvas, existing_particles) + newborn

    return state.apply_launch_policies(pointer)


class FrameScheduler:
    """Paces the loop at a fixed rate with a pygame clock."""
    def __init__(self, clock, fps: int = constants.FPS):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.clock = clock
        self.fps = fps

    def wait(self):
        self.clock.tick(self.fps)


class FrameLoop:
    """
    The running animation: owns the per-tick cadence and can be stopped.

    Data Contract:
    - Inputs:
        - state (SimulationState): the simulation advanced each tick.
        - canvas: the drawing surface; `present()` is called after each tick.
        - pointer (PointerState): read once per tick.
        - scheduler: object with `wait()`, called between ticks.
        - event_pump (callable, optional): called before each tick; returning
          False requests a stop (e.g. the window was closed).
    - Outputs: `start()` returns the number of ticks executed.
    """
    def __init__(self, state, canvas, pointer, scheduler, event_pump=None):
        self.state = state
        self.canvas = canvas
        self.pointer = pointer
        self.scheduler = scheduler
        self.event_pump = event_pump
        self.tick = 0
        self.running = False

    def step(self):
        launched = run_frame(self.state, self.canvas, self.pointer)
        self.canvas.present()
        self.tick += 1

        if self.tick % constants.LOG_EVERY_N_TICKS == 0:
            logger.debug(
                f"Tick={self.tick}, "
                f"Hue={self.state.hue:.1f}, "
                f"Fireworks={len(self.state.fireworks)}, "
                f"Particles={len(self.state.particles)}, "
                f"Launches={self.state.launch_count}, "
                f"Explosions={self.state.explosion_count}"
            )
        return launched

    def start(self, max_ticks=None) -> int:
        """Runs until stop() is called, the event pump asks to quit, or max_ticks have run."""
        self.running = True
        ticks_run = 0
        logger.info("Frame loop started.")
        while self.running:
            if self.event_pump is not None and not self.event_pump():
                break
            self.step()
            ticks_run += 1
            if max_ticks is not None and ticks_run >= max_ticks:
                break
            self.scheduler.wait()
        self.running = False
        logger.info(f"Frame loop stopped after {ticks_run} ticks.")
        return ticks_run

    def stop(self):
        self.running = False
