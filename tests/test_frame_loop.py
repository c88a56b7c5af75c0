import pytest

import constants
from firework import Firework
from frame_loop import FrameLoop, FrameScheduler, run_frame
from particle import Particle
from pointer import PointerState


def test_frame_fades_then_switches_to_additive(state, canvas):
    run_frame(state, canvas, PointerState())

    assert canvas.calls[0] == ("composite", constants.COMPOSITE_DESTINATION_OUT)
    assert canvas.calls[1] == ("fill", (0, 0, 800, 600), (0, 0, 0, 128))
    assert canvas.calls[2] == ("composite", constants.COMPOSITE_LIGHTER)


def test_hue_advances_every_frame(state, canvas):
    for _ in range(4):
        run_frame(state, canvas, PointerState())
    assert state.hue == pytest.approx(122.0)


def test_eighty_idle_ticks_launch_exactly_one_firework(state, canvas):
    pointer = PointerState()
    for _ in range(79):
        run_frame(state, canvas, pointer)
    assert state.fireworks == []

    assert run_frame(state, canvas, pointer) == 1
    assert len(state.fireworks) == 1
    assert state.particles == []


def test_firework_reaching_target_explodes_once(state, rng, canvas):
    firework = Firework((0, 0), (1, 0), rng)
    state.fireworks = [firework]

    run_frame(state, canvas, PointerState())

    assert state.fireworks == []
    assert state.explosion_count == 1
    assert len(state.particles) == 30
    for particle in state.particles:
        assert particle.position == (1.0, 0.0)
        assert particle.alpha == 1.0
    # Only the firework was drawn; the new sparks wait for the next frame.
    assert [c[0] for c in canvas.strokes()] == ["line", "circle"]


def test_new_particles_are_drawn_on_the_following_frame(state, rng, canvas):
    state.fireworks = [Firework((0, 0), (1, 0), rng)]
    run_frame(state, canvas, PointerState())
    canvas.calls.clear()

    run_frame(state, canvas, PointerState())
    assert len(canvas.strokes()) == 30


def test_fireworks_drawn_newest_first_and_survivors_keep_order(state, rng, canvas):
    older = Firework((0, 0), (5000, 0), rng)
    newer = Firework((100, 100), (5000, 100), rng)
    state.fireworks = [older, newer]

    run_frame(state, canvas, PointerState())

    lines = [c for c in canvas.strokes() if c[0] == "line"]
    assert lines[0][1] == (100.0, 100.0)
    assert lines[1][1] == (0.0, 0.0)
    assert state.fireworks == [older, newer]


def test_expired_particles_are_removed_in_place(state, rng, canvas):
    first, dying, last = (Particle((0, 0), 0, rng) for _ in range(3))
    dying.alpha = dying.decay * 1.5
    state.particles = [first, dying, last]

    run_frame(state, canvas, PointerState())

    assert state.particles == [first, last]
    # Drawn newest first, including the one that expired this tick.
    assert len(canvas.strokes()) == 3


def test_draw_happens_before_update(state, rng, canvas):
    particle = Particle((7, 8), 0, rng)
    state.particles = [particle]

    run_frame(state, canvas, PointerState())

    (line,) = canvas.strokes()
    assert line[2] == (7.0, 8.0)
    assert particle.position != (7.0, 8.0)


class FakeClock:
    def __init__(self):
        self.ticks = []

    def tick(self, fps):
        self.ticks.append(fps)


def test_scheduler_paces_with_clock():
    clock = FakeClock()
    scheduler = FrameScheduler(clock, 60)
    scheduler.wait()
    assert clock.ticks == [60]


def test_scheduler_rejects_non_positive_fps():
    with pytest.raises(ValueError):
        FrameScheduler(FakeClock(), 0)


def test_loop_runs_requested_ticks_and_presents_each(state, canvas):
    clock = FakeClock()
    loop = FrameLoop(state, canvas, PointerState(), FrameScheduler(clock))

    assert loop.start(max_ticks=3) == 3
    assert canvas.presented == 3
    assert len(clock.ticks) == 2
    assert loop.tick == 3
    assert loop.running is False


def test_loop_stops_when_event_pump_says_quit(state, canvas):
    loop = FrameLoop(state, canvas, PointerState(), FrameScheduler(FakeClock()),
                     event_pump=lambda: False)
    assert loop.start() == 0
    assert canvas.presented == 0


def test_stop_ends_the_loop_after_current_tick(state, canvas):
    calls = []

    def pump():
        calls.append(1)
        if len(calls) == 4:
            loop.stop()
        return True

    loop = FrameLoop(state, canvas, PointerState(), FrameScheduler(FakeClock()), event_pump=pump)
    assert loop.start() == 4
