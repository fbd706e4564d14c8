from sphgrid.counters import (
    CollisionDetectionCounters,
    Counters,
    SolverCounters,
    StagesCounters,
    Timer,
)


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_new_timer_displays_zero_seconds():
    assert str(Timer()) == "0s"


def test_disabled_timer_measures_nothing():
    clock = FakeClock(1.0)
    timer = Timer(clock=clock)
    timer.start()
    clock.now = 5.0
    timer.pause()
    assert timer.time() == 0
    assert timer.enabled is False


def test_enabled_timer_measures_interval():
    clock = FakeClock(2.0)
    timer = Timer(clock=clock)
    timer.enable()
    timer.start()
    clock.now = 6.0
    timer.pause()
    assert timer.time() == 6.0 - 2.0
    assert str(timer) == f"{int(6.0 - 2.0)}s"


def test_resume_accumulates_and_start_clears():
    clock = FakeClock(0.0)
    timer = Timer(clock=clock)
    timer.enable()
    timer.start()
    clock.now = 1.5
    timer.pause()
    clock.now = 10.0
    timer.resume()
    clock.now = 12.0
    timer.pause()
    assert timer.time() == 1.5 + 2.0
    timer.start()
    assert timer.time() == 0


def test_pause_without_start_keeps_time():
    clock = FakeClock(3.0)
    timer = Timer(clock=clock)
    timer.enable()
    timer.pause()
    assert timer.time() == 0


def test_reset_clears_time():
    clock = FakeClock(0.0)
    timer = Timer(clock=clock)
    timer.enable()
    timer.start()
    clock.now = 0.25
    timer.pause()
    assert timer.time() == 0.25
    timer.reset()
    assert timer.time() == 0


def test_disable_stops_measurement():
    timer = Timer()
    timer.enable()
    assert timer.enabled
    timer.disable()
    assert not timer.enabled


def test_counters_enable_and_disable_propagate():
    counters = Counters()
    counters.enable()
    timers = [
        counters.step_time,
        counters.custom,
        counters.stages.collision_detection_time,
        counters.stages.solver_time,
        counters.cd.boundary_update_time,
        counters.cd.grid_insertion_time,
        counters.cd.neighborhood_search_time,
        counters.cd.contact_sorting_time,
        counters.solver.non_pressure_resolution_time,
        counters.solver.pressure_resolution_time,
    ]
    assert all(t.enabled for t in timers)
    counters.disable()
    assert not any(t.enabled for t in timers)


def test_counters_reset_zeroes_counts():
    counters = Counters()
    counters.nsubsteps = 7
    counters.cd.ncontacts = 42
    counters.reset()
    assert counters.nsubsteps == 0
    assert counters.cd.ncontacts == 0


def test_collision_detection_display():
    cd = CollisionDetectionCounters(ncontacts=12)
    text = str(cd)
    assert text.splitlines() == [
        "Number of contacts: 12",
        "Boundary update time: 0s",
        "Grid insertion time: 0s",
        "Neighborhood search time: 0s",
        "Contact sorting time: 0s",
    ]


def test_solver_and_stages_display():
    assert str(SolverCounters()).splitlines() == [
        "Non-pressure resolution time: 0s",
        "Pressure resolution time: 0s",
    ]
    assert str(StagesCounters()).splitlines() == [
        "Collision detection time: 0s",
        "Solver time: 0s",
    ]


def test_counters_display_order():
    counters = Counters(nsubsteps=3)
    lines = str(counters).splitlines()
    assert lines[0] == "Total timestep time: 0s"
    assert lines[1] == "Num substeps: 3"
    assert lines[2] == "Collision detection time: 0s"
    assert lines[-1] == "Custom timer: 0s"
    assert len(lines) == 2 + 2 + 5 + 2 + 1