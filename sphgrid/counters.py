"""Performance counters for timing the stages of a simulation step."""

from __future__ import annotations

from dataclasses import dataclass, field
from time import perf_counter
from typing import Callable, Optional


def _format_seconds(value: float) -> str:
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


@dataclass
class Timer:
    """An accumulating timer that only measures while enabled."""

    clock: Callable[[], float] = field(default=perf_counter, repr=False, compare=False)
    _enabled: bool = field(default=False, init=False)
    _elapsed: float = field(default=0.0, init=False)
    _started_at: Optional[float] = field(default=None, init=False)

    @property
    def enabled(self) -> bool:
        """Whether this timer records time."""
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def reset(self) -> None:
        """Reset the measured time to zero."""
        self._elapsed = 0.0

    def start(self) -> None:
        """Clear the measured time and begin measuring."""
        if self._enabled:
            self._elapsed = 0.0
            self._started_at = self.clock()

    def pause(self) -> None:
        """Stop measuring and add the running interval to the total."""
        if self._enabled:
            if self._started_at is not None:
                self._elapsed += self.clock() - self._started_at
            self._started_at = None

    def resume(self) -> None:
        """Begin measuring again without clearing the total."""
        if self._enabled:
            self._started_at = self.clock()

    def time(self) -> float:
        """The time accumulated between start/resume and pause calls."""
        return self._elapsed

    def __str__(self) -> str:
        return f"{_format_seconds(self._elapsed)}s"


@dataclass
class CollisionDetectionCounters:
    """Counters for the collision-detection stage."""

    ncontacts: int = 0
    boundary_update_time: Timer = field(default_factory=Timer)
    grid_insertion_time: Timer = field(default_factory=Timer)
    neighborhood_search_time: Timer = field(default_factory=Timer)
    contact_sorting_time: Timer = field(default_factory=Timer)

    def _timers(self) -> tuple[Timer, ...]:
        return (
            self.boundary_update_time,
            self.grid_insertion_time,
            self.neighborhood_search_time,
            self.contact_sorting_time,
        )

    def enable(self) -> None:
        for timer in self._timers():
            timer.enable()

    def disable(self) -> None:
        for timer in self._timers():
            timer.disable()

    def reset(self) -> None:
        self.ncontacts = 0
        for timer in self._timers():
            timer.reset()

    def __str__(self) -> str:
        return (
            f"Number of contacts: {self.ncontacts}\n"
            f"Boundary update time: {self.boundary_update_time}\n"
            f"Grid insertion time: {self.grid_insertion_time}\n"
            f"Neighborhood search time: {self.neighborhood_search_time}\n"
            f"Contact sorting time: {self.contact_sorting_time}\n"
        )


@dataclass
class SolverCounters:
    """Counters for force computation and pressure resolution."""

    non_pressure_resolution_time: Timer = field(default_factory=Timer)
    pressure_resolution_time: Timer = field(default_factory=Timer)

    def _timers(self) -> tuple[Timer, ...]:
        return (self.non_pressure_resolution_time, self.pressure_resolution_time)

    def enable(self) -> None:
        for timer in self._timers():
            timer.enable()

    def disable(self) -> None:
        for timer in self._timers():
            timer.disable()

    def reset(self) -> None:
        for timer in self._timers():
            timer.reset()

    def __str__(self) -> str:
        return (
            f"Non-pressure resolution time: {self.non_pressure_resolution_time}\n"
            f"Pressure resolution time: {self.pressure_resolution_time}\n"
        )


@dataclass
class StagesCounters:
    """Counters for each stage of a time step."""

    collision_detection_time: Timer = field(default_factory=Timer)
    solver_time: Timer = field(default_factory=Timer)

    def _timers(self) -> tuple[Timer, ...]:
        return (self.collision_detection_time, self.solver_time)

    def enable(self) -> None:
        for timer in self._timers():
            timer.enable()

    def disable(self) -> None:
        for timer in self._timers():
            timer.disable()

    def reset(self) -> None:
        for timer in self._timers():
            timer.reset()

    def __str__(self) -> str:
        return (
            f"Collision detection time: {self.collision_detection_time}\n"
            f"Solver time: {self.solver_time}\n"
        )


@dataclass
class Counters:
    """All performance counters of the simulation engine."""

    nsubsteps: int = 0
    step_time: Timer = field(default_factory=Timer)
    custom: Timer = field(default_factory=Timer)
    stages: StagesCounters = field(default_factory=StagesCounters)
    cd: CollisionDetectionCounters = field(default_factory=CollisionDetectionCounters)
    solver: SolverCounters = field(default_factory=SolverCounters)

    def _parts(self) -> tuple:
        return (self.step_time, self.custom, self.stages, self.cd, self.solver)

    def reset(self) -> None:
        self.nsubsteps = 0
        for part in self._parts():
            part.reset()

    def enable(self) -> None:
        for part in self._parts():
            part.enable()

    def disable(self) -> None:
        for part in self._parts():
            part.disable()

    def __str__(self) -> str:
        return (
            f"Total timestep time: {self.step_time}\n"
            f"Num substeps: {self.nsubsteps}\n"
            f"{self.stages}"
            f"{self.cd}"
            f"{self.solver}"
            f"Custom timer: {self.custom}\n"
        )