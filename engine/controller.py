"""
controller.py — Step-Driven Sorting Engine
===========================================
The Controller is the ONLY object the presentation layer talks to.  It
owns the Dataset, the active algorithm machine and the run statistics,
and exposes an abstract command API plus read-only accessors.

State machine:
    IDLE       →  select_algorithm()  →  READY
    READY      →  start_or_toggle()   →  RUNNING
    COMPLETED  →  start_or_toggle()   →  RUNNING      (fresh run)
    RUNNING   ⇄   start_or_toggle()   ⇄  PAUSED
    RUNNING    →  (machine says DONE) →  COMPLETED
    any        →  select_algorithm()  →  READY        (progress discarded)
    any        →  reset_data()        →  READY / IDLE (selection kept)

Nothing happens unless the caller drives it: step() advances exactly one
primitive operation; tick(elapsed_ms) does the same once enough time has
accumulated.  Not thread-safe; drive it from one thread.
"""

import logging
import time
from enum import Enum
from typing import Callable, List, Optional

from algorithms import AlgoInfo, SortMachine, StepResult, get_algorithm
from config import VisualizerConfig
from dataset import Dataset, Marker
from engine.frame import Frame, RunStats

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunState(Enum):
    IDLE      = "idle"
    READY     = "ready"
    RUNNING   = "running"
    PAUSED    = "paused"
    COMPLETED = "completed"

    @property
    def label(self) -> str:
        if self is RunState.IDLE:
            return "Ready"
        return self.value.capitalize()


# ---------------------------------------------------------------------------
# Commands: what the input layer sends (keys 1-4, space, R, +/-)
# ---------------------------------------------------------------------------
class Command(Enum):
    SELECT_BUBBLE    = "select_bubble"
    SELECT_QUICK     = "select_quick"
    SELECT_MERGE     = "select_merge"
    SELECT_SELECTION = "select_selection"
    TOGGLE_RUN       = "toggle_run"
    RESET            = "reset"
    SPEED_UP         = "speed_up"
    SPEED_DOWN       = "speed_down"


_SELECT_KEYS = {
    Command.SELECT_BUBBLE:    "bubble",
    Command.SELECT_QUICK:     "quick",
    Command.SELECT_MERGE:     "merge",
    Command.SELECT_SELECTION: "selection",
}

NO_ALGORITHM = "No Algorithm Selected"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class Controller:
    """
    Attributes:
        config      : VisualizerConfig (dataset size, value range, speed bounds).
        data        : The Dataset currently on screen.
        state       : Current RunState.
        speed_ms    : Tick interval in milliseconds.
        step_number : Steps taken in the current run.
    """

    def __init__(
        self,
        config: Optional[VisualizerConfig] = None,
        clock: Callable[[], float] = time.monotonic,
        data: Optional[Dataset] = None,
    ):
        self.config      = config or VisualizerConfig()
        self._clock      = clock
        self._seed       = self.config.seed
        self.data        = data if data is not None else self._generate()
        self.state       = RunState.IDLE
        self.speed_ms    = self.config.speed_ms
        self.step_number = 0

        self._algo:        Optional[AlgoInfo]    = None
        self._machine:     Optional[SortMachine] = None
        self._start_time:  float                 = 0.0
        self._elapsed_ms:  float                 = 0.0
        self._accum_ms:    float                 = 0.0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def select_algorithm(self, key: str) -> None:
        """Make `key` the active algorithm.  Cancels any run; data is kept."""
        info = get_algorithm(key)
        if info is None:
            raise ValueError(f"Unknown algorithm: {key}")
        self._algo    = info
        self._machine = None
        self.state    = RunState.READY
        logger.debug("selected %s", info.label)

    def start_or_toggle(self) -> None:
        if self._algo is None:
            return

        if self.state in (RunState.READY, RunState.COMPLETED):
            self.data.reset_counters()
            self.data.reset_markers()
            self._machine    = self._algo.machine(self.data)
            self._start_time = self._clock()
            self._elapsed_ms = 0.0
            self._accum_ms   = 0.0
            self.step_number = 0
            self.state       = RunState.RUNNING
            logger.info("started %s on %d values", self._algo.label, len(self.data))
        elif self.state == RunState.RUNNING:
            self.state = RunState.PAUSED
            logger.debug("paused at step %d", self.step_number)
        elif self.state == RunState.PAUSED:
            self.state = RunState.RUNNING
            logger.debug("resumed at step %d", self.step_number)

    def reset_data(self) -> None:
        """New random values, run stopped, stats zeroed.  Selection survives."""
        self.data        = self._generate()
        self._machine    = None
        self._elapsed_ms = 0.0
        self._accum_ms   = 0.0
        self.step_number = 0
        self.state       = RunState.READY if self._algo else RunState.IDLE
        logger.debug("dataset regenerated (%d values)", len(self.data))

    def set_speed(self, delta_ms: int) -> None:
        """Shift the tick interval by delta_ms, clamped to the configured range."""
        self.speed_ms = self.config.clamp_speed(self.speed_ms + delta_ms)

    # ------------------------------------------------------------------
    # Driving
    # ------------------------------------------------------------------
    def step(self) -> bool:
        """Advance one primitive operation.  Returns True if a step ran."""
        if self.state != RunState.RUNNING:
            return False
        assert self._machine is not None

        result = self._machine.step()
        self.step_number += 1
        if result is StepResult.DONE:
            self.data.mark_all_sorted()
            self.state = RunState.COMPLETED
            logger.info(
                "%s completed: %d comparisons, %d swaps, %d writes",
                self._algo.label, self.data.comparisons, self.data.swaps, self.data.writes,
            )
        self._elapsed_ms = (self._clock() - self._start_time) * 1000
        return True

    def tick(self, elapsed_ms: float) -> bool:
        """
        Call once per frame with the time since the previous call.  Once the
        accumulated running time reaches the speed interval the accumulator
        restarts and one step is taken.  Time reported while the run is not
        RUNNING is dropped.  Returns True if a step ran.
        """
        if self.state is not RunState.RUNNING:
            return False
        self._accum_ms += elapsed_ms
        if self._accum_ms < self.speed_ms:
            return False
        self._accum_ms = 0.0
        return self.step()

    def handle_command(self, cmd: Command) -> None:
        if cmd in _SELECT_KEYS:
            self.select_algorithm(_SELECT_KEYS[cmd])
        elif cmd is Command.TOGGLE_RUN:
            self.start_or_toggle()
        elif cmd is Command.RESET:
            self.reset_data()
        elif cmd is Command.SPEED_UP:
            self.set_speed(-self.config.speed_step_ms)
        elif cmd is Command.SPEED_DOWN:
            self.set_speed(self.config.speed_step_ms)
        else:
            raise ValueError(f"Unknown command: {cmd!r}")

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def values(self) -> List[int]:
        return list(self.data.values)

    @property
    def markers(self) -> List[Marker]:
        return self.data.markers

    @property
    def stats(self) -> RunStats:
        return RunStats(
            comparisons=self.data.comparisons,
            swaps=self.data.swaps,
            writes=self.data.writes,
            elapsed_ms=self._elapsed_ms,
            speed_ms=self.speed_ms,
        )

    @property
    def algorithm(self) -> Optional[AlgoInfo]:
        return self._algo

    @property
    def algorithm_name(self) -> str:
        return self._algo.label if self._algo else NO_ALGORITHM

    @property
    def state_label(self) -> str:
        return self.state.label

    @property
    def machine(self) -> Optional[SortMachine]:
        return self._machine

    @property
    def is_running(self) -> bool:
        return self.state == RunState.RUNNING

    def frame(self) -> Frame:
        m = self._machine
        return Frame(
            values=self.values,
            markers=[mk.value for mk in self.markers],
            stats=self.stats,
            algorithm_key=self._algo.key if self._algo else "",
            algorithm_name=self.algorithm_name,
            state=self.state.value,
            state_label=self.state_label,
            step_number=self.step_number,
            pseudocode_line=m.pseudocode_line if m else -1,
            explanation=m.explanation if m else "",
            cursors=m.cursors() if m else {},
        )

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _generate(self) -> Dataset:
        cfg = self.config
        data = Dataset.generate_random(cfg.size, cfg.value_low, cfg.value_high, seed=self._seed)
        # seeded resets walk seed, seed+1, seed+2, …
        if self._seed is not None:
            self._seed += 1
        return data
