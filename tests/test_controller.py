import pytest

from config import VisualizerConfig
from dataset import Dataset, Marker
from engine import Command, Controller, NO_ALGORITHM, RunState


def make(values=None, clock=None, **cfg):
    cfg.setdefault("size", 30)
    cfg.setdefault("seed", 42)
    kwargs = {}
    if clock is not None:
        kwargs["clock"] = clock
    if values is not None:
        kwargs["data"] = Dataset(values)
    return Controller(VisualizerConfig(**cfg), **kwargs)


def run_to_end(ctrl, limit=100_000):
    for _ in range(limit):
        if not ctrl.step():
            break
    assert ctrl.state is RunState.COMPLETED


def test_starts_idle():
    ctrl = make()
    assert ctrl.state is RunState.IDLE
    assert ctrl.state_label == "Ready"
    assert ctrl.algorithm_name == NO_ALGORITHM
    assert len(ctrl.values) == 30


def test_toggle_without_algorithm_is_noop():
    ctrl = make()
    ctrl.start_or_toggle()
    assert ctrl.state is RunState.IDLE
    assert ctrl.step() is False


def test_select_unknown_algorithm():
    with pytest.raises(ValueError):
        make().select_algorithm("bogo")


def test_lifecycle():
    ctrl = make(values=[5, 3, 1])
    ctrl.select_algorithm("bubble")
    assert ctrl.state is RunState.READY
    assert ctrl.algorithm_name == "Bubble Sort"

    ctrl.start_or_toggle()
    assert ctrl.state is RunState.RUNNING
    assert ctrl.state_label == "Running"
    assert ctrl.step()
    assert ctrl.values == [3, 5, 1]

    ctrl.start_or_toggle()
    assert ctrl.state is RunState.PAUSED
    assert ctrl.state_label == "Paused"
    assert ctrl.step() is False
    assert ctrl.values == [3, 5, 1]

    ctrl.start_or_toggle()
    assert ctrl.state is RunState.RUNNING
    run_to_end(ctrl)
    assert ctrl.values == [1, 3, 5]
    assert ctrl.state_label == "Completed"
    assert ctrl.markers == [Marker.SORTED] * 3


@pytest.mark.parametrize("key", ["bubble", "quick", "merge", "selection"])
def test_every_algorithm_completes(key):
    ctrl = make(size=60)
    before = sorted(ctrl.values)
    ctrl.select_algorithm(key)
    ctrl.start_or_toggle()
    run_to_end(ctrl)
    assert ctrl.values == before


def test_restart_after_completion_zeroes_stats():
    ctrl = make(values=[2, 1])
    ctrl.select_algorithm("selection")
    ctrl.start_or_toggle()
    run_to_end(ctrl)
    assert ctrl.stats.comparisons == 1

    ctrl.start_or_toggle()
    assert ctrl.state is RunState.RUNNING
    assert ctrl.stats.comparisons == 0
    assert ctrl.stats.swaps == 0
    assert ctrl.markers == [Marker.DEFAULT, Marker.DEFAULT]


def test_select_mid_run_discards_progress_but_keeps_data():
    ctrl = make()
    ctrl.select_algorithm("quick")
    ctrl.start_or_toggle()
    for _ in range(25):
        ctrl.step()
    snapshot = ctrl.values

    ctrl.select_algorithm("merge")
    assert ctrl.state is RunState.READY
    assert ctrl.machine is None
    assert ctrl.values == snapshot


@pytest.mark.parametrize("pause_first", [False, True])
def test_reset_mid_run(pause_first):
    ctrl = make()
    ctrl.select_algorithm("bubble")
    ctrl.start_or_toggle()
    for _ in range(10):
        ctrl.step()
    if pause_first:
        ctrl.start_or_toggle()
    old = ctrl.values

    ctrl.reset_data()
    stats = ctrl.stats
    assert (stats.comparisons, stats.swaps, stats.writes, stats.elapsed_ms) == (0, 0, 0, 0.0)
    assert ctrl.state is RunState.READY
    assert not ctrl.is_running
    assert ctrl.algorithm_name == "Bubble Sort"
    assert ctrl.values != old


def test_reset_without_algorithm_stays_idle():
    ctrl = make()
    ctrl.reset_data()
    assert ctrl.state is RunState.IDLE


def test_seeded_controllers_agree():
    assert make(seed=9).values == make(seed=9).values


def test_pause_resume_is_step_neutral():
    values = Dataset.generate_random(size=40, seed=2).values
    a, b = make(values=values), make(values=values)
    for ctrl in (a, b):
        ctrl.select_algorithm("quick")
        ctrl.start_or_toggle()

    for _ in range(60):
        a.step()

    for _ in range(25):
        b.step()
    b.start_or_toggle()
    for _ in range(10):
        assert b.step() is False
        assert b.tick(1000) is False
    b.start_or_toggle()
    for _ in range(35):
        b.step()

    assert a.values == b.values
    assert a.markers == b.markers
    assert a.stats.comparisons == b.stats.comparisons
    assert a.stats.swaps == b.stats.swaps
    assert a.step_number == b.step_number == 60


def test_speed_is_clamped():
    ctrl = make()
    assert ctrl.speed_ms == 50
    ctrl.set_speed(-100)
    assert ctrl.speed_ms == 10
    ctrl.set_speed(10_000)
    assert ctrl.speed_ms == 500


def test_speed_commands():
    ctrl = make()
    ctrl.handle_command(Command.SPEED_UP)
    assert ctrl.speed_ms == 40
    ctrl.handle_command(Command.SPEED_DOWN)
    ctrl.handle_command(Command.SPEED_DOWN)
    assert ctrl.speed_ms == 60
    assert ctrl.stats.speed_ms == 60


def test_select_commands():
    ctrl = make()
    for cmd, label in [
        (Command.SELECT_BUBBLE, "Bubble Sort"),
        (Command.SELECT_QUICK, "Quick Sort"),
        (Command.SELECT_MERGE, "Merge Sort"),
        (Command.SELECT_SELECTION, "Selection Sort"),
    ]:
        ctrl.handle_command(cmd)
        assert ctrl.algorithm_name == label


def test_toggle_and_reset_commands():
    ctrl = make()
    ctrl.handle_command(Command.SELECT_MERGE)
    ctrl.handle_command(Command.TOGGLE_RUN)
    assert ctrl.is_running
    ctrl.handle_command(Command.RESET)
    assert ctrl.state is RunState.READY


def test_command_from_string():
    assert Command("toggle_run") is Command.TOGGLE_RUN
    with pytest.raises(ValueError):
        Command("launch")


def test_tick_waits_for_interval():
    ctrl = make(values=[3, 2, 1])
    ctrl.select_algorithm("bubble")
    ctrl.start_or_toggle()
    assert ctrl.tick(20) is False
    assert ctrl.tick(20) is False
    assert ctrl.tick(10) is True
    assert ctrl.stats.comparisons == 1
    assert ctrl.tick(49) is False
    assert ctrl.tick(1) is True
    assert ctrl.stats.comparisons == 2


def test_tick_not_running_never_steps():
    ctrl = make()
    ctrl.select_algorithm("bubble")
    assert ctrl.tick(1000) is False
    assert ctrl.stats.comparisons == 0


def test_paused_time_does_not_count_toward_interval():
    ctrl = make(values=[3, 2, 1])
    ctrl.select_algorithm("bubble")
    ctrl.start_or_toggle()
    ctrl.start_or_toggle()                      # pause
    assert ctrl.tick(45) is False
    ctrl.start_or_toggle()                      # resume
    assert ctrl.tick(5) is False
    assert ctrl.step_number == 0
    assert ctrl.tick(45) is True
    assert ctrl.step_number == 1


def test_ticks_before_start_are_dropped():
    ctrl = make(values=[3, 2, 1])
    ctrl.select_algorithm("bubble")
    assert ctrl.tick(49) is False
    ctrl.start_or_toggle()
    assert ctrl.tick(1) is False
    assert ctrl.tick(49) is True


def test_elapsed_time_refreshes_after_step(clock):
    ctrl = make(values=[2, 1, 3], clock=clock)
    ctrl.select_algorithm("bubble")
    ctrl.start_or_toggle()
    clock.t += 0.25
    ctrl.step()
    assert ctrl.stats.elapsed_ms == pytest.approx(250.0)
    clock.t += 1.0
    assert ctrl.stats.elapsed_ms == pytest.approx(250.0)


def test_frame_snapshot():
    ctrl = make(values=[3, 1, 2])
    frame = ctrl.frame()
    assert frame.algorithm_name == NO_ALGORITHM
    assert frame.pseudocode_line == -1

    ctrl.select_algorithm("quick")
    ctrl.start_or_toggle()
    ctrl.step()
    ctrl.step()
    frame = ctrl.frame()
    assert frame.values == [3, 1, 2]
    assert frame.markers == ["comparing", "default", "comparing"]
    assert frame.state == "running"
    assert frame.step_number == 2
    assert frame.cursors["partitioning"] is True
    assert "pivot" in frame.explanation

    d = frame.to_dict()
    assert d["stats"]["comparisons"] == 1
    assert d["algorithm_key"] == "quick"

    # frames are snapshots
    ctrl.step()
    assert frame.values == [3, 1, 2]
