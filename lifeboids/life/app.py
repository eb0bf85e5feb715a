"""Game of Life application: registers every colony mode and drives the frames."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from lifeboids.life.glsl import GLSLMode
from lifeboids.life.modes import OpenMpMode, SequentialMode
from lifeboids.life.opencl import OpenCLMode
from lifeboids.life.state import SharedData, StateMachine, StateName

DEFAULT_CLOCK_SAMPLES = 10_000_000

_BENCHMARK_FILES = {
    StateName.OPENMP: "benchmark_openmp_mode.csv",
    StateName.SEQUENTIAL: "benchmark_sequential_mode.csv",
    StateName.OPENCL: "benchmark_opencl_mode.csv",
    StateName.GLSL: "benchmark_glslmode.csv",
}


def measure_clock_overhead(amount: int = DEFAULT_CLOCK_SAMPLES) -> float:
    """Average cost in milliseconds of reading the processor clock once."""
    if amount <= 0:
        raise ValueError("amount must be positive")
    clock = time.process_time
    started = clock()
    for _ in range(amount):
        clock()
    return (clock() - started) * 1000.0 / amount


def build_state_machine(
    shared_data: SharedData | None = None,
    data_dir: str | Path | None = None,
) -> StateMachine:
    """A machine holding all four modes, started in the GLSL mode.

    With a data directory, each mode writes its benchmark CSV there.
    """
    def path(name: StateName) -> Path | None:
        return None if data_dir is None else Path(data_dir) / _BENCHMARK_FILES[name]

    machine = StateMachine(shared_data)
    machine.add_state(OpenMpMode(path(StateName.OPENMP)))
    machine.add_state(SequentialMode(path(StateName.SEQUENTIAL)))
    machine.add_state(OpenCLMode(path(StateName.OPENCL)))
    machine.add_state(GLSLMode(path(StateName.GLSL)))
    machine.change_state(StateName.GLSL.value)
    return machine


def main(argv: list[str] | None = None) -> int:
    """Measure clock overhead, then run the chosen mode for some frames."""
    parser = argparse.ArgumentParser(description="Game of Life modes.")
    parser.add_argument("--frames", type=int, default=1)
    parser.add_argument("--clock-samples", type=int, default=DEFAULT_CLOCK_SAMPLES)
    parser.add_argument("--data-dir", default=None)
    parser.add_argument("--state", choices=[s.value for s in StateName], default=None)
    parser.add_argument("--benchmark", action="store_true")
    args = parser.parse_args(argv)
    if args.frames < 0 or args.clock_samples <= 0:
        parser.error("--frames must not be negative and --clock-samples must be positive")

    overhead = measure_clock_overhead(args.clock_samples)
    print(f"Reading the clock once takes {overhead:f}ms.")

    if args.data_dir is not None:
        Path(args.data_dir).mkdir(parents=True, exist_ok=True)
    machine = build_state_machine(
        SharedData(is_benchmark_mode=args.benchmark), args.data_dir
    )
    if args.state is not None:
        machine.change_state(args.state)

    for _ in range(args.frames):
        machine.update()
    state = machine.current_state
    if state is not None:
        frame = state.draw()
        print(f"state: {state.name()}")
        for line in frame.lines:
            print(line)
    return 0