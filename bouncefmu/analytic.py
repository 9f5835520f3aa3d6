"""Closed-form reference solution of the one-dimensional bouncing ball."""

from __future__ import annotations

import argparse
import math
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, TextIO

CSV_HEADER = (
    "sys.exec.out.time {s},"
    "position {m},"
    "velocity {m/s},"
    "acceleration {m/s2}"
)


@dataclass(frozen=True)
class Sample:
    """One recorded point of the trajectory; ``event`` marks a floor impact."""

    time: float
    position: float
    velocity: float
    acceleration: float
    event: bool = False


def next_root(
    pos0: float, vel0: float, accel: float, t0: float, t: float
) -> float | None:
    """Return the first time after ``t`` at which the ball reaches height zero.

    The motion starts at time ``t0`` from ``pos0`` with velocity ``vel0``
    under constant acceleration ``accel``.  Returns None when there is no
    such time.
    """
    if accel == 0.0:
        raise ValueError("acceleration must be non-zero")
    a = 0.5 * accel
    b = vel0
    c = pos0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return None
    sqrt_disc = math.sqrt(discriminant)

    root_plus = (-b + sqrt_disc) / (2.0 * a)
    root_minus = (-b - sqrt_disc) / (2.0 * a)

    elapsed = t - t0
    for candidate in sorted((root_plus, root_minus)):
        if candidate > elapsed:
            return candidate + t0
    return None


def parabolic(
    t0: float, integ_time: float, x0: float, v0: float, a: float
) -> tuple[float, float]:
    """Return position and velocity at ``integ_time`` for uniform acceleration."""
    dt = integ_time - t0
    return 0.5 * a * dt * dt + v0 * dt + x0, a * dt + v0


def simulate(
    start_time: float = 0.0,
    stop_time: float = 2.5,
    frame_size: float = 0.001,
    position: float = 1.0,
    velocity: float = 0.0,
    acceleration: float = -9.81,
    restitution: float = 0.7,
    log_every: int = 10,
) -> Iterator[Sample]:
    """Yield the logged trajectory: the initial point, every impact, and every
    ``log_every``-th frame."""
    if frame_size <= 0.0:
        raise ValueError("frame size must be positive")
    if log_every < 1:
        raise ValueError("log_every must be at least 1")

    t0 = start_time
    x0 = x = position
    v0 = v = velocity
    a = acceleration

    next_event_time = next_root(x0, v0, a, t0, t0)
    if next_event_time is None:
        next_event_time = math.inf

    yield Sample(start_time, x0, v0, a)

    log_cycle_count = 0
    frame_count = 0
    sim_time = start_time
    integ_time = sim_time

    while sim_time < stop_time - frame_size / 2.0:
        log_cycle_count += 1
        if log_cycle_count >= log_every:
            log_cycle_count = 0

        frame_count += 1
        next_frame_time = frame_count * frame_size + start_time

        while integ_time < next_frame_time:
            fire_event = next_frame_time >= next_event_time
            integ_time = next_event_time if fire_event else next_frame_time

            x, v = parabolic(t0, integ_time, x0, v0, a)

            if fire_event:
                x0 = x
                v0 = -v * restitution
                v = v0
                t0 = integ_time

                yield Sample(integ_time, x, v, a, event=True)

                integ_time = next_frame_time
                x, v = parabolic(t0, integ_time, x0, v0, a)

                root = next_root(x0, v0, a, t0, integ_time)
                next_event_time = math.inf if root is None else root

        sim_time = next_frame_time

        if log_cycle_count == 0:
            yield Sample(sim_time, x, v, a)


def _fmt(value: float) -> str:
    return format(value, ".15g")


def write_csv(samples: Iterable[Sample], stream: TextIO) -> None:
    """Write the samples as the reference CSV log, header first."""
    stream.write(CSV_HEADER + "\n")
    for sample in samples:
        fields = (sample.time, sample.position, sample.velocity, sample.acceleration)
        stream.write(", ".join(_fmt(field) for field in fields) + "\n")


def main(argv: list[str] | None = None) -> int:
    """Generate the analytic bouncing-ball log and report each impact."""
    parser = argparse.ArgumentParser(
        description="Generate the analytic bouncing ball reference solution."
    )
    parser.add_argument(
        "--output",
        default="RUN_analytic/log_FMI2_Bounce.csv",
        help="path of the CSV log to write",
    )
    parser.add_argument(
        "--stop-time", type=float, default=2.5, help="simulation end time in seconds"
    )
    args = parser.parse_args(argv)

    def reporting(samples: Iterable[Sample]) -> Iterator[Sample]:
        for sample in samples:
            if sample.event:
                print(f"Hit floor at t = {sample.time:12.6f}.")
                sys.stdout.flush()
            yield sample

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as stream:
        write_csv(reporting(simulate(stop_time=args.stop_time)), stream)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())