import io
import math

import pytest

from bouncefmu.analytic import (
    CSV_HEADER,
    Sample,
    main,
    next_root,
    parabolic,
    simulate,
    write_csv,
)

G = 9.81


def test_next_root_first_impact_from_rest():
    t = next_root(1.0, 0.0, -G, 0.0, 0.0)
    assert t == pytest.approx(math.sqrt(2.0 / G))


def test_next_root_is_offset_by_start_time():
    assert next_root(1.0, 0.0, -G, 2.0, 2.0) == pytest.approx(2.0 + math.sqrt(2.0 / G))


def test_next_root_none_when_no_real_root():
    assert next_root(1.0, 0.0, G, 0.0, 0.0) is None


def test_next_root_none_when_roots_already_passed():
    assert next_root(1.0, 0.0, -G, 0.0, 1.0) is None


def test_next_root_zero_acceleration_rejected():
    with pytest.raises(ValueError):
        next_root(1.0, 1.0, 0.0, 0.0, 0.0)


def test_parabolic_worked_example():
    x, v = parabolic(0.0, 1.0, 1.0, 0.0, -G)
    assert x == pytest.approx(1.0 - 4.905)
    assert v == pytest.approx(-G)


def test_parabolic_at_start_returns_initial_state():
    assert parabolic(3.0, 3.0, 2.5, -1.5, -G) == (2.5, -1.5)


def test_simulation_starts_with_initial_state():
    first = next(simulate())
    assert first == Sample(0.0, 1.0, 0.0, -9.81)


def test_first_impact_matches_free_fall():
    impacts = [s for s in simulate() if s.event]
    first = impacts[0]
    assert first.time == pytest.approx(math.sqrt(2.0 / G))
    assert first.position == pytest.approx(0.0, abs=1e-12)
    assert first.velocity == pytest.approx(0.7 * math.sqrt(2.0 * G))


def test_impacts_lose_energy_by_restitution():
    impacts = [s for s in simulate() if s.event]
    assert len(impacts) > 3
    for earlier, later in zip(impacts, impacts[1:]):
        assert later.time > earlier.time
        assert later.velocity == pytest.approx(0.7 * earlier.velocity, rel=1e-6)


def test_logged_frames_every_ten_milliseconds():
    frames = [s for s in simulate() if not s.event]
    assert len(frames) == 251
    for index, sample in enumerate(frames):
        assert sample.time == pytest.approx(index * 0.01)
    assert frames[-1].time == pytest.approx(2.5)


def test_ball_never_goes_below_floor():
    for sample in simulate():
        assert sample.position >= -1e-9
        assert sample.acceleration == -9.81


def test_simulate_rejects_bad_frame_size():
    with pytest.raises(ValueError):
        list(simulate(frame_size=0.0))


def test_write_csv_format():
    stream = io.StringIO()
    write_csv([Sample(0.0, 1.0, 0.0, -9.81)], stream)
    assert stream.getvalue() == CSV_HEADER + "\n0, 1, 0, -9.81\n"
    assert CSV_HEADER == (
        "sys.exec.out.time {s},position {m},velocity {m/s},acceleration {m/s2}"
    )


def test_main_writes_log_and_reports_impacts(tmp_path, capsys):
    output = tmp_path / "run" / "log.csv"
    assert main(["--output", str(output)]) == 0
    lines = output.read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[1] == "0, 1, 0, -9.81"
    out = capsys.readouterr().out
    assert "Hit floor at t =     0.451524." in out
    assert out.count("Hit floor") == len(lines) - 1 - 251