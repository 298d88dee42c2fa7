import pytest

from ..backend.clock import VirtualClock, WallClock
from ..backend.core import Process, ProcessState


class TestProcess:

    def test_initial_state(self):
        p = Process(pid="A", cpu_time=5, io_time=3)
        assert p.remaining_cpu == 5.0
        assert p.remaining_io == 3.0
        assert p.state is ProcessState.NEW
        assert not p.is_finished()
        assert p.color.startswith("#") and len(p.color) == 7

    def test_color_is_stable_per_pid(self):
        assert Process(pid="A", cpu_time=1).color == Process(pid="A", cpu_time=9).color

    def test_consume_clamps_at_zero(self):
        p = Process(pid="A", cpu_time=5, io_time=3)
        assert p.consume_cpu(2) == 3.0
        assert p.consume_cpu(10) == 0.0
        assert p.cpu_done and not p.io_done
        assert p.consume_io(3) == 0.0
        assert p.is_finished()

    def test_negative_values_rejected(self):
        with pytest.raises(ValueError):
            Process(pid="A", cpu_time=-1)
        p = Process(pid="A", cpu_time=1)
        with pytest.raises(ValueError):
            p.consume_cpu(-1)
        with pytest.raises(ValueError):
            p.consume_io(-1)

    def test_identity_equality(self):
        a = Process(pid="A", cpu_time=1)
        b = Process(pid="A", cpu_time=1)
        assert a != b
        assert a == a


class TestClocks:

    def test_virtual_clock_steps_on_read(self):
        clock = VirtualClock(step=10.0)
        assert [clock.now() for _ in range(3)] == [0.0, 10.0, 20.0]

    def test_virtual_clock_step_sequence_then_default(self):
        clock = VirtualClock(step=1.0, start=5.0, steps=[3.0, 4.0])
        assert [clock.now() for _ in range(4)] == [5.0, 8.0, 12.0, 13.0]

    def test_virtual_clock_rejects_bad_steps(self):
        with pytest.raises(ValueError):
            VirtualClock(step=0)
        clock = VirtualClock()
        with pytest.raises(ValueError):
            clock.advance(-1)

    def test_advance(self):
        clock = VirtualClock(step=1.0)
        clock.advance(50)
        assert clock.now() == 50.0

    def test_wall_clock_reports_milliseconds(self):
        # Anything after 2001-09-09 is past 1e12 ms
        assert WallClock().now() > 1e12
