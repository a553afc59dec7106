"""Tests for the synthetic slow operation."""

import time
import tracemalloc

from octopets_api.app.services import slow_operation
from octopets_api.app.services.slow_operation import simulate_expensive_operation


def test_waits_at_least_min_duration():
    started = time.perf_counter()
    simulate_expensive_operation(iterations=100, min_duration=0.3)
    assert time.perf_counter() - started >= 0.3


def test_returns_float_result():
    assert isinstance(simulate_expensive_operation(iterations=1000, min_duration=0), float)


def test_pauses_every_n_iterations(monkeypatch):
    pauses = []
    monkeypatch.setattr(slow_operation.time, "sleep", lambda seconds: pauses.append(seconds))
    simulate_expensive_operation(iterations=250, pause_every=100, pause_seconds=0.01, min_duration=0)
    # Steps 0, 100 and 200.
    assert pauses == [0.01, 0.01, 0.01]


def test_zero_pause_interval_disables_pauses(monkeypatch):
    pauses = []
    monkeypatch.setattr(slow_operation.time, "sleep", lambda seconds: pauses.append(seconds))
    simulate_expensive_operation(iterations=50, pause_every=0, min_duration=0)
    assert pauses == []


def test_memory_stays_flat_as_iterations_grow():
    def peak(iterations):
        tracemalloc.start()
        try:
            simulate_expensive_operation(iterations=iterations, pause_every=0, min_duration=0)
            return tracemalloc.get_traced_memory()[1]
        finally:
            tracemalloc.stop()

    small = peak(1_000)
    large = peak(100_000)
    assert large < small + 64 * 1024
