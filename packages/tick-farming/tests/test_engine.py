"""Tests for the fixed-step Engine."""
import pytest

from tick_farming import Engine


def test_invalid_tps_rejected():
    with pytest.raises(ValueError):
        Engine(tps=0)


def test_systems_run_in_order_each_tick():
    engine = Engine(tps=10, seed=42)
    calls = []
    engine.add_system(lambda w, ctx: calls.append(("a", ctx.tick_number)))
    engine.add_system(lambda w, ctx: calls.append(("b", ctx.tick_number)))
    engine.run(2)
    assert calls == [("a", 1), ("b", 1), ("a", 2), ("b", 2)]
    assert engine.tick_number == 2
    assert engine.tps == 10


def test_context_timing():
    engine = Engine(tps=4, seed=42)
    seen = []
    engine.add_system(lambda w, ctx: seen.append((ctx.dt, ctx.elapsed)))
    engine.run(2)
    assert seen == [(0.25, 0.25), (0.25, 0.5)]


def test_request_stop_ends_run():
    engine = Engine(tps=20, seed=42)

    def stopper(world, ctx):
        if ctx.tick_number == 3:
            ctx.request_stop()

    engine.add_system(stopper)
    engine.run(10)
    assert engine.tick_number == 3


def test_same_seed_same_random_stream():
    a = Engine(seed=99)
    b = Engine(seed=99)
    assert [a.random.random() for _ in range(5)] == [b.random.random() for _ in range(5)]
    assert a.seed == 99


def test_random_seed_when_unspecified():
    assert isinstance(Engine().seed, int)
