"""Tests for GrowthTimer, GrowthScheduler and make_timer_system."""
import random

from tick_farming import Engine, GrowthScheduler, GrowthTimer, make_timer_system


class TestGrowthScheduler:
    def test_duration_within_bounds(self):
        engine = Engine(seed=42)
        scheduler = GrowthScheduler(engine.world, random.Random(1))
        eid = engine.world.spawn()
        seen = set()
        for _ in range(200):
            duration = scheduler.arm(eid, 3, 6)
            assert 3 <= duration <= 6
            assert scheduler.remaining(eid) == duration
            seen.add(duration)
        assert seen == {3, 4, 5, 6}

    def test_timer_named_after_entity(self):
        engine = Engine(seed=42)
        scheduler = GrowthScheduler(engine.world, random.Random(1), prefix="farm")
        eid = engine.world.spawn()
        scheduler.arm(eid, 2, 2)
        assert engine.world.get(eid, GrowthTimer).name == f"farm:{eid}"

    def test_rearming_replaces_timer(self):
        engine = Engine(seed=42)
        scheduler = GrowthScheduler(engine.world, random.Random(1))
        eid = engine.world.spawn()
        scheduler.arm(eid, 10, 10)
        scheduler.arm(eid, 2, 2)
        assert scheduler.remaining(eid) == 2

    def test_remaining_without_timer(self):
        engine = Engine(seed=42)
        scheduler = GrowthScheduler(engine.world, random.Random(1))
        assert scheduler.remaining(engine.world.spawn()) is None


class TestTimerSystem:
    def test_fires_after_duration_and_detaches(self):
        engine = Engine(tps=20, seed=42)
        fired = []
        engine.add_system(
            make_timer_system(lambda w, ctx, eid, t: fired.append((ctx.tick_number, eid)))
        )
        eid = engine.world.spawn()
        engine.world.attach(eid, GrowthTimer(name="t", remaining=3))
        engine.run(2)
        assert fired == []
        engine.step()
        assert fired == [(3, eid)]
        assert not engine.world.has(eid, GrowthTimer)
        engine.run(5)
        assert len(fired) == 1

    def test_despawned_entity_never_fires(self):
        engine = Engine(tps=20, seed=42)
        fired = []
        engine.add_system(make_timer_system(lambda w, ctx, eid, t: fired.append(eid)))
        eid = engine.world.spawn()
        engine.world.attach(eid, GrowthTimer(name="t", remaining=2))
        engine.step()
        engine.world.despawn(eid)
        engine.run(5)
        assert fired == []

    def test_entity_replaced_by_earlier_callback_is_skipped(self):
        engine = Engine(tps=20, seed=42)
        world = engine.world
        fired = []
        a = world.spawn()
        b = world.spawn()

        def on_fire(w, ctx, eid, timer):
            fired.append(eid)
            w.despawn(b)

        engine.add_system(make_timer_system(on_fire))
        world.attach(a, GrowthTimer(name="a", remaining=1))
        world.attach(b, GrowthTimer(name="b", remaining=1))
        engine.step()
        assert fired == [a]
