"""Tests for the simulation engine: frame pipeline, lifecycle and collaborator calls."""

import math

import pytest

from aquarium.config.simulation_config import SimulationConfig
from aquarium.entities.fish import FishState
from aquarium.events.domain_events import (
    CountersChangedEvent,
    DayNightToggledEvent,
    FishAddedEvent,
    FoodDroppedEvent,
    TankResetEvent,
)
from aquarium.exceptions import SimulationError
from aquarium.rendering.canvas import RecordingCanvas
from aquarium.simulation.engine import SimulationEngine
from aquarium.simulation.scenery import DAY_PALETTE, NIGHT_PALETTE
from aquarium.simulation.update_phases import UpdatePhase


def place_fish(engine, species, x, y, angle):
    fish = engine.spawn_fish(species, silent=True)
    fish.pos.update(x, y)
    fish.angle = angle
    return fish


def capture_events(engine, *event_types):
    seen = []
    for event_type in event_types:
        engine.event_bus.subscribe(event_type, seen.append)
    return seen


class TestSetup:
    def test_setup_places_plants_and_startup_fish(self, simulation_engine):
        assert len(simulation_engine.plants) == 10
        assert [f.species.name for f in simulation_engine.fish] == ["Goldfish", "Neon Tetra"]
        assert simulation_engine.food_count == 0

    def test_startup_spawns_are_silent(self):
        engine = SimulationEngine(seed=1)
        splashes = capture_events(engine, FishAddedEvent)
        engine.setup()
        assert engine.fish_count == 2
        assert splashes == []

    def test_same_seed_same_tank(self):
        a = SimulationEngine(seed=3)
        b = SimulationEngine(seed=3)
        a.setup()
        b.setup()
        a.run_headless(300, stats_interval=0)
        b.run_headless(300, stats_interval=0)
        assert [f.pos for f in a.fish] == [f.pos for f in b.fish]
        assert len(a.bubbles) == len(b.bubbles)


class TestPipeline:
    def test_phases_run_in_fixed_order(self, simulation_engine):
        ctx = simulation_engine.tick()
        assert ctx.phases_run == list(UpdatePhase)
        assert ctx.frame == 1
        assert ctx.time == pytest.approx(0.02)

    def test_draw_order_back_to_front(self, simulation_engine):
        simulation_engine.drop_food(300, 100)
        canvas = RecordingCanvas()

        simulation_engine.tick(canvas)

        kinds = canvas.kinds()
        assert kinds[0] == "fill_vertical_gradient"
        assert kinds[1] == "fill_polygon"  # sand
        assert kinds[2:12] == ["stroke_curve"] * 10  # plants
        assert kinds[12] == "fill_circle"  # the food flake
        # two short-bodied fish: body, tail, one fin, eye, pupil
        assert kinds[13:23] == ["fill_polygon"] * 3 + ["fill_circle"] * 2 + ["fill_polygon"] * 3 + [
            "fill_circle"
        ] * 2
        assert all(kind in ("fill_circle", "stroke_circle") for kind in kinds[23:])

    def test_headless_tick_draws_nothing_but_still_advances(self, empty_engine):
        food = empty_engine.drop_food(400, 100)
        empty_engine.tick()
        assert food.y > 100

    def test_time_accumulates(self, empty_engine):
        for _ in range(50):
            empty_engine.tick()
        assert empty_engine.time == pytest.approx(1.0)

    def test_eaten_food_is_drawn_this_frame_and_culled_next(self, empty_engine):
        place_fish(empty_engine, "Goldfish", 100, 100, 0.0)
        food = empty_engine.drop_food(104, 100)
        food.vel.update(0, 0)
        canvas = RecordingCanvas()

        ctx = empty_engine.tick(canvas)

        assert ctx.food_eaten == 1
        assert food.marked_for_deletion
        assert food in empty_engine.foods
        assert canvas.kinds()[2] == "fill_circle"

        ctx = empty_engine.tick()
        assert ctx.food_culled == 1
        assert empty_engine.food_count == 0
        assert empty_engine.food_eaten_total == 1

    def test_settled_food_is_culled(self, empty_engine):
        food = empty_engine.drop_food(400, 565)
        food.vel.update(0, 10)
        ctx = empty_engine.tick()
        assert ctx.food_settled == 1
        assert empty_engine.food_count == 1
        empty_engine.tick()
        assert empty_engine.food_count == 0
        assert empty_engine.food_settled_total == 1

    def test_fish_sees_food_after_this_frames_food_update(self, empty_engine):
        fish = place_fish(empty_engine, "Goldfish", 400, 300, 0.0)
        food = empty_engine.drop_food(400, 285)
        food.vel.update(0, 10)

        empty_engine.tick()

        # Food moved to (400, 295) before the fish looked: 5 units away, eaten
        assert food.marked_for_deletion
        assert fish.state is FishState.IDLE

    def test_two_fish_do_not_share_a_captured_flake(self, empty_engine):
        first = place_fish(empty_engine, "Goldfish", 100, 100, 0.0)
        second = place_fish(empty_engine, "Goldfish", 110, 100, math.pi)
        food = empty_engine.drop_food(105, 100)
        food.vel.update(0, 0)

        ctx = empty_engine.tick()

        assert ctx.food_eaten == 1
        assert first.state is FishState.IDLE
        assert second.target is None


class TestScenarios:
    def test_fish_reaches_dropped_food(self, empty_engine):
        food = empty_engine.drop_food(400, 300)
        fish = place_fish(empty_engine, "Goldfish", 350, 300, 0.0)

        for _ in range(400):
            empty_engine.tick()
            if food.marked_for_deletion:
                break

        assert food.marked_for_deletion
        assert fish.state is FishState.IDLE
        assert fish.target is None

    def test_fish_captures_stationary_food(self, empty_engine):
        food = empty_engine.drop_food(400, 300)
        food.vel.update(0, 0)
        fish = place_fish(empty_engine, "Goldfish", 350, 300, 0.0)

        for frame in range(1, 40):
            ctx = empty_engine.tick()
            if ctx.food_eaten:
                break

        assert ctx.food_eaten == 1
        assert frame == 15
        assert fish.state is FishState.IDLE

    def test_fish_stays_idle_without_food(self, empty_engine):
        fish = place_fish(empty_engine, "Angelfish", 400, 300, 1.0)
        for _ in range(100):
            empty_engine.tick()
            assert fish.state is FishState.IDLE
            assert fish.target is None

    def test_bubble_spawns_match_rolls(self, empty_engine):
        contexts = [empty_engine.tick() for _ in range(1000)]

        under_threshold = sum(1 for ctx in contexts if ctx.bubble_roll < 0.05)
        spawned = sum(1 for ctx in contexts if ctx.bubble_spawned)

        assert spawned == under_threshold
        assert empty_engine.bubbles_spawned_total == under_threshold
        assert 0 < under_threshold < 1000

    def test_bubbles_rise_out_and_are_culled(self, empty_engine):
        for _ in range(3000):
            empty_engine.tick()
        assert len(empty_engine.bubbles) < empty_engine.bubbles_spawned_total
        assert all(b.y >= -10 - 1.5 for b in empty_engine.bubbles)


class TestExternalActions:
    def test_spawn_fish_emits_splash(self, empty_engine):
        splashes = capture_events(empty_engine, FishAddedEvent)
        fish = empty_engine.spawn_fish("Neon Tetra")
        assert empty_engine.fish_count == 1
        assert splashes == [FishAddedEvent("Neon Tetra", fish.x, fish.y, 0)]
        assert splashes[0].name == "splash"

    def test_drop_food_emits_feed(self, empty_engine):
        feeds = capture_events(empty_engine, FoodDroppedEvent)
        empty_engine.drop_food(10, 20)
        assert empty_engine.food_count == 1
        assert feeds == [FoodDroppedEvent(10, 20, 0)]
        assert feeds[0].name == "feed"

    def test_reset_clears_fish_and_food_only(self, simulation_engine):
        simulation_engine.drop_food(100, 100)
        for _ in range(200):
            simulation_engine.tick()
        simulation_engine.drop_food(200, 100)
        bubbles = simulation_engine.bubbles
        plants = simulation_engine.plants

        simulation_engine.reset()

        assert simulation_engine.fish_count == 0
        assert simulation_engine.food_count == 0
        assert simulation_engine.bubbles == bubbles
        assert simulation_engine.plants == plants

    def test_reset_is_idempotent(self, simulation_engine):
        resets = capture_events(simulation_engine, TankResetEvent)
        simulation_engine.reset()
        once = (simulation_engine.fish, simulation_engine.foods, simulation_engine.plants)
        simulation_engine.reset()
        twice = (simulation_engine.fish, simulation_engine.foods, simulation_engine.plants)
        assert once == twice
        assert resets[-1] == TankResetEvent(0, 0, 0)

    def test_counters_published_after_structural_changes(self, empty_engine):
        counters = capture_events(empty_engine, CountersChangedEvent)
        empty_engine.spawn_fish("Goldfish")
        empty_engine.drop_food(400, 565).vel.update(0, 10)
        empty_engine.tick()  # food settles, still counted until culled
        empty_engine.tick()  # culled
        empty_engine.reset()

        assert counters == [
            CountersChangedEvent(1, 0),
            CountersChangedEvent(1, 1),
            CountersChangedEvent(1, 0),
            CountersChangedEvent(0, 0),
        ]

    def test_day_night_selects_palette(self, simulation_engine):
        toggles = capture_events(simulation_engine, DayNightToggledEvent)
        assert simulation_engine.palette == DAY_PALETTE

        assert simulation_engine.toggle_day_night() is False
        canvas = RecordingCanvas()
        simulation_engine.tick(canvas)

        assert simulation_engine.palette == NIGHT_PALETTE
        assert canvas.calls[0].args[2:] == (NIGHT_PALETTE.top, NIGHT_PALETTE.bottom)
        assert canvas.calls[1].args[1] == NIGHT_PALETTE.sand
        assert toggles == [DayNightToggledEvent(False)]

        simulation_engine.set_day(False)
        assert len(toggles) == 1

    def test_resize_applies_from_next_frame(self, simulation_engine):
        simulation_engine.resize(1024, 768)
        ctx = simulation_engine.tick()
        assert (ctx.width, ctx.height) == (1024, 768)

    def test_resize_rejects_empty_viewport(self, simulation_engine):
        with pytest.raises(SimulationError):
            simulation_engine.resize(0, 600)

    def test_config_overrides_tank(self):
        config = SimulationConfig(start_in_day=False).with_overrides(seed=5)
        engine = SimulationEngine(config)
        assert engine.seed == 5
        assert not engine.is_day


def test_run_headless_summary(simulation_engine):
    stats = simulation_engine.run_headless(120, stats_interval=60)
    assert stats["frame"] == 120
    assert stats["fish_count"] == 2
    assert stats["plant_count"] == 10
    assert stats["species"] == {"Goldfish": 1, "Neon Tetra": 1}
