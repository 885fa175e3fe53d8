"""Tests for fish geometry, the pygame canvas and the HUD text."""

import math

import pygame
import pytest

from aquarium.entities.fish import Fish, get_species
from aquarium.rendering.canvas import Canvas, RecordingCanvas
from aquarium.rendering.pygame_canvas import PygameCanvas
from aquarium.rendering.ui_renderer import UIRenderer


class TestFishGeometry:
    def test_short_fish_primitives(self, goldfish):
        canvas = RecordingCanvas()
        Fish(goldfish, 400, 300).render(canvas)
        assert canvas.kinds() == ["fill_polygon"] * 3 + ["fill_circle"] * 2

    def test_tall_fish_has_two_fins(self):
        canvas = RecordingCanvas()
        Fish(get_species("Angelfish"), 400, 300).render(canvas)
        assert canvas.kinds() == ["fill_polygon"] * 4 + ["fill_circle"] * 2

    def test_colors(self, goldfish):
        canvas = RecordingCanvas()
        Fish(goldfish, 400, 300).render(canvas)
        body, tail, fin = canvas.calls[:3]
        assert body.args[1] == goldfish.color
        assert tail.args[1] == goldfish.fin_color
        assert fin.args[1] == goldfish.fin_color

    def test_eye_leads_when_facing_right(self, goldfish):
        canvas = RecordingCanvas()
        Fish(goldfish, 400, 300, angle=0.0).render(canvas)
        eye = canvas.calls[3]
        assert eye.args[0] == pytest.approx((407.5, 297.0))
        assert eye.args[1] == pytest.approx(3.0)

    def test_left_facing_fish_is_mirrored_not_upside_down(self, goldfish):
        canvas = RecordingCanvas()
        Fish(goldfish, 400, 300, angle=math.pi).render(canvas)
        eye = canvas.calls[3]
        assert eye.args[0] == pytest.approx((392.5, 297.0))

    def test_tail_trails_the_body(self, goldfish):
        fish = Fish(goldfish, 400, 300, angle=0.0)
        tail = fish.tail_outline()
        assert tail[0] == pytest.approx((385.0, 300.0))
        assert all(x == pytest.approx(375.0) for x, _ in tail[1:])

    def test_tall_body_is_taller(self):
        fish = Fish(get_species("Angelfish"), 0, 0)
        heights = [abs(y) for _, y in fish.body_outline()]
        assert max(heights) == pytest.approx(24.0)


def test_recording_canvas_satisfies_protocol():
    assert isinstance(RecordingCanvas(), Canvas)


class TestPygameCanvas:
    def test_vertical_gradient(self):
        surface = pygame.Surface((10, 40))
        PygameCanvas(surface).fill_vertical_gradient(10, 40, (0, 0, 0), (200, 100, 50))
        assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)
        assert tuple(surface.get_at((9, 39)))[:3] == (200, 100, 50)

    def test_translucent_circle_blends(self):
        surface = pygame.Surface((20, 20))
        surface.fill((0, 0, 0))
        PygameCanvas(surface).fill_circle((10, 10), 5, (255, 255, 255, 128))
        red = surface.get_at((10, 10))[0]
        assert 120 <= red <= 136
        assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)

    def test_opaque_polygon(self):
        surface = pygame.Surface((20, 20))
        PygameCanvas(surface).fill_polygon([(0, 0), (19, 0), (19, 19), (0, 19)], (10, 20, 30))
        assert tuple(surface.get_at((10, 10)))[:3] == (10, 20, 30)

    def test_draws_a_whole_frame(self, simulation_engine):
        surface = pygame.Surface((800, 600))
        simulation_engine.drop_food(400, 100)
        canvas = PygameCanvas(surface)
        for _ in range(5):
            simulation_engine.tick(canvas)
        assert tuple(surface.get_at((0, 0)))[:3] == simulation_engine.palette.top


class TestUIRenderer:
    def test_status_lines_follow_counter_events(self, empty_engine):
        hud = UIRenderer(screen=None, font=None)
        hud.attach(empty_engine.event_bus)

        empty_engine.spawn_fish("Goldfish")
        empty_engine.drop_food(10, 10)

        lines = hud.status_lines(is_day=False, muted=True)
        assert lines[0] == "Fish: 1   Food: 1"
        assert lines[1] == "Night   Sound: off"
        assert "3:Angelfish" in lines[2]
