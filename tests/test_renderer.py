"""Smoke tests for the renderer on an offscreen surface."""

import pygame
import pytest

from config.colors import Colors
from pong.core.state import MatchStats
from pong.visualization import Renderer
from pong.visualization.layers import HudLayer


@pytest.fixture
def surface(settings):
    pygame.init()
    yield pygame.Surface((settings.display.window_width, settings.display.window_height))
    pygame.quit()


@pytest.fixture
def renderer(surface, settings):
    renderer = Renderer(surface, settings)
    renderer.initialize(MatchStats())
    return renderer


def pixel(surface, x, y):
    return tuple(surface.get_at((int(x), int(y))))[:3]


def test_draws_ball_and_paddles(renderer, surface, state):
    renderer.render(state)

    assert pixel(surface, state.ball.x, state.ball.y) == Colors.BALL
    assert pixel(surface, state.player.x + 5, state.player.center_y) == Colors.PADDLE
    assert pixel(surface, state.cpu.x + 5, state.cpu.center_y) == Colors.PADDLE
    assert pixel(surface, 200, 250) == Colors.BACKGROUND


def test_hidden_layer_is_skipped(renderer, surface, state):
    assert renderer.get_layer_visibility() == {"court": True, "entities": True, "hud": True}
    assert renderer.toggle_layer("entities") is False

    renderer.render(state)

    assert pixel(surface, state.player.x + 5, state.player.center_y) == Colors.BACKGROUND


def test_paused_frame_renders(renderer, surface, state):
    state.paused = True
    state.score.award_cpu()
    renderer.render(state)
    assert pixel(surface, state.ball.x, state.ball.y) == Colors.BALL


class SpyFont:
    """Wraps a pygame font and records every rendered string."""

    def __init__(self, font, drawn):
        self.font = font
        self.drawn = drawn

    def render(self, text, antialias, color):
        self.drawn.append(text)
        return self.font.render(text, antialias, color)


@pytest.fixture
def hud(surface, settings):
    layer = HudLayer(settings, MatchStats())
    drawn = []
    layer.font_score = SpyFont(layer.font_score, drawn)
    layer.font_small = SpyFont(layer.font_small, drawn)
    layer.font_banner = SpyFont(layer.font_banner, drawn)
    return layer, drawn


def test_hud_fresh_match_shows_scores_only(hud, surface, state):
    layer, drawn = hud
    layer.render(surface, state)
    assert drawn == ["Player: 0", "CPU: 0"]


def test_hud_shows_match_stats(hud, surface, state):
    layer, drawn = hud
    layer.stats.record_paddle_hit(6.2)
    layer.stats.record_paddle_hit(7.6)
    layer.stats.end_rally()
    layer.stats.record_paddle_hit(6.2)

    layer.render(surface, state)

    assert drawn == [
        "Player: 0",
        "CPU: 0",
        "Rally 1",
        "Hits 3   Best rally 2   Top speed 7.6   Avg rally 2.0",
    ]
