"""Tests for the CPU tracking heuristic."""

import pytest

from pong.ai.tracking import TrackingOpponent
from pong.controls.input import NO_INPUT
from pong.core.physics import step


@pytest.fixture
def opponent():
    return TrackingOpponent()


def test_tracks_ball_moving_toward_cpu(state, opponent):
    state.ball.y, state.ball.vx = 120.0, 4.0
    assert opponent.target_y(state.cpu, state.ball, state.field) == pytest.approx(70.0)


def test_recenters_when_ball_moves_away(state, opponent):
    state.ball.y, state.ball.vx = 120.0, -4.0
    assert opponent.target_y(state.cpu, state.ball, state.field) == pytest.approx(200.0)


def test_step_is_capped(state, opponent):
    state.cpu.y = 0.0
    state.ball.y, state.ball.vx = 450.0, 1.0

    y = opponent.next_y(state.cpu, state.ball, state.field, elapsed=1.0, scale=10.0)

    assert y == pytest.approx(state.cpu.speed * 10.0)


def test_target_beyond_field_is_clamped(state, opponent):
    state.cpu.y = 395.0
    state.ball.y, state.ball.vx = 499.0, 1.0

    y = opponent.next_y(state.cpu, state.ball, state.field, elapsed=1.0, scale=10.0)

    assert y == pytest.approx(400.0)


def test_converges_without_overshoot(state, rules, rng):
    state.cpu.y = 0.0
    cx, cy = state.field.center
    target = cy - state.cpu.height / 2
    max_step = state.cpu.speed * 1.0 * rules.position_scale

    for _ in range(1000):
        # Pin the ball at center, heading for the CPU
        state.ball.x, state.ball.y = cx, cy
        state.ball.vx, state.ball.vy = 6.0, 0.0
        previous = state.cpu.y

        state = step(state, 1.0, NO_INPUT, rules, rng).state

        moved = state.cpu.y - previous
        assert abs(moved) <= max_step + 1e-9
        assert state.cpu.y <= target + 1e-9

    assert state.cpu.y == pytest.approx(target)
