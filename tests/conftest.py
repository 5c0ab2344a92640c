"""Shared fixtures."""

import os
import random

# Headless pygame for renderer/audio tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from config.settings import Settings
from pong.core.event_bus import EventBus
from pong.core.physics import Rules
from pong.core.state import GameState


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def rules(settings) -> Rules:
    return Rules.from_settings(settings)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def state(settings) -> GameState:
    return GameState.create(settings)


@pytest.fixture
def event_bus() -> EventBus:
    return EventBus()
