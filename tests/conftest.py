import os

# run pygame without a real display or sound card
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402
import pytest  # noqa: E402

from bird_jump.physics import PhysicsProfile  # noqa: E402


class FixedRandom:
    """Stands in for random.Random and always returns the same draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRandom


@pytest.fixture
def profile():
    # round numbers so positions stay exact
    return PhysicsProfile(name="test", gravity=0.0, jump_impulse=-4.0, scroll_speed=2.5, gap_size=180)


@pytest.fixture
def pygame_init():
    pygame.init()
    yield
    pygame.quit()
