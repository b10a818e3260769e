import os
import sys
import types

import pytest

# Add the ``src`` directory to the Python path for tests
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, os.path.join(ROOT_DIR, "src"))

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    """Initialise Pygame in headless mode for tests."""
    pygame.init()
    yield
    pygame.quit()


class DummyClock:
    def __init__(self, ms=16):
        self.ms = ms
        self.count = 0
        self.framerates = []

    def tick(self, framerate=0):
        self.count += 1
        self.framerates.append(framerate)
        return self.ms


class DummySprite(pygame.sprite.Sprite):
    """Minimal sprite with a float position and an alpha value."""

    def __init__(self, pos=(0, 0)):
        super().__init__()
        self.image = pygame.Surface((1, 1))
        self.rect = self.image.get_rect(center=pos)
        self.pos = pygame.math.Vector2(pos)
        self.alpha = 255


class RectOnlySprite(pygame.sprite.Sprite):
    def __init__(self, pos=(0, 0)):
        super().__init__()
        self.image = pygame.Surface((2, 2))
        self.rect = self.image.get_rect(center=pos)


def make_target(**fields):
    """Return a plain attribute bag to animate."""
    return types.SimpleNamespace(**fields)
