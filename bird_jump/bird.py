import math

from . import config
from .physics import DESKTOP_PHYSICS


class Bird:
    """The player's bird: a circle with vertical physics only.
    Horizontal position never changes, the obstacles scroll past it instead.
    """

    def __init__(self, x=config.BIRD_X, y=config.BIRD_START_Y, radius=config.BIRD_RADIUS, profile=DESKTOP_PHYSICS):
        # Position stored as floats for smooth movement
        self.x = float(x)
        self.y = float(y)
        self.velocity = 0.0  # vertical velocity (px/frame), positive is down
        self.radius = radius
        self.gravity = profile.gravity
        self.jump_impulse = profile.jump_impulse

    def apply_profile(self, profile):
        """Retarget gravity and jump impulse without touching position or velocity."""
        self.gravity = profile.gravity
        self.jump_impulse = profile.jump_impulse

    def jump(self):
        """Set (not add) the upward velocity, so a jump always cancels the fall."""
        self.velocity = self.jump_impulse

    def integrate(self, floor):
        """Advance one frame. Returns True when the bird hit the floor.

        The bird is clamped back inside ``[radius, floor - radius]`` either way.
        Touching the ceiling only stops the bird, it is not a crash.
        """
        self.velocity += self.gravity
        self.y += self.velocity

        crashed = False
        if self.y + self.radius >= floor:
            self.y = floor - self.radius
            crashed = True

        if self.y - self.radius <= 0:
            self.y = self.radius
            self.velocity = 0.0

        return crashed

    def reset(self, viewport_height, profile):
        """Put the bird back in the middle of the screen at rest."""
        self.y = viewport_height / 2
        self.velocity = 0.0
        self.apply_profile(profile)

    def sway(self, viewport_height, now_ms):
        # idle hover on the start screen, no physics
        self.y = viewport_height / 2 + math.sin(now_ms / config.SWAY_PERIOD_MS) * config.SWAY_AMPLITUDE

    def get_circle(self):
        """Return current circle (x, y, r) for collision checks and drawing."""
        return (self.x, self.y, self.radius)
